# 🧩 parkright/domain/parking/interfaces.py
"""
🧩 Контракти компонентів шару отримання даних (Protocol, без мережі).

🔹 `IJsonTransport` — GET через посередників з фолбеком.
🔹 `ILotResolver` — пошук паркінгу за текстом.
🔹 `ILiveStatusProvider` — наявність для одного або всіх паркінгів.
🔹 `IDatasetCache` — повний датасет у памʼяті з лінивим завантаженням.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Protocol, Sequence, runtime_checkable

from .entities import LiveStatus, LotRecord

JsonDocument = Dict[str, Any]
ShapeValidator = Callable[[Any], bool]
ProgressFn = Callable[[str], None]


def has_park_collection(payload: Any) -> bool:
    """Очікувана форма обох ендпоінтів: `{"data": {"park": [...]}}`."""
    if not isinstance(payload, Mapping):
        return False
    data = payload.get("data")
    return isinstance(data, Mapping) and isinstance(data.get("park"), list)


@runtime_checkable
class IJsonTransport(Protocol):
    async def fetch_json(self, target_url: str) -> JsonDocument: ...


@runtime_checkable
class ILotResolver(Protocol):
    @property
    def quick_access(self) -> Sequence[LotRecord]: ...

    async def search(self, query: str) -> LotRecord: ...


@runtime_checkable
class ILiveStatusProvider(Protocol):
    async def get_live(self, lot_id: str) -> LiveStatus: ...

    async def get_all_live(self) -> Dict[str, LiveStatus]: ...


@runtime_checkable
class IDatasetCache(Protocol):
    async def ensure_loaded(self, on_progress: Optional[ProgressFn] = None) -> None: ...

    def is_ready(self) -> bool: ...

    def records(self) -> Iterator[LotRecord]: ...

    def __len__(self) -> int: ...


__all__ = [
    "IDatasetCache",
    "IJsonTransport",
    "ILiveStatusProvider",
    "ILotResolver",
    "JsonDocument",
    "ProgressFn",
    "ShapeValidator",
    "has_park_collection",
]
