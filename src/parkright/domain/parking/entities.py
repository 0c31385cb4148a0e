# 📦 parkright/domain/parking/entities.py
"""
📦 Доменні сутності паркінгів: статичний опис і поточна наявність місць.

🔹 `LotRecord` — іммʼютабельний опис паркінгу з датасету або закріпленого списку.
🔹 `LiveStatus` — кількість вільних місць; `is_full` завжди похідне від `available`.
🔹 `TrackedLot` — запис, який відстежує UI, разом з останнім статусом.
🔹 Сирі значення з відкритих даних недовірені: числа парсяться як JS `parseInt`, мінус → 0.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
import re
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any, Mapping, Optional
from urllib.parse import quote

# 🧩 Внутрішні модулі проєкту
from parkright.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.parking")


# ================================
# 📏 КОНСТАНТИ
# ================================
MAP_SEARCH_URL = "https://www.google.com/maps/search/?api=1&query="
RATE_FALLBACK = "依現場公告"                                        # 💬 «див. оголошення на місці»
_LEADING_INT = re.compile(r"^[+-]?[0-9]+")


# ================================
# 🔢 ПАРСИНГ НЕДОВІРЕНИХ ЧИСЕЛ
# ================================
def parse_count(raw: Any) -> Optional[int]:
    """
    Парсить лічильник як JS `parseInt`: пробіли обрізаються, береться провідне ціле.

    `"305"` → 305, `" 12 авто"` → 12, `"-3"` → -3, `"N/A"` / None → None.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw == raw and raw not in (float("inf"), float("-inf")) else None
    if not isinstance(raw, str):
        return None
    match = _LEADING_INT.match(raw.strip())
    return int(match.group(0)) if match else None


def non_negative_count(raw: Any) -> int:
    """Лічильник ≥ 0: невдалий парсинг або відʼємне значення → 0."""
    value = parse_count(raw)
    return value if value is not None and value > 0 else 0


def build_map_url(name: str) -> str:
    """🗺️ Детерміноване посилання пошуку на мапі за назвою."""
    return MAP_SEARCH_URL + quote(name or "", safe="")


def _text(raw: Mapping[str, Any], key: str) -> str:
    value = raw.get(key)
    return "" if value is None else str(value).strip()


# ================================
# 🅿️ СТАТИЧНИЙ ОПИС
# ================================
@dataclass(frozen=True, slots=True)
class LotRecord:
    """Опис одного паркінгу; `id` — стабільний зовнішній ідентифікатор."""

    id: str
    name: str
    address: str
    rate_description: str = RATE_FALLBACK
    capacity: int = 0
    map_url: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", str(self.id).strip())
        object.__setattr__(self, "capacity", max(0, int(self.capacity)))
        if not (self.rate_description or "").strip():
            object.__setattr__(self, "rate_description", RATE_FALLBACK)
        if not self.map_url:
            object.__setattr__(self, "map_url", build_map_url(self.name))

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "LotRecord":
        """Будує запис з елемента `data.park[]` (`payex`, `totalcar` — як у джерелі)."""
        return cls(
            id=_text(raw, "id"),
            name=_text(raw, "name"),
            address=_text(raw, "address"),
            rate_description=_text(raw, "payex") or _text(raw, "rate_description"),
            capacity=non_negative_count(raw.get("totalcar", raw.get("capacity"))),
            map_url=_text(raw, "map_url") or _text(raw, "mapUrl"),
        )

    def matches(self, normalized_query: str) -> bool:
        """Чи містить назва або адреса вже нормалізований (casefold) запит."""
        return normalized_query in self.name.casefold() or normalized_query in self.address.casefold()


# ================================
# 📡 ПОТОЧНА НАЯВНІСТЬ
# ================================
@dataclass(frozen=True, slots=True)
class LiveStatus:
    """Вільні місця для одного паркінгу в момент запиту."""

    lot_id: str
    available: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "available", max(0, int(self.available)))

    @property
    def is_full(self) -> bool:
        return self.available == 0

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "LiveStatus":
        """Елемент live-документа: `availablecar` буває відʼємним або зіпсованим."""
        lot_id = _text(raw, "id")
        parsed = parse_count(raw.get("availablecar"))
        if parsed is None or parsed < 0:
            logger.debug("🧮 availablecar=%r для %s → 0", raw.get("availablecar"), lot_id)
        return cls(lot_id=lot_id, available=non_negative_count(raw.get("availablecar")))

    @classmethod
    def unavailable(cls, lot_id: str) -> "LiveStatus":
        """Деградований статус для паркінгу без live-запису."""
        return cls(lot_id=lot_id, available=0)

    def to_dict(self) -> dict:
        return {"lot_id": self.lot_id, "available": self.available, "is_full": self.is_full}


# ================================
# 👀 ВІДСТЕЖУВАНИЙ ПАРКІНГ
# ================================
def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class TrackedLot:
    record: LotRecord
    status: LiveStatus
    last_updated: datetime

    @property
    def lot_id(self) -> str:
        return self.record.id

    def with_status(self, status: LiveStatus, at: Optional[datetime] = None) -> "TrackedLot":
        return replace(self, status=status, last_updated=at or utc_now())


__all__ = [
    "LiveStatus",
    "LotRecord",
    "MAP_SEARCH_URL",
    "RATE_FALLBACK",
    "TrackedLot",
    "build_map_url",
    "non_negative_count",
    "parse_count",
    "utc_now",
]
