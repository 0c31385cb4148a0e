# 🗃️ parkright/infrastructure/dataset/dataset_cache.py
"""
🗃️ DatasetCache — повний датасет паркінгів у памʼяті з single-flight завантаженням.

🔁 Життєвий цикл:
    UNINITIALIZED → LOADING → READY (термінальний для сесії)
                        ↘ збій → UNINITIALIZED (наступний виклик може повторити)

🎯 Гарантії:
    • у польоті не більше одного мережевого завантаження;
    • усі, хто прийшов під час LOADING, чекають той самий результат (успіх або ту саму помилку);
    • скасування одного з очікувачів не скасовує спільне завантаження (`asyncio.shield`).
"""

from __future__ import annotations

# 🔠 Системні імпорти
import asyncio
import logging
from enum import Enum, unique
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

# 🧩 Внутрішні модулі проєкту
from parkright.domain.parking.entities import LotRecord
from parkright.domain.parking.interfaces import IJsonTransport, ProgressFn
from parkright.errors.custom_errors import DatasetLoadError, TransportExhaustedError
from parkright.infrastructure.metrics import DATASET_CACHE_HITS, DATASET_LOADS
from parkright.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.dataset")


@unique
class CacheState(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"


class DatasetCache:
    """🗃️ Тримає таблицю `id → LotRecord` і порядок датасету для пошуку першого збігу."""

    def __init__(self, transport: IJsonTransport, dataset_url: str) -> None:
        self._transport = transport
        self._dataset_url = dataset_url
        self._records: Optional[Tuple[LotRecord, ...]] = None
        self._by_id: Dict[str, LotRecord] = {}
        self._inflight: Optional[asyncio.Task[None]] = None

    # ================================
    # 🔓 ПУБЛІЧНИЙ ІНТЕРФЕЙС
    # ================================
    @property
    def state(self) -> CacheState:
        if self._records is not None:
            return CacheState.READY
        if self._inflight is not None:
            return CacheState.LOADING
        return CacheState.UNINITIALIZED

    def is_ready(self) -> bool:
        return self._records is not None

    async def ensure_loaded(self, on_progress: Optional[ProgressFn] = None) -> None:
        """
        Гарантує, що датасет у памʼяті.

        `on_progress` отримує повідомлення лише від виклику, який запустив завантаження.
        Raises:
            DatasetLoadError: завантаження цієї спроби не вдалося (для всіх її очікувачів).
        """
        if self._records is not None:
            DATASET_CACHE_HITS.inc()
            return

        if self._inflight is None:
            logger.info("⬇️ Стартую завантаження датасету: %s", self._dataset_url)
            self._inflight = asyncio.create_task(self._load(on_progress))
            self._inflight.add_done_callback(_retrieve_outcome)
        else:
            logger.debug("⏳ Датасет уже вантажиться — приєднуюся до спільного завантаження")

        await asyncio.shield(self._inflight)

    def records(self) -> Iterator[LotRecord]:
        """Записи в порядку датасету (порожньо, поки не READY)."""
        return iter(self._records or ())

    def get(self, lot_id: str) -> Optional[LotRecord]:
        return self._by_id.get(str(lot_id))

    def __len__(self) -> int:
        return len(self._records or ())

    # ================================
    # 🔒 ВНУТРІШНЯ ЛОГІКА
    # ================================
    async def _load(self, on_progress: Optional[ProgressFn]) -> None:
        try:
            _notify(on_progress, "正在下載完整搜尋引擎...")
            try:
                payload = await self._transport.fetch_json(self._dataset_url)
            except TransportExhaustedError as exc:
                raise DatasetLoadError(f"transport failed: {exc.details}", url=self._dataset_url) from exc
            except Exception as exc:
                raise DatasetLoadError(f"transport failed: {type(exc).__name__}: {exc}", url=self._dataset_url) from exc

            records = self._parse(payload)
            self._records = records
            self._by_id = {}
            for record in records:
                self._by_id.setdefault(record.id, record)
            DATASET_LOADS.labels(outcome="ok").inc()
            logger.info("✅ Датасет готовий: %d паркінгів", len(records))
            _notify(on_progress, "搜尋引擎已就緒")
        except BaseException as exc:
            DATASET_LOADS.labels(outcome="error").inc()
            logger.warning("⚠️ Завантаження датасету не вдалося: %s", exc)
            raise
        finally:
            self._inflight = None                                   # 🔁 Наступний виклик або READY, або нова спроба

    def _parse(self, payload: Any) -> Tuple[LotRecord, ...]:
        data = payload.get("data") if isinstance(payload, Mapping) else None
        park = data.get("park") if isinstance(data, Mapping) else None
        if not isinstance(park, list):
            raise DatasetLoadError("response has no data.park collection", url=self._dataset_url)

        records: List[LotRecord] = []
        skipped = 0
        for entry in park:
            if not isinstance(entry, Mapping):
                skipped += 1
                continue
            records.append(LotRecord.from_raw(entry))
        if skipped:
            logger.debug("🧹 Пропущено %d некоректних записів датасету", skipped)
        return tuple(records)


def _retrieve_outcome(task: "asyncio.Task[None]") -> None:
    # 🔇 Помилку вже віддано очікувачам (або їх немає, якщо всіх скасовано)
    if not task.cancelled():
        task.exception()


def _notify(on_progress: Optional[ProgressFn], message: str) -> None:
    if on_progress is None:
        return
    try:
        on_progress(message)
    except Exception:  # noqa: BLE001
        logger.debug("⚠️ on_progress callback впав", exc_info=True)


__all__ = ["CacheState", "DatasetCache"]
