# 📡 parkright/infrastructure/live/live_status_fetcher.py
"""
📡 LiveStatusFetcher — поточна наявність місць з одного bulk-документа.

🔹 Live-ендпоінт завжди віддає весь парк, тож `get_live` і `get_all_live` роблять один запит.
🔹 Відсутній запис паркінгу → деградований `LiveStatus.unavailable` (UI не ламається).
🔹 Збій транспорту → `LiveFetchError`: «дані недоступні», а не «паркінгу немає».
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from typing import Any, Dict, Iterator, Mapping, Optional

# 🧩 Внутрішні модулі проєкту
from parkright.domain.parking.entities import LiveStatus
from parkright.domain.parking.interfaces import IJsonTransport, JsonDocument
from parkright.errors.custom_errors import LiveFetchError, TransportExhaustedError
from parkright.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.live")


class LiveStatusFetcher:
    """📡 Отримує й нормалізує live-статуси паркінгів."""

    def __init__(self, transport: IJsonTransport, live_url: str) -> None:
        self._transport = transport
        self._live_url = live_url

    async def get_live(self, lot_id: str) -> LiveStatus:
        """Статус одного паркінгу; відсутній запис → `available=0, is_full=True`."""
        wanted = str(lot_id).strip()
        payload = await self._fetch(lot_id=wanted)
        for entry in _entries(payload):
            if str(entry.get("id", "")).strip() == wanted:
                return LiveStatus.from_raw(entry)

        logger.warning("⚠️ Паркінг %s відсутній у live-документі — деградований статус", wanted)
        return LiveStatus.unavailable(wanted)

    async def get_all_live(self) -> Dict[str, LiveStatus]:
        """Усі статуси `id → LiveStatus` у порядку документа; дубль id — виграє перший."""
        payload = await self._fetch(lot_id=None)
        statuses: Dict[str, LiveStatus] = {}
        for entry in _entries(payload):
            status = LiveStatus.from_raw(entry)
            if status.lot_id and status.lot_id not in statuses:
                statuses[status.lot_id] = status
        logger.debug("📡 get_all_live: %d статусів", len(statuses))
        return statuses

    async def _fetch(self, *, lot_id: Optional[str]) -> JsonDocument:
        scope = f"lot {lot_id}" if lot_id else "all lots"
        try:
            return await self._transport.fetch_json(self._live_url)
        except TransportExhaustedError as exc:
            raise LiveFetchError(f"live fetch for {scope} failed: {exc.details}", lot_id=lot_id) from exc
        except Exception as exc:
            raise LiveFetchError(f"live fetch for {scope} failed: {type(exc).__name__}: {exc}", lot_id=lot_id) from exc


def _entries(payload: Any) -> Iterator[Mapping[str, Any]]:
    data = payload.get("data") if isinstance(payload, Mapping) else None
    park = data.get("park") if isinstance(data, Mapping) else None
    for entry in park or ():
        if isinstance(entry, Mapping):
            yield entry


__all__ = ["LiveStatusFetcher"]
