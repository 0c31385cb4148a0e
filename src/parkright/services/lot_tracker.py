# 👀 parkright/services/lot_tracker.py
"""
👀 LotTracker — список паркінгів, які відстежує користувач.

🔹 `track(query)` — знайти, відхилити дубль за `id`, підтягнути live-статус, додати на початок.
🔹 `track_quick_access()` — закріплені паркінги одним bulk-запитом.
🔹 `refresh_live()` — операція, яку смикає таймер UI: один bulk-запит на всі паркінги.
🔹 Паркінг без запису в live-документі під час bulk-оновлення зберігає попередній статус.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from typing import Dict, List, Tuple

# 🧩 Внутрішні модулі проєкту
from parkright.domain.parking.entities import LiveStatus, TrackedLot, utc_now
from parkright.errors.custom_errors import DuplicateLotError, LiveFetchError
from parkright.services.parking_session import ParkingSession
from parkright.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.tracker")


class LotTracker:
    def __init__(self, session: ParkingSession) -> None:
        self._session = session
        self._lots: List[TrackedLot] = []                            # 🆕 Найновіші спереду

    @property
    def lots(self) -> Tuple[TrackedLot, ...]:
        return tuple(self._lots)

    def __contains__(self, lot_id: object) -> bool:
        return any(lot.lot_id == lot_id for lot in self._lots)

    def __len__(self) -> int:
        return len(self._lots)

    async def track(self, query: str) -> TrackedLot:
        """
        Raises:
            LotNotFoundError / DatasetLoadError: від резолвера.
            DuplicateLotError: паркінг уже у списку.
            LiveFetchError: live-ендпоінт недоступний.
        """
        record = await self._session.search(query)
        if record.id in self:
            raise DuplicateLotError(record.id)

        status = await self._session.get_live(record.id)
        tracked = TrackedLot(record=record, status=status, last_updated=utc_now())
        self._lots.insert(0, tracked)
        logger.info("➕ Відстежуємо %s (%s): %d/%d", record.id, record.name, status.available, record.capacity)
        return tracked

    async def track_quick_access(self) -> List[TrackedLot]:
        """Додає закріплені паркінги, яких ще немає у списку; live-збій → деградовані статуси."""
        pending = [record for record in self._session.resolver.quick_access if record.id not in self]
        if not pending:
            return []

        statuses: Dict[str, LiveStatus]
        try:
            statuses = await self._session.get_all_live()
        except LiveFetchError as exc:
            logger.warning("⚠️ Live-оновлення закріплених паркінгів не вдалося: %s", exc)
            statuses = {}

        now = utc_now()
        added = [
            TrackedLot(record=record, status=statuses.get(record.id) or LiveStatus.unavailable(record.id), last_updated=now)
            for record in pending
        ]
        self._lots.extend(added)
        return added

    async def refresh_live(self) -> int:
        """Оновлює всі відстежувані паркінги одним запитом; повертає кількість оновлених."""
        if not self._lots:
            return 0
        statuses = await self._session.get_all_live()
        now = utc_now()
        updated = 0
        for index, lot in enumerate(self._lots):
            status = statuses.get(lot.lot_id)
            if status is None:
                continue
            self._lots[index] = lot.with_status(status, now)
            updated += 1
        logger.debug("🔄 refresh_live: %d/%d оновлено", updated, len(self._lots))
        return updated

    async def refresh_one(self, lot_id: str) -> TrackedLot:
        """Raises KeyError, якщо паркінг не відстежується."""
        if lot_id not in self:
            raise KeyError(lot_id)
        status = await self._session.get_live(lot_id)
        for index, lot in enumerate(self._lots):                     # 🔁 Список міг змінитися під час await
            if lot.lot_id == lot_id:
                self._lots[index] = lot.with_status(status)
                return self._lots[index]
        raise KeyError(lot_id)

    def remove(self, lot_id: str) -> bool:
        before = len(self._lots)
        self._lots = [lot for lot in self._lots if lot.lot_id != lot_id]
        return len(self._lots) != before


__all__ = ["LotTracker"]
