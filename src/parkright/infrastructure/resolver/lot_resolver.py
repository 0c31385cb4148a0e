# 🔍 parkright/infrastructure/resolver/lot_resolver.py
"""
🔍 LotResolver — пошук паркінгу за вільним текстом.

🔹 Спершу закріплений список (без мережі), потім повний датасет з кешу.
🔹 Збіг = назва або адреса містить запит як підрядок (регістронезалежно, casefold).
🔹 Без нечіткого пошуку й ранжування: перший збіг у порядку джерела виграє.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from typing import Iterable, Optional, Sequence

# 🧩 Внутрішні модулі проєкту
from parkright.domain.parking.entities import LotRecord
from parkright.domain.parking.interfaces import IDatasetCache, ProgressFn
from parkright.errors.custom_errors import LotNotFoundError
from parkright.infrastructure.resolver.quick_access import DEFAULT_QUICK_ACCESS
from parkright.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.resolver")


def normalize_query(query: str) -> str:
    return (query or "").strip().casefold()


def first_match(records: Iterable[LotRecord], normalized_query: str) -> Optional[LotRecord]:
    for record in records:
        if record.matches(normalized_query):
            return record
    return None


class LotResolver:
    """🔍 Резолвер `query → LotRecord` поверх закріпленого списку та кешу датасету."""

    def __init__(
        self,
        cache: IDatasetCache,
        quick_access: Sequence[LotRecord] = DEFAULT_QUICK_ACCESS,
        *,
        on_progress: Optional[ProgressFn] = None,
    ) -> None:
        self._cache = cache
        self._quick_access = tuple(quick_access)
        self._on_progress = on_progress

    @property
    def quick_access(self) -> Sequence[LotRecord]:
        return self._quick_access

    async def search(self, query: str) -> LotRecord:
        """
        Повертає перший відповідний паркінг.

        Raises:
            LotNotFoundError: порожній запит або нічого не знайдено.
            DatasetLoadError: повний датасет не вдалося завантажити.
        """
        normalized = normalize_query(query)
        if not normalized:
            raise LotNotFoundError(query)

        quick = first_match(self._quick_access, normalized)
        if quick is not None:
            logger.info("📌 '%s' знайдено у закріпленому списку: %s", query, quick.id)
            return quick

        await self._cache.ensure_loaded(self._on_progress)

        match = first_match(self._cache.records(), normalized)
        if match is None:
            logger.info("🔍 '%s' не знайдено серед %d паркінгів", query, len(self._cache))
            raise LotNotFoundError(query)

        logger.info("🔍 '%s' → %s (%s)", query, match.id, match.name)
        return match


__all__ = ["LotResolver", "first_match", "normalize_query"]
