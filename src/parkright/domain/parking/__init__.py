# 🅿️ parkright/domain/parking/__init__.py
"""
🅿️ Пакет `domain.parking` — сутності паркінгів і контракти компонентів.

🔹 `entities.py` — `LotRecord`, `LiveStatus`, `TrackedLot` + парсинг недовірених лічильників.
🔹 `interfaces.py` — Protocol-контракти транспорту, резолвера, live-провайдера та кешу.
"""

from .entities import (
    LiveStatus,
    LotRecord,
    TrackedLot,
    build_map_url,
    non_negative_count,
    parse_count,
)
from .interfaces import (
    IDatasetCache,
    IJsonTransport,
    ILiveStatusProvider,
    ILotResolver,
    has_park_collection,
)

__all__ = [
    "IDatasetCache",
    "IJsonTransport",
    "ILiveStatusProvider",
    "ILotResolver",
    "LiveStatus",
    "LotRecord",
    "TrackedLot",
    "build_map_url",
    "has_park_collection",
    "non_negative_count",
    "parse_count",
]
