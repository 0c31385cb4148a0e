# 📌 parkright/infrastructure/resolver/quick_access.py
"""
📌 Закріплені оператором паркінги — резолвляться без завантаження повного датасету.

🔹 `DEFAULT_QUICK_ACCESS` — порядок має значення: перший збіг виграє.
🔹 `quick_access_from_config()` приймає ті ж поля, що й датасет (`payex`, `totalcar`).
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from typing import Any, Iterable, List, Mapping, Optional, Tuple

# 🧩 Внутрішні модулі проєкту
from parkright.domain.parking.entities import LotRecord
from parkright.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.resolver.quick_access")

QuickAccessSet = Tuple[LotRecord, ...]

DEFAULT_QUICK_ACCESS: QuickAccessSet = (
    LotRecord(
        id="030",
        name="民生社區中心地下停車場",
        address="民生東路5段163-1號地下",
        rate_description="一至五(8-22)30元/時, 六日(8-22)40元/時, 夜間10元/時",
        capacity=305,
    ),
    LotRecord(
        id="254",
        name="嘟嘟房台北小巨蛋站停車場",
        address="南京東路4段2號地下",
        rate_description="日間40-60元/時, 夜間10元/時 (依活動調整)",
        capacity=492,
    ),
)


def quick_access_from_config(nodes: Optional[Iterable[Any]]) -> QuickAccessSet:
    """
    Будує закріплений список з конфігу.

    None → дефолтний список; порожній список → швидкий доступ вимкнено.
    Вузли без `id` або `name` пропускаються.
    """
    if nodes is None:
        return DEFAULT_QUICK_ACCESS
    records: List[LotRecord] = []
    for node in nodes:
        if not isinstance(node, Mapping):
            logger.warning("⚠️ Пропускаю вузол quick_access: %r", node)
            continue
        record = LotRecord.from_raw(node)
        if not record.id or not record.name:
            logger.warning("⚠️ quick_access без id/name: %r", node)
            continue
        records.append(record)
    return tuple(records)


__all__ = ["DEFAULT_QUICK_ACCESS", "QuickAccessSet", "quick_access_from_config"]
