# 🔍 parkright/infrastructure/resolver/__init__.py
"""🔍 Резолвер паркінгів за текстом + закріплений список."""

from .lot_resolver import LotResolver, first_match, normalize_query
from .quick_access import DEFAULT_QUICK_ACCESS, QuickAccessSet, quick_access_from_config

__all__ = [
    "DEFAULT_QUICK_ACCESS",
    "LotResolver",
    "QuickAccessSet",
    "first_match",
    "normalize_query",
    "quick_access_from_config",
]
