# 🗃️ parkright/infrastructure/dataset/__init__.py
"""🗃️ Кеш повного датасету паркінгів."""

from .dataset_cache import CacheState, DatasetCache

__all__ = ["CacheState", "DatasetCache"]
