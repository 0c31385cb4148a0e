# 📡 parkright/infrastructure/live/__init__.py
"""📡 Live-наявність місць."""

from .live_status_fetcher import LiveStatusFetcher

__all__ = ["LiveStatusFetcher"]
