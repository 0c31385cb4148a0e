# 🧭 parkright/services/__init__.py
"""🧭 Сервіси для UI: фасад сесії та список відстежуваних паркінгів."""

from .lot_tracker import LotTracker
from .parking_session import ParkingSession

__all__ = ["LotTracker", "ParkingSession"]
