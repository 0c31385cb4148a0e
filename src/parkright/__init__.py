# 🅿️ parkright/__init__.py
"""
🅿️ parkright — шар отримання даних для дашборда вільних місць на паркінгах Тайбею.

🔹 `ProxyTransport` → `DatasetCache` → `LotResolver` / `LiveStatusFetcher` → `ParkingSession`.
🔹 Зібрати все з конфігу: `parkright.config.setup.container.Container`.
"""

__version__ = "0.1.0"
