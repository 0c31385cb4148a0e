# 🧱 parkright/infrastructure/__init__.py
"""
🧱 Інфраструктурний шар: транспорт, кеш датасету, резолвер, live-статуси, метрики.
"""
