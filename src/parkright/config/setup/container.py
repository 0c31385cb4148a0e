# 📦 parkright/config/setup/container.py
"""
📦 Контейнер залежностей шару отримання даних.

🔹 Створює сервіси в порядку DI: HTTP-клієнт → транспорт → кеш → резолвер / live → сесія → трекер.
🔹 Усі параметри беруться з `ConfigService` (config.yaml + ENV `PARKRIGHT_*`).
🔹 Один контейнер = одна сесія: кеш датасету живе стільки ж, скільки контейнер.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx

# 🔠 Системні імпорти
import logging
from typing import Optional

# 🧩 Внутрішні модулі проєкту
from parkright.config.config_service import ConfigService
from parkright.domain.parking.interfaces import ProgressFn
from parkright.infrastructure.dataset.dataset_cache import DatasetCache
from parkright.infrastructure.live.live_status_fetcher import LiveStatusFetcher
from parkright.infrastructure.resolver.lot_resolver import LotResolver
from parkright.infrastructure.resolver.quick_access import quick_access_from_config
from parkright.infrastructure.transport.intermediaries import intermediaries_from_config
from parkright.infrastructure.transport.proxy_transport import (
    DEFAULT_TIMEOUT_SEC,
    DEFAULT_USER_AGENT,
    ProxyTransport,
)
from parkright.services.lot_tracker import LotTracker
from parkright.services.parking_session import ParkingSession
from parkright.shared.utils.logger import LOG_NAME, init_logging_from_config

logger = logging.getLogger(f"{LOG_NAME}.container")

DEFAULT_STATIC_URL = "https://tcgbusfs.blob.core.windows.net/blobtcmsv/TCMSV_alldesc.json"
DEFAULT_LIVE_URL = "https://tcgbusfs.blob.core.windows.net/blobtcmsv/TCMSV_allavailable.json"


def bootstrap_logging(config: Optional[ConfigService] = None) -> logging.Logger:
    """Зчитує розділ `logging` і запускає кореневий логер."""
    cfg = config or ConfigService()
    return init_logging_from_config(cfg.get("logging", {}) or {})


class Container:
    """Координує ініціалізацію транспорту, кешу та сервісів сесії."""

    def __init__(
        self,
        config: ConfigService,
        *,
        client: Optional[httpx.AsyncClient] = None,
        on_progress: Optional[ProgressFn] = None,
    ) -> None:
        self.config = config
        static_url = config.get("parking.static_url", DEFAULT_STATIC_URL) or DEFAULT_STATIC_URL
        live_url = config.get("parking.live_url", DEFAULT_LIVE_URL) or DEFAULT_LIVE_URL

        self.transport = ProxyTransport(
            intermediaries_from_config(config.get("transport.intermediaries")),
            client=client,
            timeout_sec=config.get("transport.timeout_sec", DEFAULT_TIMEOUT_SEC, float) or DEFAULT_TIMEOUT_SEC,
            user_agent=config.get("transport.user_agent", DEFAULT_USER_AGENT) or DEFAULT_USER_AGENT,
        )
        self.dataset_cache = DatasetCache(self.transport, static_url)
        self.resolver = LotResolver(
            self.dataset_cache,
            quick_access_from_config(config.get("parking.quick_access")),
            on_progress=on_progress,
        )
        self.live_fetcher = LiveStatusFetcher(self.transport, live_url)
        self.session = ParkingSession(
            self.dataset_cache,
            self.resolver,
            self.live_fetcher,
            transport=self.transport,
        )
        self.tracker = LotTracker(self.session)
        logger.info(
            "📦 Контейнер готовий: intermediaries=%s quick_access=%d",
            [i.name for i in self.transport.intermediaries],
            len(self.resolver.quick_access),
        )

    async def aclose(self) -> None:
        await self.session.aclose()


__all__ = ["Container", "DEFAULT_LIVE_URL", "DEFAULT_STATIC_URL", "bootstrap_logging"]
