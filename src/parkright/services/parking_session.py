# 🧭 parkright/services/parking_session.py
"""
🧭 ParkingSession — фасад, який викликає UI.

🔹 Рівно чотири операції: `preload()`, `search()`, `get_live()`, `get_all_live()`.
🔹 Власного кешу та ретраїв немає: кеш — у `DatasetCache`, фолбек — у транспорті.
🔹 Сесія володіє кешем датасету на весь свій життєвий цикл і закриває транспорт в `aclose()`.
🔹 `preload()` — відʼєднана задача: збій іде в лог, кеш лишається придатним до повтору.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import asyncio
import logging
from typing import Any, Dict, Optional, Set

# 🧩 Внутрішні модулі проєкту
from parkright.domain.parking.entities import LiveStatus, LotRecord
from parkright.domain.parking.interfaces import IDatasetCache, ILiveStatusProvider, ILotResolver, ProgressFn
from parkright.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.session")


class ParkingSession:
    """🧭 Компонує резолвер і live-фетчер поверх спільного транспорту."""

    def __init__(
        self,
        cache: IDatasetCache,
        resolver: ILotResolver,
        live_fetcher: ILiveStatusProvider,
        *,
        transport: Optional[Any] = None,
    ) -> None:
        self._cache = cache
        self._resolver = resolver
        self._live = live_fetcher
        self._transport = transport                                 # 🔌 Закривається в aclose(), якщо вміє
        self._preload_tasks: Set[asyncio.Task[None]] = set()        # 📌 Сильні посилання до завершення

    # ================================
    # 🔓 ОПЕРАЦІЇ ФАСАДУ
    # ================================
    def preload(self, on_progress: Optional[ProgressFn] = None) -> asyncio.Task[None]:
        """
        Запускає прогрів датасету без очікування результату.

        Повертає задачу лише для діагностики; вона ніколи не завершується винятком.
        """
        task = asyncio.get_running_loop().create_task(self._preload(on_progress))
        self._preload_tasks.add(task)
        task.add_done_callback(self._preload_tasks.discard)
        return task

    async def search(self, query: str) -> LotRecord:
        return await self._resolver.search(query)

    async def get_live(self, lot_id: str) -> LiveStatus:
        return await self._live.get_live(lot_id)

    async def get_all_live(self) -> Dict[str, LiveStatus]:
        return await self._live.get_all_live()

    # ================================
    # 🧰 СТАН ТА ЖИТТЄВИЙ ЦИКЛ
    # ================================
    def is_ready(self) -> bool:
        return self._cache.is_ready()

    @property
    def resolver(self) -> ILotResolver:
        return self._resolver

    async def aclose(self) -> None:
        """🔌 Дочікується прогріву та закриває транспорт."""
        if self._preload_tasks:
            await asyncio.gather(*self._preload_tasks, return_exceptions=True)
        closer = getattr(self._transport, "aclose", None)
        if callable(closer):
            await closer()
        logger.debug("🔌 ParkingSession закрито")

    async def __aenter__(self) -> "ParkingSession":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ================================
    # 🔒 ВНУТРІШНЄ
    # ================================
    async def _preload(self, on_progress: Optional[ProgressFn]) -> None:
        try:
            await self._cache.ensure_loaded(on_progress)
        except asyncio.CancelledError:
            raise
        except Exception as exc:  # noqa: BLE001
            logger.warning("⚠️ Прогрів датасету не вдався (буде повтор під час пошуку): %s", exc)


__all__ = ["ParkingSession"]
