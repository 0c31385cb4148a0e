# 🌐 parkright/infrastructure/transport/proxy_transport.py
"""
🌐 ProxyTransport — GET JSON-документа через впорядкований список посередників.

🎯 Алгоритм одного виклику `fetch_json(target_url)`:
    • посередники перебираються строго в заданому порядку, кожен — максимум один раз;
    • кожна спроба жорстко обмежена `timeout_sec` (не сумарно, а на посередника);
    • успіх = HTTP 2xx + тіло парситься як JSON + форма проходить валідатор;
    • будь-яка невдача фіксується як `IntermediaryFailure`, і ми йдемо далі;
    • якщо впали всі — `TransportExhaustedError` з усіма причинами, а не лише останньою.

⚙️ Нотатки:
    • HTTP-клієнт створюється ліниво, якщо не переданий ззовні; `aclose()` закриває лише власний;
    • між викликами стану немає — жодного крос-викликового backoff.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx

# 🔠 Системні імпорти
import asyncio
import logging
import time
from typing import Any, List, Optional, Sequence

# 🧩 Внутрішні модулі проєкту
from parkright.domain.parking.interfaces import JsonDocument, ShapeValidator, has_park_collection
from parkright.errors.custom_errors import IntermediaryFailure, TransportExhaustedError
from parkright.infrastructure.metrics import FETCH_LATENCY, PROXY_ATTEMPTS
from parkright.infrastructure.transport.intermediaries import DEFAULT_INTERMEDIARIES, Intermediary
from parkright.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.transport")

DEFAULT_TIMEOUT_SEC = 12.0
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)


class _AttemptFailed(Exception):
    """Внутрішній сигнал: спроба через посередника не вдалася."""

    def __init__(self, outcome: str, reason: str, status_code: Optional[int] = None) -> None:
        super().__init__(reason)
        self.outcome = outcome
        self.reason = reason
        self.status_code = status_code


class ProxyTransport:
    """🌐 Транспорт з фолбеком по посередниках і таймаутом на кожну спробу."""

    def __init__(
        self,
        intermediaries: Sequence[Intermediary] = DEFAULT_INTERMEDIARIES,
        *,
        client: Optional[httpx.AsyncClient] = None,
        timeout_sec: float = DEFAULT_TIMEOUT_SEC,
        user_agent: str = DEFAULT_USER_AGENT,
        validator: ShapeValidator = has_park_collection,
    ) -> None:
        self._intermediaries = tuple(intermediaries)
        self._client = client
        self._owns_client = client is None
        self._timeout_sec = float(timeout_sec)
        self._user_agent = user_agent
        self._validator = validator
        if self._timeout_sec <= 0:
            raise ValueError("timeout_sec must be positive")
        logger.debug(
            "⚙️ ProxyTransport: intermediaries=%s timeout=%ss",
            [i.name for i in self._intermediaries],
            self._timeout_sec,
        )

    @property
    def intermediaries(self) -> Sequence[Intermediary]:
        return self._intermediaries

    @property
    def timeout_sec(self) -> float:
        return self._timeout_sec

    # ================================
    # 🔓 ПУБЛІЧНИЙ ІНТЕРФЕЙС
    # ================================
    async def fetch_json(self, target_url: str) -> JsonDocument:
        """Повертає розібраний JSON першого успішного посередника."""
        client = self._ensure_client()
        failures: List[IntermediaryFailure] = []
        started = time.perf_counter()

        for intermediary in self._intermediaries:
            proxied_url = intermediary.build(target_url)
            try:
                document = await self._attempt(client, proxied_url)
            except _AttemptFailed as failed:
                PROXY_ATTEMPTS.labels(intermediary=intermediary.name, outcome=failed.outcome).inc()
                failures.append(IntermediaryFailure(intermediary.name, failed.reason, failed.status_code))
                logger.warning("⚠️ %s не відповів для %s: %s", intermediary.name, target_url, failed.reason)
                continue

            PROXY_ATTEMPTS.labels(intermediary=intermediary.name, outcome="ok").inc()
            FETCH_LATENCY.observe(time.perf_counter() - started)
            logger.debug("✅ %s віддав %s (спроба %d)", intermediary.name, target_url, len(failures) + 1)
            return document

        FETCH_LATENCY.observe(time.perf_counter() - started)
        error = TransportExhaustedError(target_url, failures)
        logger.error("❌ Усі посередники впали для %s", target_url, extra=error.to_log_extra())
        raise error

    async def aclose(self) -> None:
        """🔌 Закриває HTTP-клієнт, якщо транспорт створив його сам."""
        if self._client is not None and self._owns_client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("🔌 HTTP-клієнт транспорту закрито.")
        if self._owns_client:
            self._client = None

    # ================================
    # 🔒 ВНУТРІШНЯ ЛОГІКА
    # ================================
    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._timeout_sec,
                follow_redirects=True,
                headers={"User-Agent": self._user_agent, "Accept": "application/json"},
            )
            self._owns_client = True
        return self._client

    async def _attempt(self, client: httpx.AsyncClient, proxied_url: str) -> JsonDocument:
        try:
            response = await asyncio.wait_for(client.get(proxied_url), timeout=self._timeout_sec)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            raise _AttemptFailed("timeout", f"timeout after {self._timeout_sec:g}s") from None
        except httpx.HTTPError as exc:
            raise _AttemptFailed("network", f"{type(exc).__name__}: {exc}") from None

        if not response.is_success:
            raise _AttemptFailed("http_status", f"HTTP {response.status_code}", response.status_code)

        try:
            payload: Any = response.json()
        except ValueError as exc:
            raise _AttemptFailed("bad_json", f"invalid JSON: {exc}", response.status_code) from None

        if not self._validator(payload):
            raise _AttemptFailed("bad_shape", "unexpected document shape", response.status_code)
        return payload


__all__ = ["DEFAULT_TIMEOUT_SEC", "DEFAULT_USER_AGENT", "ProxyTransport"]
