# 🧭 parkright/errors/reason_mapper.py
"""
🧭 Мапить винятки → `ReasonCode` + контекст для тексту помилки.

🔹 Розрізняє наші `UserVisibleError` і сирі винятки httpx.
🔹 `build_error_message()` повертає готовий текст для UI (усі причини — тимчасові).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx

# 🔠 Системні імпорти
import asyncio
import logging
from enum import Enum, unique
from typing import Any, Dict, Optional, Tuple

# 🧩 Внутрішні модулі проєкту
from parkright.errors.custom_errors import (
    DatasetLoadError,
    DuplicateLotError,
    LiveFetchError,
    LotNotFoundError,
    TransportExhaustedError,
    UserVisibleError,
)
from parkright.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.errors.reason_mapper")


@unique
class ReasonCode(str, Enum):
    SOURCE_UNREACHABLE = "source_unreachable"
    DATASET_UNAVAILABLE = "dataset_unavailable"
    NOT_FOUND = "not_found"
    LIVE_UNAVAILABLE = "live_unavailable"
    DUPLICATE = "duplicate"
    HTTP_TIMEOUT = "http_timeout"
    HTTP_STATUS = "http_status"
    HTTP_CONNECTION = "http_connection"
    INTERNAL = "internal"


# 💬 Тексти для UI; {placeholders} підставляються з ctx
MESSAGES: Dict[ReasonCode, str] = {
    ReasonCode.SOURCE_UNREACHABLE: "資料來源無法連線，請稍後再試。",
    ReasonCode.DATASET_UNAVAILABLE: "停車場資料庫載入失敗，請稍後再試。",
    ReasonCode.NOT_FOUND: '找不到 "{query}"，請嘗試更精確的名稱或地址。',
    ReasonCode.LIVE_UNAVAILABLE: "即時車位資料暫時無法取得，請稍後再試。",
    ReasonCode.DUPLICATE: "此停車場已在清單中。",
    ReasonCode.HTTP_TIMEOUT: "連線逾時，請稍後再試。",
    ReasonCode.HTTP_STATUS: "資料來源回應錯誤 (HTTP {status_code})，請稍後再試。",
    ReasonCode.HTTP_CONNECTION: "網路連線失敗，請檢查網路後再試。",
    ReasonCode.INTERNAL: "發生未預期的錯誤，請稍後再試。",
}


def map_error_to_reason(exc: BaseException) -> Tuple[ReasonCode, Dict[str, Any]]:
    """Повертає (reason_code, ctx) — ctx підставляється у текст повідомлення."""
    if isinstance(exc, UserVisibleError):
        return _map_user_visible(exc)

    httpx_result = _map_httpx_errors(exc)
    if httpx_result:
        return httpx_result

    if isinstance(exc, asyncio.TimeoutError):
        return ReasonCode.HTTP_TIMEOUT, {}

    logger.warning("❓ Unknown error mapped to INTERNAL", extra={"exc_type": type(exc).__name__})
    return ReasonCode.INTERNAL, {}


def build_error_message(exc: BaseException) -> str:
    """💬 Текст помилки для користувача."""
    reason, ctx = map_error_to_reason(exc)
    template = MESSAGES[reason]
    try:
        return template.format(**ctx)
    except (KeyError, IndexError):
        return MESSAGES[ReasonCode.INTERNAL]


# ================================
# 🧩 ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _map_user_visible(exc: UserVisibleError) -> Tuple[ReasonCode, Dict[str, Any]]:
    if isinstance(exc, LotNotFoundError):
        return ReasonCode.NOT_FOUND, {"query": exc.query}
    if isinstance(exc, DuplicateLotError):
        return ReasonCode.DUPLICATE, {"lot_id": exc.lot_id}
    if isinstance(exc, DatasetLoadError):
        # 🔗 Причина з мережі важливіша за факт невдалого завантаження
        if isinstance(exc.__cause__, TransportExhaustedError):
            return ReasonCode.SOURCE_UNREACHABLE, {}
        return ReasonCode.DATASET_UNAVAILABLE, {}
    if isinstance(exc, LiveFetchError):
        return ReasonCode.LIVE_UNAVAILABLE, {"lot_id": exc.lot_id}
    if isinstance(exc, TransportExhaustedError):
        return ReasonCode.SOURCE_UNREACHABLE, {"failures": len(exc.failures)}
    return ReasonCode.INTERNAL, {}


def _map_httpx_errors(exc: BaseException) -> Optional[Tuple[ReasonCode, Dict[str, Any]]]:
    if isinstance(exc, httpx.TimeoutException):
        return ReasonCode.HTTP_TIMEOUT, {}
    if isinstance(exc, httpx.HTTPStatusError):
        return ReasonCode.HTTP_STATUS, {"status_code": exc.response.status_code}
    if isinstance(exc, httpx.TransportError):
        return ReasonCode.HTTP_CONNECTION, {}
    return None


__all__ = ["MESSAGES", "ReasonCode", "build_error_message", "map_error_to_reason"]
