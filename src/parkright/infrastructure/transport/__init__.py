# 🌐 parkright/infrastructure/transport/__init__.py
"""🌐 Транспорт: посередники та GET з фолбеком."""

from .intermediaries import DEFAULT_INTERMEDIARIES, Intermediary, intermediaries_from_config
from .proxy_transport import DEFAULT_TIMEOUT_SEC, ProxyTransport

__all__ = [
    "DEFAULT_INTERMEDIARIES",
    "DEFAULT_TIMEOUT_SEC",
    "Intermediary",
    "ProxyTransport",
    "intermediaries_from_config",
]
