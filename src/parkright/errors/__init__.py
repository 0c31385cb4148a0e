# 🚨 parkright/errors/__init__.py
"""🚨 Доменні помилки та їх переклад у повідомлення для користувача."""

from .custom_errors import (
    AppError,
    DatasetLoadError,
    DuplicateLotError,
    ErrorCode,
    IntermediaryFailure,
    LiveFetchError,
    LotNotFoundError,
    TransportExhaustedError,
    UserVisibleError,
)
from .reason_mapper import ReasonCode, build_error_message, map_error_to_reason

__all__ = [
    "AppError",
    "DatasetLoadError",
    "DuplicateLotError",
    "ErrorCode",
    "IntermediaryFailure",
    "LiveFetchError",
    "LotNotFoundError",
    "ReasonCode",
    "TransportExhaustedError",
    "UserVisibleError",
    "build_error_message",
    "map_error_to_reason",
]
