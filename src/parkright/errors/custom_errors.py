# 🚨 parkright/errors/custom_errors.py
"""
🚨 Ієрархія доменних помилок шару отримання даних.

🔹 `AppError` → `UserVisibleError`: технічні `details` для логів + `message` для UI.
🔹 Кожна помилка вміє `to_log_extra()` — словник для `logger.*(extra=...)`.
🔹 Усі помилки тут тимчасові з точки зору сесії: UI пропонує повторити дію.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

# 🧩 Внутрішні модулі проєкту
from parkright.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.errors")


# ================================
# ⚠️ КОДИ ПОМИЛОК
# ================================
class ErrorCode:
    """Стабільні коди для логів та метрик."""

    TRANSPORT_EXHAUSTED = "transport_exhausted"
    DATASET_LOAD = "dataset_load_error"
    NOT_FOUND = "lot_not_found"
    LIVE_FETCH = "live_fetch_error"
    DUPLICATE = "duplicate_lot"
    UNKNOWN = "unknown_error"


# ================================
# 🧱 БАЗОВІ ВИНЯТКИ
# ================================
class AppError(Exception):
    """🧱 Базова помилка застосунку."""

    code: str = ErrorCode.UNKNOWN

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_log_extra(self) -> Dict[str, object]:
        extra: Dict[str, object] = {"error_code": self.code}
        if self.details:
            extra["details"] = self.details
        return extra

    def __str__(self) -> str:
        return f"{self.message} ({self.details})" if self.details else self.message


class UserVisibleError(AppError):
    """👀 Помилка, `message` якої можна показати користувачу без змін."""


# ================================
# 🌐 ТРАНСПОРТ
# ================================
@dataclass(frozen=True, slots=True)
class IntermediaryFailure:
    """Причина невдачі одного посередника в межах одного запиту."""

    name: str
    reason: str
    status_code: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.name}: {self.reason}"


class TransportExhaustedError(UserVisibleError):
    """🌐 Усі налаштовані посередники не змогли віддати документ."""

    code = ErrorCode.TRANSPORT_EXHAUSTED

    def __init__(self, target_url: str, failures: Iterable[IntermediaryFailure]) -> None:
        self.target_url = target_url
        self.failures: Tuple[IntermediaryFailure, ...] = tuple(failures)
        super().__init__(
            "資料來源無法連線",
            details=" | ".join(str(f) for f in self.failures) or "no intermediaries configured",
        )

    @property
    def reasons(self) -> Tuple[str, ...]:
        return tuple(f.reason for f in self.failures)

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra["target_url"] = self.target_url
        extra["failures"] = [str(f) for f in self.failures]
        return extra


# ================================
# 🗃️ ДАТАСЕТ / ПОШУК / LIVE
# ================================
class DatasetLoadError(UserVisibleError):
    """🗃️ Повний датасет не завантажився або має неочікувану форму."""

    code = ErrorCode.DATASET_LOAD

    def __init__(self, details: str, *, url: Optional[str] = None) -> None:
        super().__init__("停車場資料庫載入失敗", details=details)
        self.url = url

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.url:
            extra["url"] = self.url
        return extra


class LotNotFoundError(UserVisibleError):
    """🔍 Запит не збігся ні з закріпленим списком, ні з датасетом."""

    code = ErrorCode.NOT_FOUND

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(f'找不到 "{query}"。')

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra["query"] = self.query
        return extra


class LiveFetchError(UserVisibleError):
    """📡 Live-ендпоінт недоступний (на відміну від відсутнього запису паркінгу)."""

    code = ErrorCode.LIVE_FETCH

    def __init__(self, details: str, *, lot_id: Optional[str] = None) -> None:
        super().__init__("即時車位資料暫時無法取得", details=details)
        self.lot_id = lot_id

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra["lot_id"] = self.lot_id
        return extra


class DuplicateLotError(UserVisibleError):
    """♻️ Паркінг уже відстежується."""

    code = ErrorCode.DUPLICATE

    def __init__(self, lot_id: str) -> None:
        self.lot_id = lot_id
        super().__init__("此停車場已在清單中", details=f"lot_id={lot_id}")


__all__ = [
    "AppError",
    "DatasetLoadError",
    "DuplicateLotError",
    "ErrorCode",
    "IntermediaryFailure",
    "LiveFetchError",
    "LotNotFoundError",
    "TransportExhaustedError",
    "UserVisibleError",
]
