# ⚙️ parkright/config/__init__.py
"""
⚙️ Пакет Config — конфігурація та складання залежностей.

- `ConfigService`: config.yaml + .env + ENV `PARKRIGHT_*`.
- `Container`: збирає транспорт, кеш, резолвер, live-фетчер, сесію та трекер.
"""

from typing import TYPE_CHECKING

from .config_service import ConfigService

if TYPE_CHECKING:  # лише для підказок типів
    from .setup.container import Container

__all__ = ["ConfigService", "Container"]


def __getattr__(name: str):
    if name == "Container":
        from .setup.container import Container  # локальний імпорт → немає циклу

        return Container
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
