# 🛰️ parkright/infrastructure/transport/intermediaries.py
"""
🛰️ Посередники (проксі), через які транспорт ходить до відкритих даних.

🔹 `Intermediary` — імʼя + шаблон URL: `{url}` отримує закодовану ціль, `{raw}` — ціль без змін.
🔹 `DEFAULT_INTERMEDIARIES` — порядок за замовчуванням; конфіг `transport.intermediaries` його замінює.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Tuple
from urllib.parse import quote

# 🧩 Внутрішні модулі проєкту
from parkright.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.transport.intermediaries")


@dataclass(frozen=True, slots=True)
class Intermediary:
    name: str
    template: str

    def __post_init__(self) -> None:
        if "{url}" not in self.template and "{raw}" not in self.template:
            raise ValueError(f"Intermediary {self.name!r}: template needs {{url}} or {{raw}}")

    def build(self, target_url: str) -> str:
        """🔗 Загортає цільовий URL у запит до посередника."""
        return self.template.format(url=quote(target_url, safe=""), raw=target_url)

    @classmethod
    def direct(cls) -> "Intermediary":
        """Прямий доступ без проксі."""
        return cls(name="Direct", template="{raw}")


DEFAULT_INTERMEDIARIES: Tuple[Intermediary, ...] = (
    Intermediary("AllOrigins", "https://api.allorigins.win/raw?url={url}"),
    Intermediary("CorsProxy.io", "https://corsproxy.io/?url={url}"),
    Intermediary("CodeTabs", "https://api.codetabs.com/v1/proxy?quest={url}"),
)


def intermediaries_from_config(nodes: Optional[Iterable[Any]]) -> Tuple[Intermediary, ...]:
    """
    Будує список посередників з конфігу (`[{name, template}, ...]`).

    Некоректні вузли пропускаються з попередженням; порожній результат → дефолтний список.
    """
    built = []
    for node in nodes or ():
        if not isinstance(node, Mapping):
            logger.warning("⚠️ Пропускаю вузол посередника: %r", node)
            continue
        try:
            built.append(Intermediary(name=str(node.get("name") or "unnamed"), template=str(node.get("template") or "")))
        except ValueError as exc:
            logger.warning("⚠️ %s", exc)
    if not built:
        return DEFAULT_INTERMEDIARIES
    return tuple(built)


__all__ = ["DEFAULT_INTERMEDIARIES", "Intermediary", "intermediaries_from_config"]
