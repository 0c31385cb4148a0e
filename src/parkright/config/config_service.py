# ⚙️ parkright/config/config_service.py
"""
⚙️ config_service.py — Сервіс доступу до статичної конфігурації.

🔹 Клас `ConfigService`:
- Завантажує конфігурацію з config.yaml, .env та змінних оточення `PARKRIGHT_*`.
- Надає єдиний метод .get() з крапковими ключами та опційним приведенням типу.
- Працює як Singleton; `reset()` скидає екземпляр (для тестів та перезавантаження).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import yaml                                  # 📦 YAML-парсинг
from dotenv import load_dotenv              # 🔐 Завантаження змінних із .env

# 🔠 Системні імпорти
import logging                              # 🧾 Логування
import os                                   # 📁 Доступ до змінних середовища
from pathlib import Path                    # 📁 Побудова шляху до файлів
from typing import Any, Callable, Dict, Optional

# 🧩 Внутрішні модулі проєкту
from parkright.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.config")

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"      # 📘 Базовий YAML поруч із модулем
CONFIG_PATH_ENV = "PARKRIGHT_CONFIG"                             # 🧭 Альтернативний шлях до YAML

# 🔁 ENV → крапковий ключ
ENV_OVERRIDES: Dict[str, str] = {
    "PARKRIGHT_STATIC_URL": "parking.static_url",
    "PARKRIGHT_LIVE_URL": "parking.live_url",
    "PARKRIGHT_TIMEOUT_SEC": "transport.timeout_sec",
    "PARKRIGHT_USER_AGENT": "transport.user_agent",
    "PARKRIGHT_LOG_LEVEL": "logging.level",
    "PARKRIGHT_LOG_FILE": "logging.file",
}


# ============================
# ⚙️ СЕРВІС ДОСТУПУ ДО КОНФІГІВ
# ============================
class ConfigService:
    """
    ⚙️ Надає доступ до всіх конфігураційних параметрів проєкту.
    Працює як Singleton — конфігурація зчитується лише один раз.
    """

    _instance: Optional["ConfigService"] = None
    _config: Dict[str, Any]

    def __new__(cls) -> "ConfigService":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._config = {}
            instance._load_all_configs()                            # 🔄 Завантаження під час першого виклику
            cls._instance = instance
            logger.debug("🔄 Singleton ConfigService створено")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """🧹 Скидає singleton — наступний виклик перечитає всі джерела."""
        cls._instance = None

    def _load_all_configs(self) -> None:
        """
        📥 Завантажує всі джерела конфігурації в один словник.
        Пріоритет (від слабшого до сильнішого): config.yaml → .env / ENV.
        """
        load_dotenv()                                               # 🔐 .env → os.environ (не перезаписує наявні)

        yaml_path = Path(os.getenv(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH)
        try:
            with open(yaml_path, "r", encoding="utf-8") as f:
                self._deep_update(self._config, yaml.safe_load(f) or {})
            logger.debug("📘 config.yaml завантажено: %s", yaml_path)
        except (FileNotFoundError, yaml.YAMLError) as e:
            logger.warning("⚠️ Не вдалося завантажити %s: %s", yaml_path, e)

        env_vars = {key: os.getenv(env) for env, key in ENV_OVERRIDES.items() if os.getenv(env)}
        self._deep_update(self._config, self._unflatten_dict(env_vars))
        if env_vars:
            logger.debug("🔐 ENV-перевизначення: %s", sorted(env_vars))

        logger.info("✅ Конфігурацію успішно завантажено.")

    def get(self, key: str, default: Any = None, cast: Optional[Callable[[Any], Any]] = None) -> Any:
        """
        🔑 Отримує значення конфігурації за ключем (наприклад: 'transport.timeout_sec').

        Args:
            key: Ключ у форматі з крапкою.
            default: Значення за замовчуванням, якщо ключ не знайдено.
            cast: Опційне приведення типу; при невдачі повертається default.
        """
        value: Any = self._config
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        if cast is not None and value is not None:
            try:
                return cast(value)
            except (TypeError, ValueError):
                logger.warning("⚠️ Ключ '%s' має некоректне значення %r, беремо дефолт", key, value)
                return default
        return value

    # ===============================
    # 🔧 ДОПОМІЖНІ МЕТОДИ ЗЛИТТЯ КОНФІГІВ
    # ===============================
    @staticmethod
    def _unflatten_dict(d: Dict[str, Any]) -> Dict[str, Any]:
        """'transport.timeout_sec' → {'transport': {'timeout_sec': ...}}"""
        result: Dict[str, Any] = {}
        for key, value in d.items():
            parts = key.split(".")
            d_ref = result
            for part in parts[:-1]:
                d_ref = d_ref.setdefault(part, {})
            d_ref[parts[-1]] = value
        return result

    @classmethod
    def _deep_update(cls, source: Dict[str, Any], overrides: Dict[str, Any]) -> None:
        """🔁 Рекурсивно обʼєднує словники; вкладені dict зливаються, решта перезаписується."""
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(source.get(key), dict):
                cls._deep_update(source[key], value)
            else:
                source[key] = value


__all__ = ["ConfigService", "ENV_OVERRIDES", "CONFIG_PATH_ENV"]
