"""
Программа: «Paleta» – инструменты для работы с цветовыми палитрами.
Модуль: config.py – конфигурация приложения.

Назначение модуля:
- Определение базовых параметров приложения Flask.
- Путь к справочнику описаний цветов, параметры загрузки и извлечения цветов.
- Лимиты частоты запросов, CORS и языки сообщений.
"""

import os

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _get_env_bool(name: str, default: bool = False) -> bool:
    """Преобразует переменную окружения в bool."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_env_int(name: str, default: int) -> int:
    """Преобразует переменную окружения в int."""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str] | None = None) -> list[str]:
    """Преобразует переменную окружения вида 'a,b,c' в список."""
    value = os.environ.get(name)
    if value is None:
        return list(default or [])
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    """Базовая конфигурация приложения."""

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"

    COLOR_MEANINGS_PATH = os.environ.get(
        "COLOR_MEANINGS_PATH",
        os.path.join(BASE_DIR, "data", "color_meanings.json"),
    )

    MAX_CONTENT_LENGTH = 32 * 1024 * 1024
    ALLOWED_IMAGE_FORMATS = {"png", "jpeg"}
    MAX_IMAGE_PIXELS = _get_env_int("MAX_IMAGE_PIXELS", 20_000_000)
    EXTRACT_COLOR_COUNT = _get_env_int("EXTRACT_COLOR_COUNT", 5)
    MIN_COLOR_COUNT = _get_env_int("MIN_COLOR_COUNT", 1)
    MAX_COLOR_COUNT = _get_env_int("MAX_COLOR_COUNT", 15)

    CORS_ENABLED = _get_env_bool("CORS_ENABLED", default=False)
    CORS_ORIGINS = _get_env_list(
        "CORS_ORIGINS",
        default=["http://127.0.0.1:5000", "http://localhost:5000"],
    )

    RATE_LIMIT_ENABLED = _get_env_bool("RATE_LIMIT_ENABLED", default=True)
    RATE_LIMIT_WINDOW_SECONDS = _get_env_int("RATE_LIMIT_WINDOW_SECONDS", 10 * 60)
    RATE_LIMIT_EXTRACT = _get_env_int("RATE_LIMIT_EXTRACT", 40)
    RATE_LIMIT_EXPORT = _get_env_int("RATE_LIMIT_EXPORT", 120)
    RATE_LIMIT_DEFAULT = _get_env_int("RATE_LIMIT_DEFAULT", 600)

    SUPPORTED_LANGUAGES = ("ru", "en")
    DEFAULT_LANGUAGE = os.environ.get("DEFAULT_LANGUAGE", "ru").strip().lower() or "ru"
    LANG_COOKIE_NAME = os.environ.get("LANG_COOKIE_NAME", "site_lang").strip() or "site_lang"
