"""
Программа: «Paleta» – инструменты для работы с цветовыми палитрами.
Модуль: utils/interpreter.py – маркетинговая интерпретация цветов.

Назначение модуля:
- Загрузка справочника описаний цветов (MeaningTable) из JSON-файла.
- Интерпретация цвета: сначала справочник, затем упорядоченный каскад правил по HSL.
- Аннотирование цветов парами {hex, meaning} для ответов API.
"""

import json
import logging
import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

from utils.color_space import hex_to_hsl, is_valid_hex, normalize_hex

logger = logging.getLogger(__name__)

INVALID_COLOR_MESSAGE = "Некорректный HEX-цвет."
FALLBACK_MESSAGE = "Не удалось определить характеристики цвета."

DARK_MESSAGE = "Тёмный оттенок. Передаёт глубину, серьёзность, роскошь."
LIGHT_MESSAGE = "Светлый оттенок. Создаёт ощущение чистоты, лёгкости, минимализма."
MUTED_MESSAGE = "Пастельный/приглушённый цвет. Универсален, не агрессивен, подходит для фона."
SATURATED_MESSAGE = "Насыщенный цвет. Привлекает внимание, подходит для акцентов и CTA."
WARM_MESSAGE = "Тёплый оттенок (красный/оранжевый). Энергия, страсть, тепло."
EARTHY_MESSAGE = "Земляные/жёлтые тона. Натуральность, уют, стабильность."
COOL_MESSAGE = "Холодные зелёные/бирюзовые тона. Свежесть, рост, доверие."
BLUE_VIOLET_MESSAGE = "Сине-фиолетовые тона. Спокойствие, глубина, интуиция."
NEUTRAL_MESSAGE = "Нейтральный или сложный оттенок. Рекомендуется тестировать в контексте бренда."

Rule = tuple[Callable[[int, int, int], bool], str]

# Порядок важен: крайние значения яркости и насыщенности проверяются раньше тона
RULES: tuple[Rule, ...] = (
    (lambda h, s, l: l < 20, DARK_MESSAGE),
    (lambda h, s, l: l > 90, LIGHT_MESSAGE),
    (lambda h, s, l: s < 20, MUTED_MESSAGE),
    (lambda h, s, l: s > 70, SATURATED_MESSAGE),
    (lambda h, s, l: 0 <= h < 30, WARM_MESSAGE),
    (lambda h, s, l: 30 <= h < 90, EARTHY_MESSAGE),
    (lambda h, s, l: 90 <= h < 180, COOL_MESSAGE),
    (lambda h, s, l: 180 <= h < 270, BLUE_VIOLET_MESSAGE),
)


def load_meaning_table(path: str) -> Mapping[str, str]:
    """Читает справочник {HEX: описание} и возвращает неизменяемое отображение.

    Ключи нормализуются (без `#`, верхний регистр); некорректные ключи
    пропускаются с предупреждением. Отсутствующий файл даёт пустой справочник.
    """
    if not path or not os.path.exists(path):
        logger.warning("Справочник цветов не найден: %s", path)
        return MappingProxyType({})

    with open(path, encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"Справочник цветов должен быть JSON-объектом: {path}")

    table = {}
    for key, meaning in raw.items():
        if not is_valid_hex(key) or not isinstance(meaning, str):
            logger.warning("Пропущена некорректная запись справочника: %r", key)
            continue
        table[normalize_hex(key)] = meaning

    logger.info("Загружено описаний цветов: %d", len(table))
    return MappingProxyType(table)


@dataclass(frozen=True)
class ColorItem:
    """Цвет и его текстовая интерпретация."""

    hex: str
    meaning: str

    def to_dict(self) -> dict:
        return {"hex": self.hex, "meaning": self.meaning}


class ColorInterpreter:
    """Интерпретатор цветов со справочником, переданным при создании."""

    def __init__(self, meanings: Mapping[str, str] | None = None):
        self._meanings = MappingProxyType(
            {normalize_hex(key): value for key, value in (meanings or {}).items()}
        )

    def interpret(self, color) -> str:
        """Возвращает описание цвета; никогда не выбрасывает исключений."""
        if not is_valid_hex(color):
            return INVALID_COLOR_MESSAGE

        clean_hex = normalize_hex(color)
        if clean_hex in self._meanings:
            return self._meanings[clean_hex]

        try:
            h, s, l = hex_to_hsl(clean_hex)
            for predicate, message in RULES:
                if predicate(h, s, l):
                    return message
            return NEUTRAL_MESSAGE
        except Exception:
            logger.exception("Ошибка интерпретации цвета %s", clean_hex)
            return FALLBACK_MESSAGE

    def annotate(self, color: str) -> ColorItem:
        return ColorItem(hex=color, meaning=self.interpret(color))

    def annotate_many(self, colors: Iterable[str]) -> list[ColorItem]:
        return [self.annotate(color) for color in colors]
