"""
Программа: «Paleta» – инструменты для работы с цветовыми палитрами.
Модуль: utils/color_space.py – преобразования цветовых пространств.

Назначение модуля:
- Проверка и нормализация HEX-цветов.
- Преобразования HEX ↔ RGB ↔ HSL.
- Вычисление относительной яркости по WCAG.

HSL-компоненты усекаются до целых (а не округляются): от этого зависят
границы правил интерпретации, поэтому прямое и обратное преобразования
намеренно не являются взаимно обратными.
"""

import math
import re

from utils.errors import InvalidColor

HEX_PATTERN = re.compile(r"^[0-9a-fA-F]{6}$")


def normalize_hex(value) -> str:
    """Возвращает HEX без `#` в верхнем регистре или выбрасывает InvalidColor."""
    if not isinstance(value, str):
        raise InvalidColor()
    cleaned = value.lstrip("#")
    if not HEX_PATTERN.match(cleaned):
        raise InvalidColor()
    return cleaned.upper()


def is_valid_hex(value) -> bool:
    try:
        normalize_hex(value)
    except InvalidColor:
        return False
    return True


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """Преобразует HEX-цвет вида #RRGGBB в RGB-кортеж."""
    normalized = normalize_hex(color)
    return (
        int(normalized[0:2], 16),
        int(normalized[2:4], 16),
        int(normalized[4:6], 16),
    )


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


def int_to_hex(packed: int) -> str:
    """Распаковывает целое 0xRRGGBB, которое отдаёт извлечение цветов, в HEX."""
    r = (packed >> 16) & 0xFF
    g = (packed >> 8) & 0xFF
    b = packed & 0xFF
    return rgb_to_hex(r, g, b)


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[int, int, int]:
    """Переводит RGB (0..255) в HSL: h в [0, 360), s и l в [0, 100], всё усечено до int."""
    r, g, b = r / 255, g / 255, b / 255

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) / 2
    delta = max_c - min_c

    if delta == 0:
        hue = saturation = 0.0
    else:
        if lightness > 0.5:
            saturation = delta / (2 - max_c - min_c)
        else:
            saturation = delta / (max_c + min_c)

        # При равенстве каналов приоритет: красный, зелёный, синий
        if max_c == r:
            hue = (g - b) / delta + (6 if g < b else 0)
        elif max_c == g:
            hue = (b - r) / delta + 2
        else:
            hue = (r - g) / delta + 4
        hue /= 6

    return int(hue * 360), int(saturation * 100), int(lightness * 100)


def hex_to_hsl(color: str) -> tuple[int, int, int]:
    return rgb_to_hsl(*hex_to_rgb(color))


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Обратное преобразование HSL → HEX (#rrggbb, нижний регистр, каналы усечены)."""
    h = (h % 360) / 360
    s /= 100
    l /= 100

    chroma = (1 - abs(2 * l - 1)) * s
    x = chroma * (1 - abs(math.fmod(h * 6, 2) - 1))
    m = l - chroma / 2

    if h < 1 / 6:
        r, g, b = chroma, x, 0
    elif h < 2 / 6:
        r, g, b = x, chroma, 0
    elif h < 3 / 6:
        r, g, b = 0, chroma, x
    elif h < 4 / 6:
        r, g, b = 0, x, chroma
    elif h < 5 / 6:
        r, g, b = x, 0, chroma
    else:
        r, g, b = chroma, 0, x

    return rgb_to_hex(
        int((r + m) * 255),
        int((g + m) * 255),
        int((b + m) * 255),
    )


def _linear_channel(value: int) -> float:
    c = value / 255
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: str) -> float:
    """Относительная яркость цвета по формуле WCAG 2.x."""
    r, g, b = (_linear_channel(channel) for channel in hex_to_rgb(color))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b
