"""
Программа: «Paleta» – инструменты для работы с цветовыми палитрами.
Модуль: utils/export_handler.py – формирование данных для экспорта палитр.

Назначение модуля:
- Подготовка содержимого палитры в форматах CSS, SCSS, PNG и SVG.
- Возврат байтов, имени файла и MIME-типа для последующей отправки пользователю.

Порядок цветов значим: он задаёт номер CSS-переменной и положение полосы
слева направо в PNG/SVG.
"""

import io
from typing import List, Tuple

from PIL import Image, ImageDraw

from utils.color_space import hex_to_rgb, normalize_hex
from utils.errors import EmptyPalette, UnsupportedFormat

CANVAS_WIDTH = 600
CANVAS_HEIGHT = 100
BACKGROUND = (255, 255, 255)

EXPORT_FORMATS = {
    "css": ("palette.css", "text/css"),
    "scss": ("palette.scss", "text/scss"),
    "png": ("palette.png", "image/png"),
    "svg": ("palette.svg", "image/svg+xml"),
}


def _format_number(value: float) -> str:
    """Целые значения печатаются без дробной части, остальные – кратчайшим float."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _render_css(colors: List[str]) -> str:
    content = ":root {\n"
    for index, color in enumerate(colors, start=1):
        content += f"  --color-{index}: {color};\n"
    content += "}"
    return content


def _render_scss(colors: List[str]) -> str:
    return "".join(f"$color-{index}: {color};\n" for index, color in enumerate(colors, start=1))


def _render_palette_png(colors: List[str]) -> bytes:
    """Рендерит PNG 600×100 с вертикальными полосами равной ширины."""
    step = CANVAS_WIDTH / len(colors)

    image = Image.new("RGB", (CANVAS_WIDTH, CANVAS_HEIGHT), BACKGROUND)
    draw = ImageDraw.Draw(image)

    for index, color in enumerate(colors):
        # Границы включительно: соседняя полоса перекрашивает общий столбец
        x1 = int(index * step)
        x2 = int((index + 1) * step)
        draw.rectangle((x1, 0, x2, CANVAS_HEIGHT), fill=hex_to_rgb(color))

    buffer = io.BytesIO()
    image.save(buffer, format="PNG", optimize=True)
    return buffer.getvalue()


def _render_palette_svg(colors: List[str]) -> str:
    step = CANVAS_WIDTH / len(colors)
    width = _format_number(step)

    svg = '<?xml version="1.0" encoding="UTF-8"?>\n'
    svg += f'<svg width="{CANVAS_WIDTH}" height="{CANVAS_HEIGHT}" xmlns="http://www.w3.org/2000/svg">\n'
    for index, color in enumerate(colors):
        # x усекается, ширина остаётся дробной
        x = int(index * step)
        svg += (
            f'<rect x="{x}" y="0" width="{width}" height="{CANVAS_HEIGHT}" fill="{color}" />\n'
        )
    svg += "</svg>"
    return svg


def export_palette_data(colors: List[str], format_type: str) -> Tuple[bytes, str, str]:
    """Генерирует данные для экспорта палитры в выбранном формате.

    Возвращает кортеж (content, filename, mimetype). Выбрасывает EmptyPalette
    для пустого списка, InvalidColor для некорректного цвета и
    UnsupportedFormat для формата вне css/scss/png/svg.
    """
    if not colors:
        raise EmptyPalette()

    format_key = (format_type or "").strip().lower()
    if format_key not in EXPORT_FORMATS:
        raise UnsupportedFormat()

    normalized = [f"#{normalize_hex(color)}" for color in colors]
    filename, mimetype = EXPORT_FORMATS[format_key]

    if format_key == "css":
        content: bytes | str = _render_css(normalized)
    elif format_key == "scss":
        content = _render_scss(normalized)
    elif format_key == "png":
        content = _render_palette_png(normalized)
    else:
        content = _render_palette_svg(normalized)

    if isinstance(content, str):
        content = content.encode("utf-8")

    return content, filename, mimetype
