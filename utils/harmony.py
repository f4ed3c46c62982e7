"""
Модуль: `utils/harmony.py`.
Назначение: Построение цветовых гармоний (комплементарной, аналоговой, триады) поворотом тона.
"""

from dataclasses import dataclass

from utils.color_space import hex_to_hsl, hsl_to_hex
from utils.interpreter import ColorInterpreter, ColorItem

COMPLEMENTARY_OFFSET = 180
ANALOGOUS_OFFSETS = (30, -30)
TRIADIC_OFFSETS = (120, 240)


@dataclass(frozen=True)
class HarmonySet:
    complementary: ColorItem
    analogous: tuple[ColorItem, ColorItem]
    triadic: tuple[ColorItem, ColorItem]

    def to_dict(self) -> dict:
        return {
            "complementary": self.complementary.to_dict(),
            "analogous": [item.to_dict() for item in self.analogous],
            "triadic": [item.to_dict() for item in self.triadic],
        }


def rotate_hue(hue: int, offset: int) -> int:
    """Поворачивает тон на offset градусов с приведением к [0, 360)."""
    return (hue + offset + 360) % 360


def generate_harmony(base_color: str, interpreter: ColorInterpreter) -> HarmonySet:
    """Строит гармонии для базового цвета, сохраняя его насыщенность и яркость.

    Некорректный HEX приводит к InvalidColor.
    """
    h, s, l = hex_to_hsl(base_color)

    def _derive(offset: int) -> ColorItem:
        return interpreter.annotate(hsl_to_hex(rotate_hue(h, offset), s, l))

    return HarmonySet(
        complementary=_derive(COMPLEMENTARY_OFFSET),
        analogous=tuple(_derive(offset) for offset in ANALOGOUS_OFFSETS),
        triadic=tuple(_derive(offset) for offset in TRIADIC_OFFSETS),
    )
