"""
Модуль: `utils/contrast.py`.
Назначение: Расчёт коэффициента контрастности двух цветов и проверка порогов WCAG.
"""

from dataclasses import dataclass

from utils.color_space import relative_luminance

WCAG_AA_LARGE = 3.0
WCAG_AA = 4.5
WCAG_AAA = 7.0


@dataclass(frozen=True)
class ContrastResult:
    ratio: float
    aa_large: bool
    aa: bool
    aaa: bool

    def to_dict(self) -> dict:
        return {
            "contrast_ratio": self.ratio,
            "wcag_aa_large": self.aa_large,
            "wcag_aa": self.aa,
            "wcag_aaa": self.aaa,
        }


def contrast_ratio(foreground: str, background: str) -> float:
    """Неокруглённый коэффициент (L_светлее + 0.05) / (L_темнее + 0.05)."""
    l1 = relative_luminance(foreground)
    l2 = relative_luminance(background)
    lighter, darker = (l1, l2) if l1 > l2 else (l2, l1)
    return (lighter + 0.05) / (darker + 0.05)


def check_contrast(foreground: str, background: str) -> ContrastResult:
    """Проверяет пару цветов; пороги сравниваются с неокруглённым значением."""
    ratio = contrast_ratio(foreground, background)
    return ContrastResult(
        ratio=round(ratio, 2),
        aa_large=ratio >= WCAG_AA_LARGE,
        aa=ratio >= WCAG_AA,
        aaa=ratio >= WCAG_AAA,
    )
