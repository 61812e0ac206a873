from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

DEFAULT_SANS = "Inter, system-ui, sans-serif"
DEFAULT_SERIF = "Georgia, serif"
DEFAULT_MONO = "Menlo, monospace"

FONT_SIZES: Mapping[str, str] = MappingProxyType(
    {
        "xs": "0.75rem",
        "sm": "0.875rem",
        "base": "1rem",
        "lg": "1.125rem",
        "xl": "1.25rem",
        "2xl": "1.5rem",
        "3xl": "1.875rem",
        "4xl": "2.25rem",
        "5xl": "3rem",
    }
)
FONT_WEIGHTS: Mapping[str, int] = MappingProxyType(
    {
        "light": 300,
        "normal": 400,
        "medium": 500,
        "semibold": 600,
        "bold": 700,
    }
)
LINE_HEIGHTS: Mapping[str, float] = MappingProxyType(
    {
        "tight": 1.25,
        "normal": 1.5,
        "relaxed": 1.75,
    }
)


@dataclass(frozen=True)
class TypographyScale:
    font_family: Mapping[str, str]
    font_size: Mapping[str, str]
    font_weight: Mapping[str, int]
    line_height: Mapping[str, float]

    def to_dict(self) -> dict:
        return {
            "fontFamily": dict(self.font_family),
            "fontSize": dict(self.font_size),
            "fontWeight": dict(self.font_weight),
            "lineHeight": dict(self.line_height),
        }


def generate_typography_scale(font_family: str = DEFAULT_SANS) -> TypographyScale:
    """
    Tablas tipográficas fijas; solo la familia `sans` viene del llamador.

    El string se usa tal cual, sin añadir fuentes de respaldo.
    """
    return TypographyScale(
        font_family=MappingProxyType(
            {
                "sans": font_family,
                "serif": DEFAULT_SERIF,
                "mono": DEFAULT_MONO,
            }
        ),
        font_size=FONT_SIZES,
        font_weight=FONT_WEIGHTS,
        line_height=LINE_HEIGHTS,
    )


__all__ = [
    "DEFAULT_SANS",
    "DEFAULT_SERIF",
    "DEFAULT_MONO",
    "FONT_SIZES",
    "FONT_WEIGHTS",
    "LINE_HEIGHTS",
    "TypographyScale",
    "generate_typography_scale",
]
