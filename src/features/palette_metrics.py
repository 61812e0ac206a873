"""
Métricas de las paletas generadas para la pestaña de análisis.

Una fila por (paleta, tono) con luminosidad L*, luminancia relativa y
contraste WCAG contra blanco y negro.
"""

from __future__ import annotations

import pandas as pd

from src.tokens.color_scale import contrast_ratio, lab_lightness, relative_luminance
from src.tokens.design_tokens import DesignTokens

WCAG_AA_NORMAL = 4.5
WCAG_AA_LARGE = 3.0


def scales_to_frame(tokens: DesignTokens) -> pd.DataFrame:
    rows = []
    for palette, scale in tokens.colors.items():
        for shade, value in scale.items():
            rows.append(
                {
                    "palette": palette,
                    "shade": int(shade),
                    "hex": value,
                    "lightness": lab_lightness(value),
                    "luminance": relative_luminance(value),
                    "contrast_white": contrast_ratio(value, "#ffffff"),
                    "contrast_black": contrast_ratio(value, "#000000"),
                }
            )
    return pd.DataFrame(rows)


def _wcag_level(ratio: float) -> str:
    if ratio >= 7.0:
        return "AAA"
    if ratio >= WCAG_AA_NORMAL:
        return "AA"
    if ratio >= WCAG_AA_LARGE:
        return "AA grande"
    return "-"


def add_text_recommendation(df: pd.DataFrame) -> pd.DataFrame:
    """
    Añade el color de texto recomendado sobre cada tono y su nivel WCAG.
    """
    df = df.copy()
    use_white = df["contrast_white"] >= df["contrast_black"]
    df["text_color"] = use_white.map({True: "#ffffff", False: "#000000"})
    best = df[["contrast_white", "contrast_black"]].max(axis=1)
    df["wcag"] = best.map(_wcag_level)
    return df


__all__ = [
    "WCAG_AA_NORMAL",
    "WCAG_AA_LARGE",
    "scales_to_frame",
    "add_text_recommendation",
]
