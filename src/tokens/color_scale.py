"""
Generación de escalas de color a partir de un color base.

El color base se ancla en el tono 500. Los tonos claros (50-400) y oscuros
(600-950) se obtienen desplazando la luminosidad L* en CIE Lab en pasos
fijos, de modo que pasos iguales se perciben como saltos visuales iguales.
Los valores fuera de gama se recortan al volver a sRGB.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Any, Mapping, Tuple

import numpy as np
from PIL import ImageColor

from src.tokens.errors import InvalidColorError

logger = logging.getLogger(__name__)

ColorScale = Mapping[int, str]

SHADE_KEYS: Tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

# Desplazamiento de L* en unidades de LAB_STEP; positivo aclara, negativo oscurece.
SHADE_STEPS: Mapping[int, float] = MappingProxyType(
    {
        50: 2.5,
        100: 2.0,
        200: 1.5,
        300: 1.0,
        400: 0.5,
        500: 0.0,
        600: -0.5,
        700: -1.0,
        800: -1.5,
        900: -2.0,
        950: -2.5,
    }
)
LAB_STEP = 18.0

# Blanco de referencia D65
_WHITE = np.array([0.950470, 1.0, 1.088830])
_T0 = 4 / 29
_T1 = 6 / 29
_T2 = 3 * _T1**2
_T3 = _T1**3

_RGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ]
)
_XYZ_TO_RGB = np.array(
    [
        [3.2404542, -1.5371385, -0.4985314],
        [-0.9692660, 1.8760108, 0.0415560],
        [0.0556434, -0.2040259, 1.0572252],
    ]
)

_BARE_HEX_RE = re.compile(r"^(?:[0-9a-f]{3}|[0-9a-f]{6})$")


def parse_color(color: Any) -> Tuple[int, int, int]:
    """
    Interpreta un color en notación hex, nombre CSS, rgb(), hsl() o hsv().

    El canal alfa, si existe, se descarta.
    """
    if not isinstance(color, str):
        raise InvalidColorError(color, "se esperaba un string")

    text = color.strip().lower()
    if not text:
        raise InvalidColorError(color, "string vacío")
    if _BARE_HEX_RE.match(text):
        text = f"#{text}"

    try:
        rgb = ImageColor.getrgb(text)
    except ValueError as exc:
        raise InvalidColorError(color, str(exc)) from exc

    r, g, b = rgb[:3]
    # ImageColor no valida el rango en rgb()/hsl()/hsv(): rgb(300, 0, 0) llega tal cual.
    if any(not 0 <= channel <= 255 for channel in (r, g, b)):
        raise InvalidColorError(color, "canal fuera de rango")
    return int(r), int(g), int(b)


def rgb_to_hex(rgb: Tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f"#{r:02x}{g:02x}{b:02x}"


def normalize_hex(color: Any) -> str:
    """Devuelve el color como `#rrggbb` en minúsculas."""
    return rgb_to_hex(parse_color(color))


def _rgb_to_lab(rgb: np.ndarray) -> np.ndarray:
    channels = rgb / 255.0
    linear = np.where(
        channels <= 0.04045,
        channels / 12.92,
        ((channels + 0.055) / 1.055) ** 2.4,
    )
    xyz = (_RGB_TO_XYZ @ linear) / _WHITE
    f = np.where(xyz > _T3, np.cbrt(xyz), xyz / _T2 + _T0)

    lightness = max(116.0 * f[1] - 16.0, 0.0)
    return np.array([lightness, 500.0 * (f[0] - f[1]), 200.0 * (f[1] - f[2])])


def _lab_to_rgb(lab: np.ndarray) -> np.ndarray:
    """Convierte una matriz (n, 3) de Lab a sRGB en 0-255 recortado y redondeado."""
    fy = (lab[:, 0] + 16.0) / 116.0
    fx = fy + lab[:, 1] / 500.0
    fz = fy - lab[:, 2] / 200.0
    f = np.stack([fx, fy, fz], axis=1)

    xyz = np.where(f > _T1, f**3, _T2 * (f - _T0)) * _WHITE
    linear = xyz @ _XYZ_TO_RGB.T
    srgb = np.where(
        linear <= 0.00304,
        12.92 * linear,
        1.055 * np.power(np.maximum(linear, 0.0), 1 / 2.4) - 0.055,
    )
    return np.floor(np.clip(srgb * 255.0, 0.0, 255.0) + 0.5).astype(int)


def lab_lightness(color: Any) -> float:
    """Luminosidad perceptual L* (0-100) de un color."""
    rgb = np.array(parse_color(color), dtype=float)
    return float(_rgb_to_lab(rgb)[0])


def relative_luminance(color: Any) -> float:
    """Luminancia relativa WCAG 2.x."""
    channels = np.array(parse_color(color), dtype=float) / 255.0
    linear = np.where(
        channels <= 0.03928,
        channels / 12.92,
        ((channels + 0.055) / 1.055) ** 2.4,
    )
    return float(linear @ np.array([0.2126, 0.7152, 0.0722]))


def contrast_ratio(foreground: Any, background: Any) -> float:
    lum_a = relative_luminance(foreground)
    lum_b = relative_luminance(background)
    lighter, darker = max(lum_a, lum_b), min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def generate_color_scale(base_color: Any) -> ColorScale:
    """
    Genera una escala de 11 tonos a partir de un color base.

    El tono 500 es exactamente el color base normalizado a `#rrggbb`. Lanza
    InvalidColorError si el color no se puede interpretar.
    """
    rgb = parse_color(base_color)
    base_hex = rgb_to_hex(rgb)

    base_lab = _rgb_to_lab(np.array(rgb, dtype=float))
    steps = np.array([SHADE_STEPS[k] for k in SHADE_KEYS])
    labs = np.tile(base_lab, (len(SHADE_KEYS), 1))
    labs[:, 0] = labs[:, 0] + LAB_STEP * steps

    shades = {}
    for key, channels in zip(SHADE_KEYS, _lab_to_rgb(labs)):
        shades[key] = base_hex if key == 500 else rgb_to_hex(tuple(int(c) for c in channels))

    logger.debug("Escala de color generada para %s", base_hex)
    return MappingProxyType(shades)


__all__ = [
    "ColorScale",
    "SHADE_KEYS",
    "SHADE_STEPS",
    "LAB_STEP",
    "parse_color",
    "rgb_to_hex",
    "normalize_hex",
    "lab_lightness",
    "relative_luminance",
    "contrast_ratio",
    "generate_color_scale",
]
