from __future__ import annotations

import logging
import math
from numbers import Real
from types import MappingProxyType
from typing import Mapping, Tuple

from src.tokens.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

SpacingScale = Mapping[str, str]

SPACING_MULTIPLIERS: Mapping[str, int] = MappingProxyType(
    {
        "xs": 1,
        "sm": 2,
        "md": 4,
        "lg": 6,
        "xl": 8,
        "2xl": 12,
        "3xl": 16,
        "4xl": 24,
    }
)
SPACING_KEYS: Tuple[str, ...] = tuple(SPACING_MULTIPLIERS)


def format_px(value: float) -> str:
    """Formatea una longitud en px sin decimales sobrantes (8.0 -> '8px')."""
    if float(value).is_integer():
        return f"{int(value)}px"
    return f"{float(value)!r}px"


def generate_spacing_scale(base_unit: float = 4) -> SpacingScale:
    """
    Genera la escala de espaciado como múltiplos fijos de la unidad base.

    La unidad base debe ser un número finito y positivo; en otro caso se
    lanza InvalidArgumentError.
    """
    if isinstance(base_unit, bool) or not isinstance(base_unit, Real):
        raise InvalidArgumentError("base_unit", base_unit, "se esperaba un número")
    if not math.isfinite(base_unit) or base_unit <= 0:
        raise InvalidArgumentError("base_unit", base_unit, "debe ser finito y positivo")

    scale = {key: format_px(base_unit * mult) for key, mult in SPACING_MULTIPLIERS.items()}
    logger.debug("Escala de espaciado generada con base %s", base_unit)
    return MappingProxyType(scale)


__all__ = [
    "SpacingScale",
    "SPACING_MULTIPLIERS",
    "SPACING_KEYS",
    "format_px",
    "generate_spacing_scale",
]
