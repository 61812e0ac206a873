"""
Ensamblado del bundle completo de tokens de diseño.

Solo las escalas primary y secondary se derivan de la configuración del
usuario; neutral, success, warning y error salen de semillas fijas.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from src.tokens.color_scale import ColorScale, generate_color_scale
from src.tokens.spacing_scale import SpacingScale, generate_spacing_scale
from src.tokens.typography_scale import (
    DEFAULT_SANS,
    TypographyScale,
    generate_typography_scale,
)

logger = logging.getLogger(__name__)

DEFAULT_SECONDARY_COLOR = "#64748b"
NEUTRAL_SEED = "#71717a"
SUCCESS_SEED = "#22c55e"
WARNING_SEED = "#f59e0b"
ERROR_SEED = "#ef4444"

PALETTE_NAMES: Tuple[str, ...] = (
    "primary",
    "secondary",
    "neutral",
    "success",
    "warning",
    "error",
)

BORDER_RADIUS: Mapping[str, str] = MappingProxyType(
    {
        "none": "0",
        "sm": "0.125rem",
        "md": "0.375rem",
        "lg": "0.5rem",
        "xl": "0.75rem",
        "full": "9999px",
    }
)
SHADOWS: Mapping[str, str] = MappingProxyType(
    {
        "sm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
        "md": "0 4px 6px -1px rgb(0 0 0 / 0.1)",
        "lg": "0 10px 15px -3px rgb(0 0 0 / 0.1)",
        "xl": "0 20px 25px -5px rgb(0 0 0 / 0.1)",
    }
)


@dataclass(frozen=True)
class DesignConfig:
    primary_color: str
    secondary_color: Optional[str] = None
    base_spacing: float = 4
    font_family: Optional[str] = None
    # Campos de presentación: se muestran en la vista previa y el PDF,
    # no participan en la derivación de escalas.
    heading_font: Optional[str] = None
    success_color: str = SUCCESS_SEED
    warning_color: str = WARNING_SEED
    error_color: str = ERROR_SEED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "primaryColor": self.primary_color,
            "secondaryColor": self.secondary_color,
            "successColor": self.success_color,
            "warningColor": self.warning_color,
            "errorColor": self.error_color,
            "baseSpacing": self.base_spacing,
            "fontFamily": self.font_family,
            "headingFont": self.heading_font,
        }


@dataclass(frozen=True)
class DesignTokens:
    colors: Mapping[str, ColorScale]
    spacing: SpacingScale
    typography: TypographyScale
    border_radius: Mapping[str, str]
    shadows: Mapping[str, str]

    def to_dict(self) -> Dict[str, Any]:
        """Estructura anidada de dicts planos, con claves como en los exports."""
        return {
            "colors": {
                name: {str(shade): value for shade, value in scale.items()}
                for name, scale in self.colors.items()
            },
            "spacing": dict(self.spacing),
            "typography": self.typography.to_dict(),
            "borderRadius": dict(self.border_radius),
            "shadows": dict(self.shadows),
        }


def generate_design_tokens(config: DesignConfig) -> DesignTokens:
    """
    Construye un bundle nuevo a partir de la configuración.

    Cualquier error de validación (InvalidColorError, InvalidArgumentError)
    se propaga antes de devolver nada.
    """
    seeds = {
        "primary": config.primary_color,
        "secondary": config.secondary_color or DEFAULT_SECONDARY_COLOR,
        "neutral": NEUTRAL_SEED,
        "success": SUCCESS_SEED,
        "warning": WARNING_SEED,
        "error": ERROR_SEED,
    }
    colors = {name: generate_color_scale(seeds[name]) for name in PALETTE_NAMES}
    font_family = DEFAULT_SANS if config.font_family is None else config.font_family

    tokens = DesignTokens(
        colors=MappingProxyType(colors),
        spacing=generate_spacing_scale(config.base_spacing),
        typography=generate_typography_scale(font_family),
        border_radius=BORDER_RADIUS,
        shadows=SHADOWS,
    )
    logger.debug(
        "Tokens generados: primary=%s secondary=%s base=%s",
        seeds["primary"],
        seeds["secondary"],
        config.base_spacing,
    )
    return tokens


__all__ = [
    "DEFAULT_SECONDARY_COLOR",
    "NEUTRAL_SEED",
    "SUCCESS_SEED",
    "WARNING_SEED",
    "ERROR_SEED",
    "PALETTE_NAMES",
    "BORDER_RADIUS",
    "SHADOWS",
    "DesignConfig",
    "DesignTokens",
    "generate_design_tokens",
]
