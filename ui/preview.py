"""
Fragmentos HTML para la vista previa del design system.

Funciones puras: reciben tokens ya calculados y devuelven markup que la app
inserta con `st.markdown(..., unsafe_allow_html=True)`.
"""

from __future__ import annotations

from html import escape
from typing import Mapping

from src.tokens.design_tokens import DesignConfig, DesignTokens

SAMPLE_TEXT = "The quick brown fox jumps"


def swatch_grid_html(name: str, scale: Mapping[int, str]) -> str:
    cells = "".join(
        f'<div class="swatch">'
        f'<div class="swatch-color" style="background-color:{value};" title="{value}"></div>'
        f'<span class="swatch-shade">{shade}</span>'
        f"</div>"
        for shade, value in scale.items()
    )
    return f'<p class="palette-label">{escape(name)}</p><div class="swatch-grid">{cells}</div>'


def palettes_html(tokens: DesignTokens) -> str:
    return "".join(
        swatch_grid_html(name.capitalize(), scale) for name, scale in tokens.colors.items()
    )


def type_scale_html(tokens: DesignTokens, body_font: str, heading_font: str) -> str:
    family = escape(tokens.typography.font_family["sans"], quote=True)
    rows = "".join(
        f'<div class="token-row"><span class="token-key">{key}</span>'
        f'<span style="font-size:{value}; font-family:{family};">{SAMPLE_TEXT}</span></div>'
        for key, value in tokens.typography.font_size.items()
    )
    fonts = (
        f'<p class="token-value"><b>Cuerpo:</b> {escape(body_font)}</p>'
        f'<p class="token-value"><b>Títulos:</b> {escape(heading_font)}</p>'
    )
    return f'<div class="token-panel">{rows}<hr/>{fonts}</div>'


def spacing_html(tokens: DesignTokens, accent: str) -> str:
    secondary = tokens.colors["secondary"][500]
    rows = "".join(
        f'<div class="token-row"><span class="token-key">{key}</span>'
        f'<div class="spacing-bar" style="width:{value}; '
        f'background:linear-gradient(90deg, {accent}, {secondary});"></div>'
        f'<span class="token-value">{value}</span></div>'
        for key, value in tokens.spacing.items()
    )
    return f'<div class="token-panel">{rows}</div>'


def buttons_html(tokens: DesignTokens) -> str:
    primary = tokens.colors["primary"][500]
    secondary = tokens.colors["secondary"][500]
    family = escape(tokens.typography.font_family["sans"], quote=True)
    return (
        f'<span class="preview-button" style="background:{primary}; color:#ffffff; font-family:{family};">Primary</span>'
        f'<span class="preview-button" style="background:{secondary}; color:#ffffff; font-family:{family};">Secondary</span>'
        f'<span class="preview-button" style="border:2px solid {primary}; font-family:{family};">Outline</span>'
    )


def cards_html(config: DesignConfig, tokens: DesignTokens) -> str:
    family = escape(tokens.typography.font_family["sans"], quote=True)
    heading = escape(config.heading_font or tokens.typography.font_family["sans"], quote=True)
    cards = []
    for label, palette in (("Primary", "primary"), ("Secondary", "secondary")):
        border = tokens.colors[palette][500]
        cards.append(
            f'<div class="preview-card" style="border-top:4px solid {border};">'
            f'<h5 style="font-family:{heading};">{label} Card</h5>'
            f'<p style="font-family:{family};">Ejemplo de tarjeta con tu design system.</p>'
            f"</div>"
        )
    return "".join(cards)


def alerts_html(config: DesignConfig, tokens: DesignTokens) -> str:
    family = escape(tokens.typography.font_family["sans"], quote=True)
    alerts = []
    for label, color in (
        ("Success", config.success_color),
        ("Warning", config.warning_color),
        ("Error", config.error_color),
    ):
        # Sufijo hex de 2 dígitos: ~12% de opacidad para el fondo.
        alerts.append(
            f'<div class="preview-alert" style="background-color:{color}20; border-left:4px solid {color};">'
            f'<p style="color:{color}; font-weight:600; font-family:{family};">{label}</p>'
            f'<p style="font-family:{family};">Mensaje de alerta de tipo {label.lower()}.</p>'
            f"</div>"
        )
    return "".join(alerts)


__all__ = [
    "SAMPLE_TEXT",
    "swatch_grid_html",
    "palettes_html",
    "type_scale_html",
    "spacing_html",
    "buttons_html",
    "cards_html",
    "alerts_html",
]
