from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from src.tokens.color_scale import generate_color_scale

DEFAULT_ACCENT = "#6366f1"


@dataclass(frozen=True)
class AppTheme:
    theme: str
    colors: Mapping[str, str]
    typography: Mapping[str, str]
    radius: Mapping[str, str]
    shadows: Mapping[str, str]
    spacing: Mapping[str, str]
    motion: Mapping[str, str]


def normalize_theme(theme: str) -> str:
    return "dark" if str(theme).strip().lower() == "dark" else "light"


def get_app_theme(theme: str = "light", accent: str = DEFAULT_ACCENT) -> AppTheme:
    """
    Tokens de la interfaz del generador (no del design system exportado).

    El acento sigue al color primario elegido por el usuario.
    """
    normalized_theme = normalize_theme(theme)
    accent_scale = generate_color_scale(accent)

    if normalized_theme == "dark":
        colors = {
            "accent": accent_scale[400],
            "accent_deep": accent_scale[600],
            "accent_soft": accent_scale[900],
            "bg": "#0f172a",
            "surface": "rgba(30,41,59,0.9)",
            "surface_alt": "rgba(15,23,42,0.5)",
            "code_bg": "#020617",
            "stroke": "#334155",
            "text_primary": "#f8fafc",
            "text_secondary": "#cbd5e1",
            "text_muted": "#94a3b8",
        }
        shadows = {
            "card": "0 20px 25px -5px rgba(0,0,0,0.45)",
            "swatch": "0 4px 6px -1px rgba(0,0,0,0.5)",
        }
    else:
        colors = {
            "accent": accent_scale[500],
            "accent_deep": accent_scale[700],
            "accent_soft": accent_scale[50],
            "bg": "#f5f3ff",
            "surface": "rgba(255,255,255,0.9)",
            "surface_alt": "#f8fafc",
            "code_bg": "#0f172a",
            "stroke": "#e2e8f0",
            "text_primary": "#0f172a",
            "text_secondary": "#334155",
            "text_muted": "#475569",
        }
        shadows = {
            "card": "0 20px 25px -5px rgba(15,23,42,0.10)",
            "swatch": "0 4px 6px -1px rgba(15,23,42,0.12)",
        }

    typography = {
        "body": '"Inter", system-ui, -apple-system, "Segoe UI", sans-serif',
        "mono": 'ui-monospace, "SFMono-Regular", Menlo, Consolas, monospace',
    }
    radius = {"card": "16px", "swatch": "8px", "button": "8px"}
    spacing = {"xs": "0.25rem", "sm": "0.5rem", "md": "1rem", "lg": "1.5rem"}
    motion = {"fast": "150ms", "normal": "300ms", "ease": "cubic-bezier(0.4, 0, 0.2, 1)"}

    return AppTheme(
        theme=normalized_theme,
        colors=colors,
        typography=typography,
        radius=radius,
        shadows=shadows,
        spacing=spacing,
        motion=motion,
    )


__all__ = ["DEFAULT_ACCENT", "AppTheme", "normalize_theme", "get_app_theme"]
