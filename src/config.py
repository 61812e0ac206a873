from __future__ import annotations

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
EXPORTS_DIR = Path(os.environ.get("DSG_EXPORTS_DIR", ROOT_DIR / "exports"))
LOG_LEVEL = os.environ.get("DSG_LOG_LEVEL", "INFO").upper()

APP_VERSION = "v1.2 — generador de tokens"

# Valores iniciales del panel de configuración
DEFAULT_PRIMARY_COLOR = "#6366f1"
DEFAULT_UI_SECONDARY_COLOR = "#8b5cf6"
DEFAULT_SUCCESS_COLOR = "#22c55e"
DEFAULT_WARNING_COLOR = "#f59e0b"
DEFAULT_ERROR_COLOR = "#ef4444"
DEFAULT_BASE_SPACING = 4
DEFAULT_FONT = "Inter"

SPACING_MIN_PX = 2
SPACING_MAX_PX = 16

# Google Fonts populares
GOOGLE_FONTS = [
    "Inter", "Roboto", "Open Sans", "Lato", "Montserrat", "Poppins", "Raleway", "Nunito",
    "Playfair Display", "Merriweather", "Libre Baskerville", "Source Serif Pro",
    "Work Sans", "DM Sans", "Plus Jakarta Sans", "Manrope", "Space Grotesk",
    "Crimson Text", "Lora", "PT Serif", "Spectral", "Outfit", "Sora",
]
