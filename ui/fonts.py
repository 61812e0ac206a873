from __future__ import annotations

from typing import Iterable, List
from urllib.parse import quote_plus

import streamlit as st

GOOGLE_FONTS_CSS_URL = "https://fonts.googleapis.com/css2"


def filter_fonts(query: str, fonts: Iterable[str]) -> List[str]:
    query = query.strip().lower()
    if not query:
        return list(fonts)
    return [font for font in fonts if query in font.lower()]


def google_fonts_url(families: Iterable[str]) -> str:
    """URL de la hoja de estilos de Google Fonts para las familias dadas (sin duplicados)."""
    unique: List[str] = []
    for family in families:
        name = family.strip()
        if name and name not in unique:
            unique.append(name)
    params = "&".join(f"family={quote_plus(name)}:wght@300;400;500;600;700" for name in unique)
    return f"{GOOGLE_FONTS_CSS_URL}?{params}&display=swap"


def load_google_fonts(families: Iterable[str]) -> None:
    # El navegador descarga las fuentes en segundo plano; no se espera respuesta.
    st.markdown(
        f'<link rel="stylesheet" href="{google_fonts_url(families)}">',
        unsafe_allow_html=True,
    )


__all__ = ["GOOGLE_FONTS_CSS_URL", "filter_fonts", "google_fonts_url", "load_google_fonts"]
