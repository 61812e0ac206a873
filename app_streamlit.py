from __future__ import annotations

from typing import Dict, Optional, Tuple

import altair as alt
import pandas as pd
import streamlit as st

from src.config import (
    APP_VERSION,
    DEFAULT_BASE_SPACING,
    DEFAULT_ERROR_COLOR,
    DEFAULT_FONT,
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_SUCCESS_COLOR,
    DEFAULT_UI_SECONDARY_COLOR,
    DEFAULT_WARNING_COLOR,
    GOOGLE_FONTS,
    SPACING_MAX_PX,
    SPACING_MIN_PX,
)
from src.export.build_exports import EXPORT_FILENAMES, EXPORT_MIME_TYPES, render_export
from src.export.css_variables import export_to_css_variables
from src.export.tailwind_config import export_to_tailwind_config
from src.features.palette_metrics import add_text_recommendation, scales_to_frame
from src.tokens.design_tokens import DesignConfig, DesignTokens, generate_design_tokens
from src.tokens.errors import InvalidColorError
from ui.fonts import filter_fonts, load_google_fonts
from ui.preview import (
    alerts_html,
    buttons_html,
    cards_html,
    palettes_html,
    spacing_html,
    type_scale_html,
)
from ui.styles import inject_global_styles

EXPORT_LABELS: Dict[str, str] = {
    "css": "CSS",
    "tailwind": "Tailwind",
    "json": "JSON",
    "pdf": "PDF",
}


# ---------------------------------------------------------------------------
# Motor de tokens
# ---------------------------------------------------------------------------

@st.cache_resource
def build_tokens(
    primary_color: str,
    secondary_color: str,
    base_spacing: int,
    font_family: str,
) -> DesignTokens:
    # El bundle es inmutable, se puede compartir entre reruns sin copiarlo.
    config = DesignConfig(
        primary_color=primary_color,
        secondary_color=secondary_color,
        base_spacing=base_spacing,
        font_family=font_family,
    )
    return generate_design_tokens(config)


def resolve_tokens(config: DesignConfig) -> Tuple[DesignConfig, DesignTokens, Optional[str]]:
    """
    Devuelve (config, tokens, error).

    Si la configuración nueva no es válida se conserva el último bundle
    válido guardado en la sesión.
    """
    try:
        tokens = build_tokens(
            config.primary_color,
            config.secondary_color,
            config.base_spacing,
            config.font_family,
        )
    except InvalidColorError as exc:
        last_valid = st.session_state.get("last_valid")
        if last_valid is None:
            fallback = DesignConfig(
                primary_color=DEFAULT_PRIMARY_COLOR,
                secondary_color=DEFAULT_UI_SECONDARY_COLOR,
                base_spacing=DEFAULT_BASE_SPACING,
                font_family=f"{DEFAULT_FONT}, system-ui, sans-serif",
                heading_font=DEFAULT_FONT,
            )
            last_valid = (fallback, generate_design_tokens(fallback))
        return last_valid[0], last_valid[1], str(exc)

    st.session_state["last_valid"] = (config, tokens)
    return config, tokens, None


# ---------------------------------------------------------------------------
# Panel de configuración
# ---------------------------------------------------------------------------

def render_sidebar() -> Tuple[DesignConfig, str, str, bool]:
    sidebar = st.sidebar
    sidebar.header("Configuración")
    dark_mode = sidebar.toggle("Modo oscuro", value=False)

    sidebar.subheader("🎨 Colores")
    primary = sidebar.color_picker("Primario", DEFAULT_PRIMARY_COLOR)
    secondary = sidebar.color_picker("Secundario", DEFAULT_UI_SECONDARY_COLOR)
    with sidebar.expander("Entrada manual (hex, nombre CSS, rgb(), hsl())"):
        primary_text = st.text_input("Primario", value="", placeholder=primary)
        secondary_text = st.text_input("Secundario", value="", placeholder=secondary)

    s1, s2, s3 = sidebar.columns(3)
    success = s1.color_picker("Success", DEFAULT_SUCCESS_COLOR)
    warning = s2.color_picker("Warning", DEFAULT_WARNING_COLOR)
    error = s3.color_picker("Error", DEFAULT_ERROR_COLOR)

    sidebar.subheader("✍️ Tipografía")
    font_search = sidebar.text_input("Buscar fuente (Google Fonts)", placeholder="Buscar...")
    body_options = filter_fonts(font_search, GOOGLE_FONTS) or [DEFAULT_FONT]
    body_index = body_options.index(DEFAULT_FONT) if DEFAULT_FONT in body_options else 0
    body_font = sidebar.selectbox("Fuente cuerpo", body_options, index=body_index)
    heading_font = sidebar.selectbox(
        "Fuente títulos", GOOGLE_FONTS, index=GOOGLE_FONTS.index(DEFAULT_FONT)
    )

    sidebar.subheader("📏 Espaciado")
    base_spacing = sidebar.slider(
        "Unidad base (px)",
        min_value=SPACING_MIN_PX,
        max_value=SPACING_MAX_PX,
        value=DEFAULT_BASE_SPACING,
        step=1,
    )

    config = DesignConfig(
        primary_color=primary_text.strip() or primary,
        secondary_color=secondary_text.strip() or secondary,
        base_spacing=base_spacing,
        font_family=f"{body_font}, system-ui, sans-serif",
        heading_font=heading_font,
        success_color=success,
        warning_color=warning,
        error_color=error,
    )
    return config, body_font, heading_font, dark_mode


# ---------------------------------------------------------------------------
# Gráficos Altair
# ---------------------------------------------------------------------------

def render_lightness_chart(data: pd.DataFrame, tokens: DesignTokens, dark_mode: bool) -> None:
    palettes = list(tokens.colors.keys())
    palette_colors = [tokens.colors[name][500] for name in palettes]
    label_color = "#e2e8f0" if dark_mode else "#0f172a"
    grid_color = "#334155" if dark_mode else "#e2e8f0"
    chart = (
        alt.Chart(data)
        .mark_line(point=True, strokeWidth=2.5)
        .encode(
            x=alt.X("shade:O", title="tono"),
            y=alt.Y("lightness:Q", title="luminosidad L*", scale=alt.Scale(domain=[0, 100])),
            color=alt.Color(
                "palette:N",
                sort=palettes,
                scale=alt.Scale(domain=palettes, range=palette_colors),
                title="paleta",
            ),
            tooltip=[
                alt.Tooltip("palette:N"),
                alt.Tooltip("shade:O"),
                alt.Tooltip("hex:N"),
                alt.Tooltip("lightness:Q", format=".1f"),
            ],
        )
        .properties(height=320)
        .configure_axis(labelColor=label_color, titleColor=label_color, gridColor=grid_color)
        .configure_legend(labelColor=label_color, titleColor=label_color)
        .configure_view(strokeOpacity=0)
        .configure(background="transparent")
    )
    st.altair_chart(chart, width="stretch")


# ---------------------------------------------------------------------------
# Renderizado de tabs
# ---------------------------------------------------------------------------

def render_hero() -> None:
    st.markdown(
        """
        <div class="hero-card">
          <h2 style="font-size:1.8rem;">Design System Generator</h2>
          <p>Crea tu design system en pocos clics: paletas, espaciado, tipografía y exports listos para usar.</p>
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_export_buttons(config: DesignConfig, tokens: DesignTokens) -> None:
    cols = st.columns(len(EXPORT_FILENAMES))
    for col, (kind, filename) in zip(cols, EXPORT_FILENAMES.items()):
        col.download_button(
            EXPORT_LABELS[kind],
            data=render_export(kind, config, tokens),
            file_name=filename,
            mime=EXPORT_MIME_TYPES[kind],
            width="stretch",
            key=f"export_{kind}",
        )


def render_tab_preview(tokens: DesignTokens, body_font: str, heading_font: str) -> None:
    st.markdown("### Paleta de colores")
    st.markdown(palettes_html(tokens), unsafe_allow_html=True)

    st.markdown("### Tipografía")
    st.markdown(type_scale_html(tokens, body_font, heading_font), unsafe_allow_html=True)

    st.markdown("### Espaciado")
    st.markdown(
        spacing_html(tokens, tokens.colors["primary"][500]),
        unsafe_allow_html=True,
    )


def render_tab_components(config: DesignConfig, tokens: DesignTokens) -> None:
    st.markdown("### Componentes")
    st.markdown("#### Botones")
    st.markdown(buttons_html(tokens), unsafe_allow_html=True)

    st.markdown("#### Tarjetas")
    st.markdown(
        f'<div style="display:grid; grid-template-columns:1fr 1fr; gap:1rem;">{cards_html(config, tokens)}</div>',
        unsafe_allow_html=True,
    )

    st.markdown("#### Alertas")
    st.markdown(alerts_html(config, tokens), unsafe_allow_html=True)


def render_tab_analysis(tokens: DesignTokens, dark_mode: bool) -> None:
    st.markdown("### Curva de luminosidad")
    st.caption(
        "Cada paleta debe bajar de forma monótona del tono 50 al 950; "
        "los extremos se recortan al borde de la gama sRGB."
    )
    df = add_text_recommendation(scales_to_frame(tokens))
    render_lightness_chart(df, tokens, dark_mode)

    st.markdown("### Contraste WCAG")
    table = df[["palette", "shade", "hex", "lightness", "contrast_white", "contrast_black", "text_color", "wcag"]]
    st.dataframe(
        table.style.format(
            {"lightness": "{:.1f}", "contrast_white": "{:.2f}", "contrast_black": "{:.2f}"}
        ),
        width="stretch",
        hide_index=True,
    )


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    st.set_page_config(page_title="Design System Generator", layout="wide")

    requested, body_font, heading_font, dark_mode = render_sidebar()
    config, tokens, error = resolve_tokens(requested)

    inject_global_styles("dark" if dark_mode else "light", tokens.colors["primary"][500])
    load_google_fonts([body_font, heading_font])

    render_hero()
    st.caption(f"Versión: {APP_VERSION}")
    if error:
        st.warning(f"{error}. Se mantiene el último design system válido.")

    render_export_buttons(config, tokens)

    tab1, tab2, tab3, tab4, tab5 = st.tabs(
        ["Vista previa", "Componentes", "CSS", "Tailwind", "Análisis"]
    )

    with tab1:
        render_tab_preview(tokens, body_font, heading_font)

    with tab2:
        render_tab_components(config, tokens)

    with tab3:
        st.code(export_to_css_variables(tokens), language="css")

    with tab4:
        st.code(export_to_tailwind_config(tokens), language="javascript")

    with tab5:
        render_tab_analysis(tokens, dark_mode)


if __name__ == "__main__":
    main()
