"""
Tests de la capa de interfaz que no necesitan un servidor de Streamlit.
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from src.tokens.color_scale import generate_color_scale
from src.tokens.design_tokens import DesignConfig, generate_design_tokens
from ui.fonts import filter_fonts, google_fonts_url
from ui.preview import (
    alerts_html,
    buttons_html,
    cards_html,
    palettes_html,
    spacing_html,
    type_scale_html,
)
from ui.styles import _build_global_css
from ui.tokens import DEFAULT_ACCENT, get_app_theme, normalize_theme

APP_PATH = Path(__file__).resolve().parent.parent / "app_streamlit.py"


class TestAppTheme:
    @pytest.mark.parametrize(
        "value, expected",
        [("dark", "dark"), (" DARK ", "dark"), ("light", "light"), ("sepia", "light"), ("", "light")],
    )
    def test_normalize_theme(self, value, expected):
        assert normalize_theme(value) == expected

    def test_light_accent_follows_scale(self):
        scale = generate_color_scale(DEFAULT_ACCENT)
        theme = get_app_theme("light")
        assert theme.theme == "light"
        assert theme.colors["accent"] == DEFAULT_ACCENT
        assert theme.colors["accent_deep"] == scale[700]

    def test_dark_accent_is_lighter(self):
        scale = generate_color_scale("#0ea5e9")
        theme = get_app_theme("dark", "#0ea5e9")
        assert theme.colors["accent"] == scale[400]
        assert theme.colors["accent_soft"] == scale[900]

    def test_global_css(self):
        css = _build_global_css("light", DEFAULT_ACCENT)
        assert css.startswith("<style>")
        assert css.endswith("</style>")
        assert "--ui-accent: #6366f1;" in css
        assert ".swatch-grid" in css


class TestFonts:
    def test_google_fonts_url(self):
        url = google_fonts_url(["Inter", "Open Sans", "Inter"])
        assert url == (
            "https://fonts.googleapis.com/css2"
            "?family=Inter:wght@300;400;500;600;700"
            "&family=Open+Sans:wght@300;400;500;600;700"
            "&display=swap"
        )

    def test_filter_fonts(self):
        fonts = ["Inter", "Roboto", "Roboto Mono", "Lora"]
        assert filter_fonts("rob", fonts) == ["Roboto", "Roboto Mono"]
        assert filter_fonts("  ", fonts) == fonts
        assert filter_fonts("zzz", fonts) == []


class TestPreviewHtml:
    def test_palettes(self, scenario_tokens):
        html = palettes_html(scenario_tokens)
        assert html.count('class="swatch-color"') == 66
        assert "background-color:#6366f1;" in html

    def test_type_scale_escapes_font_names(self):
        config = DesignConfig("#6366f1", font_family='"Open Sans", sans-serif')
        tokens = generate_design_tokens(config)
        html = type_scale_html(tokens, "Open Sans", "<Lora>")
        assert "&quot;Open Sans&quot;, sans-serif" in html
        assert "&lt;Lora&gt;" in html
        assert html.count('class="token-row"') == 9

    def test_spacing_uses_token_widths(self, scenario_tokens):
        html = spacing_html(scenario_tokens, "#6366f1")
        assert "width:16px;" in html
        assert html.count('class="spacing-bar"') == 8

    def test_components(self, full_config, full_tokens):
        assert buttons_html(full_tokens).count('class="preview-button"') == 3
        assert "Playfair Display" in cards_html(full_config, full_tokens)
        alerts = alerts_html(full_config, full_tokens)
        assert alerts.count('class="preview-alert"') == 3
        assert "background-color:#22c55e20;" in alerts


class TestAppShell:
    def test_app_renders_without_exceptions(self):
        at = AppTest.from_file(str(APP_PATH), default_timeout=60).run()
        assert not at.exception
        assert len(at.tabs) == 5
        assert not at.warning

    def test_out_of_range_manual_color_keeps_last_bundle(self):
        at = AppTest.from_file(str(APP_PATH), default_timeout=60).run()
        at.text_input[0].input("rgb(300, 0, 0)").run()
        assert not at.exception
        assert "canal fuera de rango" in at.warning[0].value
        css = at.code[0].value
        assert "  --color-primary-500: #6366f1;" in css
