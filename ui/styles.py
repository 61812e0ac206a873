from __future__ import annotations

from textwrap import dedent

import streamlit as st

from ui.tokens import DEFAULT_ACCENT, get_app_theme


def _build_global_css(theme: str, accent: str) -> str:
    tokens = get_app_theme(theme, accent)
    c = tokens.colors
    t = tokens.typography
    r = tokens.radius
    s = tokens.shadows
    sp = tokens.spacing
    m = tokens.motion
    is_dark = tokens.theme == "dark"

    if is_dark:
        bg_gradient = f"linear-gradient(135deg, {c['bg']} 0%, #3b0764 50%, {c['bg']} 100%)"
    else:
        bg_gradient = "linear-gradient(135deg, #eef2ff 0%, #faf5ff 50%, #fdf2f8 100%)"

    return dedent(
        f"""
        <style>
        :root {{
            --ui-accent: {c["accent"]};
            --ui-accent-deep: {c["accent_deep"]};
            --ui-accent-soft: {c["accent_soft"]};
            --ui-surface: {c["surface"]};
            --ui-surface-alt: {c["surface_alt"]};
            --ui-code-bg: {c["code_bg"]};
            --ui-stroke: {c["stroke"]};
            --ui-text-primary: {c["text_primary"]};
            --ui-text-secondary: {c["text_secondary"]};
            --ui-text-muted: {c["text_muted"]};

            --font-body: {t["body"]};
            --font-mono: {t["mono"]};

            --radius-card: {r["card"]};
            --radius-swatch: {r["swatch"]};
            --radius-button: {r["button"]};

            --shadow-card: {s["card"]};
            --shadow-swatch: {s["swatch"]};

            --space-xs: {sp["xs"]};
            --space-sm: {sp["sm"]};
            --space-md: {sp["md"]};
            --space-lg: {sp["lg"]};

            --motion-fast: {m["fast"]};
            --motion-normal: {m["normal"]};
            --motion-ease: {m["ease"]};
        }}

        html, body, .stApp {{
            font-family: var(--font-body);
            color: var(--ui-text-primary);
            -webkit-font-smoothing: antialiased;
        }}

        /* testid estable y selector antiguo como respaldo entre versiones de Streamlit */
        [data-testid="stAppViewContainer"],
        section.main {{
            min-height: 100vh;
            background: {bg_gradient};
            transition: background var(--motion-normal) var(--motion-ease);
        }}

        [data-testid="stHeader"] {{
            background: transparent;
        }}

        [data-testid="stSidebar"] > div:first-child {{
            background: var(--ui-surface);
            border-right: 1px solid var(--ui-stroke);
        }}

        [data-testid="stSidebar"] label,
        [data-testid="stSidebar"] span,
        [data-testid="stSidebar"] p {{
            color: var(--ui-text-secondary);
        }}

        h1, h2, h3, h4 {{
            color: var(--ui-text-primary);
        }}

        code, pre {{
            font-family: var(--font-mono);
        }}

        [data-testid="stCode"] pre {{
            background: var(--ui-code-bg) !important;
            border-radius: var(--radius-card);
        }}

        .stButton > button,
        [data-testid="stDownloadButton"] > button {{
            border: 0;
            border-radius: var(--radius-button);
            background: var(--ui-accent);
            color: #ffffff;
            font-weight: 600;
            box-shadow: var(--shadow-swatch);
        }}

        .stButton > button:hover,
        [data-testid="stDownloadButton"] > button:hover {{
            background: var(--ui-accent-deep);
            color: #ffffff;
        }}

        [data-testid="stTabs"] button[aria-selected="true"] {{
            color: var(--ui-accent) !important;
        }}

        .hero-card {{
            background: var(--ui-surface);
            border: 1px solid var(--ui-stroke);
            border-radius: var(--radius-card);
            padding: 1.1rem 1.4rem;
            margin-bottom: var(--space-md);
            box-shadow: var(--shadow-card);
        }}

        .hero-card h2 {{
            margin: 0;
            background: linear-gradient(90deg, var(--ui-accent), #9333ea, #db2777);
            -webkit-background-clip: text;
            background-clip: text;
            color: transparent;
        }}

        .hero-card p {{
            margin: 0.3rem 0 0 0;
            color: var(--ui-text-muted);
        }}

        .palette-label {{
            font-size: 0.75rem;
            font-weight: 700;
            text-transform: uppercase;
            letter-spacing: 0.05em;
            color: var(--ui-text-secondary);
            margin: var(--space-md) 0 var(--space-xs) 0;
        }}

        .swatch-grid {{
            display: grid;
            grid-template-columns: repeat(11, minmax(0, 1fr));
            gap: var(--space-xs);
        }}

        .swatch {{
            display: flex;
            flex-direction: column;
            align-items: center;
        }}

        .swatch-color {{
            width: 100%;
            height: 3.5rem;
            border-radius: var(--radius-swatch);
            box-shadow: var(--shadow-swatch);
            transition: transform var(--motion-fast) var(--motion-ease);
        }}

        .swatch-color:hover {{
            transform: scale(1.05);
        }}

        .swatch-shade {{
            font-size: 0.65rem;
            font-weight: 600;
            color: var(--ui-text-muted);
            margin-top: 0.2rem;
        }}

        .token-panel {{
            background: var(--ui-surface-alt);
            border-radius: var(--radius-card);
            padding: var(--space-md);
        }}

        .token-row {{
            display: flex;
            align-items: center;
            gap: var(--space-md);
            margin: var(--space-xs) 0;
        }}

        .token-key {{
            width: 3rem;
            font-size: 0.75rem;
            font-weight: 700;
            text-transform: uppercase;
            color: var(--ui-accent);
        }}

        .token-value {{
            font-size: 0.75rem;
            font-weight: 600;
            color: var(--ui-text-muted);
        }}

        .spacing-bar {{
            height: 2rem;
            border-radius: var(--radius-swatch);
        }}

        .preview-button {{
            display: inline-block;
            padding: 0.75rem 1.5rem;
            margin-right: var(--space-sm);
            border-radius: var(--radius-button);
            font-weight: 600;
            box-shadow: var(--shadow-swatch);
        }}

        .preview-card {{
            background: var(--ui-surface);
            border-radius: var(--radius-swatch);
            padding: var(--space-lg);
            box-shadow: var(--shadow-card);
        }}

        .preview-card h5 {{
            margin: 0 0 var(--space-sm) 0;
            color: var(--ui-text-primary);
        }}

        .preview-card p,
        .preview-alert p {{
            margin: 0;
            font-size: 0.875rem;
            color: var(--ui-text-secondary);
        }}

        .preview-alert {{
            padding: var(--space-md);
            border-radius: var(--radius-swatch);
            margin-bottom: var(--space-sm);
        }}

        @media (max-width: 900px) {{
            .swatch-grid {{
                grid-template-columns: repeat(6, minmax(0, 1fr));
            }}
        }}
        </style>
        """
    ).strip()


def inject_global_styles(theme: str = "light", accent: str = DEFAULT_ACCENT) -> None:
    st.markdown(_build_global_css(theme, accent), unsafe_allow_html=True)


__all__ = ["inject_global_styles"]
