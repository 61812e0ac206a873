from __future__ import annotations

import json
from typing import Any

from src.tokens.design_tokens import DesignTokens


def _literal(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def export_to_tailwind_config(tokens: DesignTokens) -> str:
    """
    Genera un `tailwind.config.js` que extiende el tema con los tokens.

    Cada sección es el reflejo directo del bundle, sin cálculos adicionales.
    """
    data = tokens.to_dict()
    typography = data["typography"]
    sections = [
        ("colors", data["colors"]),
        ("spacing", data["spacing"]),
        ("fontFamily", typography["fontFamily"]),
        ("fontSize", typography["fontSize"]),
        ("borderRadius", data["borderRadius"]),
        ("boxShadow", data["shadows"]),
    ]
    body = "\n".join(f"      {name}: {_literal(value)}," for name, value in sections)
    return (
        "/** @type {import('tailwindcss').Config} */\n"
        "module.exports = {\n"
        "  theme: {\n"
        "    extend: {\n"
        f"{body}\n"
        "    },\n"
        "  },\n"
        "};"
    )


__all__ = ["export_to_tailwind_config"]
