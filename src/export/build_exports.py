"""
Exporta el design system completo a disco.

Genera en EXPORTS_DIR (por defecto `exports/`):
- design-tokens.css
- tailwind.config.js
- design-system.json
- design-system.pdf
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Union

from src.config import (
    DEFAULT_BASE_SPACING,
    DEFAULT_FONT,
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_UI_SECONDARY_COLOR,
    EXPORTS_DIR,
    LOG_LEVEL,
)
from src.export.css_variables import export_to_css_variables
from src.export.json_export import export_to_json
from src.export.pdf_report import build_pdf_report
from src.export.tailwind_config import export_to_tailwind_config
from src.tokens.design_tokens import DesignConfig, DesignTokens, generate_design_tokens
from src.tokens.errors import TokenError

logger = logging.getLogger(__name__)

EXPORT_FILENAMES: Dict[str, str] = {
    "css": "design-tokens.css",
    "tailwind": "tailwind.config.js",
    "json": "design-system.json",
    "pdf": "design-system.pdf",
}

EXPORT_MIME_TYPES: Dict[str, str] = {
    "css": "text/css",
    "tailwind": "text/javascript",
    "json": "application/json",
    "pdf": "application/pdf",
}


def render_export(kind: str, config: DesignConfig, tokens: DesignTokens) -> Union[str, bytes]:
    if kind == "css":
        return export_to_css_variables(tokens)
    if kind == "tailwind":
        return export_to_tailwind_config(tokens)
    if kind == "json":
        return export_to_json(config, tokens)
    if kind == "pdf":
        return build_pdf_report(config, tokens)
    raise ValueError(f"Tipo de export desconocido: {kind!r}")


def save_export(
    content: Union[str, bytes],
    filename: str,
    directory: Optional[Path] = None,
) -> Path:
    """Escribe un export en disco y devuelve la ruta final."""
    directory = Path(directory) if directory is not None else EXPORTS_DIR
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    logger.info("Export guardado en %s", path)
    return path


def export_all(config: DesignConfig, directory: Optional[Path] = None) -> List[Path]:
    tokens = generate_design_tokens(config)
    return [
        save_export(render_export(kind, config, tokens), filename, directory)
        for kind, filename in EXPORT_FILENAMES.items()
    ]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Exporta un design system a CSS, Tailwind, JSON y PDF.")
    parser.add_argument("--primary", default=DEFAULT_PRIMARY_COLOR)
    parser.add_argument("--secondary", default=DEFAULT_UI_SECONDARY_COLOR)
    parser.add_argument("--spacing", type=float, default=DEFAULT_BASE_SPACING)
    parser.add_argument("--font", default=DEFAULT_FONT)
    parser.add_argument("--heading-font", default=None)
    parser.add_argument("--out", type=Path, default=EXPORTS_DIR)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    args = parse_args(argv)

    spacing = int(args.spacing) if float(args.spacing).is_integer() else args.spacing
    config = DesignConfig(
        primary_color=args.primary,
        secondary_color=args.secondary,
        base_spacing=spacing,
        font_family=f"{args.font}, system-ui, sans-serif",
        heading_font=args.heading_font or args.font,
    )

    try:
        paths = export_all(config, args.out)
    except TokenError as exc:
        logger.error("No se pudo generar el design system: %s", exc)
        return 1

    for path in paths:
        print(f"[OK] {path.name} guardado en {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
