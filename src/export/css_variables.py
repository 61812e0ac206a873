from __future__ import annotations

from typing import Iterator, Tuple

from src.tokens.design_tokens import DesignTokens


def iter_css_properties(tokens: DesignTokens) -> Iterator[Tuple[str, str]]:
    """
    Recorre los tokens como pares (nombre de propiedad, valor).

    El orden es parte del contrato: colores, espaciado, familias, tamaños,
    radios y sombras, cada grupo en el orden interno del bundle.
    """
    for palette, scale in tokens.colors.items():
        for shade, value in scale.items():
            yield f"--color-{palette}-{shade}", value

    for key, value in tokens.spacing.items():
        yield f"--spacing-{key}", value

    families = tokens.typography.font_family
    for key in ("sans", "serif", "mono"):
        yield f"--font-{key}", families[key]

    for key, value in tokens.typography.font_size.items():
        yield f"--text-{key}", value

    for key, value in tokens.border_radius.items():
        yield f"--radius-{key}", value

    for key, value in tokens.shadows.items():
        yield f"--shadow-{key}", value


def export_to_css_variables(tokens: DesignTokens) -> str:
    lines = [":root {"]
    lines.extend(f"  {name}: {value};" for name, value in iter_css_properties(tokens))
    lines.append("}")
    return "\n".join(lines) + "\n"


__all__ = ["iter_css_properties", "export_to_css_variables"]
