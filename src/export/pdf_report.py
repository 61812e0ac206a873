"""
Reporte PDF del design system (reportlab).

Solo dispone en página valores ya calculados por el motor de tokens.
"""

from __future__ import annotations

import logging
from datetime import datetime
from io import BytesIO
from typing import List, Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import (
    KeepTogether,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from src.tokens.design_tokens import DesignConfig, DesignTokens

logger = logging.getLogger(__name__)

COLOR_TITLE = "#6366f1"
COLOR_MUTED = "#646464"
SWATCH_WIDTH = 15 * mm
SWATCH_HEIGHT = 10 * mm


def _config_lines(config: DesignConfig) -> List[str]:
    return [
        f"Color primario: {config.primary_color}",
        f"Color secundario: {config.secondary_color or '-'}",
        f"Success: {config.success_color}",
        f"Warning: {config.warning_color}",
        f"Error: {config.error_color}",
        f"Fuente cuerpo: {config.font_family or '-'}",
        f"Fuente títulos: {config.heading_font or '-'}",
        f"Espaciado base: {config.base_spacing}px",
    ]


def _swatch_table(scale) -> Table:
    shades = list(scale.keys())
    values = list(scale.values())
    data = [
        ["" for _ in shades],
        [str(shade) for shade in shades],
        values,
    ]
    table = Table(
        data,
        colWidths=[SWATCH_WIDTH] * len(shades),
        rowHeights=[SWATCH_HEIGHT, None, None],
    )
    style = [
        ("FONTNAME", (0, 1), (-1, -1), "Helvetica"),
        ("FONTSIZE", (0, 1), (-1, 1), 7),
        ("FONTSIZE", (0, 2), (-1, 2), 5.5),
        ("ALIGN", (0, 0), (-1, -1), "CENTER"),
        ("LEFTPADDING", (0, 0), (-1, -1), 1),
        ("RIGHTPADDING", (0, 0), (-1, -1), 1),
        ("TOPPADDING", (0, 1), (-1, -1), 1),
        ("BOTTOMPADDING", (0, 1), (-1, -1), 1),
    ]
    for idx, value in enumerate(values):
        style.append(("BACKGROUND", (idx, 0), (idx, 0), colors.HexColor(value)))
    table.setStyle(TableStyle(style))
    return table


def _key_value_table(rows, s_body: ParagraphStyle) -> Table:
    data = [
        [Paragraph(f"<b>{escape(str(key))}</b>", s_body), Paragraph(escape(str(value)), s_body)]
        for key, value in rows
    ]
    table = Table(data, colWidths=[30 * mm, 120 * mm])
    table.setStyle(
        TableStyle(
            [
                ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                ("TOPPADDING", (0, 0), (-1, -1), 1),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 1),
                ("LINEBELOW", (0, 0), (-1, -1), 0.25, colors.HexColor("#e2e8f0")),
            ]
        )
    )
    return table


def build_pdf_report(
    config: DesignConfig,
    tokens: DesignTokens,
    generated_at: Optional[datetime] = None,
) -> bytes:
    generated_at = generated_at or datetime.now()
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=20 * mm,
        rightMargin=20 * mm,
        topMargin=15 * mm,
        bottomMargin=20 * mm,
        title="Design System",
    )

    styles = getSampleStyleSheet()
    s_title = ParagraphStyle(
        "DsTitle",
        parent=styles["Title"],
        fontSize=24,
        alignment=0,
        textColor=colors.HexColor(COLOR_TITLE),
        spaceAfter=2 * mm,
    )
    s_date = ParagraphStyle(
        "DsDate",
        parent=styles["Normal"],
        fontSize=10,
        textColor=colors.HexColor(COLOR_MUTED),
        spaceAfter=6 * mm,
    )
    s_section = ParagraphStyle(
        "DsSection",
        parent=styles["Heading2"],
        fontSize=14,
        spaceBefore=5 * mm,
        spaceAfter=2 * mm,
    )
    s_body = ParagraphStyle("DsBody", parent=styles["Normal"], fontSize=10)

    story = [
        Paragraph("Design System Generator", s_title),
        Paragraph(f"Generado el {generated_at.strftime('%d/%m/%Y')}", s_date),
        Paragraph("Configuración", s_section),
    ]
    for line in _config_lines(config):
        story.append(Paragraph(escape(line), s_body))
        story.append(Spacer(1, 1 * mm))

    for name, scale in tokens.colors.items():
        story.append(
            KeepTogether(
                [
                    Paragraph(f"Paleta {name.capitalize()}", s_section),
                    _swatch_table(scale),
                ]
            )
        )

    typography = tokens.typography
    story.append(Paragraph("Escala tipográfica", s_section))
    font_rows = list(typography.font_size.items())
    font_rows.append(("Cuerpo", config.font_family or typography.font_family["sans"]))
    font_rows.append(("Títulos", config.heading_font or typography.font_family["sans"]))
    story.append(_key_value_table(font_rows, s_body))

    story.append(Paragraph("Escala de espaciado", s_section))
    story.append(_key_value_table(tokens.spacing.items(), s_body))

    story.append(Paragraph("Sombras", s_section))
    story.append(_key_value_table(tokens.shadows.items(), s_body))

    story.append(Paragraph("Border radius", s_section))
    story.append(_key_value_table(tokens.border_radius.items(), s_body))

    doc.build(story)
    pdf = buffer.getvalue()
    logger.info("Reporte PDF generado (%d bytes)", len(pdf))
    return pdf


__all__ = ["build_pdf_report"]
