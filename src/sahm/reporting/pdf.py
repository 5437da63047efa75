# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
PDF export of a feasibility result.

Tables use English labels and western digits so the document renders with
reportlab's built-in fonts. Persian free text (project name, proposal
sections) needs a Unicode font; pass ``font_path`` pointing at a TTF file
(e.g. Vazirmatn) to embed one. Without it those glyphs render as boxes.
"""

from __future__ import annotations

import base64
import binascii
import logging
from datetime import datetime
from io import BytesIO
from typing import TYPE_CHECKING, List, Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont
from reportlab.platypus import (
    Image,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from ..utils.formatting import format_currency, format_percentage, format_shamsi_date

if TYPE_CHECKING:
    from ..analysis.results import FeasibilityResult
    from ..proposal.content import ProposalContent

logger = logging.getLogger(__name__)

TEXT_FONT_NAME = "SahmText"

_TABLE_STYLE = TableStyle(
    [
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2E5984")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONT", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
    ]
)


def _money(value: float) -> str:
    return format_currency(value, persian=False)


def _percent(value: float) -> str:
    return format_percentage(value, persian=False)


def _register_text_font(font_path: Optional[str]) -> Optional[str]:
    if not font_path:
        return None
    try:
        pdfmetrics.registerFont(TTFont(TEXT_FONT_NAME, font_path))
    except (OSError, TTFError) as e:
        logger.warning(f"Could not load PDF font {font_path}: {e}")
        return None
    return TEXT_FONT_NAME


def _table(rows: List[List[str]], col_widths: List[float]) -> Table:
    table = Table(rows, colWidths=col_widths)
    table.setStyle(_TABLE_STYLE)
    return table


def _image(encoded: str, width: float) -> Optional[Image]:
    """Flowable for a base64 image, or None when the payload is unusable."""
    try:
        raw = base64.b64decode(encoded, validate=True)
        image = Image(BytesIO(raw))
    except (binascii.Error, OSError, ValueError) as e:
        logger.warning(f"Skipping proposal image in PDF: {e}")
        return None
    scale = width / image.imageWidth
    image.drawWidth = width
    image.drawHeight = image.imageHeight * scale
    return image


def export_pdf(
    result: "FeasibilityResult",
    content: Optional["ProposalContent"] = None,
    font_path: Optional[str] = None,
) -> bytes:
    """
    Render a feasibility result as a PDF document.

    Sections: key metrics, density check, scenario comparison, installment
    schedule, and (when ``content`` is given) the proposal narrative.

    Args:
        result: Output of ``sahm.analysis.analyze``
        content: Optional generated proposal content
        font_path: Optional TTF font used for free-text paragraphs

    Returns:
        PDF file contents
    """
    buf = BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=A4,
        leftMargin=2 * cm,
        rightMargin=2 * cm,
        topMargin=2 * cm,
        bottomMargin=2 * cm,
        title=result.inputs.project_name,
    )
    styles = getSampleStyleSheet()
    text_font = _register_text_font(font_path)
    body = styles["Normal"]
    if text_font:
        body = ParagraphStyle("SahmBody", parent=body, fontName=text_font, leading=16)

    inputs = result.inputs
    metrics = result.metrics
    story = []

    # Header
    story.append(Paragraph(escape(inputs.project_name), styles["Title"]))
    story.append(
        Paragraph(
            f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')} "
            f"({format_shamsi_date(persian=False)})",
            styles["Normal"],
        )
    )
    story.append(
        Paragraph(
            f"Feasibility: <b>{result.label.value}</b> "
            f"(realistic annual ROI {_percent(result.realistic.annual_roi_percent)} "
            f"vs threshold {_percent(result.threshold_rate)})",
            styles["Normal"],
        )
    )
    story.append(Spacer(1, 12))

    # Key metrics
    story.append(Paragraph("<b>Key Metrics</b>", styles["Heading2"]))
    key_rows = [
        ["Metric", "Value"],
        ["Total duration (months)", f"{metrics.total_duration_months:g}"],
        ["Land cost per m²", _money(metrics.land_cost_per_meter)],
        ["Construction cost per m²", _money(metrics.total_base_construction_cost_per_meter)],
        ["Cost per m² with overhead", _money(metrics.total_cost_per_meter_with_overhead)],
        ["Market price per m²", _money(inputs.market_price_per_meter)],
        ["Initial value gap per m²", _money(metrics.initial_value_gap_per_meter)],
        ["Total cost to buyer (per share)", _money(metrics.total_cost_to_buyer)],
        ["Average unit size (m²)", f"{metrics.average_unit_size:.1f}"],
        ["Estimated unit count", str(metrics.estimated_unit_count)],
        ["Total project cost", _money(metrics.total_project_cost)],
        ["Total project revenue", _money(metrics.total_project_revenue)],
        ["Total project profit", _money(metrics.total_project_profit)],
        ["Construction progress", f"{result.progress.progress_percentage}%"],
    ]
    story.append(_table(key_rows, [9 * cm, 6 * cm]))
    story.append(Spacer(1, 10))

    # Density check
    occupancy = metrics.occupancy
    story.append(Paragraph("<b>Density Check</b>", styles["Heading2"]))
    density_rows = [
        ["Area", "m²"],
        ["Parking (occupancy-derived)", _money(occupancy.parking_area)],
        ["Ground floor (occupancy-derived)", _money(occupancy.ground_floor_area)],
        ["Residential (occupancy-derived)", _money(occupancy.residential_area)],
        ["Computed gross", _money(occupancy.computed_gross_area)],
        ["Declared gross", _money(occupancy.declared_gross_area)],
        ["Difference", f"{_money(occupancy.area_difference)} ({_percent(occupancy.difference_percentage)})"],
    ]
    story.append(_table(density_rows, [9 * cm, 6 * cm]))
    if not occupancy.is_consistent:
        story.append(
            Paragraph(
                "Declared gross area is inconsistent with the occupancy percentages.",
                styles["Italic"],
            )
        )
    story.append(Spacer(1, 10))

    # Scenarios
    story.append(Paragraph("<b>Scenario Comparison (per share)</b>", styles["Heading2"]))
    scenario_rows = [["", *[s.value for s, _ in result.scenarios.items()]]]
    outcomes = [r for _, r in result.scenarios.items()]
    scenario_rows += [
        ["Market growth", *[_percent(r.market_growth_rate_percent) for r in outcomes]],
        ["Value after commission", *[_money(r.future_value_after_commission) for r in outcomes]],
        ["Buyer profit", *[_money(r.buyer_profit) for r in outcomes]],
        ["Total ROI", *[_percent(r.total_roi_percent) for r in outcomes]],
        ["Annual ROI", *[_percent(r.annual_roi_percent) for r in outcomes]],
    ]
    story.append(_table(scenario_rows, [5 * cm, 4 * cm, 4 * cm, 4 * cm]))
    story.append(Spacer(1, 10))

    # Installments
    if inputs.installments:
        story.append(Paragraph("<b>Installment Schedule</b>", styles["Heading2"]))
        installment_rows = [["#", "Due month", "Amount"]]
        installment_rows += [
            [str(i.id), f"{i.due_month:g}", _money(i.amount)] for i in inputs.installments
        ]
        story.append(_table(installment_rows, [3 * cm, 5 * cm, 7 * cm]))
        story.append(Spacer(1, 10))

    # Proposal narrative
    if content is not None:
        sections = [
            ("Executive Summary", content.executive_summary),
            ("Architecture", content.architectural_deep_dive),
            ("Location & Access", content.location_and_access_analysis),
            ("Financial Model", content.financial_model_and_profitability),
            ("Investor Value Proposition", content.investor_value_proposition),
            ("Risks & Mitigation", content.risk_and_mitigation),
            ("Investor Analysis", content.investor_analysis.text),
            ("Cooperative Analysis", content.cooperative_analysis.text),
        ]
        for title, text in sections:
            if not text:
                continue
            story.append(Paragraph(f"<b>{title}</b>", styles["Heading2"]))
            story.append(Paragraph(escape(text), body))
            story.append(Spacer(1, 8))
        if content.has_image:
            image = _image(content.conceptual_image, doc.width)
            if image is not None:
                story.append(image)

    story.append(Spacer(1, 10))
    story.append(
        Paragraph(
            "Construction costs are provisional and subject to cooperative general "
            "assembly review. All results are estimates and not financial advice.",
            styles["Italic"],
        )
    )

    doc.build(story)
    buf.seek(0)
    logger.debug(f"Exported PDF for '{inputs.project_name}' ({buf.getbuffer().nbytes} bytes)")
    return buf.getvalue()
