# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the PDF export.

Test Coverage:
1. A valid PDF is produced for a result alone
2. Proposal content (including markup characters) is accepted
3. Unusable image payloads and fonts are skipped, not raised
"""

from __future__ import annotations

from sahm.analysis import FeasibilityResult, analyze
from sahm.proposal import AnalysisSection, ProposalContent, placeholder_content
from sahm.reporting import export_pdf


def _is_pdf(data: bytes) -> bool:
    return data.startswith(b"%PDF") and b"%%EOF" in data[-1024:]


def test_export_result_only(reference_result: FeasibilityResult):
    assert _is_pdf(export_pdf(reference_result))


def test_export_with_proposal(reference_result: FeasibilityResult):
    content = ProposalContent(
        executive_summary="Returns < 60% & risks > 0",
        investor_analysis=AnalysisSection(text="Investor notes"),
    )
    with_content = export_pdf(reference_result, content)

    assert _is_pdf(with_content)
    assert len(with_content) > len(export_pdf(reference_result))


def test_invalid_image_skipped(reference_result: FeasibilityResult):
    content = ProposalContent(executive_summary="x", conceptual_image="not-an-image")
    assert _is_pdf(export_pdf(reference_result, content))


def test_missing_font_falls_back(reference_result: FeasibilityResult):
    data = export_pdf(reference_result, placeholder_content(), font_path="/nonexistent/font.ttf")
    assert _is_pdf(data)


def test_inconsistent_density_and_no_installments(inconsistent_density_inputs):
    result = analyze(inconsistent_density_inputs.copy(updates={"installments": []}))
    assert _is_pdf(result.reporting.pdf())
