# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Investment proposal: narrative content model and the Gemini-backed writers.
"""

from .content import (
    INITIAL_CONTENT,
    AnalysisSection,
    ProposalContent,
    placeholder_content,
)
from .service import (
    build_phase_prompt,
    build_proposal_prompt,
    create_client,
    generate_proposal_content,
    suggest_construction_phases,
)

__all__ = [
    "INITIAL_CONTENT",
    "AnalysisSection",
    "ProposalContent",
    "placeholder_content",
    "build_phase_prompt",
    "build_proposal_prompt",
    "create_client",
    "generate_proposal_content",
    "suggest_construction_phases",
]
