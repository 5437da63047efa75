# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for the Gemini-backed proposal writer.

The model client is replaced by a MagicMock; no network access is needed.

Test Coverage:
1. Prompt construction from the project inputs
2. Successful text and image generation
3. Fallback to placeholder content on any failure
4. Construction phase suggestions
5. Client creation without an API key
"""

from __future__ import annotations

import base64
import json
from unittest.mock import MagicMock

import pytest

from sahm.core import ConstructionPhase, ProjectInputs
from sahm.core.primitives import ProposalSettings
from sahm.proposal import (
    build_phase_prompt,
    build_proposal_prompt,
    create_client,
    generate_proposal_content,
    placeholder_content,
    suggest_construction_phases,
)
from sahm.proposal.service import ProposalGenerationError

TEXT_FIELDS = [
    "executive_summary",
    "architectural_deep_dive",
    "location_and_access_analysis",
    "financial_model_and_profitability",
    "investor_value_proposition",
    "risk_and_mitigation",
    "investor_analysis",
    "cooperative_analysis",
]


@pytest.fixture
def text_payload() -> dict:
    """A complete JSON response from the text model."""
    payload = {field: f"{field} text" for field in TEXT_FIELDS}
    payload["conceptual_image_prompt"] = "modern residential towers on a podium"
    return payload


@pytest.fixture
def client(text_payload: dict) -> MagicMock:
    """Mock client answering text and image requests."""
    client = MagicMock()
    client.models.generate_content.return_value = MagicMock(text=json.dumps(text_payload))
    image_response = MagicMock()
    image_response.generated_images[0].image.image_bytes = b"\x89PNG fake"
    client.models.generate_images.return_value = image_response
    return client


@pytest.fixture
def settings() -> ProposalSettings:
    return ProposalSettings(api_key="test-key")


class TestPrompts:
    def test_proposal_prompt_mentions_project(self, reference_inputs: ProjectInputs):
        prompt = build_proposal_prompt(reference_inputs)

        assert reference_inputs.project_name in prompt
        assert reference_inputs.location in prompt
        assert "investor_analysis" in prompt
        for installment in reference_inputs.installments:
            assert installment.name in prompt

    def test_phase_prompt(self, reference_inputs: ProjectInputs):
        prompt = build_phase_prompt(reference_inputs)
        assert "duration_months" in prompt
        assert "166500" in prompt


class TestGenerateProposalContent:
    def test_success(self, reference_inputs, client, settings):
        content = generate_proposal_content(reference_inputs, client=client, settings=settings)

        assert content.executive_summary == "executive_summary text"
        assert content.investor_analysis.text == "investor_analysis text"
        assert content.cooperative_analysis.text == "cooperative_analysis text"
        assert content.conceptual_image == base64.b64encode(b"\x89PNG fake").decode("ascii")
        assert content.has_image

    def test_requests_json_from_text_model(self, reference_inputs, client, settings):
        generate_proposal_content(reference_inputs, client=client, settings=settings)

        kwargs = client.models.generate_content.call_args.kwargs
        assert kwargs["model"] == settings.text_model
        assert kwargs["config"].response_mime_type == "application/json"

    def test_text_failure_returns_placeholder(self, reference_inputs, client, settings):
        client.models.generate_content.side_effect = RuntimeError("network down")

        content = generate_proposal_content(reference_inputs, client=client, settings=settings)

        assert content == placeholder_content()
        client.models.generate_images.assert_not_called()

    def test_unparseable_text_returns_placeholder(self, reference_inputs, client, settings):
        client.models.generate_content.return_value = MagicMock(text="{}")
        content = generate_proposal_content(reference_inputs, client=client, settings=settings)
        assert content == placeholder_content()

    def test_empty_text_returns_placeholder(self, reference_inputs, client, settings):
        client.models.generate_content.return_value = MagicMock(text=None)
        content = generate_proposal_content(reference_inputs, client=client, settings=settings)
        assert content == placeholder_content()

    def test_image_failure_keeps_text(self, reference_inputs, client, settings):
        client.models.generate_images.side_effect = RuntimeError("quota")

        content = generate_proposal_content(reference_inputs, client=client, settings=settings)

        assert content.executive_summary == "executive_summary text"
        assert content.conceptual_image == ""
        assert not content.has_image

    def test_image_disabled(self, reference_inputs, client):
        settings = ProposalSettings(api_key="k", generate_image=False)
        content = generate_proposal_content(reference_inputs, client=client, settings=settings)

        assert content.conceptual_image == ""
        client.models.generate_images.assert_not_called()

    def test_missing_api_key_returns_placeholder(self, reference_inputs, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("API_KEY", raising=False)

        content = generate_proposal_content(reference_inputs, settings=ProposalSettings())

        assert content == placeholder_content()


class TestSuggestConstructionPhases:
    def test_success(self, reference_inputs, client, settings):
        client.models.generate_content.return_value = MagicMock(
            text=json.dumps(
                [
                    {"name": "Excavation", "duration_months": 8, "cost_per_meter": 12e6},
                    {"name": "Structure", "duration_months": 14, "cost_per_meter": 30e6},
                ]
            )
        )

        phases = suggest_construction_phases(reference_inputs, client=client, settings=settings)

        assert phases == [
            ConstructionPhase(id=1, name="Excavation", duration_months=8, cost_per_meter=12e6),
            ConstructionPhase(id=2, name="Structure", duration_months=14, cost_per_meter=30e6),
        ]

    def test_failure_returns_empty_list(self, reference_inputs, client, settings):
        client.models.generate_content.side_effect = TimeoutError()
        assert suggest_construction_phases(reference_inputs, client=client, settings=settings) == []

    def test_non_list_response(self, reference_inputs, client, settings):
        client.models.generate_content.return_value = MagicMock(text='{"name": "x"}')
        assert suggest_construction_phases(reference_inputs, client=client, settings=settings) == []

    def test_negative_duration_rejected(self, reference_inputs, client, settings):
        client.models.generate_content.return_value = MagicMock(
            text=json.dumps([{"name": "x", "duration_months": -3, "cost_per_meter": 1}])
        )
        assert suggest_construction_phases(reference_inputs, client=client, settings=settings) == []


class TestCreateClient:
    def test_missing_key_raises(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("API_KEY", raising=False)
        with pytest.raises(ProposalGenerationError, match="GEMINI_API_KEY"):
            create_client(ProposalSettings())
