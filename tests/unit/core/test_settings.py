# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import pytest
from pydantic import ValidationError

from sahm.core.primitives import (
    FeasibilitySettings,
    ProposalSettings,
    ThresholdBasisEnum,
)


def test_feasibility_settings_defaults():
    """Test default values of FeasibilitySettings."""
    settings = FeasibilitySettings()
    assert settings.default_average_unit_size == 90.0
    assert settings.consistency_tolerance_percentage == 5.0
    assert settings.excellent_margin == 15.0
    assert settings.threshold_basis is ThresholdBasisEnum.COST_ESCALATION
    assert settings.projection_step_months == 6


def test_feasibility_settings_validation():
    """Test that invalid values are rejected."""
    with pytest.raises(ValidationError):
        FeasibilitySettings(default_average_unit_size=0)
    with pytest.raises(ValidationError):
        FeasibilitySettings(projection_step_months=0)


def test_proposal_settings_explicit_key(monkeypatch):
    """An explicit key wins over the environment."""
    monkeypatch.setenv("GEMINI_API_KEY", "from-env")
    assert ProposalSettings(api_key="explicit").resolve_api_key() == "explicit"


def test_proposal_settings_env_fallback(monkeypatch):
    """GEMINI_API_KEY is read first, then API_KEY."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("API_KEY", "legacy")
    assert ProposalSettings().resolve_api_key() == "legacy"

    monkeypatch.setenv("GEMINI_API_KEY", "primary")
    assert ProposalSettings().resolve_api_key() == "primary"


def test_proposal_settings_no_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)
    assert ProposalSettings().resolve_api_key() is None


def test_api_key_not_in_repr():
    assert "secret" not in repr(ProposalSettings(api_key="secret"))
