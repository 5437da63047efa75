# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the streamlit dashboard script.

Test Coverage:
1. Default session renders without exceptions
2. Growth-rate widgets carry the schema bounds
3. Narrative and unit-mix fields are editable
4. Shared links with out-of-range rates fall back to defaults
"""

from __future__ import annotations

import base64
import json
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from sahm.core import default_inputs
from sahm.sharing import QUERY_PARAMETER

APP_PATH = Path(__file__).resolve().parents[3] / "src" / "sahm" / "app.py"


@pytest.fixture
def app() -> AppTest:
    """Dashboard after its first run with no query parameters."""
    return AppTest.from_file(str(APP_PATH), default_timeout=60).run()


def test_default_session_renders(app: AppTest):
    assert not app.exception
    assert app.session_state["inputs"].project_name == default_inputs().project_name


@pytest.mark.parametrize(
    "key", ["pessimistic_market_growth", "optimistic_market_growth", "construction_cost_escalation"]
)
def test_growth_rate_widget_bounds(app: AppTest, key):
    widget = app.number_input(key=key)
    assert widget.min == -99.9
    assert widget.max == 1000.0


def test_narrative_field_editable(app: AppTest):
    app.text_area(key="text_location").input("تهران، منطقه ۲").run()

    assert not app.exception
    assert app.session_state["inputs"].location == "تهران، منطقه ۲"


def test_unit_mix_rendered_as_editor(app: AppTest):
    """Unchanged editor rows leave the unit mix as it was."""
    assert app.session_state["inputs"].unit_mix == default_inputs().unit_mix


def test_shared_link_with_extreme_rate():
    payload = json.dumps({"pessimisticMarketGrowth": -150, "floors": 20})
    at = AppTest.from_file(str(APP_PATH), default_timeout=60)
    at.query_params[QUERY_PARAMETER] = base64.b64encode(payload.encode("utf-8")).decode("ascii")
    at.run()

    assert not at.exception
    inputs = at.session_state["inputs"]
    assert inputs.pessimistic_market_growth == default_inputs().pessimistic_market_growth
    assert inputs.floors == 20
