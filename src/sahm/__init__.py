# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Sahm - Feasibility Analysis for Share-Based Construction Projects

Models a cooperative building project sold to investors as fixed-size shares
paid in installments, and estimates what a share is worth at completion.

Key Entry Points:
- sahm.analysis.analyze() - Metrics, scenarios, verdict and progress in one call
- sahm.core.apply_change() - Validated, immutable edits of the project inputs
- sahm.sharing.* - Shareable-link encoding of the inputs
- sahm.proposal.* - Generative-AI proposal writer
- sahm.reporting.* - Report tables and PDF export

Example Usage:
    ```python
    from sahm.analysis import analyze
    from sahm.core import apply_change, default_inputs

    inputs = apply_change(default_inputs(), "market_price_per_meter", 280_000_000)
    result = analyze(inputs)
    print(f"Realistic annual ROI: {result.realistic.annual_roi_percent:.1f}%")
    ```
"""

import importlib
import logging

__version__ = "0.1.0"

# Library code never configures handlers; applications do.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "analysis",
    "core",
    "proposal",
    "reporting",
    "sharing",
    "utils",
    "visualization",
]


_LAZY_MODULES = {
    "analysis": "sahm.analysis",
    "core": "sahm.core",
    "proposal": "sahm.proposal",
    "reporting": "sahm.reporting",
    "sharing": "sahm.sharing",
    "utils": "sahm.utils",
    "visualization": "sahm.visualization",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'sahm' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
