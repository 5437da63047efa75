# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Sahm test suite.

Unit tests live under ``tests/unit/<package>/``, mirroring ``src/sahm``.
"""
