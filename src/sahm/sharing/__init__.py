# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .codec import (
    QUERY_PARAMETER,
    build_share_url,
    decode_state,
    encode_state,
    inputs_from_payload,
    inputs_from_query,
    merge_decoded,
)

__all__ = [
    "QUERY_PARAMETER",
    "build_share_url",
    "decode_state",
    "encode_state",
    "inputs_from_payload",
    "inputs_from_query",
    "merge_decoded",
]
