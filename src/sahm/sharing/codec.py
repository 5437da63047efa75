# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Shareable-link state encoding.

A ``ProjectInputs`` record travels in the ``data`` query parameter as
UTF-8 JSON (camelCase keys) encoded with standard base64. Decoding is
lenient: a malformed payload falls back to the defaults, and a partial or
partly invalid payload is merged field by field over the defaults, each field
validated against the schema before it is accepted.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from pydantic import ValidationError

from ..core.inputs import ProjectInputs, apply_change, default_inputs

logger = logging.getLogger(__name__)

QUERY_PARAMETER = "data"


def encode_state(inputs: ProjectInputs) -> str:
    """Serialize ``inputs`` to the base64 link payload."""
    payload = inputs.model_dump_json(by_alias=True)
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def decode_state(encoded: str) -> Optional[Dict[str, Any]]:
    """
    Decode a link payload into a raw field dictionary.

    URL-safe base64 and missing padding are tolerated.

    Returns:
        The decoded JSON object, or ``None`` when the payload is not valid
        base64, not UTF-8, not JSON, or not a JSON object
    """
    if not encoded:
        return None
    text = encoded.strip().replace("-", "+").replace("_", "/").replace(" ", "+")
    text += "=" * (-len(text) % 4)
    try:
        raw = base64.b64decode(text, validate=True)
        decoded = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        logger.warning(f"Error decoding shared state: {e}")
        return None
    if not isinstance(decoded, dict):
        logger.warning(f"Shared state is a JSON {type(decoded).__name__}, expected an object")
        return None
    return decoded


def merge_decoded(
    decoded: Mapping[str, Any],
    defaults: Optional[ProjectInputs] = None,
) -> ProjectInputs:
    """
    Merge decoded fields over ``defaults`` one field at a time.

    Each field goes through ``apply_change`` and therefore through schema
    validation. Unknown fields and values the schema rejects are dropped
    with a warning; the corresponding default is kept.
    """
    state = defaults or default_inputs()
    for key, value in decoded.items():
        try:
            state = apply_change(state, key, value)
        except KeyError:
            logger.warning(f"Ignoring unknown shared field {key!r}")
        except ValidationError as e:
            logger.warning(
                f"Ignoring invalid shared value for {key!r}: {e.error_count()} validation error(s)"
            )
    return state


def inputs_from_payload(
    encoded: Optional[str], defaults: Optional[ProjectInputs] = None
) -> ProjectInputs:
    """Decode a link payload; defaults when it is absent or malformed."""
    defaults = defaults or default_inputs()
    if not encoded:
        return defaults
    decoded = decode_state(encoded)
    if decoded is None:
        return defaults
    return merge_decoded(decoded, defaults)


def inputs_from_query(
    query: Union[str, Mapping[str, Any]],
    defaults: Optional[ProjectInputs] = None,
) -> ProjectInputs:
    """
    Session-start inputs from a URL query string or a parsed query mapping.

    Args:
        query: ``"data=..."`` (leading ``?`` allowed) or a mapping such as
            ``st.query_params``; list values use their first item
        defaults: Record used for missing or invalid fields

    Returns:
        Decoded inputs, or ``defaults`` when no usable ``data`` parameter exists
    """
    if isinstance(query, str):
        values = parse_qs(query.lstrip("?")).get(QUERY_PARAMETER, [])
        payload = values[0] if values else None
    else:
        payload = query.get(QUERY_PARAMETER)
        if isinstance(payload, (list, tuple)):
            payload = payload[0] if payload else None
    return inputs_from_payload(payload, defaults)


def build_share_url(base_url: str, inputs: ProjectInputs) -> str:
    """
    Shareable URL for ``inputs``.

    Other query parameters of ``base_url`` are kept; an existing ``data``
    parameter is replaced.
    """
    parts = urlsplit(base_url)
    query = {
        key: values
        for key, values in parse_qs(parts.query).items()
        if key != QUERY_PARAMETER
    }
    query[QUERY_PARAMETER] = [encode_state(inputs)]
    return urlunsplit(parts._replace(query=urlencode(query, doseq=True)))
