# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models: every edit produces a new instance, so a snapshot handed
    to a report or to the proposal service can never change underneath it.
    Fields are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        frozen=True,  # Copy-on-write; see core.inputs.apply_change
        extra="forbid",  # Catches typos and missing field definitions immediately
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def copy(self, *, updates: dict = None) -> "Model":
        """
        Return a validated copy of the model with updated fields.

        Unlike ``model_copy(update=...)`` the updated values go through
        validation, so an invalid edit raises instead of producing a corrupt
        record.

        Args:
            updates: Optional dictionary of field values to update

        Returns:
            A new model instance
        """
        data = self.model_dump()
        data.update(updates or {})
        return type(self).model_validate(data)
