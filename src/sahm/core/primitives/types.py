# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from pydantic import Field

# constrained types
PositiveInt = Annotated[int, Field(ge=0)]
PositiveIntGe1 = Annotated[int, Field(ge=1)]
PositiveFloat = Annotated[float, Field(ge=0)]
StrictlyPositiveFloat = Annotated[float, Field(gt=0)]
Percentage = Annotated[float, Field(ge=0, le=100)]
# annual rates in percent; -100% or below has no real compound root
GrowthRate = Annotated[float, Field(gt=-100, le=1000)]
