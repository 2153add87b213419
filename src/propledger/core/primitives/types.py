# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from pydantic import Field

# constrained types
NonNegativeFloat = Annotated[float, Field(ge=0)]
PaymentDay = Annotated[int, Field(ge=1, le=31)]
