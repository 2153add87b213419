# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Configuration settings for ledger generation.

Pydantic settings model controlling the forward horizon of the monthly walk.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .dates import add_years


class LedgerGenerationSettings(BaseModel):
    """
    Configuration for recurring-billing generation.

    The horizon bounds every monthly walk, including open-ended contracts, so
    a generation run always produces a finite, predictable set of bills.

    Usage Examples:
        # Default two-year horizon
        settings = LedgerGenerationSettings()

        # Bill one year ahead only
        settings = LedgerGenerationSettings(horizon_years=1)
    """

    horizon_years: int = Field(
        default=2,
        ge=1,
        description="How many years past 'today' the monthly walk may reach",
    )

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",  # Prevent typos in field names
    )

    def future_cap(self, today: Any) -> date:
        """Last date the walk may reach for a run evaluated on ``today``."""
        return add_years(today, self.horizon_years)
