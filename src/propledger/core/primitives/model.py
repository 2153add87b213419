# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models for contracts, terms and ledger records. Changes are made
    by producing copies (``model_copy(update=...)``); nothing in the library
    mutates a record that was handed to it.
    """

    model_config = ConfigDict(
        frozen=True,  # Immutable models; working state lives in external objects
        extra="forbid",  # Catches typos and missing field definitions immediately
    )
