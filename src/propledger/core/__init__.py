# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
propledger Core Framework

Primitives shared by every module, and the billing ledger built on top of
them. ``ledger`` is loaded on first access because it depends on
``propledger.contracts``, which in turn depends on the primitives.
"""

import importlib

from . import primitives
from .primitives import (
    LedgerGenerationSettings,
    Model,
    MonthRange,
    clamp_payment_day,
    is_past_due_date,
    month_key,
)

__all__ = [  # noqa: F822 - lazy loading
    "ledger",
    "primitives",
    "LedgerGenerationSettings",
    "Model",
    "MonthRange",
    "clamp_payment_day",
    "is_past_due_date",
    "month_key",
]


def __getattr__(name: str):
    if name != "ledger":
        raise AttributeError(f"module 'propledger.core' has no attribute '{name}'")
    module = importlib.import_module("propledger.core.ledger")
    globals()[name] = module
    return module
