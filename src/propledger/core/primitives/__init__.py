# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
propledger Core Primitives

Essential building blocks shared by contracts and the ledger: the immutable
model base, domain enums, constrained types, calendar helpers and settings.
"""

from .dates import (
    MonthRange,
    add_years,
    clamp_payment_day,
    coerce_date,
    is_blank_date,
    is_future_date,
    is_past_due_date,
    month_bounds,
    month_key,
)
from .enums import (
    ChargeTypeEnum,
    ContractCategoryEnum,
    ContractKindEnum,
    ContractTargetTypeEnum,
    LeaseStatusEnum,
    MaintenanceStatusEnum,
    ManagementItemEnum,
    PaymentTypeEnum,
    RenewalKindEnum,
    ServiceTypeEnum,
    SummaryViewEnum,
    TransactionStatusEnum,
)
from .model import Model
from .settings import LedgerGenerationSettings
from .types import NonNegativeFloat, PaymentDay

__all__ = [
    # Core models
    "Model",
    # Settings
    "LedgerGenerationSettings",
    # Dates
    "MonthRange",
    "add_years",
    "clamp_payment_day",
    "coerce_date",
    "is_blank_date",
    "is_future_date",
    "is_past_due_date",
    "month_bounds",
    "month_key",
    # Enums
    "ChargeTypeEnum",
    "ContractCategoryEnum",
    "ContractKindEnum",
    "ContractTargetTypeEnum",
    "LeaseStatusEnum",
    "MaintenanceStatusEnum",
    "ManagementItemEnum",
    "PaymentTypeEnum",
    "RenewalKindEnum",
    "ServiceTypeEnum",
    "SummaryViewEnum",
    "TransactionStatusEnum",
    # Types
    "NonNegativeFloat",
    "PaymentDay",
]
