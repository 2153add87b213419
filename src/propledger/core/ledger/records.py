# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Core data models for the billing ledger.

This module defines the transaction record, its deterministic identity, and
the diff a generation run hands back to the caller.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from pydantic import field_validator

from ..primitives.dates import coerce_date
from ..primitives.enums import (
    ChargeTypeEnum,
    ContractCategoryEnum,
    TransactionStatusEnum,
)
from ..primitives.model import Model

_MONTH_KEY = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def transaction_key(
    contract_id: str, target_month: str, charge_type: ChargeTypeEnum
) -> str:
    """
    Stable identity of the bill for one contract, month and charge type.

    The key is a plain structured string, so repeated generation runs (and
    separate processes) always agree on it.

    Example:
        >>> transaction_key("c1", "2024-03", ChargeTypeEnum.RENT)
        'tx_c1-2024-03-RENT'
    """
    return f"tx_{contract_id}-{target_month}-{ChargeTypeEnum(charge_type).value}"


class Transaction(Model):
    """
    Immutable record of one billable line: one contract, one month, one charge type.

    Attributes:
        id: Deterministic key from ``transaction_key`` for generated bills
        contract_id: Contract the bill was raised from
        contract_category: Lease or maintenance
        target_month: Billing month as ``YYYY-MM``
        charge_type: Rent, admin fee, maintenance cost or deposit
        amount: Signed amount (+ = income, - = expense)
        due_date: Date the bill falls due
        status: Paid, unpaid, overdue or partial
        paid_date: Settlement date, set when marked paid
        tax_invoice_issued: Whether a tax invoice has been issued
    """

    id: str
    contract_id: str
    contract_category: ContractCategoryEnum
    target_month: str
    charge_type: ChargeTypeEnum
    amount: float
    due_date: date
    status: TransactionStatusEnum = TransactionStatusEnum.UNPAID
    paid_date: Optional[date] = None
    tax_invoice_issued: bool = False

    @field_validator("target_month")
    @classmethod
    def validate_target_month(cls, v: str) -> str:
        if not _MONTH_KEY.match(v):
            raise ValueError(f"target_month must be formatted YYYY-MM, got {v!r}")
        return v

    @field_validator("due_date", "paid_date", mode="before")
    @classmethod
    def _coerce_dates(cls, v):
        return coerce_date(v)

    @property
    def is_income(self) -> bool:
        return self.amount > 0

    @property
    def is_expense(self) -> bool:
        return self.amount < 0


@dataclass(frozen=True)
class LedgerDiff:
    """
    Result of one generation run.

    Attributes:
        new_transactions: Bills seen for the first time, to be appended
        updated_transactions: Existing bills whose amount, due date or status
            changed, to be replaced by id
    """

    new_transactions: List[Transaction] = field(default_factory=list)
    updated_transactions: List[Transaction] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return bool(self.new_transactions or self.updated_transactions)

    def __len__(self) -> int:
        return len(self.new_transactions) + len(self.updated_transactions)
