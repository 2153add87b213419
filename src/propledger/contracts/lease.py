# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from typing import Any, FrozenSet, List, Optional

from pydantic import Field, field_validator, model_validator

from ..core.primitives.dates import coerce_date, is_blank_date
from ..core.primitives.enums import (
    ContractKindEnum,
    ContractTargetTypeEnum,
    LeaseStatusEnum,
    ManagementItemEnum,
    PaymentTypeEnum,
    RenewalKindEnum,
)
from ..core.primitives.model import Model
from ..core.primitives.types import NonNegativeFloat, PaymentDay


class FinancialTerm(Model):
    """
    A dated sub-period of a lease carrying its own money figures.

    A lease holds an ordered list of these to express step-up rent schedules
    (e.g. a 5% increase from the second year). Bounds are inclusive calendar
    days. Unparseable bounds are stored as ``None``; such a term never governs
    any month.

    Attributes:
        start_date: First day the figures apply
        end_date: Last day the figures apply
        deposit: Security deposit (informational; never billed monthly)
        monthly_rent: Rent per month; 0 for deposit-only arrangements
        admin_fee: Monthly admin fee
        payment_day: Day of month the bills fall due (clamped to month length)
        payment_type: Prepaid or postpaid
        management_items: Services covered by the admin fee (informational)
    """

    id: str
    start_date: Optional[date]
    end_date: Optional[date]
    deposit: NonNegativeFloat = 0.0
    monthly_rent: NonNegativeFloat = 0.0
    admin_fee: NonNegativeFloat = 0.0
    vat_included: bool = False
    payment_day: PaymentDay
    payment_type: PaymentTypeEnum = PaymentTypeEnum.POSTPAID
    management_items: FrozenSet[ManagementItemEnum] = frozenset()
    late_fee_rate: Optional[NonNegativeFloat] = None
    bank_account: Optional[str] = None
    note: Optional[str] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _coerce_bounds(cls, v):
        return coerce_date(v)

    def overlaps(self, period_start: date, period_end: date) -> bool:
        """True when this term's range intersects ``[period_start, period_end]``."""
        if self.start_date is None or self.end_date is None:
            return False
        return self.start_date <= period_end and self.end_date >= period_start


class ContractPeriod(Model):
    """
    Start and end of a contract.

    An ``end_date`` of ``None`` means open ended. An end date that was given
    but cannot be parsed is stored as ``None`` with ``end_date_malformed`` set,
    so it is never mistaken for an open-ended contract.
    """

    start_date: Optional[date]
    end_date: Optional[date] = None
    end_date_malformed: bool = Field(default=False, repr=False)

    @model_validator(mode="before")
    @classmethod
    def _flag_malformed_end(cls, data: Any) -> Any:
        if isinstance(data, dict) and "end_date" in data:
            raw = data["end_date"]
            end = coerce_date(raw)
            if end is None and not is_blank_date(raw):
                data = {**data, "end_date": None, "end_date_malformed": True}
            else:
                data = {**data, "end_date": end}
        return data

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _coerce_dates(cls, v):
        return coerce_date(v)


class LeaseTerm(ContractPeriod):
    """Overall term of a lease contract."""

    signed_date: Optional[date] = None
    renewal_kind: RenewalKindEnum = RenewalKindEnum.NEW

    @field_validator("signed_date", mode="before")
    @classmethod
    def _coerce_signed_date(cls, v):
        return coerce_date(v)


class LeaseContract(Model):
    """
    A lease (inbound, outbound or sublease) on a property, building or unit.

    ``financial_terms`` keeps its stored order; when terms overlap the first
    matching one governs a month. An empty list means the contract bills
    nothing.
    """

    id: str
    contract_kind: ContractKindEnum
    target_type: ContractTargetTypeEnum
    target_id: str
    counterparty_id: str
    status: LeaseStatusEnum
    term: LeaseTerm
    financial_terms: List[FinancialTerm] = Field(default_factory=list)
    conditions: List[str] = Field(default_factory=list)
    note: Optional[str] = None

    @property
    def is_billable(self) -> bool:
        return (
            self.status is not LeaseStatusEnum.PENDING
            and self.term.start_date is not None
            and not self.term.end_date_malformed
            and bool(self.financial_terms)
        )
