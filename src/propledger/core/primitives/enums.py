# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class ContractKindEnum(str, Enum):
    """
    Direction of a lease contract relative to the portfolio owner.

    Options:
        OUTBOUND_LEASE: We lease space out; rent and fees are income
        INBOUND_LEASE: We lease space in; rent and fees are expenses
        SUBLEASE: We re-let leased space; billed as income
    """

    OUTBOUND_LEASE = "LEASE_OUT"
    INBOUND_LEASE = "LEASE_IN"
    SUBLEASE = "SUBLEASE"

    @property
    def is_expense(self) -> bool:
        return self is ContractKindEnum.INBOUND_LEASE


class ContractTargetTypeEnum(str, Enum):
    """What a contract is attached to."""

    PROPERTY = "PROPERTY"
    BUILDING = "BUILDING"
    UNIT = "UNIT"


class LeaseStatusEnum(str, Enum):
    """
    Status of a lease contract.

    PENDING leases are not yet billable and are skipped by the generator.
    """

    ACTIVE = "ACTIVE"
    EXPIRED = "EXPIRED"
    TERMINATED = "TERMINATED"
    PENDING = "PENDING"


class MaintenanceStatusEnum(str, Enum):
    """Status of a maintenance (service) contract."""

    ACTIVE = "ACTIVE"
    EXPIRED = "EXPIRED"


class RenewalKindEnum(str, Enum):
    """How the current lease term came about."""

    NEW = "NEW"
    RENEWAL = "RENEWAL"
    IMPLICIT = "IMPLICIT"  # Tacit renewal without a new signed contract


class PaymentTypeEnum(str, Enum):
    """Whether rent is paid ahead of or after the period it covers."""

    PREPAID = "PREPAID"
    POSTPAID = "POSTPAID"


class ManagementItemEnum(str, Enum):
    """Service categories bundled into an admin fee (informational only)."""

    ELECTRICITY = "ELECTRICITY"
    WATER = "WATER"
    GAS = "GAS"
    INTERNET = "INTERNET"
    TV = "TV"
    CLEANING = "CLEANING"
    ELEVATOR = "ELEVATOR"
    SECURITY = "SECURITY"
    PARKING = "PARKING"


class ServiceTypeEnum(str, Enum):
    """Kinds of recurring maintenance service."""

    CLEANING = "CLEANING"
    SECURITY = "SECURITY"
    ELEVATOR = "ELEVATOR"
    FIRE_SAFETY = "FIRE_SAFETY"
    INTERNET = "INTERNET"


class ContractCategoryEnum(str, Enum):
    """Which contract family a ledger transaction was billed from."""

    LEASE = "LEASE"
    MAINTENANCE = "MAINTENANCE"


class ChargeTypeEnum(str, Enum):
    """
    Type of a billable ledger line.

    Attributes:
        RENT: Monthly rent from a lease financial term
        ADMIN_FEE: Monthly admin (management) fee from a lease financial term
        MAINTENANCE_COST: Monthly cost of a maintenance contract (always an expense)
        DEPOSIT: Security deposit; only ever entered manually
    """

    RENT = "RENT"
    ADMIN_FEE = "ADMIN_FEE"
    MAINTENANCE_COST = "MAINTENANCE_COST"
    DEPOSIT = "DEPOSIT"


class TransactionStatusEnum(str, Enum):
    """
    Settlement status of a ledger transaction.

    Only PAID is final. UNPAID and OVERDUE are derived from the due date by the
    generator, which also moves a PARTIAL bill back onto that cycle. PAID and
    PARTIAL are only ever set by an explicit status update.
    """

    PAID = "PAID"
    UNPAID = "UNPAID"
    OVERDUE = "OVERDUE"
    PARTIAL = "PARTIAL"

    @property
    def is_settled(self) -> bool:
        return self is TransactionStatusEnum.PAID


class SummaryViewEnum(str, Enum):
    """How a ledger summary selects months relative to the chosen month."""

    MONTHLY = "MONTHLY"  # Only the chosen month
    CUMULATIVE = "CUMULATIVE"  # Every month up to and including the chosen month
