# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for propledger testing.

This module provides convenient utilities for creating contracts and
transactions without spelling out every required field.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

import pytest

from propledger.contracts import (
    FinancialTerm,
    LeaseContract,
    LeaseTerm,
    MaintenanceContract,
    MaintenanceTerm,
)
from propledger.core.ledger import Transaction, transaction_key
from propledger.core.primitives import (
    ChargeTypeEnum,
    ContractCategoryEnum,
    ContractKindEnum,
    ContractTargetTypeEnum,
    LeaseStatusEnum,
    MaintenanceStatusEnum,
    ServiceTypeEnum,
    TransactionStatusEnum,
)


# Contract Utilities
def create_financial_term(
    start_date="2024-01-01",
    end_date="2025-01-01",
    monthly_rent: float = 1_500_000,
    admin_fee: float = 150_000,
    payment_day: int = 25,
    term_id: str = "ft1",
    deposit: float = 0.0,
) -> FinancialTerm:
    """
    Create a financial term for testing.

    Example:
        >>> term = create_financial_term(monthly_rent=0)
        >>> term.monthly_rent
        0.0
    """
    return FinancialTerm(
        id=term_id,
        start_date=start_date,
        end_date=end_date,
        deposit=deposit,
        monthly_rent=monthly_rent,
        admin_fee=admin_fee,
        payment_day=payment_day,
    )


def create_lease(
    contract_id: str = "lease1",
    start_date="2024-01-01",
    end_date="2025-01-01",
    financial_terms: Optional[List[FinancialTerm]] = None,
    contract_kind: ContractKindEnum = ContractKindEnum.OUTBOUND_LEASE,
    status: LeaseStatusEnum = LeaseStatusEnum.ACTIVE,
) -> LeaseContract:
    """Create a lease contract; defaults to one term spanning the whole lease."""
    if financial_terms is None:
        financial_terms = [create_financial_term(start_date=start_date, end_date=end_date)]
    return LeaseContract(
        id=contract_id,
        contract_kind=contract_kind,
        target_type=ContractTargetTypeEnum.UNIT,
        target_id="unit-101",
        counterparty_id="tenant-1",
        status=status,
        term=LeaseTerm(start_date=start_date, end_date=end_date),
        financial_terms=financial_terms,
    )


def create_maintenance(
    contract_id: str = "mc1",
    start_date="2024-01-01",
    end_date="2024-12-31",
    monthly_cost: float = 300_000,
    status: MaintenanceStatusEnum = MaintenanceStatusEnum.ACTIVE,
) -> MaintenanceContract:
    """Create a maintenance contract for testing."""
    return MaintenanceContract(
        id=contract_id,
        target_type=ContractTargetTypeEnum.BUILDING,
        target_id="bldg-1",
        vendor_id="vendor-1",
        service_type=ServiceTypeEnum.CLEANING,
        status=status,
        term=MaintenanceTerm(start_date=start_date, end_date=end_date),
        monthly_cost=monthly_cost,
    )


# Ledger Utilities
def create_transaction(
    contract_id: str = "lease1",
    target_month: str = "2024-01",
    charge_type: ChargeTypeEnum = ChargeTypeEnum.RENT,
    amount: float = 1_500_000,
    due_date: date = date(2024, 1, 25),
    status: TransactionStatusEnum = TransactionStatusEnum.UNPAID,
    contract_category: ContractCategoryEnum = ContractCategoryEnum.LEASE,
    **overrides,
) -> Transaction:
    """Create a transaction keyed the same way the generator keys it."""
    return Transaction(
        id=overrides.pop("id", transaction_key(contract_id, target_month, charge_type)),
        contract_id=contract_id,
        contract_category=contract_category,
        target_month=target_month,
        charge_type=charge_type,
        amount=amount,
        due_date=due_date,
        status=status,
        **overrides,
    )


def merged(existing: List[Transaction], diff) -> List[Transaction]:
    """Apply a diff to a plain list the way a caller's store would."""
    by_id = {t.id: t for t in existing}
    for transaction in diff.updated_transactions:
        by_id[transaction.id] = transaction
    for transaction in diff.new_transactions:
        by_id[transaction.id] = transaction
    return list(by_id.values())


# Fixtures
@pytest.fixture
def today() -> date:
    return date(2024, 3, 10)


@pytest.fixture
def lease() -> LeaseContract:
    return create_lease()


@pytest.fixture
def maintenance() -> MaintenanceContract:
    return create_maintenance()
