# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Recurring-billing generator.

Derives the full monthly ledger of rent, admin-fee and maintenance-cost bills
from lease and maintenance contracts, and reconciles it with the bills already
stored. The generator is a pure function of (contracts, stored bills, today):
calling it again with its own output merged in produces an empty diff.

Walk rules:
    - every walk is bounded by ``today + horizon_years`` (default two years),
      so open-ended contracts still produce a finite ledger;
    - lease months with no governing financial term are skipped;
    - zero rent, zero admin fee and zero maintenance cost are never billed;
    - inbound leases and maintenance contracts bill negative amounts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Optional

from ...contracts.lease import LeaseContract
from ...contracts.maintenance import MaintenanceContract
from ...contracts.terms import resolve_term_for_month
from ..primitives.dates import MonthRange, clamp_payment_day, month_bounds, month_key
from ..primitives.enums import ChargeTypeEnum, ContractCategoryEnum
from ..primitives.settings import LedgerGenerationSettings
from .reconciliation import ChargeLine, LedgerReconciler, ReconcileAction
from .records import LedgerDiff, Transaction

logger = logging.getLogger(__name__)

MAINTENANCE_DUE_DAY = 25


def _walk_end(end: Optional[date], future_cap: date) -> date:
    if end is None or end > future_cap:
        return future_cap
    return end


def _signed(amount: float, is_expense: bool) -> float:
    return -amount if is_expense else amount


@dataclass
class LedgerGenerator:
    """
    Walks every contract month by month and posts the bills it finds.

    THREAD SAFETY: The generator holds configuration only. Every call to
    ``generate`` builds its own ``LedgerReconciler`` and never mutates its
    inputs, so overlapping calls cannot interfere with each other.
    """

    settings: Optional[LedgerGenerationSettings] = None

    def __post_init__(self):
        """Initialize with default settings if none provided."""
        if self.settings is None:
            self.settings = LedgerGenerationSettings()

    def generate(
        self,
        lease_contracts: Iterable[LeaseContract],
        maintenance_contracts: Iterable[MaintenanceContract],
        existing_transactions: Iterable[Transaction],
        today: Any,
    ) -> LedgerDiff:
        """
        Compute the bills to add and the bills to update.

        Args:
            lease_contracts: Lease contract snapshots
            maintenance_contracts: Maintenance contract snapshots
            existing_transactions: Currently stored bills
            today: Reference date (injected; time of day is ignored)

        Returns:
            LedgerDiff with new and updated transactions; both lists are empty
            when the stored ledger is already up to date
        """
        reconciler = LedgerReconciler(existing_transactions, today)
        future_cap = self.settings.future_cap(reconciler.today)

        reconciler.refresh_statuses()

        for contract in lease_contracts:
            self._post_lease(contract, reconciler, future_cap)
        for contract in maintenance_contracts:
            self._post_maintenance(contract, reconciler, future_cap)

        diff = reconciler.diff()
        logger.info(
            f"Ledger generation for {reconciler.today.isoformat()}: "
            f"{len(diff.new_transactions)} new, {len(diff.updated_transactions)} updated"
        )
        return diff

    def _post_lease(
        self,
        contract: LeaseContract,
        reconciler: LedgerReconciler,
        future_cap: date,
    ) -> None:
        if contract.term.end_date_malformed:
            logger.warning(f"Lease {contract.id} has an unparseable end date; not billed")
            return
        if not contract.is_billable:
            logger.debug(f"Lease {contract.id} is not billable ({contract.status.value}); skipping")
            return

        is_expense = contract.contract_kind.is_expense
        months = MonthRange(
            contract.term.start_date, _walk_end(contract.term.end_date, future_cap)
        )
        posted = 0
        for month_start in months:
            _, month_end = month_bounds(month_start)
            term = resolve_term_for_month(contract.financial_terms, month_start, month_end)
            if term is None:
                logger.debug(f"Lease {contract.id}: no financial term covers {month_key(month_start)}")
                continue

            target_month = month_key(month_start)
            due_date = clamp_payment_day(month_start.year, month_start.month, term.payment_day)

            charges = (
                (ChargeTypeEnum.RENT, term.monthly_rent),
                (ChargeTypeEnum.ADMIN_FEE, term.admin_fee),
            )
            for charge_type, amount in charges:
                if amount <= 0:
                    continue
                action = reconciler.post(
                    ChargeLine(
                        contract_id=contract.id,
                        contract_category=ContractCategoryEnum.LEASE,
                        target_month=target_month,
                        charge_type=charge_type,
                        amount=_signed(amount, is_expense),
                        due_date=due_date,
                    )
                )
                if action in (ReconcileAction.CREATED, ReconcileAction.UPDATED):
                    posted += 1

        logger.debug(f"Lease {contract.id}: walked {len(months)} months, {posted} bills posted")

    def _post_maintenance(
        self,
        contract: MaintenanceContract,
        reconciler: LedgerReconciler,
        future_cap: date,
    ) -> None:
        if contract.term.end_date_malformed:
            logger.warning(f"Maintenance contract {contract.id} has an unparseable end date; not billed")
            return
        if not contract.is_billable:
            logger.debug(f"Maintenance contract {contract.id} is not billable; skipping")
            return
        if contract.monthly_cost <= 0:
            return

        months = MonthRange(
            contract.term.start_date, _walk_end(contract.term.end_date, future_cap)
        )
        for month_start in months:
            reconciler.post(
                ChargeLine(
                    contract_id=contract.id,
                    contract_category=ContractCategoryEnum.MAINTENANCE,
                    target_month=month_key(month_start),
                    charge_type=ChargeTypeEnum.MAINTENANCE_COST,
                    amount=-contract.monthly_cost,
                    due_date=month_start.replace(day=MAINTENANCE_DUE_DAY),
                )
            )


def generate_ledger(
    lease_contracts: Iterable[LeaseContract],
    maintenance_contracts: Iterable[MaintenanceContract],
    existing_transactions: Iterable[Transaction],
    today: Any,
    settings: Optional[LedgerGenerationSettings] = None,
) -> LedgerDiff:
    """
    Derive the bills to add and update for the given contracts.

    Convenience wrapper around ``LedgerGenerator``. The caller merges the
    result into its store in one batch and skips the write entirely when
    ``diff.has_changes`` is False.

    Example:
        ```python
        diff = generate_ledger(leases, maintenance, store.transactions, date.today())
        if diff.has_changes:
            store.apply(diff)
        ```
    """
    return LedgerGenerator(settings=settings).generate(
        lease_contracts, maintenance_contracts, existing_transactions, today
    )
