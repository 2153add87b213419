# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reconciliation of desired bills against the stored ledger.

The generator describes every bill it wants as a ``ChargeLine``; the
``LedgerReconciler`` compares each line with the working copy of the ledger
and decides whether to create, update or leave it alone. The input ledger is
never modified: updates are copies, and the reconciler finally reports them
as a ``LedgerDiff``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict, Iterable, List

from ..primitives.enums import (
    ChargeTypeEnum,
    ContractCategoryEnum,
    TransactionStatusEnum,
)
from ..primitives.dates import coerce_date, is_past_due_date
from .records import LedgerDiff, Transaction, transaction_key

logger = logging.getLogger(__name__)


def evaluate_status(
    due_date: date, current_status: TransactionStatusEnum, today: date
) -> TransactionStatusEnum:
    """
    Status a bill should carry on ``today``.

    Every bill not yet PAID follows the calendar: OVERDUE once the due date
    is strictly in the past, UNPAID otherwise. A PARTIAL bill therefore turns
    OVERDUE or UNPAID on the next refresh. PAID is returned unchanged.
    """
    if TransactionStatusEnum(current_status).is_settled:
        return current_status
    if is_past_due_date(due_date, today):
        return TransactionStatusEnum.OVERDUE
    return TransactionStatusEnum.UNPAID


class ReconcileAction(Enum):
    """Outcome of posting one charge line."""

    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    SKIPPED_PAID = "skipped_paid"


@dataclass(frozen=True)
class ChargeLine:
    """Desired state of one bill, as derived from a contract for one month."""

    contract_id: str
    contract_category: ContractCategoryEnum
    target_month: str
    charge_type: ChargeTypeEnum
    amount: float
    due_date: date

    @property
    def key(self) -> str:
        return transaction_key(self.contract_id, self.target_month, self.charge_type)


class LedgerReconciler:
    """
    Working copy of the ledger for a single generation run.

    THREAD SAFETY: Designed for single-threaded use. Each run creates its own
    reconciler over a snapshot of the stored transactions; nothing is shared
    between runs.
    """

    def __init__(self, existing_transactions: Iterable[Transaction], today: date):
        self.today = coerce_date(today)
        if self.today is None:
            raise ValueError(f"today must be a date, got {today!r}")
        self._working: Dict[str, Transaction] = {}
        for transaction in existing_transactions:
            self._working[transaction.id] = transaction
        self._existing_ids = frozenset(self._working)
        # Insertion-ordered sets of touched ids
        self._created: Dict[str, None] = {}
        self._updated: Dict[str, None] = {}

    def _replace(self, transaction: Transaction) -> None:
        self._working[transaction.id] = transaction
        if transaction.id in self._existing_ids:
            self._updated[transaction.id] = None

    def refresh_statuses(self) -> int:
        """
        Re-evaluate the status of every unpaid stored bill against today.

        Runs independently of contract changes: as time passes unpaid bills
        turn overdue.

        Returns:
            Number of bills whose status changed
        """
        changed = 0
        for transaction in list(self._working.values()):
            status = evaluate_status(transaction.due_date, transaction.status, self.today)
            if status is not transaction.status:
                self._replace(transaction.model_copy(update={"status": status}))
                changed += 1
        if changed:
            logger.debug(f"Status refresh moved {changed} transactions")
        return changed

    def post(self, line: ChargeLine) -> ReconcileAction:
        """
        Merge one desired bill into the working ledger.

        A bill seen for the first time is created with a status derived from
        its due date. An unsettled bill is overwritten when its amount or due
        date differ. A PAID bill is never touched.
        """
        key = line.key
        existing = self._working.get(key)

        if existing is None:
            self._working[key] = Transaction(
                id=key,
                contract_id=line.contract_id,
                contract_category=line.contract_category,
                target_month=line.target_month,
                charge_type=line.charge_type,
                amount=line.amount,
                due_date=line.due_date,
                status=evaluate_status(
                    line.due_date, TransactionStatusEnum.UNPAID, self.today
                ),
            )
            self._created[key] = None
            return ReconcileAction.CREATED

        if existing.status.is_settled:
            if existing.amount != line.amount or existing.due_date != line.due_date:
                logger.debug(f"Skipping change to paid transaction {key}")
            return ReconcileAction.SKIPPED_PAID

        if existing.amount == line.amount and existing.due_date == line.due_date:
            return ReconcileAction.UNCHANGED

        updated = existing.model_copy(
            update={
                "amount": line.amount,
                "due_date": line.due_date,
                "status": evaluate_status(line.due_date, existing.status, self.today),
            }
        )
        self._working[key] = updated
        if key in self._created:
            return ReconcileAction.CREATED
        self._updated[key] = None
        return ReconcileAction.UPDATED

    def diff(self) -> LedgerDiff:
        """Bills created and bills changed during this run, in first-touched order."""
        new_transactions: List[Transaction] = [self._working[k] for k in self._created]
        updated_transactions: List[Transaction] = [
            self._working[k] for k in self._updated
        ]
        return LedgerDiff(
            new_transactions=new_transactions,
            updated_transactions=updated_transactions,
        )
