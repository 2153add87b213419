# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
In-memory transaction store.

Reference implementation of the persisted ledger the generator reads from and
writes to. The store owns the operations the generator must never perform:
marking bills paid, manual edits and deletion.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Iterable, Iterator, List, Optional

from ...contracts.lease import LeaseContract
from ...contracts.maintenance import MaintenanceContract
from ..primitives.dates import coerce_date
from ..primitives.enums import TransactionStatusEnum
from .generator import LedgerGenerator
from .records import LedgerDiff, Transaction

logger = logging.getLogger(__name__)


class TransactionStore:
    """
    Ordered collection of ledger transactions keyed by id.

    THREAD SAFETY: Designed for single-threaded use, like the state layer it
    stands in for. ``apply`` commits a whole diff at once.
    """

    def __init__(self, transactions: Iterable[Transaction] = ()):
        self._transactions: Dict[str, Transaction] = {}
        self.add_transactions(transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(list(self._transactions.values()))

    def __contains__(self, tx_id: object) -> bool:
        return tx_id in self._transactions

    @property
    def transactions(self) -> List[Transaction]:
        """Snapshot of all transactions in insertion order."""
        return list(self._transactions.values())

    def get(self, tx_id: str) -> Transaction:
        try:
            return self._transactions[tx_id]
        except KeyError:
            raise ValueError(f"Unknown transaction '{tx_id}'") from None

    def apply(self, diff: LedgerDiff) -> bool:
        """
        Merge a generation diff in one batch.

        Updated records replace their stored version in place; new records are
        appended. An empty diff leaves the store untouched.

        Returns:
            True if the store changed
        """
        if not diff.has_changes:
            return False

        merged = dict(self._transactions)
        for transaction in diff.updated_transactions:
            if transaction.id not in merged:
                raise ValueError(
                    f"Cannot update transaction '{transaction.id}': not in store"
                )
            merged[transaction.id] = transaction
        for transaction in diff.new_transactions:
            merged[transaction.id] = transaction

        self._transactions = merged
        logger.debug(
            f"Applied ledger diff: {len(diff.new_transactions)} new, "
            f"{len(diff.updated_transactions)} updated"
        )
        return True

    def sync(
        self,
        lease_contracts: Iterable[LeaseContract],
        maintenance_contracts: Iterable[MaintenanceContract],
        today: Any,
        generator: Optional[LedgerGenerator] = None,
    ) -> LedgerDiff:
        """
        Regenerate the ledger from the current contracts and commit the result.

        Call after every contract add or update.
        """
        generator = generator or LedgerGenerator()
        diff = generator.generate(
            lease_contracts, maintenance_contracts, self.transactions, today
        )
        self.apply(diff)
        return diff

    def add_transactions(self, transactions: Iterable[Transaction]) -> None:
        """Append manually entered bills (e.g. a deposit)."""
        incoming = list(transactions)
        seen = set(self._transactions)
        for transaction in incoming:
            if transaction.id in seen:
                raise ValueError(f"Duplicate transaction id '{transaction.id}'")
            seen.add(transaction.id)
        for transaction in incoming:
            self._transactions[transaction.id] = transaction

    def update_status(
        self,
        tx_id: str,
        status: TransactionStatusEnum,
        today: Any,
        paid_date: Any = None,
    ) -> Transaction:
        """
        Set the status of a bill by explicit user action.

        This is the only way a bill becomes PAID. Marking PAID records
        ``paid_date`` (``today`` when not given); any other status clears it.
        """
        transaction = self.get(tx_id)
        status = TransactionStatusEnum(status)
        if status is TransactionStatusEnum.PAID:
            settled_on: Optional[date] = coerce_date(paid_date) or coerce_date(today)
        else:
            settled_on = None
        updated = transaction.model_copy(
            update={"status": status, "paid_date": settled_on}
        )
        self._transactions[tx_id] = updated
        return updated

    def update_transaction(self, transaction: Transaction) -> Transaction:
        """Replace a stored bill with a manually edited version."""
        self.get(transaction.id)
        self._transactions[transaction.id] = transaction
        return transaction

    def delete(self, tx_id: str) -> Transaction:
        """Remove a bill. Regeneration recreates it if a contract still covers it."""
        transaction = self.get(tx_id)
        del self._transactions[tx_id]
        return transaction
