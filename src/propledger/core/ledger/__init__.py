# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Billing ledger: transaction records, reconciliation, the recurring-billing
generator and an in-memory store.
"""

from .generator import MAINTENANCE_DUE_DAY, LedgerGenerator, generate_ledger
from .reconciliation import (
    ChargeLine,
    LedgerReconciler,
    ReconcileAction,
    evaluate_status,
)
from .records import LedgerDiff, Transaction, transaction_key
from .store import TransactionStore

__all__ = [
    "ChargeLine",
    "LedgerDiff",
    "LedgerGenerator",
    "LedgerReconciler",
    "MAINTENANCE_DUE_DAY",
    "ReconcileAction",
    "Transaction",
    "TransactionStore",
    "evaluate_status",
    "generate_ledger",
    "transaction_key",
]
