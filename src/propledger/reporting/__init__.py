# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reporting on the billing ledger: tabular export and collection summaries.
"""

from .summary import (
    LEDGER_COLUMNS,
    DashboardFinancials,
    LedgerSummary,
    dashboard_financials,
    filter_transactions,
    summarize_ledger,
    transactions_to_frame,
)

__all__ = [
    "LEDGER_COLUMNS",
    "DashboardFinancials",
    "LedgerSummary",
    "dashboard_financials",
    "filter_transactions",
    "summarize_ledger",
    "transactions_to_frame",
]
