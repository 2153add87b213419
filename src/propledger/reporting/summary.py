# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Ledger summaries.

Tabular view of the transaction set and the collection figures shown on the
finance and dashboard screens: income versus expense, collected versus
pending, collection rate and overdue exposure.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

import pandas as pd

from ..core.ledger.records import Transaction
from ..core.primitives.enums import SummaryViewEnum, TransactionStatusEnum
from ..core.primitives.model import Model

logger = logging.getLogger(__name__)

LEDGER_COLUMNS = [
    "id",
    "contract_id",
    "contract_category",
    "target_month",
    "charge_type",
    "amount",
    "due_date",
    "status",
    "paid_date",
    "tax_invoice_issued",
]


class LedgerSummary(Model):
    """
    Collection figures for a selection of transactions.

    Attributes:
        total_income: Sum of positive amounts
        total_expense: Sum of negative amounts, as a positive number
        collected_income: Income already marked PAID
        pending_income: Income not yet PAID
        collection_rate: Collected share of income, in percent (0 when no income)
        overdue_count: Number of OVERDUE transactions, income and expense alike
    """

    total_income: float = 0.0
    total_expense: float = 0.0
    collected_income: float = 0.0
    pending_income: float = 0.0
    collection_rate: float = 0.0
    overdue_count: int = 0


class DashboardFinancials(Model):
    """
    Portfolio-wide figures for the dashboard.

    Attributes:
        total_revenue: Net sum of all amounts
        collected_amount: Net sum of PAID amounts
        overdue_amount: Net sum of OVERDUE amounts
        collection_rate: collected_amount / total_revenue in percent (0 unless revenue is positive)
    """

    total_revenue: float = 0.0
    collected_amount: float = 0.0
    overdue_amount: float = 0.0
    collection_rate: float = 0.0


def transactions_to_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """
    One row per transaction with plain (string) enum values.

    The column set is stable, so an empty ledger yields an empty frame with the
    usual columns.
    """
    rows = [transaction.model_dump(mode="json") for transaction in transactions]
    if not rows:
        frame = pd.DataFrame(columns=LEDGER_COLUMNS)
        frame["amount"] = frame["amount"].astype(float)
        return frame
    frame = pd.DataFrame.from_records(rows, columns=LEDGER_COLUMNS)
    frame["amount"] = frame["amount"].astype(float)
    frame["due_date"] = pd.to_datetime(frame["due_date"]).dt.date
    return frame


def _select(
    frame: pd.DataFrame, month: Optional[str], view: SummaryViewEnum
) -> pd.DataFrame:
    if month is None or frame.empty:
        return frame
    if SummaryViewEnum(view) is SummaryViewEnum.MONTHLY:
        return frame[frame["target_month"] == month]
    # YYYY-MM strings order chronologically
    return frame[frame["target_month"] <= month]


def filter_transactions(
    transactions: Iterable[Transaction],
    month: Optional[str] = None,
    view: SummaryViewEnum = SummaryViewEnum.MONTHLY,
) -> List[Transaction]:
    """
    Transactions for one month (MONTHLY) or up to a month (CUMULATIVE).

    Without a month every transaction is kept. Results are ordered by due date,
    latest first.
    """
    transactions = list(transactions)
    # Frame rows are positional, so the selected index maps back to the input
    selected = _select(transactions_to_frame(transactions), month, view)
    return sorted(
        (transactions[i] for i in selected.index),
        key=lambda t: t.due_date,
        reverse=True,
    )


def summarize_ledger(
    transactions: Iterable[Transaction],
    month: Optional[str] = None,
    view: SummaryViewEnum = SummaryViewEnum.MONTHLY,
) -> LedgerSummary:
    """Income, expense and collection figures for the selected months."""
    frame = _select(transactions_to_frame(transactions), month, view)
    if frame.empty:
        return LedgerSummary()

    income = frame[frame["amount"] > 0]
    expense = frame[frame["amount"] < 0]
    income_paid = income["status"] == TransactionStatusEnum.PAID.value

    total_income = float(income["amount"].sum())
    collected_income = float(income.loc[income_paid, "amount"].sum())
    pending_income = float(income.loc[~income_paid, "amount"].sum())
    collection_rate = (collected_income / total_income) * 100 if total_income > 0 else 0.0
    overdue_count = int((frame["status"] == TransactionStatusEnum.OVERDUE.value).sum())

    summary = LedgerSummary(
        total_income=total_income,
        total_expense=float(expense["amount"].abs().sum()),
        collected_income=collected_income,
        pending_income=pending_income,
        collection_rate=collection_rate,
        overdue_count=overdue_count,
    )
    logger.debug(f"Ledger summary for {month or 'all months'} ({SummaryViewEnum(view).value}): {summary}")
    return summary


def dashboard_financials(transactions: Iterable[Transaction]) -> DashboardFinancials:
    """Portfolio totals across every transaction."""
    frame = transactions_to_frame(transactions)
    if frame.empty:
        return DashboardFinancials()

    by_status = frame.groupby("status")["amount"].sum()
    total_revenue = float(frame["amount"].sum())
    collected_amount = float(by_status.get(TransactionStatusEnum.PAID.value, 0.0))
    overdue_amount = float(by_status.get(TransactionStatusEnum.OVERDUE.value, 0.0))
    collection_rate = (
        (collected_amount / total_revenue) * 100 if total_revenue > 0 else 0.0
    )
    return DashboardFinancials(
        total_revenue=total_revenue,
        collected_amount=collected_amount,
        overdue_amount=overdue_amount,
        collection_rate=collection_rate,
    )
