# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date

import pytest

from propledger.core.primitives import (
    ChargeTypeEnum,
    ContractCategoryEnum,
    SummaryViewEnum,
    TransactionStatusEnum,
)
from propledger.reporting import (
    LEDGER_COLUMNS,
    dashboard_financials,
    filter_transactions,
    summarize_ledger,
    transactions_to_frame,
)
from tests.conftest import create_transaction

PAID = TransactionStatusEnum.PAID
OVERDUE = TransactionStatusEnum.OVERDUE
UNPAID = TransactionStatusEnum.UNPAID


@pytest.fixture
def ledger():
    return [
        create_transaction(target_month="2024-01", amount=1_000, due_date=date(2024, 1, 25), status=PAID),
        create_transaction(target_month="2024-02", amount=1_000, due_date=date(2024, 2, 25), status=OVERDUE),
        create_transaction(target_month="2024-03", amount=1_000, due_date=date(2024, 3, 25), status=UNPAID),
        create_transaction(
            contract_id="mc1",
            target_month="2024-02",
            charge_type=ChargeTypeEnum.MAINTENANCE_COST,
            contract_category=ContractCategoryEnum.MAINTENANCE,
            amount=-300,
            due_date=date(2024, 2, 25),
            status=OVERDUE,
        ),
    ]


def test_transactions_to_frame(ledger):
    """One row per transaction with plain values."""
    frame = transactions_to_frame(ledger)
    assert list(frame.columns) == LEDGER_COLUMNS
    assert len(frame) == 4
    assert frame["status"].tolist() == ["PAID", "OVERDUE", "UNPAID", "OVERDUE"]
    assert frame["amount"].sum() == pytest.approx(2_700)


def test_transactions_to_frame_empty():
    """An empty ledger keeps the column set."""
    frame = transactions_to_frame([])
    assert frame.empty
    assert list(frame.columns) == LEDGER_COLUMNS


def test_filter_transactions_monthly_and_cumulative(ledger):
    """MONTHLY picks one month; CUMULATIVE everything up to it; latest due first."""
    monthly = filter_transactions(ledger, "2024-02", SummaryViewEnum.MONTHLY)
    assert {t.target_month for t in monthly} == {"2024-02"}
    assert len(monthly) == 2

    cumulative = filter_transactions(ledger, "2024-02", SummaryViewEnum.CUMULATIVE)
    assert [t.target_month for t in cumulative][-1] == "2024-01"
    assert len(cumulative) == 3

    everything = filter_transactions(ledger)
    assert [t.due_date for t in everything] == sorted((t.due_date for t in ledger), reverse=True)


@pytest.mark.parametrize("view", [SummaryViewEnum.MONTHLY, SummaryViewEnum.CUMULATIVE])
@pytest.mark.parametrize("month", [None, "2024-01", "2024-02", "2030-01"])
def test_filter_and_summary_select_the_same_transactions(ledger, month, view):
    """The list view and the summary figures always cover the same bills."""
    selected = filter_transactions(ledger, month, view)
    summary = summarize_ledger(ledger, month, view)
    assert summary.total_income == sum(t.amount for t in selected if t.amount > 0)
    assert summary.overdue_count == sum(t.status is OVERDUE for t in selected)


def test_filter_transactions_empty():
    """An empty ledger filters to nothing."""
    assert filter_transactions([], "2024-01") == []


def test_summarize_ledger_all_months(ledger):
    """Income, expense and collection figures over the whole ledger."""
    summary = summarize_ledger(ledger)
    assert summary.total_income == 3_000
    assert summary.total_expense == 300
    assert summary.collected_income == 1_000
    assert summary.pending_income == 2_000
    assert summary.collection_rate == pytest.approx(100 / 3)
    assert summary.overdue_count == 2


def test_summarize_ledger_cumulative(ledger):
    """CUMULATIVE includes every month up to the chosen one."""
    summary = summarize_ledger(ledger, "2024-02", SummaryViewEnum.CUMULATIVE)
    assert summary.total_income == 2_000
    assert summary.collection_rate == pytest.approx(50.0)
    assert summary.overdue_count == 2


def test_summarize_ledger_without_income():
    """No income means a zero collection rate, not a division error."""
    expense_only = [create_transaction(amount=-500, status=UNPAID)]
    summary = summarize_ledger(expense_only)
    assert summary.total_income == 0
    assert summary.total_expense == 500
    assert summary.collection_rate == 0


def test_summarize_ledger_empty_selection(ledger):
    """A month with no bills summarises to zeros."""
    summary = summarize_ledger(ledger, "2030-01")
    assert summary.total_income == 0
    assert summary.overdue_count == 0


def test_dashboard_financials(ledger):
    """Net totals by status across the portfolio."""
    financials = dashboard_financials(ledger)
    assert financials.total_revenue == 2_700
    assert financials.collected_amount == 1_000
    assert financials.overdue_amount == 700
    assert financials.collection_rate == pytest.approx(1_000 / 2_700 * 100)


def test_dashboard_financials_empty():
    """An empty ledger yields zeros."""
    financials = dashboard_financials([])
    assert financials.total_revenue == 0
    assert financials.collection_rate == 0
