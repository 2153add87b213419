# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Selection of the financial term governing a calendar month.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable, Optional

from ..core.primitives.dates import month_bounds
from .lease import FinancialTerm


def resolve_term_for_month(
    financial_terms: Iterable[FinancialTerm],
    month_start: date,
    month_end: date,
) -> Optional[FinancialTerm]:
    """
    Find the term whose date range overlaps ``[month_start, month_end]``.

    Terms are scanned in stored order and the first overlap wins. Overlapping
    terms are not rejected here; keeping them disjoint is up to contract
    entry.

    Returns:
        The governing term, or None when no term covers the month (the
        contract bills nothing for it).
    """
    for term in financial_terms:
        if term.overlaps(month_start, month_end):
            return term
    return None


def resolve_term_for(
    financial_terms: Iterable[FinancialTerm], month: Any
) -> Optional[FinancialTerm]:
    """Same as ``resolve_term_for_month`` for the month containing ``month``."""
    month_start, month_end = month_bounds(month)
    return resolve_term_for_month(financial_terms, month_start, month_end)
