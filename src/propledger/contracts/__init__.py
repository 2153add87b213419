# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Contract records supplied to the ledger generator.

Lease contracts carry an ordered history of financial terms; maintenance
contracts carry one flat monthly cost.
"""

from .lease import ContractPeriod, FinancialTerm, LeaseContract, LeaseTerm
from .maintenance import MaintenanceContract, MaintenanceTerm
from .terms import resolve_term_for, resolve_term_for_month

__all__ = [
    "ContractPeriod",
    "FinancialTerm",
    "LeaseContract",
    "LeaseTerm",
    "MaintenanceContract",
    "MaintenanceTerm",
    "resolve_term_for",
    "resolve_term_for_month",
]
