# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
propledger - Recurring billing ledger for property portfolios

Derives the monthly rent, admin-fee and maintenance-cost bills of lease and
maintenance contracts, and keeps the stored ledger reconciled as contracts
change.

Key Entry Points:
- propledger.core.ledger.generate_ledger() - Compute new/updated bills
- propledger.core.ledger.TransactionStore - In-memory ledger with sync()
- propledger.contracts.* - Lease and maintenance contract models
- propledger.reporting.* - Ledger summaries

Example Usage:
    ```python
    from datetime import date

    from propledger.core.ledger import TransactionStore

    store = TransactionStore()
    diff = store.sync(lease_contracts, maintenance_contracts, today=date.today())
    print(f"{len(diff.new_transactions)} new bills")
    ```
"""

import importlib
import logging

# Libraries never configure handlers; applications do.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "contracts",
    "core",
    "reporting",
]


_LAZY_MODULES = {
    "contracts": "propledger.contracts",
    "core": "propledger.core",
    "reporting": "propledger.reporting",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'propledger' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
