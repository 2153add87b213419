# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from ..core.primitives.enums import (
    ContractTargetTypeEnum,
    MaintenanceStatusEnum,
    ServiceTypeEnum,
)
from ..core.primitives.model import Model
from ..core.primitives.types import NonNegativeFloat
from .lease import ContractPeriod


class MaintenanceTerm(ContractPeriod):
    """Service period of a maintenance contract."""


class MaintenanceContract(Model):
    """
    A recurring service contract (cleaning, security, elevator, ...).

    Carries a single flat monthly cost with no term history; the cost is
    always billed as an expense.
    """

    id: str
    target_type: ContractTargetTypeEnum
    target_id: str
    vendor_id: str
    service_type: ServiceTypeEnum
    status: MaintenanceStatusEnum
    term: MaintenanceTerm
    monthly_cost: NonNegativeFloat = 0.0
    details: str = ""

    @property
    def is_billable(self) -> bool:
        return (
            self.status in (MaintenanceStatusEnum.ACTIVE, MaintenanceStatusEnum.EXPIRED)
            and self.term.start_date is not None
            and not self.term.end_date_malformed
        )
