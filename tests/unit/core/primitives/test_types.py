# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from propledger.core.primitives import NonNegativeFloat, PaymentDay

# Use TypeAdapter for testing Pydantic constrained types
non_negative_float_adapter = TypeAdapter(NonNegativeFloat)
payment_day_adapter = TypeAdapter(PaymentDay)


# NonNegativeFloat
def test_non_negative_float_valid():
    assert non_negative_float_adapter.validate_python(0) == 0.0
    assert non_negative_float_adapter.validate_python(1_500_000) == 1_500_000.0


def test_non_negative_float_invalid():
    with pytest.raises(ValidationError):
        non_negative_float_adapter.validate_python(-0.01)


# PaymentDay
@pytest.mark.parametrize("day", [1, 15, 28, 31])
def test_payment_day_valid(day):
    assert payment_day_adapter.validate_python(day) == day


@pytest.mark.parametrize("day", [0, 32, -5])
def test_payment_day_invalid(day):
    with pytest.raises(ValidationError):
        payment_day_adapter.validate_python(day)
