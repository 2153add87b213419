# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import pytest
from pydantic import ValidationError

from propledger.core.primitives import Model


class _TestModel(Model):
    a: int
    b: str = "hello"


def test_model_is_frozen():
    """Test that the base Model is frozen and attributes cannot be changed after instantiation."""
    m = _TestModel(a=1)
    with pytest.raises(ValidationError):
        m.a = 2


def test_model_copy_with_updates():
    """Test model_copy with updates leaves the original untouched."""
    m1 = _TestModel(a=1, b="original")
    m2 = m1.model_copy(update={"a": 100, "b": "updated"})

    assert m1 != m2
    assert m2.a == 100
    assert m2.b == "updated"
    assert m1.a == 1


def test_model_forbids_extra_fields():
    """Test that unknown fields are rejected."""
    with pytest.raises(ValidationError):
        _TestModel(a=1, c="typo")
