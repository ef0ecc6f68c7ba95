"""Tests for fiscal parts (quotient familial) computation."""

import pytest

from brutnet.sdk import InvalidArgumentError, compute_fiscal_parts


class TestFiscalPartsTable:
    """Parts for every household of up to 4 children."""

    @pytest.mark.parametrize("is_coupled, children, expected", [
        (False, 0, 1.0),
        (False, 1, 1.5),
        (False, 2, 2.0),
        (False, 3, 3.0),
        (False, 4, 4.0),
        (True, 0, 2.0),
        (True, 1, 2.5),
        (True, 2, 3.0),
        (True, 3, 4.0),
        (True, 4, 5.0),
    ])
    def test_parts(self, is_coupled, children, expected):
        assert compute_fiscal_parts(is_coupled, children) == expected

    def test_children_default_to_zero(self):
        assert compute_fiscal_parts(True) == 2.0

    def test_third_child_counts_a_full_part(self):
        """Going from 2 to 3 children adds 1 part, from 1 to 2 only 0.5."""
        two = compute_fiscal_parts(False, 2)
        three = compute_fiscal_parts(False, 3)
        assert three - two == 1.0
        assert two - compute_fiscal_parts(False, 1) == 0.5

    def test_parts_are_half_steps(self):
        for children in range(10):
            parts = compute_fiscal_parts(False, children)
            assert (parts * 2) == int(parts * 2)


class TestFiscalPartsValidation:
    """Out-of-range household inputs are rejected."""

    def test_negative_children_rejected(self):
        with pytest.raises(InvalidArgumentError, match="negative"):
            compute_fiscal_parts(False, -1)

    def test_fractional_children_rejected(self):
        with pytest.raises(InvalidArgumentError, match="integer"):
            compute_fiscal_parts(False, 1.5)

    def test_bool_children_rejected(self):
        with pytest.raises(InvalidArgumentError):
            compute_fiscal_parts(False, True)

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            compute_fiscal_parts(True, -3)
