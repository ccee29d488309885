"""Unit tests for the generic guard functions."""

from unittest.mock import Mock

import pytest

from core.exceptions import BaseError, ServiceError
from core.validation import validator


class CustomError(BaseError):
    """Stand-in for a caller-chosen exception type."""


class TestPredicates:
    """Tests for the emptiness and comparison predicates."""

    @pytest.mark.parametrize("value", [None, "", [], {}, (), set()])
    def test_is_empty(self, value):
        """Test values that count as empty."""
        assert validator.is_empty(value)

    @pytest.mark.parametrize("value", [" ", "a", [0], {"k": None}, 0, False])
    def test_is_not_empty(self, value):
        """Test values that are not empty; non-sized values never are."""
        assert not validator.is_empty(value)

    @pytest.mark.parametrize("text", [None, "", "   ", "\t\n"])
    def test_is_blank(self, text):
        """Test text that counts as blank."""
        assert validator.is_blank(text)

    def test_is_not_blank(self):
        """Test text with a visible character is not blank."""
        assert not validator.is_blank("  x  ")

    def test_equals_ignore_case(self):
        """Test case-insensitive comparison including None."""
        assert validator.equals_ignore_case("Admin", "aDMIN")
        assert validator.equals_ignore_case(None, None)
        assert not validator.equals_ignore_case("admin", None)
        assert not validator.equals_ignore_case(None, "admin")
        assert not validator.equals_ignore_case("admin", "user")

    def test_equals_ignore_case_compares_per_character(self):
        """Test that case folding which changes the length does not match."""
        assert not validator.equals_ignore_case("straße", "STRASSE")
        assert validator.equals_ignore_case("Straße", "STRAßE")
        assert validator.equals_ignore_case("ΣΊΣΥΦΟΣ", "σίσυφος")
        assert not validator.equals_ignore_case("admin", "admins")


class TestGuards:
    """Tests for the throw_if_* guards."""

    def test_raises_given_exception_type_with_message(self):
        """Test the guard raises the requested type carrying the message."""
        with pytest.raises(CustomError) as exc_info:
            validator.throw_if_null(None, "value is missing", CustomError)

        assert exc_info.value.message == "value is missing"
        assert str(exc_info.value) == "value is missing"

    @pytest.mark.parametrize(
        ("guard", "failing", "passing"),
        [
            (validator.throw_if_null, None, 0),
            (validator.throw_if_not_null, 0, None),
            (validator.throw_if_empty, "", "x"),
            (validator.throw_if_not_empty, [1], []),
            (validator.throw_if_blank, "  ", "x"),
            (validator.throw_if_not_blank, "x", "  "),
        ],
    )
    def test_single_argument_guards(self, guard, failing, passing):
        """Test each single-value guard fails and passes as expected."""
        with pytest.raises(ServiceError):
            guard(failing, "failed", ServiceError)

        assert guard(passing, "failed", ServiceError) is None

    def test_equal_guards(self):
        """Test the equality guards."""
        with pytest.raises(ServiceError):
            validator.throw_if_equal(1, 1, "same", ServiceError)
        with pytest.raises(ServiceError):
            validator.throw_if_not_equal(1, 2, "different", ServiceError)

        validator.throw_if_equal(1, 2, "same", ServiceError)
        validator.throw_if_not_equal("a", "a", "different", ServiceError)

    def test_equal_ignore_case_guards(self):
        """Test the case-insensitive equality guards."""
        with pytest.raises(ServiceError):
            validator.throw_if_equal_ignore_case("ABC", "abc", "same", ServiceError)
        with pytest.raises(ServiceError):
            validator.throw_if_not_equal_ignore_case(
                "abc", "abd", "different", ServiceError
            )

        validator.throw_if_equal_ignore_case("abc", None, "same", ServiceError)
        validator.throw_if_not_equal_ignore_case(None, None, "different", ServiceError)

    def test_throw_if(self):
        """Test the plain condition guard."""
        with pytest.raises(ServiceError, match="broken"):
            validator.throw_if(True, "broken", ServiceError)

        validator.throw_if(False, "broken", ServiceError)

    def test_throw_if_lazy_calls_supplier_once(self):
        """Test the supplier is evaluated exactly once."""
        supplier = Mock(return_value=True)

        with pytest.raises(ServiceError):
            validator.throw_if_lazy(supplier, "broken", ServiceError)

        supplier.assert_called_once_with()

    def test_throw_if_lazy_passes(self):
        """Test a falsy supplier result does not raise."""
        validator.throw_if_lazy(lambda: False, "broken", ServiceError)
