"""Tests for the parameter validation helpers."""

import pytest

from src.utils.validation import validate_not_empty, validate_not_none, validate_positive


class TestValidateNotNone:
    """Tests for validate_not_none."""

    def test_accepts_values(self):
        """Falsy values other than None pass."""
        validate_not_none(0, "count")
        validate_not_none("", "name")

    def test_rejects_none(self):
        """None raises with the parameter name."""
        with pytest.raises(ValueError, match="'settings' cannot be None"):
            validate_not_none(None, "settings")


class TestValidateNotEmpty:
    """Tests for validate_not_empty."""

    def test_accepts_text(self):
        """Non-blank strings pass."""
        validate_not_empty("Start", "label")

    @pytest.mark.parametrize("value", ["", "   "])
    def test_rejects_blank(self, value):
        """Blank strings raise ValueError."""
        with pytest.raises(ValueError, match="cannot be empty"):
            validate_not_empty(value, "label")

    def test_rejects_none(self):
        """None raises ValueError."""
        with pytest.raises(ValueError, match="cannot be None"):
            validate_not_empty(None, "label")

    def test_rejects_non_string(self):
        """Other types raise TypeError."""
        with pytest.raises(TypeError, match="must be a string"):
            validate_not_empty(5, "label")  # type: ignore[arg-type]


class TestValidatePositive:
    """Tests for validate_positive."""

    def test_accepts_positive(self):
        """Positive ints and floats pass."""
        validate_positive(1, "limit")
        validate_positive(0.5, "ratio")

    @pytest.mark.parametrize("value", [0, -3])
    def test_rejects_non_positive(self, value):
        """Zero and negatives raise ValueError."""
        with pytest.raises(ValueError, match="must be positive"):
            validate_positive(value, "limit")

    def test_rejects_bool(self):
        """Booleans are not numbers here."""
        with pytest.raises(TypeError):
            validate_positive(True, "limit")
