"""
Tests for value coercion helpers.
"""

import math

from koordinater.utils.coercion import (
    clamp,
    coerce_boolean,
    coerce_string,
    read_config_value,
    to_array,
    to_int,
    to_number,
)


class ArrayLike:
    """Object exposing a to_array method."""

    def __init__(self, values):
        self.values = values

    def to_array(self):
        return list(self.values)


class GetterConfig:
    """Object exposing a get(key) method."""

    def __init__(self, values):
        self.values = values

    def get(self, key):
        return self.values.get(key)


class TestNumbers:
    """Tests for numeric coercion."""

    def test_to_number(self):
        """Test numbers and numeric strings."""
        assert to_number(3) == 3.0
        assert to_number(2.5) == 2.5
        assert to_number(" 4.25 ") == 4.25

    def test_to_number_rejects_invalid(self):
        """Test invalid input yields None."""
        assert to_number(True) is None
        assert to_number("") is None
        assert to_number("abc") is None
        assert to_number(None) is None
        assert to_number(math.nan) is None
        assert to_number("inf") is None

    def test_to_int(self):
        """Test integral values."""
        assert to_int("3006") == 3006
        assert to_int(4.0) == 4
        assert to_int(4.5) is None
        assert to_int("x") is None

    def test_clamp(self):
        """Test clamping into a range."""
        assert clamp(-1, 0, 6) == 0
        assert clamp(9, 0, 6) == 6
        assert clamp(3, 0, 6) == 3


class TestCollections:
    """Tests for array and mapping helpers."""

    def test_to_array(self):
        """Test array-like values are materialized."""
        assert to_array([1, 2]) == [1, 2]
        assert to_array((3, 4)) == [3, 4]
        assert to_array(ArrayLike([5, 6])) == [5, 6]
        assert to_array("3006") == []
        assert to_array(None) == []

    def test_read_config_value_mapping(self):
        """Test primary key and alias lookups on mappings."""
        assert read_config_value({"precision": 2}, "precision") == 2
        assert read_config_value({"sweref_wkid": 3010}, "swerefWkid", "sweref_wkid") == 3010
        assert read_config_value({}, "precision") is None
        assert read_config_value(None, "precision") is None

    def test_read_config_value_getter(self):
        """Test objects with a get method."""
        config = GetterConfig({"enablePin": False})
        assert read_config_value(config, "enablePin") is False
        assert read_config_value(config, "missing") is None


class TestScalars:
    """Tests for string and boolean coercion."""

    def test_coerce_string(self):
        """Test strings and numbers are kept."""
        assert coerce_string("label", "fallback") == "label"
        assert coerce_string(12, "fallback") == "12"
        assert coerce_string(None, "fallback") == "fallback"
        assert coerce_string(True, "fallback") == "fallback"
        assert coerce_string(math.inf, "fallback") == "fallback"

    def test_coerce_boolean(self):
        """Test common boolean encodings."""
        assert coerce_boolean(True, False) is True
        assert coerce_boolean("TRUE", False) is True
        assert coerce_boolean(" false ", True) is False
        assert coerce_boolean(1, False) is True
        assert coerce_boolean(0, True) is False
        assert coerce_boolean("yes", True) is True
        assert coerce_boolean(None, False) is False


class TestHugeIntegers:
    """Tests for integers beyond the float range."""

    HUGE = 10**400

    def test_to_number(self):
        """Test integers too large for a float yield None."""
        assert to_number(self.HUGE) is None
        assert to_number(-self.HUGE) is None
        assert to_int(self.HUGE) is None

    def test_coerce_string(self):
        """Test huge integers are still rendered as text."""
        assert coerce_string(self.HUGE, "fallback") == str(self.HUGE)
