"""Tests for value-kind classification and canonical strings."""

from collections import OrderedDict
from decimal import Decimal

import pytest

from fieldtransform.core.type_mapping import (
    ValueKind,
    describe_type,
    kind_of,
    to_canonical_string,
)


class TestKindOf:
    """Tests for kind_of."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, ValueKind.NULL),
            (True, ValueKind.BOOLEAN),
            (False, ValueKind.BOOLEAN),
            (0, ValueKind.INTEGER),
            (-5, ValueKind.INTEGER),
            (1.5, ValueKind.FLOAT),
            ("", ValueKind.STRING),
            ([1], ValueKind.SEQUENCE),
            ((1, 2), ValueKind.SEQUENCE),
            ({"a": 1}, ValueKind.MAPPING),
            (OrderedDict(a=1), ValueKind.MAPPING),
            (Decimal("1.5"), ValueKind.OTHER),
            (b"bytes", ValueKind.OTHER),
        ],
    )
    def test_classification(self, value, expected):
        assert kind_of(value) is expected

    def test_bool_is_not_integer(self):
        """bool is an int subclass but classifies as BOOLEAN."""
        assert kind_of(True) is not ValueKind.INTEGER


class TestDescribeType:
    """Tests for describe_type."""

    def test_includes_python_type(self):
        assert describe_type([1]) == "sequence (list)"
        assert describe_type(True) == "boolean (bool)"

    def test_null(self):
        assert describe_type(None) == "null"


class TestToCanonicalString:
    """Tests for to_canonical_string."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, ""),
            (True, "true"),
            (False, "false"),
            (42, "42"),
            (-7, "-7"),
            (3.0, "3"),
            (3.14, "3.14"),
            (-0.5, "-0.5"),
            (1e21, "1e+21"),
            (float("inf"), "inf"),
            ("text", "text"),
            ([1, "a"], '[1, "a"]'),
            ({"k": "ü"}, '{"k": "ü"}'),
        ],
    )
    def test_rendering(self, value, expected):
        assert to_canonical_string(value) == expected

    def test_large_integral_float(self):
        """Integral floats below 1e21 render without exponent."""
        assert to_canonical_string(1e20) == "100000000000000000000"

    def test_unknown_types_use_str(self):
        assert to_canonical_string(Decimal("1.50")) == "1.50"

    def test_nested_floats_follow_float_rule(self):
        """Integral floats inside containers render like top-level floats."""
        assert to_canonical_string([1.0, 2.5, [3.0]]) == "[1, 2.5, [3]]"
        assert to_canonical_string({"n": 4.0}) == '{"n": 4}'

    def test_non_string_keys_fall_back_to_str(self):
        """Mappings JSON cannot encode render with str()."""
        assert to_canonical_string({(1, 2): "x"}) == "{(1, 2): 'x'}"

    def test_circular_container_falls_back_to_str(self):
        """Self-containing lists render with str()."""
        value = [1]
        value.append(value)

        assert to_canonical_string(value) == "[1, [...]]"

    def test_shared_members_are_not_circular(self):
        """The same list twice is not a cycle."""
        shared = [1]
        assert to_canonical_string([shared, shared]) == "[[1], [1]]"
