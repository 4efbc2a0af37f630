"""Tests for pattern data models."""

import pytest

from pattern_check.errors import ConfigurationError
from pattern_check.patterns.models import EvaluationResult, Pattern, PatternOperator


class TestPatternOperator:
    """Test suite for operator parsing."""

    @pytest.mark.parametrize("raw,expected", [
        ("equals", PatternOperator.EQUALS),
        ("not_equals", PatternOperator.NOT_EQUALS),
        ("Equals", PatternOperator.UNKNOWN),
        ("regex", PatternOperator.UNKNOWN),
        ("", PatternOperator.UNKNOWN),
        (None, PatternOperator.UNKNOWN),
    ])
    def test_parse(self, raw, expected) -> None:
        assert PatternOperator.parse(raw) == expected

    def test_symbols(self) -> None:
        assert PatternOperator.EQUALS.symbol == "=="
        assert PatternOperator.NOT_EQUALS.symbol == "!="
        assert PatternOperator.UNKNOWN.symbol == "?"


class TestPattern:
    """Test suite for Pattern construction."""

    def test_from_dict(self) -> None:
        pattern = Pattern.from_dict({"key": "status", "type": "equals", "value": "ok"})
        assert pattern == Pattern(key="status", type="equals", value="ok")
        assert pattern.operator == PatternOperator.EQUALS

    @pytest.mark.parametrize("value,expected", [
        (None, ""),
        (True, "true"),
        (200, "200"),
        (2.0, "2"),
    ])
    def test_scalar_values_coerced(self, value, expected) -> None:
        pattern = Pattern.from_dict({"key": "a", "type": "equals", "value": value})
        assert pattern.value == expected

    def test_missing_value_is_empty(self) -> None:
        assert Pattern.from_dict({"key": "a", "type": "equals"}).value == ""

    def test_missing_key_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            Pattern.from_dict({"type": "equals", "value": "x"})

    def test_empty_key_accepted(self) -> None:
        assert Pattern.from_dict({"key": "", "type": "equals", "value": ""}).key == ""

    def test_non_mapping_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            Pattern.from_dict(["status", "equals", "ok"])

    def test_unknown_type_preserved(self) -> None:
        pattern = Pattern.from_dict({"key": "a", "type": "regex", "value": "x"})
        assert pattern.type == "regex"
        assert pattern.operator == PatternOperator.UNKNOWN

    def test_to_dict_round_trip(self) -> None:
        data = {"key": "a.b", "type": "not_equals", "value": "x"}
        assert Pattern.from_dict(data).to_dict() == data


class TestEvaluationResult:
    """Test suite for EvaluationResult."""

    def test_accessors_and_dict(self) -> None:
        pattern = Pattern(key="status", type="equals", value="ok")
        result = EvaluationResult(
            pattern=pattern,
            operator=PatternOperator.EQUALS,
            resolved_value="error",
            matched=False,
        )

        assert result.key == "status"
        assert result.expected_value == "ok"
        assert result.to_dict() == {
            "key": "status",
            "operator": "equals",
            "expected_value": "ok",
            "resolved_value": "error",
            "matched": False,
            "exists": True,
        }
