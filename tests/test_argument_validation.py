"""Tests for ArgumentValidator and per-type value checks."""

import pytest

from headhunter_mcp.registry import (
    ArgumentValidator,
    InvalidArgument,
    MissingRequiredArgument,
    ParameterSpec,
    ParameterType,
)
from headhunter_mcp.registry.errors import INVALID_PARAMS, ErrorKind
from headhunter_mcp.registry.validation import coerce_value, describe_type


@pytest.fixture
def validator():
    return ArgumentValidator()


@pytest.fixture
def plan_parameters():
    """Schema shaped like create_30_60_90_plan."""
    return {
        "company": ParameterSpec(type="string", required=True),
        "role": ParameterSpec(type="string", required=True),
        "team_size": ParameterSpec(type="number"),
        "key_challenges": ParameterSpec(type="string_array"),
        "focus_style": ParameterSpec(
            type="enum",
            allowed_values=["transformation", "growth", "optimization", "startup"],
            default="growth",
        ),
    }


class TestRequiredParameters:
    """Missing required parameters."""

    def test_missing_required(self, validator, plan_parameters):
        with pytest.raises(MissingRequiredArgument) as exc_info:
            validator.validate(plan_parameters, {"company": "Slack"}, operation="create_30_60_90_plan")

        error = exc_info.value
        assert error.field == "role"
        assert error.kind == ErrorKind.MISSING_REQUIRED_ARGUMENT
        assert error.code == INVALID_PARAMS
        assert "'role'" in error.message
        assert "create_30_60_90_plan" in error.message

    def test_null_counts_as_missing(self, validator, plan_parameters):
        with pytest.raises(MissingRequiredArgument) as exc_info:
            validator.validate(plan_parameters, {"company": "Slack", "role": None})
        assert exc_info.value.field == "role"

    def test_first_missing_in_declaration_order(self, validator, plan_parameters):
        with pytest.raises(MissingRequiredArgument) as exc_info:
            validator.validate(plan_parameters, {})
        assert exc_info.value.field == "company"

    def test_none_arguments_treated_as_empty(self, validator, plan_parameters):
        with pytest.raises(MissingRequiredArgument):
            validator.validate(plan_parameters, None)


class TestDefaults:
    """Optional parameters and declared defaults."""

    def test_default_applied(self, validator, plan_parameters):
        result = validator.validate(plan_parameters, {"company": "Slack", "role": "CTO"})
        assert result["focus_style"] == "growth"

    def test_optional_without_default_left_out(self, validator, plan_parameters):
        result = validator.validate(plan_parameters, {"company": "Slack", "role": "CTO"})
        assert "team_size" not in result
        assert "key_challenges" not in result

    def test_null_optional_gets_default(self, validator, plan_parameters):
        result = validator.validate(
            plan_parameters, {"company": "Slack", "role": "CTO", "focus_style": None}
        )
        assert result["focus_style"] == "growth"

    def test_list_default_is_copied(self, validator):
        params = {"focus_areas": ParameterSpec(type="string_array", default=["overview"])}
        first = validator.validate(params, {})
        first["focus_areas"].append("mutated")

        second = validator.validate(params, {})
        assert second["focus_areas"] == ["overview"]
        assert params["focus_areas"].default == ["overview"]

    def test_result_in_declaration_order(self, validator, plan_parameters):
        result = validator.validate(
            plan_parameters,
            {"focus_style": "startup", "role": "CTO", "company": "Slack", "team_size": 12},
        )
        assert list(result) == ["company", "role", "team_size", "focus_style"]

    def test_undeclared_arguments_ignored(self, validator, plan_parameters):
        result = validator.validate(
            plan_parameters, {"company": "Slack", "role": "CTO", "unexpected": 1}
        )
        assert "unexpected" not in result


class TestTypeChecks:
    """Supplied values must match their declared type."""

    def test_enum_outside_set(self, validator, plan_parameters):
        with pytest.raises(InvalidArgument) as exc_info:
            validator.validate(
                plan_parameters,
                {"company": "Slack", "role": "CTO", "focus_style": "invalid_value"},
                operation="create_30_60_90_plan",
            )

        error = exc_info.value
        assert error.field == "focus_style"
        assert error.kind == ErrorKind.INVALID_ARGUMENT
        assert "'invalid_value'" in error.message
        assert "transformation" in error.message

    def test_number_rejects_string(self, validator, plan_parameters):
        with pytest.raises(InvalidArgument) as exc_info:
            validator.validate(plan_parameters, {"company": "Slack", "role": "CTO", "team_size": "120"})
        assert exc_info.value.field == "team_size"
        assert exc_info.value.expected == "number"

    def test_number_rejects_bool(self, validator, plan_parameters):
        with pytest.raises(InvalidArgument):
            validator.validate(plan_parameters, {"company": "Slack", "role": "CTO", "team_size": True})

    def test_number_accepts_int_and_float(self, validator, plan_parameters):
        for size in (120, 12.5):
            result = validator.validate(plan_parameters, {"company": "Slack", "role": "CTO", "team_size": size})
            assert result["team_size"] == size

    def test_string_array_rejects_scalar(self, validator, plan_parameters):
        with pytest.raises(InvalidArgument) as exc_info:
            validator.validate(
                plan_parameters, {"company": "Slack", "role": "CTO", "key_challenges": "scaling"}
            )
        assert exc_info.value.expected == "array of strings"

    def test_string_array_rejects_mixed_items(self, validator, plan_parameters):
        with pytest.raises(InvalidArgument):
            validator.validate(
                plan_parameters, {"company": "Slack", "role": "CTO", "key_challenges": ["scaling", 3]}
            )

    def test_string_rejects_number(self, validator, plan_parameters):
        with pytest.raises(InvalidArgument) as exc_info:
            validator.validate(plan_parameters, {"company": 42, "role": "CTO"})
        assert exc_info.value.field == "company"
        assert "got int" in exc_info.value.message

    def test_empty_string_is_present(self, validator, plan_parameters):
        result = validator.validate(plan_parameters, {"company": "", "role": "CTO"})
        assert result["company"] == ""


class TestCoerceValue:
    """Single-value checks."""

    def test_tuple_becomes_list(self):
        assert coerce_value(ParameterType.STRING_ARRAY, ("a", "b")) == ["a", "b"]

    def test_boolean(self):
        assert coerce_value(ParameterType.BOOLEAN, False) is False
        with pytest.raises(ValueError):
            coerce_value(ParameterType.BOOLEAN, "false")

    def test_describe_type(self):
        assert describe_type(ParameterType.STRING) == "string"
        assert describe_type(ParameterType.ENUM, ["a", "b"]) == "one of ['a', 'b']"
