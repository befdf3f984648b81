"""
Schema-driven argument validation.

Turns the untyped argument bag of an incoming call into a validated record:
declared parameters are type-checked, enum values checked for membership,
omitted optional parameters filled from the descriptor's declared default,
and undeclared keys dropped.
"""

import copy
import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Sequence

from .errors import InvalidArgument, MissingRequiredArgument

if TYPE_CHECKING:
    from .operation_registry import ParameterSpec

logger = logging.getLogger(__name__)


class ParameterType(str, Enum):
    """Parameter types an operation schema may declare."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING_ARRAY = "string_array"
    ENUM = "enum"


def describe_type(param_type: ParameterType, allowed_values: Optional[Sequence[str]] = None) -> str:
    """Human-readable shape of a parameter type, used in error messages."""
    if param_type == ParameterType.STRING_ARRAY:
        return "array of strings"
    if param_type == ParameterType.ENUM:
        return f"one of {list(allowed_values or [])}"
    return param_type.value


def coerce_value(
    param_type: ParameterType,
    value: Any,
    allowed_values: Optional[Sequence[str]] = None
) -> Any:
    """
    Check a single value against a parameter type.

    Args:
        param_type: Declared parameter type
        value: Supplied value
        allowed_values: Legal values (enum types only)

    Returns:
        The value, normalized (tuples of strings become lists)

    Raises:
        ValueError: If the value does not fit; the message is the expected shape
    """
    expected = describe_type(param_type, allowed_values)

    if param_type == ParameterType.STRING:
        if not isinstance(value, str):
            raise ValueError(expected)
        return value

    if param_type == ParameterType.NUMBER:
        # bool is an int subclass but never a valid number here
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(expected)
        return value

    if param_type == ParameterType.BOOLEAN:
        if not isinstance(value, bool):
            raise ValueError(expected)
        return value

    if param_type == ParameterType.STRING_ARRAY:
        if not isinstance(value, (list, tuple)):
            raise ValueError(expected)
        if not all(isinstance(item, str) for item in value):
            raise ValueError(expected)
        return list(value)

    if param_type == ParameterType.ENUM:
        if not isinstance(value, str) or value not in (allowed_values or []):
            raise ValueError(expected)
        return value

    raise ValueError(f"unsupported parameter type {param_type!r}")


def _describe_received(value: Any) -> str:
    if isinstance(value, str):
        return repr(value)
    return type(value).__name__


class ArgumentValidator:
    """Validates raw argument bags against an operation's parameter schema."""

    def validate(
        self,
        parameters: Mapping[str, "ParameterSpec"],
        arguments: Optional[Mapping[str, Any]],
        operation: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Validate and default an argument bag.

        Args:
            parameters: Ordered parameter schema (name -> ParameterSpec)
            arguments: Raw arguments supplied by the caller
            operation: Operation name (for error messages)

        Returns:
            Validated arguments in declaration order. Optional parameters with
            no declared default are left out when not supplied.

        Raises:
            MissingRequiredArgument: A required parameter is absent
            InvalidArgument: A supplied parameter fails its type or enum check
        """
        arguments = arguments or {}
        validated: Dict[str, Any] = {}

        for name, spec in parameters.items():
            value = arguments.get(name)

            # JSON null counts as "not supplied"
            if value is None:
                if spec.required:
                    raise MissingRequiredArgument(name, operation=operation)
                if spec.has_default:
                    validated[name] = copy.deepcopy(spec.default)
                continue

            try:
                validated[name] = coerce_value(spec.type, value, spec.allowed_values)
            except ValueError as e:
                raise InvalidArgument(
                    name,
                    expected=str(e),
                    received=_describe_received(value),
                    operation=operation
                ) from e

        extra = [key for key in arguments if key not in parameters]
        if extra:
            logger.debug(f"Ignoring undeclared arguments for {operation}: {extra}")

        return validated
