"""
Operation Registry - Typed catalog of research operations.

Provides:
- Parameter specifications with JSON schema rendering
- Immutable operation descriptors bound to their handlers
- Deterministic listing and exact-name lookup
"""

import copy
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Mapping, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, model_validator

from .errors import (
    InvalidOperationDescriptor,
    OperationAlreadyRegistered,
    OperationNotFound,
)
from .validation import ParameterType, coerce_value

logger = logging.getLogger(__name__)

# Type aliases
JSONSchema = Dict[str, Any]
Handler = Callable[[Any], Union[str, Awaitable[str]]]


# ============================================================================
# Parameter Specifications
# ============================================================================

class ParameterSpec(BaseModel):
    """Describes one input field of an operation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: ParameterType
    required: bool = False
    default: Any = None
    allowed_values: Optional[List[str]] = None
    description: str = ""

    @model_validator(mode="after")
    def check_consistency(self) -> "ParameterSpec":
        """Reject contradictory declarations at catalog-construction time."""
        if self.required and self.has_default:
            raise ValueError("a required parameter cannot declare a default")

        if self.type == ParameterType.ENUM:
            if not self.allowed_values:
                raise ValueError("enum parameters must declare allowed_values")
        elif self.allowed_values is not None:
            raise ValueError(f"allowed_values only apply to enum parameters, not {self.type.value}")

        if self.has_default:
            try:
                coerce_value(self.type, self.default, self.allowed_values)
            except ValueError as e:
                raise ValueError(f"default {self.default!r} is not a valid {e}") from e

        return self

    @property
    def has_default(self) -> bool:
        """True when an optional parameter declares a fallback value."""
        return self.default is not None

    def to_json_schema(self) -> JSONSchema:
        """Render the JSON Schema fragment advertised to MCP clients."""
        if self.type == ParameterType.STRING_ARRAY:
            schema: JSONSchema = {"type": "array", "items": {"type": "string"}}
        elif self.type == ParameterType.ENUM:
            schema = {"type": "string", "enum": list(self.allowed_values)}
        else:
            schema = {"type": self.type.value}

        if self.description:
            schema["description"] = self.description

        if self.has_default:
            schema["default"] = copy.deepcopy(self.default)

        return schema


# ============================================================================
# Operation Descriptors
# ============================================================================

@dataclass(frozen=True)
class OperationDescriptor:
    """
    Describes one callable operation.

    ``record_type`` is the pydantic model the validated arguments are loaded
    into before the handler sees them; without it the handler receives the
    validated dict. ``subject_parameter`` names the argument that identifies
    what the call is about, used to give handler failures context.
    """
    name: str
    description: str
    parameters: Mapping[str, ParameterSpec]
    handler: Handler
    record_type: Optional[Type[BaseModel]] = None
    subject_parameter: Optional[str] = "company"

    def __post_init__(self):
        """Freeze the parameter mapping, preserving declaration order."""
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    def required_parameters(self) -> List[str]:
        """Names of required parameters, in declaration order."""
        return [name for name, spec in self.parameters.items() if spec.required]

    def input_schema(self) -> JSONSchema:
        """JSON Schema object for the operation's arguments."""
        return {
            "type": "object",
            "properties": {
                name: spec.to_json_schema() for name, spec in self.parameters.items()
            },
            "required": self.required_parameters(),
        }


# ============================================================================
# Operation Registry
# ============================================================================

class OperationRegistry:
    """
    Immutable catalog of operations.

    All descriptors are supplied at construction; there is no registration
    afterwards, so the registry can be shared freely between concurrent
    dispatches.
    """

    def __init__(self, operations: Iterable[OperationDescriptor]):
        """
        Build the registry.

        Args:
            operations: Descriptors in the order they should be listed

        Raises:
            OperationAlreadyRegistered: If an operation name appears twice
            InvalidOperationDescriptor: If a descriptor fails validation
        """
        self._operations: Dict[str, OperationDescriptor] = {}

        for operation in operations:
            self._validate_descriptor(operation)

            if operation.name in self._operations:
                raise OperationAlreadyRegistered(
                    f"Operation '{operation.name}' already registered"
                )

            self._operations[operation.name] = operation

        logger.info(f"OperationRegistry initialized with {len(self._operations)} operations")

    # ========================================================================
    # Retrieval
    # ========================================================================

    def list_operations(self) -> List[OperationDescriptor]:
        """All operations, in declaration order."""
        return list(self._operations.values())

    def find_operation(self, name: str) -> OperationDescriptor:
        """
        Retrieve an operation by exact, case-sensitive name.

        Raises:
            OperationNotFound: If operation doesn't exist
        """
        try:
            return self._operations[name]
        except KeyError:
            raise OperationNotFound(f"Operation '{name}' not found") from None

    def exists(self, name: str) -> bool:
        """Check if operation exists."""
        return name in self._operations

    def names(self) -> List[str]:
        """Operation names, in declaration order."""
        return list(self._operations.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    def __len__(self) -> int:
        return len(self._operations)

    # ========================================================================
    # Schema Generation
    # ========================================================================

    def describe_operations(self) -> List[Dict[str, Any]]:
        """
        Serialize the catalog for a "list operations" request.

        Returns:
            One dict per operation with name, description and input_schema
        """
        return [
            {
                "name": op.name,
                "description": op.description,
                "input_schema": op.input_schema(),
            }
            for op in self._operations.values()
        ]

    # ========================================================================
    # Internal Helpers
    # ========================================================================

    def _validate_descriptor(self, operation: OperationDescriptor) -> None:
        """
        Validate operation descriptor.

        Raises:
            InvalidOperationDescriptor: If validation fails
        """
        if not operation.name:
            raise InvalidOperationDescriptor("Operation name is required")

        if not operation.description:
            raise InvalidOperationDescriptor(
                f"Operation description is required ({operation.name})"
            )

        if operation.handler is None or not callable(operation.handler):
            raise InvalidOperationDescriptor(
                f"Operation handler is required ({operation.name})"
            )

        for param_name, spec in operation.parameters.items():
            if not isinstance(spec, ParameterSpec):
                raise InvalidOperationDescriptor(
                    f"Parameter '{param_name}' of {operation.name} is not a ParameterSpec"
                )

        record_type = operation.record_type
        if record_type is not None and not (
            isinstance(record_type, type) and issubclass(record_type, BaseModel)
        ):
            raise InvalidOperationDescriptor(
                f"record_type of {operation.name} must be a pydantic model"
            )
