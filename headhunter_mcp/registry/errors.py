"""
Error taxonomy for the operation registry and dispatcher.

Two families live here:

- ``OperationRegistryError``: problems building the catalog (bad
  descriptors, duplicate names, unreadable catalog files). These fail
  loudly at startup.
- ``DispatchError``: problems with a single call. The dispatcher converts
  every one of these into an error ``CallResult``; they never escape a
  dispatch.
"""

from enum import Enum
from typing import Optional


# ============================================================================
# Registry / catalog construction
# ============================================================================

class OperationRegistryError(Exception):
    """Base exception for registry errors."""
    pass


class OperationNotFound(OperationRegistryError):
    """Operation not found in registry."""
    pass


class OperationAlreadyRegistered(OperationRegistryError):
    """Operation name declared twice."""
    pass


class InvalidOperationDescriptor(OperationRegistryError):
    """Invalid operation descriptor."""
    pass


class CatalogLoadError(OperationRegistryError):
    """Operation catalog could not be loaded or bound to handlers."""
    pass


# ============================================================================
# Per-call dispatch errors
# ============================================================================

class ErrorKind(str, Enum):
    """Failure categories a caller can branch on."""
    UNKNOWN_OPERATION = "unknown_operation"
    MISSING_REQUIRED_ARGUMENT = "missing_required_argument"
    INVALID_ARGUMENT = "invalid_argument"
    HANDLER_EXECUTION_ERROR = "handler_execution_error"


# JSON-RPC error codes, as used by MCP
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class DispatchError(Exception):
    """Base class for failures of a single dispatched call."""

    kind: ErrorKind = ErrorKind.HANDLER_EXECUTION_ERROR
    code: int = INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        field: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.field = field


class UnknownOperation(DispatchError):
    """Requested operation is not in the registry."""

    kind = ErrorKind.UNKNOWN_OPERATION
    code = METHOD_NOT_FOUND

    def __init__(self, operation: str):
        super().__init__(f"Unknown operation: {operation}", operation=operation)


class MissingRequiredArgument(DispatchError):
    """A required parameter was not supplied."""

    kind = ErrorKind.MISSING_REQUIRED_ARGUMENT
    code = INVALID_PARAMS

    def __init__(self, field: str, operation: Optional[str] = None):
        message = f"Missing required parameter '{field}'"
        if operation:
            message += f" for operation '{operation}'"
        super().__init__(message, operation=operation, field=field)


class InvalidArgument(DispatchError):
    """A supplied parameter has the wrong type or a value outside its enum."""

    kind = ErrorKind.INVALID_ARGUMENT
    code = INVALID_PARAMS

    def __init__(
        self,
        field: str,
        expected: str,
        received: Optional[str] = None,
        operation: Optional[str] = None
    ):
        message = f"Invalid value for parameter '{field}'"
        if operation:
            message += f" of operation '{operation}'"
        message += f": expected {expected}"
        if received is not None:
            message += f", got {received}"
        super().__init__(message, operation=operation, field=field)
        self.expected = expected


class HandlerExecutionError(DispatchError):
    """The operation handler failed; the original exception is the cause."""

    kind = ErrorKind.HANDLER_EXECUTION_ERROR
    code = INTERNAL_ERROR
