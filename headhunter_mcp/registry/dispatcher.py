"""
Dispatcher - single entry point for operation calls.

Ties together registry lookup, argument validation, handler invocation and
error normalization. Every call produces a ``CallResult``; failures are
reported through ``is_error`` plus a tagged ``CallError`` rather than raised.
"""

import asyncio
import inspect
import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import (
    DispatchError,
    ErrorKind,
    HandlerExecutionError,
    InvalidArgument,
    OperationNotFound,
    UnknownOperation,
)
from .operation_registry import OperationDescriptor, OperationRegistry
from .validation import ArgumentValidator

logger = logging.getLogger(__name__)


# ============================================================================
# Request / Result Envelopes
# ============================================================================

class CallRequest(BaseModel):
    """One incoming invocation."""

    operation_name: str
    arguments: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("arguments", mode="before")
    @classmethod
    def none_means_empty(cls, v):
        return {} if v is None else v


class CallError(BaseModel):
    """Structured description of a failed call."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    code: int
    message: str
    operation: Optional[str] = None
    field: Optional[str] = None

    @classmethod
    def from_exception(cls, error: DispatchError) -> "CallError":
        return cls(
            kind=error.kind,
            code=error.code,
            message=error.message,
            operation=error.operation,
            field=error.field,
        )


class CallResult(BaseModel):
    """Uniform success-or-error envelope returned for every dispatched call."""

    model_config = ConfigDict(frozen=True)

    payload: str
    is_error: bool = False
    error: Optional[CallError] = None

    @classmethod
    def success(cls, payload: str) -> "CallResult":
        return cls(payload=payload, is_error=False)

    @classmethod
    def failure(cls, error: DispatchError) -> "CallResult":
        return cls(
            payload=error.message,
            is_error=True,
            error=CallError.from_exception(error),
        )


# ============================================================================
# Dispatcher
# ============================================================================

class Dispatcher:
    """
    Routes calls to operation handlers.

    Holds only the (immutable) registry and a stateless validator, so any
    number of dispatches may be in flight at once. There are no retries,
    timeouts or cancellation at this layer.
    """

    def __init__(self, registry: OperationRegistry, validator: Optional[ArgumentValidator] = None):
        self.registry = registry
        self.validator = validator or ArgumentValidator()

    async def dispatch(self, request: CallRequest) -> CallResult:
        """
        Execute one call.

        Args:
            request: Operation name and raw arguments

        Returns:
            CallResult; ``is_error`` is set for unknown operations, invalid
            arguments and handler failures alike
        """
        name = request.operation_name
        logger.debug(f"Dispatching {name}")

        try:
            operation = self.registry.find_operation(name)
        except OperationNotFound:
            logger.warning(f"Unknown operation requested: {name}")
            return CallResult.failure(UnknownOperation(name))

        try:
            record = self._build_record(operation, request.arguments)
        except DispatchError as e:
            logger.warning(f"Rejected arguments for {name}: {e.message}")
            return CallResult.failure(e)

        try:
            payload = await self._invoke(operation, record)
        except MemoryError:
            raise
        except Exception as e:
            error = self._wrap_handler_error(operation, request.arguments, e)
            logger.error(error.message, exc_info=e)
            return CallResult.failure(error)

        logger.debug(f"Completed {name} ({len(payload)} chars)")
        return CallResult.success(payload)

    async def dispatch_call(self, operation_name: str, arguments: Optional[Dict[str, Any]] = None) -> CallResult:
        """Convenience wrapper building the CallRequest."""
        return await self.dispatch(CallRequest(operation_name=operation_name, arguments=arguments))

    # ========================================================================
    # Internal Helpers
    # ========================================================================

    def _build_record(self, operation: OperationDescriptor, arguments: Dict[str, Any]) -> Any:
        """Validate arguments and load them into the operation's record type."""
        validated = self.validator.validate(operation.parameters, arguments, operation=operation.name)

        if operation.record_type is None:
            return validated

        try:
            return operation.record_type.model_validate(validated)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first.get("loc", ())) or "arguments"
            raise InvalidArgument(
                field,
                expected=first.get("msg", "valid value"),
                operation=operation.name
            ) from e

    async def _invoke(self, operation: OperationDescriptor, record: Any) -> str:
        """Run the handler without blocking other dispatches."""
        handler = operation.handler

        if inspect.iscoroutinefunction(handler):
            result = await handler(record)
        else:
            result = await asyncio.to_thread(handler, record)
            if inspect.isawaitable(result):
                result = await result

        if not isinstance(result, str):
            raise TypeError(
                f"handler returned {type(result).__name__}, expected text"
            )

        return result

    def _wrap_handler_error(
        self,
        operation: OperationDescriptor,
        arguments: Dict[str, Any],
        error: Exception
    ) -> HandlerExecutionError:
        """Attach operation name and subject to a handler failure."""
        message = f"Error executing {operation.name}"

        subject = arguments.get(operation.subject_parameter) if operation.subject_parameter else None
        if isinstance(subject, str) and subject.strip():
            message += f" for {subject}"

        message += f": {str(error) or type(error).__name__}"

        wrapped = HandlerExecutionError(message, operation=operation.name)
        wrapped.__cause__ = error
        return wrapped
