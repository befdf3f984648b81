"""Conversion of dispatcher results into MCP tool responses."""

from typing import Any, Dict, List

from mcp.types import TextContent

from ..registry import CallResult


class ToolCallError(Exception):
    """
    Raised from the MCP call_tool handler for a failed call.

    The SDK reports a raised exception as a tool result with
    ``isError=True`` whose only text block is ``str(exception)``, so the
    message is exactly the error payload.
    """

    def __init__(self, result: CallResult):
        super().__init__(result.payload)
        self.result = result


def to_text_content(result: CallResult) -> List[TextContent]:
    """
    Turn a CallResult into MCP content.

    Returns:
        Single text block holding the payload

    Raises:
        ToolCallError: If the result is an error
    """
    if result.is_error:
        raise ToolCallError(result)

    return [TextContent(type="text", text=result.payload)]


def error_details(result: CallResult) -> Dict[str, Any]:
    """Structured error fields for logging; empty for successful results."""
    if not result.is_error or result.error is None:
        return {}

    details = {
        "kind": result.error.kind.value,
        "code": result.error.code,
        "message": result.error.message,
    }
    if result.error.operation:
        details["operation"] = result.error.operation
    if result.error.field:
        details["field"] = result.error.field

    return details
