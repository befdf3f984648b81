"""Shared helpers: MCP response conversion and markdown builders."""

from .markdown import bullet_list, humanize, table
from .response import ToolCallError, error_details, to_text_content

__all__ = [
    'ToolCallError',
    'to_text_content',
    'error_details',
    'bullet_list',
    'table',
    'humanize',
]
