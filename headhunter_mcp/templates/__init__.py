"""
Template system for research report generation.
"""

from .engine import (
    TemplateEngine,
    TemplateError,
    TemplateNotFoundError,
    TemplateVariableError,
)

__all__ = [
    'TemplateEngine',
    'TemplateError',
    'TemplateNotFoundError',
    'TemplateVariableError',
]
