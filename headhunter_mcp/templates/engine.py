"""
Markdown template engine for research reports.

Templates live in ``library/`` as ``<name>.md`` files and use ``${variable}``
placeholders, with an optional format spec (``${team_size:,}``). All
templates are read when the engine is constructed; rendering never touches
the filesystem.
"""

import logging
import re
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_LIBRARY_PATH = Path(__file__).parent / "library"

_PLACEHOLDER = re.compile(r'\$\{([A-Za-z_][A-Za-z0-9_]*)(?::([^}]*))?\}')


class TemplateError(Exception):
    """Base exception for template errors."""
    pass


class TemplateNotFoundError(TemplateError):
    """Requested template is not in the library."""
    pass


class TemplateVariableError(TemplateError):
    """A placeholder had no value or could not be formatted."""
    pass


class TemplateEngine:
    """Loads named markdown templates and substitutes placeholders."""

    def __init__(self, library_path: Optional[Union[str, Path]] = None):
        """
        Initialize the engine.

        Args:
            library_path: Directory of ``*.md`` templates (default: bundled library)

        Raises:
            TemplateError: If the library directory does not exist
        """
        self.library_path = Path(library_path) if library_path else DEFAULT_LIBRARY_PATH

        if not self.library_path.is_dir():
            raise TemplateError(f"Template library not found: {self.library_path}")

        templates = {
            path.stem: path.read_text(encoding='utf-8')
            for path in sorted(self.library_path.glob("*.md"))
        }
        self._templates: Mapping[str, str] = MappingProxyType(templates)

        logger.debug(f"Loaded {len(templates)} templates from {self.library_path}")

    def available_templates(self) -> List[str]:
        """Names of all loaded templates."""
        return list(self._templates.keys())

    def get_template(self, name: str) -> str:
        """
        Raw template text.

        Raises:
            TemplateNotFoundError: If no template has that name
        """
        if name not in self._templates:
            available = ', '.join(self._templates.keys())
            raise TemplateNotFoundError(
                f"Template not found: {name}. Available templates: {available}"
            )
        return self._templates[name]

    def render(self, name: str, variables: Dict[str, Any]) -> str:
        """
        Render a named template.

        Args:
            name: Template name (file stem)
            variables: Placeholder values

        Returns:
            Rendered text

        Raises:
            TemplateNotFoundError: If the template doesn't exist
            TemplateVariableError: If a placeholder has no value
        """
        return self.substitute(self.get_template(name), variables)

    def substitute(self, template: str, variables: Dict[str, Any]) -> str:
        """
        Substitute ``${name}`` and ``${name:format_spec}`` placeholders.

        Raises:
            TemplateVariableError: If a variable is missing or the format
                spec does not apply to its value
        """

        def replacer(match):
            var_name, format_spec = match.group(1), match.group(2)

            if var_name not in variables:
                raise TemplateVariableError(f"Variable '{var_name}' not provided")

            value = variables[var_name]
            if format_spec:
                try:
                    return format(value, format_spec)
                except (TypeError, ValueError) as e:
                    raise TemplateVariableError(
                        f"Cannot format '{var_name}' with '{format_spec}': {e}"
                    ) from e

            return str(value)

        return _PLACEHOLDER.sub(replacer, template)
