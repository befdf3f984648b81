"""
Runtime settings for the HeadHunter MCP server.

Values are read from environment variables once at import time so the
server can be reconfigured without code changes.

Usage:
    from headhunter_mcp.config.settings import get_setting

    level = get_setting('log_level')

Environment Variables:
    HEADHUNTER_SERVER_NAME=...     - Server name reported during MCP initialization
    HEADHUNTER_SERVER_VERSION=...  - Server version reported during MCP initialization
    HEADHUNTER_LOG_LEVEL=INFO      - Root logging level (DEBUG, INFO, WARNING, ...)
    HEADHUNTER_CATALOG_PATH=...    - Alternate operation catalog (YAML)
"""

import os
from typing import Any, Dict


SETTINGS: Dict[str, Any] = {
    'server_name': os.getenv('HEADHUNTER_SERVER_NAME', 'headhunter-mcp-server'),
    'server_version': os.getenv('HEADHUNTER_SERVER_VERSION', '1.0.0'),
    'log_level': os.getenv('HEADHUNTER_LOG_LEVEL', 'INFO').upper(),

    # None means the catalog.yaml shipped with the registry package
    'catalog_path': os.getenv('HEADHUNTER_CATALOG_PATH') or None,
}


def get_setting(name: str) -> Any:
    """
    Look up a setting by name.

    Args:
        name: Setting name (e.g., 'log_level')

    Returns:
        Current value of the setting

    Raises:
        KeyError: If setting name is not recognized

    Example:
        >>> get_setting('server_name')
        'headhunter-mcp-server'
    """
    if name not in SETTINGS:
        available = ', '.join(SETTINGS.keys())
        raise KeyError(
            f"Unknown setting: '{name}'. "
            f"Available settings: {available}"
        )

    return SETTINGS[name]


def get_all_settings() -> Dict[str, Any]:
    """Return a copy of all settings and their current values."""
    return SETTINGS.copy()


def set_setting(name: str, value: Any) -> None:
    """
    Programmatically override a setting (for testing only).

    Warning:
        In production, use environment variables.
    """
    if name not in SETTINGS:
        available = ', '.join(SETTINGS.keys())
        raise KeyError(
            f"Unknown setting: '{name}'. "
            f"Available settings: {available}"
        )

    SETTINGS[name] = value
