"""HeadHunter MCP server: executive job-search research tools over MCP."""

__version__ = "1.0.0"
