"""Main MCP server implementation for executive job-search research."""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from mcp import Tool
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.types import TextContent

from .config import get_setting
from .models import RECORD_TYPES
from .registry import Dispatcher, OperationRegistry, build_registry, load_catalog
from .sources import DataSources
from .templates import TemplateEngine
from .tools import create_handlers
from .utils.response import error_details, to_text_content

logger = logging.getLogger(__name__)


def create_registry(
    catalog_path: Optional[Union[str, Path]] = None,
    templates: Optional[TemplateEngine] = None,
    sources: Optional[DataSources] = None,
) -> OperationRegistry:
    """
    Build the registry of research operations.

    Args:
        catalog_path: Operation catalog (default: ``catalog_path`` setting,
            then the packaged catalog)
        templates: Template engine passed to the tools
        sources: Data sources passed to the tools
    """
    catalog = load_catalog(catalog_path or get_setting('catalog_path'))
    handlers = create_handlers(templates, sources)
    return build_registry(handlers, catalog, RECORD_TYPES)


class HeadHunterMCPServer:
    """MCP server exposing the research operations as tools."""

    def __init__(self, registry: Optional[OperationRegistry] = None):
        """
        Initialize the server.

        Args:
            registry: Operation registry (default: create_registry())
        """
        self.registry = registry or create_registry()
        self.dispatcher = Dispatcher(self.registry)

        self.server = Server(get_setting('server_name'))
        self._register_handlers()

    def _register_handlers(self):
        """Register all MCP handlers."""

        @self.server.list_tools()
        async def handle_list_tools() -> list[Tool]:
            return await self.list_tools()

        # Arguments are checked by the dispatcher, not the SDK's jsonschema pass
        @self.server.call_tool(validate_input=False)
        async def handle_call_tool(name: str, arguments: dict) -> list[TextContent]:
            return await self.call_tool(name, arguments)

    async def list_tools(self) -> List[Tool]:
        """One tool per registered operation, in catalog order."""
        return [
            Tool(
                name=operation.name,
                description=operation.description,
                inputSchema=operation.input_schema(),
            )
            for operation in self.registry.list_operations()
        ]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> List[TextContent]:
        """
        Dispatch a tool call.

        Raises:
            ToolCallError: If the call failed; the SDK reports it as a tool
                result with ``isError`` set
        """
        result = await self.dispatcher.dispatch_call(name, arguments)
        if result.is_error:
            logger.info(f"Tool call {name} failed: {error_details(result)}")
        return to_text_content(result)

    async def run(self):
        """Run the MCP server over stdio."""
        from mcp.server.stdio import stdio_server

        logger.info(f"Starting {get_setting('server_name')} with {len(self.registry)} tools")

        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name=get_setting('server_name'),
                    server_version=get_setting('server_version'),
                    capabilities=self.server.get_capabilities(
                        notification_options=NotificationOptions(),
                        experimental_capabilities={}
                    )
                )
            )


def main():
    """Main entry point for the MCP server."""
    # stderr keeps stdout free for the stdio protocol
    logging.basicConfig(level=get_setting('log_level'), stream=sys.stderr)

    try:
        server = HeadHunterMCPServer()
        asyncio.run(server.run())
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except Exception as e:
        logger.critical(f"Server failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
