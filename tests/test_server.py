"""Tests for the MCP server wrapper."""

import pytest
from mcp import types
from mcp.types import TextContent

from headhunter_mcp.server import HeadHunterMCPServer, create_registry
from headhunter_mcp.utils import ToolCallError, error_details


@pytest.fixture(scope="module")
def server():
    return HeadHunterMCPServer()


class TestListTools:

    @pytest.mark.asyncio
    async def test_advertises_all_operations(self, server):
        tools = await server.list_tools()
        assert [tool.name for tool in tools] == [
            "research_company",
            "analyze_revenue_engine",
            "linkedin_intelligence",
            "interview_preparation",
            "executive_brief",
            "create_30_60_90_plan",
        ]

    @pytest.mark.asyncio
    async def test_tool_schemas(self, server):
        tools = {tool.name: tool for tool in await server.list_tools()}

        plan = tools["create_30_60_90_plan"]
        assert plan.description
        assert plan.inputSchema["type"] == "object"
        assert plan.inputSchema["required"] == ["company", "role"]
        assert plan.inputSchema["properties"]["team_size"]["type"] == "number"
        assert plan.inputSchema["properties"]["focus_style"]["enum"] == [
            "transformation", "growth", "optimization", "startup"
        ]

        research = tools["research_company"]
        assert research.inputSchema["properties"]["role"]["default"] == "VP Engineering"


class TestCallTool:

    @pytest.mark.asyncio
    async def test_success_is_single_text_block(self, server):
        content = await server.call_tool("research_company", {"company": "Acme"})

        assert len(content) == 1
        assert isinstance(content[0], TextContent)
        assert content[0].type == "text"
        assert "Acme" in content[0].text
        assert "VP Engineering" in content[0].text

    @pytest.mark.asyncio
    async def test_error_raises_with_payload(self, server):
        with pytest.raises(ToolCallError) as exc_info:
            await server.call_tool("executive_brief", {"company": "Datadog"})

        assert "role" in str(exc_info.value)
        assert exc_info.value.result.is_error
        assert error_details(exc_info.value.result)["field"] == "role"

    @pytest.mark.asyncio
    async def test_unknown_tool(self, server):
        with pytest.raises(ToolCallError) as exc_info:
            await server.call_tool("nonexistent_tool", {})

        assert str(exc_info.value) == "Unknown operation: nonexistent_tool"
        assert error_details(exc_info.value.result)["code"] == -32601

    @pytest.mark.asyncio
    async def test_none_arguments(self, server):
        with pytest.raises(ToolCallError):
            await server.call_tool("research_company", None)


# ============================================================================
# MCP Protocol Layer
# ============================================================================

async def _sdk_call(server, name, arguments):
    """Run a tools/call request through the handler the SDK registered."""
    handler = server.server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    response = await handler(request)
    return response.root


class TestProtocolCallTool:
    """Results as an MCP client receives them."""

    def test_handlers_registered(self, server):
        assert types.ListToolsRequest in server.server.request_handlers
        assert types.CallToolRequest in server.server.request_handlers

    @pytest.mark.asyncio
    async def test_missing_role_is_error_result(self, server):
        result = await _sdk_call(server, "executive_brief", {"company": "Datadog"})

        assert result.isError is True
        assert len(result.content) == 1
        assert result.content[0].text == "Missing required parameter 'role' for operation 'executive_brief'"

    @pytest.mark.asyncio
    async def test_unknown_tool_is_error_result(self, server):
        result = await _sdk_call(server, "nonexistent_tool", {})

        assert result.isError is True
        assert result.content[0].text == "Unknown operation: nonexistent_tool"

    @pytest.mark.asyncio
    async def test_wrong_type_reports_dispatcher_message(self, server):
        result = await _sdk_call(server, "analyze_revenue_engine", {"company": "Acme", "focus": 5})

        assert result.isError is True
        text = result.content[0].text
        assert text.startswith("Invalid value for parameter 'focus' of operation 'analyze_revenue_engine'")
        assert text.endswith("got int")

    @pytest.mark.asyncio
    async def test_plan_scenario_succeeds(self, server):
        result = await _sdk_call(server, "create_30_60_90_plan", {
            "company": "Slack",
            "role": "CTO",
            "team_size": 120,
            "focus_style": "transformation",
        })

        assert not result.isError
        assert len(result.content) == 1
        text = result.content[0].text
        assert "Slack" in text
        assert "CTO" in text
        assert "transformation" in text


class TestCreateRegistry:

    def test_custom_catalog(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text(
            "operations:\n"
            "  - name: research_company\n"
            "    description: Research only\n"
            "    parameters:\n"
            "      company: {type: string, required: true}\n",
            encoding="utf-8",
        )

        registry = create_registry(path)
        assert registry.names() == ["research_company"]

    def test_default_catalog(self):
        assert len(create_registry()) == 6
