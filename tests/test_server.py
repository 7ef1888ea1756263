"""Tests for the MCP server module."""

import json

import pytest


@pytest.mark.asyncio
async def test_list_tools():
    """Test that list_tools returns expected tools."""
    from rfcuri.server import list_tools

    tools = await list_tools()

    tool_names = [t.name for t in tools]
    assert "uri_parse" in tool_names
    assert "uri_normalize" in tool_names
    assert "uri_resolve" in tool_names
    assert "uri_equals" in tool_names
    assert "file_uri_base" in tool_names
    assert "path_to_file_uri" in tool_names
    assert "file_uri_to_path" in tool_names


@pytest.mark.asyncio
async def test_call_tool_unknown():
    """Test that calling unknown tool returns error."""
    from rfcuri.server import call_tool

    result = await call_tool("unknown_tool", {})

    assert len(result) == 1
    data = json.loads(result[0].text)
    assert "error" in data


@pytest.mark.asyncio
async def test_call_tool_resolve():
    """Test uri_resolve tool call."""
    from rfcuri.server import call_tool

    result = await call_tool(
        "uri_resolve",
        {
            "reference": "../../../g",
            "base": "http://a/b/c/d;p?q",
        },
    )

    data = json.loads(result[0].text)
    assert data["success"] is True
    assert data["uri"] == "http://a/g"


@pytest.mark.asyncio
async def test_call_tool_invalid_uri():
    """Test that syntax errors come back as error payloads."""
    from rfcuri.server import call_tool

    result = await call_tool("uri_parse", {"uri": "http://a:port/"})

    data = json.loads(result[0].text)
    assert data["success"] is False
    assert "numeric" in data["details"]


@pytest.mark.asyncio
async def test_call_tool_unknown_kind():
    """Test that an unknown kind is reported with the call context."""
    from rfcuri.server import call_tool

    result = await call_tool("uri_parse", {"uri": "http://a/", "kind": "gopher"})

    data = json.loads(result[0].text)
    assert "Unknown URI kind" in data["error"]
    assert data["context"]["tool"] == "uri_parse"


@pytest.mark.asyncio
async def test_call_tool_missing_argument():
    """Test that a missing required argument is reported as an error."""
    from rfcuri.server import call_tool

    result = await call_tool("uri_resolve", {"reference": "g"})

    data = json.loads(result[0].text)
    assert "error" in data


@pytest.mark.asyncio
async def test_default_kind_from_environment(monkeypatch):
    """Test that RFCURI_DEFAULT_KIND selects the kind for calls without one."""
    from rfcuri.server import call_tool

    monkeypatch.setenv("RFCURI_DEFAULT_KIND", "http")

    result = await call_tool("uri_normalize", {"uri": "http://example.com:80"})

    data = json.loads(result[0].text)
    assert data["uri"] == "http://example.com/"


@pytest.mark.asyncio
async def test_call_tool_equals():
    """Test uri_equals tool call."""
    from rfcuri.server import call_tool

    result = await call_tool(
        "uri_equals",
        {"first": "http://foo/%5bbar", "second": "http://foo/%5Bbar", "normalized": True},
    )

    data = json.loads(result[0].text)
    assert data["equal"] is True
