#!/usr/bin/env python3
"""
Tests for the MCP tool handlers in server.py
"""

from unittest.mock import MagicMock

import pytest

from dtree_mcp import server
from dtree_mcp.prompts import get_prompts
from dtree_mcp.utils.session_manager import SessionManager


@pytest.fixture
def session_manager(monkeypatch):
    manager = SessionManager()
    monkeypatch.setattr(server, "get_session_manager", lambda: manager)
    return manager


@pytest.fixture
def context():
    ctx = MagicMock()
    ctx.client_id = "client-1"
    return ctx


class TestServerTools:
    """Tests for dir_tree and reset_session handlers"""

    @pytest.mark.asyncio
    async def test_dir_tree_uses_client_session(self, session_manager, context):
        response = await server.dir_tree_tool(context, "mkdir", name="a")
        assert response == {"status": "success", "result": "Created /a/", "exit_code": 0}
        assert session_manager.get_fs_state("client-1").paths() == ["/a/"]

    @pytest.mark.asyncio
    async def test_explicit_session_id(self, session_manager, context):
        await server.dir_tree_tool(context, "mkdir", name="a", session_id="other")
        assert session_manager.get_fs_state("other").paths() == ["/a/"]
        assert session_manager.get_fs_state("client-1").paths() == ["/"]

    @pytest.mark.asyncio
    async def test_default_session_without_client(self, session_manager, context):
        context.client_id = None
        await server.dir_tree_tool(context, "mkdir", name="a")
        assert session_manager.get_fs_state(server.server_config.DEFAULT_SESSION_ID).paths() == ["/a/"]

    @pytest.mark.asyncio
    async def test_error_response(self, session_manager, context):
        response = await server.dir_tree_tool(context, "cd", path=["missing"])
        assert response["status"] == "error"
        assert response["error"] == "missing: invalid element in path"
        assert response["exit_code"] == -1

    @pytest.mark.asyncio
    async def test_reset_session(self, session_manager, context):
        await server.dir_tree_tool(context, "mkdir", name="a")
        await server.dir_tree_tool(context, "cd", path=["a"])
        response = await server.reset_session(context)
        assert response["status"] == "success"
        state = session_manager.get_fs_state("client-1")
        assert state.cwd == []
        assert state.paths() == ["/"]


def test_system_prompt():
    prompt = server.get_system_prompt()
    assert prompt == get_prompts()["agent-system-prompt"]
    assert "dir_tree" in prompt
    assert "reset_session" in prompt
