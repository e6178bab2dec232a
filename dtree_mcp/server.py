"""
MCP server definition for the directory tree simulator.
"""

import logging
from typing import Any, List, Optional

from fastapi.middleware.cors import CORSMiddleware
from starlette.applications import Starlette
from starlette.middleware import Middleware

from mcp.server.fastmcp import Context, FastMCP

from dtree_mcp.prompts import get_prompts
from dtree_mcp.tools.base import ToolExecResult
from dtree_mcp.utils.config import ServiceConfig
from dtree_mcp.utils.dependencies import (
    get_base_config,
    get_dir_tree_tool_provider,
    get_session_manager,
)


# Get a module-level logger
logger = logging.getLogger(__name__)


class CustomFastMCP(FastMCP):
    """Custom FastMCP server with CORS middleware."""

    def _add_cors_middleware(self, app: Starlette) -> Starlette:
        """A helper to add CORS middleware to a Starlette app."""
        app.user_middleware.insert(
            0,
            Middleware(
                CORSMiddleware,
                allow_origin_regex=".*",  # Allow any origin
                allow_credentials=True,
                allow_methods=["*"],
                allow_headers=["*"],
            ),
        )
        app.middleware_stack = app.build_middleware_stack()
        return app

    def sse_app(self, mount_path: str | None = None) -> Starlette:
        """Overrides the default sse_app to inject CORS middleware."""
        app = super().sse_app(mount_path)
        return self._add_cors_middleware(app)

    def streamable_http_app(self) -> Starlette:
        """Overrides the default streamable_http_app to inject CORS middleware."""
        app = super().streamable_http_app()
        return self._add_cors_middleware(app)


def build_server(config: ServiceConfig) -> CustomFastMCP:
    """Build and configure the FastMCP server instance.

    Args:
        config: The server's service configuration.

    Returns:
        A configured CustomFastMCP instance.
    """
    logger.info(
        "Initializing FastMCP server",
        extra={"host": config.MCP_HOST, "port": config.MCP_PORT},
    )
    return CustomFastMCP(
        "dtree-mcp",
        host=config.MCP_HOST,
        port=config.MCP_PORT,
    )


def resolve_session_id(context: Context, session_id: Optional[str]) -> str:
    """Picks the explicit session id, then the MCP client id, then the configured default."""
    if session_id:
        return session_id
    try:
        client_id = context.client_id
    except (AttributeError, ValueError):
        # Context used outside of a request.
        client_id = None
    return client_id or server_config.DEFAULT_SESSION_ID


def _to_response(result: ToolExecResult) -> dict[str, Any]:
    if result.error:
        return {"status": "error", "error": result.error, "exit_code": result.error_code}
    return {"status": "success", "result": result.output, "exit_code": result.error_code}


# Get the base configuration for server initialization.
# This is also imported by main.py to run the server.
server_config = get_base_config()
mcp_app = build_server(server_config)


# --- Prompt Handlers ---
@mcp_app.prompt(title="Agent System Prompt for the Directory Tree")
def get_system_prompt() -> str:
    """Provides the main system prompt for the agent."""
    prompts = get_prompts()
    return prompts["agent-system-prompt"]

# --- Tool Definitions ---

@mcp_app.tool(name="dir_tree")
async def dir_tree_tool(
    context: Context,
    subcommand: str,
    name: Optional[str] = None,
    path: Optional[List[str]] = None,
    session_id: Optional[str] = None,
) -> dict[str, Any]:
    """
    Builds and navigates an in-memory directory tree kept per session.

    Args:
        subcommand: One of 'mkdir', 'cd', 'pwd', 'ls', 'tree'.
        name: For 'mkdir'. The name of the directory to create; must not contain '/'.
        path: For 'cd'. Directory names relative to the current directory. Empty returns to the root.
        session_id: Optional session identifier. Defaults to the client id.

    Returns:
        A dictionary containing the result of the operation.
    """
    sid = resolve_session_id(context, session_id)
    logger.info(f"Executing dir_tree subcommand '{subcommand}' in session '{sid}'")
    try:
        tool = get_dir_tree_tool_provider()
        args = {
            "subcommand": subcommand,
            "name": name,
            "path": path,
        }
        args = {k: v for k, v in args.items() if v is not None}
        args["_fs_state"] = get_session_manager().get_fs_state(sid)

        result = await tool.execute(args)
        return _to_response(result)

    except Exception as e:
        logger.error(f"Error executing dir_tree subcommand: {e}", exc_info=True)
        return {"status": "error", "error": str(e), "exit_code": 1}


@mcp_app.tool()
async def reset_session(
    context: Context,
    session_id: Optional[str] = None,
) -> dict[str, Any]:
    """
    Discards the directory tree of a session and starts again from an empty root.

    Args:
        session_id: Optional session identifier. Defaults to the client id.

    Returns:
        A dictionary with a confirmation message.
    """
    sid = resolve_session_id(context, session_id)
    logger.info(f"Resetting session '{sid}'")
    try:
        state = get_session_manager().reset_fs_state(sid)
        return {"status": "success", "result": f"Session '{sid}' reset. CWD is now {state.pwd()}", "exit_code": 0}

    except Exception as e:
        logger.error(f"Error resetting session: {e}", exc_info=True)
        return {"status": "error", "error": str(e), "exit_code": 1}
