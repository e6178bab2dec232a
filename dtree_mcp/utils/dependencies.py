"""
Configuration and dependency management for the directory tree MCP server.
"""

import logging
from functools import lru_cache

from dtree_mcp.tools.dir_tree_tool import DirTreeTool
from dtree_mcp.utils.config import ServiceConfig
from dtree_mcp.utils.session_manager import SessionManager

logger = logging.getLogger(__name__)


@lru_cache
def get_base_config() -> ServiceConfig:
    """
    Retrieves the base server configuration from environment variables.

    Cached so the environment is parsed once per process.

    Returns:
        A cached instance of the ServiceConfig.
    """
    return ServiceConfig()


@lru_cache
def get_session_manager() -> SessionManager:
    """Returns the process-wide registry of session states."""
    logger.info("Initializing SessionManager singleton.")
    return SessionManager()


@lru_cache
def get_dir_tree_tool_provider() -> DirTreeTool:
    """Returns a cached instance of the DirTreeTool."""
    logger.info("Initializing DirTreeTool singleton.")
    return DirTreeTool()
