"""FastMCP server initialization for Tasklist MCP."""

import logging

from mcp.server.fastmcp import FastMCP

from tasklist_mcp.config import get_settings
from tasklist_mcp.logging_setup import setup_logging
from tasklist_mcp.session import AppState

logger = logging.getLogger(__name__)

# Initialize the MCP server
mcp = FastMCP("tasklist_mcp")

_state: AppState | None = None


def get_state() -> AppState:
    """Return the session state served by this process, creating it on first use."""
    global _state
    if _state is None:
        _state = AppState(get_settings())
    return _state


def reset_state(state: AppState | None = None) -> AppState:
    """Replace the served session state, cancelling the old one's timers."""
    global _state
    if _state is not None:
        _state.close()
    _state = state if state is not None else AppState(get_settings())
    return _state


def run() -> None:
    """Run the MCP server."""
    settings = get_settings()
    setup_logging(level=settings.log_level, log_file=settings.log_file)
    logger.info(
        "Starting tasklist_mcp notification_interval=%ss debounce=%ss",
        settings.notification_interval_seconds,
        settings.search_debounce_seconds,
    )
    try:
        mcp.run()
    finally:
        if _state is not None:
            _state.close()


if __name__ == "__main__":
    run()
