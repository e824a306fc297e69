"""HTTP server - FastAPI application exposing the board API."""

from kanban_board.server.app import configure_logging, create_app

__all__ = [
    "configure_logging",
    "create_app",
]
