"""Kanban Board - REST backend for project boards with staged tasks.

Projects own ordered tasks grouped into stages; tasks can be moved across
stages in bulk to mirror a drag-and-drop board.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
