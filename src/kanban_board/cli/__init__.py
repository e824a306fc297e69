"""CLI interface for Kanban Board."""


def main() -> None:
    """Entry point for the kanban-board CLI."""
    from kanban_board.cli.app import create_app

    app = create_app()
    app()


if __name__ == "__main__":
    main()
