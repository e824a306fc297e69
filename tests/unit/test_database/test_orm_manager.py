"""Tests for ORMManager."""

import pytest
from sqlalchemy import text

from kanban_board.database.models import Project
from kanban_board.database.orm_manager import ORMManager


class TestORMManager:
    """Test connection and session handling."""

    def test_creates_tables(self, orm_manager):
        report = orm_manager.perform_health_check()

        assert report["healthy"] is True
        assert report["tables"] == ["projects", "tasks"]
        assert report["table_count"] == 2

    def test_foreign_keys_enabled(self, orm_manager):
        with orm_manager.get_session() as session:
            assert session.execute(text("PRAGMA foreign_keys")).scalar() == 1

    def test_session_rolls_back_on_error(self, orm_manager):
        with pytest.raises(RuntimeError):
            with orm_manager.get_session() as session:
                session.add(Project(title="Sprint 1", description="x"))
                session.flush()
                raise RuntimeError("boom")

        with orm_manager.get_session() as session:
            assert session.query(Project).count() == 0

    def test_closed_manager_rejects_sessions(self, database_url):
        manager = ORMManager(database_url)
        manager.close()
        manager.close()

        with pytest.raises(RuntimeError):
            with manager.get_session():
                pass

    def test_health_check_reports_failure(self, database_url):
        manager = ORMManager(database_url)
        manager.close()

        report = manager.perform_health_check()

        assert report["healthy"] is False
        assert "error" in report

    def test_context_manager_closes(self, database_url):
        with ORMManager(database_url) as manager:
            assert manager.perform_health_check()["healthy"] is True

        with pytest.raises(RuntimeError):
            manager.engine
