"""Pytest configuration and fixtures."""

import os
from pathlib import Path
from typing import Generator

import pytest

from kanban_board.database.orm_manager import ORMManager


@pytest.fixture(scope="function", autouse=True)
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Point every test at its own SQLite file and clear other overrides."""
    monkeypatch.setenv("KANBAN_DB_PATH", str(tmp_path / "test.db"))
    for name in ("KANBAN_DATABASE_URL", "KANBAN_CORS_ORIGIN", "KANBAN_DEBUG", "KANBAN_WORKERS"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def database_url() -> str:
    """Get the test database URL."""
    return f"sqlite:///{os.environ['KANBAN_DB_PATH']}"


@pytest.fixture
def orm_manager(database_url: str) -> Generator[ORMManager, None, None]:
    """Create an ORM manager with a temporary database."""
    manager = ORMManager(database_url)
    yield manager
    manager.close()


@pytest.fixture
def project_repo(orm_manager: ORMManager):
    """Create a project repository."""
    from kanban_board.database.repositories import ProjectRepository

    return ProjectRepository(orm_manager)


@pytest.fixture
def task_repo(orm_manager: ORMManager):
    """Create a task repository."""
    from kanban_board.database.repositories import TaskRepository

    return TaskRepository(orm_manager)


@pytest.fixture
def service_factory(orm_manager: ORMManager):
    """Create a service factory bound to the test database."""
    from kanban_board.services import ServiceFactory

    return ServiceFactory(orm_manager)


@pytest.fixture
def project_service(service_factory):
    """Create a project service with all dependencies."""
    return service_factory.get_project_service()


@pytest.fixture
def task_service(service_factory):
    """Create a task service with all dependencies."""
    return service_factory.get_task_service()


@pytest.fixture
def project(project_service) -> dict:
    """A freshly created, empty project."""
    result = project_service.create_project("Sprint 1", "First sprint")
    assert result.is_success
    return result.data


@pytest.fixture
def client(orm_manager: ORMManager):
    """HTTP client for the API, with the application lifespan running."""
    from fastapi.testclient import TestClient

    from kanban_board.server import create_app

    with TestClient(create_app(orm_manager)) as test_client:
        yield test_client
