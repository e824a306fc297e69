"""
Board API routes.

Thin handlers: each one validates the body through its pydantic model,
runs a single service call on the executor, and maps the result to a
response.
"""

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse

from kanban_board.server.errors import result_response
from kanban_board.server.schemas import BoardState, CreateTaskRequest, TitledPayload
from kanban_board.server.service_executor import ServiceExecutor


def create_board_router(executor: ServiceExecutor) -> APIRouter:
    """Create the router for project and task endpoints.

    Args:
        executor: Executor running service calls off the event loop.
    """
    router = APIRouter(tags=["board"])
    factory = executor.factory

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    @router.get("/projects")
    async def list_projects() -> JSONResponse:
        service = factory.get_project_service()
        return result_response(await executor.run(service.list_projects))

    @router.get("/project/{project_id}")
    async def get_project(project_id: str) -> JSONResponse:
        service = factory.get_project_service()
        return result_response(await executor.run(service.get_project, project_id))

    @router.post("/project")
    async def create_project(payload: TitledPayload) -> JSONResponse:
        service = factory.get_project_service()
        result = await executor.run(
            service.create_project, title=payload.title, description=payload.description
        )
        return result_response(result)

    @router.put("/project/{project_id}")
    async def update_project(project_id: str, payload: TitledPayload) -> JSONResponse:
        service = factory.get_project_service()
        result = await executor.run(
            service.update_project,
            project_id,
            title=payload.title,
            description=payload.description,
        )
        return result_response(result)

    @router.delete("/project/{project_id}")
    async def delete_project(project_id: str) -> JSONResponse:
        service = factory.get_project_service()
        return result_response(await executor.run(service.delete_project, project_id))

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    @router.post("/project/{project_id}/task")
    async def add_task(project_id: str, payload: CreateTaskRequest) -> JSONResponse:
        service = factory.get_task_service()
        attachments = None
        if payload.attachments is not None:
            attachments = [a.model_dump() for a in payload.attachments]
        result = await executor.run(
            service.add_task,
            project_id,
            title=payload.title,
            description=payload.description,
            attachments=attachments,
        )
        return result_response(result)

    @router.get("/project/{project_id}/task/{task_id}")
    async def get_task(project_id: str, task_id: str) -> JSONResponse:
        service = factory.get_task_service()
        return result_response(await executor.run(service.get_task, project_id, task_id))

    @router.put("/project/{project_id}/task/{task_id}")
    async def update_task(project_id: str, task_id: str, payload: TitledPayload) -> JSONResponse:
        service = factory.get_task_service()
        result = await executor.run(
            service.update_task,
            project_id,
            task_id,
            title=payload.title,
            description=payload.description,
        )
        return result_response(result)

    @router.delete("/project/{project_id}/task/{task_id}")
    async def delete_task(project_id: str, task_id: str) -> JSONResponse:
        service = factory.get_task_service()
        return result_response(await executor.run(service.delete_task, project_id, task_id))

    @router.put("/project/{project_id}/todo")
    async def reassign_tasks(project_id: str, board: BoardState = Body(...)) -> JSONResponse:
        service = factory.get_task_service()
        stage_groups = {
            stage: [item.id for item in group.items] for stage, group in board.items()
        }
        return result_response(await executor.run(service.reassign_tasks, project_id, stage_groups))

    return router
