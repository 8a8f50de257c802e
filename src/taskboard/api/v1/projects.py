"""Project endpoints. Every project is visible to and editable by its owner only."""

from uuid import UUID

from fastapi import APIRouter, status

from src.taskboard.api.dependencies import CurrentUser, ProjectServiceDep
from src.taskboard.core.exceptions import NotFoundError
from src.taskboard.policies import Action
from src.taskboard.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate

router = APIRouter(prefix="/projects", tags=["projects"])

OWNER_ONLY = {
    403: {"description": "Caller does not own the project"},
    404: {"description": "No project with this id"},
}


@router.get("", response_model=list[ProjectRead], summary="List my projects")
async def list_projects(current_user: CurrentUser, service: ProjectServiceDep) -> list[ProjectRead]:
    """Projects owned by the caller, oldest first."""
    return [ProjectRead.model_validate(p) for p in await service.list_for_user(current_user)]


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    responses={422: {"description": "Blank or overlong name"}},
)
async def create_project(
    request: ProjectCreate, current_user: CurrentUser, service: ProjectServiceDep
) -> ProjectRead:
    return ProjectRead.model_validate(await service.create(current_user, request))


@router.get(
    "/{project_id}", response_model=ProjectRead, summary="Get project", responses=OWNER_ONLY
)
async def get_project(
    project_id: UUID, current_user: CurrentUser, service: ProjectServiceDep
) -> ProjectRead:
    project = await service.get_authorized(current_user, project_id, Action.VIEW)
    return ProjectRead.model_validate(project)


@router.put("/{project_id}", response_model=ProjectRead, responses=OWNER_ONLY)
@router.patch(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Update project",
    description="Only the supplied fields change. PUT is accepted as an alias.",
    responses=OWNER_ONLY,
)
async def update_project(
    project_id: UUID,
    request: ProjectUpdate,
    current_user: CurrentUser,
    service: ProjectServiceDep,
) -> ProjectRead:
    project = await service.get_authorized(current_user, project_id, Action.UPDATE)
    if not await service.update(project, request) and request.model_fields_set:
        # Row deleted between lookup and update
        raise NotFoundError("Project", project_id)
    return ProjectRead.model_validate(project)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
    description="Removes the project, its tasks and their comments.",
    responses=OWNER_ONLY,
)
async def delete_project(
    project_id: UUID, current_user: CurrentUser, service: ProjectServiceDep
) -> None:
    project = await service.get_authorized(current_user, project_id, Action.DELETE)
    if not await service.delete(project):
        raise NotFoundError("Project", project_id)
