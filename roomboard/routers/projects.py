from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from roomboard.database import get_session
from roomboard.schemas.project import ProjectCreate, ProjectDetail, ProjectOut
from roomboard.schemas.room import RoomOut
from roomboard.schemas.section import SectionOut
from roomboard.viewmodels.project_vm import ProjectDetailViewModel, ProjectListViewModel

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("", response_model=list[ProjectOut])
async def list_projects(session: AsyncSession = Depends(get_session)):
    vm = await ProjectListViewModel.load(session)
    return vm.projects


@router.post("", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
async def create_project(data: ProjectCreate, session: AsyncSession = Depends(get_session)):
    return await ProjectDetailViewModel.create_project(session, data)


@router.get("/{project_id}", response_model=ProjectDetail)
async def get_project(project_id: int, session: AsyncSession = Depends(get_session)):
    """The project with its current rooms and sections."""
    vm = await ProjectDetailViewModel.load(session, project_id)
    return ProjectDetail(
        **ProjectOut.model_validate(vm.project).model_dump(),
        rooms=[RoomOut.model_validate(r) for r in vm.rooms],
        sections=[SectionOut.model_validate(s) for s in vm.sections],
    )
