from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from roomboard.database import get_session
from roomboard.errors import InvalidReference
from roomboard.schemas.section import SectionCreate, SectionOut, SectionRename
from roomboard.services.organizer import RoomOrganizer

router = APIRouter(prefix="/projects/{project_id}/sections", tags=["Sections"])


async def _section_in_project(organizer: RoomOrganizer, project_id: int, section_id: int):
    section = await organizer.sections.get_or_raise(section_id)
    if section.project_id != project_id:
        raise InvalidReference(
            f"section {section_id} does not belong to project {project_id}",
            section_id=section_id,
            project_id=project_id,
        )
    return section


@router.get("", response_model=list[SectionOut])
async def list_sections(project_id: int, session: AsyncSession = Depends(get_session)):
    organizer = RoomOrganizer(session)
    await organizer.projects.get_or_raise(project_id)
    return await organizer.sections.list_sections(project_id)


@router.post("", response_model=SectionOut, status_code=status.HTTP_201_CREATED)
async def create_section(project_id: int, data: SectionCreate, session: AsyncSession = Depends(get_session)):
    return await RoomOrganizer(session).create_section(project_id, data.name)


@router.put("/{section_id}", response_model=SectionOut)
async def rename_section(
    project_id: int,
    section_id: int,
    data: SectionRename,
    session: AsyncSession = Depends(get_session),
):
    organizer = RoomOrganizer(session)
    await _section_in_project(organizer, project_id, section_id)
    return await organizer.rename_section(section_id, data.name)


@router.delete("/{section_id}")
async def delete_section(project_id: int, section_id: int, session: AsyncSession = Depends(get_session)):
    """409 with the number of blocking rooms while the section is not empty."""
    organizer = RoomOrganizer(session)
    await _section_in_project(organizer, project_id, section_id)
    await organizer.delete_section(section_id)
    return Response(status_code=status.HTTP_200_OK)
