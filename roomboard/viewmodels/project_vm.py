from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession

from roomboard.models.project import Project
from roomboard.models.room import Room
from roomboard.models.section import Section
from roomboard.repositories.project_repo import ProjectRepository
from roomboard.repositories.room_repo import RoomRepository
from roomboard.repositories.section_repo import SectionRepository
from roomboard.schemas.project import ProjectCreate


@dataclass
class ProjectListViewModel:
    projects: list[Project] = field(default_factory=list)

    @classmethod
    async def load(cls, session: AsyncSession) -> "ProjectListViewModel":
        repo = ProjectRepository(session)
        return cls(projects=await repo.get_all())


@dataclass
class ProjectDetailViewModel:
    project: Project
    rooms: list[Room] = field(default_factory=list)
    sections: list[Section] = field(default_factory=list)

    @classmethod
    async def load(cls, session: AsyncSession, project_id: int) -> "ProjectDetailViewModel":
        project = await ProjectRepository(session).get_or_raise(project_id)
        rooms = await RoomRepository(session).list_rooms(project_id)
        sections = await SectionRepository(session).list_sections(project_id)
        return cls(project=project, rooms=rooms, sections=sections)

    @classmethod
    async def create_project(cls, session: AsyncSession, data: ProjectCreate) -> Project:
        repo = ProjectRepository(session)
        project = await repo.create(name=data.name.strip(), client_name=data.client_name)
        await session.commit()
        return project
