from sqlalchemy.ext.asyncio import AsyncSession

from roomboard.models.project import Project
from roomboard.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    label = "project"

    def __init__(self, session: AsyncSession):
        super().__init__(session, Project)
