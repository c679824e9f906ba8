from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from roomboard.config import settings
from roomboard.errors import ValidationError
from roomboard.models.section import Section
from roomboard.repositories.base import BaseRepository


class SectionRepository(BaseRepository[Section]):
    """Section Store. Deleting does not check membership; the engine does."""

    label = "section"

    def __init__(self, session: AsyncSession):
        super().__init__(session, Section)

    async def list_sections(self, project_id: int) -> list[Section]:
        stmt = select(Section).where(Section.project_id == project_id).order_by(Section.order, Section.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create_section(self, project_id: int, name: str) -> Section:
        name = _clean_name(name)
        stmt = select(func.max(Section.order)).where(Section.project_id == project_id)
        current = (await self.session.execute(stmt)).scalar_one()
        order = 0 if current is None else current + 1
        return await self.create(project_id=project_id, name=name, order=order)

    async def rename_section(self, section_id: int, name: str) -> Section:
        name = _clean_name(name)
        section = await self.get_or_raise(section_id)
        section.name = name
        await self.session.flush()
        await self.session.refresh(section)
        return section

    async def delete_section(self, section_id: int) -> None:
        section = await self.get_or_raise(section_id)
        await self.session.delete(section)
        await self.session.flush()


def _clean_name(name: str | None) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("section name must not be empty", field="name")
    if len(cleaned) > settings.section_name_max_length:
        raise ValidationError(
            f"section name is longer than {settings.section_name_max_length} characters",
            field="name",
        )
    return cleaned
