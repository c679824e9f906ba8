from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from roomboard.config import settings
from roomboard.errors import InvalidReference, NotFound, ValidationError
from roomboard.models.room import Room
from roomboard.models.section import Section
from roomboard.repositories.base import BaseRepository

UPDATABLE_FIELDS = {"section_id", "order", "type", "name", "custom_name", "status"}


class RoomRepository(BaseRepository[Room]):
    """Room Store: rooms scoped to a project.

    Writes are flushed, never committed; the caller owns the transaction.
    """

    label = "room"

    def __init__(self, session: AsyncSession):
        super().__init__(session, Room)

    async def list_rooms(self, project_id: int) -> list[Room]:
        stmt = select(Room).where(Room.project_id == project_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_bucket(self, project_id: int, section_id: int | None) -> list[Room]:
        stmt = select(Room).where(Room.project_id == project_id, _in_section(section_id))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def max_order(self, project_id: int, section_id: int | None, exclude_id: int | None = None) -> int | None:
        """Highest order in a bucket, or None when the bucket is empty."""
        stmt = select(func.max(Room.order)).where(Room.project_id == project_id, _in_section(section_id))
        if exclude_id is not None:
            stmt = stmt.where(Room.id != exclude_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def check_section(self, project_id: int, section_id: int | None) -> None:
        """Raise unless section_id is None or a section of the same project."""
        if section_id is None:
            return
        section = await self.session.get(Section, section_id)
        if section is None:
            raise NotFound(f"section {section_id} not found", section_id=section_id)
        if section.project_id != project_id:
            raise InvalidReference(
                f"section {section_id} belongs to project {section.project_id}, not {project_id}",
                section_id=section_id,
                project_id=project_id,
            )

    async def create_room(
        self,
        project_id: int,
        type: str,
        order: int,
        section_id: int | None = None,
        name: str | None = None,
        custom_name: str | None = None,
        status: str | None = None,
    ) -> Room:
        await self.check_section(project_id, section_id)
        fields: dict[str, Any] = {
            "project_id": project_id,
            "section_id": section_id,
            "type": type,
            "name": name,
            "custom_name": custom_name,
            "order": order,
            "status": status or settings.default_room_status,
        }
        return await self.create(**fields)

    async def update_room(self, room_id: int, **patch: Any) -> Room:
        """Apply a partial update. Keys present in patch are written, None included."""
        unknown = set(patch) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(f"cannot update room fields: {', '.join(sorted(unknown))}")

        room = await self.get_or_raise(room_id)
        if "section_id" in patch:
            await self.check_section(room.project_id, patch["section_id"])

        for key, value in patch.items():
            setattr(room, key, value)
        await self.session.flush()
        await self.session.refresh(room)
        return room

    async def delete_room(self, room_id: int) -> None:
        """Delete a room together with its stages and checklist items."""
        stmt = (
            select(Room)
            .options(selectinload(Room.stages), selectinload(Room.checklist_items))
            .where(Room.id == room_id)
        )
        result = await self.session.execute(stmt)
        room = result.scalar_one_or_none()
        if room is None:
            raise NotFound(f"room {room_id} not found", room_id=room_id)
        await self.session.delete(room)
        await self.session.flush()


def _in_section(section_id: int | None):
    if section_id is None:
        return Room.section_id.is_(None)
    return Room.section_id == section_id
