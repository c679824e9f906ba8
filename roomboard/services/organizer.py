"""
Room organization engine.

Groups a project's rooms into sections and keeps a strict order inside every
bucket (one bucket per section plus the unassigned bucket, section_id None).
Order values only matter relative to their siblings: they may have gaps and
need not start at zero. Ties are broken by room id.

Every operation re-reads the bucket it touches and commits its own writes.
Nothing is locked between calls, so concurrent writers follow last-write-wins
per row.
"""
import logging
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from roomboard.errors import Conflict, NotFound, PartialFailure, ValidationError
from roomboard.models.room import Room
from roomboard.models.section import Section
from roomboard.repositories.project_repo import ProjectRepository
from roomboard.repositories.room_repo import RoomRepository
from roomboard.repositories.section_repo import SectionRepository

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"


def sort_key(room: Room) -> tuple[int, int]:
    return (room.order, room.id)


def sort_bucket(rooms: list[Room]) -> list[Room]:
    return sorted(rooms, key=sort_key)


@dataclass
class RoomGrouping:
    sections: list[Section] = field(default_factory=list)
    buckets: dict[int | None, list[Room]] = field(default_factory=dict)

    def rooms_in(self, section_id: int | None) -> list[Room]:
        return self.buckets.get(section_id, [])

    @property
    def unassigned(self) -> list[Room]:
        return self.rooms_in(None)


def group_rooms(rooms: list[Room], sections: list[Section]) -> RoomGrouping:
    """Partition rooms by section_id and sort every bucket by (order, id).

    Every known section gets a bucket, empty or not, and so does the
    unassigned bucket. Rooms pointing at a section that is not in
    ``sections`` keep their own bucket but are not part of any section view.
    """
    buckets: dict[int | None, list[Room]] = defaultdict(list)
    for room in rooms:
        buckets[room.section_id].append(room)

    known = {s.id for s in sections}
    orphaned = [sid for sid in buckets if sid is not None and sid not in known]
    if orphaned:
        logger.warning("Rooms reference unknown sections %s", orphaned)

    grouped = {sid: sort_bucket(members) for sid, members in buckets.items()}
    for section_id in (None, *known):
        grouped.setdefault(section_id, [])
    return RoomGrouping(sections=list(sections), buckets=grouped)


class RoomOrganizer:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.projects = ProjectRepository(session)
        self.rooms = RoomRepository(session)
        self.sections = SectionRepository(session)

    # ----- reads -----

    async def load_grouping(self, project_id: int) -> RoomGrouping:
        await self.projects.get_or_raise(project_id)
        rooms = await self.rooms.list_rooms(project_id)
        sections = await self.sections.list_sections(project_id)
        return group_rooms(rooms, sections)

    async def bucket(self, project_id: int, section_id: int | None) -> list[Room]:
        return sort_bucket(await self.rooms.list_bucket(project_id, section_id))

    async def _append_order(self, project_id: int, section_id: int | None, exclude_id: int | None = None) -> int:
        current = await self.rooms.max_order(project_id, section_id, exclude_id=exclude_id)
        return 0 if current is None else current + 1

    # ----- rooms -----

    async def create_room(
        self,
        project_id: int,
        type: str,
        name: str | None = None,
        custom_name: str | None = None,
        section_id: int | None = None,
        status: str | None = None,
    ) -> Room:
        """Create a room at the end of its destination bucket."""
        await self.projects.get_or_raise(project_id)
        await self.rooms.check_section(project_id, section_id)
        order = await self._append_order(project_id, section_id)
        room = await self.rooms.create_room(
            project_id,
            type=type,
            order=order,
            section_id=section_id,
            name=name,
            custom_name=custom_name,
            status=status,
        )
        await self.session.commit()
        logger.info("Created room %s in project %s (section=%s, order=%s)", room.id, project_id, section_id, order)
        return room

    async def update_room(self, room_id: int, **fields) -> Room:
        """Plain field edit (name, custom_name, type, status). Placement has its own operations."""
        placement = {"section_id", "order"} & set(fields)
        if placement:
            raise ValidationError(
                "use move or reorder to change room placement", fields=sorted(placement)
            )
        room = await self.rooms.update_room(room_id, **fields)
        await self.session.commit()
        return room

    async def move_room_to_section(self, room_id: int, section_id: int | None) -> Room:
        """Reassign a room and append it to the end of the destination bucket.

        Moving a room into the bucket it is already in sends it to the end.
        """
        room = await self.rooms.get_or_raise(room_id)
        await self.rooms.check_section(room.project_id, section_id)

        source = room.section_id
        order = await self._append_order(room.project_id, section_id, exclude_id=room.id)
        room = await self.rooms.update_room(room.id, section_id=section_id, order=order)
        await self.session.commit()
        logger.info("Moved room %s from section %s to %s (order=%s)", room.id, source, section_id, order)
        return room

    async def reorder_room(self, room_id: int, direction: Direction) -> list[Room]:
        """Swap a room's order with its neighbour above or below.

        At the edge of the bucket this is a no-op. The two rows are written in
        separate commits; if the second one fails the first stays and
        PartialFailure is raised. Returns the bucket in its new order.

        If the two rooms share an order value the whole bucket is compacted
        first, which rewrites more than the two swapped rows.
        """
        direction = Direction(direction)
        room = await self.rooms.get_or_raise(room_id)
        project_id, section_id = room.project_id, room.section_id
        siblings = await self.bucket(project_id, section_id)

        index = next(i for i, r in enumerate(siblings) if r.id == room.id)
        target = index - 1 if direction is Direction.UP else index + 1
        if target < 0 or target >= len(siblings):
            return siblings
        other = siblings[target]

        if other.order == room.order:
            # a swap of equal values would not move anything
            await self.compact_bucket(project_id, section_id)

        other_id = other.id
        room_order, other_order = room.order, other.order

        await self.rooms.update_room(room_id, order=other_order)
        await self.session.commit()
        try:
            await self.rooms.update_room(other_id, order=room_order)
            await self.session.commit()
        except (SQLAlchemyError, NotFound) as exc:
            await self.session.rollback()
            logger.warning(
                "Swap of rooms %s and %s failed after first write: %s", room_id, other_id, exc
            )
            raise PartialFailure(
                f"room {room_id} was moved but room {other_id} was not updated; reload and retry",
                room_id=room_id,
                sibling_id=other_id,
            ) from exc

        logger.info("Swapped order of rooms %s and %s (%s)", room_id, other_id, direction.value)
        return await self.bucket(project_id, section_id)

    async def delete_room(self, room_id: int) -> None:
        """Delete a room and its child data. Siblings keep their order values."""
        await self.rooms.delete_room(room_id)
        await self.session.commit()
        logger.info("Deleted room %s", room_id)

    # ----- buckets -----

    async def compact_bucket(self, project_id: int, section_id: int | None) -> list[Room]:
        """Renumber a bucket to 0..n-1 keeping its current order."""
        await self.projects.get_or_raise(project_id)
        await self.rooms.check_section(project_id, section_id)
        rooms = await self.bucket(project_id, section_id)
        changed = 0
        for position, room in enumerate(rooms):
            if room.order != position:
                await self.rooms.update_room(room.id, order=position)
                changed += 1
        await self.session.commit()
        if changed:
            logger.info("Compacted bucket %s/%s, renumbered %d rooms", project_id, section_id, changed)
        return rooms

    async def arrange_bucket(self, project_id: int, section_id: int | None, room_ids: list[int]) -> list[Room]:
        """Put a bucket into an explicit order, e.g. after a drag and drop.

        room_ids must list every room of the bucket exactly once.
        """
        await self.projects.get_or_raise(project_id)
        await self.rooms.check_section(project_id, section_id)
        members = {room.id: room for room in await self.rooms.list_bucket(project_id, section_id)}
        if len(room_ids) != len(set(room_ids)) or set(room_ids) != set(members):
            raise ValidationError(
                "room_ids must list every room of the bucket exactly once",
                expected=sorted(members),
                received=list(room_ids),
            )
        for position, room_id in enumerate(room_ids):
            if members[room_id].order != position:
                await self.rooms.update_room(room_id, order=position)
        await self.session.commit()
        logger.info("Arranged bucket %s/%s as %s", project_id, section_id, room_ids)
        return [members[room_id] for room_id in room_ids]

    # ----- sections -----

    async def create_section(self, project_id: int, name: str) -> Section:
        await self.projects.get_or_raise(project_id)
        section = await self.sections.create_section(project_id, name)
        await self.session.commit()
        logger.info("Created section %s (%r) in project %s", section.id, section.name, project_id)
        return section

    async def rename_section(self, section_id: int, name: str) -> Section:
        section = await self.sections.rename_section(section_id, name)
        await self.session.commit()
        return section

    async def delete_section(self, section_id: int) -> None:
        """Delete an empty section. Raises Conflict while rooms are still assigned to it."""
        section = await self.sections.get_or_raise(section_id)
        grouping = await self.load_grouping(section.project_id)
        blocking = len(grouping.rooms_in(section.id))
        if blocking:
            logger.warning("Refused to delete section %s: %d rooms still assigned", section.id, blocking)
            raise Conflict(
                f"section {section.name!r} still contains {blocking} room(s); move or delete them first",
                blocking_rooms=blocking,
            )
        await self.sections.delete_section(section.id)
        await self.session.commit()
        logger.info("Deleted section %s", section_id)
