from dataclasses import asdict, dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession

from roomboard.models.project import Project
from roomboard.models.room import Room
from roomboard.models.section import Section
from roomboard.services.formatting import display_name, status_label, type_label
from roomboard.services.organizer import RoomGrouping, RoomOrganizer


@dataclass
class RoomCard:
    id: int
    section_id: int | None
    order: int
    type: str
    status: str
    display_name: str
    type_label: str
    status_label: str

    @classmethod
    def from_room(cls, room: Room) -> "RoomCard":
        return cls(
            id=room.id,
            section_id=room.section_id,
            order=room.order,
            type=room.type,
            status=room.status,
            display_name=display_name(room),
            type_label=type_label(room.type),
            status_label=status_label(room.status),
        )


@dataclass
class SectionGroup:
    id: int
    name: str
    order: int
    rooms: list[RoomCard] = field(default_factory=list)

    @property
    def room_count(self) -> int:
        return len(self.rooms)


@dataclass
class RoomBoardViewModel:
    """Sections with their rooms in display order, plus the unassigned bucket.

    Room order comes from the organizer and is never re-sorted here.
    """

    project_id: int
    project_name: str
    sections: list[SectionGroup] = field(default_factory=list)
    unassigned: list[RoomCard] = field(default_factory=list)

    @classmethod
    async def load(cls, session: AsyncSession, project_id: int) -> "RoomBoardViewModel":
        organizer = RoomOrganizer(session)
        project = await organizer.projects.get_or_raise(project_id)
        grouping = await organizer.load_grouping(project_id)
        return cls.from_grouping(project, grouping)

    @classmethod
    def from_grouping(cls, project: Project, grouping: RoomGrouping) -> "RoomBoardViewModel":
        return cls(
            project_id=project.id,
            project_name=project.name,
            sections=[_section_group(s, grouping.rooms_in(s.id)) for s in grouping.sections],
            unassigned=[RoomCard.from_room(r) for r in grouping.unassigned],
        )

    @property
    def total_rooms(self) -> int:
        return len(self.unassigned) + sum(s.room_count for s in self.sections)

    def to_dict(self) -> dict:
        return asdict(self)


def _section_group(section: Section, rooms: list[Room]) -> SectionGroup:
    return SectionGroup(
        id=section.id,
        name=section.name,
        order=section.order,
        rooms=[RoomCard.from_room(r) for r in rooms],
    )
