from enum import Enum

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roomboard.models.base import Base, TimestampMixin


class RoomType(str, Enum):
    ENTRANCE = "ENTRANCE"
    FOYER = "FOYER"
    STAIRCASE = "STAIRCASE"
    LIVING_ROOM = "LIVING_ROOM"
    DINING_ROOM = "DINING_ROOM"
    KITCHEN = "KITCHEN"
    STUDY_ROOM = "STUDY_ROOM"
    OFFICE = "OFFICE"
    PLAYROOM = "PLAYROOM"
    MASTER_BEDROOM = "MASTER_BEDROOM"
    GIRLS_ROOM = "GIRLS_ROOM"
    BOYS_ROOM = "BOYS_ROOM"
    GUEST_BEDROOM = "GUEST_BEDROOM"
    POWDER_ROOM = "POWDER_ROOM"
    MASTER_BATHROOM = "MASTER_BATHROOM"
    FAMILY_BATHROOM = "FAMILY_BATHROOM"
    GIRLS_BATHROOM = "GIRLS_BATHROOM"
    BOYS_BATHROOM = "BOYS_BATHROOM"
    GUEST_BATHROOM = "GUEST_BATHROOM"
    LAUNDRY_ROOM = "LAUNDRY_ROOM"
    SUKKAH = "SUKKAH"
    BEDROOM = "BEDROOM"
    BATHROOM = "BATHROOM"
    FAMILY_ROOM = "FAMILY_ROOM"
    HALLWAY = "HALLWAY"
    PANTRY = "PANTRY"
    LAUNDRY = "LAUNDRY"
    MUDROOM = "MUDROOM"
    CLOSET = "CLOSET"
    OUTDOOR = "OUTDOOR"
    OTHER = "OTHER"


class RoomStatus(str, Enum):
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    ON_HOLD = "ON_HOLD"
    COMPLETED = "COMPLETED"
    NEEDS_ATTENTION = "NEEDS_ATTENTION"


class Room(Base, TimestampMixin):
    __tablename__ = "rooms"

    id: Mapped[int] = mapped_column(primary_key=True)
    project_id: Mapped[int] = mapped_column(ForeignKey("projects.id", ondelete="CASCADE"))
    section_id: Mapped[int | None] = mapped_column(ForeignKey("sections.id"))  # None = unassigned
    type: Mapped[str] = mapped_column(String(30), default=RoomType.OTHER.value)
    name: Mapped[str | None] = mapped_column(String(200))
    custom_name: Mapped[str | None] = mapped_column(String(200))
    order: Mapped[int] = mapped_column(default=0)  # position within its section bucket
    status: Mapped[str] = mapped_column(String(30), default=RoomStatus.NOT_STARTED.value)

    project: Mapped["Project"] = relationship(back_populates="rooms")  # noqa: F821
    stages: Mapped[list["Stage"]] = relationship(back_populates="room", cascade="all, delete-orphan")  # noqa: F821
    checklist_items: Mapped[list["ChecklistItem"]] = relationship(  # noqa: F821
        back_populates="room", cascade="all, delete-orphan"
    )

    __table_args__ = (Index("ix_rooms_bucket", "project_id", "section_id", "order"),)
