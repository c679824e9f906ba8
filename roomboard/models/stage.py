from datetime import datetime

from sqlalchemy import Boolean, ForeignKey, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roomboard.models.base import Base


class Stage(Base):
    """Workflow stage of a room (design concept, drawings, FFE, ...)."""

    __tablename__ = "stages"

    id: Mapped[int] = mapped_column(primary_key=True)
    room_id: Mapped[int] = mapped_column(ForeignKey("rooms.id", ondelete="CASCADE"))
    type: Mapped[str] = mapped_column(String(40))
    status: Mapped[str] = mapped_column(String(30), default="NOT_STARTED")
    created_at: Mapped[datetime] = mapped_column(default=func.now())

    room: Mapped["Room"] = relationship(back_populates="stages")  # noqa: F821


class ChecklistItem(Base):
    """Design-concept checklist entry owned by a room."""

    __tablename__ = "checklist_items"

    id: Mapped[int] = mapped_column(primary_key=True)
    room_id: Mapped[int] = mapped_column(ForeignKey("rooms.id", ondelete="CASCADE"))
    name: Mapped[str] = mapped_column(String(200))
    notes: Mapped[str | None] = mapped_column(Text)
    link: Mapped[str | None] = mapped_column(String(500))
    completed: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(default=func.now())

    room: Mapped["Room"] = relationship(back_populates="checklist_items")  # noqa: F821
