from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roomboard.models.base import Base, TimestampMixin


class Section(Base, TimestampMixin):
    """A named grouping of rooms within a project, e.g. a floor or a wing."""

    __tablename__ = "sections"

    id: Mapped[int] = mapped_column(primary_key=True)
    project_id: Mapped[int] = mapped_column(ForeignKey("projects.id", ondelete="CASCADE"))
    name: Mapped[str] = mapped_column(String(100))
    order: Mapped[int] = mapped_column(default=0)

    project: Mapped["Project"] = relationship(back_populates="sections")  # noqa: F821

    __table_args__ = (Index("ix_sections_project", "project_id"),)
