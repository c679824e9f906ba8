from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roomboard.models.base import Base, TimestampMixin


class Project(Base, TimestampMixin):
    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(200))
    client_name: Mapped[str | None] = mapped_column(String(200))

    rooms: Mapped[list["Room"]] = relationship(back_populates="project", cascade="all, delete-orphan")  # noqa: F821
    sections: Mapped[list["Section"]] = relationship(  # noqa: F821
        back_populates="project", cascade="all, delete-orphan"
    )
