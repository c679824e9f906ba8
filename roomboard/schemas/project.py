from datetime import datetime

from pydantic import BaseModel, Field

from roomboard.schemas.room import RoomOut
from roomboard.schemas.section import SectionOut


class ProjectCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    client_name: str | None = Field(default=None, max_length=200)


class ProjectOut(BaseModel):
    id: int
    name: str
    client_name: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProjectDetail(ProjectOut):
    """Raw rooms and sections of a project, rooms unsorted."""

    rooms: list[RoomOut] = []
    sections: list[SectionOut] = []
