from datetime import datetime

from pydantic import BaseModel, Field

from roomboard.models.room import RoomType
from roomboard.services.organizer import Direction


class RoomCreate(BaseModel):
    type: RoomType = RoomType.OTHER
    name: str | None = Field(default=None, max_length=200)
    custom_name: str | None = Field(default=None, max_length=200)
    section_id: int | None = None
    status: str | None = Field(default=None, max_length=30)


class RoomUpdate(BaseModel):
    type: RoomType | None = None
    name: str | None = Field(default=None, max_length=200)
    custom_name: str | None = Field(default=None, max_length=200)
    status: str | None = Field(default=None, min_length=1, max_length=30)

    # placement goes through move, reorder and arrange
    model_config = {"extra": "forbid"}


class RoomMove(BaseModel):
    section_id: int | None


class RoomReorder(BaseModel):
    direction: Direction


class BucketRef(BaseModel):
    section_id: int | None = None


class BucketArrange(BucketRef):
    room_ids: list[int]


class RoomOut(BaseModel):
    id: int
    project_id: int
    section_id: int | None
    type: str
    name: str | None
    custom_name: str | None
    order: int
    status: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
