from datetime import datetime

from pydantic import BaseModel


class SectionCreate(BaseModel):
    # emptiness is checked by the section store so the error matches the API taxonomy
    name: str


class SectionRename(BaseModel):
    name: str


class SectionOut(BaseModel):
    id: int
    project_id: int
    name: str
    order: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
