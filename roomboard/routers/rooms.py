from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from roomboard.database import get_session
from roomboard.schemas.room import RoomCreate, RoomMove, RoomOut, RoomReorder, RoomUpdate
from roomboard.services.organizer import RoomOrganizer

router = APIRouter(tags=["Rooms"])


@router.post("/projects/{project_id}/rooms", response_model=RoomOut, status_code=status.HTTP_201_CREATED)
async def create_room(project_id: int, data: RoomCreate, session: AsyncSession = Depends(get_session)):
    return await RoomOrganizer(session).create_room(project_id, **data.model_dump(mode="json"))


@router.get("/rooms/{room_id}", response_model=RoomOut)
async def get_room(room_id: int, session: AsyncSession = Depends(get_session)):
    return await RoomOrganizer(session).rooms.get_or_raise(room_id)


@router.put("/rooms/{room_id}", response_model=RoomOut)
async def update_room(room_id: int, data: RoomUpdate, session: AsyncSession = Depends(get_session)):
    updates = data.model_dump(mode="json", exclude_unset=True)
    # type and status are required columns; null means "leave as is"
    updates = {k: v for k, v in updates.items() if v is not None or k in ("name", "custom_name")}
    return await RoomOrganizer(session).update_room(room_id, **updates)


@router.put("/rooms/{room_id}/section", response_model=RoomOut)
async def move_room(room_id: int, data: RoomMove, session: AsyncSession = Depends(get_session)):
    return await RoomOrganizer(session).move_room_to_section(room_id, data.section_id)


@router.post("/rooms/{room_id}/reorder", response_model=list[RoomOut])
async def reorder_room(room_id: int, data: RoomReorder, session: AsyncSession = Depends(get_session)):
    """Returns the room's bucket in its new order."""
    return await RoomOrganizer(session).reorder_room(room_id, data.direction)


@router.delete("/rooms/{room_id}")
async def delete_room(room_id: int, session: AsyncSession = Depends(get_session)):
    await RoomOrganizer(session).delete_room(room_id)
    return Response(status_code=status.HTTP_200_OK)
