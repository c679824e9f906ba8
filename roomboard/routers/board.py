from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession

from roomboard.database import get_session
from roomboard.schemas.room import BucketArrange, BucketRef, RoomOut
from roomboard.services.organizer import RoomOrganizer
from roomboard.viewmodels.board_vm import RoomBoardViewModel

router = APIRouter(prefix="/projects/{project_id}", tags=["Board"])


@router.get("/board")
async def board(project_id: int, session: AsyncSession = Depends(get_session)):
    vm = await RoomBoardViewModel.load(session, project_id)
    return vm.to_dict()


@router.get("/board.html", response_class=HTMLResponse)
async def board_page(project_id: int, request: Request, session: AsyncSession = Depends(get_session)):
    vm = await RoomBoardViewModel.load(session, project_id)
    return request.app.state.templates.TemplateResponse(
        "board/board.html",
        {"request": request, "vm": vm},
    )


@router.post("/buckets/compact", response_model=list[RoomOut])
async def compact_bucket(project_id: int, data: BucketRef, session: AsyncSession = Depends(get_session)):
    return await RoomOrganizer(session).compact_bucket(project_id, data.section_id)


@router.put("/buckets/arrange", response_model=list[RoomOut])
async def arrange_bucket(project_id: int, data: BucketArrange, session: AsyncSession = Depends(get_session)):
    return await RoomOrganizer(session).arrange_bucket(project_id, data.section_id, data.room_ids)
