from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from roomboard.errors import NotFound
from roomboard.models.base import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    label = "record"

    def __init__(self, session: AsyncSession, model: type[T]):
        self.session = session
        self.model = model

    async def get(self, id: int) -> T | None:
        return await self.session.get(self.model, id)

    async def get_or_raise(self, id: int) -> T:
        obj = await self.get(id)
        if obj is None:
            raise NotFound(f"{self.label} {id} not found", **{f"{self.label}_id": id})
        return obj

    async def get_all(self, offset: int = 0, limit: int = 100) -> list[T]:
        stmt = select(self.model).order_by(self.model.id).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, **kwargs: Any) -> T:
        obj = self.model(**kwargs)
        self.session.add(obj)
        await self.session.flush()
        await self.session.refresh(obj)
        return obj

    async def count(self) -> int:
        stmt = select(func.count()).select_from(self.model)
        result = await self.session.execute(stmt)
        return result.scalar_one()
