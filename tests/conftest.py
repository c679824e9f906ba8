import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from roomboard.database import get_session
from roomboard.main import app
from roomboard.models import Base
from roomboard.repositories.project_repo import ProjectRepository
from roomboard.repositories.room_repo import RoomRepository
from roomboard.repositories.section_repo import SectionRepository


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'roomboard.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def _session_override():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = _session_override
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
async def project(session):
    project = await ProjectRepository(session).create(name="Cohen Residence", client_name="Cohen")
    await session.commit()
    return project


@pytest.fixture
async def other_project(session):
    project = await ProjectRepository(session).create(name="Levi Apartment")
    await session.commit()
    return project


@pytest.fixture
def make_section(session, project):
    async def _make(name: str, project_id: int | None = None):
        section = await SectionRepository(session).create_section(project_id or project.id, name)
        await session.commit()
        return section

    return _make


@pytest.fixture
def make_room(session, project):
    """Insert a room with an explicit order, bypassing the organizer."""

    async def _make(type: str = "OTHER", order: int = 0, section=None, name: str | None = None, project_id=None):
        room = await RoomRepository(session).create_room(
            project_id or project.id,
            type=type,
            order=order,
            section_id=section.id if section is not None else None,
            name=name,
        )
        await session.commit()
        return room

    return _make
