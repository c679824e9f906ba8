import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from jinja2 import Environment, FileSystemLoader

from roomboard.config import settings
from roomboard.database import engine
from roomboard.errors import BoardError
from roomboard.models import Base
from roomboard.routers import board, projects, rooms, sections
from roomboard.schemas.error import ErrorResponse
from roomboard.services.formatting import humanize

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.database_url.startswith("sqlite"):
        settings.data_dir.mkdir(parents=True, exist_ok=True)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))

    yield

    await engine.dispose()


app = FastAPI(title=settings.app_name, lifespan=lifespan)

# templates
templates_dir = Path(__file__).parent / "templates"
app.state.templates = Environment(loader=FileSystemLoader(str(templates_dir)), autoescape=True)
app.state.templates.filters["humanize"] = humanize


def _template_response(env: Environment, name: str, context: dict) -> HTMLResponse:
    template = env.get_template(name)
    return HTMLResponse(template.render(**context))


app.state.templates.TemplateResponse = lambda name, ctx: _template_response(app.state.templates, name, ctx)


@app.exception_handler(BoardError)
async def board_error_handler(request: Request, exc: BoardError) -> JSONResponse:
    body = ErrorResponse(
        error=exc.code,
        message=exc.message,
        retryable=exc.retryable,
        context=exc.context or None,
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


# routers
app.include_router(projects.router)
app.include_router(sections.router)
app.include_router(rooms.router)
app.include_router(board.router)


@app.get("/health")
async def health():
    return {"status": "ok", "app": settings.app_name}
