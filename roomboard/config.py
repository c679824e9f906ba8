from pathlib import Path

from dotenv import dotenv_values
from pydantic_settings import BaseSettings

_ENV_FILE = Path.home() / "env" / ".env.dev"
_env_vars = dotenv_values(str(_ENV_FILE)) if _ENV_FILE.exists() else {}


class Settings(BaseSettings):
    app_name: str = "Room Board"
    debug: bool = False
    database_url: str = "sqlite+aiosqlite:///data/roomboard.db"
    data_dir: Path = Path("data")
    log_level: str = "INFO"
    default_room_status: str = "NOT_STARTED"
    section_name_max_length: int = 100

    model_config = {
        "env_prefix": "ROOMBOARD_",
        "env_file": ".env",
        "extra": "ignore",
    }

    def model_post_init(self, __context):
        if "database_url" not in self.model_fields_set and _env_vars.get("DATABASE_URL"):
            self.database_url = _env_vars["DATABASE_URL"]


settings = Settings()
