# fruit_app/core/config.py

import os
from typing import Optional

from dotenv import load_dotenv


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    """
    Application settings loaded from environment variables.

    A ``.env`` file in the working directory is loaded first; values already
    present in the environment win. Keyword arguments override both, which is
    what the tests use.
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        create_schema_on_startup: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> None:
        load_dotenv()

        self.project_name: str = os.getenv("PROJECT_NAME", "Fruit API")
        self.api_version: str = os.getenv("API_VERSION", "0.1.0")

        # Database
        self.database_url: str = database_url or os.getenv(
            "DATABASE_URL", "sqlite:///db.sqlite"
        )
        self.database_echo: bool = _env_bool("DATABASE_ECHO", "false")
        if create_schema_on_startup is None:
            create_schema_on_startup = _env_bool("CREATE_SCHEMA_ON_STARTUP", "true")
        self.create_schema_on_startup: bool = create_schema_on_startup

        # Logging
        self.log_level: str = log_level or os.getenv("LOG_LEVEL", "INFO")

        # Server (used by the console script only)
        self.host: str = os.getenv("HOST", "127.0.0.1")
        self.port: int = int(os.getenv("PORT", "8000"))
