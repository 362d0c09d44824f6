"""Application configuration from environment."""
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Gamerverse"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Persistent data dir: database, durable sessions and uploads live here
    data_dir: Path = Path("./data")
    database_url: str | None = None
    upload_dir: Path | None = None

    # Session binding: "sql" (durable) or "memory"
    session_backend: str = "sql"
    session_cookie_name: str = "gv_session"
    session_max_age: int = 60 * 60 * 24 * 7  # 7 days
    session_sweep_interval: int = 60 * 60  # expired sessions are purged at most hourly

    # bcrypt cost factor
    bcrypt_rounds: int = 10

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def resolved_database_url(self) -> str:
        if self.database_url:
            return self.database_url
        return f"sqlite:///{(self.data_dir / 'gamerverse.db').as_posix()}"

    @property
    def resolved_upload_dir(self) -> Path:
        return self.upload_dir or self.data_dir / "uploads"


def get_settings() -> Settings:
    return Settings()


def ensure_data_dirs(settings: Settings) -> None:
    """Create the data and upload directories if missing."""
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.resolved_upload_dir.mkdir(parents=True, exist_ok=True)
