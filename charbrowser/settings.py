from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging (override via env)
    LOG_LEVEL: str = "INFO"
    LOG_FILE_PATH: Optional[str] = None

    class Config:
        env_file = ".env"
