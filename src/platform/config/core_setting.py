from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    DEBUG: bool = True  # Set to False in production

    # Service identification, prefixed to every log line
    SERVICE_NAME: str = 'event-status'
    DEPLOY_ENV: str = 'local_dev'

    @field_validator('SERVICE_NAME', 'DEPLOY_ENV', mode='before')
    @classmethod
    def normalize_identifier(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().lower()
        return v


settings = Settings()  # type: ignore
