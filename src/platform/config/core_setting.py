from pathlib import Path
from typing import Annotated, List, Literal

import orjson
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Train Seat Reservation'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production
    LOG_TIMEZONE: str = 'Asia/Kolkata'

    # CORS
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, str):
            return orjson.loads(v)
        elif isinstance(v, list):
            return v
        return []

    # Seat inventory store
    SEAT_STORE_BACKEND: Literal['kvrocks', 'memory'] = 'kvrocks'
    SEED_SEATS_ON_STARTUP: bool = False

    # Kvrocks Configuration (Redis protocol + Kvrocks storage)
    KVROCKS_HOST: str = 'localhost'
    KVROCKS_PORT: int = 6666
    KVROCKS_DB: int = 0
    KVROCKS_PASSWORD: str = ''
    REDIS_DECODE_RESPONSES: bool = True

    # Kvrocks Connection Pool Configuration
    KVROCKS_POOL_MAX_CONNECTIONS: int = 50
    KVROCKS_POOL_SOCKET_TIMEOUT: int = 10  # seconds
    KVROCKS_POOL_SOCKET_CONNECT_TIMEOUT: int = 10  # seconds
    KVROCKS_POOL_SOCKET_KEEPALIVE: bool = True
    KVROCKS_POOL_HEALTH_CHECK_INTERVAL: int = 30  # seconds


settings = Settings()  # type: ignore
