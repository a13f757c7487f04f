from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    app_name: str = "Sensor Reading Cache"
    redis_address: str = "localhost:6379"
    redis_password: str = ""
    redis_db: int = 0
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("redis_address")
    @classmethod
    def _check_address(cls, value: str) -> str:
        host, sep, port = value.rpartition(":")
        if not sep or not host or not port.isdigit():
            raise ValueError(f"redis address must look like host:port, got {value!r}")
        return value

    @property
    def redis_host(self) -> str:
        return self.redis_address.rpartition(":")[0]

    @property
    def redis_port(self) -> int:
        return int(self.redis_address.rpartition(":")[2])


@lru_cache
def get_settings() -> Settings:
    return Settings()
