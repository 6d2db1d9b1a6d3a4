"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, SecretStr

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OPENWEATHER_BASE_URL
    api_key: SecretStr = SecretStr("")
    timeout_seconds: float | None = Field(default=None, gt=0.0)  # None = wait forever


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8777, ge=1, le=65535)


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class DashboardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    server: ServerConfig = ServerConfig()
    logging: LoggingConfig = LoggingConfig()
    cities: list[str] = []
