"""Runtime configuration for the MCP tool server.

All values can be overridden with ``TOOLHOST_*`` environment variables
or a ``.env`` file in the working directory.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import __version__


class Settings(BaseSettings):
    """Server settings loaded from the environment."""

    model_config = SettingsConfigDict(env_prefix="TOOLHOST_", env_file=".env", extra="ignore")

    # Identity reported by initialize and the discovery response
    server_name: str = "toolhost"
    server_version: str = __version__

    # HTTP
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    mcp_path: str = "/mcp"
    cors_allowed_origins: str = "*"

    log_level: str = "INFO"
    environment: str = "development"
    sentry_dsn: str | None = None

    # Static prompts registered on the default server
    prompts: list[str] = Field(default_factory=list)

    @property
    def cors_origins_list(self) -> list[str]:
        """CORS origins as a list (comma separated in the environment)."""
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]


settings = Settings()
