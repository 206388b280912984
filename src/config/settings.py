"""Application settings loaded from environment variables via pydantic-settings.

Values are read, highest priority first, from:

  1. environment variables (``UPSTREAM_BASE_URL=...``)
  2. a ``.env`` file in the working directory
  3. the defaults below

Field ``upstream_base_url`` maps to env var ``UPSTREAM_BASE_URL``, and so on.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """groupieTracker application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # === Upstream directory ===
    upstream_base_url: str = "https://groupietrackers.herokuapp.com/api"
    # None disables the timeout: the startup load waits as long as upstream takes.
    upstream_timeout: float | None = None

    # === Rendering ===
    templates_dir: str = "templates"
    static_dir: str = "static"

    # === App Config ===
    app_host: str = "0.0.0.0"
    app_port: int = 8080
    app_env: str = "development"
    log_level: str = "INFO"
