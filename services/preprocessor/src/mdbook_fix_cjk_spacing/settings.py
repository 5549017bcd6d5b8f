from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CJK_SPACING_", env_file=".env", extra="ignore")

    # mdBook shows preprocessor stderr to the user; keep it quiet by default.
    LOG_LEVEL: str = "WARNING"

settings = Settings()
