from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="numplan", alias="APP_NAME")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    default_region: str | None = Field(default=None, alias="NUMPLAN_DEFAULT_REGION")
    metadata_source: Literal["yaml", "phonenumbers"] = Field(
        default="yaml",
        alias="NUMPLAN_METADATA_SOURCE",
    )
    metadata_dir: str | None = Field(default=None, alias="NUMPLAN_METADATA_DIR")
    double_prefix_regions: list[str] = Field(
        default=["IN", "DE", "BR", "IT"],
        alias="NUMPLAN_DOUBLE_PREFIX_REGIONS",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
