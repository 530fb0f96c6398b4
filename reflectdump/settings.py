from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .introspection.formatting import DumpFormat


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=None, extra="ignore")

    # Logging
    log_level: str = Field(default="INFO", validation_alias="REFLECTDUMP_LOG_LEVEL")
    log_json: bool = Field(default=True, validation_alias="REFLECTDUMP_LOG_JSON")

    # Dump layout. Defaults reproduce the fixed text format bit-exact.
    start_label: str = Field(default="--- start", validation_alias="REFLECTDUMP_START_LABEL")
    end_label: str = Field(default="--- end", validation_alias="REFLECTDUMP_END_LABEL")
    null_label: str = Field(default="null", validation_alias="REFLECTDUMP_NULL_LABEL")
    indent: str = Field(default="\t", validation_alias="REFLECTDUMP_INDENT")

    def dump_format(self) -> DumpFormat:
        return DumpFormat(
            start_label=self.start_label,
            end_label=self.end_label,
            null_label=self.null_label,
            indent=self.indent,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
