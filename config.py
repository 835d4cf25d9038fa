"""Configuration for the feature probe"""
from pathlib import Path
from typing import List, Literal, Optional, Tuple
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Feature probe configuration from FEATURE_PROBE_* environment variables"""

    model_config = SettingsConfigDict(env_prefix="FEATURE_PROBE_", case_sensitive=False)

    # Executable lookup
    path_variable: str = Field(default="PATH", description="Environment variable listing executable directories")
    convert_executable: str = Field(default="convert", description="ImageMagick convert file name")
    identify_executable: str = Field(default="identify", description="ImageMagick identify file name")

    # Report settings
    report_extensions_str: str = Field(
        default="zlib,sqlite3",
        description="Extensions to report (comma-separated, optional name>=version)"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", description="Log level")
    log_file: Optional[Path] = Field(default=None, description="Optional log file")
    environment: Literal["development", "production"] = Field(default="production", description="Log rendering mode")

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator("environment", mode="before")
    @classmethod
    def lower_environment(cls, v):
        return v.lower() if isinstance(v, str) else v

    @field_validator("path_variable", "convert_executable", "identify_executable")
    @classmethod
    def not_blank(cls, v):
        if not v or not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    @property
    def report_extensions(self) -> List[Tuple[str, Optional[str]]]:
        """Parse report extensions into (name, min_version) pairs"""
        extensions = []
        for item in self.report_extensions_str.split(","):
            item = item.strip()
            if not item:
                continue
            if ">=" in item:
                name, version = item.split(">=", 1)
                extensions.append((name.strip(), version.strip() or None))
            else:
                extensions.append((item, None))
        return extensions
