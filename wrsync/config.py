"""Tool configuration loaded from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """wrsync settings.

    Every path is resolved relative to the working directory the command runs
    in, which is normally the solution repository root.
    """

    model_config = SettingsConfigDict(
        env_prefix="WRSYNC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Paths
    assets_dir: Path = Path("./src/webresources")
    source_dir: Path = Path("./typescript")
    dist_dir: Path = Path("./dist")
    mapping_file: Path = Path("./webresource-mapping.json")
    descriptor_name: str = "webresource.yml"

    # File types
    source_ext: str = ".ts"
    compiled_ext: str = ".js"

    # Stripped from an asset's logical name when suggesting a source file name
    publisher_prefix: str = "co_"

    @field_validator("source_ext", "compiled_ext")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"extension must start with '.', got {value!r}")
        if "/" in value or "\\" in value:
            raise ValueError(f"extension must not contain a path separator, got {value!r}")
        return value

    @field_validator("descriptor_name")
    @classmethod
    def _check_descriptor_name(cls, value: str) -> str:
        if not value or "/" in value or "\\" in value:
            raise ValueError(f"descriptor_name must be a plain file name, got {value!r}")
        return value

    @model_validator(mode="after")
    def _check_distinct_extensions(self) -> Settings:
        if self.source_ext == self.compiled_ext:
            raise ValueError("source_ext and compiled_ext must differ")
        return self
