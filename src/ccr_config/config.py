"""Installer configuration via environment variables."""

from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Snapshot of the environment the installer reads, taken once at start."""

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    # --- Upstream credential ---
    dashscope_api_key: SecretStr = SecretStr("")

    # --- Locale detection (checked in this order) ---
    lang: str = ""
    language: str = ""
    lc_all: str = ""

    # --- Diagnostics ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        validation_alias="CCR_CONFIG_LOG_LEVEL",
    )

    @field_validator("dashscope_api_key", mode="before")
    @classmethod
    def strip_api_key(cls, v: object) -> object:
        """Trim surrounding whitespace, same as interactive input."""
        if isinstance(v, SecretStr):
            return SecretStr(v.get_secret_value().strip())
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v

    @property
    def has_api_key(self) -> bool:
        return bool(self.dashscope_api_key.get_secret_value())

    @property
    def locale_env(self) -> dict[str, str]:
        return {"LANG": self.lang, "LANGUAGE": self.language, "LC_ALL": self.lc_all}
