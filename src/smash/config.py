"""Application configuration contract."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from smash.commands.parser import MAX_PARAM_LENGTH, MAX_PARAMS
from smash.errors import ConfigError

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = Field(alias="APP_ENV", default="dev")
    log_level: str = Field(alias="LOG_LEVEL", default="WARNING")
    prompt: str = Field(alias="SMASH_PROMPT", default="user@smash $ ")
    max_params: int = Field(alias="SMASH_MAX_PARAMS", default=MAX_PARAMS)
    max_param_length: int = Field(alias="SMASH_MAX_PARAM_LENGTH", default=MAX_PARAM_LENGTH)


def validate_settings(settings: Settings) -> None:
    invalid: list[str] = []
    if settings.max_params < 1:
        invalid.append("SMASH_MAX_PARAMS(must be >= 1)")
    if settings.max_param_length < 1:
        invalid.append("SMASH_MAX_PARAM_LENGTH(must be >= 1)")
    if settings.log_level.upper() not in _LOG_LEVELS:
        invalid.append("LOG_LEVEL")
    if not settings.prompt:
        invalid.append("SMASH_PROMPT(non-empty value)")

    if invalid:
        keys = ", ".join(sorted(invalid))
        raise ConfigError(f"invalid configuration: {keys}")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
