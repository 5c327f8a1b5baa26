from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Self

import yaml
from pydantic import model_validator
from pydantic.functional_validators import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings.main import SettingsConfigDict

from tudu.logging_utils import logger


class Settings(BaseSettings):
    QUIT_WORD: str = "quit"

    COMPLETE_WORD: str = "done"

    PROMPT: str = "> "

    LOG_LEVEL: Literal["debug", "info", "warning", "error"] = "warning"

    model_config = SettingsConfigDict(env_prefix="TUDU_", env_file=".env", extra="ignore")

    @field_validator("QUIT_WORD", "COMPLETE_WORD", mode="after")
    @classmethod
    def _sentinel(cls, word: str) -> str:
        """Sentinels are compared against stripped input, so store them stripped too"""
        word = word.strip()
        if not word:
            raise ValueError("Sentinel words must not be empty.")
        return word

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _log_level(cls, level: Any) -> Any:
        return level.lower() if isinstance(level, str) else level

    @model_validator(mode="after")
    def _distinct_sentinels(self) -> Self:
        if self.QUIT_WORD == self.COMPLETE_WORD:
            raise ValueError(f"Quit and complete words must differ, both are '{self.QUIT_WORD}'.")
        return self

    @classmethod
    def load(cls, config_path: Path | None = None, **overrides: Any) -> Settings:
        """
        Build settings from, in order of priority: `overrides` that are not None,
        the YAML file at `config_path`, environment variables, then defaults.
        """
        values = read_yaml(config_path) if config_path is not None else {}
        values.update({key.upper(): value for key, value in overrides.items() if value is not None})
        return cls(**values)


def read_yaml(config_path: Path) -> dict[str, Any]:
    """
    Read a YAML mapping of settings. Keys are matched case-insensitively.

    Keys that name no setting are dropped with a warning.
    """
    try:
        with config_path.open(encoding="utf-8") as cf:
            yaml_spec = yaml.safe_load(cf)
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise ValueError(f"Config file {config_path} is not valid YAML: {e}") from e

    if yaml_spec is None:
        return {}
    if not isinstance(yaml_spec, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping, got {type(yaml_spec).__name__}.")
    values = {str(key).upper(): value for key, value in yaml_spec.items()}
    for key in sorted(set(values) - set(Settings.model_fields)):
        logger.warning(f"Ignoring unknown setting '{key.lower()}' in {config_path}.")
        del values[key]
    return values
