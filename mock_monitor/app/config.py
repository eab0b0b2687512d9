from typing import Dict

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _parse_logger_levels(raw: str) -> Dict[str, str]:
    levels = {}
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        name, sep, level = item.partition("=")
        name, level = name.strip(), level.strip().upper()
        if not sep or not name:
            raise ValueError(f"invalid logger level entry: {item}")
        if level not in _LOG_LEVELS:
            raise ValueError(f"invalid level for {name}: {level}")
        levels[name] = level
    return levels


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MOCK_MONITOR_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = 9090
    query_path: str = "/api/v1/query"
    targets_path: str = "/api/v1/targets"
    response_path: str = "/response"
    log_level: str = "INFO"
    # per-logger overrides, e.g. "mock_monitor.app.main=DEBUG,httpx=WARNING"
    logger_levels_raw: str = ""

    @field_validator("port")
    @classmethod
    def _positive(cls, v):
        if v <= 0:
            raise ValueError("must be positive")
        return v

    @field_validator("query_path", "targets_path", "response_path")
    @classmethod
    def _absolute_path(cls, v):
        if not v.startswith("/"):
            raise ValueError("path must start with '/'")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _level_allowed(cls, v):
        level = str(v).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(sorted(_LOG_LEVELS))}")
        return level

    @field_validator("logger_levels_raw")
    @classmethod
    def _logger_levels_valid(cls, v):
        _parse_logger_levels(v)
        return v

    @model_validator(mode="after")
    def _distinct_paths(self):
        paths = [self.query_path, self.targets_path, self.response_path]
        if len(set(paths)) != len(paths):
            raise ValueError("query_path, targets_path and response_path must be distinct")
        return self

    @property
    def logger_levels(self) -> Dict[str, str]:
        return _parse_logger_levels(self.logger_levels_raw)


settings = Settings()
