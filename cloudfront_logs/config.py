"""Configuration — optional YAML file, then environment variable overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass

import yaml

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Config:
    log_level: str = "INFO"
    json_indent: int = 2
    decode_user_agent: bool = True

    def __post_init__(self):
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")

    @classmethod
    def from_dict(cls, d: dict) -> Config:
        decode = d.get("decode_user_agent", cls.decode_user_agent)
        if isinstance(decode, str):
            decode = _parse_bool(decode)
        return cls(
            log_level=str(d.get("log_level", cls.log_level)).upper(),
            json_indent=int(d.get("json_indent", cls.json_indent)),
            decode_user_agent=bool(decode),
        )


def load_yaml(path: str) -> dict:
    """Load a YAML mapping from *path*; a missing or empty file yields {}."""
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"config file {path!r} must contain a mapping")
    return data


def load_config(path: str | None = None) -> Config:
    """Build Config from the YAML file (``CONFIG_PATH`` overrides *path*) and env vars."""
    path = os.environ.get("CONFIG_PATH", path)
    settings = load_yaml(path) if path else {}

    if "LOG_LEVEL" in os.environ:
        settings["log_level"] = os.environ["LOG_LEVEL"]
    if "JSON_INDENT" in os.environ:
        settings["json_indent"] = os.environ["JSON_INDENT"]
    if "DECODE_USER_AGENT" in os.environ:
        settings["decode_user_agent"] = os.environ["DECODE_USER_AGENT"]

    return Config.from_dict(settings)
