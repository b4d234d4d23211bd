"""Configuration management with Pydantic Settings + optional YAML."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigError(Exception):
    """Raised when configuration is missing or invalid at startup."""


class ApiConfig(BaseModel):
    base_url: str = "https://api.pachca.com/api/shared/v1"
    token: str = ""
    timeout: float = 30.0


class WebhookConfig(BaseModel):
    signing_secret: str = ""
    bind: str = "0.0.0.0"
    port: int = 3000
    path: str = "/webhook"
    signature_header: str = "pachca-signature"
    freshness_window: int = 60  # seconds


class GreetingConfig(BaseModel):
    fallback_alias: str = "коллега"
    template_file: str = ""


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WELCOMEBOT_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    api: ApiConfig = Field(default_factory=ApiConfig)
    webhook: WebhookConfig = Field(default_factory=WebhookConfig)
    greeting: GreetingConfig = Field(default_factory=GreetingConfig)
    log_level: str = "INFO"
    log_json: bool = False


# Variable names used by existing deployments of the bot.
_ENV_SHORTCUTS: dict[str, tuple[str, str]] = {
    "PACHCA_TOKEN": ("api", "token"),
    "PACHCA_SIGNING_SECRET": ("webhook", "signing_secret"),
    "PORT": ("webhook", "port"),
}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _env_shortcuts() -> dict[str, Any]:
    data: dict[str, Any] = {}
    for env_name, (section, field_name) in _ENV_SHORTCUTS.items():
        value = os.environ.get(env_name)
        if value:
            data.setdefault(section, {})[field_name] = value
    return data


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from env vars, optionally overlaying a YAML config."""
    yaml_data: dict[str, Any] = {}

    if config_path is None:
        config_path = os.environ.get("WELCOMEBOT_CONFIG")

    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    yaml_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"invalid YAML in {path}: {e}") from e
            if not isinstance(yaml_data, dict):
                raise ConfigError(f"{path} must contain a mapping")

    # PACHCA_TOKEN / PACHCA_SIGNING_SECRET / PORT win over the YAML file
    try:
        return Settings(**_deep_merge(yaml_data, _env_shortcuts()))
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e


def validate_settings(settings: Settings) -> None:
    """Raise ConfigError listing every missing credential or file."""
    template_file = settings.greeting.template_file
    if template_file and not Path(template_file).is_file():
        raise ConfigError(f"greeting template not found: {template_file}")

    missing = []
    if not settings.api.token:
        missing.append("PACHCA_TOKEN")
    if not settings.webhook.signing_secret:
        missing.append("PACHCA_SIGNING_SECRET")
    if missing:
        raise ConfigError(f"ENV error: set {' and '.join(missing)}")
