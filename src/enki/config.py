"""Configuration loading: defaults, YAML file, and environment overrides."""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from jsonschema import Draft7Validator

from .errors import ConfigError

STYLE_COLORIZED = "colorized"
STYLE_PLAIN = "plain"
STYLES = (STYLE_COLORIZED, STYLE_PLAIN)
EXPORTERS = ("console", "text", "xml")

STYLE_ENV = "ENKI_STYLE"

CONFIG_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "style": {"type": "string", "enum": list(STYLES)},
        "export_duration": {"type": "boolean"},
        "exporter": {"type": "string", "enum": list(EXPORTERS)},
        "output": {"type": ["string", "null"]},
    },
}

_validator = Draft7Validator(CONFIG_SCHEMA)


@dataclass(frozen=True)
class EnkiConfig:
    style: str = STYLE_COLORIZED
    export_duration: bool = False
    exporter: str = "console"
    output: Optional[str] = None

    def with_overrides(self, **overrides: Any) -> "EnkiConfig":
        """Return a copy with every non-``None`` override applied."""

        values = {key: value for key, value in overrides.items() if value is not None}
        if "style" in values:
            values["style"] = validate_style(values["style"])
        return replace(self, **values)


def validate_style(style: str) -> str:
    value = str(style).strip().lower()
    if value not in STYLES:
        raise ConfigError(f"Unknown style '{style}'; expected one of {', '.join(STYLES)}")
    return value


def load_config(path: Optional[str] = None, *, environ: Optional[Mapping[str, str]] = None) -> EnkiConfig:
    """Build the effective configuration.

    The YAML file at ``path`` (if any) overrides defaults and ``ENKI_STYLE``
    overrides the file.
    """

    raw = _load_yaml(path) if path else {}
    config = EnkiConfig().with_overrides(**raw)
    env = os.environ if environ is None else environ
    env_style = env.get(STYLE_ENV)
    if env_style:
        config = config.with_overrides(style=env_style)
    return config


def resolve_style(style: Optional[str] = None) -> str:
    """Return ``style`` validated, or the environment/default style when ``None``."""

    if style is not None:
        return validate_style(style)
    env_style = os.environ.get(STYLE_ENV)
    if env_style:
        return validate_style(env_style)
    return STYLE_COLORIZED


def _load_yaml(path: str) -> Mapping[str, Any]:
    config_path = Path(path).expanduser()
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {config_path}: {exc}") from exc
    try:
        raw = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise ConfigError("Config file must contain a mapping at the top level")
    errors = sorted(_validator.iter_errors(raw), key=lambda e: list(e.path))
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise ConfigError(f"Config schema validation failed: {messages}")
    return raw
