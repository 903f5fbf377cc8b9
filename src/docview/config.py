"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "DOCVIEW_"


class Settings(BaseModel):
    app_name:      str = "docview"
    source:        Optional[str] = Field(default=None, description="Default JSON document; built-in sample when unset")
    output_dir:    str = Field(default="dist", description="Directory for exported documents")
    output_format: str = Field(default="text", pattern="^(text|md|html)$", description="text, md or html")
    parser_config: str = Field(default="gfm-like", description="MarkdownIt preset name for HTML output")
    log_level:     str = Field(
        default="WARNING",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL|debug|info|warning|error|critical)$",
        description="Minimum level for log events",
    )


def _read_config_file(path: Path) -> dict[str, Any]:
    """Settings mapping from a YAML file; empty when the file is absent."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")
    return data


def _read_env(prefix: str = ENV_PREFIX) -> dict[str, str]:
    """Non-empty <prefix><FIELD> environment variables keyed by settings field."""
    values = {name: os.getenv(f"{prefix}{name.upper()}") for name in Settings.model_fields}
    return {name: val for name, val in values.items() if val}


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Merge settings sources, later winning: config.yaml, DOCVIEW_* env vars, non-None CLI overrides."""
    layers = [_read_config_file(Path(CONFIG_FILE)), _read_env()]
    layers.append({k: v for k, v in (overrides or {}).items() if v is not None})
    merged: dict[str, Any] = {}
    for layer in layers:
        merged.update(layer)
    return Settings(**merged)
