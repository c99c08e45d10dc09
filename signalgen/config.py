"""
config.py

Responsibility: Load generator settings from an optional YAML file into a typed model.

Recognized top-level keys:
- templates_dir: str (relative paths resolve against the config file's directory)
- class_template: str
- header_template: str
- min_arity: int
- max_arity: int
- output: str (omit to write to stdout)

The CLI may override any of these; the renderer only ever sees the resolved values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

PACKAGE_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

_KNOWN_KEYS = {"templates_dir", "class_template", "header_template", "min_arity", "max_arity", "output"}


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class GeneratorConfig:
    """Resolved settings for one generator run."""

    templates_dir: Path = field(default=PACKAGE_TEMPLATES_DIR)
    class_template: str = "signal_class_template.h.j2"
    header_template: str = "header_template.h.j2"
    min_arity: int = 0
    max_arity: int = 8
    output: Path | None = None

    @property
    def arities(self) -> range:
        return range(self.min_arity, self.max_arity + 1)


def default_config() -> GeneratorConfig:
    return GeneratorConfig()


def _as_int(data: dict[str, Any], key: str, default: int) -> int:
    raw = data.get(key, default)
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ConfigError(f"`{key}` must be an integer, got {raw!r}")
    return raw


def validate_arity_range(min_arity: int, max_arity: int) -> None:
    if min_arity < 0:
        raise ConfigError(f"`min_arity` must be non-negative, got {min_arity}")
    if min_arity > max_arity:
        raise ConfigError(f"`min_arity` ({min_arity}) must not exceed `max_arity` ({max_arity})")


def load_config(config_path: str | Path) -> GeneratorConfig:
    """
    Parse a YAML config file into a `GeneratorConfig`. Missing keys keep their defaults.
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Config file does not exist: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError("Config must be a mapping/object at the top level.")

    unknown = sorted(str(k) for k in data if k not in _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    defaults = default_config()
    base_dir = path.resolve().parent

    templates_dir = defaults.templates_dir
    if data.get("templates_dir") is not None:
        templates_dir = base_dir / str(data["templates_dir"])

    output = None
    if data.get("output") is not None:
        output = base_dir / str(data["output"])

    min_arity = _as_int(data, "min_arity", defaults.min_arity)
    max_arity = _as_int(data, "max_arity", defaults.max_arity)
    validate_arity_range(min_arity, max_arity)

    return GeneratorConfig(
        templates_dir=templates_dir,
        class_template=str(data.get("class_template") or defaults.class_template).strip(),
        header_template=str(data.get("header_template") or defaults.header_template).strip(),
        min_arity=min_arity,
        max_arity=max_arity,
        output=output,
    )
