"""Configuration for text2stroke.

Settings are read from a YAML file. Lookup order:

1. An explicit path passed to ``Config.load``
2. The ``T2S_CONFIG`` environment variable
3. ``~/.config/text2stroke/config.yaml``

A missing file yields the defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from text2stroke.exceptions import ConfigError

CONFIG_ENV_VAR = "T2S_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/text2stroke/config.yaml")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """User settings."""

    font_dirs: list[str] = field(default_factory=list)
    default_font: str = "newstroke.bene"
    line_spacing_factor: float = 1.0
    stroke_width_ratio: float = 0.15
    precision: int = 6
    log_level: str = "WARNING"
    # hex code point -> hex code point, e.g. {"00B5": "03BC"}. Quote them in
    # YAML: unquoted digit-only values are read as integers.
    replacements: dict[str, str] = field(default_factory=dict)

    @classmethod
    def default_path(cls) -> Path:
        env = os.environ.get(CONFIG_ENV_VAR)
        if env:
            return Path(env).expanduser()
        return DEFAULT_CONFIG_PATH.expanduser()

    @classmethod
    def load(cls, path: str | Path | None = None) -> Config:
        """Load configuration from YAML.

        Raises:
            ConfigError: If the file is not valid YAML or has invalid values.
        """
        config_path = Path(path).expanduser() if path else cls.default_path()
        if not config_path.exists():
            if path:
                raise ConfigError(f"Config file not found: {config_path}")
            return cls()
        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
        return cls.from_dict(data or {}, source=str(config_path))

    @classmethod
    def from_dict(cls, data: Any, source: str = "<dict>") -> Config:
        if not isinstance(data, dict):
            raise ConfigError("Config root must be a mapping", {"source": source})
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(
                f"Unknown config keys: {', '.join(sorted(unknown))}", {"source": source}
            )
        config = cls(**data)
        config.validate(source)
        return config

    def validate(self, source: str = "<config>") -> None:
        if not isinstance(self.font_dirs, list) or not all(
            isinstance(d, str) for d in self.font_dirs
        ):
            raise ConfigError("font_dirs must be a list of paths", {"source": source})
        if not isinstance(self.default_font, str) or not self.default_font:
            raise ConfigError("default_font must be a non-empty string", {"source": source})
        for name in ("line_spacing_factor", "stroke_width_ratio"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
                raise ConfigError(f"{name} must be a non-negative number", {"source": source})
        if isinstance(self.precision, bool) or not isinstance(self.precision, int) or not (
            0 <= self.precision <= 12
        ):
            raise ConfigError("precision must be an integer in 0..12", {"source": source})
        if str(self.log_level).upper() not in LOG_LEVELS:
            raise ConfigError(f"Invalid log_level: {self.log_level}", {"source": source})
        self.log_level = str(self.log_level).upper()
        if not isinstance(self.replacements, dict):
            raise ConfigError("replacements must be a mapping", {"source": source})
        self.replacement_table()

    def replacement_table(self) -> dict[int, int]:
        """Replacements as integer code points."""
        table: dict[int, int] = {}
        for missing, present in self.replacements.items():
            try:
                table[_code_point(missing)] = _code_point(present)
            except ValueError:
                raise ConfigError(
                    f"Invalid replacement: {missing!r} -> {present!r}"
                ) from None
        return table


def _code_point(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    text = str(value).strip()
    if text.upper().startswith("U+"):
        text = text[2:]
    return int(text, 16)
