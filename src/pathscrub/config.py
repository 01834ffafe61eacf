"""Configuration for pathscrub."""

import json
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from pathscrub.models import ScrubOptions
from pathscrub.platforms import PlatformPolicy, get_policy

ENV_PREFIX = "PATHSCRUB_"


@dataclass
class ScrubConfig:
    """Settings for the sanitizer and the command line front end."""

    platform: str = "host"
    options: list[str] = field(default_factory=lambda: ["all"])
    extra_invalid_chars: str = ""
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Normalize options and reject values of the wrong type."""
        if isinstance(self.options, str):
            self.options = self.options.split(",")
        if not isinstance(self.options, list) or not all(
            isinstance(name, str) for name in self.options
        ):
            raise ValueError(
                f"Config key 'options' must be a string or a list of strings, got {self.options!r}"
            )
        for name in ("platform", "extra_invalid_chars", "log_level"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"Config key '{name}' must be a string, got {value!r}")

    @property
    def scrub_options(self) -> ScrubOptions:
        return ScrubOptions.from_names(self.options)

    @property
    def policy(self) -> PlatformPolicy:
        return get_policy(self.platform).with_extra_chars(self.extra_invalid_chars)

    @classmethod
    def from_file(cls, path: Path) -> "ScrubConfig":
        """Load config from a YAML or JSON file."""
        return cls(**cls._read_file(path))

    @classmethod
    def from_env(cls) -> "ScrubConfig":
        """Load config from PATHSCRUB_* environment variables."""
        return cls(**cls._read_env())

    @classmethod
    def load(cls, config_path: Path | None = None, **overrides: Any) -> "ScrubConfig":
        """
        Load config with hierarchy: defaults < file < env < kwargs.

        Args:
            config_path: Optional YAML or JSON config file
            **overrides: Explicit values that win over everything else
        """
        values: dict[str, Any] = {}
        if config_path is not None:
            values.update(cls._read_file(config_path))
        values.update(cls._read_env())
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    @classmethod
    def _read_file(cls, path: Path) -> dict[str, Any]:
        path = Path(path)
        text = path.read_text()
        if path.suffix in (".yaml", ".yml"):
            try:
                data = yaml.safe_load(text) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
        elif path.suffix == ".json":
            data = json.loads(text)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")
        return data

    @staticmethod
    def _read_env() -> dict[str, Any]:
        values: dict[str, Any] = {}
        for name in ("platform", "options", "extra_invalid_chars", "log_level"):
            value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
            if not value:
                continue
            values[name] = value.split(",") if name == "options" else value
        return values
