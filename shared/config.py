"""
Configuration
=============

Dataclass settings loaded from TOML. Every key has a default, so a
missing or partial ``config.toml`` is fine unless the caller named the
file explicitly.

Without an explicit path, ``config.toml`` is looked up in the current
working directory, which works the same for editable and regular
installs.

References:
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


DEFAULT_CONFIG_NAME = "config.toml"


@dataclass(slots=True)
class CryptogramConfig:
    """``[cryptogram]`` section.

    ``max_attempts`` caps the shuffle loop; a working random source
    misses it with probability about (1 - 1/e) ** 10000.
    """

    max_attempts: int = 10_000
    stats_trials: int = 10_000
    seed: Optional[int] = None
    output_label: str = "Cryptogram"


@dataclass(slots=True)
class GlobalConfig:
    """``[global]`` section: logging."""

    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_json: bool = False
    debug: bool = False


@dataclass(slots=True)
class ToolConfig:
    """All settings.

    Usage:
        >>> ToolConfig.load().cryptogram.max_attempts   # ./config.toml or defaults
        10000
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    cryptogram: CryptogramConfig = field(default_factory=CryptogramConfig)

    @classmethod
    def load(cls, path: str | Path | None = None) -> ToolConfig:
        """Read settings from *path*, or from ``./config.toml`` if it exists.

        Raises:
            FileNotFoundError: If *path* was given and does not exist.
        """
        if path is None:
            config_path = Path.cwd() / DEFAULT_CONFIG_NAME
            if not config_path.is_file():
                return cls()
        else:
            config_path = Path(path)
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=_section(GlobalConfig, raw.get("global", {})),
            cryptogram=_section(CryptogramConfig, raw.get("cryptogram", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _section(section_cls: type, data: dict[str, Any]) -> Any:
    """Instantiate *section_cls* from the keys it declares; others are ignored."""
    known = {f.name for f in fields(section_cls)}
    return section_cls(**{k: v for k, v in data.items() if k in known})
