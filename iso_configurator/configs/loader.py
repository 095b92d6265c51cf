"""Configuration loader for engine settings.

Loads the recognized dryer-type codes, dewpoint annotation markers and
water-class aliases from JSON files instead of hard-coding them in the engine.
This provides a single source of truth for catalog conventions.

Usage:
    >>> from iso_configurator.configs import get_engine_config
    >>> config = get_engine_config()
    >>> print(config.dryer_type_codes)
    >>> print(config.lookup_water_class("5"))
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import json

from ..core import DEWPOINTS


@dataclass(frozen=True)
class DewpointMarker:
    """Textual annotations that identify one dewpoint rating.

    Attributes
    ----------
    dewpoint : str
        Dewpoint literal (e.g., "-40F")
    markers : tuple[str, ...]
        Substrings that signal this dewpoint (e.g., "(-40F)", "(-40)")
    """
    dewpoint: str
    markers: tuple[str, ...]

    @classmethod
    def from_dict(cls, data: dict) -> "DewpointMarker":
        """Create from dictionary (JSON)."""
        dewpoint = data["dewpoint"]
        if dewpoint not in DEWPOINTS:
            raise ValueError(f"Unknown dewpoint in config: {dewpoint}")
        return cls(dewpoint=dewpoint, markers=tuple(data.get("markers", [])))


@dataclass(frozen=True)
class EngineConfig:
    """Settings for dryer slot detection and range lookup.

    Attributes
    ----------
    name : str
        Config name (file stem)
    dryer_type_codes : tuple[str, ...]
        Closed set of product codes that identify drying equipment
    dewpoint_markers : tuple[DewpointMarker, ...]
        Dewpoint annotations in priority order (first match wins)
    water_class_aliases : dict[str, str]
        Water classes that share another class's flow ranges
    description : str
        Human-readable description
    """
    name: str
    dryer_type_codes: tuple[str, ...]
    dewpoint_markers: tuple[DewpointMarker, ...]
    water_class_aliases: dict[str, str] = field(default_factory=dict)
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "EngineConfig":
        """Create from dictionary (JSON)."""
        return cls(
            name=data.get("name", "default"),
            dryer_type_codes=tuple(data.get("dryer_type_codes", [])),
            dewpoint_markers=tuple(
                DewpointMarker.from_dict(m) for m in data.get("dewpoint_markers", [])
            ),
            water_class_aliases={
                str(k): str(v) for k, v in data.get("water_class_aliases", {}).items()
            },
            description=data.get("description", ""),
        )

    def lookup_water_class(self, water_class: str) -> str:
        """Water class to use for flow range lookups."""
        return self.water_class_aliases.get(water_class, water_class)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "dryer_type_codes": list(self.dryer_type_codes),
            "dewpoint_markers": [
                {"dewpoint": m.dewpoint, "markers": list(m.markers)}
                for m in self.dewpoint_markers
            ],
            "water_class_aliases": dict(self.water_class_aliases),
        }


# Module-level cache for loaded configs
_engine_config_cache: dict[str, EngineConfig] = {}


def _get_configs_dir() -> Path:
    """Get the configs directory path."""
    return Path(__file__).parent


def _load_json_config(path: Path) -> dict:
    """Load a JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def get_engine_config(name: str = "engine") -> EngineConfig:
    """Get engine settings by config name.

    Parameters
    ----------
    name : str, default="engine"
        Config file stem in the configs directory

    Returns
    -------
    EngineConfig
        Parsed engine settings

    Raises
    ------
    ValueError
        If config not found
    """
    if name in _engine_config_cache:
        return _engine_config_cache[name]

    config_path = _get_configs_dir() / f"{name}.json"

    if not config_path.exists():
        available = list_engine_configs()
        raise ValueError(f"Unknown engine config: {name}. Available: {available}")

    config = load_engine_config(config_path)
    _engine_config_cache[name] = config
    return config


def load_engine_config(path: str | Path) -> EngineConfig:
    """Load engine settings from an arbitrary JSON file (not cached)."""
    data = _load_json_config(Path(path))
    data.setdefault("name", Path(path).stem)
    return EngineConfig.from_dict(data)


def list_engine_configs() -> list[str]:
    """List all available engine configs.

    Returns
    -------
    list[str]
        Names of available engine configs
    """
    return sorted([
        p.stem for p in _get_configs_dir().glob("*.json")
    ])


def clear_cache() -> None:
    """Clear the config cache (useful for testing)."""
    _engine_config_cache.clear()
