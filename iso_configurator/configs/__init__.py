"""Engine configuration from JSON files.

This module provides the dryer-type codes, dewpoint markers and water-class
aliases used by the configuration engine, loaded from JSON config files.

Example:
    >>> from iso_configurator.configs import get_engine_config
    >>> config = get_engine_config()
    >>> for marker in config.dewpoint_markers:
    ...     print(f"{marker.dewpoint}: {marker.markers}")
"""

from .loader import (
    DewpointMarker,
    EngineConfig,
    get_engine_config,
    load_engine_config,
    list_engine_configs,
    clear_cache,
)

__all__ = [
    "DewpointMarker",
    "EngineConfig",
    "get_engine_config",
    "load_engine_config",
    "list_engine_configs",
    "clear_cache",
]
