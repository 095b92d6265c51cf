"""Configuration engine.

Example:
    >>> from iso_configurator.catalog import JsonCatalogStore
    >>> from iso_configurator.engine import ConfigurationService
    >>> service = ConfigurationService(JsonCatalogStore("catalog.json"))
    >>> result = service.generate_from_iso_class("1", "2", "1", flow=8)
    >>> result.message
    'Found 1 configuration(s)'
"""

from .dryer_parser import (
    is_dryer_slot,
    find_dryer_slot,
    extract_dewpoint,
    split_options,
    extract_type_prefix,
    parse_dryer_text,
    parse_dryer_spec,
)
from .range_matcher import (
    ProductRangeMatcher,
    range_matches,
    filter_by_flow,
    sort_by_min_flow,
)
from .assembler import (
    build_components,
    build_base_components,
    assemble_dryer_configuration,
    assemble_no_dryer_configuration,
)
from .service import ConfigurationService

__all__ = [
    # Dryer slot parsing
    'is_dryer_slot',
    'find_dryer_slot',
    'extract_dewpoint',
    'split_options',
    'extract_type_prefix',
    'parse_dryer_text',
    'parse_dryer_spec',
    # Range matching
    'ProductRangeMatcher',
    'range_matches',
    'filter_by_flow',
    'sort_by_min_flow',
    # Assembly
    'build_components',
    'build_base_components',
    'assemble_dryer_configuration',
    'assemble_no_dryer_configuration',
    # Service
    'ConfigurationService',
]
