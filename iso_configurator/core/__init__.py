"""Core dataclasses for the ISO configurator.

Provides the fundamental data structures used throughout the application:
- BaseConfiguration: Compressor plus 9 ordered component slots
- FlowRange: Flow capacity of one product range
- DryerSpec: Decoded dryer slot
- GeneratedConfiguration / GenerationResult: Engine output

Example:
    >>> from iso_configurator.core import BaseConfiguration, FlowRange
    >>>
    >>> config = BaseConfiguration.from_slots("1.2.1", "QOF", ["QMF", None, "QCMD 4-11"])
    >>> rng = FlowRange("2", "QCMD 4-11", "-40F", 4, 11)
"""

from .dataclasses import (
    SLOT_COUNT,
    NOT_SPECIFIED,
    DEWPOINTS,
    PURITY_CLASS_TYPES,
    NO_DRYER_TYPE,
    NO_DRYER_RANGE,
    NO_DRYER_NAME,
    SlotPosition,
    BaseConfiguration,
    FlowRange,
    PurityLevel,
    Application,
    Product,
    DryerOption,
    DryerSpec,
    FlowOption,
    ComponentConfiguration,
    GeneratedConfiguration,
    GenerationResult,
    make_iso_class,
    split_iso_class,
    format_iso_class,
    categorize_product,
)

__all__ = [
    "SLOT_COUNT",
    "NOT_SPECIFIED",
    "DEWPOINTS",
    "PURITY_CLASS_TYPES",
    "NO_DRYER_TYPE",
    "NO_DRYER_RANGE",
    "NO_DRYER_NAME",
    "SlotPosition",
    "BaseConfiguration",
    "FlowRange",
    "PurityLevel",
    "Application",
    "Product",
    "DryerOption",
    "DryerSpec",
    "FlowOption",
    "ComponentConfiguration",
    "GeneratedConfiguration",
    "GenerationResult",
    "make_iso_class",
    "split_iso_class",
    "format_iso_class",
    "categorize_product",
]
