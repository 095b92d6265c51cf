"""Core dataclasses for compressed-air purity configuration.

These are the fundamental data structures used throughout the system:
- BaseConfiguration: Compressor plus 9 ordered component slots for one ISO class
- FlowRange: Flow capacity record for one product range
- PurityLevel, Application, Product: Catalog reference records
- DryerSpec: Decoded dryer slot (derived per request, never stored)
- GeneratedConfiguration, GenerationResult: Output of the configuration engine

All classes support serialization via to_dict()/from_dict() for storage.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


SLOT_COUNT = 9

NOT_SPECIFIED = "-"

DEWPOINTS = ("-100F", "-40F", "-5F")

PURITY_CLASS_TYPES = ("particle", "water", "oil")

NO_DRYER_TYPE = "N/A"
NO_DRYER_RANGE = "No dryer required"
NO_DRYER_NAME = "No Dryer Required"

_PRODUCT_CATEGORIES = {
    "dryer": ("QCMD", "QMD", "QHD", "QHP", "QBP", "QED", "QPVS", "COOL", "QPNC"),
    "filter": ("QMF", "QCF", "QAF", "QSF", "QDF"),
    "separator": ("QWS",),
    "tank": ("Wet tank", "Dry tank"),
}


class SlotPosition(IntEnum):
    """1-based position of a component slot in a base configuration."""
    QAS1 = 1
    QAS2 = 2
    QAS3 = 3
    QAS4 = 4
    QAS5 = 5
    QAS6 = 6
    QAS7 = 7
    QAS8 = 8
    QAS9 = 9

    @property
    def index(self) -> int:
        """0-based index into BaseConfiguration.slots."""
        return self.value - 1


def make_iso_class(particulate_class: str, water_class: str, oil_class: str) -> str:
    """Build the canonical ISO class key, e.g. ("1", "2", "1") -> "1.2.1"."""
    return f"{particulate_class}.{water_class}.{oil_class}"


def split_iso_class(iso_class: str) -> tuple[str, str, str]:
    """Split an ISO class key into its three parts.

    Missing parts default to the "not specified" sentinel.
    """
    parts = str(iso_class).split(".")
    padded = [p.strip() or NOT_SPECIFIED for p in parts[:3]]
    padded += [NOT_SPECIFIED] * (3 - len(padded))
    return padded[0], padded[1], padded[2]


def format_iso_class(iso_class: str) -> str:
    """Format ISO class for display: "1.2.1" -> "[1;2;1]"."""
    return "[" + iso_class.replace(".", ";") + "]"


def categorize_product(code: str) -> str:
    """Determine the product category from its catalog code."""
    for category, codes in _PRODUCT_CATEGORIES.items():
        if code in codes:
            return category
    return "other"


def _clean_slot(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    if not text.strip():
        return None
    return text


def _validate_dewpoint(dewpoint: str | None) -> None:
    if dewpoint is not None and dewpoint not in DEWPOINTS:
        raise ValueError(f"Unknown dewpoint: {dewpoint}. Expected one of {DEWPOINTS}")


@dataclass(frozen=True)
class BaseConfiguration:
    """Base equipment configuration for one ISO class.

    Attributes
    ----------
    iso_class : str
        Canonical key "{particulate}.{water}.{oil}"
    compressor : str or None
        Compressor code (e.g., "QOF")
    slots : tuple[str | None, ...]
        Exactly 9 slot values in output order; None marks an empty slot

    Example
    -------
    >>> config = BaseConfiguration.from_slots(
    ...     iso_class="1.2.1",
    ...     compressor="QOF",
    ...     slots=["QMF", None, "QCMD 4-11/QCMD 12-64 (-40F)"],
    ... )
    >>> config.slot(SlotPosition.QAS3)
    'QCMD 4-11/QCMD 12-64 (-40F)'
    """
    iso_class: str
    compressor: str | None
    slots: tuple[str | None, ...]

    def __post_init__(self):
        slots = tuple(_clean_slot(v) for v in self.slots)
        if len(slots) != SLOT_COUNT:
            raise ValueError(f"Expected {SLOT_COUNT} slots, got {len(slots)}")
        object.__setattr__(self, "slots", slots)

    @classmethod
    def from_slots(
        cls,
        iso_class: str,
        compressor: str | None,
        slots: list[str | None] | tuple[str | None, ...],
    ) -> "BaseConfiguration":
        """Create from a possibly short slot list, padding with empty slots."""
        slots = list(slots)
        if len(slots) > SLOT_COUNT:
            raise ValueError(f"Expected at most {SLOT_COUNT} slots, got {len(slots)}")
        slots += [None] * (SLOT_COUNT - len(slots))
        return cls(iso_class=iso_class, compressor=compressor, slots=tuple(slots))

    @property
    def particulate_class(self) -> str:
        return split_iso_class(self.iso_class)[0]

    @property
    def water_class(self) -> str:
        return split_iso_class(self.iso_class)[1]

    @property
    def oil_class(self) -> str:
        return split_iso_class(self.iso_class)[2]

    def slot(self, position: SlotPosition | int) -> str | None:
        """Get the raw text of a slot by its 1-based position."""
        return self.slots[SlotPosition(position).index]

    def filled_slots(self) -> list[tuple[SlotPosition, str]]:
        """Non-empty slots with their positions, in output order."""
        return [
            (SlotPosition(i + 1), value)
            for i, value in enumerate(self.slots)
            if value is not None
        ]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: dict[str, Any] = {
            "iso_class": self.iso_class,
            "compressor": self.compressor,
        }
        for position in SlotPosition:
            data[position.name.lower()] = self.slots[position.index]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BaseConfiguration":
        """Create from dictionary (qas1..qas9 keys)."""
        return cls(
            iso_class=str(data["iso_class"]),
            compressor=data.get("compressor"),
            slots=tuple(data.get(p.name.lower()) for p in SlotPosition),
        )


@dataclass(frozen=True)
class FlowRange:
    """Flow capacity record for one product range.

    Flow bounds are inclusive and given in CFM. ``product_range_name`` starts
    with the dryer type prefix it is matched on (e.g., "QCMD 12-64").
    """
    water_class: str
    product_range_name: str
    dewpoint: str | None
    min_flow: float
    max_flow: float
    inlet_filters: str | None = None
    outlet_filters: str | None = None
    comment: str | None = None

    def __post_init__(self):
        dewpoint = _clean_slot(self.dewpoint)
        _validate_dewpoint(dewpoint)
        object.__setattr__(self, "dewpoint", dewpoint)
        object.__setattr__(self, "min_flow", float(self.min_flow))
        object.__setattr__(self, "max_flow", float(self.max_flow))
        if self.min_flow < 0 or self.max_flow < 0:
            raise ValueError(
                f"Flow bounds must be non-negative for {self.product_range_name}: "
                f"{self.min_flow}-{self.max_flow}"
            )
        if self.max_flow < self.min_flow:
            raise ValueError(
                f"max_flow < min_flow for {self.product_range_name}: "
                f"{self.min_flow}-{self.max_flow}"
            )

    def contains(self, flow: float) -> bool:
        """Whether flow lies within [min_flow, max_flow]."""
        return self.min_flow <= flow <= self.max_flow

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "water_class": self.water_class,
            "product_range": self.product_range_name,
            "dewpoint": self.dewpoint,
            "min_flow": self.min_flow,
            "max_flow": self.max_flow,
            "inlet_filters": self.inlet_filters,
            "outlet_filters": self.outlet_filters,
            "comment": self.comment,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FlowRange":
        """Create from dictionary."""
        return cls(
            water_class=str(data["water_class"]),
            product_range_name=data["product_range"],
            dewpoint=data.get("dewpoint"),
            min_flow=data["min_flow"],
            max_flow=data["max_flow"],
            inlet_filters=data.get("inlet_filters"),
            outlet_filters=data.get("outlet_filters"),
            comment=data.get("comment"),
        )


@dataclass(frozen=True)
class PurityLevel:
    """Description of one purity level for one class type."""
    class_type: str
    level: str
    description: str

    def __post_init__(self):
        if self.class_type not in PURITY_CLASS_TYPES:
            raise ValueError(
                f"Unknown purity class type: {self.class_type}. "
                f"Expected one of {PURITY_CLASS_TYPES}"
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "iso_class_type": self.class_type,
            "level": self.level,
            "purity_description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PurityLevel":
        return cls(
            class_type=data["iso_class_type"],
            level=str(data["level"]),
            description=data.get("purity_description", ""),
        )


@dataclass(frozen=True)
class Application:
    """Industry application preset resolving to purity classes."""
    industry: str
    name: str
    particulate_class: str
    water_class: str
    oil_class: str
    description: str | None = None

    @property
    def iso_class(self) -> str:
        return make_iso_class(self.particulate_class, self.water_class, self.oil_class)

    def to_dict(self) -> dict[str, Any]:
        return {
            "industry": self.industry,
            "name": self.name,
            "description": self.description,
            "particulate_class": self.particulate_class,
            "water_class": self.water_class,
            "oil_class": self.oil_class,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Application":
        return cls(
            industry=data["industry"],
            name=data["name"],
            particulate_class=str(data["particulate_class"]),
            water_class=str(data["water_class"]),
            oil_class=str(data["oil_class"]),
            description=data.get("description"),
        )


@dataclass(frozen=True)
class Product:
    """Catalog product description."""
    code: str
    description: str | None = None
    category: str = "other"

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "description": self.description,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Product":
        code = data["code"]
        return cls(
            code=code,
            description=data.get("description"),
            category=data.get("category") or categorize_product(code),
        )


@dataclass(frozen=True)
class DryerOption:
    """One mutually exclusive alternative from a dryer slot."""
    type_prefix: str
    raw_option: str


@dataclass(frozen=True)
class DryerSpec:
    """Decoded dryer slot of a base configuration.

    Attributes
    ----------
    raw_text : str
        Unmodified slot text
    slot_position : SlotPosition
        Position of the dryer slot
    options : tuple[DryerOption, ...]
        "/"-separated alternatives in slot order
    dewpoint : str or None
        Dewpoint parsed once from the whole slot text, shared by every option
    """
    raw_text: str
    slot_position: SlotPosition
    options: tuple[DryerOption, ...]
    dewpoint: str | None

    @property
    def type_prefixes(self) -> list[str]:
        """Distinct option type prefixes in first-seen order."""
        seen: list[str] = []
        for option in self.options:
            if option.type_prefix and option.type_prefix not in seen:
                seen.append(option.type_prefix)
        return seen


@dataclass(frozen=True)
class FlowOption:
    """Flow range offered by one generated configuration."""
    product_range_name: str
    min_flow: float | None = None
    max_flow: float | None = None

    @classmethod
    def from_flow_range(cls, flow_range: FlowRange) -> "FlowOption":
        return cls(
            product_range_name=flow_range.product_range_name,
            min_flow=flow_range.min_flow,
            max_flow=flow_range.max_flow,
        )

    @property
    def flow_range(self) -> str:
        """Display string, e.g. "4-11", or "N/A" without bounds."""
        if self.min_flow is None or self.max_flow is None:
            return "N/A"
        return f"{self.min_flow:g}-{self.max_flow:g}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "product_range": self.product_range_name,
            "flow_range": self.flow_range,
            "min_flow": self.min_flow,
            "max_flow": self.max_flow,
        }


@dataclass(frozen=True)
class ComponentConfiguration:
    """Ordered component list for one concrete configuration."""
    components: tuple[str, ...]
    range_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "components": list(self.components),
            "product_range_name": self.range_name,
        }


@dataclass(frozen=True)
class GeneratedConfiguration:
    """All configurations generated for one dryer type.

    ``flow_options`` and ``component_configurations`` are parallel sequences:
    entry i of one belongs to entry i of the other.
    """
    dryer_type: str
    dewpoint: str | None
    flow_options: tuple[FlowOption, ...]
    component_configurations: tuple[ComponentConfiguration, ...]
    compressor: str | None
    iso_class: str

    def __post_init__(self):
        if len(self.flow_options) != len(self.component_configurations):
            raise ValueError(
                f"flow_options ({len(self.flow_options)}) and component_configurations "
                f"({len(self.component_configurations)}) must have the same length"
            )

    @property
    def configuration_name(self) -> str:
        if self.dryer_type == NO_DRYER_TYPE:
            return NO_DRYER_NAME
        if self.dewpoint:
            return f"{self.dryer_type} ({self.dewpoint})"
        return self.dryer_type

    def to_dict(self) -> dict[str, Any]:
        return {
            "dryer_type": self.dryer_type,
            "dewpoint": self.dewpoint,
            "configuration_name": self.configuration_name,
            "flow_options": [o.to_dict() for o in self.flow_options],
            "component_configurations": [c.to_dict() for c in self.component_configurations],
            "compressor": self.compressor,
            "iso_class": self.iso_class,
        }


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one configuration request."""
    success: bool
    message: str
    iso_class: str | None = None
    flow: float | None = None
    configurations: tuple[GeneratedConfiguration, ...] = field(default_factory=tuple)

    @property
    def n_configurations(self) -> int:
        return len(self.configurations)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "success": self.success,
            "message": self.message,
            "iso_class": self.iso_class,
            "flow": self.flow,
            "configurations": [c.to_dict() for c in self.configurations],
        }
