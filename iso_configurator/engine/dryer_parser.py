"""Dryer slot detection and decoding.

Catalog slots encode dryer alternatives in a compact text form:

    "QCMD 4-11/QCMD 12-64 (-40F)"

- Alternatives are separated by "/"
- A parenthesized suffix such as "(-40F)" or "(-40)" annotates the dewpoint
- The leading token of each alternative (up to whitespace or "(") is the
  dryer type prefix used for flow range lookups

The dewpoint is read once from the whole slot text and applies to every
alternative in that slot.
"""

import re

from ..configs import EngineConfig, get_engine_config
from ..core import BaseConfiguration, DryerOption, DryerSpec, SlotPosition

OPTION_SEPARATOR = "/"
ANNOTATION_OPEN = "(-"

_PREFIX_BOUNDARY = re.compile(r"[\s(]")


def is_dryer_slot(raw_text: str | None, config: EngineConfig | None = None) -> bool:
    """Whether slot text encodes dryer alternatives.

    The text must contain "/" or "(-" and at least one recognized dryer code.
    """
    if not raw_text:
        return False
    config = config or get_engine_config()
    if OPTION_SEPARATOR not in raw_text and ANNOTATION_OPEN not in raw_text:
        return False
    return any(code in raw_text for code in config.dryer_type_codes)


def find_dryer_slot(
    base_configuration: BaseConfiguration,
    config: EngineConfig | None = None,
) -> tuple[SlotPosition, str] | None:
    """Locate the dryer slot of a base configuration.

    Slots are scanned in order and the first qualifying slot wins; later
    qualifying slots are treated as ordinary components.

    Returns
    -------
    tuple[SlotPosition, str] or None
        Position and raw text of the dryer slot, or None if there is none
    """
    config = config or get_engine_config()
    for position, raw_text in base_configuration.filled_slots():
        if is_dryer_slot(raw_text, config):
            return position, raw_text
    return None


def extract_dewpoint(raw_text: str, config: EngineConfig | None = None) -> str | None:
    """Extract the dewpoint annotation from dryer slot text.

    Markers are checked in priority order (-100F, then -40F, then -5F), so
    "(-100F)" wins over "(-40F)" when both appear.
    """
    config = config or get_engine_config()
    for marker in config.dewpoint_markers:
        if any(m in raw_text for m in marker.markers):
            return marker.dewpoint
    return None


def split_options(raw_text: str) -> list[str]:
    """Split dryer slot text into its "/"-separated alternatives."""
    pieces = (p.strip() for p in raw_text.split(OPTION_SEPARATOR))
    return [p for p in pieces if p]


def extract_type_prefix(option: str) -> str:
    """Dryer type prefix of one alternative: "QCMD 4-11" -> "QCMD"."""
    return _PREFIX_BOUNDARY.split(option.strip(), maxsplit=1)[0].strip()


def parse_dryer_text(
    raw_text: str,
    slot_position: SlotPosition | int,
    config: EngineConfig | None = None,
) -> DryerSpec:
    """Decode dryer slot text into a DryerSpec.

    Parameters
    ----------
    raw_text : str
        Raw slot text
    slot_position : SlotPosition or int
        1-based position of the slot
    config : EngineConfig, optional
        Engine settings; defaults to the packaged config

    Returns
    -------
    DryerSpec
        Options in slot order with the shared dewpoint
    """
    options = tuple(
        DryerOption(type_prefix=extract_type_prefix(option), raw_option=option)
        for option in split_options(raw_text)
    )
    return DryerSpec(
        raw_text=raw_text,
        slot_position=SlotPosition(slot_position),
        options=options,
        dewpoint=extract_dewpoint(raw_text, config),
    )


def parse_dryer_spec(
    base_configuration: BaseConfiguration,
    config: EngineConfig | None = None,
) -> DryerSpec | None:
    """Find and decode the dryer slot of a base configuration.

    Returns None when no slot encodes dryer alternatives.
    """
    found = find_dryer_slot(base_configuration, config)
    if found is None:
        return None
    position, raw_text = found
    return parse_dryer_text(raw_text, position, config)
