"""Flow range matching for dryer types.

Water class 5 shares the flow ranges of water class 4; the alias only affects
the lookup, never the reported request.
"""

import logging

from ..catalog import CatalogStoreInterface
from ..configs import EngineConfig, get_engine_config
from ..core import FlowRange

logger = logging.getLogger(__name__)


def range_matches(
    flow_range: FlowRange,
    water_class: str,
    dryer_type_prefix: str,
    dewpoint: str | None = None,
    flow: float | None = None,
) -> bool:
    """Matching predicate for one flow range record.

    ``water_class`` is compared as given (already aliased). The dewpoint and
    flow conditions only apply when they are supplied. Flow bounds are
    inclusive.
    """
    if flow_range.water_class != water_class:
        return False
    if not flow_range.product_range_name.startswith(dryer_type_prefix):
        return False
    if dewpoint is not None and flow_range.dewpoint != dewpoint:
        return False
    if flow is not None and not flow_range.contains(flow):
        return False
    return True


def filter_by_flow(ranges: list[FlowRange], flow: float | None) -> list[FlowRange]:
    """Keep ranges that contain flow (all of them when flow is None)."""
    if flow is None:
        return list(ranges)
    return [r for r in ranges if r.contains(flow)]


def sort_by_min_flow(ranges: list[FlowRange]) -> list[FlowRange]:
    """Ascending by min_flow; ties keep their catalog order."""
    return sorted(ranges, key=lambda r: r.min_flow)


class ProductRangeMatcher:
    """Finds the flow ranges compatible with a dryer type.

    Example:
        >>> matcher = ProductRangeMatcher(store)
        >>> ranges = matcher.find("5", "QCMD", dewpoint="-40F", flow=8)
        >>> [r.product_range_name for r in ranges]
        ['QCMD 4-11']
    """

    def __init__(
        self,
        store: CatalogStoreInterface,
        config: EngineConfig | None = None,
    ):
        self.store = store
        self.config = config or get_engine_config()

    def lookup_water_class(self, water_class: str) -> str:
        return self.config.lookup_water_class(water_class)

    def find(
        self,
        water_class: str,
        dryer_type_prefix: str,
        dewpoint: str | None = None,
        flow: float | None = None,
    ) -> list[FlowRange]:
        """Find compatible flow ranges.

        Parameters
        ----------
        water_class : str
            Requested water class (aliased for the lookup)
        dryer_type_prefix : str
            Dryer type prefix (e.g., "QCMD")
        dewpoint : str, optional
            Dewpoint to match exactly
        flow : float, optional
            Flow (CFM) that must lie within the range

        Returns
        -------
        list[FlowRange]
            Matching ranges sorted ascending by min_flow
        """
        lookup_class = self.lookup_water_class(water_class)
        if lookup_class != water_class:
            logger.debug(f"Water class {water_class} uses ranges of class {lookup_class}")

        ranges = self.store.find_flow_ranges(lookup_class, dryer_type_prefix, dewpoint, flow)
        return sort_by_min_flow(ranges)
