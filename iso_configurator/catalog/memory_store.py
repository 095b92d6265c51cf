"""In-memory catalog store.

Holds all catalog tables in memory. Flow ranges are kept in a pandas
DataFrame so range queries are plain boolean masks.

Example usage:
    from iso_configurator.catalog import InMemoryCatalogStore
    store = InMemoryCatalogStore(
        base_configurations=[...],
        flow_ranges=[...],
        applications=[...],
    )
    config = store.find_base_configuration("1.2.1")
    ranges = store.find_flow_ranges("2", "QCMD", dewpoint="-40F", flow=8)
"""

import logging
from typing import Any, Iterable

import pandas as pd

from ..core import (
    Application,
    BaseConfiguration,
    FlowRange,
    Product,
    PurityLevel,
)
from .interfaces import CatalogStoreInterface

logger = logging.getLogger(__name__)

_FLOW_RANGE_COLUMNS = ["water_class", "product_range", "dewpoint", "min_flow", "max_flow"]


class InMemoryCatalogStore(CatalogStoreInterface):
    """Catalog store backed by Python objects and a flow-range DataFrame.

    Parameters
    ----------
    base_configurations : iterable of BaseConfiguration
        One per ISO class; a later duplicate replaces an earlier one
    flow_ranges : iterable of FlowRange
        Flow range records (order is kept for equal min_flow values)
    applications : iterable of Application, optional
        Industry application presets
    purity_levels : iterable of PurityLevel, optional
        Purity level descriptions
    products : iterable of Product, optional
        Product descriptions
    """

    def __init__(
        self,
        base_configurations: Iterable[BaseConfiguration] = (),
        flow_ranges: Iterable[FlowRange] = (),
        applications: Iterable[Application] = (),
        purity_levels: Iterable[PurityLevel] = (),
        products: Iterable[Product] = (),
    ):
        self._base_configurations: dict[str, BaseConfiguration] = {}
        for config in base_configurations:
            if config.iso_class in self._base_configurations:
                logger.warning(f"Duplicate base configuration for {config.iso_class}, keeping last")
            self._base_configurations[config.iso_class] = config

        self._flow_ranges: list[FlowRange] = list(flow_ranges)
        self._flow_ranges_df = pd.DataFrame(
            [
                {
                    "water_class": r.water_class,
                    "product_range": r.product_range_name,
                    "dewpoint": r.dewpoint,
                    "min_flow": r.min_flow,
                    "max_flow": r.max_flow,
                }
                for r in self._flow_ranges
            ],
            columns=_FLOW_RANGE_COLUMNS,
        )

        self._applications: dict[tuple[str, str], Application] = {
            (a.industry, a.name): a for a in applications
        }
        self._purity_levels: list[PurityLevel] = list(purity_levels)
        self._products: dict[str, Product] = {p.code: p for p in products}

    # --- Core queries ---

    def find_base_configuration(self, iso_class: str) -> BaseConfiguration | None:
        return self._base_configurations.get(iso_class)

    def find_flow_ranges(
        self,
        water_class: str,
        dryer_type_prefix: str,
        dewpoint: str | None = None,
        flow: float | None = None,
    ) -> list[FlowRange]:
        df = self._flow_ranges_df
        if df.empty:
            return []

        mask = (df["water_class"] == water_class) & df["product_range"].str.startswith(
            dryer_type_prefix
        )
        if dewpoint is not None:
            mask &= df["dewpoint"] == dewpoint
        if flow is not None:
            mask &= (df["min_flow"] <= flow) & (df["max_flow"] >= flow)

        matches = df[mask.astype(bool)].sort_values("min_flow", kind="stable")
        return [self._flow_ranges[i] for i in matches.index]

    def find_application(self, industry: str, application: str) -> Application | None:
        return self._applications.get((industry, application))

    # --- Listing ---

    def list_purity_levels(self, class_type: str | None = None) -> list[PurityLevel]:
        if class_type is None:
            return list(self._purity_levels)
        return [p for p in self._purity_levels if p.class_type == class_type]

    def list_industries(self) -> list[str]:
        return sorted({industry for industry, _ in self._applications})

    def list_applications(self, industry: str) -> list[Application]:
        return sorted(
            (a for (ind, _), a in self._applications.items() if ind == industry),
            key=lambda a: a.name,
        )

    def find_product(self, code: str) -> Product | None:
        return self._products.get(code)

    def list_base_configurations(self) -> list[BaseConfiguration]:
        """All base configurations, in insertion order."""
        return list(self._base_configurations.values())

    def list_flow_ranges(self) -> pd.DataFrame:
        """Flow range table as a DataFrame (copy)."""
        return self._flow_ranges_df.copy()

    # --- Serialization ---

    def to_dict(self) -> dict[str, Any]:
        """Convert the whole catalog to a dictionary (JSON-compatible)."""
        return {
            "purity_levels": [p.to_dict() for p in self._purity_levels],
            "applications": [a.to_dict() for a in self._applications.values()],
            "base_configurations": [c.to_dict() for c in self._base_configurations.values()],
            "flow_ranges": [r.to_dict() for r in self._flow_ranges],
            "products": [p.to_dict() for p in self._products.values()],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InMemoryCatalogStore":
        """Create from dictionary."""
        return cls(**cls.records_from_dict(data))

    @staticmethod
    def records_from_dict(data: dict[str, Any]) -> dict[str, list[Any]]:
        """Parse catalog tables from a dictionary into constructor arguments."""
        return {
            "base_configurations": [
                BaseConfiguration.from_dict(c) for c in data.get("base_configurations", [])
            ],
            "flow_ranges": [FlowRange.from_dict(r) for r in data.get("flow_ranges", [])],
            "applications": [Application.from_dict(a) for a in data.get("applications", [])],
            "purity_levels": [PurityLevel.from_dict(p) for p in data.get("purity_levels", [])],
            "products": [Product.from_dict(p) for p in data.get("products", [])],
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"base_configurations={len(self._base_configurations)}, "
            f"flow_ranges={len(self._flow_ranges)}, "
            f"applications={len(self._applications)})"
        )
