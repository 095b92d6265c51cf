"""Abstract interface for the component catalog.

Defines the read-only query contract the configuration engine relies on,
enabling the catalog to live in memory, in files, or in a database.
"""

from abc import ABC, abstractmethod

from ..core import (
    PURITY_CLASS_TYPES,
    Application,
    BaseConfiguration,
    FlowRange,
    Product,
    PurityLevel,
)


class CatalogStoreInterface(ABC):
    """Abstract interface for looking up catalog reference data.

    Implementations can be in-memory, file-based, or database-backed.
    All queries are free of side effects; the engine never writes to the
    catalog.

    The catalog holds:
    - Purity level descriptions per class type
    - Base configurations keyed by ISO class
    - Flow range records per water class and product range
    - Industry application presets
    - Product descriptions
    """

    @abstractmethod
    def find_base_configuration(self, iso_class: str) -> BaseConfiguration | None:
        """Exact-key lookup of a base configuration.

        Parameters
        ----------
        iso_class : str
            Canonical ISO class "{particulate}.{water}.{oil}"

        Returns
        -------
        BaseConfiguration or None
            The configuration, or None if the class is not in the catalog
        """
        pass

    @abstractmethod
    def find_flow_ranges(
        self,
        water_class: str,
        dryer_type_prefix: str,
        dewpoint: str | None = None,
        flow: float | None = None,
    ) -> list[FlowRange]:
        """Filtered range query over flow range records.

        Parameters
        ----------
        water_class : str
            Water class to match exactly (aliasing is the caller's job)
        dryer_type_prefix : str
            Product range names must start with this prefix
        dewpoint : str, optional
            If given, only records with this dewpoint
        flow : float, optional
            If given, only records with min_flow <= flow <= max_flow

        Returns
        -------
        list[FlowRange]
            Matching records sorted ascending by min_flow
        """
        pass

    @abstractmethod
    def find_application(self, industry: str, application: str) -> Application | None:
        """Look up an industry application preset by names.

        Returns
        -------
        Application or None
            The preset (carrying its purity classes), or None if not found
        """
        pass

    @abstractmethod
    def list_purity_levels(self, class_type: str | None = None) -> list[PurityLevel]:
        """List purity level descriptions, optionally for one class type."""
        pass

    @abstractmethod
    def list_industries(self) -> list[str]:
        """List industry names, sorted."""
        pass

    @abstractmethod
    def list_applications(self, industry: str) -> list[Application]:
        """List application presets of one industry, sorted by name."""
        pass

    @abstractmethod
    def find_product(self, code: str) -> Product | None:
        """Look up a product description by code."""
        pass

    def purity_levels_grouped(self) -> dict[str, list[dict[str, str]]]:
        """Purity levels grouped by class type, for form display.

        Returns
        -------
        dict
            {"particle": [{"level": ..., "description": ...}, ...], "water": [...], "oil": [...]}
        """
        grouped: dict[str, list[dict[str, str]]] = {t: [] for t in PURITY_CLASS_TYPES}
        for level in self.list_purity_levels():
            grouped[level.class_type].append({
                "level": level.level,
                "description": level.description,
            })
        return grouped
