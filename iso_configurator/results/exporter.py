"""Export of generated configurations.

Flattens a GenerationResult into tables and writes shareable Excel files.
The dewpoint suffix on dryer components (e.g., "QCMD 4-11 (-40F)") is a
presentation detail added here only; engine component lists never carry it.
"""

from pathlib import Path

import pandas as pd

from ..catalog import CatalogStoreInterface
from ..core import GenerationResult, format_iso_class, split_iso_class

CONFIGURATION_COLUMNS = [
    "iso_class",
    "configuration_name",
    "dryer_type",
    "dewpoint",
    "product_range",
    "flow_range",
    "min_flow",
    "max_flow",
    "compressor",
    "components",
]


def format_dryer_component(product_range_name: str, dewpoint: str | None) -> str:
    """Dryer component label with its dewpoint: "QCMD 4-11 (-40F)"."""
    if not dewpoint:
        return product_range_name
    return f"{product_range_name} ({dewpoint})"


def format_component_chain(compressor: str | None, components: list[str] | tuple[str, ...]) -> str:
    """Display chain "QOF -> QMF -> QCMD 4-11"."""
    chain = ([compressor] if compressor else []) + list(components)
    return " -> ".join(chain)


class ResultsExporter:
    """Exporter for generation results.

    Example:
        >>> exporter = ResultsExporter(store)
        >>> df = exporter.to_dataframe(result)
        >>> exporter.export_to_excel(result, "./exports/1.2.1.xlsx")

    Parameters
    ----------
    store : CatalogStoreInterface, optional
        Catalog used to look up component descriptions
    label_dewpoint : bool, default=True
        If True, dryer components are labelled with their dewpoint
    """

    def __init__(
        self,
        store: CatalogStoreInterface | None = None,
        label_dewpoint: bool = True,
    ):
        self.store = store
        self.label_dewpoint = label_dewpoint

    def to_dataframe(self, result: GenerationResult) -> pd.DataFrame:
        """One row per flow option of every configuration.

        Parameters
        ----------
        result : GenerationResult
            Result to flatten

        Returns
        -------
        pd.DataFrame
            Columns: iso_class, configuration_name, dryer_type, dewpoint,
            product_range, flow_range, min_flow, max_flow, compressor, components
        """
        rows = []
        for config in result.configurations:
            for option, component_config in zip(config.flow_options, config.component_configurations):
                components = list(component_config.components)
                if self.label_dewpoint and component_config.range_name is not None:
                    components = [
                        format_dryer_component(c, config.dewpoint)
                        if c == component_config.range_name else c
                        for c in components
                    ]
                rows.append({
                    "iso_class": config.iso_class,
                    "configuration_name": config.configuration_name,
                    "dryer_type": config.dryer_type,
                    "dewpoint": config.dewpoint,
                    "product_range": option.product_range_name,
                    "flow_range": option.flow_range,
                    "min_flow": option.min_flow,
                    "max_flow": option.max_flow,
                    "compressor": config.compressor,
                    "components": format_component_chain(config.compressor, components),
                })
        return pd.DataFrame(rows, columns=CONFIGURATION_COLUMNS)

    def summary_dataframe(self, result: GenerationResult) -> pd.DataFrame:
        """Key/value table describing the request and outcome."""
        rows = [
            {"field": "success", "value": result.success},
            {"field": "message", "value": result.message},
            {"field": "iso_class", "value": format_iso_class(result.iso_class) if result.iso_class else None},
            {"field": "flow_cfm", "value": result.flow},
            {"field": "n_configurations", "value": result.n_configurations},
        ]
        if self.store is not None and result.iso_class:
            for class_type, level in zip(("particle", "water", "oil"), split_iso_class(result.iso_class)):
                description = next(
                    (p.description for p in self.store.list_purity_levels(class_type) if p.level == level),
                    None,
                )
                rows.append({"field": f"{class_type}_purity", "value": description})
        return pd.DataFrame(rows, columns=["field", "value"])

    def components_dataframe(self, result: GenerationResult) -> pd.DataFrame:
        """Distinct components of the result with catalog descriptions."""
        codes: list[str] = []
        for config in result.configurations:
            if config.compressor and config.compressor not in codes:
                codes.append(config.compressor)
            for component_config in config.component_configurations:
                for component in component_config.components:
                    if component not in codes:
                        codes.append(component)

        rows = []
        for code in codes:
            product = self._find_product(code)
            rows.append({
                "component": code,
                "category": product.category if product else None,
                "description": product.description if product else None,
            })
        return pd.DataFrame(rows, columns=["component", "category", "description"])

    def export_to_excel(self, result: GenerationResult, path: str | Path) -> Path:
        """Write Summary, Configurations and Components sheets.

        Parameters
        ----------
        result : GenerationResult
            Result to export
        path : str or Path
            Destination .xlsx file; parent directories are created

        Returns
        -------
        Path
            The written file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with pd.ExcelWriter(path, engine='openpyxl') as writer:
            self.summary_dataframe(result).to_excel(writer, sheet_name="Summary", index=False)
            self.to_dataframe(result).to_excel(writer, sheet_name="Configurations", index=False)
            self.components_dataframe(result).to_excel(writer, sheet_name="Components", index=False)

        return path

    def _find_product(self, code: str):
        """Product for a component, trying the full name then its leading code."""
        if self.store is None:
            return None
        product = self.store.find_product(code)
        if product is None and " " in code:
            product = self.store.find_product(code.split(" ", 1)[0])
        return product
