"""Excel template generator for catalog workbooks.

Generates a workbook with the sheets and header rows the catalog parser
expects. When a catalog is given, its contents are written as data rows, so
an existing catalog can be exported for editing.

Example:
    >>> generator = CatalogTemplateGenerator()
    >>> generator.save("catalog_template.xlsx")
    >>>
    >>> CatalogTemplateGenerator(store).save("catalog_export.xlsx")
"""

from io import BytesIO

import pandas as pd

from ..catalog import InMemoryCatalogStore
from ..core import SlotPosition
from .parser import (
    SHEET_CONFIGURATIONS,
    SHEET_FLOW_RANGES,
    SHEET_INDUSTRY,
    SHEET_PRODUCTS,
    SHEET_PURITY,
)

PURITY_COLUMNS = ["iso_class_type", "level", "purity_description"]
INDUSTRY_COLUMNS = [
    "industry", "application", "description",
    "particulate_class", "water_class", "oil_class",
]
CONFIGURATION_COLUMNS = ["iso_class", "compressor"] + [p.name for p in SlotPosition]
FLOW_RANGE_COLUMNS = [
    "water_class", "product_range", "dewpoint", "flow_range",
    "inlet_filters", "outlet_filters", "comment",
]
PRODUCT_COLUMNS = ["code", "description"]


def format_flow_range(min_flow: float, max_flow: float) -> str:
    """Textual flow range: (4.0, 11.0) -> "4-11"; equal bounds -> "12"."""
    if min_flow == max_flow:
        return f"{min_flow:g}"
    return f"{min_flow:g}-{max_flow:g}"


class CatalogTemplateGenerator:
    """Generates catalog workbooks.

    The workbook has five sheets, in this order:
    1. ISO Purity Map: purity level descriptions
    2. Industry ISO Map: application presets
    3. ISO Class Product Configuration: compressor + QAS1..QAS9 per ISO class
    4. Flow and Dewpoint to Product Ra: flow ranges per product range
    5. Product Descriptions: product codes

    Parameters
    ----------
    store : InMemoryCatalogStore, optional
        Catalog whose contents fill the sheets. Headers only if None.
    """

    def __init__(self, store: InMemoryCatalogStore | None = None):
        self.store = store

    def generate(self) -> dict[str, pd.DataFrame]:
        """Generate the workbook as DataFrames.

        Returns
        -------
        dict[str, pd.DataFrame]
            Sheet names -> DataFrames
        """
        return {
            SHEET_PURITY: self._generate_purity_sheet(),
            SHEET_INDUSTRY: self._generate_industry_sheet(),
            SHEET_CONFIGURATIONS: self._generate_configuration_sheet(),
            SHEET_FLOW_RANGES: self._generate_flow_range_sheet(),
            SHEET_PRODUCTS: self._generate_product_sheet(),
        }

    def save(self, path: str) -> None:
        """Save the workbook to an Excel file."""
        sheets = self.generate()

        with pd.ExcelWriter(path, engine='openpyxl') as writer:
            for sheet_name, df in sheets.items():
                df.to_excel(writer, sheet_name=sheet_name, index=False)

    def to_bytes(self) -> bytes:
        """Generate workbook as bytes (for web download)."""
        sheets = self.generate()
        buffer = BytesIO()

        with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
            for sheet_name, df in sheets.items():
                df.to_excel(writer, sheet_name=sheet_name, index=False)

        buffer.seek(0)
        return buffer.getvalue()

    def _generate_purity_sheet(self) -> pd.DataFrame:
        rows = []
        if self.store is not None:
            rows = [
                [p.class_type, p.level, p.description]
                for p in self.store.list_purity_levels()
            ]
        return pd.DataFrame(rows, columns=PURITY_COLUMNS)

    def _generate_industry_sheet(self) -> pd.DataFrame:
        rows = []
        if self.store is not None:
            for industry in self.store.list_industries():
                for a in self.store.list_applications(industry):
                    rows.append([
                        a.industry, a.name, a.description,
                        a.particulate_class, a.water_class, a.oil_class,
                    ])
        return pd.DataFrame(rows, columns=INDUSTRY_COLUMNS)

    def _generate_configuration_sheet(self) -> pd.DataFrame:
        rows = []
        if self.store is not None:
            rows = [
                [c.iso_class, c.compressor, *c.slots]
                for c in self.store.list_base_configurations()
            ]
        return pd.DataFrame(rows, columns=CONFIGURATION_COLUMNS)

    def _generate_flow_range_sheet(self) -> pd.DataFrame:
        rows = []
        if self.store is not None:
            for record in self.store.to_dict()["flow_ranges"]:
                rows.append([
                    record["water_class"],
                    record["product_range"],
                    record["dewpoint"],
                    format_flow_range(record["min_flow"], record["max_flow"]),
                    record["inlet_filters"],
                    record["outlet_filters"],
                    record["comment"],
                ])
        return pd.DataFrame(rows, columns=FLOW_RANGE_COLUMNS)

    def _generate_product_sheet(self) -> pd.DataFrame:
        rows = []
        if self.store is not None:
            rows = [[p["code"], p["description"]] for p in self.store.to_dict()["products"]]
        return pd.DataFrame(rows, columns=PRODUCT_COLUMNS)
