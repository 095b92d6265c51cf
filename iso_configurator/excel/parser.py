"""Excel parser for catalog workbooks.

Reads the catalog workbook (purity map, industry map, ISO class
configurations, flow ranges, product descriptions) and converts it to an
InMemoryCatalogStore. Columns are read by position; the first row of each
sheet is a header.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, BinaryIO
import logging

import pandas as pd

from ..catalog import InMemoryCatalogStore
from ..core import (
    SLOT_COUNT,
    Application,
    BaseConfiguration,
    FlowRange,
    Product,
    PurityLevel,
    categorize_product,
    split_iso_class,
)

logger = logging.getLogger(__name__)

SHEET_PURITY = "ISO Purity Map"
SHEET_INDUSTRY = "Industry ISO Map"
SHEET_CONFIGURATIONS = "ISO Class Product Configuration"
SHEET_FLOW_RANGES = "Flow and Dewpoint to Product Ra"
SHEET_PRODUCTS = "Product Descriptions"

REQUIRED_SHEETS = (SHEET_CONFIGURATIONS, SHEET_FLOW_RANGES)
OPTIONAL_SHEETS = (SHEET_PURITY, SHEET_INDUSTRY, SHEET_PRODUCTS)

_CLASS_TYPE_ALIASES = {
    "particulate": "particle",
    "particles": "particle",
}


def parse_flow_range(text: str) -> tuple[float, float]:
    """Parse a textual flow range.

    "2-11" -> (2.0, 11.0). Without an upper bound the range is a single
    point: "12" -> (12.0, 12.0).

    Raises
    ------
    ValueError
        If a bound is not numeric
    """
    parts = str(text).split("-", 1)
    min_text = parts[0].strip()
    max_text = parts[1].strip() if len(parts) > 1 and parts[1].strip() else min_text
    try:
        return float(min_text), float(max_text)
    except ValueError:
        raise ValueError(f"Invalid flow range: {text!r}") from None


def _cell(value: Any) -> str | None:
    """Normalize a cell to stripped text, or None if blank."""
    if value is None or pd.isna(value):
        return None
    text = str(value).strip()
    if text == "" or text.lower() == "nan":
        return None
    return text


@dataclass
class CatalogParseResult:
    """Result of parsing a catalog workbook."""
    success: bool
    catalog: InMemoryCatalogStore | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


class CatalogWorkbookParser:
    """Parses catalog workbooks into an InMemoryCatalogStore.

    Example:
        >>> parser = CatalogWorkbookParser()
        >>> result = parser.parse("catalog.xlsx")
        >>> if result.success:
        ...     service = ConfigurationService(result.catalog)
    """

    def parse(self, file: str | Path | BinaryIO) -> CatalogParseResult:
        """Parse a catalog workbook.

        Parameters
        ----------
        file : str, Path, or file-like
            Path to Excel file or file-like object

        Returns
        -------
        CatalogParseResult
            Parsed catalog or errors
        """
        errors = []
        warnings = []

        try:
            excel_file = pd.ExcelFile(file)
            sheet_names = excel_file.sheet_names

            for sheet in REQUIRED_SHEETS:
                if sheet not in sheet_names:
                    errors.append(f"Missing required sheet: '{sheet}'")
            if errors:
                return CatalogParseResult(success=False, errors=errors)

            for sheet in OPTIONAL_SHEETS:
                if sheet not in sheet_names:
                    warnings.append(f"Missing optional sheet: '{sheet}'")

            # Read with dtype=str so class tokens like "1" and "-" stay text
            def read(sheet: str) -> pd.DataFrame | None:
                if sheet not in sheet_names:
                    return None
                return excel_file.parse(sheet, dtype=str)

            purity_levels = self._parse_purity_levels(read(SHEET_PURITY), warnings)
            applications = self._parse_applications(read(SHEET_INDUSTRY), warnings)
            configurations = self._parse_configurations(read(SHEET_CONFIGURATIONS), warnings)
            flow_ranges = self._parse_flow_ranges(read(SHEET_FLOW_RANGES), warnings)
            products = self._parse_products(read(SHEET_PRODUCTS), warnings)

        except Exception as e:
            errors.append(f"Failed to read Excel file: {str(e)}")
            return CatalogParseResult(success=False, errors=errors, warnings=warnings)

        if not configurations:
            errors.append(f"No configurations found in '{SHEET_CONFIGURATIONS}' sheet")
        if not flow_ranges:
            errors.append(f"No flow ranges found in '{SHEET_FLOW_RANGES}' sheet")
        if errors:
            return CatalogParseResult(success=False, errors=errors, warnings=warnings)

        catalog = InMemoryCatalogStore(
            base_configurations=configurations,
            flow_ranges=flow_ranges,
            applications=applications,
            purity_levels=purity_levels,
            products=products,
        )
        logger.info(f"Parsed catalog workbook: {catalog!r}, {len(warnings)} warning(s)")

        return CatalogParseResult(success=True, catalog=catalog, warnings=warnings)

    def _rows(self, df: pd.DataFrame | None, n_columns: int):
        """Yield (excel_row_number, cells) padded to n_columns."""
        if df is None:
            return
        for idx in range(len(df)):
            values = [_cell(v) for v in df.iloc[idx].tolist()[:n_columns]]
            values += [None] * (n_columns - len(values))
            # +2: 1-based rows plus the header row
            yield idx + 2, values

    def _parse_purity_levels(self, df, warnings: list[str]) -> list[PurityLevel]:
        levels = []
        for row_num, (class_type, level, description) in self._rows(df, 3):
            if not class_type or level is None:
                continue
            class_type = class_type.lower()
            class_type = _CLASS_TYPE_ALIASES.get(class_type, class_type)
            try:
                levels.append(PurityLevel(class_type, level, description or ""))
            except ValueError as e:
                warnings.append(f"{SHEET_PURITY} row {row_num}: {e}")
        return levels

    def _parse_applications(self, df, warnings: list[str]) -> list[Application]:
        applications = []
        for row_num, values in self._rows(df, 6):
            industry, name, description, particulate, water, oil = values
            if not industry or not name:
                continue
            if None in (particulate, water, oil):
                warnings.append(
                    f"{SHEET_INDUSTRY} row {row_num}: incomplete purity classes for "
                    f"{industry} / {name}"
                )
                continue
            applications.append(Application(
                industry=industry,
                name=name,
                particulate_class=particulate,
                water_class=water,
                oil_class=oil,
                description=description,
            ))
        return applications

    def _parse_configurations(self, df, warnings: list[str]) -> list[BaseConfiguration]:
        configurations = []
        for _, values in self._rows(df, 2 + SLOT_COUNT):
            iso_class = values[0]
            if not iso_class:
                continue
            iso_class = ".".join(split_iso_class(iso_class))
            configurations.append(BaseConfiguration(
                iso_class=iso_class,
                compressor=values[1],
                slots=tuple(values[2:]),
            ))
        return configurations

    def _parse_flow_ranges(self, df, warnings: list[str]) -> list[FlowRange]:
        flow_ranges = []
        for row_num, values in self._rows(df, 7):
            water_class, product_range, dewpoint, flow_text, inlet, outlet, comment = values
            if not product_range or not flow_text:
                continue
            try:
                min_flow, max_flow = parse_flow_range(flow_text)
                flow_ranges.append(FlowRange(
                    water_class=water_class or "",
                    product_range_name=product_range,
                    dewpoint=dewpoint,
                    min_flow=min_flow,
                    max_flow=max_flow,
                    inlet_filters=inlet,
                    outlet_filters=outlet,
                    comment=comment,
                ))
            except ValueError as e:
                warnings.append(f"{SHEET_FLOW_RANGES} row {row_num}: {e}")
        return flow_ranges

    def _parse_products(self, df, warnings: list[str]) -> list[Product]:
        products = []
        for _, (code, description) in self._rows(df, 2):
            if not code:
                continue
            products.append(Product(
                code=code,
                description=description,
                category=categorize_product(code),
            ))
        return products


def parse_catalog_workbook(file: str | Path | BinaryIO) -> CatalogParseResult:
    """Convenience function to parse a catalog workbook.

    Parameters
    ----------
    file : str, Path, or file-like
        Excel file to parse

    Returns
    -------
    CatalogParseResult
        Parsed catalog
    """
    parser = CatalogWorkbookParser()
    return parser.parse(file)
