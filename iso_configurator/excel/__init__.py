"""Catalog workbook generation and parsing.

Example - Generate template:
    >>> from iso_configurator.excel import CatalogTemplateGenerator
    >>> CatalogTemplateGenerator().save("catalog_template.xlsx")

Example - Parse filled workbook:
    >>> from iso_configurator.excel import parse_catalog_workbook
    >>> result = parse_catalog_workbook("catalog.xlsx")
    >>> if result.success:
    ...     print(result.catalog)
"""

from .parser import (
    SHEET_PURITY,
    SHEET_INDUSTRY,
    SHEET_CONFIGURATIONS,
    SHEET_FLOW_RANGES,
    SHEET_PRODUCTS,
    CatalogWorkbookParser,
    CatalogParseResult,
    parse_catalog_workbook,
    parse_flow_range,
)
from .template_generator import (
    PURITY_COLUMNS,
    INDUSTRY_COLUMNS,
    CONFIGURATION_COLUMNS,
    FLOW_RANGE_COLUMNS,
    PRODUCT_COLUMNS,
    CatalogTemplateGenerator,
    format_flow_range,
)

__all__ = [
    'SHEET_PURITY',
    'SHEET_INDUSTRY',
    'SHEET_CONFIGURATIONS',
    'SHEET_FLOW_RANGES',
    'SHEET_PRODUCTS',
    'PURITY_COLUMNS',
    'INDUSTRY_COLUMNS',
    'CONFIGURATION_COLUMNS',
    'FLOW_RANGE_COLUMNS',
    'PRODUCT_COLUMNS',
    'CatalogTemplateGenerator',
    'CatalogWorkbookParser',
    'CatalogParseResult',
    'parse_catalog_workbook',
    'parse_flow_range',
    'format_flow_range',
]
