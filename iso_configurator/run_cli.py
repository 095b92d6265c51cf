#!/usr/bin/env python
"""Generate compressed-air configurations from the command line.

Usage:
    python -m iso_configurator.run_cli iso 1 2 1 [--flow 250]
    python -m iso_configurator.run_cli industry "Carwash" "Touchless Wash Systems" [--flow 2110]

The catalog is read from --catalog or the ISO_CONFIGURATOR_CATALOG
environment variable (.json snapshot or .xlsx workbook).
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from .catalog import CatalogStoreInterface, JsonCatalogStore
from .core import GenerationResult
from .engine import ConfigurationService
from .excel import parse_catalog_workbook
from .results import ResultsExporter, format_component_chain

CATALOG_ENV_VAR = "ISO_CONFIGURATOR_CATALOG"

logger = logging.getLogger(__name__)


def _resolve_catalog_path(catalog_path: str | None) -> Path | None:
    """Resolve catalog path from argument or environment variable.

    Resolution order:
    1. Explicitly provided path (if not None)
    2. ISO_CONFIGURATOR_CATALOG environment variable
    """
    if catalog_path is not None:
        return Path(catalog_path)

    env_path = os.environ.get(CATALOG_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def load_catalog(path: str | Path) -> CatalogStoreInterface:
    """Load a catalog from a JSON snapshot or an Excel workbook.

    Raises
    ------
    ValueError
        If the workbook cannot be parsed or the file type is unknown
    FileNotFoundError
        If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        return JsonCatalogStore(path)
    if suffix in (".xlsx", ".xlsm"):
        result = parse_catalog_workbook(path)
        for warning in result.warnings:
            logger.warning(warning)
        if not result.success:
            raise ValueError("Invalid catalog workbook:\n  " + "\n  ".join(result.errors))
        return result.catalog
    raise ValueError(f"Unsupported catalog file type: {path.suffix}")


def print_result(result: GenerationResult) -> None:
    """Print a generation result in readable form."""
    if not result.success:
        print(f"Error: {result.message}")
        return

    print(result.message)
    print(f"ISO Class: {result.iso_class}")
    print()

    if not result.configurations:
        print("No compatible configurations found!")
        if result.flow is not None:
            print(f"The flow of {result.flow:g} CFM does not match any available product ranges.")
        return

    for index, config in enumerate(result.configurations, start=1):
        print("-" * 60)
        print(f"Configuration #{index}: {config.configuration_name}")
        print(f"Dryer Type: {config.dryer_type}")
        print(f"Compressor: {config.compressor}")
        for option, component_config in zip(config.flow_options, config.component_configurations):
            print()
            print(f"  {option.product_range_name}  [{option.flow_range} CFM]")
            print(f"    {format_component_chain(config.compressor, component_config.components)}")
        print()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description='Generate compressed-air purity configurations')
    parser.add_argument('--catalog', type=str, default=None,
                        help=f'Catalog file (.json or .xlsx); defaults to ${CATALOG_ENV_VAR}')
    parser.add_argument('--export', type=str, default=None,
                        help='Write the result to this Excel file')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='mode', required=True)

    iso_parser = subparsers.add_parser('iso', help='Generate from ISO purity classes')
    iso_parser.add_argument('particulate', help='Particulate class (0-5 or -)')
    iso_parser.add_argument('water', help='Water class (0-5 or -)')
    iso_parser.add_argument('oil', help='Oil class (0-5 or -)')
    iso_parser.add_argument('--flow', type=float, default=None, help='Flow in CFM')

    industry_parser = subparsers.add_parser('industry', help='Generate from an industry application')
    industry_parser.add_argument('industry', help='Industry name')
    industry_parser.add_argument('application', help='Application name')
    industry_parser.add_argument('--flow', type=float, default=None, help='Flow in CFM')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    catalog_path = _resolve_catalog_path(args.catalog)
    if catalog_path is None:
        print(f"Error: no catalog given. Use --catalog or set {CATALOG_ENV_VAR}.")
        return 1

    try:
        store = load_catalog(catalog_path)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    service = ConfigurationService(store)
    if args.mode == 'iso':
        result = service.generate_from_iso_class(args.particulate, args.water, args.oil, args.flow)
    else:
        result = service.generate_from_industry_application(args.industry, args.application, args.flow)

    print_result(result)

    if args.export:
        path = ResultsExporter(store).export_to_excel(result, args.export)
        print(f"Exported to: {path}")

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
