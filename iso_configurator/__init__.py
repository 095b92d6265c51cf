"""ISO Configurator - compressed-air purity to equipment configurations.

Maps an ISO 8573-1 purity class (particulate.water.oil), optionally with a
target flow, to the equipment configurations in a component catalog.

Example workflow:
    1. Load the catalog (JSON snapshot or Excel workbook)
    2. Request configurations for an ISO class or an industry application
    3. Browse the dryer alternatives and their flow ranges
    4. Export the result to Excel

Quick start:
    from iso_configurator import ConfigurationService, JsonCatalogStore
    service = ConfigurationService(JsonCatalogStore("catalog.json"))
    result = service.generate_from_iso_class("1", "2", "1", flow=8)
    for config in result.configurations:
        print(config.configuration_name, [o.flow_range for o in config.flow_options])

Catalog workbooks:
    from iso_configurator.excel import parse_catalog_workbook
    parsed = parse_catalog_workbook("catalog.xlsx")
    if parsed.success:
        service = ConfigurationService(parsed.catalog)
"""

from .core import (
    SlotPosition,
    BaseConfiguration,
    FlowRange,
    PurityLevel,
    Application,
    Product,
    DryerOption,
    DryerSpec,
    FlowOption,
    ComponentConfiguration,
    GeneratedConfiguration,
    GenerationResult,
    make_iso_class,
    format_iso_class,
)

from .configs import (
    EngineConfig,
    get_engine_config,
)

from .catalog import (
    # Interface
    CatalogStoreInterface,
    # Implementations
    InMemoryCatalogStore,
    JsonCatalogStore,
)

from .engine import (
    ConfigurationService,
    ProductRangeMatcher,
    parse_dryer_spec,
)

from .excel import (
    CatalogTemplateGenerator,
    CatalogWorkbookParser,
    CatalogParseResult,
    parse_catalog_workbook,
)

from .results import (
    ResultsExporter,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    'SlotPosition',
    'BaseConfiguration',
    'FlowRange',
    'PurityLevel',
    'Application',
    'Product',
    'DryerOption',
    'DryerSpec',
    'FlowOption',
    'ComponentConfiguration',
    'GeneratedConfiguration',
    'GenerationResult',
    'make_iso_class',
    'format_iso_class',
    # Configs
    'EngineConfig',
    'get_engine_config',
    # Catalog
    'CatalogStoreInterface',
    'InMemoryCatalogStore',
    'JsonCatalogStore',
    # Engine
    'ConfigurationService',
    'ProductRangeMatcher',
    'parse_dryer_spec',
    # Excel
    'CatalogTemplateGenerator',
    'CatalogWorkbookParser',
    'CatalogParseResult',
    'parse_catalog_workbook',
    # Results
    'ResultsExporter',
]
