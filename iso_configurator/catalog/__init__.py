"""Catalog stores.

Two catalog backends are available:

1. InMemoryCatalogStore: Built from Python objects (or a parsed workbook)
2. JsonCatalogStore: Loaded from a JSON snapshot of the whole catalog

Example usage:
    from iso_configurator.catalog import JsonCatalogStore
    store = JsonCatalogStore("./catalog.json")

    config = store.find_base_configuration("1.2.1")
    ranges = store.find_flow_ranges("2", "QCMD", dewpoint="-40F")
    preset = store.find_application("Carwash", "Touchless Wash Systems")
"""

from .interfaces import CatalogStoreInterface
from .memory_store import InMemoryCatalogStore
from .file_store import JsonCatalogStore

__all__ = [
    # Interface
    'CatalogStoreInterface',
    # Implementations
    'InMemoryCatalogStore',
    'JsonCatalogStore',
]
