"""JSON file-based catalog store.

The whole catalog (purity levels, applications, base configurations, flow
ranges, products) is stored as a single JSON document and loaded into memory
on construction. Queries are answered by InMemoryCatalogStore.
"""

import json
import logging
from pathlib import Path

from .memory_store import InMemoryCatalogStore

logger = logging.getLogger(__name__)


class JsonCatalogStore(InMemoryCatalogStore):
    """Catalog store loaded from a JSON file.

    Example:
        >>> store = JsonCatalogStore("./catalog.json")
        >>> store.find_base_configuration("1.2.1")
        >>> # Snapshot any in-memory catalog to disk
        >>> JsonCatalogStore.save(other_store, "./catalog.json")
    """

    def __init__(self, path: str | Path):
        """Load the catalog.

        Parameters
        ----------
        path : str or Path
            Path to the catalog JSON file

        Raises
        ------
        FileNotFoundError
            If the file does not exist
        """
        self.path = Path(path)
        if not self.path.exists():
            raise FileNotFoundError(f"Catalog file not found: {self.path}")

        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)

        super().__init__(**self.records_from_dict(data))
        logger.info(f"Loaded catalog from {self.path}: {self!r}")

    @staticmethod
    def save(store: InMemoryCatalogStore, path: str | Path) -> Path:
        """Write a catalog to a JSON file.

        Parameters
        ----------
        store : InMemoryCatalogStore
            Catalog to write
        path : str or Path
            Destination file; parent directories are created

        Returns
        -------
        Path
            The written file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(store.to_dict(), f, indent=2)
        return path
