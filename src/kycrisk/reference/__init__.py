"""
Reference catalogs consulted by the risk classification engine.

Provides:
- The async lookup interface and an in-memory implementation
- Baseline catalogs for seeding
- A SQL-backed implementation over the catalog tables
"""

from kycrisk.reference.lookup import Catalog, InMemoryReferenceData, ReferenceDataLookup
from kycrisk.reference.catalogs import default_catalogs, load_default_catalogs
from kycrisk.reference.repository import SqlReferenceData

__all__ = [
    "Catalog",
    "ReferenceDataLookup",
    "InMemoryReferenceData",
    "SqlReferenceData",
    "default_catalogs",
    "load_default_catalogs",
]
