"""
Reference catalog lookup interface.

The engine reads four independent catalogs mapping a natural key (country
name, occupation, product, nature of business) to a risk band. A missing
entry is a valid outcome (None), never an error.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, Mapping, Optional

from kycrisk.scoring.bands import RiskBand

logger = logging.getLogger(__name__)


class Catalog(str, Enum):
    """Reference catalogs consulted during an assessment."""

    COUNTRY = "country"
    EMPLOYMENT = "employment"
    PRODUCT = "product"
    BUSINESS = "business"


def normalize_key(key: str, case_sensitive: bool = True) -> str:
    """
    Key form used for matching.

    Case-insensitive matching lower-cases keys, as SQL lower() does.
    """
    return key if case_sensitive else key.lower()


class ReferenceDataLookup(ABC):
    """Abstract base class for reference catalog backends."""

    @abstractmethod
    async def lookup(self, catalog: Catalog, key: str) -> Optional[RiskBand]:
        """Return the band configured for key, or None when not catalogued."""
        pass

    async def country_risk(self, country: str) -> Optional[RiskBand]:
        return await self.lookup(Catalog.COUNTRY, country)

    async def employment_risk(self, occupation: str) -> Optional[RiskBand]:
        return await self.lookup(Catalog.EMPLOYMENT, occupation)

    async def product_risk(self, product: str) -> Optional[RiskBand]:
        return await self.lookup(Catalog.PRODUCT, product)

    async def business_risk(self, business: str) -> Optional[RiskBand]:
        return await self.lookup(Catalog.BUSINESS, business)


class InMemoryReferenceData(ReferenceDataLookup):
    """
    Dict-backed reference catalogs.

    Lookups always read the current contents, so changes made through
    set_band/remove/load are visible to the next assessment. In
    case-insensitive mode, spellings that differ only in case share one
    entry and the last one stored wins.
    """

    def __init__(
        self,
        catalogs: Optional[Mapping[Catalog, Mapping[str, RiskBand]]] = None,
        case_sensitive: bool = True,
    ):
        self.case_sensitive = case_sensitive
        self._catalogs: dict[Catalog, dict[str, tuple[str, RiskBand]]] = {
            catalog: {} for catalog in Catalog
        }
        if catalogs:
            for catalog, entries in catalogs.items():
                self.load(catalog, entries.items())

    def _normalize(self, key: str) -> str:
        return normalize_key(key, self.case_sensitive)

    def load(self, catalog: Catalog, entries: Iterable[tuple[str, RiskBand]]) -> int:
        """Add or replace entries in a catalog. Returns the number loaded."""
        count = 0
        for key, band in entries:
            self.set_band(catalog, key, band)
            count += 1
        logger.debug(f"Loaded {count} entries into {catalog.value} catalog")
        return count

    def set_band(self, catalog: Catalog, key: str, band: RiskBand | str) -> None:
        self._catalogs[Catalog(catalog)][self._normalize(key)] = (key, RiskBand(band))

    def remove(self, catalog: Catalog, key: str) -> bool:
        return self._catalogs[Catalog(catalog)].pop(self._normalize(key), None) is not None

    def entries(self, catalog: Catalog) -> dict[str, RiskBand]:
        """All entries of a catalog, keyed by their original spelling."""
        return dict(sorted(self._catalogs[Catalog(catalog)].values()))

    def keys_by_band(self, catalog: Catalog, band: RiskBand) -> list[str]:
        """Catalog keys configured with the given band, sorted."""
        return sorted(key for key, value in self._catalogs[Catalog(catalog)].values() if value == band)

    async def lookup(self, catalog: Catalog, key: str) -> Optional[RiskBand]:
        entry = self._catalogs[Catalog(catalog)].get(self._normalize(key))
        return entry[1] if entry else None
