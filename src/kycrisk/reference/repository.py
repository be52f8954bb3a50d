"""
SQL-backed reference catalogs.

Reads the current risk band for a natural key on every call; nothing is
cached between assessments, so catalog edits take effect immediately.
"""

import logging
from typing import Iterable, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from kycrisk.db.orm import BusinessNatureRisk, CountryRisk, EmploymentRisk, ProductRisk
from kycrisk.errors import LookupFailureError
from kycrisk.reference.lookup import Catalog, ReferenceDataLookup, normalize_key
from kycrisk.scoring.bands import RiskBand

logger = logging.getLogger(__name__)

# Catalog -> (model, natural key attribute)
CATALOG_MODELS = {
    Catalog.COUNTRY: (CountryRisk, "country"),
    Catalog.EMPLOYMENT: (EmploymentRisk, "occupation"),
    Catalog.PRODUCT: (ProductRisk, "product"),
    Catalog.BUSINESS: (BusinessNatureRisk, "business"),
}


class SqlReferenceData(ReferenceDataLookup):
    """
    Reference catalogs stored in the relational database.

    In case-insensitive mode, rows whose keys differ only in case all match;
    the row with the lowest key in database order is used.
    """

    def __init__(self, session: AsyncSession, case_sensitive: bool = True):
        self.session = session
        self.case_sensitive = case_sensitive

    async def lookup(self, catalog: Catalog, key: str) -> Optional[RiskBand]:
        catalog = Catalog(catalog)
        model, key_attr = CATALOG_MODELS[catalog]
        column = getattr(model, key_attr)

        if self.case_sensitive:
            condition = column == key
        else:
            condition = func.lower(column) == normalize_key(key, case_sensitive=False)

        statement = select(model.risk_band).where(condition).order_by(column).limit(1)
        try:
            result = await self.session.execute(statement)
            band = result.scalars().first()
        except (SQLAlchemyError, OSError) as e:
            # Driver connection errors (e.g. asyncpg) surface as OSError
            logger.error(f"Reference lookup failed for {catalog.value}[{key!r}]: {e}")
            raise LookupFailureError(catalog.value, key) from e

        if band is None:
            return None
        return RiskBand(band)

    async def upsert(self, catalog: Catalog, entries: Iterable[tuple[str, RiskBand]]) -> int:
        """
        Insert or update catalog entries.

        Flushes but does not commit; the caller owns the transaction.
        """
        model, key_attr = CATALOG_MODELS[Catalog(catalog)]
        count = 0
        for key, band in entries:
            await self.session.merge(model(**{key_attr: key, "risk_band": RiskBand(band)}))
            count += 1
        await self.session.flush()
        logger.info(f"Upserted {count} entries into {Catalog(catalog).value} catalog")
        return count
