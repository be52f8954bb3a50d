"""
Database module for the reference risk catalogs.
"""

from kycrisk.db.orm import (
    Base,
    BusinessNatureRisk,
    CountryRisk,
    EmploymentRisk,
    ProductRisk,
)

__all__ = [
    "Base",
    "CountryRisk",
    "EmploymentRisk",
    "ProductRisk",
    "BusinessNatureRisk",
]
