"""
Pytest configuration and shared fixtures for kycrisk tests.
"""

import pytest

from kycrisk.reference.catalogs import load_default_catalogs
from kycrisk.reference.lookup import Catalog, InMemoryReferenceData, ReferenceDataLookup
from kycrisk.schemas.subject import EntitySubject, IndividualSubject
from kycrisk.scoring.bands import RiskBand
from kycrisk.scoring.engine import RiskClassificationEngine


class RecordingReference(ReferenceDataLookup):
    """Wraps a catalog store and records every lookup made through it."""

    def __init__(self, inner: ReferenceDataLookup):
        self.inner = inner
        self.calls: list[tuple[Catalog, str]] = []

    async def lookup(self, catalog, key):
        self.calls.append((Catalog(catalog), key))
        return await self.inner.lookup(catalog, key)


class FailingReference(ReferenceDataLookup):
    """Catalog store whose backend is unavailable."""

    def __init__(self, error: Exception):
        self.error = error

    async def lookup(self, catalog, key):
        raise self.error


@pytest.fixture
def reference() -> InMemoryReferenceData:
    """Default catalogs, exact-match."""
    return load_default_catalogs(case_sensitive=True)


@pytest.fixture
def recording_reference(reference) -> RecordingReference:
    return RecordingReference(reference)


@pytest.fixture
def failing_reference():
    """Factory for a catalog store whose every lookup raises the given error."""
    return FailingReference


@pytest.fixture
def engine(reference) -> RiskClassificationEngine:
    """Engine over the default catalogs with default thresholds."""
    return RiskClassificationEngine(reference)


@pytest.fixture
def low_risk_individual() -> IndividualSubject:
    """Individual whose every factor is Low."""
    return IndividualSubject(
        nationality="Germany",
        country_of_residence="Germany",
        employment_type="Salaried",
        solicitation_channel="face_to_face",
    )


@pytest.fixture
def low_risk_entity() -> EntitySubject:
    """Entity whose every factor is Low."""
    return EntitySubject(
        nature_of_business="Manufacturing",
        country_of_registration="Sweden",
        expected_countries_of_trade=["Norway", "Denmark"],
        solicitation_channel="face_to_face",
        product_usage=["Savings Account"],
    )


@pytest.fixture
def small_reference() -> InMemoryReferenceData:
    """Minimal catalogs with one entry per band."""
    return InMemoryReferenceData({
        Catalog.COUNTRY: {
            "Lowland": RiskBand.LOW,
            "Midland": RiskBand.MEDIUM,
            "Highland": RiskBand.HIGH,
            "Forbidden": RiskBand.NO_GO,
        },
        Catalog.EMPLOYMENT: {
            "Clerk": RiskBand.LOW,
            "Broker": RiskBand.HIGH,
            "Bookmaker": RiskBand.AUTO_HIGH,
        },
        Catalog.PRODUCT: {
            "Savings": RiskBand.LOW,
            "Card": RiskBand.MEDIUM,
            "Locker": RiskBand.HIGH,
            "Crypto Desk": RiskBand.AUTO_HIGH,
        },
        Catalog.BUSINESS: {
            "Bakery": RiskBand.LOW,
            "Casino": RiskBand.AUTO_HIGH,
        },
    })
