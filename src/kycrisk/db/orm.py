"""
SQLAlchemy models for the reference risk catalogs.

One table per catalog, keyed by the catalog's natural key. The engine only
reads these; maintenance happens through the surrounding system.
"""

from datetime import datetime

from sqlalchemy import DateTime, Enum as SQLEnum, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from kycrisk.scoring.bands import RiskBand


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class RiskBandMixin:
    """Columns shared by every catalog table."""

    risk_band: Mapped[RiskBand] = mapped_column(
        SQLEnum(RiskBand, name="risk_band", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )


class CountryRisk(RiskBandMixin, Base):
    """Risk band per country name."""

    __tablename__ = "country_risk"

    country: Mapped[str] = mapped_column(String(255), primary_key=True)


class EmploymentRisk(RiskBandMixin, Base):
    """Risk band per occupation label."""

    __tablename__ = "employment_risk"

    occupation: Mapped[str] = mapped_column(String(255), primary_key=True)


class ProductRisk(RiskBandMixin, Base):
    """Risk band per product name."""

    __tablename__ = "product_risk"

    product: Mapped[str] = mapped_column(String(255), primary_key=True)


class BusinessNatureRisk(RiskBandMixin, Base):
    """Risk band per nature-of-business label."""

    __tablename__ = "business_nature_risk"

    business: Mapped[str] = mapped_column(String(255), primary_key=True)
