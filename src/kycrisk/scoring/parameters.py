"""
Per-factor scoring rules.

Each evaluated factor becomes one ParameterScore. Multi-valued factors
(country and product lists) are first collapsed to their riskiest element.
"""

from dataclasses import asdict, dataclass
from typing import Any, Iterable, Optional

from kycrisk.config import settings
from kycrisk.schemas.subject import GeographicalStatus
from kycrisk.scoring.bands import RiskBand, band_from_weight, band_weight

# Literal mapping for residency status; anything else scores Medium
GEOGRAPHICAL_STATUS_BANDS = {
    GeographicalStatus.RESIDENT_NATIONAL: RiskBand.LOW,
    GeographicalStatus.RESIDENT_FOREIGN: RiskBand.LOW,
    GeographicalStatus.NON_RESIDENT_NATIONAL: RiskBand.MEDIUM,
    GeographicalStatus.NON_RESIDENT_FOREIGN: RiskBand.MEDIUM,
}


@dataclass(frozen=True)
class ParameterScore:
    """One evaluated risk factor."""

    name: str
    observed_value: str
    risk_band: RiskBand
    numeric_score: float
    weight: float = 1.0

    @property
    def reason(self) -> str:
        return f"{self.name}: {self.observed_value} ({self.risk_band.value} Risk)"

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["risk_band"] = self.risk_band.value
        return data


class ParameterScorer:
    """Converts a factor's band and weight into its numeric contribution."""

    def score(
        self,
        name: str,
        value: str | Iterable[str],
        band: RiskBand,
        weight: float = 1.0,
    ) -> ParameterScore:
        if not isinstance(value, str):
            value = ", ".join(value)
        return ParameterScore(
            name=name,
            observed_value=value,
            risk_band=band,
            numeric_score=band_weight(band) * weight,
            weight=weight,
        )


def solicitation_channel_band(channel: str, face_to_face: Optional[str] = None) -> RiskBand:
    """Face-to-face onboarding is Low risk; every other channel is Medium."""
    if channel == (face_to_face or settings.face_to_face_channel):
        return RiskBand.LOW
    return RiskBand.MEDIUM


def geographical_status_band(status: str) -> RiskBand:
    return GEOGRAPHICAL_STATUS_BANDS.get(status, RiskBand.MEDIUM)


def aggregate_bands(bands: Iterable[Optional[RiskBand]]) -> RiskBand:
    """
    Collapse the bands of a list factor into one.

    The riskiest element decides. Uncatalogued elements (None) are
    skipped; a list with no catalogued element aggregates to Low.
    """
    highest = 0
    for band in bands:
        if band is not None:
            highest = max(highest, band_weight(band))
    return band_from_weight(highest)
