"""
Risk bands and the numeric policy attached to them.

Low < Medium < High are ordered. AutoHigh and NoGo are sentinels produced
only by the escalation and stop phases; for weighting they count as High.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from kycrisk.config import Settings, settings


class RiskBand(str, Enum):
    """Risk classification band."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    AUTO_HIGH = "AutoHigh"
    NO_GO = "NoGo"

    @property
    def is_sentinel(self) -> bool:
        return self in (RiskBand.AUTO_HIGH, RiskBand.NO_GO)

    @property
    def effective(self) -> "RiskBand":
        """Band used for downstream handling (AutoHigh is handled as High)."""
        if self is RiskBand.AUTO_HIGH:
            return RiskBand.HIGH
        return self


BAND_WEIGHTS: dict[RiskBand, int] = {
    RiskBand.LOW: 1,
    RiskBand.MEDIUM: 2,
    RiskBand.HIGH: 3,
    RiskBand.AUTO_HIGH: 3,
    RiskBand.NO_GO: 3,
}


def band_weight(band: RiskBand) -> int:
    """Numeric weight of a band."""
    return BAND_WEIGHTS[band]


def band_from_weight(weight: float) -> RiskBand:
    """Map a numeric weight back onto the ordered bands."""
    if weight >= 3:
        return RiskBand.HIGH
    if weight >= 2:
        return RiskBand.MEDIUM
    return RiskBand.LOW


@dataclass(frozen=True)
class BandThresholds:
    """
    Half-open threshold ladder for composite scores.

    score < low -> Low; low <= score < medium -> Medium; score >= medium -> High
    """

    low: float = 1.5
    medium: float = 2.1

    def __post_init__(self):
        if self.low >= self.medium:
            raise ValueError(
                f"Low threshold ({self.low}) must be below medium threshold ({self.medium})"
            )

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "BandThresholds":
        config = config or settings
        return cls(low=config.low_threshold, medium=config.medium_threshold)

    def classify(self, score: float) -> RiskBand:
        """Classify a composite score."""
        if score < self.low:
            return RiskBand.LOW
        if score < self.medium:
            return RiskBand.MEDIUM
        return RiskBand.HIGH
