"""
Risk scoring primitives.

Provides:
- Risk bands, band weights and composite thresholds
- Per-factor scoring and list aggregation rules

The classification pipeline itself lives in kycrisk.scoring.engine.
"""

from kycrisk.scoring.bands import BAND_WEIGHTS, BandThresholds, RiskBand, band_from_weight, band_weight
from kycrisk.scoring.parameters import (
    ParameterScore,
    ParameterScorer,
    aggregate_bands,
    geographical_status_band,
    solicitation_channel_band,
)

__all__ = [
    "RiskBand",
    "BAND_WEIGHTS",
    "BandThresholds",
    "band_weight",
    "band_from_weight",
    "ParameterScore",
    "ParameterScorer",
    "aggregate_bands",
    "geographical_status_band",
    "solicitation_channel_band",
]
