"""
Risk classification engine for onboarding records.

Evaluation is a strict three-phase pipeline with early exit:

1. Stop check: any NoGo jurisdiction disqualifies the subject outright.
2. Escalation check: PEP status or an AutoHigh occupation, business or
   product escalates to AutoHigh. Every trigger is reported.
3. Weighted score: the mean of the per-factor band weights, classified
   against the threshold ladder.

The engine keeps no state between assessments and reads the reference
catalogs afresh on every call.
"""

import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, Mapping, Optional, Union

from kycrisk.errors import InvalidInputError
from kycrisk.reference.lookup import ReferenceDataLookup
from kycrisk.schemas.subject import EntitySubject, IndividualSubject, parse_subject
from kycrisk.scoring.bands import BandThresholds, RiskBand
from kycrisk.scoring.parameters import (
    ParameterScore,
    ParameterScorer,
    aggregate_bands,
    geographical_status_band,
    solicitation_channel_band,
)

logger = logging.getLogger(__name__)

Subject = Union[IndividualSubject, EntitySubject]

# Score reported for stop and escalation outcomes
MAX_SCORE = 100.0


class AssessmentMethod(str, Enum):
    """Pipeline phase that produced the result."""

    IMMEDIATE_STOP = "immediate_stop"
    AUTO_HIGH = "auto_high"
    WEIGHTED_AVERAGE = "weighted_average"


@dataclass(frozen=True)
class AssessmentResult:
    """Complete risk classification of one subject."""

    final_band: RiskBand
    numeric_score: float
    method: AssessmentMethod
    reasons: tuple[str, ...] = ()
    stop_reasons: Optional[tuple[str, ...]] = None
    parameter_scores: tuple[ParameterScore, ...] = field(default_factory=tuple)

    @property
    def justification(self) -> str:
        """Reasons as a single line for the case record."""
        return "; ".join(self.reasons)

    @property
    def is_escalated(self) -> bool:
        return self.final_band.is_sentinel

    def to_dict(self) -> dict[str, Any]:
        return {
            "final_band": self.final_band.value,
            "numeric_score": self.numeric_score,
            "method": self.method.value,
            "reasons": list(self.reasons),
            "stop_reasons": list(self.stop_reasons) if self.stop_reasons is not None else None,
            "parameter_scores": [p.to_dict() for p in self.parameter_scores],
        }


class RiskClassificationEngine:
    """
    Classifies onboarding records into Low, Medium, High, AutoHigh or NoGo.

    Factors considered in the weighted phase:
    - Solicitation channel (both)
    - Nationality, geographical status, residence, employment (individual)
    - Nature of business, registration, countries of trade (entity)
    - Expected transaction countries and product usage (both)
    """

    def __init__(
        self,
        reference: ReferenceDataLookup,
        thresholds: Optional[BandThresholds] = None,
        factor_weight: float = 1.0,
        face_to_face_channel: Optional[str] = None,
    ):
        self.reference = reference
        self.thresholds = thresholds or BandThresholds.from_settings()
        self.factor_weight = factor_weight
        self.face_to_face_channel = face_to_face_channel
        self.scorer = ParameterScorer()

    async def assess(self, subject: Subject | Mapping[str, Any]) -> AssessmentResult:
        """
        Classify a subject.

        Accepts a subject model or a raw payload keyed by submissionType.

        Raises:
            InvalidInputError: the subject is not a recognized variant
            LookupFailureError: a reference catalog could not be read
        """
        subject = self._coerce(subject)
        logger.debug(f"Starting risk assessment for {subject.submission_type} subject")

        stop_reasons = await self._check_stop_conditions(subject)
        if stop_reasons:
            logger.info(f"Assessment stopped: {len(stop_reasons)} NoGo jurisdiction(s)")
            return AssessmentResult(
                final_band=RiskBand.NO_GO,
                numeric_score=MAX_SCORE,
                method=AssessmentMethod.IMMEDIATE_STOP,
                reasons=tuple(stop_reasons),
                stop_reasons=tuple(stop_reasons),
            )

        escalation_reasons = await self._check_escalation_conditions(subject)
        if escalation_reasons:
            logger.info(f"Assessment escalated: {'; '.join(escalation_reasons)}")
            return AssessmentResult(
                final_band=RiskBand.AUTO_HIGH,
                numeric_score=MAX_SCORE,
                method=AssessmentMethod.AUTO_HIGH,
                reasons=tuple(escalation_reasons),
            )

        parameter_scores = await self._score_parameters(subject)
        composite = self.composite_score(parameter_scores)
        band = self.thresholds.classify(composite)

        return AssessmentResult(
            final_band=band,
            numeric_score=_round_score(composite),
            method=AssessmentMethod.WEIGHTED_AVERAGE,
            reasons=tuple(p.reason for p in parameter_scores),
            parameter_scores=tuple(parameter_scores),
        )

    def _coerce(self, subject: Any) -> Subject:
        if isinstance(subject, (IndividualSubject, EntitySubject)):
            return subject
        if isinstance(subject, Mapping):
            return parse_subject(subject)
        raise InvalidInputError(f"Unsupported assessment subject: {type(subject).__name__}")

    async def _check_stop_conditions(self, subject: Subject) -> list[str]:
        """Reasons for every NoGo jurisdiction the subject is tied to."""
        reasons = []
        for country in subject.countries:
            if await self.reference.country_risk(country) == RiskBand.NO_GO:
                reasons.append(f"NoGo country detected: {country}")
        return reasons

    async def _check_escalation_conditions(self, subject: Subject) -> list[str]:
        """Reasons for every automatic escalation trigger."""
        reasons = []

        if subject.politically_exposed:
            reasons.append("Customer is a Politically Exposed Person (PEP)")

        if isinstance(subject, IndividualSubject) and subject.employment_type:
            band = await self.reference.employment_risk(subject.employment_type)
            if band == RiskBand.AUTO_HIGH:
                reasons.append(f"Auto High Risk employment: {subject.employment_type}")

        if isinstance(subject, EntitySubject) and subject.nature_of_business:
            band = await self.reference.business_risk(subject.nature_of_business)
            if band == RiskBand.AUTO_HIGH:
                reasons.append(f"Auto High Risk business: {subject.nature_of_business}")

        for product in subject.product_usage:
            if await self.reference.product_risk(product) == RiskBand.AUTO_HIGH:
                reasons.append(f"Auto High Risk product: {product}")

        return reasons

    async def _score_parameters(self, subject: Subject) -> list[ParameterScore]:
        """Evaluate every factor present on the subject, in reporting order."""
        scores: list[ParameterScore] = []

        def add(name: str, value, band: Optional[RiskBand]) -> None:
            if band is None:
                logger.debug(f"No reference entry for {name}: {value}; factor skipped")
                return
            scores.append(self.scorer.score(name, value, band, weight=self.factor_weight))

        if subject.solicitation_channel:
            add(
                "Solicitation Channel",
                subject.solicitation_channel,
                solicitation_channel_band(subject.solicitation_channel, self.face_to_face_channel),
            )

        if isinstance(subject, IndividualSubject):
            if subject.nationality:
                add("Nationality", subject.nationality,
                    await self.reference.country_risk(subject.nationality))
            if subject.geographical_status:
                add("Geographical Status", subject.geographical_status,
                    geographical_status_band(subject.geographical_status))
            if subject.country_of_residence:
                add("Country of Residence", subject.country_of_residence,
                    await self.reference.country_risk(subject.country_of_residence))
            if subject.employment_type:
                add("Employment Type", subject.employment_type,
                    await self.reference.employment_risk(subject.employment_type))

        if isinstance(subject, EntitySubject):
            if subject.nature_of_business:
                add("Nature of Business", subject.nature_of_business,
                    await self.reference.business_risk(subject.nature_of_business))
            if subject.country_of_registration:
                add("Country of Registration", subject.country_of_registration,
                    await self.reference.country_risk(subject.country_of_registration))
            if subject.expected_countries_of_trade:
                add("Expected Countries of Trade", subject.expected_countries_of_trade,
                    await self._aggregate_country_risk(subject.expected_countries_of_trade))

        if subject.expected_countries:
            add("Expected Countries", subject.expected_countries,
                await self._aggregate_country_risk(subject.expected_countries))

        if subject.product_usage:
            add("Product Usage", subject.product_usage,
                await self._aggregate_product_risk(subject.product_usage))

        return scores

    async def _aggregate_country_risk(self, countries: list[str]) -> RiskBand:
        return aggregate_bands([await self.reference.country_risk(c) for c in countries])

    async def _aggregate_product_risk(self, products: list[str]) -> RiskBand:
        return aggregate_bands([await self.reference.product_risk(p) for p in products])

    @staticmethod
    def composite_score(parameter_scores: list[ParameterScore]) -> float:
        """Weighted mean of factor scores; 0 when nothing was evaluated."""
        total_weight = sum(p.weight for p in parameter_scores)
        total_score = sum(p.numeric_score for p in parameter_scores)
        composite = total_score / total_weight if total_weight > 0 else 0.0

        logger.debug(
            f"Risk calculation summary: factors={len(parameter_scores)} "
            f"total_score={total_score} total_weight={total_weight} composite={composite:.4f}"
        )
        return composite


def _round_score(score: float) -> float:
    """Round half-up to 2 decimals."""
    return float(Decimal(str(score)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
