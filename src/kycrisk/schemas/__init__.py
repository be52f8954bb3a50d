"""
Pydantic schemas for risk assessment input.
"""

from kycrisk.schemas.subject import (
    AssessmentSubject,
    EntitySubject,
    GeographicalStatus,
    IndividualSubject,
    SolicitationChannel,
    parse_subject,
    subject_from_details,
)

__all__ = [
    "AssessmentSubject",
    "IndividualSubject",
    "EntitySubject",
    "SolicitationChannel",
    "GeographicalStatus",
    "parse_subject",
    "subject_from_details",
]
