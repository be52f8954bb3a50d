"""
Assessment subject schemas.

An onboarding record is either an individual customer or a corporate
entity, selected by `submissionType`. Each variant only carries its own
fields; fields of the other variant are ignored, never required.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from kycrisk.errors import InvalidInputError

ASSESSMENT_SECTION = "enhanced_assessment"


class SolicitationChannel(str, Enum):
    """Known solicitation channels."""

    FACE_TO_FACE = "face_to_face"
    NON_FACE_TO_FACE = "non_face_to_face"


class GeographicalStatus(str, Enum):
    """Residency status of an individual relative to the onboarding country."""

    RESIDENT_NATIONAL = "resident_national"
    RESIDENT_FOREIGN = "resident_foreign"
    NON_RESIDENT_NATIONAL = "non_resident_national"
    NON_RESIDENT_FOREIGN = "non_resident_foreign"


class _SubjectBase(BaseModel):
    """Fields common to both variants."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    # Free strings so unrecognized channels still reach the scoring rule
    solicitation_channel: Optional[str] = None
    expected_countries: list[str] = Field(default_factory=list)
    product_usage: list[str] = Field(default_factory=list)

    # submission_type is the union discriminator and must stay unvalidated here
    @field_validator(
        "solicitation_channel", "nationality", "geographical_status",
        "country_of_residence", "employment_type", "is_pep", "pep_type", "adverse_media",
        "nature_of_business", "country_of_registration", "entity_pep",
        "entity_geographical_status", "sanction_check",
        mode="before",
        check_fields=False,
    )
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        """Empty strings count as absent."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator(
        "expected_countries", "product_usage", "expected_countries_of_trade",
        mode="before",
        check_fields=False,
    )
    @classmethod
    def normalize_list(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, str):
            return [v] if v.strip() else []
        if not isinstance(v, (list, tuple)):
            # Left for the list[str] check to reject
            return v
        return [item for item in v if not (isinstance(item, str) and not item.strip())]


class IndividualSubject(_SubjectBase):
    """Individual customer onboarding record."""

    submission_type: Literal["individual"] = "individual"

    nationality: Optional[str] = None
    geographical_status: Optional[str] = None
    country_of_residence: Optional[str] = None
    employment_type: Optional[str] = None
    is_pep: Optional[bool] = Field(default=False, alias="isPEP")

    # Carried for the caller, not scored
    pep_type: Optional[str] = None
    adverse_media: Optional[bool] = None

    @property
    def countries(self) -> list[str]:
        """Every jurisdiction the individual is tied to, in check order."""
        countries = [c for c in (self.nationality, self.country_of_residence) if c]
        return countries + list(self.expected_countries)

    @property
    def politically_exposed(self) -> bool:
        return bool(self.is_pep)


class EntitySubject(_SubjectBase):
    """Corporate entity onboarding record."""

    submission_type: Literal["entity"] = "entity"

    nature_of_business: Optional[str] = None
    country_of_registration: Optional[str] = None
    expected_countries_of_trade: list[str] = Field(default_factory=list)
    entity_pep: Optional[bool] = Field(default=False, alias="entityPEP")

    # Carried for the caller, not scored
    entity_geographical_status: Optional[str] = None
    sanction_check: Optional[bool] = None

    @property
    def countries(self) -> list[str]:
        """Every jurisdiction the entity is tied to, in check order."""
        countries = [self.country_of_registration] if self.country_of_registration else []
        return countries + list(self.expected_countries_of_trade) + list(self.expected_countries)

    @property
    def politically_exposed(self) -> bool:
        return bool(self.entity_pep)


AssessmentSubject = Annotated[
    Union[IndividualSubject, EntitySubject],
    Field(discriminator="submission_type"),
]

_subject_adapter: TypeAdapter = TypeAdapter(AssessmentSubject)


def parse_subject(payload: Mapping[str, Any]) -> Union[IndividualSubject, EntitySubject]:
    """
    Validate a raw payload into an assessment subject.

    Accepts camelCase wire names or snake_case field names.

    Raises:
        InvalidInputError: missing/unknown submission type or malformed fields
    """
    if not isinstance(payload, Mapping):
        raise InvalidInputError(f"Assessment subject must be a mapping, got {type(payload).__name__}")

    data = dict(payload)
    # The discriminator is matched on the alias; accept the field name too
    if "submissionType" not in data and "submission_type" in data:
        data["submissionType"] = data.pop("submission_type")
    if "submissionType" not in data:
        raise InvalidInputError("Missing submissionType")

    try:
        return _subject_adapter.validate_python(data)
    except ValidationError as e:
        raise InvalidInputError(
            f"Invalid assessment subject: {e.error_count()} validation error(s)",
            errors=e.errors(include_url=False),
        ) from e


def subject_from_details(
    details: Sequence[Mapping[str, Any]],
    default_type: Optional[str] = None,
) -> Union[IndividualSubject, EntitySubject]:
    """
    Extract the assessment subject from submission detail sections.

    Reads the `enhanced_assessment` section; its own `submissionType`
    wins over the submission-level `default_type`.
    """
    if isinstance(details, (str, bytes, Mapping)) or not isinstance(details, Sequence):
        raise InvalidInputError(
            f"Submission details must be a list of sections, got {type(details).__name__}"
        )
    if not all(isinstance(d, Mapping) for d in details):
        raise InvalidInputError("Every submission detail section must be a mapping")

    section = next(
        (d for d in details if d.get("section") == ASSESSMENT_SECTION and d.get("data")),
        None,
    )
    if section is None:
        raise InvalidInputError(f"No {ASSESSMENT_SECTION} section found in submission details")
    if not isinstance(section["data"], Mapping):
        raise InvalidInputError(f"The {ASSESSMENT_SECTION} section data must be a mapping")

    data = dict(section["data"])
    if not data.get("submissionType") and not data.get("submission_type") and default_type:
        data["submissionType"] = default_type
    # Previously computed results stored alongside the answers are not input
    data.pop("riskAssessment", None)
    return parse_subject(data)
