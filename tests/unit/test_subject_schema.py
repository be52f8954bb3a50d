"""
Unit tests for the assessment subject boundary.
"""

import pytest

from kycrisk.errors import InvalidInputError
from kycrisk.schemas.subject import (
    EntitySubject,
    IndividualSubject,
    parse_subject,
    subject_from_details,
)


class TestParseSubject:
    """Tests for validating raw payloads."""

    def test_individual_camel_case(self):
        subject = parse_subject({
            "submissionType": "individual",
            "nationality": "Germany",
            "countryOfResidence": "France",
            "employmentType": "Salaried",
            "geographicalStatus": "resident_foreign",
            "solicitationChannel": "face_to_face",
            "isPEP": True,
            "expectedCountries": ["Norway"],
            "productUsage": ["Debit Card"],
        })

        assert isinstance(subject, IndividualSubject)
        assert subject.country_of_residence == "France"
        assert subject.politically_exposed is True
        assert subject.expected_countries == ["Norway"]

    def test_entity_snake_case(self):
        subject = parse_subject({
            "submission_type": "entity",
            "nature_of_business": "Mining",
            "country_of_registration": "Canada",
            "expected_countries_of_trade": ["Brazil", "India"],
            "entity_pep": False,
        })

        assert isinstance(subject, EntitySubject)
        assert subject.expected_countries_of_trade == ["Brazil", "India"]
        assert subject.politically_exposed is False

    def test_other_variant_fields_ignored(self):
        """An individual never requires or keeps entity fields."""
        subject = parse_subject({
            "submissionType": "individual",
            "natureOfBusiness": "Gambling",
            "entityPEP": True,
        })

        assert isinstance(subject, IndividualSubject)
        assert not hasattr(subject, "nature_of_business")
        assert subject.politically_exposed is False

    def test_entity_pep_flag_not_read_from_individual_field(self):
        subject = parse_subject({"submissionType": "entity", "isPEP": True})

        assert subject.politically_exposed is False

    def test_missing_submission_type(self):
        with pytest.raises(InvalidInputError, match="submissionType"):
            parse_subject({"nationality": "Germany"})

    def test_unknown_submission_type(self):
        with pytest.raises(InvalidInputError) as exc_info:
            parse_subject({"submissionType": "trust"})

        assert exc_info.value.errors

    def test_malformed_field(self):
        with pytest.raises(InvalidInputError):
            parse_subject({"submissionType": "individual", "expectedCountries": [None]})

    def test_blank_submission_type_rejected(self):
        with pytest.raises(InvalidInputError):
            parse_subject({"submissionType": "", "nationality": "Germany"})

    def test_scalar_for_list_field_rejected(self):
        """A non-list value for a list field is a validation error, not a crash."""
        with pytest.raises(InvalidInputError) as exc_info:
            parse_subject({"submissionType": "individual", "expectedCountries": 5})

        assert exc_info.value.errors[0]["loc"][-1] == "expectedCountries"

    def test_single_string_for_list_field(self):
        subject = parse_subject({"submissionType": "entity", "expectedCountriesOfTrade": "Brazil"})

        assert subject.expected_countries_of_trade == ["Brazil"]

    def test_non_mapping_rejected(self):
        with pytest.raises(InvalidInputError):
            parse_subject("individual")

    def test_blank_values_are_absent(self):
        """Empty strings and blank list items count as not provided."""
        subject = parse_subject({
            "submissionType": "individual",
            "nationality": "",
            "employmentType": "   ",
            "productUsage": ["", "Debit Card"],
            "expectedCountries": None,
            "isPEP": None,
        })

        assert subject.nationality is None
        assert subject.employment_type is None
        assert subject.product_usage == ["Debit Card"]
        assert subject.expected_countries == []
        assert subject.politically_exposed is False

    def test_unrecognized_status_kept(self):
        """Unknown residency statuses reach the scoring rule unchanged."""
        subject = parse_subject({"submissionType": "individual", "geographicalStatus": "nomad"})

        assert subject.geographical_status == "nomad"

    def test_unscored_fields_accepted(self):
        subject = parse_subject({
            "submissionType": "individual",
            "pepType": "local_face",
            "adverseMedia": False,
        })

        assert subject.pep_type == "local_face"
        assert subject.adverse_media is False

    def test_subject_is_frozen(self):
        subject = IndividualSubject(nationality="Germany")

        with pytest.raises(Exception):
            subject.nationality = "France"


class TestCountries:
    """Tests for the jurisdiction list used by the stop check."""

    def test_individual_order(self):
        subject = IndividualSubject(
            nationality="Germany",
            country_of_residence="France",
            expected_countries=["Norway"],
        )

        assert subject.countries == ["Germany", "France", "Norway"]

    def test_entity_order(self):
        subject = EntitySubject(
            country_of_registration="Canada",
            expected_countries_of_trade=["Brazil"],
            expected_countries=["India"],
        )

        assert subject.countries == ["Canada", "Brazil", "India"]

    def test_absent_fields_skipped(self):
        assert IndividualSubject(country_of_residence="France").countries == ["France"]
        assert EntitySubject().countries == []


class TestSubjectFromDetails:
    """Tests for adapting submission detail sections."""

    def test_reads_enhanced_assessment_section(self):
        details = [
            {"section": "personal", "data": {"name": "A. Person"}},
            {"section": "enhanced_assessment", "data": {
                "submissionType": "individual",
                "nationality": "Sweden",
            }},
        ]

        subject = subject_from_details(details)

        assert isinstance(subject, IndividualSubject)
        assert subject.nationality == "Sweden"

    def test_falls_back_to_submission_type(self):
        details = [{"section": "enhanced_assessment", "data": {"natureOfBusiness": "Banking"}}]

        subject = subject_from_details(details, default_type="entity")

        assert isinstance(subject, EntitySubject)

    def test_section_type_wins(self):
        details = [{"section": "enhanced_assessment", "data": {"submissionType": "individual"}}]

        assert isinstance(subject_from_details(details, default_type="entity"), IndividualSubject)

    def test_stored_result_ignored(self):
        details = [{"section": "enhanced_assessment", "data": {
            "submissionType": "individual",
            "riskAssessment": {"finalRisk": "Low", "score": 1.0},
        }}]

        assert isinstance(subject_from_details(details), IndividualSubject)

    def test_missing_section(self):
        with pytest.raises(InvalidInputError):
            subject_from_details([{"section": "personal", "data": {}}], default_type="individual")

    def test_no_type_anywhere(self):
        details = [{"section": "enhanced_assessment", "data": {"nationality": "Sweden"}}]

        with pytest.raises(InvalidInputError):
            subject_from_details(details)

    def test_details_must_be_a_list(self):
        with pytest.raises(InvalidInputError):
            subject_from_details({"section": "enhanced_assessment"}, default_type="individual")

    def test_sections_must_be_mappings(self):
        with pytest.raises(InvalidInputError):
            subject_from_details(["enhanced_assessment"], default_type="individual")

    def test_section_data_must_be_a_mapping(self):
        details = [{"section": "enhanced_assessment", "data": ["Sweden"]}]

        with pytest.raises(InvalidInputError):
            subject_from_details(details, default_type="individual")
