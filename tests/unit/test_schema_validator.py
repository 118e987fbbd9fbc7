"""
Unit Tests for the Schema Validator

Tests that validation is total and that every failing field is reported
with its path and a classified reason.
"""

import json

import pytest

from models.meeting_metadata import MeetingMetadata, PartialMeetingMetadata
from models.meeting_request import SummaryRequest
from models.pipeline_models import IssueReasonEnum
from services.schema_validator import (
    classify_error_type,
    parse_meeting_metadata,
    validate_meeting_metadata,
    validate_partial_meeting_metadata,
    validate_summary_request,
)


def issues_by_path(outcome):
    return {issue.path: issue.reason for issue in outcome.error.issues}


class TestClassifyErrorType:
    """Tests for mapping Pydantic error types onto issue reasons."""

    @pytest.mark.parametrize("error_type, reason", [
        ("missing", IssueReasonEnum.missing),
        ("enum", IssueReasonEnum.enum_mismatch),
        ("literal_error", IssueReasonEnum.enum_mismatch),
        ("json_invalid", IssueReasonEnum.invalid_json),
        ("string_type", IssueReasonEnum.wrong_type),
        ("float_type", IssueReasonEnum.wrong_type),
        ("bool_type", IssueReasonEnum.wrong_type),
        ("list_type", IssueReasonEnum.wrong_type),
        ("model_type", IssueReasonEnum.wrong_type),
        ("string_too_short", IssueReasonEnum.constraint),
        ("value_error", IssueReasonEnum.constraint),
    ])
    def test_classification(self, error_type, reason):
        assert classify_error_type(error_type) == reason


class TestValidateSummaryRequest:
    """Tests for validate_summary_request."""

    def test_valid_request(self, request_dict):
        outcome = validate_summary_request(request_dict)

        assert outcome.ok
        assert isinstance(outcome.value, SummaryRequest)
        assert outcome.error is None

    def test_missing_email_reported_as_missing(self, request_dict):
        del request_dict["email"]

        outcome = validate_summary_request(request_dict)

        assert not outcome.ok
        assert outcome.value is None
        assert issues_by_path(outcome) == {"email": IssueReasonEnum.missing}

    def test_malformed_email_reported_as_constraint(self, request_dict):
        request_dict["email"] = "not-an-email"

        outcome = validate_summary_request(request_dict)

        assert issues_by_path(outcome) == {"email": IssueReasonEnum.constraint}

    def test_nested_transcript_path(self, request_dict):
        request_dict["transcript"].append({"personName": "", "timestamp": "t1"})

        outcome = validate_summary_request(request_dict)

        assert issues_by_path(outcome) == {
            "transcript.1.personName": IssueReasonEnum.constraint,
            "transcript.1.text": IssueReasonEnum.missing,
        }

    @pytest.mark.parametrize("payload", [None, [], "body", 42, {"id": 1}])
    def test_never_raises_for_arbitrary_payloads(self, payload):
        outcome = validate_summary_request(payload)

        assert not outcome.ok
        assert outcome.error.message == "Invalid request"
        assert len(outcome.error.issues) > 0


class TestValidateMeetingMetadata:
    """Tests for strict metadata validation."""

    def test_valid_metadata(self, metadata_dict):
        outcome = validate_meeting_metadata(metadata_dict)

        assert outcome.ok
        assert isinstance(outcome.value, MeetingMetadata)

    def test_reports_every_failing_field(self, metadata_dict):
        del metadata_dict["meetingEfficiencyScore"]
        metadata_dict["actionItems"][1]["status"] = "blocked"
        metadata_dict["resourceLinks"][0]["type"] = "podcast"
        metadata_dict["moodGraph"]["aspects"][0]["score"] = "high"
        metadata_dict["questionTracker"][0]["answered"] = "yes"
        metadata_dict["sentimentOverTime"]["sentimentPoints"][0]["timestamp"] = ""

        outcome = validate_meeting_metadata(metadata_dict)

        assert issues_by_path(outcome) == {
            "meetingEfficiencyScore": IssueReasonEnum.missing,
            "actionItems.1.status": IssueReasonEnum.enum_mismatch,
            "resourceLinks.0.type": IssueReasonEnum.enum_mismatch,
            "moodGraph.aspects.0.score": IssueReasonEnum.wrong_type,
            "questionTracker.0.answered": IssueReasonEnum.wrong_type,
            "sentimentOverTime.sentimentPoints.0.timestamp": IssueReasonEnum.constraint,
        }

    def test_wrong_container_type(self, metadata_dict):
        metadata_dict["takeaways"] = "one takeaway"

        outcome = validate_meeting_metadata(metadata_dict)

        assert issues_by_path(outcome) == {"takeaways": IssueReasonEnum.wrong_type}


class TestValidatePartialMeetingMetadata:
    """Tests for partial metadata validation."""

    def test_empty_object_is_valid(self):
        outcome = validate_partial_meeting_metadata({})

        assert outcome.ok
        assert isinstance(outcome.value, PartialMeetingMetadata)

    def test_subset_is_valid(self, metadata_dict):
        outcome = validate_partial_meeting_metadata({
            "title": metadata_dict["title"],
            "actionItems": metadata_dict["actionItems"],
        })

        assert outcome.ok
        assert outcome.value.moodGraph is None
        assert len(outcome.value.actionItems) == 2

    def test_present_fields_keep_inner_constraints(self, metadata_dict):
        metadata_dict["actionItems"][0]["deadline"] = ""
        outcome = validate_partial_meeting_metadata({
            "actionItems": metadata_dict["actionItems"],
        })

        assert issues_by_path(outcome) == {
            "actionItems.0.deadline": IssueReasonEnum.constraint,
        }

    def test_strict_failure_may_be_partial_success(self, metadata_dict):
        del metadata_dict["timeline"]

        assert not validate_meeting_metadata(metadata_dict).ok
        assert validate_partial_meeting_metadata(metadata_dict).ok


class TestParseMeetingMetadata:
    """Tests for decoding and validating raw chatbot output."""

    def test_valid_json(self, metadata_dict):
        outcome = parse_meeting_metadata(json.dumps(metadata_dict))

        assert outcome.ok
        assert outcome.value.title == metadata_dict["title"]

    @pytest.mark.parametrize("raw", ["", "not json", "{\"title\": ", "```json\n{}\n```"])
    def test_invalid_json(self, raw):
        outcome = parse_meeting_metadata(raw)

        assert not outcome.ok
        assert issues_by_path(outcome) == {"": IssueReasonEnum.invalid_json}

    def test_json_array_is_wrong_type(self):
        outcome = parse_meeting_metadata("[]")

        assert issues_by_path(outcome) == {"": IssueReasonEnum.wrong_type}

    def test_missing_required_field(self, metadata_dict):
        del metadata_dict["meetingEfficiencyScore"]

        outcome = parse_meeting_metadata(json.dumps(metadata_dict))

        assert not outcome.ok
        assert issues_by_path(outcome) == {
            "meetingEfficiencyScore": IssueReasonEnum.missing,
        }

    @pytest.mark.parametrize("literal", ["NaN", "1e400", "-1e400"])
    def test_non_finite_number_is_constraint(self, metadata_dict, literal):
        metadata_dict["meetingEfficiencyScore"] = "__score__"
        raw = json.dumps(metadata_dict).replace('"__score__"', literal)

        outcome = parse_meeting_metadata(raw)

        assert not outcome.ok
        assert issues_by_path(outcome) == {
            "meetingEfficiencyScore": IssueReasonEnum.constraint,
        }

    def test_integers_stay_integers(self, metadata_dict):
        outcome = parse_meeting_metadata(json.dumps(metadata_dict))

        dumped = outcome.value.model_dump(mode="json")
        assert dumped["meetingEfficiencyScore"] == 85
        assert isinstance(dumped["meetingEfficiencyScore"], int)
        assert isinstance(dumped["participantEngagement"][0]["interventionCount"], int)

    def test_error_detail_serializes(self):
        outcome = parse_meeting_metadata("not json")

        dumped = outcome.error.model_dump(mode="json")

        assert dumped["message"] == "Invalid meeting metadata"
        assert dumped["issues"][0]["reason"] == "invalid_json"
