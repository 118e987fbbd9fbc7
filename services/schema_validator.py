"""Schema validation for webhook requests and chatbot output.

Every function here is total: Pydantic validation errors are converted into a
ValidationOutcome carrying a ValidationErrorDetail instead of propagating.
"""
import logging
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from models.meeting_metadata import MeetingMetadata, PartialMeetingMetadata
from models.meeting_request import SummaryRequest
from models.pipeline_models import (
    FieldIssue,
    IssueReasonEnum,
    ValidationErrorDetail,
    ValidationOutcome,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

ENUM_ERROR_TYPES = {"enum", "literal_error"}
JSON_ERROR_TYPES = {"json_invalid", "json_type"}
TYPE_ERROR_TYPES = {
    "model_type",
    "model_attributes_type",
    "dict_type",
    "list_type",
    "string_type",
    "float_type",
    "float_parsing",
    "int_type",
    "int_parsing",
    "bool_type",
    "bool_parsing",
    "none_required",
}


def classify_error_type(error_type: str) -> IssueReasonEnum:
    """Map a Pydantic error type onto an issue reason."""
    if error_type == "missing":
        return IssueReasonEnum.missing
    if error_type in ENUM_ERROR_TYPES:
        return IssueReasonEnum.enum_mismatch
    if error_type in JSON_ERROR_TYPES:
        return IssueReasonEnum.invalid_json
    if error_type in TYPE_ERROR_TYPES:
        return IssueReasonEnum.wrong_type
    return IssueReasonEnum.constraint


def format_error_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc)


def to_error_detail(exc: ValidationError, message: str) -> ValidationErrorDetail:
    """Convert a Pydantic ValidationError into a ValidationErrorDetail.

    Args:
        exc: The validation error raised by Pydantic.
        message: Summary message for the detail.

    Returns:
        ValidationErrorDetail with one FieldIssue per failing field.
    """
    issues = [
        FieldIssue(
            path=format_error_path(error.get("loc", ())),
            reason=classify_error_type(error.get("type", "")),
            message=error.get("msg", ""),
        )
        for error in exc.errors()
    ]
    return ValidationErrorDetail(message=message, issues=issues)


def _validate(model: Type[M], payload: Any, message: str) -> ValidationOutcome[M]:
    try:
        return ValidationOutcome(value=model.model_validate(payload))
    except ValidationError as e:
        detail = to_error_detail(e, message)
        logger.debug(
            f"Validation failed: model={model.__name__}, issues={len(detail.issues)}"
        )
        return ValidationOutcome(error=detail)


def validate_summary_request(payload: Any) -> ValidationOutcome[SummaryRequest]:
    """Validate an inbound webhook body against the request shape."""
    return _validate(SummaryRequest, payload, "Invalid request")


def validate_meeting_metadata(payload: Any) -> ValidationOutcome[MeetingMetadata]:
    """Validate an already-decoded value against the strict metadata shape."""
    return _validate(MeetingMetadata, payload, "Invalid meeting metadata")


def validate_partial_meeting_metadata(
    payload: Any
) -> ValidationOutcome[PartialMeetingMetadata]:
    """Validate a value against the partial metadata shape.

    Absent top-level fields are accepted; present ones must be valid.
    """
    return _validate(PartialMeetingMetadata, payload, "Invalid meeting metadata")


def parse_meeting_metadata(raw_text: str) -> ValidationOutcome[MeetingMetadata]:
    """Decode chatbot output as JSON and validate it against the strict shape.

    A decoding failure is reported as a single invalid_json issue at the
    document root.

    Args:
        raw_text: Raw text returned by the chatbot.

    Returns:
        ValidationOutcome holding the MeetingMetadata or the error detail.
    """
    try:
        return ValidationOutcome(value=MeetingMetadata.model_validate_json(raw_text))
    except ValidationError as e:
        return ValidationOutcome(error=to_error_detail(e, "Invalid meeting metadata"))
