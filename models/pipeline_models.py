"""
Pipeline Result Models

This module defines the result types threaded through the summary pipeline:
validation outcomes with structured field issues, the pipeline stages, and
the response returned to the webhook caller.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, Field


T = TypeVar("T")


class IssueReasonEnum(str, Enum):
    """Why a single field failed validation."""
    missing = "missing"
    wrong_type = "wrong_type"
    constraint = "constraint"
    enum_mismatch = "enum_mismatch"
    invalid_json = "invalid_json"


class FieldIssue(BaseModel):
    """
    One failing field.

    Attributes:
        path: Dot-joined location of the field, list indexes included
              (e.g. "actionItems.0.status"). Empty for the document root.
        reason: Classified failure reason
        message: Human-readable detail from the validator
    """
    path: str = Field(..., description="Dot-joined field location")
    reason: IssueReasonEnum = Field(..., description="Classified failure reason")
    message: str = Field(..., description="Validator message")


class ValidationErrorDetail(BaseModel):
    """Structured validation error enumerating every failing field."""
    message: str = Field(..., description="Summary of the failure")
    issues: List[FieldIssue] = Field(
        default_factory=list,
        description="Every failing field with its reason"
    )


@dataclass
class ValidationOutcome(Generic[T]):
    """Success-or-failure result of a validation call.

    Exactly one of ``value`` and ``error`` is set.
    """
    value: Optional[T] = None
    error: Optional[ValidationErrorDetail] = None

    @property
    def ok(self) -> bool:
        return self.error is None


FailureReason = Union[str, ValidationErrorDetail]


@dataclass
class StageResult(Generic[T]):
    """Outcome of a single pipeline stage: a value or a failure reason."""
    value: Optional[T] = None
    error: Optional[FailureReason] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class PipelineStage(str, Enum):
    """States of the summary pipeline, in execution order."""
    received_request = "received_request"
    request_validated = "request_validated"
    ai_invoked = "ai_invoked"
    output_validated = "output_validated"
    persisted = "persisted"
    presentation_generated = "presentation_generated"
    uploaded = "uploaded"
    succeeded = "succeeded"
    failed = "failed"


class SummaryResponse(BaseModel):
    """
    Response body of the summary webhook.

    Attributes:
        success: Whether every pipeline stage completed
        error: None on success; a fixed message for request and upstream
               failures, or a structured error when the chatbot output
               failed validation
    """
    success: bool = Field(..., description="Whether the pipeline succeeded")
    error: Union[str, ValidationErrorDetail, None] = Field(
        default=None,
        description="Failure reason, null on success"
    )


@dataclass
class PipelineOutcome:
    """Terminal result of one pipeline run.

    Attributes:
        response: The response returned to the webhook caller
        stages: Stages reached, in order, ending in succeeded or failed
        failed_stage: Last stage reached before failing, None on success
    """
    response: SummaryResponse
    stages: List[PipelineStage] = field(default_factory=list)
    failed_stage: Optional[PipelineStage] = None
