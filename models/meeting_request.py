"""
Summary Webhook Request Models

This module defines the Pydantic models for the inbound summary webhook.
Field names follow the camelCase wire format sent by the meeting recorder.
"""

from typing import Annotated, List

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator


NonEmptyStr = Annotated[str, Field(min_length=1)]


class TranscriptBlock(BaseModel):
    """
    A single utterance in a meeting transcript.

    Attributes:
        personName: Name of the participant who spoke
        timestamp: When the text was spoken (ISO-8601 by convention)
        text: What was said
    """
    personName: NonEmptyStr = Field(
        ...,
        description="Name of the participant who spoke the text"
    )
    timestamp: NonEmptyStr = Field(
        ...,
        description="Timestamp of when the text was spoken"
    )
    text: NonEmptyStr = Field(
        ...,
        description="The actual text spoken by the participant"
    )


class SummaryRequest(BaseModel):
    """
    Request body for the summary webhook.

    The transcript is ordered chronologically; the order is preserved
    when it is embedded in the summary prompt.
    """
    id: NonEmptyStr = Field(
        ...,
        description="Meeting identifier"
    )
    email: str = Field(
        ...,
        description="Email of the meeting owner"
    )
    startTime: NonEmptyStr = Field(
        ...,
        description="Meeting start time"
    )
    endTime: NonEmptyStr = Field(
        ...,
        description="Meeting end time"
    )
    participants: List[NonEmptyStr] = Field(
        ...,
        description="Names of the meeting participants"
    )
    transcript: List[TranscriptBlock] = Field(
        ...,
        description="Chronological list of transcript blocks"
    )

    @field_validator('email')
    @classmethod
    def email_must_be_well_formed(cls, v: str) -> str:
        """Check the address syntax but keep the caller's spelling."""
        try:
            validate_email(v, check_deliverability=False, test_environment=True)
        except EmailNotValidError as e:
            raise ValueError(f"value is not a valid email address: {e}") from e
        return v
