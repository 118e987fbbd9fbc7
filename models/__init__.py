"""Data models for the meeting summary webhook."""
from .meeting_request import SummaryRequest, TranscriptBlock
from .meeting_metadata import (
    MeetingMetadata,
    PartialMeetingMetadata,
    ActionItem,
    ActionItemStatusEnum,
    MoodAspect,
    MoodGraph,
    TimelineEvent,
    ParticipantEngagement,
    SentimentPoint,
    SentimentOverTime,
    Question,
    ResourceLink,
    ResourceTypeEnum,
)
from .pipeline_models import (
    FieldIssue,
    IssueReasonEnum,
    ValidationErrorDetail,
    ValidationOutcome,
    StageResult,
    PipelineStage,
    PipelineOutcome,
    SummaryResponse,
)

__all__ = [
    # Request models
    "SummaryRequest",
    "TranscriptBlock",
    # Metadata models
    "MeetingMetadata",
    "PartialMeetingMetadata",
    "ActionItem",
    "ActionItemStatusEnum",
    "MoodAspect",
    "MoodGraph",
    "TimelineEvent",
    "ParticipantEngagement",
    "SentimentPoint",
    "SentimentOverTime",
    "Question",
    "ResourceLink",
    "ResourceTypeEnum",
    # Pipeline results
    "FieldIssue",
    "IssueReasonEnum",
    "ValidationErrorDetail",
    "ValidationOutcome",
    "StageResult",
    "PipelineStage",
    "PipelineOutcome",
    "SummaryResponse",
]
