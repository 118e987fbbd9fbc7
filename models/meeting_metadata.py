"""Pydantic models for AI-produced meeting metadata.

The chatbot is asked to return one JSON object in this shape. Two top-level
models share the same leaf models:

- MeetingMetadata: every field required, the shape persisted to the backend.
- PartialMeetingMetadata: every top-level field optional, but a field that is
  present must satisfy the same constraints as in the strict model.

Field names keep the camelCase wire format used by the backend API.
"""
from enum import Enum
import math
from typing import Annotated, Any, List, Optional, Union

from pydantic import BaseModel, Field, PlainValidator, StrictBool, WithJsonSchema
from pydantic_core import PydanticCustomError

from models.meeting_request import NonEmptyStr


def finite_number(v: Any) -> Union[int, float]:
    """Accept a JSON number as given. Integers stay integers."""
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise PydanticCustomError("float_type", "Input should be a valid number")
    if isinstance(v, float) and not math.isfinite(v):
        raise PydanticCustomError("finite_number", "Input should be a finite number")
    return v


Number = Annotated[
    Union[int, float],
    PlainValidator(finite_number),
    WithJsonSchema({"type": "number"}),
]


class ActionItemStatusEnum(str, Enum):
    """Lifecycle status of an action item."""
    pending = "pending"
    in_progress = "in_progress"
    completed = "completed"


class ResourceTypeEnum(str, Enum):
    """Kinds of resources mentioned during a meeting."""
    document = "document"
    website = "website"
    video = "video"
    other = "other"


class ActionItem(BaseModel):
    """An actionable task agreed during the meeting."""
    id: NonEmptyStr = Field(description="A unique identifier for the action item")
    description: str = Field(description="A description of the action item")
    assignee: str = Field(description="The person assigned to the action item")
    deadline: NonEmptyStr = Field(
        description="The deadline for the action item, ISO-8601"
    )
    status: ActionItemStatusEnum = Field(
        description="Current status: pending, in_progress or completed"
    )


class MoodAspect(BaseModel):
    mood: str = Field(description="The mood being tracked, e.g. 'stress'")
    score: Number = Field(description="Intensity of the mood, e.g. 0-100")


class MoodGraph(BaseModel):
    """Overall mood of the meeting broken down by aspect."""
    aspects: List[MoodAspect] = Field(description="Tracked mood aspects")
    timestamp: NonEmptyStr = Field(
        description="The timestamp associated with the mood data"
    )


class TimelineEvent(BaseModel):
    startTime: NonEmptyStr = Field(description="Start of the timeline event")
    endTime: NonEmptyStr = Field(description="End of the timeline event")
    topic: str = Field(description="Topic of the timeline event")
    speaker: str = Field(description="Speaker or presenter of the event")


class ParticipantEngagement(BaseModel):
    participantId: str = Field(description="Identifier of the participant")
    speakingTime: Number = Field(description="Total time spent speaking")
    interventionCount: Number = Field(
        description="Number of times the participant spoke up"
    )
    engagementScore: Number = Field(description="Overall engagement score")


class SentimentPoint(BaseModel):
    timestamp: NonEmptyStr = Field(
        description="The timestamp associated with the sentiment data"
    )
    sentiment: Number = Field(description="Sentiment score at that timestamp")


class SentimentOverTime(BaseModel):
    overallSentiment: Number = Field(
        description="Overall sentiment score for the meeting"
    )
    sentimentPoints: List[SentimentPoint] = Field(
        description="Sentiment samples across the meeting"
    )


class Question(BaseModel):
    """A question asked during the meeting."""
    id: str = Field(description="A unique identifier for the question")
    text: str = Field(description="The text of the question")
    askedBy: str = Field(description="The participant who asked the question")
    timestamp: NonEmptyStr = Field(
        description="The timestamp when the question was asked"
    )
    answered: StrictBool = Field(
        description="Whether the question was answered"
    )


class ResourceLink(BaseModel):
    """A resource mentioned during the meeting."""
    id: str = Field(description="A unique identifier for the resource link")
    url: str = Field(description="The URL of the resource")
    title: str = Field(description="Title or description of the resource")
    type: ResourceTypeEnum = Field(
        description="Resource type: document, website, video or other"
    )
    mentionedAt: NonEmptyStr = Field(
        description="The timestamp when the resource was mentioned"
    )


class MeetingMetadata(BaseModel):
    """Complete structured summary of a meeting.

    Every field is required. This is the shape validated on the chatbot
    response and forwarded to the backend and the presentation renderer.
    """
    title: str = Field(description="A short, descriptive title for the meeting")
    shortDescription: str = Field(description="A brief summary of the meeting")
    description: str = Field(
        description="A detailed description of the meeting, at least 400 characters"
    )
    takeaways: List[str] = Field(description="Key takeaways from the meeting")
    actionItems: List[ActionItem] = Field(description="Action items agreed")
    moodGraph: MoodGraph = Field(description="Mood of the meeting by aspect")
    timeline: List[TimelineEvent] = Field(description="Meeting timeline")
    participantEngagement: List[ParticipantEngagement] = Field(
        description="Engagement statistics per participant"
    )
    sentimentOverTime: SentimentOverTime = Field(
        description="Sentiment evolution across the meeting"
    )
    questionTracker: List[Question] = Field(description="Questions asked")
    resourceLinks: List[ResourceLink] = Field(description="Resources mentioned")
    meetingEfficiencyScore: Number = Field(
        description="Overall efficiency score of the meeting"
    )


class PartialMeetingMetadata(BaseModel):
    """Meeting metadata where every top-level field may be omitted.

    Nested values reuse the strict leaf models, so a field that is present
    is held to the same constraints as in MeetingMetadata.
    """
    title: Optional[str] = None
    shortDescription: Optional[str] = None
    description: Optional[str] = None
    takeaways: Optional[List[str]] = None
    actionItems: Optional[List[ActionItem]] = None
    moodGraph: Optional[MoodGraph] = None
    timeline: Optional[List[TimelineEvent]] = None
    participantEngagement: Optional[List[ParticipantEngagement]] = None
    sentimentOverTime: Optional[SentimentOverTime] = None
    questionTracker: Optional[List[Question]] = None
    resourceLinks: Optional[List[ResourceLink]] = None
    meetingEfficiencyScore: Optional[Number] = None
