"""Prompt construction for meeting summarization.

The prompt restates the transcript block format, embeds the transcript as
JSON and spells out the exact metadata object the chatbot must return.
"""
import json
from typing import List

from models.meeting_request import TranscriptBlock


MOOD_ASPECT_EXAMPLE = """      {
        "mood": "the aspect or type of mood being tracked e.g. 'happiness', 'stress', 'engagement', 'confusion'",
        "score": "the score or intensity of that mood e.g. 0-100 number"
      }"""

METADATA_SHAPE = """{
  "title": "a short, descriptive title for the meeting",
  "shortDescription": "a brief summary of the meeting",
  "description": "a longer, more detailed description of the meeting, must be at least 400 characters",
  "takeaways": "a list of key takeaways or insights from the meeting",
  "actionItems": [
    {
      "id": "a unique identifier for the action item",
      "description": "a description of the action item",
      "assignee": "the person assigned to the action item",
      "deadline": "the deadline for the action item, ISOString format",
      "status": "the current status of the action item ('pending', 'in_progress', 'completed')"
    }
  ],
  "moodGraph": {
    "aspects": [
%(aspects)s
    ],
    "timestamp": "the timestamp associated with the mood data"
  },
  "timeline": [
    {
      "startTime": "the start time of the timeline event",
      "endTime": "the end time of the timeline event",
      "topic": "the topic or subject of the timeline event",
      "speaker": "the speaker or presenter of the timeline event"
    }
  ],
  "participantEngagement": [
    {
      "participantId": "the unique identifier of the participant",
      "speakingTime": "the total time the participant spent speaking - number",
      "interventionCount": "the number of times the participant intervened or spoke up - number",
      "engagementScore": "an overall engagement score for the participant - number"
    }
  ],
  "sentimentOverTime": {
    "overallSentiment": "the overall sentiment score for the meeting - number",
    "sentimentPoints": [
      {
        "timestamp": "the timestamp associated with the sentiment data",
        "sentiment": "the sentiment score at that timestamp - number"
      }
    ]
  },
  "questionTracker": [
    {
      "id": "a unique identifier for the question",
      "text": "the text of the question",
      "askedBy": "the participant who asked the question",
      "timestamp": "the timestamp when the question was asked",
      "answered": "a boolean indicating whether the question was answered"
    }
  ],
  "resourceLinks": [
    {
      "id": "a unique identifier for the resource link",
      "url": "the URL of the resource",
      "title": "the title or description of the resource",
      "type": "the type of resource ('document', 'website', 'video', 'other')",
      "mentionedAt": "the timestamp when the resource was mentioned"
    }
  ],
  "meetingEfficiencyScore": "an overall score representing the efficiency of the meeting - number"
}""" % {"aspects": ",\n".join([MOOD_ASPECT_EXAMPLE] * 3)}

INPUT_SHAPE = """{
  "transcript": [
    {
      "personName": "string",
      "timestamp": "string",
      "text": "string"
    }
  ]
}"""

PROMPT_TEMPLATE = """You are tasked with analyzing a provided meeting transcript and generating a summary in the specified format. The transcript is provided as an array of objects, where each object represents a block of text spoken by a participant. Each block has the following properties:

- `personName`: the name of the participant who spoke the text
- `timestamp`: the timestamp of when the text was spoken
- `text`: the actual text spoken by the participant

{transcript}

Your goal is to process this transcript and output a meeting metadata object that includes the following properties:
All Date and Time values should be in ISOString format. ALL THE SCORES SHOULD BE NUMBERS.

```json
{shape}
```

The input for this task is the meeting transcript, provided as an array of objects with the following structure:

```json
{input_shape}
```

Your task is to process this transcript and generate the meeting metadata object as described above. NEVER INCLUDE ANY PERSONAL INFORMATION, NEVER ADD INFORMATION THAT ISNT IN THE TRANSCRIPT, AND NEVER INCLUDE ANYTHING THAT COULD BE CONSIDERED OFFENSIVE OR INAPPROPRIATE. The output should be a JSON object that adheres to the specified format. Good luck!
"""


def serialize_transcript(transcript: List[TranscriptBlock]) -> str:
    """Render transcript blocks as pretty-printed JSON, preserving order."""
    return json.dumps(
        [block.model_dump() for block in transcript],
        indent=2,
        ensure_ascii=False
    )


def build_summary_prompt(transcript: List[TranscriptBlock]) -> str:
    """Build the summarization prompt for a transcript.

    Args:
        transcript: Chronological transcript blocks. May be empty.

    Returns:
        The full instruction string sent to the chatbot.
    """
    return PROMPT_TEMPLATE.format(
        transcript=serialize_transcript(transcript),
        shape=METADATA_SHAPE,
        input_shape=INPUT_SHAPE,
    )
