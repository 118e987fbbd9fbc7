"""Shared fixtures for the summary webhook tests."""

import os

import pytest

# main.py validates these at import time
os.environ.setdefault("BACKEND_API_URL", "https://backend.test")
os.environ.setdefault("OPENAI_API_KEY", "sk-test")


@pytest.fixture
def request_dict():
    """A valid webhook body for meeting m1."""
    return {
        "id": "m1",
        "email": "a@b.com",
        "startTime": "t0",
        "endTime": "t1",
        "participants": ["Alice"],
        "transcript": [
            {"personName": "Alice", "timestamp": "t0", "text": "hello"}
        ],
    }


@pytest.fixture
def metadata_dict():
    """A fully-populated metadata object satisfying the strict shape."""
    return {
        "title": "Weekly Project Sync",
        "shortDescription": "Status update, budget review and a new proposal.",
        "description": "The team reviewed project progress, noting that 75% of "
                       "tasks are complete and the upcoming milestone is on "
                       "track. A minor API integration issue is being worked "
                       "on. Marketing spend is slightly over budget and will be "
                       "covered from the contingency budget. A new marketing "
                       "campaign proposal was presented and everyone was asked "
                       "to send feedback by the end of the day. Client feedback "
                       "on the recent launch was very positive, and a new team "
                       "member was introduced.",
        "takeaways": [
            "Project is on track for the milestone",
            "Marketing overspend covered by contingency",
        ],
        "actionItems": [
            {
                "id": "a1",
                "description": "Update the budget",
                "assignee": "Dave",
                "deadline": "2024-08-09T17:00:00Z",
                "status": "pending",
            },
            {
                "id": "a2",
                "description": "Send proposal feedback",
                "assignee": "Everyone",
                "deadline": "2024-08-08T17:00:00Z",
                "status": "in_progress",
            },
        ],
        "moodGraph": {
            "aspects": [
                {"mood": "happiness", "score": 80},
                {"mood": "stress", "score": 20.5},
                {"mood": "engagement", "score": 75},
            ],
            "timestamp": "2024-08-08T09:00:00Z",
        },
        "timeline": [
            {
                "startTime": "2024-08-08T09:00:00Z",
                "endTime": "2024-08-08T09:06:00Z",
                "topic": "Project status",
                "speaker": "Bob",
            }
        ],
        "participantEngagement": [
            {
                "participantId": "Alice",
                "speakingTime": 300,
                "interventionCount": 12,
                "engagementScore": 90,
            }
        ],
        "sentimentOverTime": {
            "overallSentiment": 0.8,
            "sentimentPoints": [
                {"timestamp": "2024-08-08T09:00:00Z", "sentiment": 0.7}
            ],
        },
        "questionTracker": [
            {
                "id": "q1",
                "text": "Any blockers?",
                "askedBy": "Charlie",
                "timestamp": "2024-08-08T09:04:00Z",
                "answered": True,
            }
        ],
        "resourceLinks": [
            {
                "id": "r1",
                "url": "https://example.com/proposal",
                "title": "Campaign proposal",
                "type": "document",
                "mentionedAt": "2024-08-08T09:11:00Z",
            }
        ],
        "meetingEfficiencyScore": 85,
    }
