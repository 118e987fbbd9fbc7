"""
Summary webhook router.

This router provides the POST /webhooks/summary-service-webhook endpoint that
turns a meeting transcript into stored metadata and an uploaded slide deck.
"""

import json
import logging

from fastapi import APIRouter, Depends, Request

from models.pipeline_models import SummaryResponse
from services.summary_pipeline import SummaryPipeline

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhooks", tags=["webhooks"])


def get_summary_pipeline() -> SummaryPipeline:
    """Build a fresh pipeline (and collaborators) for each request."""
    return SummaryPipeline()


@router.post("/summary-service-webhook", response_model=SummaryResponse)
async def handle_summary(
    request: Request,
    pipeline: SummaryPipeline = Depends(get_summary_pipeline)
):
    """
    Summarize a meeting transcript.

    The body is validated by the pipeline rather than by FastAPI so that a
    malformed request gets the same {success, error} response shape as any
    other failure.

    Returns:
        SummaryResponse with success flag and failure reason
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Webhook body is not valid JSON: error={e}")
        payload = None

    return await pipeline.run(payload)
