"""Summary pipeline turning a meeting transcript into stored metadata and a deck.

Stages run strictly in order and each one returns a StageResult:

    received_request -> request_validated -> ai_invoked -> output_validated
    -> persisted -> presentation_generated -> uploaded -> succeeded

The first failing stage ends the run with a failed outcome. Nothing is retried
and nothing already done is undone: a meeting stored before a failed upload
stays stored.
"""
import logging
from typing import Any, List, Optional

from models.meeting_metadata import MeetingMetadata
from models.meeting_request import SummaryRequest
from models.pipeline_models import (
    FailureReason,
    PipelineOutcome,
    PipelineStage,
    StageResult,
    SummaryResponse,
)
from services.backend_client import BackendClient, BackendServiceError
from services.chatbot_service import (
    DEFAULT_TEMPERATURE,
    JSON_OBJECT_FORMAT,
    ChatbotService,
)
from services.presentation_service import PresentationService
from services.prompt_builder import build_summary_prompt
from services.schema_validator import parse_meeting_metadata, validate_summary_request

logger = logging.getLogger(__name__)

INVALID_REQUEST = "Invalid request"
CHATBOT_FAILED = "Failed to generate meeting summary"
METADATA_UPDATE_FAILED = "Failed to update meeting metadata"
PRESENTATION_FAILED = "Failed to generate presentation"
UPLOAD_FAILED = "Failed to upload presentation"


def presentation_artifact_name(meeting_id: str) -> str:
    return f"presentation-{meeting_id}.pptx"


class SummaryPipeline:
    """Runs one summary request through every stage.

    Collaborators are injected so each webhook call gets its own instances;
    the pipeline keeps no per-run state on self.
    """

    def __init__(
        self,
        chatbot: Optional[ChatbotService] = None,
        backend: Optional[BackendClient] = None,
        presenter: Optional[PresentationService] = None
    ):
        self.chatbot = chatbot or ChatbotService()
        self.backend = backend or BackendClient()
        self.presenter = presenter or PresentationService()

    async def run(self, payload: Any) -> SummaryResponse:
        """Process a webhook payload and return the caller-facing response."""
        outcome = await self.process(payload)
        return outcome.response

    async def process(self, payload: Any) -> PipelineOutcome:
        """Process a webhook payload through every stage.

        Args:
            payload: Decoded JSON body of the webhook request

        Returns:
            PipelineOutcome with the response and the stages reached
        """
        stages: List[PipelineStage] = [PipelineStage.received_request]

        request_outcome = validate_summary_request(payload)
        if not request_outcome.ok:
            logger.warning(
                f"Rejected summary request: issues="
                f"{[issue.path for issue in request_outcome.error.issues]}"
            )
            return self._failed(stages, INVALID_REQUEST)
        request = request_outcome.value
        stages.append(PipelineStage.request_validated)

        logger.info(
            f"Summary pipeline started: meeting_id={request.id}, "
            f"transcript_blocks={len(request.transcript)}"
        )

        raw = await self._invoke_chatbot(request)
        if not raw.ok:
            return self._failed(stages, raw.error)
        stages.append(PipelineStage.ai_invoked)

        metadata_outcome = parse_meeting_metadata(raw.value)
        if not metadata_outcome.ok:
            logger.warning(
                f"Summary bot output failed validation: meeting_id={request.id}, "
                f"issues={len(metadata_outcome.error.issues)}"
            )
            return self._failed(stages, metadata_outcome.error)
        metadata = metadata_outcome.value
        stages.append(PipelineStage.output_validated)

        persisted = await self._persist(request, metadata)
        if not persisted.ok:
            return self._failed(stages, persisted.error)
        stages.append(PipelineStage.persisted)

        deck = self._render(request, metadata)
        if not deck.ok:
            self._log_orphaned_record(request, PipelineStage.presentation_generated)
            return self._failed(stages, deck.error)
        stages.append(PipelineStage.presentation_generated)

        uploaded = await self._upload(request, deck.value)
        if not uploaded.ok:
            self._log_orphaned_record(request, PipelineStage.uploaded)
            return self._failed(stages, uploaded.error)
        stages.append(PipelineStage.uploaded)

        stages.append(PipelineStage.succeeded)
        logger.info(f"Summary pipeline complete: meeting_id={request.id}")
        return PipelineOutcome(
            response=SummaryResponse(success=True, error=None),
            stages=stages
        )

    async def _invoke_chatbot(self, request: SummaryRequest) -> StageResult[str]:
        prompt = build_summary_prompt(request.transcript)
        try:
            text = await self.chatbot.ask(
                prompt,
                response_format=JSON_OBJECT_FORMAT,
                temperature=DEFAULT_TEMPERATURE
            )
        except Exception as e:
            logger.error(
                f"Summary bot invocation failed: meeting_id={request.id}, error={e}",
                exc_info=True
            )
            return StageResult(error=CHATBOT_FAILED)
        return StageResult(value=text if text is not None else "")

    async def _persist(
        self,
        request: SummaryRequest,
        metadata: MeetingMetadata
    ) -> StageResult[None]:
        try:
            await self.backend.update_meeting_metadata(request.id, request.email, metadata)
        except BackendServiceError as e:
            logger.error(f"Metadata persistence failed: meeting_id={request.id}, error={e}")
            return StageResult(error=METADATA_UPDATE_FAILED)
        return StageResult()

    def _render(
        self,
        request: SummaryRequest,
        metadata: MeetingMetadata
    ) -> StageResult[bytes]:
        try:
            return StageResult(
                value=self.presenter.generate_presentation(metadata, request.id)
            )
        except Exception as e:
            logger.error(
                f"Presentation rendering failed: meeting_id={request.id}, error={e}",
                exc_info=True
            )
            return StageResult(error=PRESENTATION_FAILED)

    async def _upload(self, request: SummaryRequest, content: bytes) -> StageResult[None]:
        artifact_name = presentation_artifact_name(request.id)
        try:
            upload_url = await self.backend.get_presigned_upload_url(artifact_name)
            await self.backend.upload_artifact(upload_url, content)
        except BackendServiceError as e:
            logger.error(
                f"Presentation upload failed: meeting_id={request.id}, "
                f"artifact={artifact_name}, error={e}"
            )
            return StageResult(error=UPLOAD_FAILED)
        return StageResult()

    def _log_orphaned_record(self, request: SummaryRequest, stage: PipelineStage) -> None:
        logger.warning(
            f"Meeting metadata stored without presentation: meeting_id={request.id}, "
            f"failed_stage={stage.value}"
        )

    def _failed(self, stages: List[PipelineStage], reason: FailureReason) -> PipelineOutcome:
        failed_stage = stages[-1]
        stages.append(PipelineStage.failed)
        logger.info(f"Summary pipeline failed: after_stage={failed_stage.value}")
        return PipelineOutcome(
            response=SummaryResponse(success=False, error=reason),
            stages=stages,
            failed_stage=failed_stage
        )
