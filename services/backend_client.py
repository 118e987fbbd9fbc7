"""Backend API client for meeting persistence and presentation upload.

This module provides the backend operations used by the summary pipeline:
1. Upsert meeting metadata (PUT {BACKEND_API_URL}/meeting)
2. Fetch a presigned upload URL (GET {BACKEND_API_URL}/signed-url/{name})
3. Upload a binary artifact to a presigned URL (PUT {url})

Configuration:
- BACKEND_API_URL: Base URL of the backend API (required)
- BACKEND_TIMEOUT_SECONDS: Per-request timeout (defaults to 30)
"""
import os
import logging
from typing import Optional
from urllib.parse import quote

import httpx

from models.meeting_metadata import MeetingMetadata

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0
OCTET_STREAM = "application/octet-stream"


class BackendServiceError(Exception):
    """Raised when a backend or storage call fails."""
    pass


class BackendClient:
    """HTTP client for the meeting backend and presigned storage uploads."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize with the backend base URL from environment.

        Args:
            transport: Optional httpx transport, used to stub the network
        """
        base_url = os.getenv("BACKEND_API_URL")
        if not base_url:
            raise ValueError("BACKEND_API_URL environment variable is required")

        self.base_url = base_url.rstrip("/")
        self.timeout = float(
            os.getenv("BACKEND_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
        )
        self.transport = transport
        logger.info(
            f"BackendClient initialized: base_url={self.base_url}, "
            f"timeout={self.timeout}s"
        )

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    async def update_meeting_metadata(
        self,
        meeting_id: str,
        email: str,
        metadata: MeetingMetadata
    ) -> None:
        """Upsert the meeting record with its generated metadata.

        Args:
            meeting_id: Meeting identifier
            email: Owner email
            metadata: Validated meeting metadata

        Raises:
            BackendServiceError: On transport errors or a non-2xx response
        """
        body = {"id": meeting_id, "email": email, **metadata.model_dump(mode="json")}
        url = f"{self.base_url}/meeting"

        try:
            async with self._client() as client:
                response = await client.put(url, json=body)
        except httpx.HTTPError as e:
            logger.error(f"Meeting update request failed: meeting_id={meeting_id}, error={e}")
            raise BackendServiceError(f"Failed to update meeting: {e}") from e
        except (TypeError, ValueError) as e:
            logger.error(f"Meeting body not encodable: meeting_id={meeting_id}, error={e}")
            raise BackendServiceError(f"Failed to encode meeting: {e}") from e

        if not response.is_success:
            logger.error(
                f"Meeting update rejected: meeting_id={meeting_id}, "
                f"status={response.status_code}"
            )
            raise BackendServiceError(
                f"Meeting update returned status {response.status_code}"
            )

        logger.info(f"Meeting metadata stored: meeting_id={meeting_id}")

    async def get_presigned_upload_url(self, artifact_name: str) -> str:
        """Request a presigned upload URL for an artifact.

        Args:
            artifact_name: Object name, e.g. presentation-<id>.pptx

        Returns:
            Presigned PUT URL

        Raises:
            BackendServiceError: If the URL cannot be obtained
        """
        url = f"{self.base_url}/signed-url/{quote(artifact_name, safe='')}"

        try:
            async with self._client() as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            logger.error(f"Presigned URL request failed: artifact={artifact_name}, error={e}")
            raise BackendServiceError(f"Failed to get pre-signed upload URL: {e}") from e

        if not response.is_success:
            logger.error(
                f"Presigned URL request rejected: artifact={artifact_name}, "
                f"status={response.status_code}"
            )
            raise BackendServiceError("Failed to get pre-signed upload URL")

        try:
            upload_url = response.json().get("url")
        except (ValueError, AttributeError) as e:
            raise BackendServiceError("Malformed pre-signed URL response") from e

        if not isinstance(upload_url, str) or not upload_url:
            raise BackendServiceError("Pre-signed URL response has no url")

        logger.info(f"Obtained presigned upload URL: artifact={artifact_name}")
        return upload_url

    async def upload_artifact(self, upload_url: str, content: bytes) -> None:
        """Upload binary content to a presigned URL.

        Args:
            upload_url: Presigned PUT URL
            content: Artifact bytes

        Raises:
            BackendServiceError: On transport errors or a non-2xx response
        """
        try:
            async with self._client() as client:
                response = await client.put(
                    upload_url,
                    content=content,
                    headers={"Content-Type": OCTET_STREAM}
                )
        except httpx.HTTPError as e:
            logger.error(f"Artifact upload failed: error={e}")
            raise BackendServiceError(f"Failed to upload artifact: {e}") from e

        if not response.is_success:
            logger.error(f"Artifact upload rejected: status={response.status_code}")
            raise BackendServiceError(
                f"Artifact upload returned status {response.status_code}"
            )

        logger.info(f"Artifact uploaded: size={len(content)} bytes")
