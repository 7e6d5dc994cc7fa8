"""Forwarding of submitted applications to the configured webhook"""
from datetime import datetime, timezone
from typing import Any, Dict, Optional
import httpx
import logging

from pydantic import BaseModel

from admissions.config import Settings

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Application submitted successfully"
NOT_CONFIGURED_MESSAGE = "Webhook URL not configured"
FAILURE_MESSAGE = "Failed to submit application"


class ConfigurationError(Exception):
    """Webhook destination is not configured"""


class UpstreamError(Exception):
    """Webhook call failed or returned a non-success status"""


class RelayOutcome(BaseModel):
    """Status code and JSON body to hand back to the caller"""
    status_code: int
    body: Dict[str, Any]


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and Z suffix"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_webhook_document(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Decorate an application payload for the webhook

    The institution discriminator is written under both ``university`` and
    ``institution``, before and after the payload spread, so the explicit
    value wins any collision. A payload without either key gets neither.
    """
    discriminator = payload.get("institution", payload.get("university"))
    tags = {} if discriminator is None else {
        "university": discriminator,
        "institution": discriminator,
    }
    return {
        "type": "application",
        **tags,
        **payload,
        **tags,
        "submittedAt": utc_timestamp(),
    }


class SubmissionRelay:
    """Stateless pass-through from the application form to the webhook"""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.settings = settings
        self.transport = transport

    async def relay(self, payload: Dict[str, Any]) -> RelayOutcome:
        """
        Forward one application payload

        Args:
            payload: Application fields plus the institution discriminator

        Returns:
            RelayOutcome with 200 on success, 500 with an opaque error otherwise
        """
        try:
            await self._forward(payload)
        except ConfigurationError as e:
            logger.error(f"Application relay misconfigured: {e}")
            return RelayOutcome(status_code=500, body={"error": NOT_CONFIGURED_MESSAGE})
        except UpstreamError as e:
            logger.error(f"Application submission error: {e}")
            return RelayOutcome(status_code=500, body={"error": FAILURE_MESSAGE})

        return RelayOutcome(
            status_code=200,
            body={"success": True, "message": SUCCESS_MESSAGE}
        )

    async def _forward(self, payload: Dict[str, Any]) -> None:
        webhook_url = self.settings.webhook_url
        if not webhook_url:
            raise ConfigurationError(NOT_CONFIGURED_MESSAGE)

        document = build_webhook_document(payload)

        try:
            async with httpx.AsyncClient(
                transport=self.transport,
                timeout=self.settings.webhook_timeout
            ) as client:
                response = await client.post(
                    webhook_url,
                    json=document,
                    headers={"Content-Type": "application/json"}
                )
        except httpx.HTTPError as e:
            raise UpstreamError(f"Webhook request failed: {e!r}") from e

        if not response.is_success:
            raise UpstreamError(
                f"Webhook returned {response.status_code}: {response.text}"
            )

        logger.info(
            f"Forwarded application for {document.get('institution', 'unspecified institution')} "
            f"submitted at {document['submittedAt']}"
        )
