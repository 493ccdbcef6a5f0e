"""
Contact Service
===============
Validation and email delivery for contact form submissions.
"""

import html
from typing import Any, Optional

import httpx
import structlog
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from backend.config import Settings, settings as default_settings
from backend.schemas.contact import ContactSubmission

logger = structlog.get_logger()

MIN_NAME_LENGTH = 2
MIN_MESSAGE_LENGTH = 20


class ContactValidationError(ValueError):
    """Submission failed form validation."""


class ContactDeliveryError(Exception):
    """Email provider rejected or could not accept the message."""


def is_honeypot_triggered(submission: ContactSubmission) -> bool:
    """Bots fill the hidden company website field."""
    website = submission.company_website
    if isinstance(website, str):
        return bool(website.strip())
    return bool(website)


def validate_submission(submission: ContactSubmission) -> None:
    """
    Check required fields, types and minimum lengths.

    Raises:
        ContactValidationError: with a user-facing message
    """
    if not all([submission.name, submission.email, submission.topic, submission.message]):
        raise ContactValidationError("All fields are required")
    if not isinstance(submission.name, str) or len(submission.name.strip()) < MIN_NAME_LENGTH:
        raise ContactValidationError("Name must be at least 2 characters")
    if not isinstance(submission.email, str) or "@" not in submission.email:
        raise ContactValidationError("Invalid email address")
    if not isinstance(submission.message, str) or len(submission.message.strip()) < MIN_MESSAGE_LENGTH:
        raise ContactValidationError("Message must be at least 20 characters")


def _escape(value: Any) -> str:
    return html.escape("" if value is None else str(value))


def render_contact_email(submission: ContactSubmission) -> str:
    """Render the notification body. All user input is escaped."""
    name = _escape(submission.name)
    email = _escape(submission.email)
    topic = _escape(submission.topic)
    message = _escape(submission.message).replace("\n", "<br>")
    return (
        "<h3>New contact form submission</h3>"
        f"<p><strong>Name:</strong> {name}</p>"
        f"<p><strong>Email:</strong> {email}</p>"
        f"<p><strong>Topic:</strong> {topic}</p>"
        "<p><strong>Message:</strong></p>"
        f"<p>{message}</p>"
        "<hr>"
        f"<p><em>Reply to: {email}</em></p>"
    )


class ContactService:
    """Delivers contact form submissions through the Resend API."""

    def __init__(
        self,
        config: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = config or default_settings
        self._transport = transport

    @property
    def delivery_enabled(self) -> bool:
        return bool(self.config.resend_api_key)

    def _get_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.resend_api_key}",
        }

    def _build_payload(self, submission: ContactSubmission) -> dict[str, Any]:
        return {
            "from": self.config.contact_from_address,
            "to": [self.config.contact_to_address],
            "reply_to": submission.email,
            "subject": f"Contact Form: {submission.topic}",
            "html": render_contact_email(submission),
        }

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
    )
    def _post_email(self, payload: dict[str, Any]) -> httpx.Response:
        with httpx.Client(
            base_url=self.config.resend_api_url,
            timeout=self.config.http_timeout,
            headers=self._get_headers(),
            transport=self._transport,
        ) as client:
            return client.post("/emails", json=payload)

    def send(self, submission: ContactSubmission) -> Optional[str]:
        """
        Send a validated submission.

        Returns:
            Provider message id, or None when delivery is not configured

        Raises:
            ContactDeliveryError: if the provider fails
        """
        if not self.delivery_enabled:
            logger.warning("RESEND_API_KEY is not set, contact email not sent")
            logger.info(
                "Contact form submission",
                name=submission.name,
                email=submission.email,
                topic=submission.topic,
                message=submission.message,
            )
            return None

        try:
            response = self._post_email(self._build_payload(submission))
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Resend delivery failed", error=str(e))
            raise ContactDeliveryError(str(e)) from e

        try:
            message_id = response.json().get("id")
            if message_id is not None:
                message_id = str(message_id)
        except (ValueError, AttributeError) as e:
            logger.error("Unexpected Resend response", status=response.status_code, body=response.text[:200])
            raise ContactDeliveryError("Malformed provider response") from e

        logger.info("Contact email sent", id=message_id)
        return message_id
