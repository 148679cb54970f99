"""
Contact form processing - core business logic.

This module handles one contact-form submission end to end:
1. Parse the request body into a Submission
2. Validate that an email address is present
3. Render the confirmation email (HTML + plain text)
4. Send it through the injected delivery client
5. Return the HTTP outcome (200 or 400)

All errors are mapped to a HandlerResponse.
No exceptions propagate out of handle().
"""

import logging
from typing import Optional, Union

from .delivery import DeliveryClient
from .models import DeliveryResult, HandlerResponse, InvalidSubmission, OutboundMessage, Submission
from services import confirmation as confirmation_service

logger = logging.getLogger(__name__)

INVALID_EMAIL_MESSAGE = "Please provide a valid email address."
SEND_FAILED_MESSAGE = "Email could not be sent."


class ContactFormHandler:
    """
    Handles contact-form submissions.

    Validates the submission, sends a confirmation email through the
    delivery client and maps the outcome to a HandlerResponse.
    """

    def __init__(
        self,
        sender_address: str,
        delivery_client: DeliveryClient,
        company_name: str = confirmation_service.DEFAULT_COMPANY_NAME
    ):
        """
        Args:
            sender_address: From address for every confirmation email
            delivery_client: Capability used to send the email
            company_name: Name used in the confirmation heading and sign-off
        """
        self.sender_address = sender_address
        self.delivery_client = delivery_client
        self.company_name = company_name

    def handle(self, raw_body: Union[bytes, str, None]) -> HandlerResponse:
        """
        Process a single contact-form request body.

        Args:
            raw_body: Raw JSON request body

        Returns:
            HandlerResponse with status 200 or 400
        """
        logger.info("Processing request to send email.")

        submission = self._parse(raw_body)
        if submission is None or not submission.has_email:
            logger.warning("Invalid request: Missing required email field.")
            return HandlerResponse(400, INVALID_EMAIL_MESSAGE)

        message = confirmation_service.build_confirmation(submission, self.company_name)

        result = self._send(message)
        if result.completed:
            logger.info(f"Confirmation sent to {message.recipient}: {result!r}")
            return HandlerResponse(200, f"Email sent to {submission.email}")

        logger.error(f"Error sending email: {result.error_message}")
        return HandlerResponse(400, SEND_FAILED_MESSAGE)

    def _parse(self, raw_body: Union[bytes, str, None]) -> Optional[Submission]:
        try:
            return Submission.from_json(raw_body)
        except InvalidSubmission as e:
            logger.warning(f"Could not parse request body: {e}")
            return None

    def _send(self, message: OutboundMessage) -> DeliveryResult:
        """
        Hand the message to the delivery client.

        Clients report failures as DeliveryResult; anything a client still
        raises is turned into a failed result here.
        """
        try:
            return self.delivery_client.send(
                sender_address=self.sender_address,
                recipients=message.recipients,
                subject=message.subject,
                html_body=message.html_body,
                plain_text_body=message.plain_text_body
            )
        except Exception as e:
            logger.error(f"Delivery client raised: {e}", exc_info=True)
            return DeliveryResult.failure(str(e))
