"""
AWS Lambda handler for the contact form confirmation endpoint (POST /).

Thin orchestration layer that delegates to ContactFormHandler.
Policy: one send attempt per request, no retries. Errors logged to CloudWatch.
"""

import base64
import binascii
import json
import logging
import os
from typing import Any, Dict, Optional, Union

from domain.contact_processor import ContactFormHandler
from integrations.ses_delivery import SesDeliveryClient
from services.settings import ConfigurationError, load_settings

# Configure logging
logger = logging.getLogger()
logger.setLevel(os.environ.get('LOG_LEVEL', 'INFO').upper())

# Add console handler for local testing (AWS Lambda provides handlers automatically)
if not logger.handlers:
    console_handler = logging.StreamHandler()
    formatter = logging.Formatter('%(levelname)s - %(message)s')
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

# Initialize at module import time (reused across invocations)
try:
    settings = load_settings()
except ConfigurationError as e:
    logger.error(f"Module initialization failed: {e}")
    raise

contact_form_handler = ContactFormHandler(
    sender_address=settings.sender_address,
    delivery_client=SesDeliveryClient(region=settings.region),
    company_name=settings.company_name
)


def _extract_body(event: Dict[str, Any]) -> Optional[Union[bytes, str]]:
    """
    Get the raw request body from an API Gateway / function URL event.

    Base64-encoded bodies are decoded to bytes; an undecodable or
    non-string body is returned as None so it takes the invalid-request path.
    """
    body = event.get('body')
    if not isinstance(body, (str, bytes)):
        if body is not None:
            logger.warning(f"Ignoring non-string request body of type {type(body).__name__}")
        return None

    if not event.get('isBase64Encoded'):
        return body

    try:
        return base64.b64decode(body, validate=True)
    except (binascii.Error, ValueError) as e:
        logger.warning(f"Could not decode base64 request body: {e}")
        return None


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Send a confirmation email for a contact-form submission.

    Expected body format:
    {
        "email": "visitor@example.com",
        "phone": "555-0100",
        "message": "Free text",
        "service": "Requested service"
    }

    Args:
        event: API Gateway proxy event
        context: Lambda context

    Returns:
        Dict with statusCode, headers and plain-text body
    """
    request_id = getattr(context, 'aws_request_id', 'UNKNOWN')
    logger.info(f"Environment: {settings.environment}, request: {request_id}")

    response = contact_form_handler.handle(_extract_body(event))

    logger.info(f"Request {request_id} finished with status {response.status_code}")
    return response.to_api_gateway(settings.allowed_origin)


def health_check(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Simple health check endpoint for monitoring.
    """
    return {
        'statusCode': 200,
        'body': json.dumps({
            'status': 'healthy',
            'environment': settings.environment,
            'senderConfigured': bool(settings.sender_address)
        })
    }
