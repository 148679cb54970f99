"""
Data models for the contact confirmation domain.

These type-safe data structures define clear contracts between components.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union


class InvalidSubmission(ValueError):
    """Raised when a request body cannot be read as a contact submission."""
    pass


@dataclass
class Submission:
    """
    Contact-form submission for a single request.

    Attributes:
        email: Address the confirmation is sent to (required for success)
        phone: Optional phone number
        message: Optional free-text message
        service: Optional name of the requested service
    """
    email: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None
    service: Optional[str] = None

    FIELDS = ('email', 'phone', 'message', 'service')

    @property
    def has_email(self) -> bool:
        """Check if an email address was provided."""
        return bool(self.email)

    @classmethod
    def from_json(cls, raw_body: Union[bytes, str, None]) -> 'Submission':
        """
        Parse a JSON request body into a Submission.

        Field names are matched case-insensitively. JSON null counts as
        absent; numbers and booleans are converted to strings.

        Args:
            raw_body: Raw request body (bytes or str)

        Returns:
            Submission: Parsed submission (email may still be empty)

        Raises:
            InvalidSubmission: If the body is empty, not JSON, not a JSON
                object, or holds a field of an unsupported type
        """
        if raw_body is None:
            raise InvalidSubmission("Request body is empty")

        if isinstance(raw_body, bytes):
            try:
                raw_body = raw_body.decode('utf-8-sig')
            except UnicodeDecodeError as e:
                raise InvalidSubmission(f"Request body is not valid UTF-8: {e}")
        elif isinstance(raw_body, str):
            raw_body = raw_body.lstrip('\ufeff')
        else:
            raise InvalidSubmission(
                f"Request body must be bytes or str, got {type(raw_body).__name__}"
            )

        if not raw_body.strip():
            raise InvalidSubmission("Request body is empty")

        try:
            data = json.loads(raw_body)
        except (ValueError, RecursionError) as e:
            # JSONDecodeError is a ValueError; so are oversized integer literals
            raise InvalidSubmission(f"Request body is not valid JSON: {e}")

        if not isinstance(data, dict):
            raise InvalidSubmission(
                f"Request body must be a JSON object, got {type(data).__name__}"
            )

        normalized = {str(key).lower(): value for key, value in data.items()}

        values = {}
        for name in cls.FIELDS:
            values[name] = _coerce_field(name, normalized.get(name))

        return cls(**values)


def _coerce_field(name: str, value: Any) -> Optional[str]:
    """
    Convert a JSON field value to an optional string.

    Numbers use Python's str(), so 1.0 becomes "1.0" and 1e20 becomes
    "1e+20".
    """
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return 'True' if value else 'False'
    if isinstance(value, (int, float)):
        return str(value)
    raise InvalidSubmission(
        f"Field '{name}' must be a string, got {type(value).__name__}"
    )


@dataclass
class OutboundMessage:
    """
    Confirmation email rendered from a submission.

    Attributes:
        recipient: Destination address (the submission's email)
        subject: Subject line
        html_body: HTML variant of the body
        plain_text_body: Plain-text variant of the body
    """
    recipient: str
    subject: str
    html_body: str
    plain_text_body: str

    @property
    def recipients(self) -> List[str]:
        """Recipient list in the shape the delivery client expects."""
        return [self.recipient]


@dataclass
class DeliveryResult:
    """
    Result of a single send attempt.

    This explicit result type makes success/failure handling clear
    and prevents exceptions from being used for control flow.

    Attributes:
        completed: Whether the provider confirmed the send
        message_id: Provider message identifier (if completed)
        error_message: Error description (if not completed)
    """
    completed: bool
    message_id: Optional[str] = None
    error_message: Optional[str] = None

    @classmethod
    def success(cls, message_id: Optional[str] = None) -> 'DeliveryResult':
        return cls(completed=True, message_id=message_id)

    @classmethod
    def failure(cls, error_message: str) -> 'DeliveryResult':
        return cls(completed=False, error_message=error_message)

    def __repr__(self) -> str:
        """Human-readable representation for logging."""
        if self.completed:
            return f"DeliveryResult(completed=True, message_id={self.message_id})"
        else:
            return f"DeliveryResult(completed=False, error={self.error_message})"


@dataclass
class HandlerResponse:
    """
    HTTP outcome of one request.

    Attributes:
        status_code: HTTP status code (200 or 400)
        body: Plain-text response body
    """
    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return self.status_code == 200

    def to_api_gateway(self, allowed_origin: str = '*') -> Dict[str, Any]:
        """
        Convert to an API Gateway / function URL proxy response.

        Args:
            allowed_origin: Value for the CORS allow-origin header

        Returns:
            Dict with statusCode, headers and body
        """
        return {
            'statusCode': self.status_code,
            'headers': {
                'Content-Type': 'text/plain; charset=utf-8',
                'Access-Control-Allow-Origin': allowed_origin
            },
            'body': self.body
        }
