"""
Confirmation message rendering.

Builds the HTML and plain-text bodies of the confirmation email sent back to
whoever submitted the contact form. Optional fields that are empty produce no
line at all.
"""

import logging
from typing import List, Optional

from domain.models import OutboundMessage, Submission

logger = logging.getLogger(__name__)

SUBJECT = "Confirmation"
DEFAULT_COMPANY_NAME = "Onatrix"


def _contact_line(email: str, phone: Optional[str]) -> str:
    line = f"We will contact you back at {email}"
    if phone:
        line += f" or {phone}"
    return line + "."


def _optional_lines(submission: Submission) -> List[str]:
    lines = []
    if submission.message:
        lines.append(f'You mentioned: "{submission.message}"')
    if submission.service:
        lines.append(f'We will assist you with: "{submission.service}"')
    return lines


def render_plain_text(submission: Submission, company_name: str = DEFAULT_COMPANY_NAME) -> str:
    """
    Render the plain-text confirmation body.

    Example:
        >>> render_plain_text(Submission(email="a@b.com", phone="555-0100"))
        'Thank you for contacting Onatrix!\\nWe will contact you back at a@b.com or 555-0100.\\nBest regards,\\nOnatrix'
    """
    lines = [
        f"Thank you for contacting {company_name}!",
        _contact_line(submission.email, submission.phone),
    ]
    lines.extend(_optional_lines(submission))
    lines.extend(["Best regards,", company_name])
    return "\n".join(lines)


def render_html(submission: Submission, company_name: str = DEFAULT_COMPANY_NAME) -> str:
    """
    Render the HTML confirmation body.

    Submitted values are interpolated verbatim, the same text the plain-text
    body carries.
    """
    paragraphs = [_contact_line(submission.email, submission.phone)]
    paragraphs.extend(_optional_lines(submission))

    body = [f"        <h1>Thank you for contacting {company_name}!</h1>"]
    body.extend(f"        <p>{text}</p>" for text in paragraphs)
    body.append(f"        <p>Best regards,<br>{company_name}</p>")

    return "\n".join(["<html>", "    <body>", *body, "    </body>", "</html>"])


def build_confirmation(submission: Submission, company_name: str = DEFAULT_COMPANY_NAME) -> OutboundMessage:
    """
    Build the confirmation email for a validated submission.

    Args:
        submission: Submission with a non-empty email
        company_name: Name used in the heading and sign-off

    Returns:
        OutboundMessage: Message addressed to the submission's email

    Raises:
        ValueError: If the submission has no email address
    """
    if not submission.has_email:
        raise ValueError("Cannot build a confirmation without an email address")

    message = OutboundMessage(
        recipient=submission.email,
        subject=SUBJECT,
        html_body=render_html(submission, company_name),
        plain_text_body=render_plain_text(submission, company_name)
    )

    logger.info(
        f"Rendered confirmation: html={len(message.html_body)}, "
        f"text={len(message.plain_text_body)}"
    )
    return message
