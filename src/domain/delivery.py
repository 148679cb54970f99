"""
Email delivery capability used by the request handler.

Any object implementing DeliveryClient can be injected into
ContactFormHandler, which keeps the handler independent of the provider SDK.
"""

from abc import ABC, abstractmethod
from typing import List

from .models import DeliveryResult


class DeliveryClient(ABC):
    """Abstract interface for email delivery adapters."""

    @abstractmethod
    def send(
        self,
        sender_address: str,
        recipients: List[str],
        subject: str,
        html_body: str,
        plain_text_body: str
    ) -> DeliveryResult:
        """
        Send one email and wait until the provider confirms completion.

        Returns:
            DeliveryResult with completed=True on confirmation, otherwise
            completed=False and an error_message
        """
        ...
