"""
Runtime configuration read from environment variables.

Settings are loaded once when the Lambda container starts and injected into
the components that need them.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from services.confirmation import DEFAULT_COMPANY_NAME

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when module configuration is invalid or missing."""
    pass


@dataclass(frozen=True)
class Settings:
    """
    Function configuration.

    Attributes:
        sender_address: From address for every confirmation email
        company_name: Name used in the confirmation heading and sign-off
        allowed_origin: CORS allow-origin response header
        environment: Deployment environment name (dev, prod, ...)
        region: AWS region of the SES endpoint
    """
    sender_address: str
    company_name: str = DEFAULT_COMPANY_NAME
    allowed_origin: str = '*'
    environment: str = 'dev'
    region: str = 'us-east-1'


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Read and validate settings from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Settings: The validated configuration

    Raises:
        ConfigurationError: If SenderAddress is missing
    """
    if environ is None:
        environ = os.environ

    sender_address = environ.get('SenderAddress', '').strip()
    if not sender_address:
        raise ConfigurationError(
            "SenderAddress environment variable is required but not set. "
            "Please configure this in your SAM template or Lambda environment."
        )

    settings = Settings(
        sender_address=sender_address,
        company_name=environ.get('COMPANY_NAME') or DEFAULT_COMPANY_NAME,
        allowed_origin=environ.get('ALLOWED_ORIGIN') or '*',
        environment=environ.get('ENVIRONMENT') or 'dev',
        region=environ.get('AWS_REGION') or environ.get('AWS_DEFAULT_REGION') or 'us-east-1'
    )

    logger.info(
        f"Settings loaded: environment={settings.environment}, "
        f"region={settings.region}, sender={settings.sender_address}"
    )
    return settings
