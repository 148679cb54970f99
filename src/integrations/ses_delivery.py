"""
Amazon SES Delivery Module

This module sends confirmation emails through the Amazon SES v2 API and
reports the outcome as a DeliveryResult instead of raising.

Usage:
    from integrations.ses_delivery import SesDeliveryClient

    client = SesDeliveryClient(region='us-east-1')
    result = client.send(
        sender_address="no-reply@example.com",
        recipients=["visitor@example.com"],
        subject="Confirmation",
        html_body="<html>...</html>",
        plain_text_body="..."
    )
    print(result.completed)
"""

import logging
import time
from typing import List, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from domain.delivery import DeliveryClient
from domain.models import DeliveryResult

# Configure logging
logger = logging.getLogger(__name__)

CHARSET = 'UTF-8'


def _initialize_ses_client(region: str):
    """
    Initialize boto3 SES v2 client with timeout configuration.

    Args:
        region: AWS region of the SES endpoint

    Returns:
        boto3.client: Configured SES v2 client
    """
    client_config = Config(
        retries={
            'mode': 'standard'
        },
        connect_timeout=10,  # 10 seconds to establish connection
        read_timeout=30      # 30 seconds max for reading response
    )

    client = boto3.client(
        'sesv2',
        region_name=region,
        config=client_config
    )

    logger.info(
        f"SES client initialized: region={region}, "
        f"connect_timeout=10s, read_timeout=30s, retry_mode=standard"
    )
    return client


class SesDeliveryClient(DeliveryClient):
    """
    Delivery client backed by Amazon SES.

    SES answers SendEmail synchronously; a response carrying a MessageId
    means SES has accepted responsibility for the message, which is treated
    as completion.
    """

    def __init__(self, region: str = 'us-east-1', client=None):
        """
        Args:
            region: AWS region of the SES endpoint
            client: Pre-built boto3 sesv2 client (built from region if None)
        """
        self.client = client if client is not None else _initialize_ses_client(region)

    def send(
        self,
        sender_address: str,
        recipients: List[str],
        subject: str,
        html_body: str,
        plain_text_body: str
    ) -> DeliveryResult:
        """
        Send one email through SES.

        Args:
            sender_address: Verified SES identity used as From
            recipients: Destination addresses
            subject: Subject line
            html_body: HTML body
            plain_text_body: Plain-text body

        Returns:
            DeliveryResult: completed=True with the SES MessageId, or
            completed=False with the SES error code and message
        """
        start_time = time.time()

        logger.info(
            f"Sending email via SES: recipients={len(recipients)}, "
            f"subject={subject!r}"
        )

        try:
            response = self.client.send_email(
                FromEmailAddress=sender_address,
                Destination={
                    'ToAddresses': list(recipients)
                },
                Content={
                    'Simple': {
                        'Subject': {
                            'Data': subject,
                            'Charset': CHARSET
                        },
                        'Body': {
                            'Text': {
                                'Data': plain_text_body,
                                'Charset': CHARSET
                            },
                            'Html': {
                                'Data': html_body,
                                'Charset': CHARSET
                            }
                        }
                    }
                }
            )
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', 'Unknown')
            error_message = e.response.get('Error', {}).get('Message', str(e))

            logger.error(
                f"SES send failed: error_code={error_code}, "
                f"error_message={error_message}"
            )
            return DeliveryResult.failure(f"{error_code}: {error_message}")
        except BotoCoreError as e:
            logger.error(f"SES transport error: {e}")
            return DeliveryResult.failure(str(e))

        message_id: Optional[str] = response.get('MessageId')
        if not message_id:
            logger.warning("SES response did not include a MessageId")
            return DeliveryResult.failure("SES did not confirm the send (no MessageId)")

        execution_time = time.time() - start_time
        logger.info(
            f"SES send succeeded: message_id={message_id}, "
            f"execution_time={execution_time:.2f}s"
        )
        return DeliveryResult.success(message_id)
