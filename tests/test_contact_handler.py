"""
Tests for the contact form Lambda handler.
"""

import base64
import json
import pytest
from unittest.mock import Mock, patch
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

import contact_handler
from domain.delivery import DeliveryClient
from domain.models import DeliveryResult


@pytest.fixture
def mock_delivery():
    """Replace the module-level delivery client."""
    client = Mock(spec=DeliveryClient)
    client.send.return_value = DeliveryResult.success('ses-123')
    with patch.object(contact_handler.contact_form_handler, 'delivery_client', client):
        yield client


def _event(body, base64_encoded=False):
    return {
        'httpMethod': 'POST',
        'path': '/',
        'isBase64Encoded': base64_encoded,
        'body': body
    }


class TestLambdaHandler:
    """Test the main Lambda handler function."""

    def test_success(self, mock_delivery, lambda_context):
        """Test a valid submission is sent and confirmed."""
        event = _event(json.dumps({'email': 'a@b.com', 'service': 'Hosting'}))

        response = contact_handler.lambda_handler(event, lambda_context)

        assert response['statusCode'] == 200
        assert response['body'] == 'Email sent to a@b.com'
        assert response['headers']['Access-Control-Allow-Origin'] == '*'
        kwargs = mock_delivery.send.call_args.kwargs
        assert kwargs['sender_address'] == os.environ['SenderAddress']
        assert kwargs['recipients'] == ['a@b.com']

    def test_missing_email(self, mock_delivery, lambda_context):
        """Test a missing email is rejected without sending."""
        response = contact_handler.lambda_handler(_event('{"phone": "123"}'), lambda_context)

        assert response['statusCode'] == 400
        assert response['body'] == 'Please provide a valid email address.'
        mock_delivery.send.assert_not_called()

    def test_no_body(self, mock_delivery, lambda_context):
        """Test an event without body is rejected."""
        response = contact_handler.lambda_handler({'httpMethod': 'POST'}, lambda_context)

        assert response['statusCode'] == 400
        assert response['body'] == 'Please provide a valid email address.'

    def test_malformed_json(self, mock_delivery, lambda_context):
        """Test malformed JSON takes the validation path."""
        response = contact_handler.lambda_handler(_event('{"email": "a@b.com"'), lambda_context)

        assert response['statusCode'] == 400
        assert response['body'] == 'Please provide a valid email address.'
        mock_delivery.send.assert_not_called()

    def test_deeply_nested_body(self, mock_delivery, lambda_context):
        """Test pathological nesting takes the validation path."""
        body = '{"email": "a@b.com", "message": ' + '[' * 200000 + ']' * 200000 + '}'

        response = contact_handler.lambda_handler(_event(body), lambda_context)

        assert response['statusCode'] == 400
        assert response['body'] == 'Please provide a valid email address.'
        mock_delivery.send.assert_not_called()

    def test_non_string_body(self, mock_delivery, lambda_context):
        """Test a dict body from a console invocation is rejected."""
        response = contact_handler.lambda_handler(_event({'email': 'a@b.com'}), lambda_context)

        assert response['statusCode'] == 400
        assert response['body'] == 'Please provide a valid email address.'
        mock_delivery.send.assert_not_called()

    def test_bom_prefixed_base64_body(self, mock_delivery, lambda_context):
        """Test a BOM-prefixed body is accepted."""
        body = base64.b64encode(b'\xef\xbb\xbf{"email": "a@b.com"}').decode('ascii')

        response = contact_handler.lambda_handler(_event(body, base64_encoded=True), lambda_context)

        assert response['statusCode'] == 200
        assert response['body'] == 'Email sent to a@b.com'

    def test_base64_body(self, mock_delivery, lambda_context):
        """Test base64-encoded bodies are decoded."""
        body = base64.b64encode(b'{"email": "a@b.com"}').decode('ascii')

        response = contact_handler.lambda_handler(_event(body, base64_encoded=True), lambda_context)

        assert response['statusCode'] == 200
        assert response['body'] == 'Email sent to a@b.com'

    def test_invalid_base64_body(self, mock_delivery, lambda_context):
        """Test an undecodable base64 body is rejected."""
        response = contact_handler.lambda_handler(_event('%%%', base64_encoded=True), lambda_context)

        assert response['statusCode'] == 400
        assert response['body'] == 'Please provide a valid email address.'

    def test_delivery_failure(self, mock_delivery, lambda_context):
        """Test a failed send returns the generic failure message."""
        mock_delivery.send.return_value = DeliveryResult.failure('Throttling: Maximum sending rate exceeded.')

        response = contact_handler.lambda_handler(_event('{"email": "a@b.com"}'), lambda_context)

        assert response['statusCode'] == 400
        assert response['body'] == 'Email could not be sent.'

    def test_delivery_exception(self, mock_delivery, lambda_context):
        """Test an exception from the client does not escape the handler."""
        mock_delivery.send.side_effect = RuntimeError("socket closed")

        response = contact_handler.lambda_handler(_event('{"email": "a@b.com"}'), lambda_context)

        assert response['statusCode'] == 400
        assert response['body'] == 'Email could not be sent.'


def test_health_check(lambda_context):
    """Test health check endpoint."""
    response = contact_handler.health_check({}, lambda_context)

    assert response['statusCode'] == 200
    body = json.loads(response['body'])
    assert body['status'] == 'healthy'
    assert body['senderConfigured'] is True
    assert body['environment'] == os.environ['ENVIRONMENT']
