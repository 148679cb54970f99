import json
import os

import boto3

from lifecycle import logger, run_hook

lambda_client = boto3.client('lambda')

EXPECTED_STATUS = 400
EXPECTED_BODY = 'Please provide a valid email address.'

# An empty email must be rejected before anything is sent
SMOKE_EVENT = {
    'httpMethod': 'POST',
    'path': '/',
    'isBase64Encoded': False,
    'body': json.dumps({'email': '', 'message': 'pre-deployment test'})
}


def check_rejects_empty_email(target_function):
    """Invoke the new version and require the validation error response."""
    logger.info(f"Running smoke tests on {target_function}")

    response = lambda_client.invoke(
        FunctionName=target_function,
        InvocationType='RequestResponse',
        Payload=json.dumps(SMOKE_EVENT)
    )

    response_payload = json.loads(response['Payload'].read())
    logger.info(f"Test response: {json.dumps(response_payload)}")

    if response.get('FunctionError'):
        raise Exception(f"Function returned error: {response_payload}")

    actual = (response_payload.get('statusCode'), response_payload.get('body'))
    if actual != (EXPECTED_STATUS, EXPECTED_BODY):
        raise Exception(f"Unexpected response: {actual!r}")


def lambda_handler(event, context):
    """
    Pre-traffic hook for CodeDeploy.
    Blocks the deployment unless the new version rejects an empty email.
    """
    target_function = os.environ.get('TARGET_FUNCTION')
    return run_hook(event, 'Pre-traffic', lambda: check_rejects_empty_email(target_function))
