"""
Shared CodeDeploy lifecycle plumbing for the traffic hooks.

Each hook supplies a check that raises on failure; run_hook reports the
outcome to CodeDeploy and builds the Lambda response.
"""

import json
import logging

import boto3

logger = logging.getLogger()
logger.setLevel(logging.INFO)

codedeploy = boto3.client('codedeploy')


def report_status(event, status):
    """Report Succeeded or Failed for the hook execution in event."""
    codedeploy.put_lifecycle_event_hook_execution_status(
        deploymentId=event['DeploymentId'],
        lifecycleEventHookExecutionId=event['LifecycleEventHookExecutionId'],
        status=status
    )


def run_hook(event, hook_name, check):
    """
    Run check() and report its outcome.

    A failed check stops the deployment (pre-traffic) or rolls it back
    (post-traffic).
    """
    logger.info(f"{hook_name} hook triggered: {json.dumps(event)}")

    try:
        check()
    except Exception as e:
        logger.error(f"{hook_name} validation failed: {str(e)}", exc_info=True)
        report_status(event, 'Failed')
        return {
            'statusCode': 500,
            'body': json.dumps(f'{hook_name} validation failed: {str(e)}')
        }

    logger.info(f"{hook_name} validation passed")
    report_status(event, 'Succeeded')
    return {
        'statusCode': 200,
        'body': json.dumps(f'{hook_name} validation succeeded')
    }
