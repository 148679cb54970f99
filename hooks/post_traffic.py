import json
import os
from datetime import datetime, timedelta, timezone

import boto3

from lifecycle import logger, run_hook

cloudwatch = boto3.client('cloudwatch')

WINDOW_MINUTES = 5


def recent_error_count(function_name, now=None):
    """Sum the Lambda Errors metric over the last WINDOW_MINUTES."""
    end_time = now or datetime.now(timezone.utc)
    start_time = end_time - timedelta(minutes=WINDOW_MINUTES)

    response = cloudwatch.get_metric_statistics(
        Namespace='AWS/Lambda',
        MetricName='Errors',
        Dimensions=[
            {
                'Name': 'FunctionName',
                'Value': function_name
            }
        ],
        StartTime=start_time,
        EndTime=end_time,
        Period=WINDOW_MINUTES * 60,
        Statistics=['Sum']
    )

    logger.info(f"CloudWatch metrics: {json.dumps(response, default=str)}")
    return sum(point.get('Sum', 0) for point in response.get('Datapoints', []))


def check_error_budget(target_function, max_errors):
    errors = recent_error_count(target_function)
    if errors > max_errors:
        raise Exception(f"Error rate too high: {errors} errors (max {max_errors})")


def lambda_handler(event, context):
    """
    Post-traffic hook for CodeDeploy.
    Rolls back when the function reported more than MAX_ERRORS errors
    since the traffic shift.
    """
    target_function = os.environ.get('TARGET_FUNCTION')
    max_errors = int(os.environ.get('MAX_ERRORS', '0'))
    return run_hook(event, 'Post-traffic', lambda: check_error_budget(target_function, max_errors))
