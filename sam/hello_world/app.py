# Copyright 2026 Amazon.com and its affiliates; all rights reserved.
# This file is Amazon Web Services Content and may not be duplicated or distributed without permission.

import json
import logging
import os

# Set up logging
logger = logging.getLogger()
log_level = logging.getLevelName(os.environ.get('LOG_LEVEL', 'INFO').upper())
# Unknown names such as TRACE come back as a string, not a level number
logger.setLevel(log_level if isinstance(log_level, int) else logging.INFO)

def lambda_handler(event, context):
    """Return an API Gateway formatted greeting. The event is not inspected."""
    logger.debug("Received event %s", event)
    context.log("Processing request...")

    return {
        'statusCode': 200,
        'headers': {'Content-Type': 'application/json'},
        'body': json.dumps({'message': 'Hello from Lambda'})
    }
