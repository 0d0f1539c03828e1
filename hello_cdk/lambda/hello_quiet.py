import logging
import os

logger = logging.getLogger()
try:
    logger.setLevel(os.environ.get("LOG_LEVEL", "INFO"))
except ValueError:
    logger.setLevel(logging.INFO)


def lambda_handler(event, context):
    logger.info("hello from lambda")

    return {
        "statusCode": 200,
        "body": "Hello from Lambda! (go)",
    }
