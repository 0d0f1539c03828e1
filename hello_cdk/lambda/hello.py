import json
import logging
import os

logger = logging.getLogger()
try:
    logger.setLevel(os.environ.get("LOG_LEVEL", "INFO"))
except ValueError:
    logger.setLevel(logging.INFO)


def _event_text(event):
    try:
        return json.dumps(event, default=str, separators=(",", ":"))
    except (TypeError, ValueError):
        return repr(event)


def lambda_handler(event, context):
    logger.info("hello from lambda")
    logger.info(f"event {_event_text(event)}")

    return {
        "statusCode": 200,
        "body": "Hello from Lambda! (go)",
    }
