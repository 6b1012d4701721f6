import os

LOG_LEVEL = os.getenv("SMS_PARSER_LOG_LEVEL", "INFO")

API_HOST = os.getenv("SMS_PARSER_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("SMS_PARSER_API_PORT", "8000"))

BATCH_WORKERS = int(os.getenv("SMS_PARSER_BATCH_WORKERS", "1"))
