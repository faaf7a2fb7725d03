import logging
from logging.handlers import RotatingFileHandler
import os

from config import settings

# Use /tmp for serverless environments (Vercel, AWS Lambda, etc.)
_log_dir = "/tmp/logs" if os.environ.get("VERCEL") or os.environ.get("AWS_LAMBDA_FUNCTION_NAME") else "logs"

try:
    os.makedirs(_log_dir, exist_ok=True)
except OSError:
    _log_dir = "/tmp/logs"
    os.makedirs(_log_dir, exist_ok=True)

logger = logging.getLogger("jewellery_app")
logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

if not logger.handlers:
    handler = RotatingFileHandler(os.path.join(_log_dir, "app.log"), maxBytes=10*1024*1024, backupCount=5, encoding="utf-8")
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    logger.addHandler(handler)
