import logging
import os
from dotenv import load_dotenv

load_dotenv()

# Adds the weekly-hours check to the full compliance report
COMPLIANCE_INCLUDE_WEEKLY_HOURS = os.getenv("COMPLIANCE_INCLUDE_WEEKLY_HOURS", "false").lower() in ("1", "true", "yes")

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))


_logging_configured = False


def setup_logging():
    global _logging_configured
    if _logging_configured:
        return

    logger = logging.getLogger()
    if not logger.handlers:
        logger.setLevel(logging.DEBUG)

        console = logging.StreamHandler()
        console.setLevel(LOG_LEVEL)
        console.setFormatter(logging.Formatter('%(name)-12s: %(levelname)-8s %(message)s'))
        logger.addHandler(console)

    _logging_configured = True
