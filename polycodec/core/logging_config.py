import logging
import sys
from polycodec.core.config import settings

def setup_logging():
    """
    Configure logging for the codec service.

    Sets up logging to stdout with timestamps, log levels, and module names.
    The level comes from the LOG_LEVEL setting (default INFO).
    """
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    # Reduce access log noise in logs
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return logging.getLogger("polycodec")


# Create global logger instance
logger = setup_logging()
