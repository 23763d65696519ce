"""
Run script to start the FastAPI server (no reload).
"""
import logging
import os
import sys

import uvicorn

# Add the project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from popbuilder.config import settings  # noqa: E402

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    """Start the Uvicorn server."""
    logger.info(f"Starting {settings.PROJECT_NAME} on port {settings.PORT} ...")
    
    uvicorn.run(
        "popbuilder.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,  # No reload for stability
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
