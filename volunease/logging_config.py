import logging
import sys
from typing import Optional

from .config import settings


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging for the API process."""

    if level is None:
        level = settings.LOG_LEVEL

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # uvicorn already logs every request line
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)
