import logging
import os
import sys
from typing import Optional

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Stdout logger shared by the import pipeline.
    REALM_IMPORT_LOG_LEVEL (e.g. DEBUG) overrides the INFO default.
    """
    logger = logging.getLogger(name or "realm_import")
    if logger.handlers:
        return logger
    logger.setLevel(os.environ.get("REALM_IMPORT_LOG_LEVEL", "INFO").upper())

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
