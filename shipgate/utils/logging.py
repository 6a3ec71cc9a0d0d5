# shipgate/utils/logging.py
import logging

from ..config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

def get_logger(name: str = "shipgate") -> logging.Logger:
    log = logging.getLogger(name)
    # configure once; reloads and repeated imports must not stack handlers
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
        log.setLevel(settings.LOG_LEVEL.upper())
    return log

logger = get_logger()
