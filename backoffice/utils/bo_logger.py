import logging
import sys
from logging.handlers import RotatingFileHandler
from django.conf import settings
from backoffice.utils.timezone import local_time

logger = logging.getLogger("backoffice")

LOG_FORMAT = (
    "%(levelname)s - %(asctime)s - %(name)s - %(filename)s - %(caller_name)s - %(username)s: %(message)s"
)
# records that did not come through CustomLogger
LOG_DEFAULTS = {"caller_name": "", "username": ""}


def setup_logger():
    """setup the backoffice logger"""
    log_dir = settings.LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    logfilename = log_dir / "backoffice.log"
    logger.setLevel(settings.LOG_LEVEL)

    logging.Formatter.converter = local_time

    # log to stdout
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, defaults=LOG_DEFAULTS))
    logger.addHandler(handler)

    handler = RotatingFileHandler(logfilename, maxBytes=1048576, backupCount=5)
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, defaults=LOG_DEFAULTS))
    logger.addHandler(handler)
