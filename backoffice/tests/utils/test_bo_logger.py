import os
import logging
import django

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backoffice.settings")
django.setup()

from backoffice.utils import bo_logger


def test_setup_logger_writes_rotating_file(settings, tmp_path):
    settings.LOG_DIR = tmp_path / "logs"
    handlers_before = list(bo_logger.logger.handlers)
    converter_before = logging.Formatter.converter
    try:
        bo_logger.setup_logger()
        assert (tmp_path / "logs").is_dir()

        # a record without the CustomLogger extras still formats
        bo_logger.logger.info("plain record")
        for handler in bo_logger.logger.handlers:
            handler.flush()
        content = (tmp_path / "logs" / "backoffice.log").read_text()
        assert "plain record" in content
        assert content.startswith("INFO - ")
    finally:
        for handler in list(bo_logger.logger.handlers):
            if handler not in handlers_before:
                bo_logger.logger.removeHandler(handler)
                handler.close()
        logging.Formatter.converter = converter_before
