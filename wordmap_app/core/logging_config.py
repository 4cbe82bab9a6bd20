"""
Logging setup for Word Map.

One ``wordmap_app`` logger (which is also ``app.logger``) with a console
handler and, unless disabled, a size-rotated ``wordmap.log`` file.
"""

import json
import logging
import logging.handlers
import os
from typing import Optional

LOGGER_NAME = 'wordmap_app'
LOG_FILE_NAME = 'wordmap.log'
TEXT_FORMAT = '%(asctime)s [%(levelname)s] %(module)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record):
        entry = {
            'time': self.formatTime(record, DATE_FORMAT),
            'level': record.levelname,
            'module': record.module,
            'message': record.getMessage(),
        }
        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def _rotating_file_handler(log_dir: str) -> logging.Handler:
    os.makedirs(log_dir, exist_ok=True)
    return logging.handlers.RotatingFileHandler(
        os.path.join(log_dir, LOG_FILE_NAME),
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding='utf-8',
    )


def setup_logging(
    app=None,
    log_level: str = 'INFO',
    log_dir: Optional[str] = None,
    json_format: bool = False,
    log_to_file: bool = True,
) -> logging.Logger:
    """
    Configure the application logger and return it.

    Calling it again replaces the handlers, so every app created by the
    factory (tests create many) logs exactly once per record.
    """
    level = getattr(logging, str(log_level).upper(), logging.INFO)
    formatter = JsonLineFormatter() if json_format else logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if log_to_file:
        if log_dir is None:
            project_root = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
            log_dir = os.path.join(project_root, 'logs')
        handlers.append(_rotating_file_handler(log_dir))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if app is not None:
        logging.getLogger('werkzeug').setLevel(logging.WARNING)

    logger.info("Logging initialized: level=%s, file=%s", logging.getLevelName(level), log_dir if log_to_file else None)
    return logger
