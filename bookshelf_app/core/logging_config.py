"""
Logging for the ``bookshelf_app`` package.

Every module logs through ``logging.getLogger(__name__)``, so handlers are
attached once to the package logger: a console handler always, and a size
rotated ``bookshelf.log`` when a log directory is configured. ``LOG_JSON``
switches both to one JSON object per line.
"""

import json
import logging
import logging.handlers
import os
from typing import Optional

PACKAGE_LOGGER = 'bookshelf_app'
LOG_FILE_NAME = 'bookshelf.log'
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 3

TEXT_FORMAT = '%(asctime)s %(levelname)-7s %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class JsonFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'time': self.formatTime(record, DATE_FORMAT),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def _make_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return JsonFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(
    app=None,
    log_level: str = 'INFO',
    log_dir: Optional[str] = None,
    json_format: bool = False,
) -> logging.Logger:
    """
    Attach handlers to the package logger and return it.

    Calling this again replaces the handlers, so each app created by the
    factory (one per test) starts from a clean logger.
    """
    level = getattr(logging, str(log_level).upper(), logging.INFO)
    formatter = _make_formatter(json_format)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        rotating = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, LOG_FILE_NAME),
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding='utf-8',
        )
        rotating.setFormatter(formatter)
        logger.addHandler(rotating)

    if app is not None:
        # dev server access lines
        logging.getLogger('werkzeug').setLevel(logging.WARNING)

    logger.debug("Logging configured (level=%s, dir=%s, json=%s)", log_level, log_dir, json_format)
    return logger
