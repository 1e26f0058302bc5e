# utils/logger.py
# Thin wrapper over stdlib logging so modules can log one-liners

import logging

LOGGER_NAME = "quelpoke"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(level: str = "INFO"):
    """configure the root handler once (safe to call again)"""
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(str(level).upper())


def log_action(message: str, level: str = "info"):
    log = getattr(logger, level.lower(), logger.info)
    log(message)
