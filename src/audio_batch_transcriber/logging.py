import logging
import sys

from pythonjsonlogger.json import JsonFormatter


def setup_logging(level: int = logging.INFO):
    """
    Configures and sets up structured JSON logging for the application.

    This function initializes a JSON formatter that includes timestamp, level,
    logger name and message. It replaces previously installed JSON handlers of
    the root logger with a single stream handler writing to stdout so that
    every module logs in the same format. Context for a log line travels in
    ``extra``.

    Args:
        level: Logging level applied to the root logger.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [
        h for h in root_logger.handlers if not isinstance(h.formatter, JsonFormatter)
    ]
    root_logger.addHandler(stream_handler)

    for logger_name in ["httpx", "httpcore", "openai"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    return root_logger
