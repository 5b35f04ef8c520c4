import logging
import os
import sys

from pythonjsonlogger import jsonlogger

HANDLER_NAME = "transcriber-json"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def _json_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
        )
    )
    return handler


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configures structured JSON logging for the service.

    Every record is rendered as a single JSON object carrying timestamp,
    level, logger name, message and the Datadog trace_id/span_id pair, plus
    any fields passed through ``extra``. External tool output is streamed
    through the same handler, so a tool's diagnostics land next to the
    pipeline events for the session that produced them.

    Every module calls this at import. The stdout handler is installed once
    on the root logger and shared with the Uvicorn loggers; later calls only
    adjust the level.

    Args:
        level: Log level name. Defaults to the LOG_LEVEL environment
            variable, or INFO.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    handler = next(
        (h for h in root_logger.handlers if h.get_name() == HANDLER_NAME), None
    )
    if handler is None:
        handler = _json_handler()
        root_logger.addHandler(handler)

    for logger_name in UVICORN_LOGGERS:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(level)
        u_logger.handlers = [handler]
        u_logger.propagate = False

    return root_logger
