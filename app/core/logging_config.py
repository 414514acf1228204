# app/core/logging_config.py

import logging
import sys

from loguru import logger

from app.config.settings import settings


class InterceptHandler(logging.Handler):
    """Forward stdlib logging records (uvicorn, sqlalchemy, app modules) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(level: str | None = None) -> None:
    """
    Configure loguru as the main logger with colored, structured logs.
    Also redirect stdlib logging (uvicorn, sqlalchemy, app modules) to loguru.
    """
    level = (level or settings.LOG_LEVEL).upper()

    # Remove default loguru handler
    logger.remove()

    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
        "<level>{message}</level>",
        level=level,
        colorize=True,
        backtrace=False,
        diagnose=False,
    )

    # loguru-only levels (TRACE, SUCCESS) have no stdlib equivalent
    std_level = logging.getLevelName(level)
    if not isinstance(std_level, int):
        std_level = logging.DEBUG if level == "TRACE" else logging.INFO
    logging.basicConfig(handlers=[InterceptHandler()], level=std_level, force=True)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).handlers = [InterceptHandler()]
    # Quieten noisy libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
