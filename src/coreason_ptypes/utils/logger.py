# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_ptypes

import logging
import sys
from typing import Any

from loguru import logger
from opentelemetry import trace

from coreason_ptypes.config import PtypesSettings

__all__ = ["logger", "configure_logging"]


class InterceptHandler(logging.Handler):
    """
    Redirects standard logging messages to Loguru.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno  # type: ignore[assignment]

        # Find caller from where originated the logged message
        frame = logging.currentframe()
        depth = 2
        while frame and (frame.f_code.co_filename == logging.__file__ or frame.f_code.co_filename == __file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def trace_id_injector(record: dict[str, Any]) -> None:
    """
    Injects OpenTelemetry trace_id and span_id into the log record.
    Used as a patcher for Loguru.
    """
    ctx = trace.get_current_span().get_span_context()
    if ctx.is_valid:
        record["extra"]["trace_id"] = format(ctx.trace_id, "032x")
        record["extra"]["span_id"] = format(ctx.span_id, "016x")


def configure_logging(settings: PtypesSettings | None = None) -> None:
    """
    Configures the logger from PtypesSettings (PTYPES_* environment variables).
    Replaces every loguru sink and the root stdlib handlers, so only applications
    should call it; importing the package leaves logging untouched.
    Call this again to reload configuration if env vars change.

    Args:
        settings: Explicit settings. Read from the environment when omitted.
    """
    settings = settings or PtypesSettings()
    logger.enable("coreason_ptypes")
    log_level = settings.log_level

    # Drops every previously added handler, including loguru's default one
    logger.configure(handlers=[], patcher=trace_id_injector)

    if settings.log_json:
        logger.add(sys.stdout, level=log_level, serialize=True)
    else:
        format_str = (
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        )
        logger.add(sys.stderr, level=log_level, format=format_str)

    if settings.log_file is not None:
        try:
            settings.log_file.parent.mkdir(parents=True, exist_ok=True)
            logger.add(
                str(settings.log_file),
                rotation="500 MB",
                retention="10 days",
                serialize=True,
                enqueue=True,
                level=log_level,
            )
        except (PermissionError, OSError) as e:
            # Read-only filesystems keep console logging only
            logger.warning(f"File logging disabled for {settings.log_file}: {e}")

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    numeric_level = logging.getLevelName(log_level)
    if isinstance(numeric_level, int):
        logging.getLogger().setLevel(numeric_level)
    else:
        # TRACE and SUCCESS exist only in loguru
        logging.getLogger().setLevel(logging.INFO)


# Silent until the application opts in via configure_logging() or logger.enable("coreason_ptypes")
logger.disable("coreason_ptypes")
