# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Error handling and logging utilities for the widget_accessibility_utility package.

This module provides the package exceptions, a standardized logger factory and
the diagnostic emission helpers used by the host hooks. Diagnostic emission is
fire-and-forget: a failing sink is logged and discarded, never propagated.
"""

import logging
import sys
from typing import Callable, Iterable, Optional

from widget_accessibility_utility.utils.report_models import DiagnosticEvent


class WidgetAccessibilityError(Exception):
    """Base exception class for all widget_accessibility_utility errors."""



class ConfigurationError(WidgetAccessibilityError):
    """Raised when there's an error in configuration."""



DiagnosticSink = Callable[[DiagnosticEvent], None]

# Diagnostic level names to logging levels
_EVENT_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
}

# Configure module-level logger
logger = logging.getLogger(__name__)


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Set up a logger with standardized formatting.

    Args:
        name: The logger name, typically __name__ of the calling module
        level: The logging level (default: INFO if not in debug mode)

    Returns:
        A configured logger instance
    """
    logger_obj = logging.getLogger(name)

    if level is None:
        # Check if root logger is in debug mode
        if logging.getLogger().level <= logging.DEBUG:
            level = logging.DEBUG
        else:
            level = logging.INFO

        logger.debug(f"Setting logger {name} level to {logging.getLevelName(level)}")

    logger_obj.setLevel(level)
    logger_obj.propagate = True

    if not logger_obj.handlers:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        logger_obj.addHandler(handler)

    return logger_obj


def log_exception(
    logger: logging.Logger,
    exception: Exception,
    message: str = "An error occurred",
    level: int = logging.ERROR,
    include_traceback: bool = True,
) -> None:
    """
    Log an exception with consistent formatting.

    Args:
        logger: The logger instance to use
        exception: The exception to log
        message: Optional custom message
        level: The logging level to use
        include_traceback: Whether to include the full traceback
    """
    error_type = type(exception).__name__
    error_message = str(exception)

    log_msg = f"{message}: {error_type} - {error_message}"

    if include_traceback:
        logger.log(level, log_msg, exc_info=True)
    else:
        logger.log(level, log_msg)


def log_diagnostic_event(event: DiagnosticEvent) -> None:
    """
    Default diagnostic sink: write the event through the package logger.

    Args:
        event: The diagnostic event to record
    """
    level = _EVENT_LEVELS.get(event.level, logging.INFO)
    diagnostics_logger.log(level, f"[ADA] {event.message} {event.fields}")


def emit_diagnostics(
    events: Iterable[DiagnosticEvent], sink: Optional[DiagnosticSink] = None
) -> int:
    """
    Hand diagnostic events to a sink, swallowing sink failures.

    Args:
        events: Events produced by a transformation
        sink: Callable receiving each event (defaults to log_diagnostic_event)

    Returns:
        Number of events the sink accepted
    """
    sink = sink or log_diagnostic_event
    delivered = 0

    for event in events:
        try:
            sink(event)
            delivered += 1
        except Exception as e:
            logger.debug(f"Diagnostic sink failed for '{event.message}': {e}")

    return delivered


diagnostics_logger = setup_logger("widget_accessibility_utility.diagnostics")
