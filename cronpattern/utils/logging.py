"""Structured logging utilities for cronpattern."""

import logging
from typing import Any


def setup_logger(name: str = "cronpattern", level: int = logging.INFO) -> logging.Logger:
    """
    Configure structured logger.

    Args:
        name: Logger name
        level: Logging level

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setLevel(level)

    # Structured format (time, level, context, message)
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - [%(context)s] - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


class ContextLogger:
    """Structured logger wrapper with context information."""

    def __init__(self, logger: logging.Logger, context: dict[str, Any] | None = None) -> None:
        self.logger = logger
        self.context = context or {}

    def _format_context(self, extra_context: dict[str, Any] | None = None) -> str:
        ctx = {**self.context, **(extra_context or {})}
        return ", ".join(f"{k}={v}" for k, v in ctx.items())

    def is_enabled_for(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)

    def warning(self, message: str, **extra_context: Any) -> None:
        self.logger.warning(message, extra={"context": self._format_context(extra_context)})

    def debug(self, message: str, **extra_context: Any) -> None:
        self.logger.debug(message, extra={"context": self._format_context(extra_context)})

    def with_context(self, **context: Any) -> "ContextLogger":
        """Create logger with additional context."""
        return ContextLogger(self.logger, {**self.context, **context})


def get_logger(component: str) -> ContextLogger:
    """Package logger tagged with the emitting component."""
    return ContextLogger(setup_logger(), {"component": component})
