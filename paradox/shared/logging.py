"""
Logging setup shared by Paradox entry points.

Library modules only create ``paradox.<component>`` loggers; scripts call
setup_logging() once so every component logs with the same format.
"""

import logging


def setup_logging(name: str = "paradox", level: str = "INFO") -> logging.Logger:
    """
    Configure logging for a Paradox entry point.

    Args:
        name: Logger name to return (usually ``paradox`` or a child of it).
        level: Log level string (e.g. 'INFO', 'DEBUG').

    Returns:
        Configured logger instance.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
    )
    return logging.getLogger(name)
