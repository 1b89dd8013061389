"""Logging setup shared by the CLI and library callers."""

from .logger import setup_logger

__all__ = [
    "setup_logger",
]
