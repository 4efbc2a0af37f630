"""
Logging configuration and utilities for pattern evaluation.
"""
from .config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
