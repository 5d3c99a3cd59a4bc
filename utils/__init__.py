"""
Utilities module for Medal Watch.
"""
from .logger import logger, init_logging, setup_logging, reset_logging

__all__ = ["logger", "init_logging", "setup_logging", "reset_logging"]
