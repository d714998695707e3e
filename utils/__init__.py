"""Utilities and helper functions.

- exceptions: error hierarchy shared by services and views
- logging: loguru setup and get_logger()
"""

from utils import exceptions, logging

__all__ = ["exceptions", "logging"]
