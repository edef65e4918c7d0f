"""Lib module - I/O adapters.

TIER 1: May import from core only.
"""

from lib.config import clear_cache, get, get_project_root, load_config
from lib.logger import get_logger, set_log_level
from lib.pom import load_project

__all__ = [
    "clear_cache",
    "get",
    "get_logger",
    "get_project_root",
    "load_config",
    "load_project",
    "set_log_level",
]
