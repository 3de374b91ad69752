"""Core components of the Spider Rainbow service."""

from .config import Config, config
from .logger import Logger, log

__all__ = [
    "Config",
    "Logger",
    "config",
    "log",
]
