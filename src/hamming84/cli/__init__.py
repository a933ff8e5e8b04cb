from .main import app, main
from .utils import LogFormatter, LogSettings, setup_logging

__all__ = [
    "LogFormatter",
    "LogSettings",
    "app",
    "main",
    "setup_logging",
]
