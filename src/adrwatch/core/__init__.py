"""Configuration and logging setup"""

from .config import Config, HttpConfig
from .logging_setup import configure_logging, install_logging_bridge

__all__ = ["Config", "HttpConfig", "configure_logging", "install_logging_bridge"]
