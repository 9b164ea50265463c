"""Core app services for identicon settings and logging."""

from .config import AppConfig, LoggingConfig, RenderConfig, config_path, load_config, save_config
from .logging_setup import JsonFormatter, configure_logging, get_logger, log_dir

__all__ = [
    "AppConfig",
    "JsonFormatter",
    "LoggingConfig",
    "RenderConfig",
    "config_path",
    "configure_logging",
    "get_logger",
    "load_config",
    "log_dir",
    "save_config",
]
