"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

glog - A lightweight leveled logging library with a Python-style API:
named loggers, severity thresholds, pluggable handlers and printf layouts
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from glog_module.core.log_level import LogLevel
from glog_module.core.log_entry import LogEntry
from glog_module.core.exceptions import GlogError, HandlerWriteError
from glog_module.core.logger_config import LoggerConfig, SharedConfig
from glog_module.core.config_builder import ConfigBuilder
from glog_module.core.logger import Logger
from glog_module.core.registry import (
    LoggerRegistry,
    configure,
    default_registry,
    fetch_log,
    get_log,
)

# Import submodules (not all classes by default)
from glog_module import formatters
from glog_module import routing
from glog_module import writers

__all__ = [
    "LogLevel",
    "LogEntry",
    "GlogError",
    "HandlerWriteError",
    "LoggerConfig",
    "SharedConfig",
    "ConfigBuilder",
    "Logger",
    "LoggerRegistry",
    "configure",
    "default_registry",
    "fetch_log",
    "get_log",
    "formatters",
    "routing",
    "writers",
]
