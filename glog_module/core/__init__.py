"""
Core module for glog

This module contains the fundamental classes:
- Logger: Named leveled logger
- LoggerRegistry: Name -> Logger table with a shared live configuration
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- LoggerConfig / SharedConfig / ConfigBuilder: Configuration management
"""

from glog_module.core.log_level import LogLevel, level_name
from glog_module.core.log_entry import LogEntry
from glog_module.core.exceptions import GlogError, HandlerWriteError
from glog_module.core.logger_config import LoggerConfig, SharedConfig
from glog_module.core.config_builder import ConfigBuilder
from glog_module.core.logger import Logger
from glog_module.core.registry import LoggerRegistry

__all__ = [
    "LogLevel",
    "level_name",
    "LogEntry",
    "GlogError",
    "HandlerWriteError",
    "LoggerConfig",
    "SharedConfig",
    "ConfigBuilder",
    "Logger",
    "LoggerRegistry",
]
