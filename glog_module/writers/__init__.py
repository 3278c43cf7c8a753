"""Writers module - Log output handlers"""

from glog_module.writers.console_writer import ConsoleWriter
from glog_module.writers.file_writer import FileWriter
from glog_module.writers.buffer_writer import BufferWriter

__all__ = ["ConsoleWriter", "FileWriter", "BufferWriter"]
