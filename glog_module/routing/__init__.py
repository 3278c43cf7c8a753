"""Routing module - Level-based handler selection"""

from glog_module.routing.level_router import select_handlers, write_to_handlers

__all__ = [
    "select_handlers",
    "write_to_handlers",
]
