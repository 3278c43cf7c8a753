"""
Call stack inspection

Recovers the function and source module that issued a logging call.
Every helper takes a ``skip`` count so callers nested at different depths
inside the package can each land on the user's frame.
"""

import os
import sys
from types import FrameType
from typing import Optional

UNKNOWN_CALLER = "unknown"


def get_frame(skip: int = 0) -> Optional[FrameType]:
    """
    Return the frame ``skip`` levels above the function calling get_frame.

    Args:
        skip: 0 is the caller of get_frame itself, 1 its caller, and so on

    Returns:
        The frame, or None when the stack is not that deep
    """
    try:
        return sys._getframe(skip + 1)
    except ValueError:
        return None


def caller_function_name(skip: int = 0) -> str:
    """
    Qualified name of the function ``skip`` levels above the caller.

    With ``skip=0`` this is the function that called caller_function_name.
    The name is ``<module>.<qualname>``, e.g. ``app.jobs.Worker.run``.
    """
    frame = get_frame(skip + 1)
    if frame is None:
        return UNKNOWN_CALLER
    code = frame.f_code
    func = getattr(code, "co_qualname", code.co_name)
    module = frame.f_globals.get("__name__")
    if module:
        return f"{module}.{func}"
    return func


def caller_module_name(skip: int = 0) -> str:
    """
    Source file base name of the frame ``skip`` levels above the caller.

    Directories and every extension are stripped: ``/srv/app/jobs.py``
    becomes ``jobs``.
    """
    frame = get_frame(skip + 1)
    if frame is None:
        return UNKNOWN_CALLER
    return os.path.basename(frame.f_code.co_filename).split(".")[0]
