"""
SessionLib - Session state and command loop

This module holds the current-image session and the text command
loop that drives it.
"""

from IP_Libs.SessionLib.image_session import ImageSession
from IP_Libs.SessionLib.command_loop import execute_command, run_command_loop

__all__ = [
    "ImageSession",
    "execute_command",
    "run_command_loop",
]
