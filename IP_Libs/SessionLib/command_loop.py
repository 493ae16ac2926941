"""
Text command loop for Image Processor.

Reads one command per line and runs it against an ImageSession:

    load <path>     load an image as the current image
    save <path>     save the current image
    size            print "<width> x <height>"
    exit            stop the loop
    <descriptor>    parse and apply a transformation (crop, blend, invert, ...)

Functions:
    run_command_loop: Run commands from a stream until 'exit' or end of input
    execute_command: Run a single command line
"""

import logging
from typing import TextIO

from IP_Libs.SessionLib.image_session import ImageSession
from IP_Libs.constants import (
    CMD_EXIT,
    CMD_LOAD,
    CMD_SAVE,
    CMD_SIZE,
    LOAD_USAGE,
    NO_IMAGE_MESSAGE,
    PROMPT,
    SAVE_USAGE,
)
from IP_Libs.errors import LoadError

logger = logging.getLogger(__name__)


def _write_line(output: TextIO, message: str) -> None:
    output.write(message + "\n")
    output.flush()


def execute_command(session: ImageSession, line: str, output: TextIO) -> bool:
    """
    Run one command line.

    Args:
        session: Session holding the current image
        line: Raw command line
        output: Stream for user-facing messages

    Returns:
        False if the command was 'exit', True otherwise
    """
    words = line.split()
    if not words:
        return True

    action = words[0]

    if action == CMD_EXIT:
        return False

    if action == CMD_LOAD:
        if len(words) < 2:
            _write_line(output, LOAD_USAGE)
            return True
        try:
            session.load(words[1])
        except (LoadError, OSError) as e:
            logger.warning(f"Load failed: {e}")
            _write_line(output, f"Error: cannot load image at path {words[1]}")
        return True

    if not session.has_image:
        _write_line(output, NO_IMAGE_MESSAGE)
        return True

    if action == CMD_SAVE:
        if len(words) < 2:
            _write_line(output, SAVE_USAGE)
            return True
        try:
            session.save(words[1])
        except OSError as e:
            logger.warning(f"Save failed: {e}")
            _write_line(output, f"Error: cannot save image to {words[1]}")
        return True

    if action == CMD_SIZE:
        width, height = session.size()
        _write_line(output, f"{width} x {height}")
        return True

    session.apply(line)
    return True


def run_command_loop(session: ImageSession, input_stream: TextIO, output: TextIO) -> int:
    """
    Run commands until 'exit' or end of input.

    Returns:
        Process exit code (always 0)
    """
    while True:
        output.write(PROMPT)
        output.flush()

        line = input_stream.readline()
        if not line:
            break

        if not execute_command(session, line, output):
            break

    return 0
