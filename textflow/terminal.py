"""
Terminal mode handling for TextFlow.

curses.wrapper already restores cbreak/echo/keypad state on exit. On top of that the
editor needs Ctrl+S to reach it as a key, so software flow control (IXON) is switched off
for the whole session and the previous settings are put back on every exit path.
"""
import contextlib
import sys
import termios

from textflow import logger

@contextlib.contextmanager
def flow_control_disabled(stream=None):
    """Turn off XON/XOFF on `stream` (stdin by default) for the duration of the block."""
    stream = stream or sys.stdin
    try:
        fd = stream.fileno()
        saved = termios.tcgetattr(fd)
    except (OSError, ValueError, termios.error) as e:
        # Not a terminal (piped input, test runner): nothing to change or restore.
        logger.log(f"flow control left unchanged: {e}")
        yield
        return

    attrs = termios.tcgetattr(fd)
    attrs[0] &= ~termios.IXON
    termios.tcsetattr(fd, termios.TCSANOW, attrs)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)
