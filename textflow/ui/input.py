"""
Input handling for the TextFlow editor.

Turns raw curses key codes into the editor's command variants. This is the only place
that knows about terminal key encodings.
"""
import curses
from textflow.commands import Move, Edit, Control, InsertPrintable

CTRL_S = 19  # save
CTRL_X = 24  # quit

MOVE_KEYS = {
    curses.KEY_UP: Move.UP,
    curses.KEY_DOWN: Move.DOWN,
    curses.KEY_LEFT: Move.LEFT,
    curses.KEY_RIGHT: Move.RIGHT,
    curses.KEY_PPAGE: Move.PAGE_UP,
    curses.KEY_NPAGE: Move.PAGE_DOWN,
    curses.KEY_HOME: Move.HOME,
    curses.KEY_END: Move.END,
}

EDIT_KEYS = {
    curses.KEY_BACKSPACE: Edit.BACKSPACE,
    127: Edit.BACKSPACE,
    8: Edit.BACKSPACE,
    curses.KEY_DC: Edit.FORWARD_DELETE,
    curses.KEY_ENTER: Edit.NEWLINE,
    10: Edit.NEWLINE,
    13: Edit.NEWLINE,
}

CONTROL_KEYS = {
    CTRL_S: Control.SAVE,
    CTRL_X: Control.QUIT,
}

def classify_key(key: int):
    """Return the command bound to `key`, or None when the key is ignored."""
    if key in CONTROL_KEYS:
        return CONTROL_KEYS[key]
    if key in MOVE_KEYS:
        return MOVE_KEYS[key]
    if key in EDIT_KEYS:
        return EDIT_KEYS[key]
    if 32 <= key <= 126:
        return InsertPrintable(chr(key))
    return None
