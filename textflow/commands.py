"""
Command variants and their transitions for the TextFlow editor.

A key press is classified once (see textflow.ui.input) into one of a closed set of
commands: a Move, an Edit, an InsertPrintable or a Control. Move and Edit commands
are applied here, each by exactly one handler; Control commands (save, quit) need the
terminal and the file system and are carried out by the main loop.
"""
from dataclasses import dataclass
from enum import Enum

class Move(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"

class Edit(Enum):
    BACKSPACE = "backspace"
    FORWARD_DELETE = "forward_delete"
    NEWLINE = "newline"

class Control(Enum):
    SAVE = "save"
    QUIT = "quit"

@dataclass(frozen=True)
class InsertPrintable:
    char: str

###############################################################################
# MOVE COMMANDS (cursor and viewport only)
###############################################################################

def move_up(editor):
    cur, view = editor.cursor, editor.viewport
    if cur.line > 0:
        cur.line -= 1
        if cur.line < view.top:
            view.top -= 1
    cur.column = min(cur.column, editor.buffer.line_length(cur.line))

def move_down(editor):
    cur, view = editor.cursor, editor.viewport
    if cur.line + 1 < editor.buffer.line_count():
        cur.line += 1
        if cur.line > view.bottom:
            view.top += 1
    cur.column = min(cur.column, editor.buffer.line_length(cur.line))

def move_left(editor):
    if editor.cursor.column > 0:
        editor.cursor.column -= 1

def move_right(editor):
    if editor.cursor.column < len(editor.current_line):
        editor.cursor.column += 1

def page_step(viewport) -> int:
    """Lines a page move travels: one less than a screenful, but at least one."""
    return max(1, viewport.height - 1)

def page_down(editor):
    """
    Advance up to a page, landing the cursor on the first text row when the buffer is
    long enough; near the end the window stops at the last full screen instead.
    """
    cur, view, buf = editor.cursor, editor.viewport, editor.buffer
    step = min(page_step(view), buf.line_count() - 1 - cur.line)
    if step <= 0:
        return
    cur.line += step
    view.top = min(cur.line, max(0, buf.line_count() - view.height))
    cur.column = min(cur.column, buf.line_length(cur.line))

def page_up(editor):
    cur, view, buf = editor.cursor, editor.viewport, editor.buffer
    step = min(page_step(view), cur.line)
    if step <= 0:
        return
    cur.line -= step
    view.top = max(0, cur.line)
    cur.column = min(cur.column, buf.line_length(cur.line))

def move_home(editor):
    editor.cursor.column = 0

def move_end(editor):
    editor.cursor.column = len(editor.current_line)

MOVE_HANDLERS = {
    Move.UP: move_up,
    Move.DOWN: move_down,
    Move.LEFT: move_left,
    Move.RIGHT: move_right,
    Move.PAGE_UP: page_up,
    Move.PAGE_DOWN: page_down,
    Move.HOME: move_home,
    Move.END: move_end,
}

###############################################################################
# EDIT COMMANDS
###############################################################################

def insert_printable(editor, ch: str):
    cur = editor.cursor
    editor.buffer.insert_char(cur.line, cur.column, ch)
    cur.column += 1

def backspace(editor):
    """
    Delete left of the cursor. At column 0 the current line is joined onto the previous
    one and the cursor lands on the former boundary.
    """
    cur, buf = editor.cursor, editor.buffer
    if cur.column > 0:
        buf.delete_char_before(cur.line, cur.column)
        cur.column -= 1
    elif cur.line > 0:
        prev_len = buf.line_length(cur.line - 1)
        buf.merge_with_previous(cur.line)
        cur.line -= 1
        cur.column = prev_len
        if cur.line < editor.viewport.top:
            editor.viewport.top = cur.line

def forward_delete(editor):
    """Delete under the cursor; at the end of a line pull the next line up."""
    cur, buf = editor.cursor, editor.buffer
    if cur.column < buf.line_length(cur.line):
        buf.delete_char_at(cur.line, cur.column)
    elif cur.line + 1 < buf.line_count():
        buf.merge_with_next(cur.line)

def newline(editor):
    cur, view = editor.cursor, editor.viewport
    editor.buffer.split_line(cur.line, cur.column)
    cur.line += 1
    cur.column = 0
    if cur.line > view.bottom:
        view.top += 1

EDIT_HANDLERS = {
    Edit.BACKSPACE: backspace,
    Edit.FORWARD_DELETE: forward_delete,
    Edit.NEWLINE: newline,
}

def apply(editor, command) -> None:
    """
    Apply a Move, Edit or InsertPrintable command to `editor`, then re-clamp.
    Control commands and None (an ignored key) leave the editor untouched.
    """
    if isinstance(command, Move):
        MOVE_HANDLERS[command](editor)
    elif isinstance(command, Edit):
        EDIT_HANDLERS[command](editor)
    elif isinstance(command, InsertPrintable):
        insert_printable(editor, command.char)
    else:
        return
    editor.clamp()
