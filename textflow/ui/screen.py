"""
textflow/ui/screen.py

Implements all UI-drawing functionality for the TextFlow editor: the header bar, the
line-number gutter and text area, the status line, and transient status messages.
Colors are taken from a style table built once from the active theme and kept on the
context; nothing here touches global color state after init_styles().
"""
import curses
import os

from wcwidth import wcwidth

from textflow import logger

TITLE = "TextFlow"
GUTTER_SEPARATOR = "| "

COLOR_NAMES = {
    "default": -1,
    "black": curses.COLOR_BLACK,
    "red": curses.COLOR_RED,
    "green": curses.COLOR_GREEN,
    "yellow": curses.COLOR_YELLOW,
    "blue": curses.COLOR_BLUE,
    "magenta": curses.COLOR_MAGENTA,
    "cyan": curses.COLOR_CYAN,
    "white": curses.COLOR_WHITE,
}

# Used when the terminal has no colors at all
MONOCHROME_STYLES = {
    "normal": curses.A_NORMAL,
    "gutter": curses.A_DIM,
    "header": curses.A_REVERSE,
    "success": curses.A_BOLD,
    "failure": curses.A_BOLD | curses.A_REVERSE,
}

###############################################################################
# STYLES
###############################################################################

def init_styles(theme_data: dict) -> dict:
    """
    Create one curses color pair per named style and return a dict mapping the style
    name to the attribute to draw it with. Must be called after curses is initialised.
    """
    if not curses.has_colors():
        return dict(MONOCHROME_STYLES)

    curses.start_color()
    try:
        curses.use_default_colors()
        default_ok = True
    except curses.error:
        default_ok = False

    def get_basic_color(name, fallback):
        value = COLOR_NAMES.get(str(name).lower(), fallback)
        if value == -1 and not default_ok:
            return fallback
        return value

    styles = {}
    for pair_id, (style, (fg, bg)) in enumerate(theme_data.items(), start=1):
        fg_color = get_basic_color(fg, curses.COLOR_WHITE)
        bg_color = get_basic_color(bg, curses.COLOR_BLACK)
        try:
            curses.init_pair(pair_id, fg_color, bg_color)
        except curses.error:
            logger.log(f"could not init color pair for style '{style}'")
            styles[style] = MONOCHROME_STYLES.get(style, curses.A_NORMAL)
            continue
        styles[style] = curses.color_pair(pair_id)
    return styles

###############################################################################
# TEXT HELPERS
###############################################################################

# C0 controls and DEL show as their Unicode control pictures, C1 controls as U+FFFD,
# so every character of a line still takes exactly one cell.
CONTROL_GLYPHS = {code: chr(0x2400 + code) for code in range(0x20)}
CONTROL_GLYPHS[0x7f] = "\u2421"
CONTROL_GLYPHS.update({code: "\ufffd" for code in range(0x80, 0xa0)})

def cell_width(ch: str) -> int:
    """Cells one character occupies (anything wcwidth can't measure counts as one)."""
    width = wcwidth(ch)
    return width if width >= 0 else 1

def visual_width(text: str) -> int:
    """Number of terminal cells `text` occupies."""
    return sum(cell_width(ch) for ch in text)

def pad_line(text, width):
    """Pad or trim a string to match the visual width."""
    if width <= 0:
        return ""
    used = 0
    for i, ch in enumerate(text):
        w = cell_width(ch)
        if used + w > width:
            return text[:i] + " " * (width - used)
        used += w
    return text + " " * (width - used)

def printable(text: str) -> str:
    """
    Make buffer text safe for addstr: undecodable bytes become U+FFFD and control
    characters (NUL, tab, carriage return, ...) become one-cell placeholders.
    """
    text = text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
    return text.translate(CONTROL_GLYPHS)

def gutter_digits(context) -> int:
    """Digits in the line-number column: the configured minimum, wider for long buffers."""
    return max(context.config.gutter_digits, len(str(context.editor.buffer.line_count())))

def gutter_width(context) -> int:
    return gutter_digits(context) + len(GUTTER_SEPARATOR)

def gutter_label(index: int, digits: int) -> str:
    """Line-number column for buffer line `index` (0-based)."""
    return f"{index + 1:>{digits}}{GUTTER_SEPARATOR}"

###############################################################################
# DRAWING
###############################################################################

def draw_header(context):
    """Full-width header bar: file name on the left, title centered."""
    style = context.styles["header"]
    logger.safe_addstr(context.stdscr, 0, 0, " " * context.width, style)
    editor = context.editor
    name = os.path.basename(editor.filename or "") or "untitled"
    if editor.modified:
        name += "*"
    left = f" {printable(name)}"
    logger.safe_addstr(context.stdscr, 0, 0, pad_line(left, max(0, context.width // 2 - 5)), style)
    title_x = max(0, (context.width - visual_width(TITLE)) // 2)
    logger.safe_addstr(context.stdscr, 0, title_x, TITLE, style | curses.A_BOLD)

def draw_text(context):
    """Draw the visible buffer lines, each prefixed by its line number."""
    editor = context.editor
    buf, view = editor.buffer, editor.viewport
    digits = gutter_digits(context)
    text_x = gutter_width(context)
    text_width = max(0, context.width - text_x)
    for index in view.visible_range(buf.line_count()):
        row = 1 + view.row_of(index)
        logger.safe_addstr(context.stdscr, row, 0, gutter_label(index, digits), context.styles["gutter"])
        text = pad_line(printable(buf.line_at(index)), text_width)
        logger.safe_addstr(context.stdscr, row, text_x, text, context.styles["normal"])

def status_row(context) -> int:
    return context.height - 1

def draw_status_line(context):
    """Bottom row: cursor position and line count."""
    editor = context.editor
    cur = editor.cursor
    info = (f" Ln {cur.line + 1}, Col {cur.column + 1}  "
            f"{editor.buffer.line_count()} lines  ^S save  ^X exit ")
    # The bottom-right cell cannot be written without curses raising, so stop short of it.
    logger.safe_addstr(context.stdscr, status_row(context), 0,
                       pad_line(info, context.width - 1), context.styles["normal"])

def place_cursor(context):
    """Put the terminal cursor on the edit position, right of the gutter."""
    editor = context.editor
    y = 1 + editor.viewport.row_of(editor.cursor.line)
    x = gutter_width(context) + editor.cursor.column
    try:
        context.stdscr.move(y, x)
    except curses.error:
        # Past the right edge: long lines are clipped, not scrolled horizontally.
        pass

def display(context):
    """
    Re-draw the entire screen: header, text area, status line, then the cursor.
    Re-reads the terminal size first so a resize only changes the viewport height.
    """
    context.height, context.width = context.stdscr.getmaxyx()
    context.editor.resize(max(1, context.height - 2))
    context.stdscr.erase()
    draw_header(context)
    draw_text(context)
    draw_status_line(context)
    place_cursor(context)
    context.stdscr.refresh()

def show_status(context, message: str, success: bool):
    """
    Show `message` on the status row in the success or failure style and hold it there
    for the configured duration. No input is read while it is displayed.
    """
    style = context.styles["success" if success else "failure"]
    logger.safe_addstr(context.stdscr, status_row(context), 0,
                       pad_line(f" {message}", context.width - 1), style)
    context.stdscr.refresh()
    curses.napms(context.config.status_duration_ms)
