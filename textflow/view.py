"""
Cursor and viewport state for the TextFlow editor.

The cursor is an absolute (line, column) position inside the buffer. The viewport is the
window of buffer lines currently on screen: `top` is the first visible line and `height`
the number of text rows (header and status rows excluded).
"""

class Cursor:
    """Absolute edit position inside a LineBuffer."""
    def __init__(self, line: int = 0, column: int = 0):
        self.line = line
        self.column = column

    def clamp(self, buf):
        """Pull the cursor back inside `buf`'s bounds."""
        self.line = max(0, min(self.line, buf.line_count() - 1))
        self.column = max(0, min(self.column, buf.line_length(self.line)))

    def __repr__(self):
        return f"Cursor(line={self.line}, column={self.column})"


class Viewport:
    """First visible line plus the number of text rows on screen."""
    def __init__(self, height: int = 1, top: int = 0):
        self.height = max(1, height)
        self.top = top

    @property
    def bottom(self) -> int:
        """Index of the last line the window can show."""
        return self.top + self.height - 1

    def resize(self, height: int):
        self.height = max(1, height)

    def row_of(self, line: int) -> int:
        """Screen row (relative to the first text row) of buffer line `line`."""
        return line - self.top

    def visible_range(self, line_count: int) -> range:
        return range(self.top, min(self.top + self.height, line_count))

    def follow(self, line: int, line_count: int):
        """Scroll the smallest amount that puts `line` inside the window."""
        if line < self.top:
            self.top = line
        elif line > self.bottom:
            self.top = line - self.height + 1
        # A long buffer never leaves the window starting past its last line.
        if line_count > self.height:
            self.top = min(self.top, line_count - 1)
        self.top = max(0, self.top)

    def __repr__(self):
        return f"Viewport(top={self.top}, height={self.height})"
