"""
Editor state for TextFlow: the buffer, the cursor and the viewport that move together.
"""
from textflow.buffer import LineBuffer
from textflow.view import Cursor, Viewport

class Editor:
    """
    Holds the one open file and its edit position.

    Every command handler leaves the three entities consistent by finishing with clamp():
    the cursor stays inside the buffer and the viewport always shows the cursor line.
    """
    def __init__(self, filename: str = None, lines=None, height: int = 1):
        self.filename = filename
        self.buffer = LineBuffer(lines)
        self.cursor = Cursor()
        self.viewport = Viewport(height)

    @property
    def current_line(self) -> str:
        return self.buffer.line_at(self.cursor.line)

    @property
    def modified(self) -> bool:
        return self.buffer.modified

    def clamp(self):
        """Re-establish the cursor and viewport invariants."""
        self.cursor.clamp(self.buffer)
        self.viewport.follow(self.cursor.line, self.buffer.line_count())

    def resize(self, height: int):
        """Apply a new text-area height (e.g. after a terminal resize)."""
        self.viewport.resize(height)
        self.clamp()
