"""
Buffer module for the TextFlow editor.

Defines the LineBuffer class that owns the text of the open file as an ordered list of
lines (without line terminators) and the splice primitives every edit is built from.
The buffer never holds fewer than one line: an empty file is a single empty line.
"""

class LineBuffer:
    """Ordered sequence of text lines with character and line splice operations."""
    def __init__(self, lines=None):
        self.lines = [""]
        self.modified = False
        if lines is not None:
            self.load(lines)

    def load(self, lines):
        """Replace the whole content with `lines` (an empty sequence becomes one empty line)."""
        self.lines = list(lines) or [""]
        self.modified = False

    def line_count(self) -> int:
        return len(self.lines)

    def line_at(self, index: int) -> str:
        """Return the line at `index`; raises IndexError outside 0..line_count()-1."""
        self._check_line(index)
        return self.lines[index]

    def line_length(self, index: int) -> int:
        return len(self.line_at(index))

    def _check_line(self, index: int):
        if not 0 <= index < len(self.lines):
            raise IndexError(f"line {index} out of range (0..{len(self.lines) - 1})")

    def insert_char(self, line: int, col: int, ch: str):
        """Insert `ch` before column `col` of `line`."""
        text = self.line_at(line)
        if not 0 <= col <= len(text):
            raise IndexError(f"column {col} out of range for line {line}")
        self.lines[line] = text[:col] + ch + text[col:]
        self.modified = True

    def delete_char_before(self, line: int, col: int):
        """Remove the character left of column `col`."""
        text = self.line_at(line)
        if not 0 < col <= len(text):
            raise IndexError(f"no character before column {col} on line {line}")
        self.lines[line] = text[:col - 1] + text[col:]
        self.modified = True

    def delete_char_at(self, line: int, col: int):
        """Remove the character under column `col`."""
        text = self.line_at(line)
        if not 0 <= col < len(text):
            raise IndexError(f"no character at column {col} on line {line}")
        self.lines[line] = text[:col] + text[col + 1:]
        self.modified = True

    def split_line(self, line: int, col: int):
        """Split `line` at `col`, moving the remainder to a new line right below it."""
        text = self.line_at(line)
        if not 0 <= col <= len(text):
            raise IndexError(f"column {col} out of range for line {line}")
        self.lines[line] = text[:col]
        self.lines.insert(line + 1, text[col:])
        self.modified = True

    def merge_with_previous(self, line: int):
        """Append `line` to the line above it and remove `line`."""
        self._check_line(line)
        if line == 0:
            raise IndexError("first line has no previous line")
        self.lines[line - 1] += self.lines.pop(line)
        self.modified = True

    def merge_with_next(self, line: int):
        """Append the line below `line` to it and remove the line below."""
        self._check_line(line)
        if line + 1 >= len(self.lines):
            raise IndexError("last line has no next line")
        self.lines[line] += self.lines.pop(line + 1)
        self.modified = True

    def snapshot(self) -> list:
        """Copy of the lines, for persistence."""
        return list(self.lines)
