"""
Reading and writing the edited file.

Files are handled as opaque text: they are decoded as UTF-8 with `surrogateescape`, so
bytes that are not valid UTF-8 come back out unchanged on save. Lines are split on
"\\n" only and every saved line, the last one included, is terminated by "\\n".
"""
from textflow import logger

ENCODING = "utf-8"
ERRORS = "surrogateescape"

def split_lines(content: str) -> list:
    """Split file content into lines without terminators."""
    if not content:
        return [""]
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return lines

def load(path: str) -> list:
    """
    Read `path` into a list of lines.
    Raises OSError if the file cannot be opened or read.
    """
    with open(path, 'r', encoding=ENCODING, errors=ERRORS, newline='') as f:
        content = f.read()
    lines = split_lines(content)
    logger.log(f"loaded {path} ({len(lines)} lines)")
    return lines

def save(path: str, lines) -> bool:
    """
    Write `lines` to `path`, each followed by a newline.
    Returns True on success, False if the file could not be written.
    """
    try:
        with open(path, 'w', encoding=ENCODING, errors=ERRORS, newline='') as f:
            for line in lines:
                f.write(line)
                f.write("\n")
    except OSError as e:
        logger.log(f"error saving {path}: {e}")
        return False
    logger.log(f"saved {path} ({len(lines)} lines)")
    return True
