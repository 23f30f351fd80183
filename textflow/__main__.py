"""
Main entry point and editor context for the TextFlow text editor.
"""
import curses
import os
import sys

from textflow import commands, config, logger, persistence, terminal, ui
from textflow.commands import Control
from textflow.editor import Editor

SAVE_OK_MESSAGE = "File saved successfully."
SAVE_FAILED_MESSAGE = "Failed to save the file!"

class EditorContext:
    """
    Holds everything the main loop works with: the curses window, the editor state,
    the configuration and the resolved style table for the renderer.
    """
    def __init__(self, stdscr, editor: Editor, settings: config.Config, styles: dict):
        self.stdscr = stdscr
        self.height, self.width = stdscr.getmaxyx()
        self.editor = editor
        self.config = settings
        self.styles = styles
        self.editor.resize(max(1, self.height - 2))

        # Running flag
        self.exit_flag = False

    def save_file(self):
        """Write the buffer back to its file and report the outcome on the status row."""
        editor = self.editor
        ok = persistence.save(editor.filename, editor.buffer.snapshot())
        if ok:
            editor.buffer.modified = False
        ui.screen.show_status(self, SAVE_OK_MESSAGE if ok else SAVE_FAILED_MESSAGE, ok)

    def graceful_exit(self):
        """
        Stop the main loop. Unsaved changes are discarded; curses.wrapper restores the
        terminal once main() returns.
        """
        if self.editor.modified:
            logger.log("exit with unsaved changes")
        self.exit_flag = True

def handle_key(context, key: int):
    """Classify one key press and carry out the resulting command."""
    command = ui.input.classify_key(key)
    if command is Control.QUIT:
        context.graceful_exit()
    elif command is Control.SAVE:
        context.save_file()
    else:
        commands.apply(context.editor, command)

def main(stdscr, filename: str, lines, settings: config.Config):
    curses.raw()
    try:
        curses.curs_set(1)
    except curses.error:
        pass
    theme = config.resolve_theme(settings, config.load_all_themes())
    styles = ui.screen.init_styles(theme)
    context = EditorContext(stdscr, Editor(filename, lines), settings, styles)

    # Main loop
    while not context.exit_flag:
        ui.screen.display(context)
        key = context.stdscr.getch()
        handle_key(context, key)

def print_usage(program: str):
    """Display usage info."""
    print("Program: TextFlow")
    print("Description: Edits the text file given as an argument.\n")
    print("Usage:")
    print(f"  {program} <filename>\n")
    print("Keys:")
    print("  arrows, PgUp/PgDn, Home/End  move")
    print("  Ctrl+S                       save")
    print("  Ctrl+X                       exit (unsaved changes are lost)\n")
    print("Example:")
    print(f"  {program} data.txt")

def run(argv=None) -> int:
    """
    Check the command line, load the file, then run the editor inside curses.wrapper.
    Returns the process exit status.
    """
    argv = sys.argv if argv is None else argv
    program = os.path.basename(argv[0]) if argv else "textflow"
    if program == "__main__.py":
        program = "python -m textflow"
    if len(argv) != 2:
        print_usage(program)
        return 1

    settings = config.load_config()
    logger.set_log_file(settings.log_file)

    filename = argv[1]
    try:
        lines = persistence.load(filename)
    except OSError as e:
        print(f"Cannot open file: {filename}", file=sys.stderr)
        logger.log(f"cannot open {filename}: {e}")
        return 1

    logger.log(f"editing {filename}")
    with terminal.flow_control_disabled():
        curses.wrapper(main, filename, lines, settings)
    logger.log("Editor exited.")
    return 0

if __name__ == "__main__":
    sys.exit(run())
