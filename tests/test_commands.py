"""
Tests for the Move and Edit command transitions and the cursor/viewport invariants
"""
import random
import unittest

from textflow import commands
from textflow.commands import Move, Edit, InsertPrintable
from textflow.editor import Editor


def make_editor(lines, height=10, line=0, column=0, top=0):
    editor = Editor("test.txt", lines, height=height)
    editor.cursor.line = line
    editor.cursor.column = column
    editor.viewport.top = top
    return editor


def numbered(count):
    return [f"line {i}" for i in range(count)]


class TestMoveCommands(unittest.TestCase):

    def test_left_right_stay_on_line(self):
        editor = make_editor(["ab", "cd"], line=1)
        commands.apply(editor, Move.LEFT)
        self.assertEqual((editor.cursor.line, editor.cursor.column), (1, 0))
        commands.apply(editor, Move.RIGHT)
        commands.apply(editor, Move.RIGHT)
        commands.apply(editor, Move.RIGHT)
        self.assertEqual((editor.cursor.line, editor.cursor.column), (1, 2))

    def test_home_end(self):
        editor = make_editor(["hello"], column=2)
        commands.apply(editor, Move.END)
        self.assertEqual(editor.cursor.column, 5)
        commands.apply(editor, Move.HOME)
        self.assertEqual(editor.cursor.column, 0)

    def test_down_clamps_column_to_shorter_line(self):
        editor = make_editor(["abcdef", "xy"], column=5)
        commands.apply(editor, Move.DOWN)
        self.assertEqual((editor.cursor.line, editor.cursor.column), (1, 2))

    def test_up_clamps_column_and_does_not_remember_it(self):
        editor = make_editor(["abcdef", "xy", "abcdef"], line=2, column=6)
        commands.apply(editor, Move.UP)
        commands.apply(editor, Move.UP)
        self.assertEqual((editor.cursor.line, editor.cursor.column), (0, 2))

    def test_down_at_last_line_is_noop(self):
        editor = make_editor(["a", "b"], line=1, column=1)
        commands.apply(editor, Move.DOWN)
        self.assertEqual((editor.cursor.line, editor.cursor.column), (1, 1))

    def test_down_scrolls_one_line_past_window(self):
        editor = make_editor(numbered(10), height=3)
        for _ in range(3):
            commands.apply(editor, Move.DOWN)
        self.assertEqual(editor.cursor.line, 3)
        self.assertEqual(editor.viewport.top, 1)
        self.assertEqual(editor.viewport.row_of(editor.cursor.line), 2)

    def test_up_scrolls_back_at_first_row(self):
        editor = make_editor(numbered(10), height=3, line=3, top=1)
        commands.apply(editor, Move.UP)
        commands.apply(editor, Move.UP)
        self.assertEqual(editor.viewport.top, 1)
        commands.apply(editor, Move.UP)
        self.assertEqual((editor.cursor.line, editor.viewport.top), (0, 0))

    def test_page_down(self):
        editor = make_editor(numbered(10), height=4)
        commands.apply(editor, Move.PAGE_DOWN)
        self.assertEqual((editor.cursor.line, editor.viewport.top), (3, 3))
        commands.apply(editor, Move.PAGE_DOWN)
        self.assertEqual((editor.cursor.line, editor.viewport.top), (6, 6))
        # Near the end the window stops at the last full screen.
        commands.apply(editor, Move.PAGE_DOWN)
        self.assertEqual((editor.cursor.line, editor.viewport.top), (9, 6))
        commands.apply(editor, Move.PAGE_DOWN)
        self.assertEqual((editor.cursor.line, editor.viewport.top), (9, 6))

    def test_page_down_short_buffer_keeps_top_at_zero(self):
        editor = make_editor(numbered(3), height=10)
        commands.apply(editor, Move.PAGE_DOWN)
        self.assertEqual((editor.cursor.line, editor.viewport.top), (2, 0))

    def test_page_up(self):
        editor = make_editor(numbered(10), height=4, line=9, top=6)
        commands.apply(editor, Move.PAGE_UP)
        self.assertEqual((editor.cursor.line, editor.viewport.top), (6, 6))
        commands.apply(editor, Move.PAGE_UP)
        commands.apply(editor, Move.PAGE_UP)
        self.assertEqual((editor.cursor.line, editor.viewport.top), (0, 0))
        commands.apply(editor, Move.PAGE_UP)
        self.assertEqual((editor.cursor.line, editor.viewport.top), (0, 0))

    def test_page_moves_clamp_column(self):
        editor = make_editor(["long line here", "x", "y", "z", "ab"], height=3, column=10)
        commands.apply(editor, Move.PAGE_DOWN)
        self.assertEqual((editor.cursor.line, editor.cursor.column), (2, 1))

    def test_page_moves_with_single_row_window(self):
        editor = make_editor(numbered(5), height=1)
        commands.apply(editor, Move.PAGE_DOWN)
        self.assertEqual((editor.cursor.line, editor.viewport.top), (1, 1))
        commands.apply(editor, Move.PAGE_UP)
        self.assertEqual((editor.cursor.line, editor.viewport.top), (0, 0))


class TestEditCommands(unittest.TestCase):

    def test_insert_printable(self):
        editor = make_editor(["hllo"], column=1)
        commands.apply(editor, InsertPrintable("e"))
        self.assertEqual(editor.buffer.lines, ["hello"])
        self.assertEqual(editor.cursor.column, 2)
        self.assertTrue(editor.modified)

    def test_backspace_inside_line(self):
        editor = make_editor(["abc"], column=2)
        commands.apply(editor, Edit.BACKSPACE)
        self.assertEqual(editor.buffer.lines, ["ac"])
        self.assertEqual(editor.cursor.column, 1)

    def test_backspace_at_column_zero_merges(self):
        editor = make_editor(["abc", "de"], line=1, column=0)
        commands.apply(editor, Edit.BACKSPACE)
        self.assertEqual(editor.buffer.lines, ["abcde"])
        self.assertEqual((editor.cursor.line, editor.cursor.column), (0, 3))

    def test_backspace_at_buffer_start_is_noop(self):
        editor = make_editor(["abc", "de"])
        commands.apply(editor, Edit.BACKSPACE)
        self.assertEqual(editor.buffer.lines, ["abc", "de"])
        self.assertFalse(editor.modified)

    def test_backspace_merge_scrolls_up_from_first_row(self):
        editor = make_editor(numbered(5), height=2, line=2, top=2)
        commands.apply(editor, Edit.BACKSPACE)
        self.assertEqual((editor.cursor.line, editor.viewport.top), (1, 1))
        self.assertEqual(editor.buffer.line_at(1), "line 1line 2")

    def test_forward_delete_inside_line(self):
        editor = make_editor(["abc"], column=1)
        commands.apply(editor, Edit.FORWARD_DELETE)
        self.assertEqual(editor.buffer.lines, ["ac"])
        self.assertEqual(editor.cursor.column, 1)

    def test_forward_delete_at_line_end_merges_next(self):
        editor = make_editor(["abc", "de"], column=3)
        commands.apply(editor, Edit.FORWARD_DELETE)
        self.assertEqual(editor.buffer.lines, ["abcde"])
        self.assertEqual((editor.cursor.line, editor.cursor.column), (0, 3))

    def test_forward_delete_at_buffer_end_is_noop(self):
        editor = make_editor(["abc", "de"], line=1, column=2)
        commands.apply(editor, Edit.FORWARD_DELETE)
        self.assertEqual(editor.buffer.lines, ["abc", "de"])

    def test_newline_splits(self):
        editor = make_editor(["hello"], column=2)
        commands.apply(editor, Edit.NEWLINE)
        self.assertEqual(editor.buffer.lines, ["he", "llo"])
        self.assertEqual((editor.cursor.line, editor.cursor.column), (1, 0))

    def test_newline_on_last_row_scrolls(self):
        editor = make_editor(["a", "b", "c"], height=2, line=1, column=1)
        commands.apply(editor, Edit.NEWLINE)
        self.assertEqual(editor.buffer.lines, ["a", "b", "", "c"])
        self.assertEqual(editor.cursor.line, 2)
        self.assertEqual(editor.viewport.top, 1)

    def test_single_empty_line_buffer(self):
        editor = make_editor([""])
        for command in (Edit.BACKSPACE, Edit.FORWARD_DELETE, Move.PAGE_UP, Move.PAGE_DOWN):
            commands.apply(editor, command)
            self.assertEqual(editor.buffer.lines, [""])
            self.assertEqual((editor.cursor.line, editor.cursor.column), (0, 0))
        self.assertFalse(editor.modified)
        commands.apply(editor, InsertPrintable("a"))
        self.assertEqual(editor.buffer.lines, ["a"])
        self.assertEqual(editor.buffer.line_count(), 1)

    def test_none_and_control_commands_do_not_touch_editor(self):
        editor = make_editor(["abc"], column=1)
        commands.apply(editor, None)
        commands.apply(editor, commands.Control.SAVE)
        self.assertEqual(editor.buffer.lines, ["abc"])
        self.assertEqual(editor.cursor.column, 1)


class TestInvariants(unittest.TestCase):
    """Random command sequences never leave the editor in an inconsistent state."""

    COMMANDS = list(Move) + list(Edit) + [InsertPrintable("x"), InsertPrintable(" ")]

    def assert_consistent(self, editor):
        buf, cur, view = editor.buffer, editor.cursor, editor.viewport
        self.assertGreaterEqual(buf.line_count(), 1)
        self.assertTrue(0 <= cur.line < buf.line_count())
        self.assertTrue(0 <= cur.column <= buf.line_length(cur.line))
        self.assertTrue(view.top <= cur.line <= view.top + view.height - 1)
        self.assertGreaterEqual(view.top, 0)
        if buf.line_count() > view.height:
            self.assertLessEqual(view.top, buf.line_count() - 1)

    def test_random_sequences(self):
        rng = random.Random(1234)
        for height in (1, 2, 3, 7):
            editor = make_editor(["alpha", "", "beta gamma", "d"], height=height)
            for _ in range(1500):
                commands.apply(editor, rng.choice(self.COMMANDS))
                self.assert_consistent(editor)

    def test_resize_keeps_cursor_visible(self):
        editor = make_editor(numbered(30), height=20, line=19)
        editor.resize(5)
        self.assertEqual(editor.viewport.height, 5)
        self.assertEqual(editor.viewport.top, 15)
        self.assert_consistent(editor)


if __name__ == '__main__':
    unittest.main()
