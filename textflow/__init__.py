"""
TextFlow: a small single-file text editor for the terminal.
"""
__version__ = "1.0.0"
