"""
themes.py

Holds the built-in TextFlow themes in a Python dictionary form.
Each theme maps a named style to a (foreground, background) pair of curses color names;
"default" means the terminal's own color. Any additional .py files in the user themes
directory that define `theme_name` and `theme_data` are picked up as well.
"""

STYLE_NAMES = ("normal", "gutter", "header", "success", "failure")

def get_builtin_themes():
    """
    Returns a dict mapping built-in theme names to their style definitions.
    These are the default TextFlow themes: classic, dark, mono.
    """
    return {
        "classic": {
            "normal": ("default", "default"),
            "gutter": ("cyan", "black"),
            "header": ("black", "white"),
            "success": ("green", "white"),
            "failure": ("red", "white"),
        },
        "dark": {
            "normal": ("white", "black"),
            "gutter": ("yellow", "black"),
            "header": ("white", "blue"),
            "success": ("black", "green"),
            "failure": ("white", "red"),
        },
        "mono": {
            "normal": ("default", "default"),
            "gutter": ("default", "default"),
            "header": ("black", "white"),
            "success": ("black", "white"),
            "failure": ("black", "white"),
        },
    }
