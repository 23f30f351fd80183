"""
Configuration for the TextFlow editor.

Settings are read from ~/textflow/config/textflow.conf (or the file named by the
TEXTFLOW_CONFIG environment variable) as `key=value` lines; `#` starts a comment.
Problems are logged and the default value is kept, a broken config never stops the editor.
"""
import importlib.util
import os
from dataclasses import dataclass

from textflow import logger, themes

CONFIG_DIR = os.path.expanduser("~/textflow/config")
CONFIG_PATH = os.path.join(CONFIG_DIR, "textflow.conf")
THEMES_DIR = os.path.join(CONFIG_DIR, "themes")

@dataclass
class Config:
    theme: str = "classic"
    status_duration_ms: int = 1000
    gutter_digits: int = 4
    log_file: str = logger.LOG_FILE_PATH

# integer keys and their minimum value
_INT_KEYS = {
    "status_duration_ms": 0,
    "gutter_digits": 1,
}
_STR_KEYS = ("theme", "log_file")

def config_path() -> str:
    return os.environ.get("TEXTFLOW_CONFIG", CONFIG_PATH)

def parse_config(text: str, config: Config = None) -> Config:
    """Apply the `key=value` lines of `text` on top of `config` (defaults if None)."""
    config = config or Config()
    for lineno, raw in enumerate(text.splitlines(), 1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        if "=" not in line:
            logger.log(f"config line {lineno}: expected key=value, got '{raw}'")
            continue
        key, value = (part.strip() for part in line.split("=", 1))
        if key in _INT_KEYS:
            try:
                number = int(value)
            except ValueError:
                logger.log(f"config line {lineno}: {key} needs an integer, got '{value}'")
                continue
            setattr(config, key, max(_INT_KEYS[key], number))
        elif key in _STR_KEYS:
            if value:
                setattr(config, key, value)
        else:
            logger.log(f"config line {lineno}: unknown key '{key}'")
    return config

def load_config(path: str = None) -> Config:
    """Read the config file; a missing file just means defaults."""
    path = path or config_path()
    if not os.path.isfile(path):
        return Config()
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except OSError as e:
        logger.log(f"error reading config {path}: {e}")
        return Config()
    return parse_config(text)

def load_all_themes(themes_dir: str = THEMES_DIR) -> dict:
    """
    Return the built-in themes plus any user themes found in `themes_dir`.
    A user theme is a .py file defining `theme_name` (str) and `theme_data` (dict).
    """
    available = dict(themes.get_builtin_themes())
    if not os.path.isdir(themes_dir):
        return available

    for fname in sorted(os.listdir(themes_dir)):
        if not fname.endswith(".py") or fname == "__init__.py":
            continue
        full_path = os.path.join(themes_dir, fname)
        spec = importlib.util.spec_from_file_location("textflow_custom_theme", full_path)
        if not spec or not spec.loader:
            continue
        mod = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(mod)
        except Exception as e:
            logger.log(f"skipping broken theme {full_path}: {e}")
            continue
        if hasattr(mod, "theme_name") and isinstance(getattr(mod, "theme_data", None), dict):
            available[mod.theme_name] = mod.theme_data
        else:
            logger.log(f"skipping {full_path}: no theme_name/theme_data")
    return available

def resolve_theme(config: Config, available: dict) -> dict:
    """
    Return the style table for the configured theme, falling back to "classic".
    Styles missing from a user theme are taken from "classic".
    """
    base = themes.get_builtin_themes()["classic"]
    data = available.get(config.theme)
    if data is None:
        logger.log(f"unknown theme '{config.theme}', using classic")
        return dict(base)
    return {name: data.get(name, base[name]) for name in themes.STYLE_NAMES}
