theme_name = "ocean"
# This is an example user theme.
# Copy it to ~/textflow/config/themes/ and tweak the colors to your liking.
# Each style is a (foreground, background) pair of curses color names;
# "default" keeps the terminal's own color.
theme_data = {
    # buffer text
    "normal": ("white", "blue"),
    # line-number gutter
    "gutter": ("cyan", "blue"),
    # title bar
    "header": ("blue", "cyan"),
    # "File saved successfully."
    "success": ("black", "green"),
    # "Failed to save the file!"
    "failure": ("yellow", "red"),
}
