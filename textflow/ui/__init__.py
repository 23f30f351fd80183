from textflow.ui import input, screen
