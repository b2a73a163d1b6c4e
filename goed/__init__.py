"""Building blocks of a terminal text editor: text, themes, events and syntax highlighting."""

__version__ = "0.1.2"