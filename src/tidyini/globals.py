from typing import Literal

TOP_LEVEL_SECTION = ""
"""Name the unnamed section (keys before any section header) is addressed by."""
SECTION_OPEN = "["
SECTION_CLOSE = "]"
LINE_BREAK = "\n"
"""The only character that ends a line."""
RENDER_SEPARATOR = " "
"""Padding put around the option delimiter when rendering."""
VALID_MARKERS = Literal[
    "!",
    '"',
    "%",
    "&",
    "/",
    "?",
    ":",
    ";",
    "#",
    "'",
    "*",
    ">",
    "<",
    "=",
]
"""Valid characters for markers (option delimiter or comment prefix)."""
