"""tidyini-specific exceptions and warnings"""

# ---------- #
# Exceptions
# ---------- #


class IniError(Exception):
    """Base for every error raised while loading or writing an ini."""


class IniSyntaxError(IniError):
    """Raised when a line violates the ini grammar."""

    def __init__(self, message: str, lineno: int | None = None, line: str = "") -> None:
        self.lineno = lineno
        self.line = line
        if lineno is not None:
            message = f"Line {lineno}: {message} ({line!r})"
        super().__init__(message)


class IniFileError(IniError):
    """Raised when an ini file could not be read, decoded or written."""

    def __init__(self, message: str, path: object = None) -> None:
        self.path = path
        super().__init__(message)


class IniRenderError(IniError):
    """Raised when an entry can't be rendered as a line that reads back unchanged."""


class ExtractionError(Exception):
    """Raised when an entity could not be extracted."""


class WrongType(Exception):
    """Raised when a raw value can't be converted to the requested type."""


# ---------- #
# Warnings
# ---------- #


class IniStructureWarning(Warning):
    """Raised when the ini is readable but structured questionably."""


class DuplicateOptionWarning(IniStructureWarning):
    """Raised when a key is assigned more than once within the same section."""
