"""Ini entities are either a section name, an option or a comment."""

from typing import overload, Self, TypeAlias
from dataclasses import dataclass
from .exceptions_warnings import ExtractionError
from .globals import (
    VALID_MARKERS,
    SECTION_OPEN,
    SECTION_CLOSE,
    RENDER_SEPARATOR,
    LINE_BREAK,
)


def is_comment(
    line: str, prefix: VALID_MARKERS | tuple[VALID_MARKERS, ...] | None = None
) -> bool:
    """Check whether a stripped line is a full-line comment.

    Args:
        line (str): The stripped line.
        prefix (VALID_MARKERS | tuple[VALID_MARKERS, ...] | None, optional):
            One or more prefixes that can denote a comment. Defaults to None.

    Returns:
        bool: Whether line starts with one of the prefixes.
    """
    if prefix is None:
        return False
    if not isinstance(prefix, tuple):
        prefix = (prefix,)
    return line.startswith(prefix)


OptionValue: TypeAlias = str
"""An option's raw value."""
OptionKey: TypeAlias = str
"""An option's key."""


@dataclass(slots=True)
class Option:
    """Key and raw value of one option line."""

    key: OptionKey
    value: OptionValue = ""

    def to_string(
        self,
        delimiter: VALID_MARKERS,
        comment_prefixes: tuple[VALID_MARKERS, ...] = (),
    ) -> str:
        """Convert the Option into an ini string.

        Args:
            delimiter (VALID_MARKERS): The delimiter to use for separating option key
                and value.
            comment_prefixes (tuple[VALID_MARKERS, ...], optional): Prefixes the key
                must not start with. Defaults to ().

        Raises:
            ValueError: If the line would not read back as the same key and value.

        Returns:
            str: The ini string (without trailing whitespace for empty values).
        """
        if not self.key:
            raise ValueError("Option has no key.")
        if self.key != self.key.strip():
            raise ValueError("Option key has leading or trailing whitespace.")
        if delimiter in self.key:
            raise ValueError(f"Option key contains the delimiter '{delimiter}'.")
        if self.key.startswith(SECTION_OPEN):
            raise ValueError("Option key starts with a section bracket.")
        if is_comment(self.key, comment_prefixes):
            raise ValueError("Option key starts with a comment prefix.")
        if self.value != self.value.strip():
            raise ValueError("Option value has leading or trailing whitespace.")
        if LINE_BREAK in self.key or LINE_BREAK in self.value:
            raise ValueError("Option contains a line break.")
        return f"{self.key}{RENDER_SEPARATOR}{delimiter}{RENDER_SEPARATOR}{self.value}".rstrip()

    @classmethod
    def from_string(cls, string: str, delimiter: VALID_MARKERS) -> Self:
        """Create an Option from a stripped ini line.

        The line is split on the first delimiter. A line without delimiter is a
        key-only option with an empty value.

        Args:
            string (str): The string that contains the option key and value.
            delimiter (VALID_MARKERS): The delimiter that separates key and value.

        Raises:
            ExtractionError: If no key could be extracted.

        Returns:
            Self: A new option with the extracted key and value.
        """
        key, _, value = string.partition(delimiter)
        key = key.strip()
        if not key:
            raise ExtractionError("Option has no key.")
        if delimiter not in string and (SECTION_OPEN in key or SECTION_CLOSE in key):
            raise ExtractionError("Key-only option contains section brackets.")
        return cls(key=key, value=value.strip())


class SectionName(str):
    """A configuration section's name."""

    @overload
    def __new__(cls, name: str = ..., name_with_brackets: None = ...) -> Self: ...

    @overload
    def __new__(cls, name: None = ..., name_with_brackets: str = ...) -> Self: ...

    def __new__(
        cls, name: str | None = None, name_with_brackets: str | None = None
    ) -> Self:
        """
        Args:
            name (str | None, optional): Name of the section. Should be
                None if name_with_brackets is provided, otherwise name_with_brackets
                will be ignored. Defaults to None.
            name_with_brackets (str | None, optional): The name of the section within
                brackets (to extract the name from). If provided, name argument should
                be None, otherwise will be ignored. Defaults to None.

        Raises:
            ExtractionError: If name_with_brackets is no section header at all.
            ValueError: If name_with_brackets is an unterminated or empty header.
        """
        if name is not None:
            return super().__new__(cls, name)
        if name_with_brackets is not None:
            header = name_with_brackets.strip()
            if not header.startswith(SECTION_OPEN):
                raise ExtractionError(
                    f"Could not extract section name from {name_with_brackets}"
                )
            if not header.endswith(SECTION_CLOSE) or len(header) < 2:
                raise ValueError("Unterminated section header.")
            if not (section_name := header[1:-1].strip()):
                raise ValueError("Empty section name.")
            return super().__new__(cls, section_name)
        raise ValueError(
            "name or name_with_brackets must be provided for"
            " initialization of a SectionName"
        )

    def to_string(self) -> str:
        """Convert the SectionName into an ini header.

        Raises:
            ValueError: If the header would not read back as the same name.
        """
        if not self or self != self.strip():
            raise ValueError("Section name is empty or has leading or trailing whitespace.")
        if LINE_BREAK in self:
            raise ValueError("Section name contains a line break.")
        return f"{SECTION_OPEN}{self}{SECTION_CLOSE}"
