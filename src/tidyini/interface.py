"""Interface classes and functions for coder interaction: the Dictionary holding
an ini's content and the functions loading and writing it."""

from typing import Any, Iterator, TypeVar
from pathlib import Path
import warnings
from charset_normalizer import from_bytes as read_from_bytes
from .exceptions_warnings import (
    ExtractionError,
    IniSyntaxError,
    IniFileError,
    IniRenderError,
    WrongType,
    DuplicateOptionWarning,
)
from .entities import is_comment, Option, SectionName
from .args import Parameters
from .globals import TOP_LEVEL_SECTION, LINE_BREAK
from .type_converters.converters import (
    TypeConverter,
    Renderer,
    to_string,
    to_int,
    to_float,
    render_bool,
    render_int,
    render_float,
)

T = TypeVar("T")


class Dictionary:
    """The content of an ini: section name -> key -> raw string value.

    The top-level section (keys before any section header) is addressed with an
    empty string. Values are always stored as strings; typed getters convert on
    read and typed setters render on write.

    Not safe for concurrent mutation; serialize access externally if needed.
    """

    def __init__(self, parameters: Parameters | None = None) -> None:
        """
        Args:
            parameters (Parameters | None, optional): Parameters for bool conversion
                and rendering. If None, will use default Parameters. Defaults to None.
        """
        self.parameters = Parameters() if parameters is None else parameters
        self._sections: dict[str, dict[str, str]] = {TOP_LEVEL_SECTION: {}}

    # ----------
    # typed getters
    # ----------

    def _get(
        self, section: str, key: str, type_converter: TypeConverter[T], zero: T
    ) -> tuple[T, bool]:
        """Look up a raw value and convert it.

        Args:
            section (str): Name of the section.
            key (str): The option key.
            type_converter (TypeConverter[T]): Converter to apply to the raw value.
            zero (T): Value to return if the lookup or the conversion fails.

        Returns:
            tuple[T, bool]: The converted value and True, or zero and False.
        """
        try:
            raw = self._sections[section][key]
        except KeyError:
            return zero, False
        try:
            return type_converter(raw), True
        except WrongType:
            return zero, False

    def get_string(self, section: str, key: str) -> tuple[str, bool]:
        """Get the raw value of an option. Found for empty values too."""
        return self._get(section, key, to_string, "")

    def get_bool(self, section: str, key: str) -> tuple[bool, bool]:
        """Get an option as bool. Only the literals of the Dictionary's
        parameters (case-insensitive) are booleans."""
        return self._get(section, key, self.parameters.bool_converter, False)

    def get_int(self, section: str, key: str) -> tuple[int, bool]:
        return self._get(section, key, to_int, 0)

    def get_double(self, section: str, key: str) -> tuple[float, bool]:
        return self._get(section, key, to_float, 0.0)

    # ----------
    # typed setters
    # ----------

    def _set(self, section: str, key: str, value: T, renderer: Renderer[T]) -> None:
        self._sections.setdefault(section, {})[key] = renderer(value)

    def set_string(self, section: str, key: str, value: str) -> None:
        self._set(section, key, value, str)

    def set_bool(self, section: str, key: str, value: bool) -> None:
        self._set(section, key, value, render_bool)

    def set_int(self, section: str, key: str, value: int) -> None:
        self._set(section, key, value, render_int)

    def set_double(self, section: str, key: str, value: float) -> None:
        """Set a float option, rendered in its shortest round-trippable form
        (5.0 is stored as "5")."""
        self._set(section, key, value, render_float)

    # ----------
    # structure
    # ----------

    def add_section(self, section: str) -> None:
        """Add an empty section. Does nothing if the section already exists."""
        self._sections.setdefault(section, {})

    def has_section(self, section: str) -> bool:
        return section in self

    def has_key(self, section: str, key: str) -> bool:
        return key in self._sections.get(section, {})

    def keys(self, section: str) -> list[str]:
        """Keys of a section in insertion order (empty if section is missing)."""
        return list(self._sections.get(section, {}))

    def get_sections(self) -> list[str]:
        """Get the names of all sections.

        The top-level section ("") is only included if it holds at least one key.
        Named sections are included in insertion order.

        Returns:
            list[str]: The section names.
        """
        return [
            name
            for name, pairs in self._sections.items()
            if name != TOP_LEVEL_SECTION or pairs
        ]

    def delete(self, section: str, key: str) -> None:
        """Delete an option. Does nothing if the section or key doesn't exist.

        A named section is removed together with its last key.

        Args:
            section (str): Name of the section.
            key (str): The option key.
        """
        if (pairs := self._sections.get(section)) is None or key not in pairs:
            return
        del pairs[key]
        if not pairs and section != TOP_LEVEL_SECTION:
            del self._sections[section]

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Copy of the content for all sections returned by get_sections."""
        return {name: dict(self._sections[name]) for name in self.get_sections()}

    def __contains__(self, section: object) -> bool:
        return section in self.get_sections()

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_sections())

    def __len__(self) -> int:
        return len(self.get_sections())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Dictionary):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_dict()!r})"

    def __str__(self) -> str:
        return render(self)


class _ReadIni:

    def __init__(self, target: Dictionary, content: str) -> None:
        """Parse ini content into target. For more info cf. load_string.

        Raises:
            IniSyntaxError: If a line violates the grammar.
        """
        self.target = target
        self.parameters = target.parameters
        self.current_section: dict[str, str] = target._sections[TOP_LEVEL_SECTION]
        self.current_section_name = TOP_LEVEL_SECTION
        self.current_entity_index: int = 0
        self.current_entity_content: str = ""

        for self.current_entity_index, line in enumerate(content.split(LINE_BREAK), start=1):
            self.current_entity_content = line.strip()

            if not self.current_entity_content or self._is_comment():
                # empty line or comment, skip
                continue

            # try to extract section
            if (extracted_section_name := self._extract_section_name()) is not None:
                self._handle_section_name(extracted_section_name)

            else:
                self._handle_option(self._extract_option())

    def _syntax_error(self, message: str) -> IniSyntaxError:
        return IniSyntaxError(
            message, lineno=self.current_entity_index, line=self.current_entity_content
        )

    def _is_comment(self) -> bool:
        """Check whether self.current_entity_content is a full-line comment."""
        return is_comment(self.current_entity_content, self.parameters.comment_prefixes)

    def _extract_section_name(self) -> SectionName | None:
        """Extract a section name if present in self.current_entity_content.

        Raises:
            IniSyntaxError: If the line is a malformed section header.

        Returns:
            SectionName | None: The extracted section name or None if the line
                is no section header.
        """
        try:
            return SectionName(name_with_brackets=self.current_entity_content)
        except ExtractionError:
            return None
        except ValueError as e:
            raise self._syntax_error(str(e)) from e

    def _handle_section_name(self, extracted_section_name: SectionName) -> None:
        """Make the section current, creating it if it doesn't exist yet."""
        self.current_section_name = str(extracted_section_name)
        self.current_section = self.target._sections.setdefault(
            self.current_section_name, {}
        )

    def _extract_option(self) -> Option:
        """Extract an option (assignment or key-only line).

        Raises:
            IniSyntaxError: If no option could be extracted.
        """
        try:
            return Option.from_string(
                string=self.current_entity_content,
                delimiter=self.parameters.option_delimiter,
            )
        except ExtractionError as e:
            raise self._syntax_error(str(e)) from e

    def _handle_option(self, extracted_option: Option) -> None:
        """Store an extracted option in the current section (last write wins)."""
        if extracted_option.key in self.current_section:
            warnings.warn(
                f"Line {self.current_entity_index} redefines '{extracted_option.key}'"
                f" in section '{self.current_section_name}', keeping the later value.",
                DuplicateOptionWarning,
            )
        self.current_section[extracted_option.key] = extracted_option.value


def load_string(text: str, parameters: Parameters | None = None) -> Dictionary:
    """Parse ini content.

    Args:
        text (str): The ini content.
        parameters (Parameters | None, optional): Parameters for reading. The
            returned Dictionary keeps them. If None, will use default Parameters.
            Defaults to None.

    Raises:
        IniSyntaxError: If a line violates the grammar. No partial Dictionary
            is returned.

    Returns:
        Dictionary: The parsed content.
    """
    dictionary = Dictionary(parameters)
    _ReadIni(target=dictionary, content=text)
    return dictionary


def load(
    path: str | Path,
    parameters: Parameters | None = None,
    encoding: str | None = None,
) -> Dictionary:
    """Read and parse an ini file.

    Args:
        path (str | Path): Path to the ini file.
        parameters (Parameters | None, optional): Parameters for reading. If None,
            will use default Parameters. Defaults to None.
        encoding (str | None, optional): Encoding of the file. If None, will detect
            the encoding. Defaults to None.

    Raises:
        IniFileError: If the file could not be read or decoded.
        IniSyntaxError: If a line violates the grammar.

    Returns:
        Dictionary: The parsed content.
    """
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        raise IniFileError(f"Could not read '{path}': {e}", path=path) from e

    if not raw:
        content = ""
    elif encoding is not None:
        try:
            content = raw.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise IniFileError(f"Could not decode '{path}': {e}", path=path) from e
    elif (best := read_from_bytes(raw).best()) is None:
        raise IniFileError(f"Could not detect the encoding of '{path}'.", path=path)
    else:
        content = str(best)

    return load_string(content, parameters=parameters)


def render(dictionary: Dictionary) -> str:
    """Render a Dictionary as ini content.

    The top-level section comes first (without header), then every named
    section. Each section is followed by one blank line.

    Args:
        dictionary (Dictionary): The Dictionary to render.

    Raises:
        IniRenderError: If a section name, key or value would not read back
            unchanged (e.g. an empty key, a key starting with a comment prefix or
            a value with a line break).

    Returns:
        str: The ini content.
    """
    delimiter = dictionary.parameters.option_delimiter
    comment_prefixes = dictionary.parameters.comment_prefixes
    out = ""
    for name in dictionary.get_sections():
        try:
            if name != TOP_LEVEL_SECTION:
                out += f"{SectionName(name).to_string()}\n"
            for key, value in dictionary._sections[name].items():
                option = Option(key=key, value=value)
                out += f"{option.to_string(delimiter, comment_prefixes)}\n"
        except ValueError as e:
            raise IniRenderError(f"Can't render section '{name}': {e}") from e
        out += "\n"
    return out


def write(path: str | Path, dictionary: Dictionary, encoding: str = "utf-8") -> None:
    """Render a Dictionary and overwrite the file at path with it.

    Args:
        path (str | Path): Path to the file to write to.
        dictionary (Dictionary): The Dictionary to write.
        encoding (str, optional): Encoding of the file. Defaults to "utf-8".

    Raises:
        IniRenderError: If the Dictionary can't be rendered. The file is left
            untouched.
        IniFileError: If the file could not be written.
    """
    content = render(dictionary)
    try:
        Path(path).write_text(content, encoding=encoding, newline="\n")
    except OSError as e:
        raise IniFileError(f"Could not write '{path}': {e}", path=path) from e
