from .type_converters.converters import TypeConverter, bool_converter
from .globals import VALID_MARKERS, SECTION_OPEN, SECTION_CLOSE


class Parameters:
    """Parameters for reading and rendering."""

    def __init__(
        self,
        comment_prefixes: VALID_MARKERS | tuple[VALID_MARKERS, ...] | None = (";", "#"),
        option_delimiter: VALID_MARKERS = "=",
        true_values: str | tuple[str, ...] = ("true",),
        false_values: str | tuple[str, ...] = ("false",),
    ) -> None:
        """
        Args:
            comment_prefixes (VALID_MARKERS | tuple[VALID_MARKERS,...] | None,
                optional): Prefix character(s) that denote a full-line comment. If
                None, no line is treated as comment. Defaults to (";", "#").
            option_delimiter (VALID_MARKERS, optional): Delimiter that separates
                option keys from values. Lines are split on its first occurrence.
                Defaults to "=".
            true_values (str | tuple[str, ...], optional): Raw value(s) read as True
                (case-insensitive). Defaults to ("true",).
            false_values (str | tuple[str, ...], optional): Raw value(s) read as False
                (case-insensitive). Defaults to ("false",).
        """
        # because comment_prefixes and option_delimiter check each other on setting
        self._comment_prefixes = ()
        self._option_delimiter = ""

        self.comment_prefixes = comment_prefixes
        self.option_delimiter = option_delimiter
        self._true_values = ()
        self._false_values = ()
        self.true_values = true_values
        self.false_values = false_values

    @property
    def comment_prefixes(self) -> tuple[VALID_MARKERS, ...]:
        return self._comment_prefixes

    @comment_prefixes.setter
    def comment_prefixes(
        self, value: VALID_MARKERS | tuple[VALID_MARKERS, ...] | None
    ) -> None:
        if value is None:
            value = ()
        elif not isinstance(value, tuple):
            value = (value,)
        self.verify_marker(value, "comment prefix")
        self._comment_prefixes = value
        self.verify_between_markers()

    @property
    def option_delimiter(self) -> VALID_MARKERS:
        return self._option_delimiter

    @option_delimiter.setter
    def option_delimiter(self, value: VALID_MARKERS) -> None:
        self.verify_marker((value,), "option delimiter")
        self._option_delimiter = value
        self.verify_between_markers()

    @property
    def true_values(self) -> tuple[str, ...]:
        return self._true_values

    @true_values.setter
    def true_values(self, value: str | tuple[str, ...]) -> None:
        self._true_values = self._verify_bool_values(value, self._false_values)

    @property
    def false_values(self) -> tuple[str, ...]:
        return self._false_values

    @false_values.setter
    def false_values(self, value: str | tuple[str, ...]) -> None:
        self._false_values = self._verify_bool_values(value, self._true_values)

    @property
    def bool_converter(self) -> TypeConverter[bool]:
        """Bool converter matching true_values and false_values."""
        return bool_converter(true=self.true_values, false=self.false_values)

    def _verify_bool_values(
        self, value: str | tuple[str, ...], other: tuple[str, ...]
    ) -> tuple[str, ...]:
        if not isinstance(value, tuple):
            value = (value,)
        value = tuple(v.lower() for v in value)
        if not all(value):
            raise ValueError("An empty string can't be a boolean literal.")
        if set(value).intersection(other):
            raise ValueError("True and false values have to be distinct from each other.")
        return value

    def verify_marker(self, marker: tuple[str, ...], name: str) -> None:
        for val in marker:
            if not val:
                raise ValueError(f"An empty {name} is not allowed.")
            if SECTION_OPEN in val or SECTION_CLOSE in val:
                raise ValueError(
                    f"Section brackets are not allowed as a {name}."
                )
            if val != val.strip():
                raise ValueError(f"Whitespace is not allowed inside of a {name}.")

    def verify_between_markers(self) -> None:
        if set(self.comment_prefixes).intersection((self.option_delimiter,)):
            raise ValueError(
                "Comment prefixes and option delimiter have to be distinct from each other."
            )

    def update(self, **kwargs) -> None:
        """Update parameters with kwargs

        Args:
            **kwargs: Keyword-arguments to update the parameters with.
        """
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(comment_prefixes={self.comment_prefixes!r}, "
            f"option_delimiter={self.option_delimiter!r}, "
            f"true_values={self.true_values!r}, false_values={self.false_values!r})"
        )
