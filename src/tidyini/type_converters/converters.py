"""Converter and renderer functions between raw option values and python types."""

from functools import wraps
from typing import Callable, Any, TypeAlias, TypeVar
import re
import math
from ..exceptions_warnings import WrongType

ConvertedType = TypeVar("ConvertedType")
SourceType = TypeVar("SourceType")
T = TypeVar("T")

TypeConverter: TypeAlias = Callable[[str], ConvertedType]
"""Type of type converter functions. To create a type converter, use converter decorator."""

Renderer: TypeAlias = Callable[[SourceType], str]
"""Type of functions that turn a python value into its raw option value."""

FLOAT_LITERAL = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
"""ASCII float literals, including the non-finite ones float() renders."""


def converter(processor: Callable[[str], T]) -> TypeConverter[T]:
    """Create a new TypeConverter.

    Args:
        processor (Callable[[str], T]): Callable to process the string input and
            convert it into an instance of arbitrary type. If conversion is not
            possible, should raise exceptions_warnings.WrongType.

    Returns:
        TypeConverter[T]: TypeConverter that will return the processed input on call
            and raise WrongType for anything it can't convert.
    """

    @wraps(processor)
    def convert(value: Any) -> T:
        """Convert value.

        Args:
            value (Any): The value to convert.

        Raises:
            WrongType: If value is not a string or conversion was impossible.

        Returns:
            T: The converted value.
        """
        if not isinstance(value, str):
            raise WrongType(f"Can only convert strings, got {type(value).__name__}.")
        try:
            return processor(value)
        except ValueError as e:
            raise WrongType(str(e)) from e

    return convert


@converter
def to_string(string: str) -> str:
    """Return the raw value as is."""
    return string


def bool_converter(
    true: str | tuple[str, ...] = ("true",),
    false: str | tuple[str, ...] = ("false",),
) -> TypeConverter[bool]:
    """Create a new bool converter.

    Args:
        true (str | tuple[str, ...], optional): String(s) that should be regarded as True.
            Defaults to ("true",).
        false (str | tuple[str, ...], optional): String(s) that should be regarded as False.
            Defaults to ("false",).

    Returns:
        TypeConverter[bool]: The bool converter.
    """

    if not isinstance(true, tuple):
        true = (true,)
    true = tuple(i.lower() for i in true)

    if not isinstance(false, tuple):
        false = (false,)
    false = tuple(i.lower() for i in false)

    @converter
    def to_bool(string: str) -> bool:
        """Converts a string to bool (case-insensitive).

        Args:
            string (str): The string to convert.

        Raises:
            WrongType: If conversion was unsuccessful.

        Returns:
            bool: The converted boolean.
        """
        string = string.lower()
        if string in true:
            return True
        elif string in false:
            return False
        raise WrongType(f"'{string}' is not a recognized boolean.")

    return to_bool


@converter
def to_int(string: str) -> int:
    """Convert a base-10 integer literal (optionally signed) to int.

    Raises:
        WrongType: If string is not made of digits only.
    """
    if not re.fullmatch(r"[+-]?[0-9]+", string):
        raise WrongType(f"'{string}' is not a base-10 integer.")
    return int(string)


@converter
def to_float(string: str) -> float:
    """Convert a floating point (or integer) literal to float.

    Raises:
        WrongType: If string is no float literal.
    """
    # python's float() would accept digit grouping and non-ASCII digits
    if not FLOAT_LITERAL.fullmatch(string):
        raise WrongType(f"'{string}' is not a float literal.")
    return float(string)


def render_bool(value: bool) -> str:
    return "true" if value else "false"


def render_int(value: int) -> str:
    return str(int(value))


def render_float(value: float) -> str:
    """Render a float in its shortest round-trippable form.

    Integral values drop the trailing ".0", i.e. 5.0 becomes "5".

    Args:
        value (float): The float to render.

    Returns:
        str: The rendered float.
    """
    value = float(value)
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)

