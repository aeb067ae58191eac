from .interface import Dictionary, load, load_string, render, write
from .args import Parameters
from .entities import Option, SectionName, is_comment
from .exceptions_warnings import (
    IniError,
    IniSyntaxError,
    IniFileError,
    IniRenderError,
    IniStructureWarning,
    DuplicateOptionWarning,
)
from .globals import TOP_LEVEL_SECTION, VALID_MARKERS
