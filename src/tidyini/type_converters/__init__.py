from .converters import (
    TypeConverter,
    Renderer,
    converter,
    bool_converter,
    to_string,
    to_int,
    to_float,
    render_bool,
    render_int,
    render_float,
)
