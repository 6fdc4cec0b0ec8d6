from flowcolumns.parser.errors import ParseError
from flowcolumns.parser.transformer import parse_dimension, parse_width, parse_widths

__all__ = ["ParseError", "parse_dimension", "parse_width", "parse_widths"]
