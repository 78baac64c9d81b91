"""
asmfmt - A column-aligning formatter for assembly source.

This package reformats labels, instructions and trailing comments into
consistent columns without interpreting the assembly dialect.
"""

__version__ = "1.0.0"

from .errors import FormatterError, SourceOpenError, OutputCreateError, ReplaceError, ConfigError
from .parser import AsmLine, mask_quotes, parse_line
from .printer import FormatConfig, render_line
from .formatter import Formatter, FormatReport

__all__ = [
    "AsmLine",
    "ConfigError",
    "FormatConfig",
    "FormatReport",
    "Formatter",
    "FormatterError",
    "OutputCreateError",
    "ReplaceError",
    "SourceOpenError",
    "mask_quotes",
    "parse_line",
    "render_line",
]
