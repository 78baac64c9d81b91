"""
Rendering of tokenized lines into aligned columns.

Labels start at column 0, instructions are indented by a fixed amount and
trailing comments are aligned to a common column where they fit.
"""

from typing import TextIO
from dataclasses import dataclass

from .parser import AsmLine

DEFAULT_INSTRUCTION_INDENT = 8
DEFAULT_COMMENT_COLUMN = 40


@dataclass(frozen=True)
class FormatConfig:
    """
    Layout settings for the printer.

    Attributes:
        instruction_indent: Spaces written before instruction text
        comment_column: Column (1-based) where the ';' of a trailing
            comment should start
    """

    instruction_indent: int = DEFAULT_INSTRUCTION_INDENT
    comment_column: int = DEFAULT_COMMENT_COLUMN


def render_line(line: AsmLine, config: FormatConfig = None) -> str:
    """
    Render a tokenized line as text.

    A label that shares its source line with an instruction is put on a
    line of its own. Comments after a label or instruction are padded out
    to the comment column, or separated by a single space when the code is
    already past it.

    Args:
        line: Tokenized line
        config: Layout settings. Uses defaults if None.

    Returns:
        Rendered text ending with a newline (may span two lines)
    """
    config = config or FormatConfig()
    parts = []
    column = 0

    if line.label:
        parts.append(line.label + ":")
        column += len(line.label) + 1
        if line.text:
            parts.append("\n")
            column = 0

    if line.text:
        parts.append(" " * config.instruction_indent + line.text)
        column += config.instruction_indent + len(line.text)

    if line.comment:
        if column != 0:
            if column < config.comment_column - 1:
                parts.append(" " * (config.comment_column - column - 1))
            else:
                parts.append(" ")
        parts.append("; " + line.comment)

    parts.append("\n")
    return "".join(parts)


def print_line(line: AsmLine, out: TextIO, config: FormatConfig = None) -> None:
    """Write a rendered line to a text stream."""
    out.write(render_line(line, config))
