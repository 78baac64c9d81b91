"""
Assembly source line tokenizer.

Splits a raw source line into label, instruction text and trailing comment.
Quoted string literals are masked before searching for ':' and ';' so that
punctuation inside them is never taken as a delimiter.
"""

import re
from typing import Tuple
from dataclasses import dataclass

from .directives import find_data_directive

QUOTE_CHARS = "\"'"
MASK_FILLER = "x"

_MULTI_SPACE_RE = re.compile(r" +")
_COMMA_SPACE_RE = re.compile(r", *")


@dataclass(frozen=True)
class AsmLine:
    """
    A tokenized line of assembly.

    Attributes:
        label: Label defined on this line ("" if none)
        text: Normalized instruction text without label or comment
        comment: Trailing comment text without the ';' ("" if none)
    """

    label: str = ""
    text: str = ""
    comment: str = ""

    def is_empty(self) -> bool:
        """True if the line carries no label, text or comment."""
        return not (self.label or self.text or self.comment)


def mask_quotes(s: str, filler: str = MASK_FILLER) -> str:
    """
    Replace every quoted part of a string, quotes included, with filler.

    Example:
        mask_quotes('msg db "hi: there", 0') -> 'msg db xxxxxxxxxxx, 0'

    A quote without a matching closing quote of the same kind is kept as is.
    With a single-character filler the result has the same length as the
    input, so an index found in the masked string is valid in the original.

    Args:
        s: String to mask
        filler: Replacement repeated once per masked character

    Returns:
        Masked string
    """
    out = []
    pos = 0

    while pos < len(s):
        # Find the next quotation mark
        start = pos
        while start < len(s) and s[start] not in QUOTE_CHARS:
            start += 1
        if start == len(s):
            out.append(s[pos:])
            break

        # Find its pair
        end = s.find(s[start], start + 1)
        if end < 0:
            # Unpaired: keep it and continue after it
            out.append(s[pos:start + 1])
            pos = start + 1
            continue

        out.append(s[pos:start])
        out.append(filler * (end - start + 1))
        pos = end + 1

    return "".join(out)


def parse_label(line: str) -> Tuple[str, str]:
    """
    Split a line into its label and the rest.

    A label ends at the first unquoted ':' unless the remainder holds a
    memory operand such as "fs:[eax]". Without a colon, a name in front of
    a data-declaration keyword (db, dw, ...) is taken as the label.

    Returns:
        Tuple of (label, rest); ("", line) if the line has no label
    """
    masked = mask_quotes(line)

    colon = masked.find(":")
    if colon >= 0:
        rest = line[colon + 1:]
        # Segment override, not a label
        if "[" in rest and "]" in rest:
            return "", line
        return line[:colon].strip(), rest

    start = find_data_directive(masked)
    if start >= 0:
        return line[:start].strip(), line[start:]

    return "", line


def parse_comment(line: str) -> Tuple[str, str]:
    """
    Split a line at the first unquoted ';'.

    Returns:
        Tuple of (comment, rest); the comment is stripped, rest keeps its
        original spacing. ("", line) if there is no comment.
    """
    semicolon = mask_quotes(line).find(";")
    if semicolon < 0:
        return "", line
    return line[semicolon + 1:].strip(), line[:semicolon]


def normalize_text(code: str) -> str:
    """
    Normalize instruction text.

    Collapses runs of spaces and puts exactly one space after each comma:
    "   mov   rax,rbx  " -> "mov rax, rbx"
    """
    text = code.strip()
    text = _MULTI_SPACE_RE.sub(" ", text)
    text = _COMMA_SPACE_RE.sub(", ", text)
    return text


def parse_line(line: str) -> AsmLine:
    """
    Parse a single line of assembly.

    The comment is removed first, then the label, and the remaining
    instruction text is normalized. Never fails: unmatched quotes and other
    malformed input pass through as text.

    Returns:
        AsmLine with label, text and comment
    """
    comment, rest = parse_comment(line)
    label, rest = parse_label(rest)
    return AsmLine(label=label, text=normalize_text(rest), comment=comment)
