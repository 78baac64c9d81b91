"""
Data-declaration directives.

A name followed by one of these keywords is a label even without a trailing
colon (e.g. ``msg db "hello"``). The formatter does not interpret the
directives any further.
"""

import re

DATA_DIRECTIVES = ("db", "dw", "dd", "dq", "ddq", "do", "dt")

# Keyword must be preceded by whitespace (or start of line) and followed by
# whitespace or a quote. Longer names come first so "ddq" wins over "dd".
_DIRECTIVE_RE = re.compile(
    r"(?:\s|^)(?:%s)(?=[\s\"'])"
    % "|".join(sorted(DATA_DIRECTIVES, key=len, reverse=True))
)


def find_data_directive(text: str) -> int:
    """
    Find the first data-declaration keyword in a line.

    Args:
        text: Line to search, normally with quoted strings masked out

    Returns:
        Index where the match starts (including the whitespace in front of
        the keyword), or -1 if there is none
    """
    match = _DIRECTIVE_RE.search(text)
    if match is None:
        return -1
    return match.start()
