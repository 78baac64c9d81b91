"""
Main formatter implementation.

Reformats assembly files line by line and replaces each file through a
temporary copy, so an interrupted run never leaves a half-written source.
"""

import io
import os
import sys
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, TextIO

from .errors import FormatterError, SourceOpenError, OutputCreateError, ReplaceError
from .parser import parse_line
from .printer import FormatConfig, render_line

STDIO_PATH = "-"
TEMP_SUFFIX = "~"


@dataclass
class FormatReport:
    """
    Outcome of formatting a batch of files.

    Attributes:
        formatted: Paths processed without error
        changed: Paths whose content was (or, in check mode, would be) changed
        errors: Error messages for paths that failed
    """

    formatted: List[str] = field(default_factory=list)
    changed: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class Formatter:
    """
    Assembly source formatter.

    Each line is tokenized into label, instruction and comment and printed
    back with the configured layout. Runs of blank lines are collapsed into
    a single blank line.
    """

    def __init__(self, config: FormatConfig = None, verbose: bool = False, check: bool = False):
        """
        Initialize the formatter.

        Args:
            config: Layout settings. Uses defaults if None.
            verbose: If True, report progress on stderr
            check: If True, only detect files that need formatting and
                never write anything
        """
        self.config = config or FormatConfig()
        self.verbose = verbose
        self.check = check

    def log(self, message: str) -> None:
        """Print message to stderr if verbose mode is enabled."""
        if self.verbose:
            print(message, file=sys.stderr)

    def format_lines(self, lines: Iterable[str]) -> Iterator[str]:
        """
        Format a sequence of raw source lines.

        Args:
            lines: Source lines, with or without line terminators

        Yields:
            Rendered output lines, each ending with a newline
        """
        last_empty = False
        for raw in lines:
            line = parse_line(raw.rstrip("\r\n"))
            empty = line.is_empty()
            # Output no more than one empty line in a row
            if empty and last_empty:
                continue
            yield render_line(line, self.config)
            last_empty = empty

    def format_text(self, source: str) -> str:
        """Format assembly source held in a string."""
        return "".join(self.format_lines(io.StringIO(source)))

    def format_stream(self, src: TextIO, dst: TextIO, name: str = "<stream>") -> bool:
        """
        Format source read from one stream into another.

        Nothing is written in check mode.

        Args:
            src: Stream holding the source
            dst: Stream receiving the formatted text
            name: Name used in error messages

        Returns:
            True if the formatted text differs from the source

        Raises:
            SourceOpenError: If the source cannot be read or decoded
            OutputCreateError: If the output cannot be written
        """
        try:
            source = src.read()
        except OSError as e:
            raise SourceOpenError(f"Cannot read source: {e.strerror}", name)
        except UnicodeDecodeError as e:
            raise SourceOpenError(f"Cannot decode source as UTF-8: {e.reason}", name)

        formatted = self.format_text(source)
        if not self.check:
            try:
                dst.write(formatted)
            except OSError as e:
                raise OutputCreateError(f"Cannot write output: {e.strerror}", name)
        return formatted != source

    def format_file(self, path: str) -> bool:
        """
        Format a file in place.

        The result is written to a temporary file next to the source, which
        then replaces the original. "-" formats stdin to stdout instead.

        Args:
            path: Path to the assembly file

        Returns:
            True if the content was (or in check mode would be) changed

        Raises:
            SourceOpenError: If the source cannot be read
            OutputCreateError: If the temporary file cannot be written
            ReplaceError: If the original cannot be replaced
        """
        if path == STDIO_PATH:
            self.log("Formatting: <stdin>")
            return self.format_stream(sys.stdin, sys.stdout, "<stdin>")

        self.log(f"Formatting: {path}")
        try:
            # Keep "\r\n" so such files are rewritten with "\n"
            with open(path, "r", encoding="utf-8", newline="") as f:
                source = f.read()
        except OSError as e:
            raise SourceOpenError(f"Cannot open source: {e.strerror}", path)
        except UnicodeDecodeError as e:
            raise SourceOpenError(f"Cannot decode source as UTF-8: {e.reason}", path)

        formatted = self.format_text(source)
        if formatted == source:
            self.log(f"Unchanged: {path}")
            return False
        if self.check:
            return True

        temp_path = path + TEMP_SUFFIX
        try:
            with open(temp_path, "w", encoding="utf-8", newline="\n") as out:
                out.write(formatted)
        except OSError as e:
            # Drop a partially written output
            if os.path.isfile(temp_path):
                os.remove(temp_path)
            raise OutputCreateError(f"Cannot create {temp_path}: {e.strerror}", path)

        try:
            os.replace(temp_path, path)
        except OSError as e:
            raise ReplaceError(f"Cannot replace file: {e.strerror}", path, temp_path)

        self.log(f"Reformatted: {path}")
        return True

    def format_files(self, paths: Iterable[str]) -> FormatReport:
        """
        Format several files, continuing past failures.

        Errors are printed to stderr and collected in the report. In check
        mode the paths that need formatting are printed to stdout.

        Args:
            paths: File paths ("-" for stdin/stdout)

        Returns:
            FormatReport for the batch
        """
        report = FormatReport()

        for path in paths:
            try:
                changed = self.format_file(path)
            except FormatterError as e:
                print(f"Error: {e}", file=sys.stderr)
                report.errors.append(str(e))
                continue

            report.formatted.append(path)
            if changed:
                report.changed.append(path)
                if self.check:
                    print(f"would reformat {path}")

        self.log(
            f"{len(report.formatted)} formatted, {len(report.changed)} changed, "
            f"{len(report.errors)} failed"
        )
        return report
