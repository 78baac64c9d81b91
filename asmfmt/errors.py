"""
Custom exception types for the assembly formatter.
"""


class FormatterError(Exception):
    """Base exception for formatter errors."""

    def __init__(self, message: str, path: str = None):
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class SourceOpenError(FormatterError):
    """Exception raised when a source file cannot be opened or read."""

    pass


class OutputCreateError(FormatterError):
    """Exception raised when the temporary output file cannot be written."""

    pass


class ReplaceError(FormatterError):
    """
    Exception raised when the formatted output cannot replace the original.

    The formatted text is left behind in the temporary file.
    """

    def __init__(self, message: str, path: str = None, temp_path: str = None):
        self.temp_path = temp_path
        if temp_path is not None:
            message = f"{message} (formatted output kept in {temp_path})"
        super().__init__(message, path)


class ConfigError(FormatterError):
    """Raised when a configuration file is invalid."""

    pass
