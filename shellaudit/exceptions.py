"""Custom exceptions for shell parsing.

Only two conditions are failures: the syntax tree could not be built, or the
assembled document could not be encoded. Everything else the parser meets
(short statements, empty groups, scripts without comments) is a normal result.
"""


class ShellParseError(Exception):
    """Base class for shell parsing failures.

    Attributes:
        message: Human-readable error description
        details: Dict with context for debugging (file path, position, ...)
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ShellSyntaxError(ShellParseError):
    """Raised when the shell source cannot be turned into a syntax tree.

    No partial document is produced. Input is static, so callers should not
    retry.
    """

    def __init__(self, message: str, line: int = 0, column: int = 0, details: dict | None = None):
        super().__init__(message, details)
        self.line = line
        self.column = column


class SerializationError(ShellParseError):
    """Raised when the command catalog cannot be encoded into a document."""
