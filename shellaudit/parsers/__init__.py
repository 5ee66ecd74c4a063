"""Parser modules for shellaudit."""

from .models import Command, ExtractionState, FileKind, FromValue, ParseResult
from .shell_parser import ShellParser, extract_command

__all__ = [
    "Command",
    "ExtractionState",
    "FileKind",
    "FromValue",
    "ParseResult",
    "ShellParser",
    "extract_command",
]
