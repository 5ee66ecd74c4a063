"""Data structures shared by the shell parser and the document assembler."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FileKind(str, Enum):
    """Kinds of files a parser can claim."""

    SHELL = "SHELL"


@dataclass(frozen=True)
class Command:
    """One command invocation with more than two argument tokens.

    ``Command()`` is the empty record produced for statements that do not
    qualify: both strings empty, both lines zero.
    """

    cmd: str = ""
    original: str = ""
    value: str = ""
    start_line: int = 0
    end_line: int = 0

    @property
    def qualified(self) -> bool:
        return self.cmd != ""

    def to_dict(self) -> dict[str, Any]:
        """Wire shape consumed by the rule engine."""
        return {
            "Cmd": self.cmd,
            "Original": self.original,
            "Value": self.value,
            "_kics_line": self.start_line,
            "EndLine": self.end_line,
        }


@dataclass(frozen=True)
class FromValue:
    """Anchor log entry, one per visited statement."""

    value: str
    line: int


@dataclass
class ExtractionState:
    """Mutable state of a single parse call.

    Owned by exactly one call to ``ShellParser.parse`` and discarded after it
    returns, so concurrent parses never share anything.
    """

    from_values: list[FromValue] = field(default_factory=list)
    groups: dict[str, list[Command]] = field(default_factory=dict)
    comment_lines: list[int] = field(default_factory=list)
    # Reserved for ignore-block directives; nothing populates it yet
    ignore_block_lines: list[int] = field(default_factory=list)

    def record_comment(self, line: int) -> None:
        self.comment_lines.append(line)

    def track(self, command: Command) -> None:
        """Log a statement's extraction result and file it if it qualified.

        The group key is read back from the entry just appended, so a command
        always lands under its own value rather than under an earlier
        statement's value. Grouping by the previous anchor would need the
        entry before last.
        """
        self.from_values.append(FromValue(value=command.value, line=command.start_line))

        if command.qualified:
            key = self.from_values[-1].value
            self.groups.setdefault(key, []).append(command)


@dataclass
class ParseResult:
    """Output of one parse: documents plus the line lists the host needs."""

    documents: list[dict[str, Any]]
    ignore_lines: list[int]
    ignore_block_lines: list[int] = field(default_factory=list)
