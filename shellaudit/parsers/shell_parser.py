"""Parser for shell scripts.

Walks a tree-sitter Bash tree once and builds a catalog of command
invocations grouped by anchor value, plus the line of every comment. Used for
container build scripts driving tools such as buildah, where each qualifying
statement has the shape ``tool verb args...``.
"""

import json
from collections.abc import Callable
from typing import Any

from shellaudit import syntax
from shellaudit.document import assemble_documents
from shellaudit.exceptions import ShellParseError
from shellaudit.parsers.models import Command, ExtractionState, FileKind, ParseResult
from shellaudit.utils.logging import logger

# A statement needs more than this many tokens to be cataloged
MINIMUM_ARGS = 2

# Characters dropped from the rendered command so multi-line commands
# collapse into one line
_STRIP_TABLE = str.maketrans("", "", "\n\r\t\\")


def extract_command(node: Any) -> Command:
    """Derive a Command from a statement node.

    Statements with two or fewer argument tokens produce the empty Command.
    The verb is the second token. The value is the full command with a
    leading occurrence of the verb removed; since the full command starts with
    the first token, the verb rarely matches and value usually equals the
    full command.
    """
    args = syntax.argument_tokens(node)
    if len(args) <= MINIMUM_ARGS:
        return Command()

    cmd = syntax.unparse_word(args[1]).strip()
    full_cmd = syntax.unparse_call(args).translate(_STRIP_TABLE).strip()
    value = full_cmd.removeprefix(cmd)

    return Command(
        cmd=cmd,
        original=full_cmd,
        value=value.strip(),
        start_line=syntax.start_line(args[0]),
        end_line=syntax.end_line(args[-1]),
    )


class ShellParser:
    """Parser for shell script files.

    Holds no per-document state: every call to ``parse`` gets its own
    ExtractionState, so one instance can serve many documents.
    """

    def __init__(self):
        self._handlers: dict[str, Callable[[ExtractionState, Any], None]] = {
            syntax.STATEMENT: self._visit_statement,
            syntax.COMMENT: self._visit_comment,
        }

    def parse(self, path: str, content: bytes) -> ParseResult:
        """Parse shell source into command documents.

        Args:
            path: Path of the script, used for diagnostics only
            content: Raw script bytes

        Returns:
            ParseResult with one document, the comment lines and the (empty)
            ignore-block lines.

        Raises:
            ShellSyntaxError: if the source cannot be parsed
            SerializationError: if the catalog cannot be assembled
        """
        try:
            tree = syntax.parse_source(content)

            state = ExtractionState()
            self._walk(state, tree.root_node)

            documents = assemble_documents(state.groups)
        except ShellParseError as e:
            e.details.setdefault("path", path)
            raise

        logger.debug(
            f"Parsed shell {path or '<memory>'}: {len(state.from_values)} statements, "
            f"{len(state.groups)} groups, {len(state.comment_lines)} comments"
        )
        logger.opt(lazy=True).debug("Shell documents: {}", lambda: json.dumps(documents))

        return ParseResult(
            documents=documents,
            ignore_lines=state.comment_lines,
            ignore_block_lines=state.ignore_block_lines,
        )

    def _walk(self, state: ExtractionState, root: Any) -> None:
        """Visit every node in pre-order, dispatching on node kind."""
        for node in syntax.walk(root):
            handler = self._handlers.get(syntax.node_kind(node))
            if handler is not None:
                handler(state, node)

    def _visit_statement(self, state: ExtractionState, node: Any) -> None:
        state.track(extract_command(node))

    def _visit_comment(self, state: ExtractionState, node: Any) -> None:
        state.record_comment(syntax.start_line(node))

    def get_kind(self) -> FileKind:
        """Return the kind of file this parser handles."""
        return FileKind.SHELL

    def supported_extensions(self) -> list[str]:
        """Return list of file extensions this parser supports."""
        return [".sh"]

    def supported_types(self) -> dict[str, bool]:
        """Return the platform types this parser supports."""
        return {"shell": True}

    def get_comment_token(self) -> str:
        """Return the token that starts a comment line."""
        return "#"

    def stringify_content(self, content: bytes) -> str:
        """Convert raw content into its string form."""
        return content.decode("utf-8", errors="replace")

    def resolve(self, content: bytes, path: str) -> bytes:
        """Resolve includes in a script. Shell sources are taken as they are."""
        return content

    def get_resolved_files(self) -> dict[str, Any]:
        """Return files pulled in by ``resolve``; always empty for shell."""
        return {}
