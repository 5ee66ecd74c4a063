"""Shell syntax tree provider built on the tree-sitter Bash grammar.

Wraps tree-sitter so the rest of the package only sees three node kinds
(statement, comment, other), ordered argument tokens for statements, and an
unparser that renders tokens back into source text.
"""

from collections.abc import Iterator
from typing import Any

from tree_sitter_language_pack import get_parser

from shellaudit.exceptions import ShellSyntaxError
from shellaudit.utils.logging import logger

STATEMENT = "statement"
COMMENT = "comment"
OTHER = "other"

# Node types that count as one argument token of a command
ARGUMENT_TYPES = frozenset([
    "word",
    "string",
    "raw_string",
    "ansi_c_string",
    "translated_string",
    "concatenation",
    "number",
    "simple_expansion",
    "expansion",
    "command_substitution",
    "process_substitution",
    "arithmetic_expansion",
    "brace_expression",
])

# Match operators and patterns passed as plain arguments ("cmd a == b")
MATCH_ARGUMENT_TYPES = frozenset(["==", "=~", "regex"])

# Builtins the grammar gives their own node but that run as plain calls
CALL_LIKE_TYPES = frozenset(["test_command", "unset_command"])

# Bare assignments are statements without arguments ("FOO=bar")
ASSIGNMENT_TYPES = frozenset(["variable_assignment", "variable_assignments"])

# Parents under which an assignment is part of another construct
ASSIGNMENT_OWNERS = frozenset([
    "command",
    "declaration_command",
    "variable_assignments",
    "c_style_for_statement",
])

# Printer layout for a token that starts on a later line than its predecessor
LINE_CONTINUATION = " \\\n\t"


def parse_source(source: bytes) -> Any:
    """Parse shell source bytes into a tree-sitter Tree.

    Raises:
        ShellSyntaxError: if the grammar could not parse the input cleanly.
    """
    parser = get_parser("bash")
    tree = parser.parse(source)

    root = tree.root_node
    if root.has_error:
        bad = _first_error_node(root)
        line, column = bad.start_point[0] + 1, bad.start_point[1] + 1
        if bad.is_missing:
            reason = f"missing {bad.type!r}"
        else:
            snippet = unparse_word(bad).split("\n", 1)[0][:40]
            reason = f"unexpected {snippet!r}" if snippet else "unexpected end of input"
        raise ShellSyntaxError(f"{line}:{column}: {reason}", line=line, column=column)

    return tree


def _first_error_node(root: Any) -> Any:
    """Return the first ERROR or missing node in source order."""
    for node in walk(root):
        if node.type == "ERROR" or node.is_missing:
            return node
    return root


def walk(root: Any) -> Iterator[Any]:
    """Yield every node under root (root included) in pre-order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def node_kind(node: Any) -> str:
    """Classify a node as STATEMENT, COMMENT or OTHER."""
    node_type = node.type
    if node_type == "comment":
        return COMMENT
    if node_type == "command":
        return STATEMENT
    if node_type in CALL_LIKE_TYPES:
        # [[ ... ]] is a test clause, only [ ... ] is a call
        if node_type == "unset_command" or (node.children and node.children[0].type == "["):
            return STATEMENT
        return OTHER
    if node_type in ASSIGNMENT_TYPES:
        parent = node.parent
        if parent is None or parent.type not in ASSIGNMENT_OWNERS:
            return STATEMENT
    return OTHER


def argument_tokens(node: Any) -> list[Any]:
    """Return the command name and argument tokens of a statement, in order.

    Prefix assignments and redirections are not arguments, and a leading
    ``time`` (with its ``-p`` flag) wraps the command rather than naming it.
    ``[ ... ]`` and ``unset`` yield their words, brackets included. Bare
    assignment statements have no tokens.
    """
    if node.type in CALL_LIKE_TYPES:
        return list(_leaf_tokens(node))
    if node.type != "command":
        return []

    tokens = []
    for child in node.children:
        if (
            child.type == "command_name"
            or child.type in ARGUMENT_TYPES
            or child.type in MATCH_ARGUMENT_TYPES
        ):
            tokens.append(child)

    if tokens and tokens[0].type == "command_name" and unparse_word(tokens[0]) == "time":
        tokens = tokens[1:]
        if tokens and unparse_word(tokens[0]) == "-p":
            tokens = tokens[1:]
    return tokens


def _leaf_tokens(node: Any) -> Iterator[Any]:
    """Yield argument-like children and leaf nodes under node, in source order."""
    for child in node.children:
        if child.type == "comment":
            continue
        if child.type in ARGUMENT_TYPES or child.child_count == 0:
            yield child
        else:
            yield from _leaf_tokens(child)


def start_line(node: Any) -> int:
    """Get 1-based line number where a node starts."""
    return node.start_point[0] + 1


def end_line(node: Any) -> int:
    """Get 1-based line number where a node ends."""
    return node.end_point[0] + 1


def unparse_word(node: Any) -> str:
    """Render a single token as its exact source text.

    Decoding failures are not fatal: they are logged and the token renders as
    an empty string.
    """
    try:
        return node.text.decode("utf-8") if node.text else ""
    except UnicodeDecodeError as e:
        logger.debug(f"failed to get word value at line {start_line(node)}: {e}")
        return ""


def unparse_call(tokens: list[Any]) -> str:
    """Render an argument list the way a shell printer lays it out.

    Tokens on the same line are joined by one space. A token that starts on a
    later line than the previous token ends gets a backslash continuation and
    one tab of indentation.
    """
    parts = []
    previous = None
    for token in tokens:
        text = unparse_word(token)
        if previous is None:
            parts.append(text)
        elif token.start_point[0] > previous.end_point[0]:
            parts.append(LINE_CONTINUATION + text)
        else:
            parts.append(" " + text)
        previous = token
    return "".join(parts)
