"""Tests for the tree-sitter syntax adapter and the unparser."""

from types import SimpleNamespace

import pytest

from shellaudit import syntax
from shellaudit.exceptions import ShellSyntaxError


def fake_token(text: bytes, start: tuple[int, int], end: tuple[int, int]):
    """Token stand-in exposing the attributes the unparser reads."""
    return SimpleNamespace(text=text, start_point=start, end_point=end)


class TestParseSource:
    """Tests for tree construction and diagnostics."""

    def test_parses_clean_source(self):
        tree = syntax.parse_source(b"buildah from base\n")
        assert tree.root_node.type == "program"
        assert not tree.root_node.has_error

    def test_error_reports_position(self):
        with pytest.raises(ShellSyntaxError) as exc_info:
            syntax.parse_source(b"buildah from base\nbuildah run ctr1 )\n")

        error = exc_info.value
        assert error.line >= 1
        assert error.column >= 1
        assert error.message == str(error)


class TestNodeKinds:
    """Tests for statement/comment/other classification."""

    def kinds(self, code: bytes) -> list[tuple[str, str]]:
        tree = syntax.parse_source(code)
        return [
            (node.type, syntax.node_kind(node))
            for node in syntax.walk(tree.root_node)
            if syntax.node_kind(node) != syntax.OTHER
        ]

    def test_command_and_comment(self):
        assert self.kinds(b"# hi\nls -la\n") == [
            ("comment", syntax.COMMENT),
            ("command", syntax.STATEMENT),
        ]

    def test_prefix_assignment_belongs_to_command(self):
        assert self.kinds(b"FOO=1 ls\n") == [("command", syntax.STATEMENT)]

    def test_declaration_is_not_a_statement(self):
        assert self.kinds(b"export FOO=1\n") == []

    def test_single_bracket_test_and_unset_are_statements(self):
        assert self.kinds(b"[ -n x ]\nunset A\n") == [
            ("test_command", syntax.STATEMENT),
            ("unset_command", syntax.STATEMENT),
        ]

    def test_double_bracket_test_is_not_a_statement(self):
        assert self.kinds(b"[[ -n x ]]\n") == []

    def test_walk_is_preorder(self):
        tree = syntax.parse_source(b"a b\n")
        nodes = list(syntax.walk(tree.root_node))

        assert nodes[0].type == "program"
        assert nodes[1].type == "command"


class TestArgumentTokens:
    """Tests for token listing."""

    def test_tokens_in_order(self):
        tree = syntax.parse_source(b"X=1 buildah run 'a b' \"$c\" > out\n")
        command = next(n for n in syntax.walk(tree.root_node) if n.type == "command")

        texts = [syntax.unparse_word(t) for t in syntax.argument_tokens(command)]
        assert texts == ["buildah", "run", "'a b'", '"$c"']

    def test_non_command_has_no_tokens(self):
        tree = syntax.parse_source(b"FOO=bar\n")
        assignment = next(
            n for n in syntax.walk(tree.root_node) if syntax.node_kind(n) == syntax.STATEMENT
        )
        assert syntax.argument_tokens(assignment) == []

    def statement_texts(self, code: bytes) -> list[str]:
        tree = syntax.parse_source(code)
        node = next(
            n for n in syntax.walk(tree.root_node) if syntax.node_kind(n) == syntax.STATEMENT
        )
        return [syntax.unparse_word(t) for t in syntax.argument_tokens(node)]

    def test_test_command_yields_leaf_words(self):
        assert self.statement_texts(b"[ -f /etc/os-release ]\n") == [
            "[", "-f", "/etc/os-release", "]",
        ]

    def test_unset_yields_keyword_and_names(self):
        assert self.statement_texts(b"unset A B\n") == ["unset", "A", "B"]

    def test_match_operator_is_a_token(self):
        assert self.statement_texts(b"cmd a == b\n") == ["cmd", "a", "==", "b"]

    @pytest.mark.parametrize("code", [b"time buildah from base\n", b"time -p buildah from base\n"])
    def test_time_prefix_dropped(self, code):
        assert self.statement_texts(code) == ["buildah", "from", "base"]


class TestUnparser:
    """Tests for token and argument-list rendering."""

    def test_word_renders_source_text(self):
        assert syntax.unparse_word(fake_token(b"'x y'", (0, 0), (0, 5))) == "'x y'"

    def test_undecodable_word_renders_empty(self):
        assert syntax.unparse_word(fake_token(b"caf\xe9", (0, 0), (0, 4))) == ""

    def test_missing_text_renders_empty(self):
        assert syntax.unparse_word(fake_token(None, (0, 0), (0, 0))) == ""

    def test_same_line_tokens_joined_by_space(self):
        tokens = [
            fake_token(b"buildah", (0, 0), (0, 7)),
            fake_token(b"from", (0, 8), (0, 12)),
            fake_token(b"base", (0, 13), (0, 17)),
        ]
        assert syntax.unparse_call(tokens) == "buildah from base"

    def test_later_line_tokens_get_continuation(self):
        tokens = [
            fake_token(b"buildah", (0, 0), (0, 7)),
            fake_token(b"run", (0, 8), (0, 11)),
            fake_token(b"ctr", (1, 4), (1, 7)),
        ]
        assert syntax.unparse_call(tokens) == "buildah run \\\n\tctr"

    def test_undecodable_token_keeps_the_rest(self):
        tokens = [
            fake_token(b"buildah", (0, 0), (0, 7)),
            fake_token(b"\xff", (0, 8), (0, 9)),
            fake_token(b"base", (0, 10), (0, 14)),
        ]
        assert syntax.unparse_call(tokens) == "buildah  base"

    def test_empty_list(self):
        assert syntax.unparse_call([]) == ""

    def test_line_helpers_are_one_based(self):
        token = fake_token(b"x", (2, 0), (4, 1))
        assert syntax.start_line(token) == 3
        assert syntax.end_line(token) == 5
