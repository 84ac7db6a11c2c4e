import pytest

from okeyshell.syntax_tree import AstNode, Parser, build_ast, parse_line
from okeyshell.tokens import TokenType, split_words, tokenize


def cmd(*args):
    return AstNode(TokenType.COMMAND, args=list(args))


def op(kind, left, right):
    return AstNode(kind, left=left, right=right)


def test_simple_command():
    assert parse_line("ls -l") == cmd("ls", "-l")


def test_pipe():
    assert parse_line("ls -l | grep test") == op(
        TokenType.PIPE, cmd("ls", "-l"), cmd("grep", "test")
    )


def test_pipe_without_spaces():
    assert parse_line("ls|wc") == op(TokenType.PIPE, cmd("ls"), cmd("wc"))


def test_pipes_associate_left():
    assert parse_line("a | b | c") == op(
        TokenType.PIPE, op(TokenType.PIPE, cmd("a"), cmd("b")), cmd("c")
    )


def test_logical_ops_associate_left():
    assert parse_line("a && b || c") == op(
        TokenType.OR, op(TokenType.AND, cmd("a"), cmd("b")), cmd("c")
    )


def test_pipe_binds_tighter_than_and():
    assert parse_line("a && b | c") == op(
        TokenType.AND, cmd("a"), op(TokenType.PIPE, cmd("b"), cmd("c"))
    )


def test_parentheses_group():
    assert parse_line("(a || b) && c") == op(
        TokenType.AND, op(TokenType.OR, cmd("a"), cmd("b")), cmd("c")
    )


def test_parentheses_in_pipe():
    assert parse_line("(a && b)|c") == op(
        TokenType.PIPE, op(TokenType.AND, cmd("a"), cmd("b")), cmd("c")
    )


@pytest.mark.parametrize(
    "line", ["", "   ", "| a", "a |", "a &&", "|| b", "(a", "()", "(a && )", ")"]
)
def test_invalid_lines_give_no_tree(line):
    assert parse_line(line) is None


def test_trailing_tokens_are_ignored():
    assert parse_line("a )") == cmd("a")


def test_redirect_stops_the_command():
    assert parse_line("cat < in") == cmd("cat")


def test_build_ast_without_tokens():
    assert build_ast(None, []) is None


def test_build_ast_matches_parse_line():
    line = "echo hi && ls | wc"
    words = split_words(line)
    assert build_ast(tokenize(words), words) == parse_line(line)


def test_parser_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        Parser([TokenType.COMMAND], ["a", "b"])


def test_parse_command_collects_run_of_words():
    parser = Parser(
        [TokenType.COMMAND, TokenType.COMMAND, TokenType.PIPE, TokenType.COMMAND],
        ["ls", "-l", "|", "wc"],
    )
    assert parser.parse_command() == cmd("ls", "-l")
    assert parser.position == 2
    assert parser.current is TokenType.PIPE


def test_parse_command_on_operator_gives_none():
    parser = Parser([TokenType.PIPE], ["|"])
    assert parser.parse_command() is None
    assert parser.position == 0


def test_parser_consumes_whole_valid_input():
    words = split_words("( a || b ) && c")
    parser = Parser(tokenize(words), words)
    tree = parser.parse_logical_ops()
    assert tree is not None
    assert parser.position == len(words)
    assert parser.current is TokenType.EMPTY


def test_parser_accepts_plain_integers():
    parser = Parser([8, 3, 8], ["a", "|", "b"])
    assert parser.parse_pipe() == op(TokenType.PIPE, cmd("a"), cmd("b"))


def test_empty_token_ends_parsing():
    parser = Parser([TokenType.COMMAND, TokenType.EMPTY, TokenType.COMMAND], ["a", "", "b"])
    assert parser.parse_logical_ops() == cmd("a")
    assert parser.position == 1


def test_parse_parentheses_falls_back_to_command():
    parser = Parser([TokenType.COMMAND], ["ls"])
    assert parser.parse_parentheses() == cmd("ls")


def test_command_args_are_words_of_the_line():
    tree = parse_line("echo one two three")
    assert tree.args == split_words("echo one two three")
    assert tree.left is None and tree.right is None