import pytest

from minishell.lexer import format_commands, format_tokens, skip_quotes, tokenize
from minishell.model import Command, Token, TokenType
from minishell.syntax import ShellSyntaxError


def test_tokenize_pipeline():
    assert tokenize("ls -l | wc") == [
        Token(TokenType.ARG, "ls"),
        Token(TokenType.ARG, "-l"),
        Token(TokenType.PIPE, "|"),
        Token(TokenType.ARG, "wc"),
    ]


def test_tokenize_redirections_without_spaces():
    assert tokenize("cat<in>out") == [
        Token(TokenType.ARG, "cat"),
        Token(TokenType.IN, "in"),
        Token(TokenType.OUT, "out"),
    ]


def test_tokenize_double_redirections():
    assert tokenize("cat << EOF >> log") == [
        Token(TokenType.ARG, "cat"),
        Token(TokenType.HEREDOC, "EOF"),
        Token(TokenType.APPEND, "log"),
    ]


def test_quotes_are_kept_and_group_words():
    assert tokenize("echo \"a b\" 'c d'") == [
        Token(TokenType.ARG, "echo"),
        Token(TokenType.ARG, '"a b"'),
        Token(TokenType.ARG, "'c d'"),
    ]


def test_quoted_special_characters_stay_in_word():
    assert tokenize("echo 'a|b'") == [
        Token(TokenType.ARG, "echo"),
        Token(TokenType.ARG, "'a|b'"),
    ]


def test_empty_single_redirect_target_adds_nothing():
    assert tokenize("cat >") == [Token(TokenType.ARG, "cat")]


def test_empty_double_redirect_target_is_kept():
    assert tokenize("cat <<") == [
        Token(TokenType.ARG, "cat"),
        Token(TokenType.HEREDOC, ""),
    ]


def test_blank_line_gives_no_tokens():
    assert tokenize("   ") == []


def test_words_round_trip_through_spaces():
    line = "grep -v foo bar"
    assert [t.value for t in tokenize(line)] == line.split()


def test_unclosed_quote_in_word_raises():
    with pytest.raises(ShellSyntaxError):
        tokenize("echo 'abc")


def test_skip_quotes_ends_after_closing_quote():
    text = "'abc' x"
    end = skip_quotes(text, 0)
    assert text[:end] == "'abc'"


def test_skip_quotes_ignores_other_quote_kind():
    text = "\"it's\" tail"
    end = skip_quotes(text, 0)
    assert text[:end] == "\"it's\""


def test_skip_quotes_unclosed_raises():
    with pytest.raises(ShellSyntaxError):
        skip_quotes("'abc", 0)


def test_format_tokens_lines():
    tokens = [Token(TokenType.ARG, "ls"), Token(TokenType.PIPE, "|")]
    assert format_tokens(tokens) == (
        f"Token: ls, Type: {int(TokenType.ARG)}\n"
        f"Token: |, Type: {int(TokenType.PIPE)}\n"
    )


def test_format_tokens_empty():
    assert format_tokens([]) == ""


def test_format_commands_lists_arguments_then_redirections():
    cmd = Command(args=["cat", "-e"], infile=["in"], heredoc=["EOF"])
    assert format_commands([cmd]) == (
        "Commande:\n"
        "  Argument: cat\n"
        "  Argument: -e\n"
        "  Infile: in\n"
        "  Heredoc: EOF\n"
    )


def test_format_commands_one_header_per_command():
    text = format_commands([Command(args=["a"]), Command(args=["b"])])
    assert text.count("Commande:\n") == 2
    assert text.index("Argument: a") < text.index("Argument: b")