import pytest

from minishell.environment import Environment
from minishell.expand import expand, expand_command, expand_commands, expanded_length
from minishell.model import Command


@pytest.fixture
def env():
    return Environment(["HOME=/home/user", "USER_1=alice", "EMPTY="])


def test_plain_variable(env):
    assert expand("$HOME", env, 0) == "/home/user"


def test_variable_in_double_quotes(env):
    assert expand('"$HOME"', env, 0) == "/home/user"


def test_single_quotes_block_expansion(env):
    assert expand("'$HOME'", env, 0) == "$HOME"


def test_exit_status(env):
    assert expand("$?", env, 42) == "42"


def test_unknown_variable_vanishes(env):
    assert expand("a$NOPE.b", env, 0) == "a.b"


def test_name_includes_digits_and_underscore(env):
    assert expand("$USER_1!", env, 0) == "alice!"


def test_lone_dollar_is_dropped(env):
    assert expand("$", env, 0) == ""
    assert expand("$-x", env, 0) == "-x"


def test_all_quote_characters_are_removed(env):
    assert expand("a'b\"c'd", env, 0) == "abcd"


def test_none_stays_none(env):
    assert expand(None, env, 0) is None


@pytest.mark.parametrize(
    "text",
    ["$HOME", "'$HOME'", "x$?y", "$", "plain", '"$USER_1" and $EMPTY', "$NOPE"],
)
@pytest.mark.parametrize("status", [0, -3, 127])
def test_length_matches_expansion(env, text, status):
    assert expanded_length(text, env, status) == len(expand(text, env, status))


def test_expand_command_leaves_heredoc(env):
    command = Command(
        args=["echo", "$HOME"],
        infile=["'$HOME'"],
        outfile=["$USER_1"],
        append=['"$?"'],
        heredoc=["$HOME"],
    )
    result = expand_command(command, env, 1)
    assert result.args == ["echo", "/home/user"]
    assert result.infile == ["$HOME"]
    assert result.outfile == ["alice"]
    assert result.append == ["1"]
    assert result.heredoc == ["$HOME"]
    assert command.args == ["echo", "$HOME"]


def test_expand_commands_keeps_order(env):
    commands = [Command(args=["$HOME"]), Command(args=["$USER_1"])]
    result = expand_commands(commands, env, 0)
    assert [c.args for c in result] == [["/home/user"], ["alice"]]