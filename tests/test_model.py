from minishell.model import Command, Shell, Token, TokenType


def test_token_type_numbers_follow_declaration_order():
    stage_numbers = [int(kind) for kind, _ in Command().stages()]
    assert stage_numbers == [5, 3, 2, 4]
    assert [TokenType(number) for number in range(6)] == [
        TokenType.ARG, TokenType.PIPE, TokenType.OUT,
        TokenType.IN, TokenType.APPEND, TokenType.HEREDOC,
    ]


def test_stages_order_is_heredoc_in_out_append():
    cmd = Command(args=["cat"], infile=["a"], outfile=["b"],
                  append=["c"], heredoc=["EOF"])
    kinds = [kind for kind, _ in cmd.stages()]
    assert kinds == [TokenType.HEREDOC, TokenType.IN,
                     TokenType.OUT, TokenType.APPEND]


def test_stages_carry_the_command_targets():
    cmd = Command(infile=["in1", "in2"], append=["log"])
    stages = dict(cmd.stages())
    assert stages[TokenType.IN] == ["in1", "in2"]
    assert stages[TokenType.APPEND] == ["log"]
    assert stages[TokenType.OUT] == []
    assert stages[TokenType.HEREDOC] == []


def test_commands_do_not_share_lists():
    first = Command()
    second = Command()
    first.args.append("ls")
    assert second.args == []


def test_shell_starts_empty_with_zero_status():
    shell = Shell()
    assert shell.status == 0
    assert shell.tokens == []
    assert shell.commands == []


def test_tokens_compare_by_value():
    assert Token(TokenType.ARG, "ls") == Token(TokenType.ARG, "ls")
    assert Token(TokenType.ARG, "|") != Token(TokenType.PIPE, "|")