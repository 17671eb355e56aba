"""Splitting an input line into tokens, and debug listings of the result."""

from __future__ import annotations

from collections.abc import Iterable

from .model import Command, Token, TokenType
from .syntax import ShellSyntaxError, is_space, is_special


def _at(text: str, i: int) -> str:
    return text[i] if i < len(text) else ""


def _skip_spaces(text: str, i: int) -> int:
    while is_space(_at(text, i)):
        i += 1
    return i


def skip_quotes(text: str, start: int) -> int:
    """Return the index just past the quote closing the one at ``start``."""
    close = text.find(text[start], start + 1)
    if close < 0:
        raise ShellSyntaxError("unclosed quote")
    return close + 1


def _scan_word(text: str, i: int) -> int:
    while True:
        char = _at(text, i)
        if char == "" or is_special(char) or is_space(char):
            return i
        i = skip_quotes(text, i) if char in "'\"" else i + 1


def _redirect(text: str, i: int, width: int, kind: TokenType,
              tokens: list[Token], keep_empty: bool) -> int:
    start = _skip_spaces(text, i + width)
    end = _scan_word(text, start)
    if end > start or keep_empty:
        tokens.append(Token(kind, text[start:end]))
    return end


def tokenize(text: str) -> list[Token]:
    """Split a line into words, pipes and redirections.

    Quotes are kept in the token values; they are removed on expansion.
    """
    tokens: list[Token] = []
    i = _skip_spaces(text, 0)
    while i < len(text):
        char, nxt = text[i], _at(text, i + 1)
        if char == "|":
            tokens.append(Token(TokenType.PIPE, "|"))
            i += 1
        elif char == ">" and nxt == ">":
            i = _redirect(text, i, 2, TokenType.APPEND, tokens, True)
        elif char == "<" and nxt == "<":
            i = _redirect(text, i, 2, TokenType.HEREDOC, tokens, True)
        elif char == ">":
            i = _redirect(text, i, 1, TokenType.OUT, tokens, False)
        elif char == "<":
            i = _redirect(text, i, 1, TokenType.IN, tokens, False)
        else:
            end = _scan_word(text, i)
            tokens.append(Token(TokenType.ARG, text[i:end]))
            i = end
        i = _skip_spaces(text, i)
    return tokens


def format_tokens(tokens: Iterable[Token]) -> str:
    """One line per token, giving its value and numeric type."""
    return "".join(f"Token: {t.value}, Type: {int(t.type)}\n" for t in tokens)


_LABELS = (
    ("Infile", "infile"),
    ("Outfile", "outfile"),
    ("Append", "append"),
    ("Heredoc", "heredoc"),
)


def format_commands(commands: Iterable[Command]) -> str:
    """List each command with its arguments and redirections."""
    lines: list[str] = []
    for cmd in commands:
        lines.append("Commande:")
        lines.extend(f"  Argument: {arg}" for arg in cmd.args)
        for label, attr in _LABELS:
            lines.extend(f"  {label}: {target}" for target in getattr(cmd, attr))
    return "".join(line + "\n" for line in lines)