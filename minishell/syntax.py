"""Checks run on a raw input line before it is tokenized."""

from __future__ import annotations

_SPACES = " \n\r\f\t\v"
_SPECIALS = "|<>"
_UNEXPECTED = "Syntax error near unexpected token"


class ShellSyntaxError(ValueError):
    """The input line cannot be parsed."""


def is_space(char: str) -> bool:
    """True for the whitespace characters that separate words."""
    return char != "" and char in _SPACES


def is_special(char: str) -> bool:
    """True for pipe and redirection characters."""
    return char != "" and char in _SPECIALS


def only_space(text: str | None) -> bool:
    """True if the line is missing, empty or only whitespace."""
    return not text or all(is_space(c) for c in text)


def has_open_quote(text: str | None) -> bool:
    """True if a single or double quote is never closed."""
    if not text:
        return False
    i = 0
    while i < len(text):
        char = text[i]
        if char in "'\"":
            close = text.find(char, i + 1)
            if close < 0:
                return True
            i = close
        i += 1
    return False


def _at(text: str, i: int) -> str:
    return text[i] if i < len(text) else ""


def _skip_spaces(text: str, i: int) -> int:
    while is_space(_at(text, i)):
        i += 1
    return i


def _expect_operand(text: str, i: int) -> None:
    nxt = _at(text, i)
    if nxt == "" or nxt in _SPECIALS:
        raise ShellSyntaxError(_UNEXPECTED)


def check_syntax(text: str) -> None:
    """Raise ShellSyntaxError if pipes or redirections are misplaced."""
    first, second = _at(text, 0), _at(text, 1)
    if first == "|" or first == ">" or (first == "<" and second != "<"):
        raise ShellSyntaxError(_UNEXPECTED)
    i = 0
    while i < len(text):
        char = text[i]
        if char in "<>":
            i += 1
            if _at(text, i) == char:
                i += 1
            i = _skip_spaces(text, i)
            _expect_operand(text, i)
        elif char == "|":
            i = _skip_spaces(text, i + 1)
            _expect_operand(text, i)
        else:
            i += 1


def check_input(text: str | None) -> bool:
    """Validate a line: False if blank, True if usable.

    Raises ShellSyntaxError for an unclosed quote or a syntax error.
    """
    if only_space(text):
        return False
    if has_open_quote(text):
        raise ShellSyntaxError("unclosed quote")
    check_syntax(text)
    return True