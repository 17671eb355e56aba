"""Data carried from the lexer through to execution."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class TokenType(IntEnum):
    """Kind of a lexical token."""

    ARG = 0
    PIPE = 1
    OUT = 2
    IN = 3
    APPEND = 4
    HEREDOC = 5


@dataclass(frozen=True)
class Token:
    """One token of an input line."""

    type: TokenType
    value: str


@dataclass
class Command:
    """One stage of a pipeline: its words and its redirections."""

    args: list[str] = field(default_factory=list)
    infile: list[str] = field(default_factory=list)
    outfile: list[str] = field(default_factory=list)
    append: list[str] = field(default_factory=list)
    heredoc: list[str] = field(default_factory=list)

    def stages(self) -> list[tuple[TokenType, list[str]]]:
        """Redirections in the order they are applied.

        Here-documents come first, then input files, then truncating
        outputs, then appending outputs.
        """
        return [
            (TokenType.HEREDOC, self.heredoc),
            (TokenType.IN, self.infile),
            (TokenType.OUT, self.outfile),
            (TokenType.APPEND, self.append),
        ]


@dataclass
class Shell:
    """State of a running shell: environment, current line and last status."""

    env: Any = None
    tokens: list[Token] = field(default_factory=list)
    commands: list[Command] = field(default_factory=list)
    status: int = 0