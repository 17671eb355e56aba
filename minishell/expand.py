"""Variable expansion and quote removal on words and file names."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import replace

from .environment import Environment
from .model import Command


def _is_name_char(char: str) -> bool:
    return char != "" and char.isascii() and (char.isalnum() or char == "_")


def _pieces(text: str, env: Environment, status: int) -> Iterator[str]:
    in_double = False
    in_single = False
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char in "\"'":
            if char == '"' and not in_single:
                in_double = not in_double
            elif char == "'" and not in_double:
                in_single = not in_single
            i += 1
        elif char == "$" and not in_single:
            i += 1
            nxt = text[i] if i < length else ""
            if nxt == "?":
                yield str(status)
                i += 1
            elif _is_name_char(nxt):
                start = i
                while i < length and _is_name_char(text[i]):
                    i += 1
                value = env.lookup(text[start:i]) if env is not None else None
                if value:
                    yield value
        else:
            yield char
            i += 1


def expanded_length(text: str, env: Environment, status: int) -> int:
    """Length the text will have once expanded."""
    return sum(len(piece) for piece in _pieces(text, env, status))


def expand(text: str | None, env: Environment, status: int) -> str | None:
    """Replace ``$NAME`` and ``$?`` and drop quote characters.

    Nothing is expanded inside single quotes.
    """
    if text is None:
        return None
    return "".join(_pieces(text, env, status))


def expand_command(command: Command, env: Environment, status: int) -> Command:
    """A copy of the command with its words and file names expanded.

    Here-document delimiters are left as written.
    """
    def words(items: Iterable[str]) -> list[str]:
        return [expand(item, env, status) for item in items]

    return replace(
        command,
        args=words(command.args),
        infile=words(command.infile),
        outfile=words(command.outfile),
        append=words(command.append),
        heredoc=list(command.heredoc),
    )


def expand_commands(commands: Iterable[Command], env: Environment,
                    status: int) -> list[Command]:
    """Expand every command of a pipeline."""
    return [expand_command(command, env, status) for command in commands]