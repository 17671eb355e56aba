"""Commands the shell runs itself, and the routing of a line to them."""

from __future__ import annotations

import os
import sys
from typing import IO, Optional

from .cstr import atoi, prefix_equal
from .environment import Environment
from .executor import ReadLine, run_pipeline
from .model import Shell


class ShellExit(Exception):
    """The shell has been asked to stop with the given status."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def is_number(text: str) -> bool:
    """True if every character is a decimal digit (an empty string counts)."""
    return all("0" <= char <= "9" for char in text)


def _args(shell: Shell) -> list[str]:
    return shell.commands[0].args if shell.commands else []


def _alone(shell: Shell) -> bool:
    return len(shell.commands) <= 1


def _stream(out: Optional[IO[str]]) -> IO[str]:
    return out if out is not None else sys.stdout


def _environment(shell: Shell) -> Environment:
    if shell.env is None:
        shell.env = Environment()
    return shell.env


def builtin_exit(shell: Shell) -> None:
    """Leave the shell.

    With no argument the last status is kept. With one numeric argument
    that number becomes the status; a non-numeric one keeps the last
    status. With more than one argument nothing happens.
    """
    rest = _args(shell)[1:]
    if not rest:
        raise ShellExit(shell.status)
    if len(rest) > 1:
        return
    if is_number(rest[0]):
        shell.status = atoi(rest[0])
    raise ShellExit(shell.status)


def builtin_echo(shell: Shell, out: Optional[IO[str]] = None) -> None:
    """Print each argument on its own line, or all run together after -n."""
    if not _alone(shell):
        return
    stream = _stream(out)
    rest = _args(shell)[1:]
    if rest and rest[0] == "-n":
        stream.write("".join(rest[1:]))
    else:
        stream.write("".join(f"{word}\n" for word in rest))


def builtin_env(shell: Shell, out: Optional[IO[str]] = None) -> None:
    """Print every environment line."""
    if not _alone(shell) or shell.env is None:
        return
    stream = _stream(out)
    stream.write("".join(f"{line} \n" for line in shell.env.lines()))


def builtin_unset(shell: Shell) -> None:
    """Remove, for each argument, the first environment line it begins."""
    if not _alone(shell) or shell.env is None:
        return
    for name in _args(shell)[1:]:
        shell.env.remove_prefix(name)


def builtin_export(shell: Shell) -> None:
    """Append each KEY=VALUE argument to the environment.

    Stops at the first argument that holds no '='.
    """
    if not _alone(shell):
        return
    env = _environment(shell)
    for assignment in _args(shell)[1:]:
        if "=" not in assignment:
            return
        env.append(assignment)


def builtin_pwd(shell: Shell, out: Optional[IO[str]] = None) -> None:
    """Print the current working directory."""
    if not _alone(shell):
        return
    _stream(out).write(f"{os.getcwd()}\n")


def builtin_cd(shell: Shell, out: Optional[IO[str]] = None) -> None:
    """Change the working directory to the single argument."""
    stream = _stream(out)
    rest = _args(shell)[1:]
    if len(rest) > 1:
        stream.write("too many arguments\n")
        return
    try:
        if not rest:
            raise OSError("no directory given")
        os.chdir(rest[0])
    except OSError:
        stream.write("directory problem\n")


def dispatch(shell: Shell, line: str, out: Optional[IO[str]] = None,
             read_line: ReadLine = input) -> int:
    """Run a parsed line: a builtin chosen by how the line begins, else a pipeline.

    Returns the shell's status afterwards. Raises ShellExit to leave.
    """
    if prefix_equal(line, "exit", 4):
        builtin_exit(shell)
    elif prefix_equal(line, "echo", 4):
        builtin_echo(shell, out)
    elif prefix_equal(line, "env", 3):
        builtin_env(shell, out)
    elif prefix_equal(line, "unset", 5):
        builtin_unset(shell)
    elif prefix_equal(line, "export", 6):
        builtin_export(shell)
    elif prefix_equal(line, "pwd", 3):
        builtin_pwd(shell, out)
    elif prefix_equal(line, "cd", 2):
        builtin_cd(shell, out)
    else:
        run_pipeline(shell, read_line)
    return shell.status