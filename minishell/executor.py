"""Running a pipeline of external commands with their redirections."""

from __future__ import annotations

import os
import subprocess
import sys
import tempfile
from collections.abc import Callable
from contextlib import ExitStack
from typing import IO, Optional, Union

from .cstr import split_fields
from .environment import Environment
from .model import Command, Shell

ReadLine = Callable[[str], Optional[str]]
_Stream = Union[IO[bytes], int, None]


class CommandNotFound(LookupError):
    """No executable was found for a command name."""


def contains_within(haystack: str, needle: str, limit: int) -> bool:
    """True if ``needle`` occurs wholly within the first ``limit`` characters."""
    if not needle:
        return False
    return needle in haystack[:max(limit, 0)]


def find_paths(env: Environment | None) -> list[str]:
    """Directories listed in the PATH line of the environment."""
    if env is None:
        return []
    for line in env.lines():
        if contains_within(line, "PATH", 4):
            return split_fields(line[5:], ":")
    return []


def resolve_command(name: str, env: Environment | None) -> str:
    """Path of the executable to run for ``name``.

    An absolute name is used as is when executable. Otherwise PATH is
    searched, starting from its second entry. Raises CommandNotFound.
    """
    if not name:
        raise CommandNotFound(name)
    if name.startswith("/") and os.access(name, os.X_OK):
        return name
    for directory in find_paths(env)[1:]:
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    raise CommandNotFound(name)


def collect_heredoc(delimiter: str, read_line: ReadLine = input) -> list[str]:
    """Read lines until one equals ``delimiter`` or input ends."""
    lines: list[str] = []
    while True:
        try:
            line = read_line("hd:")
        except EOFError:
            break
        if line is None or line == delimiter:
            break
        lines.append(line)
    return lines


def _open_inputs(names: list[str], stack: ExitStack, current: _Stream) -> _Stream:
    for name in names:
        if not os.path.exists(name):
            print(f"zsh: no such file or directory: {name} ")
            return current
        if not os.access(name, os.R_OK):
            print(f"zsh: permission denied: {name} ")
            return current
        try:
            current = stack.enter_context(open(name, "rb"))
        except OSError:
            print(f"can't open {name} ")
            return current
    return current


def _open_outputs(names: list[str], mode: str, stack: ExitStack,
                  current: _Stream) -> _Stream:
    for name in names:
        try:
            handle = stack.enter_context(open(name, mode))
        except OSError:
            print(f"can't open {name} ")
            return current
        if not os.access(name, os.R_OK | os.W_OK):
            print(f"can't open {name} ")
            return current
        current = handle
    return current


def _open_stage_files(command: Command, read_line: ReadLine,
                      stack: ExitStack) -> tuple[_Stream, _Stream]:
    stdin: _Stream = None
    for delimiter in command.heredoc:
        body = "".join(f"{line}\n" for line in collect_heredoc(delimiter, read_line))
        spool = stack.enter_context(tempfile.TemporaryFile())
        spool.write(body.encode())
        spool.seek(0)
        stdin = spool
    stdin = _open_inputs(command.infile, stack, stdin)
    stdout = _open_outputs(command.outfile, "wb", stack, None)
    stdout = _open_outputs(command.append, "ab", stack, stdout)
    return stdin, stdout


def _exec_env(name: str, env: Environment) -> dict[str, str]:
    if not name.startswith("/"):
        return {}
    variables: dict[str, str] = {}
    for line in env.lines():
        key, sep, value = line.partition("=")
        if sep:
            variables.setdefault(key, value)
    return variables


def _start_stage(shell: Shell, command: Command, env: Environment,
                 read_line: ReadLine, pipe_in: int | None,
                 pipe_out: int | None) -> subprocess.Popen | int:
    with ExitStack() as stack:
        stdin, stdout = _open_stage_files(command, read_line, stack)
        if pipe_in is not None:
            stdin = pipe_in
        if pipe_out is not None:
            stdout = pipe_out
        name = command.args[0] if command.args else ""
        try:
            program = resolve_command(name, env)
            sys.stdout.flush()
            return subprocess.Popen(
                command.args,
                executable=program,
                stdin=stdin,
                stdout=stdout,
                env=_exec_env(name, env),
            )
        except (CommandNotFound, OSError):
            print(": command not found")
            return shell.status


def run_pipeline(shell: Shell, read_line: ReadLine = input) -> int:
    """Run the shell's commands as one pipeline and return its status.

    Pipes take precedence over file redirections. The status reported is
    that of the first command, which is waited for last.
    """
    env = shell.env if shell.env is not None else Environment()
    commands = shell.commands
    running: list[subprocess.Popen | int] = []
    prev_read: int | None = None
    try:
        for index, command in enumerate(commands):
            read_end = write_end = None
            if index < len(commands) - 1:
                read_end, write_end = os.pipe()
            try:
                running.append(
                    _start_stage(shell, command, env, read_line, prev_read, write_end)
                )
            finally:
                if write_end is not None:
                    os.close(write_end)
                if prev_read is not None:
                    os.close(prev_read)
                prev_read = read_end
    finally:
        if prev_read is not None:
            os.close(prev_read)
    status = 0
    for item in reversed(running):
        status = item.wait() if isinstance(item, subprocess.Popen) else item
    shell.status = status
    return status