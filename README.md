# minishell

The parts of a small command shell, usable from Python: a syntax check for a
command line, a tokenizer, `$NAME` / `$?` expansion against an environment,
a set of builtins, and a runner that starts a pipeline of external programs
connected by pipes, with their file redirections and heredocs applied.

## Modules

| Module | Purpose |
| --- | --- |
| `minishell.model` | `TokenType`, `Token`, `Command` (with `stages()`) and the `Shell` state |
| `minishell.cstr` | `atoi`, `split_fields`, `prefix_equal` |
| `minishell.syntax` | `is_space`, `is_special`, `only_space`, `has_open_quote`, `check_syntax`, `check_input`; raises `ShellSyntaxError` |
| `minishell.lexer` | `tokenize`, `skip_quotes`, `format_tokens`, `format_commands` |
| `minishell.environment` | `Environment`, an ordered list of `NAME=value` lines, and `numlen` |
| `minishell.expand` | `expand`, `expanded_length`, `expand_command`, `expand_commands` |
| `minishell.executor` | `contains_within`, `find_paths`, `resolve_command`, `collect_heredoc`, `run_pipeline`; raises `CommandNotFound` |
| `minishell.builtins` | `dispatch`, `is_number` and the `builtin_*` functions; `ShellExit` ends a session |

## Checking and tokenizing a line

`check_input` returns `False` for a blank line, `True` for a usable one, and
raises `ShellSyntaxError` for an unclosed quote or a misplaced `|`, `<`, `>`,
`<<` or `>>`.

```python
from minishell.syntax import ShellSyntaxError, check_input
from minishell.lexer import tokenize, format_tokens

line = 'echo "$HOME" | wc -c > out.txt'
try:
    usable = check_input(line)
except ShellSyntaxError as error:
    print(error)
else:
    if usable:
        print(format_tokens(tokenize(line)), end="")
```

`tokenize` returns `Token` objects of type `ARG`, `PIPE`, `OUT`, `IN`,
`APPEND` or `HEREDOC`; a redirection token carries its target word. Quotes
stay in the token values and are removed on expansion.

## Expansion

```python
from minishell.environment import Environment
from minishell.expand import expand

env = Environment(["HOME=/home/user", "PATH=/usr/local/bin:/usr/bin:/bin"])
print(expand("'$HOME' is literal, \"$HOME\" is not, status $?", env, 0))
# $HOME is literal, /home/user is not, status 0
```

Nothing is expanded inside single quotes; an unknown name expands to nothing.
`expand_command` expands a `Command`'s arguments and file names but leaves
heredoc delimiters as written.

## Builtins and pipelines

`dispatch(shell, line, out, read_line)` picks a builtin by how the raw line
begins (`exit`, `echo`, `env`, `unset`, `export`, `pwd`, `cd`) and runs it on
the first command in `shell.commands`, writing to `out` (standard output by
default). Any other line goes to `run_pipeline`. It returns the shell's
status; `exit` raises `ShellExit` carrying the status.

Some behaviours to know:

- `echo` prints each argument on its own line; with `-n` first, the rest are
  written run together with no newline.
- `env` writes each line followed by a space and a newline.
- `unset NAME` removes the first environment line that begins with `NAME`.
- `export` appends `KEY=VALUE` arguments and stops at the first without `=`.
- `echo`, `env`, `unset`, `export` and `pwd` do nothing when the line holds
  more than one command.

`run_pipeline` starts every command of `shell.commands`, connecting them with
pipes, which take precedence over file redirections. Heredoc lines are read
with `read_line("hd:")`. A command name starting with `/` is run directly;
other names are searched along `PATH`, skipping its first entry. A command
that cannot be found prints `: command not found`. The status stored in
`shell.status` and returned is that of the first command.

## What it does not do

- There is no command to run and no interactive prompt: the package gives the
  pieces, and a caller reads lines and drives them.
- Nothing turns a token list into `Command` objects; the caller builds the
  `Command`s of `shell.commands` from the tokens itself.
- There is no signal handling and no command history.

## Tests

The test suite uses pytest and lives in `tests/`:

```
pip install -e .[test]
pytest
```