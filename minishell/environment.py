"""The shell's environment: an ordered list of KEY=VALUE lines."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def numlen(number: int) -> int:
    """Number of characters needed to print an integer, sign included."""
    return len(str(number))


class Environment:
    """Ordered environment lines, looked up by the key before '='."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines = list(lines)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._lines))

    def __len__(self) -> int:
        return len(self._lines)

    def lookup(self, key: str) -> str | None:
        """Value of the first line of the form ``key=value``, or None."""
        if key is None:
            return None
        width = len(key)
        for line in self._lines:
            if line.startswith(key) and line[width:width + 1] == "=":
                return line[width + 1:]
        return None

    def append(self, line: str) -> None:
        """Add a line at the end."""
        self._lines.append(line)

    def remove_prefix(self, prefix: str) -> bool:
        """Remove the first line that starts with ``prefix``.

        Returns True if a line was removed.
        """
        for index, line in enumerate(self._lines):
            if line.startswith(prefix):
                del self._lines[index]
                return True
        return False

    def lines(self) -> list[str]:
        """A copy of all lines, in order."""
        return list(self._lines)