"""Verify a hash-chained log file against its head hash."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from pathlib import Path

from chainlog.hashing import line_hash

_LINE_LIMIT = 1023
START_HASH = "start"


class LogCheckError(Exception):
    """Raised when a log fails verification."""


def extract_hash(line: str) -> str | None:
    """Return the hash that follows the first " - " in ``line``.

    The hash runs up to the next space; None is returned when either
    separator is missing.
    """
    _, separator, rest = line.partition(" - ")
    if not separator:
        return None
    found, space, _ = rest.partition(" ")
    if not space:
        return None
    return found


def _pieces(lines: Iterable[str]) -> Iterator[str]:
    """Yield lines split at the length limit, each without its newline."""
    for line in lines:
        while line:
            piece, line = line[:_LINE_LIMIT], line[_LINE_LIMIT:]
            yield piece[:-1] if piece.endswith("\n") else piece


def check_log(log_path: str | Path = "log.txt", head_path: str | Path = "loghead.txt") -> int:
    """Check every link of the log chain and the head hash.

    Returns the number of lines verified. Raises LogCheckError describing
    the first problem found.
    """
    log_path = Path(log_path)
    head_path = Path(head_path)
    if not log_path.is_file():
        raise LogCheckError(f"{log_path.name} is missing")
    if not head_path.is_file():
        raise LogCheckError(f"{head_path.name} is missing")

    with head_path.open(encoding="utf-8", newline="\n") as head_file:
        head_line = head_file.readline()
    if not head_line:
        raise LogCheckError("empty head file")
    head_hash = head_line[:_LINE_LIMIT].partition("\n")[0]

    with log_path.open(encoding="utf-8", newline="\n") as log_file:
        lines = _pieces(log_file)
        first = next(lines, None)
        if first is None:
            raise LogCheckError("empty log file")
        first_hash = extract_hash(first)
        if first_hash is None:
            raise LogCheckError("invalid log format at line 1")
        if first_hash != START_HASH:
            raise LogCheckError("first line does not contain 'start' hash")

        current_hash = line_hash(first)
        count = 1
        for line_number, line in enumerate(lines, start=2):
            found = extract_hash(line)
            if found is None:
                raise LogCheckError(f"invalid log format at line {line_number}")
            if found != current_hash:
                raise LogCheckError(f"hash mismatch at line {line_number - 1}")
            current_hash = line_hash(line)
            count = line_number

    if current_hash != head_hash:
        raise LogCheckError("head hash mismatch at end of file")
    return count


def main(argv: list[str] | None = None) -> int:
    """Check log.txt and loghead.txt in the current directory."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        prog = sys.argv[0] if sys.argv and sys.argv[0] else "checklog"
        print(f"Usage: {prog}", file=sys.stderr)
        return 1
    try:
        check_log()
    except LogCheckError as exc:
        print(f"failed: {exc}")
        return 1
    print("valid")
    return 0


if __name__ == "__main__":
    sys.exit(main())