"""Print the SHA-256 of strings in hex and in base 64."""

from __future__ import annotations

import getopt
import sys

from chainlog.encoding import b64encode
from chainlog.hashing import sha256_digest

USAGE = "usage: {prog} [-d] [string ...]"
_LINE_LIMIT = 255


def describe(text: str) -> str:
    """Return the two report lines for ``text``: hex hash and base-64 hash."""
    digest = sha256_digest(text)
    return f'hash(message): {digest.hex()}\nb64 hash = "{b64encode(digest)}"'


def _stdin_pieces(stream):
    for line in stream:
        while line:
            piece, line = line[:_LINE_LIMIT], line[_LINE_LIMIT:]
            yield piece[:-1] if piece.endswith("\n") else piece


def main(argv: list[str] | None = None) -> int:
    """Hash each argument, or each line of standard input when none is given."""
    args = sys.argv[1:] if argv is None else list(argv)
    prog = sys.argv[0] if sys.argv and sys.argv[0] else "b64hash"
    try:
        _options, strings = getopt.getopt(args, "d")
    except getopt.GetoptError:
        print(USAGE.format(prog=prog), file=sys.stderr)
        return 1

    texts = strings if strings else _stdin_pieces(sys.stdin)
    for text in texts:
        print(describe(text))
    return 0


if __name__ == "__main__":
    sys.exit(main())