"""Send a message with proof of work to a log server."""

from __future__ import annotations

import re
import socket
import sys

from chainlog.hashing import find_proof_of_work

BUFFER_SIZE = 1024
DEFAULT_HOST = "127.0.0.1"
_WHITESPACE = str.maketrans({ch: " " for ch in "\t\n\v\f\r"})
_PREFIX_LENGTH = 9  # eight hex digits and a colon


def normalize_whitespace(text: str) -> str:
    """Replace tabs, newlines and other ASCII whitespace with spaces."""
    return text.translate(_WHITESPACE)


def build_message(message: str) -> str:
    """Return ``proof:message`` for the whitespace-normalised message.

    Raises ValueError when the line would not fit the server's buffer, and
    RuntimeError when no proof of work is found.
    """
    message = normalize_whitespace(message)
    if _PREFIX_LENGTH + len(message.encode("utf-8")) >= BUFFER_SIZE - 2:
        raise ValueError("Message too long")
    return f"{find_proof_of_work(message)}:{message}"


def send_message(port: int, message: str, host: str = DEFAULT_HOST) -> str:
    """Send ``message`` to the server and return its reply."""
    with socket.create_connection((host, port)) as sock:
        line = build_message(message)
        sock.sendall((line + "\n").encode("utf-8"))
        reply = sock.recv(BUFFER_SIZE - 1)
    return reply.decode("utf-8", errors="replace")


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Send the message given on the command line to a local server."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        prog = sys.argv[0] if sys.argv and sys.argv[0] else "log"
        print(f"Usage: {prog} <port> <message>", file=sys.stderr)
        return 1
    port, message = _atoi(args[0]), args[1]
    try:
        reply = send_message(port, message)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    except RuntimeError:
        print("Failed to generate proof of work", file=sys.stderr)
        return 1
    except (OSError, OverflowError) as exc:
        print(f"Connection failed: {exc}", file=sys.stderr)
        return 1
    print(f"Server response: {reply}", end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())