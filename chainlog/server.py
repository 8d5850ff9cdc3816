"""A TCP server appending proof-of-work messages to a hash-chained log."""

from __future__ import annotations

import socket
import sys
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from chainlog.hashing import has_proof_of_work, line_hash

MAX_MSG = 1024
START_HASH = "start"
LOG_NAME = "log.txt"
HEAD_NAME = "loghead.txt"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
_HEAD_LIMIT = 24


class LogBook:
    """A log file and its head-hash file in one directory."""

    def __init__(self, directory: str | Path = ".") -> None:
        self.directory = Path(directory)
        self.log_path = self.directory / LOG_NAME
        self.head_path = self.directory / HEAD_NAME

    def previous_hash(self) -> str:
        """Return the current head hash, or "start" for a new log.

        Raises FileNotFoundError when the head file is gone but the log exists.
        """
        try:
            with self.head_path.open(encoding="utf-8", newline="\n") as head_file:
                head = head_file.readline()
        except FileNotFoundError:
            if self.log_path.exists():
                raise FileNotFoundError(f"{HEAD_NAME} is missing") from None
            return START_HASH
        if not head:
            return START_HASH
        return head[:_HEAD_LIMIT].partition("\n")[0]

    def append(self, message: str, now: datetime | None = None) -> str:
        """Append a chained entry for ``message`` and update the head hash.

        Returns the entry written. Raises ValueError when the entry is too long.
        """
        previous = self.previous_hash()
        timestamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
        total = sum(len(part.encode("utf-8")) for part in (timestamp, previous, message)) + 5
        if total >= MAX_MSG:
            raise ValueError("Message too long for log entry")
        entry = f"{timestamp} - {previous} {message}"
        new_hash = line_hash(entry)
        with self.log_path.open("a", encoding="utf-8", newline="\n") as log_file:
            log_file.write(entry + "\n")
        with self.head_path.open("w", encoding="utf-8", newline="\n") as head_file:
            head_file.write(new_hash)
        return entry

    def handle(self, data: bytes, now: datetime | None = None) -> str:
        """Process one request received from a client and return the reply."""
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError:
            text = None
        if text is not None:
            text = text.partition("\n")[0]
            print(f"Received: {text}")
        if text is None or not has_proof_of_work(text):
            return "Invalid proof of work\n"

        _, colon, rest = text.partition(":")
        message = rest if colon else text

        try:
            self.previous_hash()
        except FileNotFoundError:
            return f"Error: {HEAD_NAME} is missing\n"
        try:
            entry = self.append(message, now)
        except ValueError:
            return "Error: Message too long for log entry\n"
        except OSError as exc:
            if Path(exc.filename or "") == self.head_path:
                return "Error: Cannot update head file\n"
            return "Error: Cannot open log file\n"
        print(f'logging: "{entry}"')
        return "ok\n"


def serve(
    book: LogBook,
    host: str = "",
    port: int = 0,
    ready: Callable[[int], None] | None = None,
) -> None:
    """Accept clients forever, handling one request per connection."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.bind((host, port))
        bound = server.getsockname()[1]
        print(f"Server listening on port: {bound}", flush=True)
        server.listen(5)
        if ready is not None:
            ready(bound)
        while True:
            try:
                client, _ = server.accept()
            except OSError as exc:
                print(f"Accept failed: {exc}", file=sys.stderr)
                continue
            print("Client connected", flush=True)
            with client:
                try:
                    data = client.recv(MAX_MSG - 1)
                except OSError as exc:
                    print(f"Error reading from socket: {exc}", file=sys.stderr)
                    continue
                reply = book.handle(data)
                try:
                    client.sendall(reply.encode("utf-8"))
                except OSError as exc:
                    print(f"Send failed: {exc}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Serve the log in the current directory on a system-chosen port."""
    try:
        serve(LogBook("."))
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(f"Server failed: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())