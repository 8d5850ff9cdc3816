# chainlog

A small tamper-evident logging system. A server appends messages to
`log.txt`, and each line carries a hash of the line before it. Any edit,
deletion or reordering breaks the chain. The hash of the newest line is kept
in `loghead.txt`. Clients must attach a proof of work to every message, which
makes flooding the log expensive.

The package uses only the standard library.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Log format

Each log line has the form:

```
YYYY-MM-DD HH:MM:SS - <previous hash> <message>
```

The first line uses `start` as its previous hash. A line's hash is the last
24 characters of the base-64 encoded SHA-256 of the whole line, without its
newline. `loghead.txt` holds the hash of the last line, with no newline.

## Commands

### Run the server

```
chainlog-server
```

The server binds to a port chosen by the system on all interfaces, prints
`Server listening on port: N`, and keeps `log.txt` and `loghead.txt` in the
current directory. It handles one request per connection: it reads up to
1023 bytes, takes the text up to the first newline, and checks that its
SHA-256 starts with 20 zero bits. The part before the first `:` is dropped
and the rest is logged. The reply is one of:

- `ok`
- `Invalid proof of work`
- `Error: loghead.txt is missing` (when `log.txt` exists without it)
- `Error: Message too long for log entry` (when the entry would reach 1024 bytes)
- `Error: Cannot open log file`
- `Error: Cannot update head file`

Stop it with Ctrl-C.

### Send a message

```
chainlog-log PORT "disk usage above 90%"
```

Tabs, newlines and other ASCII whitespace in the message become plain
spaces. A proof of work is then found: the smallest 8-digit hex prefix such
that the SHA-256 of `prefix:message` starts with 20 zero bits. The line is
sent to the server on 127.0.0.1, and its reply is printed as
`Server response: ...`. The command exits with 1 on a wrong argument count,
a message too long to send, or a connection failure.

### Check the log

```
chainlog-check
```

Run it in the directory holding `log.txt` and `loghead.txt`. It takes no
arguments. It prints `valid` and exits with 0 when the chain is intact.
Otherwise it prints `failed: ...` naming the first problem and exits with 1,
for example `failed: hash mismatch at line 3` or
`failed: head hash mismatch at end of file`.

### Hash arbitrary strings

```
chainlog-b64hash "some text" "more text"
echo "some text" | chainlog-b64hash
```

For each string it prints two lines:

```
hash(message): <hex sha-256>
b64 hash = "<base-64 sha-256>"
```

With no arguments, each line of standard input is hashed, without its
newline. The `-d` option is accepted and changes nothing.

## Library use

```python
from pathlib import Path

from chainlog.checklog import LogCheckError, check_log
from chainlog.server import LogBook

Path("logs").mkdir(exist_ok=True)
book = LogBook("logs")
book.append("service started")
book.append("service stopped")

try:
    lines = check_log("logs/log.txt", "logs/loghead.txt")
    print(f"{lines} lines verified")
except LogCheckError as exc:
    print(exc)
```

- `chainlog.server.LogBook(directory)` manages `log.txt` and `loghead.txt`
  in an existing directory. `previous_hash()` returns the head hash or
  `start`. `append(message, now=None)` writes an entry and returns it, raising
  `ValueError` when it is too long. `handle(data, now=None)` processes one
  raw request and returns the reply text.
- `chainlog.server.serve(book, host="", port=0, ready=None)` runs the server
  loop. `ready` is called with the bound port once it is listening.
- `chainlog.client.send_message(port, message, host="127.0.0.1")` sends a
  message and returns the reply. `build_message(message)` returns the
  `proof:message` line, and `normalize_whitespace(text)` does the whitespace
  replacement.
- `chainlog.checklog.check_log(log_path="log.txt", head_path="loghead.txt")`
  returns the number of lines verified or raises `LogCheckError`.
  `extract_hash(line)` returns the hash field of a line, or `None`.
- `chainlog.hashing` provides `sha256_digest`, `hex_digest`, `line_hash`,
  `has_proof_of_work` and `find_proof_of_work(message, attempts=100000000)`.
  The last raises `RuntimeError` when no proof is found.
- `chainlog.encoding` provides `b64encode(data, newlines=False)` and
  `b64decode(text)`. With `newlines`, a newline follows every full
  76-character line. `b64decode` ignores newlines and trailing `=`, and it
  raises `ValueError` on bad input.

## Limits

- The server has no option for its port or address. It always takes a
  system-chosen port on all interfaces and logs to the current directory.
- The `chainlog-log` command only talks to 127.0.0.1. Use `send_message` for
  another host.
- Requests are handled one at a time. There is no locking for several
  writers to the same log.