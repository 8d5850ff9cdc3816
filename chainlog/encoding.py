"""Base-64 encoding with the standard alphabet and optional 76-column lines."""

from __future__ import annotations

import base64
import binascii

LINE_WIDTH = 76


def b64encode(data: bytes, newlines: bool = False) -> str:
    """Encode ``data`` as base-64 text.

    With ``newlines`` set, a newline follows every full 76-character line made
    of complete 3-byte groups; the final padded group is never followed by one.
    """
    data = bytes(data)
    whole = len(data) - len(data) % 3
    body = base64.b64encode(data[:whole]).decode("ascii")
    tail = base64.b64encode(data[whole:]).decode("ascii")
    if newlines:
        lines = (body[start:start + LINE_WIDTH] for start in range(0, len(body), LINE_WIDTH))
        body = "".join(line + "\n" if len(line) == LINE_WIDTH else line for line in lines)
    return body + tail


def b64decode(text: str | bytes) -> bytes:
    """Decode base-64 text, ignoring newlines and up to two trailing ``=``.

    Raises ValueError for characters outside the alphabet or a truncated group.
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("ascii")
        except UnicodeDecodeError as exc:
            raise ValueError("base-64 input must be ASCII") from exc
    compact = text.replace("\n", "")
    for _ in range(2):
        if compact.endswith("="):
            compact = compact[:-1]
    if len(compact) % 4 == 1:
        raise ValueError("base-64 input has a truncated group")
    padded = compact + "=" * (-len(compact) % 4)
    try:
        return base64.b64decode(padded, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base-64 input: {exc}") from exc