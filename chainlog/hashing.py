"""SHA-256 helpers: digests, chained log-line hashes and proof of work."""

from __future__ import annotations

import hashlib

from chainlog.encoding import b64encode

DIGEST_SIZE = 32
LINE_HASH_LENGTH = 24
DEFAULT_ATTEMPTS = 100_000_000


def _as_bytes(data: str | bytes) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def sha256_digest(data: str | bytes) -> bytes:
    """Return the 32-byte SHA-256 digest of ``data``."""
    return hashlib.sha256(_as_bytes(data)).digest()


def hex_digest(data: str | bytes) -> str:
    """Return the SHA-256 digest of ``data`` as lower-case hex."""
    return sha256_digest(data).hex()


def line_hash(line: str | bytes) -> str:
    """Return the last 24 characters of the base-64 SHA-256 of ``line``."""
    return b64encode(sha256_digest(line))[-LINE_HASH_LENGTH:]


def has_proof_of_work(message: str | bytes) -> bool:
    """Tell whether the first 20 bits of the SHA-256 of ``message`` are zero."""
    digest = sha256_digest(message)
    return digest[0] == 0 and digest[1] == 0 and digest[2] & 0xF0 == 0


def find_proof_of_work(message: str, attempts: int = DEFAULT_ATTEMPTS) -> str:
    """Find the smallest 8-digit hex prefix making ``prefix:message`` a valid proof.

    Raises RuntimeError when none is found within ``attempts`` tries.
    """
    for counter in range(attempts):
        prefix = f"{counter:08x}"
        if has_proof_of_work(f"{prefix}:{message}"):
            return prefix
    raise RuntimeError(f"no proof of work found within {attempts} attempts")