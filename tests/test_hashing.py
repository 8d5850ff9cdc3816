import base64

import pytest

from chainlog.hashing import (
    find_proof_of_work,
    has_proof_of_work,
    hex_digest,
    line_hash,
    sha256_digest,
)


def test_hex_digest_of_abc():
    assert hex_digest("abc") == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_hex_digest_of_empty():
    assert hex_digest(b"") == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_digest_and_hex_agree():
    digest = sha256_digest("some log line")
    assert len(digest) == 32
    assert digest.hex() == hex_digest("some log line")


def test_str_and_bytes_give_same_digest():
    assert sha256_digest("hello") == sha256_digest(b"hello")


def test_line_hash_is_suffix_of_full_encoding():
    line = "2024-01-01 00:00:00 - start hello"
    full = base64.b64encode(sha256_digest(line)).decode("ascii")
    result = line_hash(line)
    assert len(result) == 24
    assert full.endswith(result)
    assert result.endswith("=")


def test_line_hash_differs_for_different_lines():
    assert line_hash("a") != line_hash("b")


def test_plain_message_lacks_proof_of_work():
    assert has_proof_of_work("hello") is False


def test_find_proof_of_work_gives_valid_prefix():
    prefix = find_proof_of_work("hello")
    assert len(prefix) == 8
    assert all(ch in "0123456789abcdef" for ch in prefix)
    assert has_proof_of_work(f"{prefix}:hello")


def test_find_proof_of_work_gives_up():
    with pytest.raises(RuntimeError):
        find_proof_of_work("hello", attempts=0)