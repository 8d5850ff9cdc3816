from pathlib import Path

import pytest

from chainlog.checklog import LogCheckError, check_log, extract_hash, main
from chainlog.hashing import line_hash


def _write_chain(directory: Path, messages):
    lines = []
    previous = "start"
    for index, message in enumerate(messages):
        line = f"2024-01-01 00:00:0{index} - {previous} {message}"
        lines.append(line)
        previous = line_hash(line)
    (directory / "log.txt").write_bytes("".join(line + "\n" for line in lines).encode())
    (directory / "loghead.txt").write_bytes(previous.encode())
    return lines


def test_extract_hash_takes_word_after_separator():
    assert extract_hash("2024-01-01 00:00:00 - start hello world") == "start"


def test_extract_hash_without_separator():
    assert extract_hash("no separator here") is None


def test_extract_hash_without_following_space():
    assert extract_hash("x - nospace") is None


def test_valid_chain(tmp_path):
    _write_chain(tmp_path, ["one", "two", "three"])
    assert check_log(tmp_path / "log.txt", tmp_path / "loghead.txt") == 3


def test_single_line_chain(tmp_path):
    _write_chain(tmp_path, ["only"])
    assert check_log(tmp_path / "log.txt", tmp_path / "loghead.txt") == 1


def test_missing_log(tmp_path):
    with pytest.raises(LogCheckError, match="log.txt is missing"):
        check_log(tmp_path / "log.txt", tmp_path / "loghead.txt")


def test_missing_head(tmp_path):
    _write_chain(tmp_path, ["one"])
    (tmp_path / "loghead.txt").unlink()
    with pytest.raises(LogCheckError, match="loghead.txt is missing"):
        check_log(tmp_path / "log.txt", tmp_path / "loghead.txt")


def test_empty_head(tmp_path):
    _write_chain(tmp_path, ["one"])
    (tmp_path / "loghead.txt").write_bytes(b"")
    with pytest.raises(LogCheckError, match="empty head file"):
        check_log(tmp_path / "log.txt", tmp_path / "loghead.txt")


def test_empty_log(tmp_path):
    _write_chain(tmp_path, ["one"])
    (tmp_path / "log.txt").write_bytes(b"")
    with pytest.raises(LogCheckError, match="empty log file"):
        check_log(tmp_path / "log.txt", tmp_path / "loghead.txt")


def test_first_line_without_start(tmp_path):
    (tmp_path / "log.txt").write_bytes(b"2024-01-01 00:00:00 - other hello\n")
    (tmp_path / "loghead.txt").write_bytes(b"x")
    with pytest.raises(LogCheckError, match="first line does not contain 'start' hash"):
        check_log(tmp_path / "log.txt", tmp_path / "loghead.txt")


def test_first_line_bad_format(tmp_path):
    (tmp_path / "log.txt").write_bytes(b"garbage\n")
    (tmp_path / "loghead.txt").write_bytes(b"x")
    with pytest.raises(LogCheckError, match="invalid log format at line 1"):
        check_log(tmp_path / "log.txt", tmp_path / "loghead.txt")


def test_later_line_bad_format(tmp_path):
    lines = _write_chain(tmp_path, ["one"])
    (tmp_path / "log.txt").write_bytes((lines[0] + "\ngarbage\n").encode())
    with pytest.raises(LogCheckError, match="invalid log format at line 2"):
        check_log(tmp_path / "log.txt", tmp_path / "loghead.txt")


def test_tampered_line_detected(tmp_path):
    lines = _write_chain(tmp_path, ["one", "two", "three"])
    lines[1] = lines[1] + "!"
    (tmp_path / "log.txt").write_bytes("".join(line + "\n" for line in lines).encode())
    with pytest.raises(LogCheckError, match="hash mismatch at line 2"):
        check_log(tmp_path / "log.txt", tmp_path / "loghead.txt")


def test_head_mismatch(tmp_path):
    _write_chain(tmp_path, ["one", "two"])
    (tmp_path / "loghead.txt").write_bytes(b"wrong")
    with pytest.raises(LogCheckError, match="head hash mismatch at end of file"):
        check_log(tmp_path / "log.txt", tmp_path / "loghead.txt")


def test_main_valid(tmp_path, monkeypatch, capsys):
    _write_chain(tmp_path, ["one", "two"])
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    assert capsys.readouterr().out == "valid\n"


def test_main_reports_failure(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert capsys.readouterr().out == "failed: log.txt is missing\n"


def test_main_rejects_arguments(capsys):
    assert main(["extra"]) == 1
    assert "Usage" in capsys.readouterr().err