# tests/test_file_hasher.py

import hashlib
import os

import pytest

from src.infrastructure.file_hasher import CHUNK_SIZE, compute_file_hash, find_latest_file


def _write(path, content: bytes, mtime: int):
    path.write_bytes(content)
    os.utime(path, (mtime, mtime))
    return path


def test_compute_file_hash_matches_hashlib(tmp_path):
    content = b"pass in on egress proto tcp\n"
    target = tmp_path / "pf.conf"
    target.write_bytes(content)

    assert compute_file_hash(str(target)) == hashlib.sha256(content).hexdigest()


def test_compute_file_hash_streams_multiple_chunks(tmp_path):
    content = os.urandom(CHUNK_SIZE * 3 + 17)
    target = tmp_path / "big.bin"
    target.write_bytes(content)

    assert compute_file_hash(str(target)) == hashlib.sha256(content).hexdigest()


def test_compute_file_hash_empty_file(tmp_path):
    target = tmp_path / "empty"
    target.write_bytes(b"")

    assert compute_file_hash(str(target)) == hashlib.sha256(b"").hexdigest()


def test_compute_file_hash_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        compute_file_hash(str(tmp_path / "nope"))


def test_find_latest_file_picks_max_mtime(tmp_path):
    _write(tmp_path / "pf.conf.2024-01-01", b"old", 1_700_000_000)
    newest = _write(tmp_path / "pf.conf.2024-03-01", b"new", 1_700_000_300)
    _write(tmp_path / "pf.conf.2024-02-01", b"mid", 1_700_000_100)

    assert find_latest_file(str(tmp_path)) == newest


def test_find_latest_file_skips_directories(tmp_path):
    only_file = _write(tmp_path / "storage.cfg.1", b"x", 1_700_000_000)
    subdir = tmp_path / "archive"
    subdir.mkdir()
    os.utime(subdir, (1_800_000_000, 1_800_000_000))

    assert find_latest_file(str(tmp_path)) == only_file


def test_find_latest_file_ignores_nested_files(tmp_path):
    top = _write(tmp_path / "relayd.conf.1", b"x", 1_700_000_000)
    nested = tmp_path / "archive"
    nested.mkdir()
    _write(nested / "relayd.conf.9", b"y", 1_800_000_000)

    assert find_latest_file(str(tmp_path)) == top


def test_find_latest_file_empty_directory_returns_none(tmp_path):
    (tmp_path / "only-a-dir").mkdir()
    assert find_latest_file(str(tmp_path)) is None


def test_find_latest_file_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        find_latest_file(str(tmp_path / "missing"))


def test_find_latest_file_skips_dangling_symlink(tmp_path):
    real = _write(tmp_path / "httpd.conf.1", b"x", 1_700_000_000)
    (tmp_path / "broken").symlink_to(tmp_path / "does-not-exist")

    assert find_latest_file(str(tmp_path)) == real
