import hashlib
import os
from pathlib import Path
from typing import Optional


CHUNK_SIZE = 8192


def compute_file_hash(file_path: str) -> str:
    """
    Compute SHA-256 hash of a file's contents, streamed in chunks.
    Raises OSError if the file cannot be opened or read.
    """
    sha256 = hashlib.sha256()
    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
            sha256.update(chunk)
    return sha256.hexdigest()


def find_latest_file(directory_path: str) -> Optional[Path]:
    """
    Return the most recently modified non-directory entry directly inside
    `directory_path`, or None if there is none.

    Raises OSError if the directory itself cannot be listed. Entries whose
    metadata cannot be read are skipped. On equal mtimes the first entry
    seen wins.
    """
    latest_path = None
    latest_mtime = None

    with os.scandir(directory_path) as entries:
        for entry in entries:
            try:
                if entry.is_dir():
                    continue
                mtime = entry.stat().st_mtime_ns
            except OSError:
                continue

            if latest_mtime is None or mtime > latest_mtime:
                latest_mtime = mtime
                latest_path = Path(entry.path)

    return latest_path
