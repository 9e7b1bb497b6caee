# src/domain/models.py

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional


@dataclass(frozen=True)
class HostProfile:
    """
    One managed host's checkable configuration surface.

    A name may be in `allowed_files` without an entry in `file_directories`;
    lookups report that as a server-side misconfiguration.
    """
    name: str
    home_directory: str
    allowed_files: FrozenSet[str]
    file_directories: Mapping[str, str] = field(default_factory=dict)
    container_directory: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "allowed_files", frozenset(self.allowed_files))
        object.__setattr__(
            self, "file_directories", MappingProxyType(dict(self.file_directories))
        )

    def directory_for(self, subdirectory: str) -> str:
        return f"{self.home_directory}/{subdirectory}"


@dataclass(frozen=True)
class ChecksumResult:
    """
    SHA-256 digest of the newest file found for a lookup.
    """
    sha256sum: str
    file_path: Path

    def __repr__(self) -> str:
        return f"ChecksumResult(sha256sum='{self.sha256sum}', file='{self.file_path.name}')"
