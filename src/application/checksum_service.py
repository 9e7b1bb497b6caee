# src/application/checksum_service.py

from pathlib import Path
from typing import Callable, Optional

from src.domain.errors import (
    DirectoryUnreadable,
    DisallowedFile,
    EmptyInput,
    FileUnreadable,
    NoFileFound,
    UnmappedFile,
)
from src.domain.interfaces import ErrorLogPort
from src.domain.models import ChecksumResult, HostProfile
from src.infrastructure.file_hasher import compute_file_hash, find_latest_file


ContainerIdValidator = Callable[[str], bool]


def is_numeric_container_id(container_id: str) -> bool:
    """Proxmox container IDs are plain integers."""
    return container_id.isascii() and container_id.isdigit()


class ChecksumService:
    """
    Core use case: hash the newest file behind a logical name for one host.

    Two lookups share the scan-and-hash pipeline:
    - checksum_for_file(): name checked against the profile's allow-list
    - checksum_for_container(): raw id interpolated into
      <home>/<container_directory>/<id>, unchecked unless a
      container_id_validator is supplied

    Every server-side failure is written to the error log before the
    corresponding ServerError is raised.
    """

    def __init__(
        self,
        profile: HostProfile,
        error_log: ErrorLogPort,
        container_id_validator: Optional[ContainerIdValidator] = None,
    ):
        self._profile = profile
        self._error_log = error_log
        self._container_id_validator = container_id_validator

    @property
    def profile(self) -> HostProfile:
        return self._profile

    def checksum_for_file(self, file_name: str) -> ChecksumResult:
        if not file_name:
            raise EmptyInput("file empty")

        if file_name not in self._profile.allowed_files:
            raise DisallowedFile("unsupported file")

        subdirectory = self._profile.file_directories.get(file_name)
        if subdirectory is None:
            message = f"cant find dir for '{file_name}' in profile '{self._profile.name}'"
            self._error_log.log(message)
            raise UnmappedFile(message)

        return self._checksum_latest_in(self._profile.directory_for(subdirectory))

    def checksum_for_container(self, container_id: str) -> ChecksumResult:
        if self._profile.container_directory is None:
            raise ValueError(f"Profile '{self._profile.name}' has no container directory.")

        if not container_id:
            raise EmptyInput("id empty")

        if self._container_id_validator is not None and not self._container_id_validator(container_id):
            raise DisallowedFile("unsupported id")

        directory = self._profile.directory_for(
            f"{self._profile.container_directory}/{container_id}"
        )
        return self._checksum_latest_in(directory)

    def _checksum_latest_in(self, directory: str) -> ChecksumResult:
        try:
            latest_file = find_latest_file(directory)
        except (OSError, ValueError) as error:
            message = f"cant read dir {directory}: {error}"
            self._error_log.log(message)
            raise DirectoryUnreadable(message) from error

        if latest_file is None:
            message = f"cant find file in {directory}"
            self._error_log.log(message)
            raise NoFileFound(message)

        try:
            digest = compute_file_hash(str(latest_file))
        except (OSError, ValueError) as error:
            message = f"cant hash {latest_file}: {error}"
            self._error_log.log(message)
            raise FileUnreadable(message) from error

        return ChecksumResult(sha256sum=digest, file_path=Path(latest_file))
