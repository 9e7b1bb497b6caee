# main.py

from src.config import LOG_FILE_PATH, build_host_profiles
from src.domain.errors import ChecksumError, ServerError
from src.domain.models import ChecksumResult
from src.infrastructure.error_log import FileErrorLog
from src.application.checksum_service import ChecksumService
from src.interface.cli import (
    display_welcome_banner,
    display_profiles,
    prompt_for_profile,
    prompt_for_target,
    display_checksum,
    display_error,
    ask_continue,
)


def main() -> None:
    display_welcome_banner()

    # ── 1. Build services from the compiled-in profiles ──────────────────────
    profiles = build_host_profiles()
    error_log = FileErrorLog(LOG_FILE_PATH)
    services = {
        profile.name: ChecksumService(profile=profile, error_log=error_log)
        for profile in profiles
    }

    display_profiles(profiles)

    # ── 2. Interactive lookup loop ───────────────────────────────────────────
    while True:
        service = services[prompt_for_profile(profiles)]
        target = prompt_for_target(service.profile)
        try:
            result = _lookup(service, target)
            display_checksum(service.profile, target, result)
        except ServerError as error:
            # Local operator: show the detail the HTTP caller never sees
            display_error(str(error))
        except ChecksumError as error:
            display_error(error.public_message)

        if not ask_continue():
            break


def _lookup(service: ChecksumService, target: str) -> ChecksumResult:
    """`<container_directory>:<id>` selects a container, anything else is a file name."""
    container_directory = service.profile.container_directory
    if container_directory and target.startswith(f"{container_directory}:"):
        return service.checksum_for_container(target[len(container_directory) + 1:])
    return service.checksum_for_file(target)


if __name__ == "__main__":
    main()
