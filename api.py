from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing import Callable, List, Optional
import uvicorn

from src.config import HOST, PORT, LOG_FILE_PATH, build_host_profiles
from src.domain.errors import ChecksumError
from src.domain.interfaces import ErrorLogPort
from src.domain.models import HostProfile
from src.infrastructure.error_log import FileErrorLog
from src.application.checksum_service import ChecksumService, ContainerIdValidator

# ── API Models ───────────────────────────────────────────────────────────────
class ChecksumResponse(BaseModel):
    sha256sum: str

class ErrorResponse(BaseModel):
    error: str

# ── Endpoint factories ───────────────────────────────────────────────────────
def _file_endpoint(service: ChecksumService) -> Callable[..., ChecksumResponse]:
    def compute_hash(file: str = Query("")) -> ChecksumResponse:
        result = service.checksum_for_file(file)
        return ChecksumResponse(sha256sum=result.sha256sum)
    return compute_hash

def _container_endpoint(service: ChecksumService) -> Callable[..., ChecksumResponse]:
    def compute_hash_container(container_id: str = Query("", alias="id")) -> ChecksumResponse:
        result = service.checksum_for_container(container_id)
        return ChecksumResponse(sha256sum=result.sha256sum)
    return compute_hash_container

# ── App Factory ──────────────────────────────────────────────────────────────
def create_app(
    profiles: Optional[List[HostProfile]] = None,
    error_log: Optional[ErrorLogPort] = None,
    container_id_validator: Optional[ContainerIdValidator] = None,
) -> FastAPI:
    """
    Build the service with one GET route per host profile, plus
    /<profile>/<container_directory> for profiles that define one.
    """
    profiles = build_host_profiles() if profiles is None else profiles
    error_log = FileErrorLog(LOG_FILE_PATH) if error_log is None else error_log

    app = FastAPI(
        title="SHA-256 Check API",
        description="Checksums of the newest config file per managed host.",
        version="1.0.0",
    )

    @app.exception_handler(ChecksumError)
    async def handle_checksum_error(request: Request, exc: ChecksumError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.public_message},
        )

    error_responses = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}

    for profile in profiles:
        service = ChecksumService(
            profile=profile,
            error_log=error_log,
            container_id_validator=container_id_validator,
        )
        app.add_api_route(
            f"/{profile.name}",
            _file_endpoint(service),
            methods=["GET"],
            response_model=ChecksumResponse,
            responses=error_responses,
            name=f"{profile.name}_checksum",
        )
        if profile.container_directory is not None:
            app.add_api_route(
                f"/{profile.name}/{profile.container_directory}",
                _container_endpoint(service),
                methods=["GET"],
                response_model=ChecksumResponse,
                responses=error_responses,
                name=f"{profile.name}_{profile.container_directory}_checksum",
            )
        print(f"[API] Registered profile '{profile.name}' -> {profile.home_directory}")

    return app

app = create_app()

def run() -> None:
    uvicorn.run(app, host=HOST, port=PORT)

if __name__ == "__main__":
    run()
