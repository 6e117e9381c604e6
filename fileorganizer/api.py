"""FastAPI application exposing scan/organize/health endpoints and the web UI."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import APIRouter, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .config import Settings, get_settings
from .errors import FileOrganizerError
from .organizer import FileOrganizer
from .scanner import FolderScanner
from .schemas import (
    DirectoryStructureModel,
    ErrorResponse,
    HealthResponse,
    OrganizeRequest,
    OrganizeResponse,
    OrganizeStatsModel,
    ScanRequest,
    ScanResponse,
)

logger = logging.getLogger(__name__)

DIRECTORY_REQUIRED = "Directory path is required"

_BAD_REQUEST_RESPONSE = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Invalid directory or request"}
}

router = APIRouter(prefix="/api", tags=["organizer"])


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=message).model_dump(by_alias=True),
    )


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------


@router.post("/scan", response_model=ScanResponse, responses=_BAD_REQUEST_RESPONSE)
def scan_directory(request: ScanRequest):
    """List the files and subfolders directly inside ``directory``."""
    if not request.directory:
        return _bad_request(DIRECTORY_REQUIRED)
    try:
        structure = FolderScanner(request.directory).scan()
    except FileOrganizerError as exc:
        logger.warning("Scan of %s failed: %s", request.directory, exc)
        return _bad_request(str(exc))

    return ScanResponse(
        directory=request.directory,
        structure=DirectoryStructureModel.model_validate(structure.to_dict()),
    )


@router.post("/organize", response_model=OrganizeResponse, responses=_BAD_REQUEST_RESPONSE)
def organize_directory(request: OrganizeRequest):
    """Move files into category folders, or preview the moves when ``dryRun`` is set."""
    if not request.directory:
        return _bad_request(DIRECTORY_REQUIRED)
    try:
        stats = FileOrganizer(request.directory, dry_run=request.dry_run).organize()
    except FileOrganizerError as exc:
        logger.warning("Organize of %s failed: %s", request.directory, exc)
        return _bad_request(str(exc))

    if stats.errors:
        logger.info("Organize of %s finished with %d file error(s)", request.directory, len(stats.errors))
    return OrganizeResponse(
        directory=request.directory,
        dry_run=request.dry_run,
        stats=OrganizeStatsModel.model_validate(stats.to_dict()),
    )


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse()


# -----------------------------------------------------------------------------
# Application
# -----------------------------------------------------------------------------


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="File Organizer API")
    app.include_router(router)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Rejected request to %s: %s", request.url.path, exc.errors())
        return _bad_request(DIRECTORY_REQUIRED if _missing_body(exc) else "Invalid request body")

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "message": str(exc)},
        )

    static_dir = settings.static_dir
    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")

        @app.get("/", include_in_schema=False)
        def index() -> FileResponse:
            return FileResponse(static_dir / "index.html")
    else:
        logger.warning("Static directory %s not found; web UI disabled", static_dir)

    return app


def _missing_body(exc: RequestValidationError) -> bool:
    return any(err.get("type") == "missing" for err in exc.errors())


def serve() -> None:
    """Entry point for ``file-organizer-server``."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("File Organizer server running on http://%s:%d", settings.host, settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port,
                log_level=settings.log_level.lower())


app = create_app()


__all__ = ["app", "create_app", "router", "serve"]
