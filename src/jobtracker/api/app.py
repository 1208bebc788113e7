from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobtracker.api.routes import applications_router, router as auth_router
from jobtracker.config import DEFAULT_JWT_SECRET, get_settings
from jobtracker.db.init import init_database
from jobtracker.logging_config import configure_logging

logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "POST", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization"]


def cors_headers(origins: list[str], request_origin: str | None = None) -> dict[str, str]:
    if "*" in origins:
        allow_origin = "*"
    elif request_origin in origins:
        allow_origin = request_origin
    else:
        allow_origin = origins[0]
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": ", ".join(CORS_METHODS),
        "Access-Control-Allow-Headers": ", ".join(CORS_HEADERS),
    }


def create_app() -> FastAPI:
    configure_logging()
    settings = get_settings()
    if settings.is_production() and settings.jwt_secret == DEFAULT_JWT_SECRET:
        raise RuntimeError("JWT_SECRET must be set in production")

    origins = settings.cors_origin_list or ["*"]
    app = FastAPI(title=settings.app_name)

    # Every response carries the CORS headers; preflights reach the OPTIONS route.
    @app.middleware("http")
    async def cors_and_error_envelope(request: Request, call_next):
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = JSONResponse({"error": f"Internal Error: {exc}"}, status_code=500)
        response.headers.update(cors_headers(origins, request.headers.get("origin")))
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_error(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 405:
            return JSONResponse({"error": "Not Found"}, status_code=404)
        return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error(_request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug("Rejected request body: %s", exc.errors())
        return JSONResponse({"error": "Invalid request"}, status_code=400)

    @app.on_event("startup")
    def _startup() -> None:
        init_database()

    @app.get("/health")
    def health() -> JSONResponse:
        return JSONResponse({"status": "ok"})

    @app.options("/{full_path:path}", include_in_schema=False)
    def preflight(full_path: str) -> Response:
        return Response(status_code=200)

    app.include_router(auth_router)
    app.include_router(applications_router)
    return app
