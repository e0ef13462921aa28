from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from passpal import __version__
from passpal.api.v1.router import api_router
from passpal.core.config import get_settings
from passpal.core.exceptions import PasspalError, ValidationError
from passpal.models.schemas import ErrorResponse

settings = get_settings()


def error_response(status_code: int, error: str, message: str, details: dict | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, details=details or {})
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def passpal_error_handler(request: Request, exc: PasspalError) -> JSONResponse:
    """Input errors map to 400, anything else raised by the analysis to 500."""
    if isinstance(exc, ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return error_response(status_code, type(exc).__name__, exc.message, exc.details)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, HTTPStatus(exc.status_code).phrase, str(exc.detail))


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description=(
            "Password corpus analysis API. "
            "Word, length, charset, mask and position statistics "
            "computed over a posted word list."
        ),
        version=__version__,
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Error bodies follow ErrorResponse
    app.add_exception_handler(PasspalError, passpal_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "passpal.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
