"""FastAPI application exposing the finance resources."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.adapters.api.account_types import router as account_types_router
from src.domain.errors import NotFoundError
from src.infrastructure.logging.logger import get_app_logger


async def not_found_handler(
    request: Request,
    exc: NotFoundError,
) -> JSONResponse:
    """Translate domain lookup failures into 404 responses."""
    get_app_logger().warning(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(title="Finance accounts")
    app.include_router(account_types_router)
    app.add_exception_handler(NotFoundError, not_found_handler)
    return app


app = create_app()


__all__ = ["create_app", "app", "not_found_handler"]
