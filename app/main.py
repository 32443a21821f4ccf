# app/main.py
import logging
import time

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .catalog import catalog_router
from .catalog.exceptions import BookNotFoundError, InvalidBookIdError
from .catalog.schemas import ErrorResponse
from .config import get_settings


settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title=settings.app_title,
    description=(
        "CRUD REST API over an in-memory book catalogue seeded with ten "
        "books. State is reset when the process restarts."
    ),
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(catalog_router)


def _error(status_code: int, message: str) -> JSONResponse:
    body = ErrorResponse(
        status=status_code,
        message=message,
        timestamp=int(time.time() * 1000),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(BookNotFoundError)
async def book_not_found_handler(request: Request, exc: BookNotFoundError):
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return _error(status.HTTP_404_NOT_FOUND, str(exc))


@app.exception_handler(InvalidBookIdError)
async def invalid_book_id_handler(request: Request, exc: InvalidBookIdError):
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return _error(status.HTTP_400_BAD_REQUEST, str(exc))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    message = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    logger.warning("%s %s: validation failed: %s", request.method, request.url.path, message)
    return _error(status.HTTP_400_BAD_REQUEST, message)


# Health check
@app.get("/")
def health_check():
    return {"status": "ok", "message": "Books API live"}


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
