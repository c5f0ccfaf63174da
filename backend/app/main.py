# app/main.py
from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from app.core.settings import settings
from app.routers.contact import CORS_HEADERS, SEND_FAILED, error_response
from app.routers.contact import router as contact_router

logging.basicConfig(level=settings.log_level.upper())
log = logging.getLogger("uvicorn.error")

# /contact/ must 404 rather than redirect to /contact
app = FastAPI(
    title=settings.api_title,
    redirect_slashes=False,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


@app.middleware("http")
async def cors_and_method_guard(request: Request, call_next):
    log.info(f"[main] {request.method} {request.url.path}")

    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)
    if request.method != "POST":
        return error_response("Method not allowed", 405)

    response = await call_next(request)
    for key, value in CORS_HEADERS.items():
        response.headers.setdefault(key, value)
    log.info(f"[main] response status: {response.status_code}")
    return response


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return error_response("Endpoint not found", 404)
    return error_response(str(exc.detail), exc.status_code)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    log.error(f"[main] unhandled error on {request.url.path}: {exc!r}", exc_info=exc)
    return error_response(SEND_FAILED, 500)


# Routers
app.include_router(contact_router)
