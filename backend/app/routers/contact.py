import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.core.mail import send_contact_email
from app.lib.contact_form import build_submission, validate_contact

router = APIRouter(tags=["contact"])
log = logging.getLogger("uvicorn.error")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Max-Age": "86400",
}

SEND_FAILED = "Unable to send your inquiry. Please try again later."


def error_response(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse(
        {"status": "error", "message": message},
        status_code=status_code,
        headers=CORS_HEADERS,
    )


@router.post("/contact")
async def submit_contact(request: Request):
    try:
        try:
            body = await request.json()
        except ValueError:
            return error_response("Invalid request body", 400)

        result = validate_contact(body)
        if not result.is_valid:
            log.info(f"[contact] rejected submission: {result.message}")
            return error_response(result.message, 400)

        sent = await send_contact_email(build_submission(body))
        if not sent:
            return error_response(SEND_FAILED, 500)

        return JSONResponse(
            {"status": "success", "message": "Your inquiry has been sent."},
            headers=CORS_HEADERS,
        )
    except Exception:
        log.exception("[contact] error processing request")
        return error_response(SEND_FAILED, 500)
