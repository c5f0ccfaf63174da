# app/core/mail.py
import logging

import httpx

from app.core.settings import settings
from app.lib.contact_form import ContactSubmission
from app.lib.email_templates import build_email_payload

log = logging.getLogger("uvicorn.error")


def _build_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.email_api_timeout)


async def send_contact_email(sub: ContactSubmission) -> bool:
    """
    Relay a contact submission through the Mailtrap Email Sending API.
    Returns True only when the provider answered 2xx; failures are logged, never raised.
    """
    api_token = settings.mailtrap_api_token
    api_url = settings.mailtrap_api_url
    from_email = settings.from_email
    to_email = settings.to_email

    log.debug(f"[mail] token set={bool(api_token)} from={from_email} to={to_email}")

    if not api_token or not api_url or not from_email or not to_email:
        log.error("[mail] missing MAILTRAP_API_TOKEN, MAILTRAP_API_URL, FROM_EMAIL or TO_EMAIL")
        return False

    payload = build_email_payload(sub, from_email, to_email, settings.site_name)
    headers = {
        "Authorization": f"Bearer {api_token}",
        "Content-Type": "application/json",
    }

    try:
        async with _build_client() as client:
            response = await client.post(api_url, headers=headers, json=payload)
    except httpx.HTTPError as exc:
        log.error(f"[mail] request to email API failed: {exc!r}")
        return False
    except Exception:
        log.exception("[mail] unexpected error sending email")
        return False

    if response.is_success:
        log.info(f"[mail] email sent for {sub.email}")
        return True

    log.error(f"[mail] email API error {response.status_code}: {response.text}")
    return False
