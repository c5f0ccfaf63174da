import re
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MOBILE_RE = re.compile(r"^[0-9]+$")

MAX_NAME_LEN = 100
MAX_SUBJECT_LEN = 200
MAX_MESSAGE_LEN = 1000
MIN_MOBILE_DIGITS = 7
MAX_MOBILE_DIGITS = 15


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    message: Optional[str] = None


class ContactSubmission(BaseModel):
    name: str
    email: str
    mobile: Optional[str] = None
    subject: Optional[str] = None
    message: str


def _as_text(value: Any) -> str:
    # JSON booleans would otherwise render as "True"/"False"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _is_provided(value: Any) -> bool:
    return value is not None and value != ""


def validate_contact(data: Any) -> ValidationResult:
    """
    Check a decoded request body against the contact form rules.

    Rules are evaluated in a fixed order and the first failure is reported,
    so a body with several problems always yields the same message.
    """
    if isinstance(data, list):
        # arrays are objects without any of the form fields
        data = {}
    if not isinstance(data, dict):
        return ValidationResult(False, "Invalid request body")

    if _is_blank(data.get("name")):
        return ValidationResult(False, "Name is required")
    if _is_blank(data.get("email")):
        return ValidationResult(False, "Email is required")
    if _is_blank(data.get("message")):
        return ValidationResult(False, "Message is required")

    if not EMAIL_RE.match(data["email"].strip()):
        return ValidationResult(False, "Please provide a valid email address")

    mobile = data.get("mobile")
    if _is_provided(mobile):
        digits = _as_text(mobile).strip()
        if (
            not MOBILE_RE.match(digits)
            or len(digits) < MIN_MOBILE_DIGITS
            or len(digits) > MAX_MOBILE_DIGITS
        ):
            return ValidationResult(False, "Mobile number must be valid")

    if len(data["name"].strip()) > MAX_NAME_LEN:
        return ValidationResult(False, f"Name must be less than {MAX_NAME_LEN} characters")

    subject = data.get("subject")
    if subject and len(_as_text(subject)) > MAX_SUBJECT_LEN:
        return ValidationResult(False, f"Subject must be less than {MAX_SUBJECT_LEN} characters")

    if len(data["message"].strip()) > MAX_MESSAGE_LEN:
        return ValidationResult(False, f"Message must be less than {MAX_MESSAGE_LEN} characters")

    return ValidationResult(True)


def build_submission(data: dict) -> ContactSubmission:
    """Normalize a body that already passed validate_contact()."""
    mobile = data.get("mobile")
    subject = data.get("subject")
    return ContactSubmission(
        name=data["name"].strip(),
        email=data["email"].strip(),
        mobile=_as_text(mobile).strip() if _is_provided(mobile) else None,
        subject=_as_text(subject) if subject else None,
        message=data["message"].strip(),
    )
