import html
from typing import Any, Dict

from app.lib.contact_form import ContactSubmission

DEFAULT_SUBJECT = "New Inquiry"
NO_SUBJECT = "No subject provided"


def render_subject(sub: ContactSubmission) -> str:
    return f"Contact Form: {sub.subject or DEFAULT_SUBJECT}"


def render_html(sub: ContactSubmission, site_name: str) -> str:
    """HTML body; every user-supplied value is escaped before it is inserted."""
    esc = html.escape
    mobile_line = f"<p><strong>Mobile:</strong> {esc(sub.mobile)}</p>\n" if sub.mobile else ""
    message = esc(sub.message).replace("\n", "<br>")
    return (
        "<h2>New Contact Form Submission</h2>\n"
        f"<p><strong>Name:</strong> {esc(sub.name)}</p>\n"
        f"<p><strong>Email:</strong> {esc(sub.email)}</p>\n"
        f"{mobile_line}"
        f"<p><strong>Subject:</strong> {esc(sub.subject or NO_SUBJECT)}</p>\n"
        "<h3>Message:</h3>\n"
        f"<p>{message}</p>\n"
        "<hr>\n"
        f"<p><em>This message was sent via the contact form on {esc(site_name)}</em></p>\n"
    )


def render_text(sub: ContactSubmission, site_name: str) -> str:
    lines = [
        "New Contact Form Submission",
        "",
        f"Name: {sub.name}",
        f"Email: {sub.email}",
    ]
    if sub.mobile:
        lines.append(f"Mobile: {sub.mobile}")
    lines += [
        f"Subject: {sub.subject or NO_SUBJECT}",
        "",
        "Message:",
        sub.message,
        "",
        "---",
        f"This message was sent via the contact form on {site_name}",
    ]
    return "\n".join(lines) + "\n"


def build_email_payload(
    sub: ContactSubmission,
    from_email: str,
    to_email: str,
    site_name: str,
) -> Dict[str, Any]:
    # Mailtrap Email Sending API body
    return {
        "from": {"email": from_email},
        "to": [{"email": to_email}],
        "subject": render_subject(sub),
        "text": render_text(sub, site_name),
        "html": render_html(sub, site_name),
        "reply_to": {"email": sub.email},
    }
