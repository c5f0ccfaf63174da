import pytest
from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)

CORS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "POST, OPTIONS",
    "access-control-allow-headers": "Content-Type",
    "access-control-max-age": "86400",
}

VALID = {"name": "Jo", "email": "jo@x.com", "message": "Hi"}
FAILED = {"status": "error", "message": "Unable to send your inquiry. Please try again later."}


def assert_cors(resp):
    for key, value in CORS.items():
        assert resp.headers[key] == value


def stub_sender(monkeypatch, result=True):
    calls = []

    async def _send(sub):
        calls.append(sub)
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr("app.routers.contact.send_contact_email", _send)
    return calls


@pytest.mark.parametrize("path", ["/contact", "/", "/anything/else"])
def test_options_preflight(path):
    resp = client.options(path)
    assert resp.status_code == 200
    assert resp.content == b""
    assert_cors(resp)


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", "PATCH"])
@pytest.mark.parametrize("path", ["/contact", "/other"])
def test_other_methods_are_not_allowed(method, path):
    resp = client.request(method, path)
    assert resp.status_code == 405
    assert resp.json() == {"status": "error", "message": "Method not allowed"}
    assert resp.headers["content-type"] == "application/json"
    assert_cors(resp)


@pytest.mark.parametrize("path", ["/", "/contacts", "/contact/", "/api/contact", "/docs", "/redoc", "/openapi.json"])
def test_post_to_unknown_path(monkeypatch, path):
    calls = stub_sender(monkeypatch)
    resp = client.post(path, json=VALID)
    assert resp.status_code == 404
    assert resp.json() == {"status": "error", "message": "Endpoint not found"}
    assert_cors(resp)
    assert calls == []


def test_valid_submission_is_sent(monkeypatch):
    calls = stub_sender(monkeypatch, True)
    resp = client.post("/contact", json=VALID)
    assert resp.status_code == 200
    assert resp.json() == {"status": "success", "message": "Your inquiry has been sent."}
    assert resp.headers["content-type"] == "application/json"
    assert_cors(resp)
    assert len(calls) == 1
    assert calls[0].name == "Jo"
    assert calls[0].email == "jo@x.com"


def test_empty_name_is_rejected(monkeypatch):
    calls = stub_sender(monkeypatch)
    resp = client.post("/contact", json={"name": "", "email": "jo@x.com", "message": "Hi"})
    assert resp.status_code == 400
    assert resp.json() == {"status": "error", "message": "Name is required"}
    assert_cors(resp)
    assert calls == []


@pytest.mark.parametrize(
    "body, message",
    [
        ({**VALID, "email": "not-an-email"}, "Please provide a valid email address"),
        ({**VALID, "mobile": "12ab567"}, "Mobile number must be valid"),
        ({**VALID, "subject": "s" * 201}, "Subject must be less than 200 characters"),
        ({**VALID, "message": "   "}, "Message is required"),
    ],
)
def test_validation_messages(monkeypatch, body, message):
    stub_sender(monkeypatch)
    resp = client.post("/contact", json=body)
    assert resp.status_code == 400
    assert resp.json() == {"status": "error", "message": message}


@pytest.mark.parametrize("raw", [b"", b"{not json", b"null", b"42"])
def test_bad_body(monkeypatch, raw):
    stub_sender(monkeypatch)
    resp = client.post("/contact", content=raw, headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"status": "error", "message": "Invalid request body"}
    assert_cors(resp)


def test_transport_failure_returns_500(monkeypatch):
    stub_sender(monkeypatch, False)
    resp = client.post("/contact", json=VALID)
    assert resp.status_code == 500
    assert resp.json() == FAILED
    assert_cors(resp)


def test_unexpected_exception_returns_500(monkeypatch):
    stub_sender(monkeypatch, RuntimeError("boom"))
    resp = client.post("/contact", json=VALID)
    assert resp.status_code == 500
    assert resp.json() == FAILED
    assert_cors(resp)


def test_missing_mail_config_returns_500(monkeypatch):
    from app.core.settings import settings

    monkeypatch.setattr(settings, "mailtrap_api_token", None)
    resp = client.post("/contact", json=VALID)
    assert resp.status_code == 500
    assert resp.json() == FAILED


def test_array_body_reports_missing_name(monkeypatch):
    calls = stub_sender(monkeypatch)
    resp = client.post("/contact", content=b"[1, 2]", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"status": "error", "message": "Name is required"}
    assert calls == []


@pytest.mark.asyncio
async def test_unhandled_error_handler_logs_traceback(caplog):
    from starlette.requests import Request

    from app.main import unhandled_error_handler

    request = Request({"type": "http", "method": "POST", "path": "/contact", "headers": [], "query_string": b""})
    try:
        raise RuntimeError("boom")
    except RuntimeError as exc:
        error = exc

    with caplog.at_level("ERROR", logger="uvicorn.error"):
        resp = await unhandled_error_handler(request, error)

    assert resp.status_code == 500
    assert resp.headers["access-control-allow-origin"] == "*"
    records = [r for r in caplog.records if "unhandled error" in r.getMessage()]
    assert records
    assert records[0].exc_info is not None
    assert records[0].exc_info[1] is error
