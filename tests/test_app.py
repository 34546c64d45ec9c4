"""
Web app route tests using the Flask test client.
"""
import logging

import pytest

import app as webapp
from config import Settings


VALID_FORM = {
    "name": "Jane Doe",
    "title": "Engineer",
    "email": "jane@x.com",
    "logoUrl": "http://x.com/l.png",
}


@pytest.fixture
def client(monkeypatch):
    """Create test client with a known form default."""
    monkeypatch.setenv("DEFAULT_NAME", "Alex Johnson")
    return webapp.create_app(Settings()).test_client()


class TestIndex:
    """Tests for GET /"""

    def test_returns_form_page(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.headers["Content-Type"] == "text/html; charset=utf-8"
        assert b'action="/generate"' in response.data
        assert b'value="Alex Johnson"' in response.data

    def test_favicon_is_empty(self, client):
        response = client.get("/favicon.ico")
        assert response.status_code == 204
        assert response.data == b""


class TestGenerate:
    """Tests for POST /generate"""

    def test_returns_download(self, client):
        response = client.post("/generate", data=VALID_FORM)
        assert response.status_code == 200
        assert response.headers["Content-Type"] == "text/html; charset=utf-8"
        assert response.headers["Content-Disposition"] == 'attachment; filename="signature.html"'
        assert b"Jane Doe" in response.data

    def test_optional_fields(self, client):
        form = dict(VALID_FORM, phone="+1 (555) 123-4567", website="example.com", accentColor="#ABC")
        response = client.post("/generate", data=form)
        assert response.status_code == 200
        assert b'href="tel:+15551234567"' in response.data
        assert b'href="https://example.com"' in response.data
        assert b"color:#aabbcc;" in response.data

    @pytest.mark.parametrize("field", ["name", "title", "email", "logoUrl"])
    def test_missing_required_field(self, client, field):
        form = dict(VALID_FORM)
        del form[field]
        response = client.post("/generate", data=form)
        assert response.status_code == 400
        assert response.headers["Content-Type"] == "text/plain; charset=utf-8"
        assert response.get_data(as_text=True) == "Missing required fields: name, title, email, logoUrl"

    def test_empty_strings_count_as_missing(self, client):
        response = client.post("/generate", data=dict(VALID_FORM, name="", title=""))
        assert response.status_code == 400

    def test_empty_body(self, client):
        response = client.post("/generate")
        assert response.status_code == 400

    def test_escapes_special_characters(self, client):
        response = client.post("/generate", data=dict(VALID_FORM, name="<b>Tom & Jerry</b>"))
        assert b"&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;" in response.data
        assert b"<b>Tom" not in response.data

    def test_unicode(self, client):
        response = client.post("/generate", data=dict(VALID_FORM, name="José 山田"))
        assert response.status_code == 200
        assert "José 山田" in response.get_data(as_text=True)

    def test_renderer_failure_returns_500(self, client, monkeypatch):
        def boom(data):
            raise RuntimeError("boom")

        monkeypatch.setattr(webapp, "generate_signature_html", boom)
        response = client.post("/generate", data=VALID_FORM)
        assert response.status_code == 500
        assert response.get_data(as_text=True) == "Internal Server Error"

    def test_validation_warning_logged(self, client, caplog):
        caplog.set_level(logging.INFO)
        client.post("/generate", data={"name": "Jane"})
        assert "[request] POST /generate" in caplog.text
        assert "missing required fields: title, email, logoUrl" in caplog.text


class TestPreview:
    """Tests for POST /preview"""

    def test_no_download_header(self, client):
        response = client.post("/preview", data=VALID_FORM)
        assert response.status_code == 200
        assert "Content-Disposition" not in response.headers
        assert b"Jane Doe" in response.data

    def test_does_not_validate_required_fields(self, client):
        response = client.post("/preview", data={"name": "Only Name"})
        assert response.status_code == 200
        assert b"Only Name" in response.data

    def test_renderer_failure_returns_500(self, client, monkeypatch):
        def boom(data):
            raise ValueError("bad")

        monkeypatch.setattr(webapp, "generate_signature_html", boom)
        response = client.post("/preview", data=VALID_FORM)
        assert response.status_code == 500


class TestNotFound:
    """Unknown paths and methods"""

    @pytest.mark.parametrize(
        "method, path",
        [("get", "/unknown"), ("post", "/unknown"), ("get", "/generate"), ("delete", "/"), ("put", "/preview")],
    )
    def test_returns_plain_404(self, client, method, path):
        response = getattr(client, method)(path)
        assert response.status_code == 404
        assert response.headers["Content-Type"] == "text/plain; charset=utf-8"
        assert response.get_data(as_text=True) == "Not Found"
