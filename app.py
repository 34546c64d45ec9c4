#!/usr/bin/env python3
"""Email signature generator web application."""

from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, request

from config import Settings
from form_page import FormDefaults, render_form_page
from signature import SignatureData, generate_signature_html

logger = logging.getLogger(__name__)

HTML = {"Content-Type": "text/html; charset=utf-8"}
TEXT = {"Content-Type": "text/plain; charset=utf-8"}
DOWNLOAD = {**HTML, "Content-Disposition": 'attachment; filename="signature.html"'}
MISSING_FIELDS_MESSAGE = "Missing required fields: name, title, email, logoUrl"


def create_app(settings: Optional[Settings] = None) -> Flask:
    settings = settings or Settings()
    defaults = FormDefaults.from_settings(settings)
    app = Flask(__name__)
    app.config["SIGNATURE_SETTINGS"] = settings

    @app.before_request
    def log_request():
        logger.info("[request] %s %s", request.method, request.path)

    @app.get("/favicon.ico")
    def favicon():
        return "", 204

    @app.get("/")
    def index():
        return render_form_page(defaults), 200, HTML

    @app.post("/generate")
    def generate():
        logger.debug("[body] length=%d", request.content_length or 0)
        data = SignatureData.from_form(request.form)

        missing = data.missing_fields()
        if missing:
            logger.warning("[validation] missing required fields: %s", ", ".join(missing))
            return MISSING_FIELDS_MESSAGE, 400, TEXT

        try:
            html = generate_signature_html(data)
        except Exception:
            logger.exception("[error] signature generation failed")
            return "Internal Server Error", 500, TEXT
        logger.debug("[generate] signature html size=%d", len(html))
        return html, 200, DOWNLOAD

    @app.post("/preview")
    def preview():
        logger.debug("[preview] body length=%d", request.content_length or 0)
        data = SignatureData.from_form(request.form)
        try:
            html = generate_signature_html(data)
        except Exception:
            logger.exception("[error][preview] signature generation failed")
            return "Internal Server Error", 500, TEXT
        logger.debug("[preview] html size=%d", len(html))
        return html, 200, HTML

    @app.errorhandler(404)
    @app.errorhandler(405)
    def not_found(_exc):
        return "Not Found", 404, TEXT

    return app


app = create_app()


def main() -> int:
    settings = Settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Server running at http://localhost:%d", settings.PORT)
    create_app(settings).run(host=settings.HOST, port=settings.PORT, debug=settings.DEBUG)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
