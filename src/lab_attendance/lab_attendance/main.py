from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .analytics.controller import register as register_analytics
from .checkout.controller import register as register_checkout
from .container import Container, build_container_from_settings

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        store_config = getattr(settings, "STORE_CONFIG")
        logger.info(
            "settings=%s store=%s table=%s tz=%s",
            settings_module,
            store_config.get("url") or "<empty>",
            store_config.get("table", "attendance"),
            getattr(settings, "LAB_TIMEZONE", "UTC"),
        )
        if not getattr(settings, "CRON_SECRET", None):
            logger.warning("CRON_SECRET is not set; /cron/auto-checkout will reject every call")
        container = build_container_from_settings(settings)

    app.extensions["lab_attendance"] = container

    register_analytics(app, container)
    register_checkout(app, container)

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        if isinstance(e, HTTPException):
            return e
        logger.exception("unhandled error on %s", request.path)
        return jsonify({"error": "Internal Server Error", "detail": str(e)}), 500

    return app
