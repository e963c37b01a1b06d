from __future__ import annotations

import hmac
import logging
from functools import wraps

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import AuthenticationError, UpstreamStoreError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _check_cron_token(header: str) -> None:
        secret = container.cron_secret
        if not secret:
            raise AuthenticationError("Scheduled checkout is disabled: CRON_SECRET is not configured")
        if not hmac.compare_digest(header.encode(), f"Bearer {secret}".encode()):
            raise AuthenticationError("Unauthorized")

    def cron_token_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                _check_cron_token(request.headers.get("Authorization", ""))
            except AuthenticationError as e:
                logger.warning("rejected scheduled checkout call: %s", e)
                return jsonify({"error": "Unauthorized"}), 401
            return view(*args, **kwargs)

        return wrapper

    @app.route("/force-checkout", methods=["POST"], endpoint="force_checkout")
    def force_checkout():
        try:
            report = container.checkout_service.close_open_sessions()
        except (UpstreamStoreError, ValidationError) as e:
            logger.error("force checkout failed: %s", e)
            return jsonify({"error": str(e)}), 500
        return jsonify(
            {
                "message": f"{report.succeeded} users force-checked out.",
                "report": report.to_dict(),
            }
        )

    @app.route("/cron/auto-checkout", methods=["GET"], endpoint="cron_auto_checkout")
    @cron_token_required
    def cron_auto_checkout():
        try:
            report = container.checkout_service.close_open_sessions()
        except (UpstreamStoreError, ValidationError) as e:
            logger.error("auto checkout failed: %s", e)
            return jsonify({"error": f"Auto-checkout failed: {e}"}), 500
        return jsonify(report.to_dict())
