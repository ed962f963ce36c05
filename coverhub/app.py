# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from flask import Flask
from flask_cors import CORS

from coverhub.infrastructure.container import container
from coverhub.infrastructure.db import init_db
from coverhub.infrastructure.demo_setup import setup_demo_user
from coverhub.interfaces.http.session import configure_session_resolution
from coverhub.shared.config import load_config
from coverhub.shared.logging import logger, setup_logging
from coverhub.shared.middleware.error_handler import configure_error_handling
from coverhub.shared.middleware.request_logger import configure_request_logging

_config = load_config()


def create_app() -> Flask:
    setup_logging(debug_mode=_config.debug_logging)
    init_db()

    setup_demo_user(container.user_repository, container.password_hasher)

    app = Flask(__name__)
    configure_error_handling(app)
    configure_session_resolution(
        app, users=container.user_repository, tokens=container.token_issuer
    )
    configure_request_logging(app)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": _config.security.allowed_origins}}
    }
    if any(o != "*" for o in _config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.products_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")

        if _config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info("Flask app initialized")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=8080, debug=True)
