# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from flask import Flask
from flask_cors import CORS

from todolist.infrastructure.container import Container, container
from todolist.infrastructure.db import init_db
from todolist.shared.config import AppConfig, load_config
from todolist.shared.errors import register_error_handler
from todolist.shared.logging import logger, setup_logging
from todolist.shared.middleware.csrf import configure_csrf
from todolist.shared.middleware.request_logger import configure_request_logging
from todolist.shared.middleware.security_headers import configure_security_headers


def _configure_cors(app: Flask, config: AppConfig) -> None:
    origins = config.security.allowed_origins
    # credentialed CORS is only valid with an explicit origin list
    CORS(
        app,
        resources={r"/api/*": {"origins": origins}},
        supports_credentials="*" not in origins,
    )


def create_app(app_container: Container | None = None) -> Flask:
    config = load_config()
    app_container = app_container or container
    setup_logging(config)
    for warning in config.security_warnings():
        logger.warning(f"config: {warning}")
    init_db()

    app = Flask(__name__)
    app.config.update(SECRET_KEY=config.secret_key)

    register_error_handler(app)
    configure_request_logging(app)
    configure_csrf(app)
    configure_security_headers(app, config.security)
    _configure_cors(app, config)

    for controller in (
        app_container.misc_controller,
        app_container.auth_controller,
        app_container.password_controller,
        app_container.comments_controller,
    ):
        app.register_blueprint(controller.as_blueprint())

    logger.info(f"app: ready ({config.app_env})")
    return app


if __name__ == "__main__":
    create_app().run(host="127.0.0.1", port=5000)
