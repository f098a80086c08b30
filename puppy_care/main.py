"""
Application factory.

Usage:
    flask --app puppy_care.main:create_app run
"""

import logging
from typing import Optional

from flask import Flask
from werkzeug.exceptions import HTTPException

from puppy_care.controllers import BLUEPRINTS
from puppy_care.controllers.dependencies import init_app
from puppy_care.core.api_utils import api_error
from puppy_care.core.clock import SYSTEM_CLOCK, Clock
from puppy_care.core.config import Settings, get_settings, log_timezone_config
from puppy_care.core.exceptions import ResultUnwrapError
from puppy_care.core.logging_config import setup_logging
from puppy_care.core.result import DomainError, ErrorCode
from puppy_care.repositories import Repositories, build_repositories

logger = logging.getLogger(__name__)

_CODE_BY_HTTP_STATUS = {
    400: ErrorCode.VALIDATION_ERROR,
    401: ErrorCode.UNAUTHORIZED,
    403: ErrorCode.FORBIDDEN,
    404: ErrorCode.NOT_FOUND,
    409: ErrorCode.CONFLICT,
}


def create_app(
    settings: Optional[Settings] = None,
    repositories: Optional[Repositories] = None,
    clock: Optional[Clock] = None,
) -> Flask:
    """
    Build the Flask application.

    Args:
        settings: overrides the environment-derived settings
        repositories: pre-built adapters (tests); built from settings otherwise
        clock: time source shared by use-cases and repositories
    """
    settings = settings or get_settings()
    clock = clock or SYSTEM_CLOCK

    app = Flask(__name__)
    app.config["DEBUG"] = settings.debug
    app.config["REPOSITORY_BACKEND"] = settings.repository_backend

    setup_logging(
        app=app,  # Pass app to register request/response hooks
        log_level=settings.log_level,
        enable_sql_echo=settings.sql_echo,
        log_to_file=settings.log_to_file,
        use_json_format=settings.log_json,
    )
    log_timezone_config()

    if repositories is None:
        repositories = _build_repositories(settings, clock)
    init_app(app, repositories, clock)

    for blueprint in BLUEPRINTS:
        app.register_blueprint(blueprint)
    _register_error_handlers(app, settings.debug)

    logger.info(
        "Application created",
        extra={
            "context": {
                "repository_backend": settings.repository_backend,
                "blueprints": [bp.name for bp in BLUEPRINTS],
            }
        },
    )
    return app


def _build_repositories(settings: Settings, clock: Clock) -> Repositories:
    if settings.repository_backend == "sql":
        from puppy_care.db.session import create_tables, get_engine, get_sessionmaker

        engine = get_engine(settings.database_url)
        create_tables(engine)
        return build_repositories("sql", clock=clock, session_factory=get_sessionmaker())
    return build_repositories(settings.repository_backend, clock=clock)


def _register_error_handlers(app: Flask, debug: bool) -> None:
    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException):
        status = error.code or 500
        code = _CODE_BY_HTTP_STATUS.get(
            status, ErrorCode.VALIDATION_ERROR if status < 500 else ErrorCode.INTERNAL_ERROR
        )
        return api_error(DomainError(code, error.description or error.name), status)

    @app.errorhandler(ResultUnwrapError)
    def handle_unwrap_error(error: ResultUnwrapError):
        logger.error(f"Unhandled failure reached the HTTP layer: {error}")
        return api_error(error.error)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        logger.error(f"Unhandled exception: {error}", exc_info=True)
        message = str(error) if debug else "Internal server error"
        return api_error(DomainError.internal(message), 500)
