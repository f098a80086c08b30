"""
Health controller - liveness endpoint for monitoring.
"""

import logging

from flask import Blueprint, current_app

from puppy_care import __version__
from puppy_care.controllers.dependencies import get_clock
from puppy_care.core.api_utils import api_response
from puppy_care.core.config import APP_TZ

logger = logging.getLogger(__name__)

health_bp = Blueprint("health", __name__, url_prefix="/health")


@health_bp.route("", methods=["GET"])
def health_check():
    """
    Report that the service is up.

    Returns:
        Envelope whose data holds status, version, repository backend,
        timezone and the server time. Always 200; no authentication.
    """
    data = {
        "status": "healthy",
        "version": __version__,
        "repository_backend": current_app.config.get("REPOSITORY_BACKEND"),
        "timezone": str(APP_TZ),
        "server_time": get_clock().now().isoformat(),
    }
    logger.debug("Health check", extra={"context": data})
    return api_response(data)
