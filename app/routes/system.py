"""
System Routes - health check
"""

from flask import Blueprint, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from constants import BUILD_VERSION
from db import db
from redis_client import is_redis_available
from utils import now_utc

system_bp = Blueprint("system", __name__, url_prefix="/api")


@system_bp.route("/health", methods=["GET"])
def health_check():
    """Database and Redis reachability, for monitoring"""
    overall_status = "healthy"
    checks = {
        "timestamp": now_utc().isoformat(),
        "version": BUILD_VERSION,
        "database": "unknown",
        "redis": "unknown",
    }

    try:
        db.session.execute(text("SELECT 1"))
        checks["database"] = "ok"
    except SQLAlchemyError as e:
        checks["database"] = f"error: {str(e)}"
        overall_status = "unhealthy"

    if is_redis_available():
        checks["redis"] = "ok"
    else:
        # Sessions can't be refreshed, but authenticated requests still work
        checks["redis"] = "unavailable"
        if overall_status == "healthy":
            overall_status = "degraded"

    checks["status"] = overall_status
    return jsonify(checks), 200 if overall_status != "unhealthy" else 503
