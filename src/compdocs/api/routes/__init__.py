"""API routes - all prefixed with /api."""

from flask import Blueprint

from . import components, health

api_bp = Blueprint("api", __name__, url_prefix="/api")
api_bp.register_blueprint(health.bp)
api_bp.register_blueprint(components.bp)

__all__ = ["api_bp"]
