import logging
import uuid

from flask import Flask, g, jsonify, request

from ..errors import ComponentLookupError
from ..lookup import ComponentLookup
from .routes import api_bp

log = logging.getLogger(__name__)


def create_app(lookup: ComponentLookup | None = None):
    app = Flask(__name__)
    app.config["COMPONENT_LOOKUP"] = lookup or ComponentLookup()
    app.json.ensure_ascii = False
    app.json.sort_keys = False

    @app.before_request
    def set_request_context():
        g.request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))

    @app.after_request
    def add_request_id_header(response):
        response.headers["X-Request-ID"] = g.get("request_id", "")
        return response

    app.register_blueprint(api_bp)  # /api/*

    @app.errorhandler(ComponentLookupError)
    def lookup_failed(e):
        if e.status_code >= 500:
            log.error(f"Lookup failed: {e.message}")
        return jsonify({"error": e.message}), e.status_code

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"error": "method not allowed"}), 405

    @app.errorhandler(500)
    def internal_error(e):
        log.exception("Internal server error")
        return jsonify({"error": "internal server error"}), 500

    return app
