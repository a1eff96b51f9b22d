## routes.py
from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, Response, current_app, jsonify, make_response, request
from werkzeug.exceptions import HTTPException

from swot_web.config import AppSettings
from swot_web.domain.errors import AuthenticationError, SwotWebError, ValidationError
from swot_web.domain.models import as_text
from swot_web.services.auth_service import bearer_token

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,POST,DELETE,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

INTEGRATION_SCRIPT = """// Integration script for Competitive Analysis Generator
(function() {
  var server = '%(server)s';
  // Fetch variant assignment and add it as a data attribute
  fetch(server + '/api/variant').then(function(resp) { return resp.json(); }).then(function(data) {
    document.body.setAttribute('data-variant', data.variant);
  });
  // Expose a global function to record conversions
  window.recordConversion = function() {
    var variant = document.body.getAttribute('data-variant');
    if (!variant) return;
    fetch(server + '/api/convert', { method: 'POST', headers: { 'Content-Type': 'application/json' }, body: JSON.stringify({ variant: variant }) });
  };
})();
"""


def _read_json(*, allow_empty: bool) -> Any:
    """
    Parsed request body. An empty body is {} when allow_empty, otherwise invalid.
    """
    if allow_empty and not request.get_data():
        return {}
    data = request.get_json(force=True, silent=True)
    if data is None:
        raise ValidationError("Invalid JSON")
    return data


def _field(data: Any, name: str) -> Any:
    return data.get(name) if isinstance(data, dict) else None


def create_blueprint(analysis_service, auth_service, ab_test_service, digest_service, settings: AppSettings) -> Blueprint:
    bp = Blueprint("web", __name__)

    def current_user_id() -> str:
        user_id = auth_service.resolve_user_id(bearer_token(request.headers.get("Authorization")))
        if not user_id:
            raise AuthenticationError("Unauthorized")
        return user_id

    @bp.before_app_request
    def cors_preflight():
        if request.method == "OPTIONS" and request.path.startswith("/api/"):
            return Response(status=204, headers=CORS_HEADERS)
        return None

    @bp.after_app_request
    def add_cors_header(resp: Response) -> Response:
        resp.headers.setdefault("Access-Control-Allow-Origin", "*")
        return resp

    @bp.errorhandler(SwotWebError)
    def handle_service_error(e: SwotWebError):
        return jsonify({"error": e.message}), e.status_code

    @bp.app_errorhandler(413)
    def handle_too_large(e):
        return jsonify({"error": "Request body too large"}), 413

    @bp.app_errorhandler(404)
    @bp.app_errorhandler(405)
    def handle_http_error(e: HTTPException):
        if not request.path.startswith("/api/"):
            return e
        return jsonify({"error": e.name}), e.code

    # -----------------------------
    # Accounts
    # -----------------------------
    @bp.post("/api/register")
    def register():
        data = _read_json(allow_empty=True)
        token = auth_service.register(as_text(_field(data, "username")), as_text(_field(data, "password")))
        return jsonify({"message": "User registered successfully", "token": token}), 201

    @bp.post("/api/login")
    def login():
        data = _read_json(allow_empty=True)
        token = auth_service.login(as_text(_field(data, "username")), as_text(_field(data, "password")))
        return jsonify({"token": token})

    @bp.post("/api/logout")
    def logout():
        current_user_id()
        auth_service.logout(bearer_token(request.headers.get("Authorization")))
        return Response(status=204)

    # -----------------------------
    # Anonymous generation + A/B tracking
    # -----------------------------
    @bp.post("/api/generate")
    def generate():
        data = _read_json(allow_empty=False)
        result = analysis_service.generate(_field(data, "competitors"))
        current_app.logger.info("Generated %d results, variant=%s", len(result.results), result.variant.value)
        return jsonify(result.to_dict())

    @bp.get("/api/metrics")
    def metrics():
        return jsonify(ab_test_service.counters().to_dict())

    @bp.get("/api/variant")
    def variant():
        return jsonify({"variant": ab_test_service.serve_variant().value})

    @bp.post("/api/convert")
    def convert():
        data = _read_json(allow_empty=True)
        counters = ab_test_service.record_conversion(_field(data, "variant"))
        return jsonify(counters.to_dict())

    # -----------------------------
    # Stored analyses (authenticated)
    # -----------------------------
    @bp.get("/api/analysis/list")
    def analysis_list():
        user_id = current_user_id()
        return jsonify([a.to_dict() for a in analysis_service.list_for(user_id)])

    @bp.post("/api/analysis")
    def analysis_create():
        user_id = current_user_id()
        data = _read_json(allow_empty=True)
        analysis = analysis_service.create(user_id, _field(data, "competitors"))
        return jsonify(analysis.to_dict()), 201

    @bp.get("/api/analysis/<path:analysis_id>")
    def analysis_get(analysis_id: str):
        user_id = current_user_id()
        return jsonify(analysis_service.get(user_id, analysis_id).to_dict())

    @bp.delete("/api/analysis/<path:analysis_id>")
    def analysis_delete(analysis_id: str):
        user_id = current_user_id()
        analysis_service.delete(user_id, analysis_id)
        return Response(status=204)

    @bp.get("/api/metrics/user")
    def metrics_user():
        user_id = current_user_id()
        return jsonify(analysis_service.user_summary(user_id).to_dict())

    # -----------------------------
    # Digest (authenticated)
    # -----------------------------
    def _owned_entries(user_id: str, entries) -> list[Dict[str, Any]]:
        owned = {a.id for a in analysis_service.list_for(user_id)}
        return [e.to_dict() for e in entries if e.analysis_id in owned]

    @bp.get("/api/digest")
    def digest_get():
        user_id = current_user_id()
        return jsonify(_owned_entries(user_id, digest_service.load()))

    @bp.post("/api/digest")
    def digest_generate():
        user_id = current_user_id()
        entries = digest_service.generate(analysis_service.all_analyses())
        current_app.logger.info("Digest regenerated: %d entries", len(entries))
        return jsonify(_owned_entries(user_id, entries))

    # -----------------------------
    # Embeddable client snippet
    # -----------------------------
    @bp.get("/integration.js")
    def integration_script():
        server = settings.server_url or request.host_url.rstrip("/")
        resp = make_response(INTEGRATION_SCRIPT % {"server": server})
        resp.headers["Content-Type"] = "application/javascript"
        return resp

    return bp
