from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from variantkit.config.schema import TOP_LEVEL_KINDS
from variantkit.errors import ConfigError
from variantkit.registry.tables import LAYOUT_PRESETS, MAX_WIDTH
from variantkit.serialize import to_jsonable
from variantkit.validation import validate

api_bp = Blueprint("api", __name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


@api_bp.route("/resolve/<kind>", methods=["OPTIONS"])
@api_bp.route("/validate/<kind>", methods=["OPTIONS"])
def preflight(kind: str):
    """Handle CORS preflight for JSON POSTs."""
    return "", 204


def _payload():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None
    return data


@api_bp.route("/resolve/<kind>", methods=["POST"])
def resolve(kind: str):
    """Resolve a component configuration into a render plan."""
    if kind not in TOP_LEVEL_KINDS:
        return jsonify({"error": f"unknown component kind {kind!r}"}), 404
    data = _payload()
    if data is None:
        return jsonify({"error": "JSON object body required"}), 400

    engine = current_app.extensions["engine"]
    deprecations: list[str] = []
    try:
        plan = engine.resolve(kind, data, deprecations=deprecations)
    except ConfigError as exc:
        return jsonify({"error": str(exc), "key": exc.key, "dimension": exc.dimension}), 400

    return jsonify({"kind": kind, "plan": to_jsonable(plan), "deprecations": deprecations})


@api_bp.route("/validate/<kind>", methods=["POST"])
def validate_config(kind: str):
    """Return diagnostics for a component configuration."""
    if kind not in TOP_LEVEL_KINDS:
        return jsonify({"error": f"unknown component kind {kind!r}"}), 404
    data = request.get_json(silent=True)
    diagnostics = validate(kind, data)
    return jsonify({
        "valid": not any(d.is_error for d in diagnostics),
        "diagnostics": [
            {
                "rule": d.rule,
                "severity": d.severity.value,
                "message": d.message,
                "component": d.component,
                "key": d.key,
                "fix": d.fix,
                "path": d.path,
            }
            for d in diagnostics
        ],
    })


@api_bp.route("/presets")
def presets():
    """List layout presets and the max-width keys."""
    return jsonify({
        "layouts": {name: to_jsonable(layout) for name, layout in LAYOUT_PRESETS.items()},
        "max_widths": list(MAX_WIDTH.fragments),
        "kinds": list(TOP_LEVEL_KINDS),
    })
