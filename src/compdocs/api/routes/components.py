from flask import Blueprint, current_app, jsonify

from ...lookup import ComponentLookup

bp = Blueprint("api_components", __name__, url_prefix="/components")


def get_lookup() -> ComponentLookup:
    return current_app.config["COMPONENT_LOOKUP"]


@bp.get("")
def list_components():
    components = [entry.model_dump() for entry in get_lookup().list_components()]
    return jsonify({"components": components, "total": len(components)})


@bp.get("/<name>")
def get_component(name: str):
    doc = get_lookup().load(name)
    return jsonify(doc.to_dict())


@bp.get("/<name>/props")
def get_props(name: str):
    doc = get_lookup().load(name)
    props = [p.model_dump() for p in doc.props]
    return jsonify({"component": doc.component, "props": props, "total": len(props)})


@bp.get("/<name>/events")
def get_events(name: str):
    doc = get_lookup().load(name)
    events = [e.model_dump() for e in doc.events]
    return jsonify({"component": doc.component, "events": events, "total": len(events)})


@bp.get("/<name>/methods")
def get_methods(name: str):
    doc = get_lookup().load(name)
    methods = [m.model_dump() for m in doc.methods or []]
    return jsonify(
        {"component": doc.component, "methods": methods, "total": len(methods)}
    )
