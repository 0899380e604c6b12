from typing import Any, Dict, Optional, Tuple
from flask import request, jsonify
from marshmallow import ValidationError as SchemaValidationError

from pcos_tracker.utils.errors import ServiceError


def ok(payload: Any, status: int = 200):
    return jsonify(payload), status


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": {"code": code, "message": message}}
    if extra:
        body["error"].update(extra)
    return jsonify(body), status


def service_error(exc: ServiceError):
    return error(exc.code, exc.message, exc.status, **exc.extra)


def json_body() -> Dict[str, Any]:
    # force=True accepts bodies sent without a JSON Content-Type
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict() if request.form else {}


def arg_str(name: str, default: Optional[str] = None) -> Optional[str]:
    val = request.args.get(name)
    if val is None or val.strip() == "":
        return default
    return val


def validate_schema(schema_cls, data: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
    """Load ``data`` with a marshmallow schema, returning ``(result, errors)``."""
    try:
        return schema_cls().load(data), None
    except SchemaValidationError as exc:
        return None, exc.messages
