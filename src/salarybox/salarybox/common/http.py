from __future__ import annotations

from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

from flask import jsonify


def to_jsonable(value: Any) -> Any:
    """Domain objects (frozen dataclasses, enums, dates) -> JSON-friendly values."""
    if is_dataclass(value) and not isinstance(value, type):
        return to_jsonable(asdict(value))
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat(timespec="seconds")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def ok(data=None, status=200, **meta):
    payload = {"success": True, "data": to_jsonable(data)}
    if meta:
        payload["meta"] = to_jsonable(meta)
    return jsonify(payload), status


def fail(message="Bad Request", status=400, code=None):
    payload = {"success": False, "message": message}
    if code:
        payload["code"] = code
    return jsonify(payload), status
