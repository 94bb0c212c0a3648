"""Utilities for validating incoming Flask requests."""

from __future__ import annotations

from typing import Iterable

from flask import Request
from werkzeug.exceptions import BadRequest


def parse_json_request(
    req: Request,
    *,
    required_keys: Iterable[str] | None = None,
) -> dict:
    """Return the parsed JSON object body or raise a 400 error."""

    if not req.is_json:
        raise BadRequest("Request content type must be application/json.")

    data = req.get_json(silent=True)
    if data is None:
        raise BadRequest("Request JSON body is required.")

    if not isinstance(data, dict):
        raise BadRequest("Request JSON payload must be an object.")

    if not data:
        raise BadRequest("Request JSON body must not be empty.")

    if required_keys:
        missing = [key for key in required_keys if not _clean(data.get(key))]
        if missing:
            raise BadRequest(
                "Missing required fields: {}.".format(", ".join(sorted(missing)))
            )

    return data


def string_fields(data: dict, *keys: str, raw: Iterable[str] = ()) -> tuple[str, ...]:
    """Return the named payload values as strings.

    Values are stripped unless their key is listed in ``raw``.
    """

    values = []
    for key in keys:
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise BadRequest(f"Field '{key}' must be a string.")
        values.append((value or "") if key in raw else _clean(value))
    return tuple(values)


def _clean(value) -> str:
    if isinstance(value, str):
        return value.strip()
    return "" if value is None else str(value)
