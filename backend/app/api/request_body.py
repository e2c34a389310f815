"""Request Bodies - JSON and urlencoded form bodies decoded into handler fields.

Invariants:
    - application/json (or no Content-Type) is parsed as JSON; an empty body
      or a JSON null is an empty field dict
    - application/x-www-form-urlencoded is decoded with Starlette's form
      parser; a repeated key becomes a list of its values
    - Any other Content-Type is ignored and yields no fields
    - Malformed JSON or a non-object body raises RequestValidationError (400)
    - Only keys the client sent are returned (exclude_unset)

Design Decisions:
    - A dependency instead of a Body() parameter: FastAPI binds one body
      encoding per route, these routes accept two
"""

import json
from typing import Any, Awaitable, Callable

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def payload_fields(
    schema: type[BaseModel],
) -> Callable[[Request], Awaitable[dict]]:
    """Build a dependency returning the body fields validated by `schema`."""

    async def read_fields(request: Request) -> dict:
        raw = await _read_raw_body(request)
        if raw is None:
            return {}
        try:
            payload = schema.model_validate(raw)
        except ValidationError as exc:
            raise RequestValidationError(exc.errors(), body=raw) from exc
        return payload.model_dump(exclude_unset=True)

    return read_fields


async def _read_raw_body(request: Request) -> Any:
    media_type = _media_type(request.headers.get("content-type"))
    if media_type == FORM_CONTENT_TYPE:
        form = await request.form()
        return {
            key: values[0] if len(values) == 1 else values
            for key in form.keys()
            for values in [form.getlist(key)]
        }
    if media_type and not _is_json(media_type):
        return None

    body = await request.body()
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError as exc:
        raise RequestValidationError([{
            "type": "json_invalid",
            "loc": ("body",),
            "msg": "JSON decode error",
            "input": {},
            "ctx": {"error": getattr(exc, "msg", str(exc))},
        }]) from exc


def _media_type(content_type: str | None) -> str:
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def _is_json(media_type: str) -> bool:
    return media_type == "application/json" or media_type.endswith("+json")
