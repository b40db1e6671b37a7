"""
Request validation helpers.

Schemas live in ``rental_api.domain.schemas`` as pydantic models with
per-field constraints; pydantic is the single validator for all of them.
This module holds the shared field types and turns pydantic's error list
into the one-line message returned to clients.
"""

from typing import Annotated, Any, Iterable, Mapping

from bson import ObjectId
from pydantic import AfterValidator


def _check_object_id(value: str) -> str:
    if not ObjectId.is_valid(value):
        raise ValueError("must be a valid id")
    return value


ObjectIdStr = Annotated[str, AfterValidator(_check_object_id)]


def describe_error(error: Mapping[str, Any]) -> str:
    """Render one pydantic error as ``"field" message``."""
    loc = [str(part) for part in error.get("loc", ()) if part != "body"]
    field = ".".join(loc) or "body"
    msg = str(error.get("msg", "is invalid"))
    if msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    return f'"{field}" {msg[:1].lower()}{msg[1:]}'


def first_error_message(errors: Iterable[Mapping[str, Any]]) -> str:
    for error in errors:
        return describe_error(error)
    return "Invalid request."
