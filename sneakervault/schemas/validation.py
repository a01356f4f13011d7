"""Turning pydantic validation errors into field-level error maps."""

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from sneakervault.exceptions import ValidationFailed

ModelT = TypeVar("ModelT", bound=BaseModel)

# Leading loc entries FastAPI adds to say where the value came from
_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def field_errors(errors: Iterable[Mapping[str, Any]]) -> dict[str, list[str]]:
    """Group pydantic error dicts by dotted field path.

    Errors that do not point at a field (malformed JSON, model-level checks)
    are collected under ``"body"``.
    """
    grouped: dict[str, list[str]] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        field = ".".join(loc) or "body"
        message = str(error.get("msg", "Invalid value"))
        # pydantic prefixes messages raised from validators
        message = message.removeprefix("Value error, ")
        grouped.setdefault(field, []).append(message)
    return grouped


def validate_payload(payload: Mapping[str, Any], schema: type[ModelT]) -> ModelT:
    """Validate an untrusted payload against ``schema``.

    Pure: never touches the database. Raises ValidationFailed listing every
    offending field.
    """
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise ValidationFailed(field_errors(exc.errors())) from None
