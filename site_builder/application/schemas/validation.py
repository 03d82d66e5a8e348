"""Translate pydantic validation errors into the domain's ValidationFailure."""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from site_builder.domain.exceptions import ValidationFailure

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_payload(schema: type[ModelT], payload: ModelT | Mapping[str, Any]) -> ModelT:
    """Return ``payload`` as a validated ``schema`` instance.

    Raw mappings (form data, JSON bodies) are validated here; the first
    failing field is reported through ``ValidationFailure``.
    """
    if isinstance(payload, schema):
        return payload
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or schema.__name__
        raise ValidationFailure(field, first["msg"]) from exc
