# boilr/schema/validation.py
"""Structural validation of untrusted values (model replies, fixtures)."""

import json
import logging
from typing import Any

from pydantic import ValidationError

from boilr.errors import SchemaValidationError

from .models import AbstractSchema

logger = logging.getLogger(__name__)


def _format_errors(errors: list[dict[str, Any]]) -> str:
    lines = []
    for err in errors:
        loc = ".".join(str(part) for part in err.get("loc", ())) or "<root>"
        lines.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(lines)


def validate_schema(data: Any) -> AbstractSchema:
    """
    Validate a value against the abstract schema shape.

    Args:
        data: dict, JSON text (str/bytes), or an AbstractSchema

    Returns:
        A typed AbstractSchema

    Raises:
        SchemaValidationError: listing every missing or mistyped location
    """
    if isinstance(data, AbstractSchema):
        return data

    if isinstance(data, (str, bytes, bytearray)):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as e:
            raise SchemaValidationError(f"Schema is not valid JSON: {e}") from e

    try:
        return AbstractSchema.model_validate(data)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        logger.info(f"Schema validation failed with {len(errors)} error(s)")
        raise SchemaValidationError(
            f"Invalid schema: {_format_errors(errors)}", errors=errors
        ) from e
