# boilr/schema/__init__.py
"""Abstract database schema models and validator."""

from .models import AbstractSchema, FieldType, Reference, SchemaField, SchemaModel
from .validation import validate_schema

__all__ = [
    "AbstractSchema",
    "SchemaModel",
    "SchemaField",
    "FieldType",
    "Reference",
    "validate_schema",
]
