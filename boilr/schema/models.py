# boilr/schema/models.py
"""
Pydantic models for the abstract database schema.

The schema is database-agnostic: tables ("models"), their columns ("fields")
and foreign-key references. Wire names are camelCase (primaryKey, notNull);
Python attributes are snake_case. Both spellings are accepted on input.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


class FieldType(str, Enum):
    """Database-agnostic column types."""

    SERIAL = "serial"
    INTEGER = "integer"
    BIGINT = "bigint"
    TEXT = "text"
    VARCHAR = "varchar"
    BOOLEAN = "boolean"
    DATE = "date"
    TIMESTAMP = "timestamp"
    DECIMAL = "decimal"
    FLOAT = "float"
    JSON = "json"
    JSONB = "jsonb"
    UUID = "uuid"


class Reference(BaseModel):
    """Foreign-key pointer to another model's field."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    model: StrictStr = Field(description="The name of the referenced model")
    field: StrictStr = Field(description='The name of the referenced field (usually "id")')


class SchemaField(BaseModel):
    """One column of a model."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    name: StrictStr = Field(description="The name of the field")
    type: FieldType = Field(description="The data type of the field")
    primary_key: StrictBool = Field(
        default=False, alias="primaryKey", description="Whether this field is a primary key"
    )
    not_null: StrictBool = Field(
        default=False, alias="notNull", description="Whether this field cannot be null"
    )
    unique: StrictBool = Field(default=False, description="Whether this field must be unique")
    default: StrictStr | None = Field(
        default=None,
        description="Default value as a string (will be parsed based on type)",
    )
    references: Reference | None = Field(
        default=None, description="Foreign key reference to another model"
    )

    def constraints(self) -> list[str]:
        """Active constraints in display order."""
        active = []
        if self.primary_key:
            active.append("primary_key")
        if self.not_null:
            active.append("not_null")
        if self.unique:
            active.append("unique")
        if self.default is not None:
            active.append(f"default: {self.default}")
        if self.references is not None:
            active.append(f"references: {self.references.model}.{self.references.field}")
        return active


class SchemaModel(BaseModel):
    """One table/entity."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: StrictStr = Field(description="The name of the model (table)")
    fields: list[SchemaField] = Field(
        min_length=1, description="Array of fields in this model"
    )


class AbstractSchema(BaseModel):
    """Root of a proposed database design."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    models: list[SchemaModel] = Field(
        min_length=1, description="Array of models (tables) in the schema"
    )

    def model_names(self) -> list[str]:
        return [m.name for m in self.models]

    def to_wire(self) -> dict:
        """camelCase dict with absent optional values omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)

    @classmethod
    def json_schema(cls) -> dict:
        """JSON Schema of the wire shape with all $refs inlined."""
        raw = cls.model_json_schema(by_alias=True)
        defs = raw.pop("$defs", {})
        return _inline_refs(raw, defs)


def _inline_refs(node, defs: dict):
    """Replace {"$ref": "#/$defs/X"} nodes with the definition they point at."""
    if isinstance(node, dict):
        ref = node.get("$ref")
        if isinstance(ref, str) and ref.startswith("#/$defs/"):
            target = dict(defs[ref.split("/")[-1]])
            # keep sibling keys such as "description"
            target.update({k: v for k, v in node.items() if k != "$ref"})
            return _inline_refs(target, defs)
        return {k: _inline_refs(v, defs) for k, v in node.items()}
    if isinstance(node, list):
        return [_inline_refs(item, defs) for item in node]
    return node
