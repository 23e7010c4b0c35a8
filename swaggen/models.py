"""Document model for a parsed Swagger 2.0 description.

All parsers hand their raw mapping to these models once; every generator
reads them without mutation.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

HTTP_METHODS = ("get", "post", "put", "delete")


class _Model(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _nulls_as_absent(cls, data):
        # YAML reads an empty `description:` or `properties: ~` as null
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Contact(_Model):
    name: str | None = None
    email: str | None = None
    url: str | None = None


class Info(_Model):
    """Free-form document metadata used for artifact headers."""

    title: str
    version: str
    description: str = ""
    contact: Contact | None = None

    @field_validator("version", mode="before")
    @classmethod
    def _version_as_text(cls, value):
        # YAML reads `version: 1.0` as a float
        if isinstance(value, (int, float)):
            return str(value)
        return value


class ItemsDef(_Model):
    """Element description of an array property."""

    kind: str | None = Field(default=None, alias="type")


class PropertyDef(_Model):
    """A single field of a schema definition."""

    kind: str | None = Field(default=None, alias="type")
    format: str | None = None
    ref: str | None = Field(default=None, validation_alias=AliasChoices("$ref", "reference", "ref"))
    items: ItemsDef | None = None
    description: str = ""


class SchemaDef(_Model):
    """A named record type from `definitions`."""

    kind: str | None = Field(default=None, alias="type")
    properties: dict[str, PropertyDef] = {}
    required: list[str] | None = None  # None and [] mean different things

    @field_validator("properties", mode="before")
    @classmethod
    def _property_names_as_text(cls, value):
        # `on:` / `yes:` keys parse as booleans, an empty property as null
        if isinstance(value, dict):
            return {str(name): {} if prop is None else prop for name, prop in value.items()}
        return value


class ResponseSchema(_Model):
    kind: str | None = Field(default=None, alias="type")
    ref: str | None = Field(default=None, alias="$ref")


class Response(_Model):
    description: str = ""
    response_schema: ResponseSchema | None = Field(default=None, alias="schema")


class Operation(_Model):
    """One HTTP method bound to a path."""

    operation_id: str | None = Field(
        default=None, validation_alias=AliasChoices("operationId", "operation_id")
    )
    summary: str | None = None
    responses: dict[str, Response] = {}

    @field_validator("responses", mode="before")
    @classmethod
    def _status_codes_as_text(cls, value):
        # YAML turns `200:` into an int key
        if isinstance(value, dict):
            return {str(code): resp for code, resp in value.items()}
        return value


class PathItem(_Model):
    get: Operation | None = None
    post: Operation | None = None
    put: Operation | None = None
    delete: Operation | None = None

    def operations(self) -> Iterator[tuple[str, Operation]]:
        """Yield (method, operation) pairs in get, post, put, delete order."""
        for method in HTTP_METHODS:
            operation = getattr(self, method)
            if operation is not None:
                yield method, operation


class Document(_Model):
    """The whole API description."""

    info: Info
    definitions: dict[str, SchemaDef]
    paths: dict[str, PathItem]
    schemes: list[str] | None = None
    host: str | None = None
    base_path: str | None = Field(default=None, alias="basePath")

    @property
    def base_url(self) -> str | None:
        """scheme://host/basePath, or None when the document names no host."""
        if not self.host:
            return None
        scheme = self.schemes[0] if self.schemes else "http"
        return f"{scheme}://{self.host}{self.base_path or ''}"
