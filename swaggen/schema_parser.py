"""Map schema properties and responses to TypeScript type expressions.

Handles:
- Primitive kinds (integer, string, boolean)
- Typed and untyped arrays
- Object properties that reference another definition by name
- Optionality from the owning schema's required list
- Success (200) response types
"""

from __future__ import annotations

import logging

from .models import Operation, PropertyDef, SchemaDef

logger = logging.getLogger(__name__)

DEFINITIONS_PREFIX = "#/definitions/"

# Fallback for anything the mapping below does not cover
UNTYPED = "any"

_PRIMITIVES: dict[str, str] = {
    "integer": "number",
    "string": "string",
    "boolean": "boolean",
}


def strip_definition_ref(ref: str) -> str:
    """Turn '#/definitions/User' into 'User'; other refs pass through."""
    if ref.startswith(DEFINITIONS_PREFIX):
        return ref[len(DEFINITIONS_PREFIX):]
    return ref


def resolve_property_type(prop: PropertyDef) -> str:
    """Resolve a property to a type expression."""
    if prop.kind in _PRIMITIVES:
        return _PRIMITIVES[prop.kind]

    if prop.kind == "array":
        item_kind = prop.items.kind if prop.items else None
        if item_kind in _PRIMITIVES:
            return f"{_PRIMITIVES[item_kind]}[]"
        return f"{UNTYPED}[]"

    if prop.kind == "object" and prop.ref:
        # Cross-reference by name; not checked against the definitions
        return strip_definition_ref(prop.ref)

    return UNTYPED


def is_optional(schema: SchemaDef, name: str) -> bool:
    """A property is optional only when a required list exists and omits it."""
    return schema.required is not None and name not in schema.required


def get_response_type(operation: Operation) -> str:
    """Determine the success type of an operation from its 200 response."""
    success = operation.responses.get("200")
    if success is None or success.response_schema is None or not success.response_schema.ref:
        logger.debug("No referenced 200 schema, falling back to %s", UNTYPED)
        return UNTYPED
    return strip_definition_ref(success.response_schema.ref)
