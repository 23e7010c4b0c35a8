"""Build Jinja2 template contexts from the parsed document.

One context per schema definition (type declarations) and one for the
service module holding every operation.
"""

from __future__ import annotations

import datetime
import logging
from typing import Any

from .models import Document, Operation, SchemaDef
from .naming import build_function_name, extract_path_params, to_template_literal
from .schema_parser import UNTYPED, get_response_type, is_optional, resolve_property_type

logger = logging.getLogger(__name__)

UNKNOWN_AUTHOR = "unknown"

# Methods whose calls carry no request body
_BODYLESS_METHODS = {"get", "delete"}


def build_header_context(
    document: Document,
    author: str | None = None,
    generated_on: datetime.date | None = None,
) -> dict[str, Any]:
    """Build the context shared by every artifact header."""
    info = document.info
    if author is None and info.contact is not None:
        author = info.contact.name
    generated_on = generated_on or datetime.date.today()
    return {
        "info": {
            "title": info.title,
            "version": info.version,
            "description": info.description,
        },
        "author": author or UNKNOWN_AUTHOR,
        "generated_on": generated_on.isoformat(),
    }


def build_type_context(name: str, schema: SchemaDef) -> dict[str, Any]:
    """Build the context for one type declaration."""
    fields = [
        {
            "name": prop_name,
            "type": resolve_property_type(prop),
            "optional": is_optional(schema, prop_name),
        }
        for prop_name, prop in schema.properties.items()
    ]
    return {"name": name, "fields": fields}


def _build_params(method: str, path: str) -> list[dict[str, Any]]:
    params = [
        {"name": name, "type": "string", "optional": False}
        for name in extract_path_params(path)
    ]
    if method not in _BODYLESS_METHODS:
        params.append({"name": "data", "type": UNTYPED, "optional": True})
    params.append({"name": "config", "type": UNTYPED, "optional": True})
    return params


def build_operation_context(
    method: str,
    path: str,
    operation: Operation,
    typed: bool = True,
) -> dict[str, Any]:
    """Build the context for one service function."""
    method = method.lower()
    if not operation.operation_id:
        logger.debug("%s %s has no operationId, deriving name from path", method.upper(), path)

    return {
        "name": build_function_name(method, path, operation.operation_id),
        "method": method,
        "path": path,
        "url": to_template_literal(path),
        "params": _build_params(method, path),
        "call_args": "config" if method in _BODYLESS_METHODS else "data, config",
        "return_type": get_response_type(operation) if typed else UNTYPED,
        "summary": operation.summary,
    }


def build_service_context(
    document: Document,
    type_names: list[str],
    typed: bool = True,
) -> dict[str, Any]:
    """Build the service module context.

    type_names are the declarations already emitted in the type pass; they
    become the module's imports.
    """
    operations: list[dict[str, Any]] = []
    seen: set[str] = set()

    for path, path_item in document.paths.items():
        for method, operation in path_item.operations():
            op = build_operation_context(method, path, operation, typed=typed)
            if op["name"] in seen:
                logger.warning("Duplicate function name %s (%s %s)", op["name"], method.upper(), path)
            seen.add(op["name"])
            operations.append(op)

    return {
        "base_url": document.base_url,
        "type_names": list(type_names) if typed else [],
        "operations": operations,
        "operation_count": len(operations),
    }
