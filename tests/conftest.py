"""Shared fixtures for swaggen tests."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from swaggen.loader import parse_document
from swaggen.models import Document


# ---------------------------------------------------------------------------
# Sample document: users with posts
# ---------------------------------------------------------------------------

_USERS_DOC: dict[str, Any] = {
    "swagger": "2.0",
    "info": {
        "title": "User API",
        "version": "1.0.0",
        "description": "Users and posts",
    },
    "schemes": ["https", "http"],
    "host": "api.example.com",
    "basePath": "/v1",
    "definitions": {
        "User": {
            "type": "object",
            "properties": {
                "id": {"type": "integer"},
                "name": {"type": "string"},
            },
            "required": ["id"],
        },
        "Post": {
            "type": "object",
            "properties": {
                "id": {"type": "integer"},
                "tags": {"type": "array", "items": {"type": "string"}},
                "author": {"type": "object", "$ref": "#/definitions/User"},
            },
        },
    },
    "paths": {
        "/users": {
            "get": {
                "summary": "List users",
                "responses": {"200": {"description": "ok"}},
            },
            "post": {
                "operationId": "create_user",
                "responses": {
                    "200": {"description": "ok", "schema": {"$ref": "#/definitions/User"}},
                },
            },
        },
        "/users/{id}": {
            "get": {
                "responses": {
                    "200": {"description": "ok", "schema": {"$ref": "#/definitions/User"}},
                },
            },
            "put": {
                "responses": {
                    "200": {"description": "ok", "schema": {"$ref": "#/definitions/User"}},
                },
            },
            "delete": {
                "responses": {"204": {"description": "gone"}},
            },
        },
        "/users/{userId}/posts/{postId}": {
            "get": {
                "responses": {
                    "200": {"description": "ok", "schema": {"$ref": "#/definitions/Post"}},
                },
            },
        },
    },
}


@pytest.fixture
def raw_doc() -> dict[str, Any]:
    """A fresh copy of the sample document as a plain mapping."""
    return copy.deepcopy(_USERS_DOC)


@pytest.fixture
def document(raw_doc) -> Document:
    return parse_document(raw_doc)
