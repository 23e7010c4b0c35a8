"""Load and parse a Swagger document.

Reads a JSON or YAML file and validates it into a Document.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import Document

logger = logging.getLogger(__name__)

DEFAULT_SPEC_PATH = Path("swagger.json")


_KEPT_AS_TEXT = {
    "tag:yaml.org,2002:bool",
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:float",
}


class _TextLoader(yaml.SafeLoader):
    """SafeLoader that leaves numbers and yes/no words as strings.

    Every scalar in the document model is text: `version: 1.10` must stay
    "1.10" and a property named `on` must stay "on".
    """


_TextLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _KEPT_AS_TEXT]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class DocumentError(Exception):
    """The input document cannot be read or does not have the expected shape."""


def _describe(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        problems.append(f"{location}: {item['msg']}")
    return "; ".join(problems)


def parse_document(data: Any) -> Document:
    """Validate an already-parsed mapping into a Document."""
    if not isinstance(data, dict):
        raise DocumentError(f"expected a mapping at the top level, got {type(data).__name__}")
    try:
        return Document.model_validate(data)
    except ValidationError as exc:
        raise DocumentError(f"invalid document: {_describe(exc)}") from exc


def load_document(path: Path | None = None) -> Document:
    """Load a Swagger document from disk."""
    spec_file = path or DEFAULT_SPEC_PATH
    try:
        text = spec_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentError(f"cannot read {spec_file}: {exc}") from exc

    # JSON is a subset of YAML, one parser covers both
    try:
        data = yaml.load(text, Loader=_TextLoader)
    except yaml.YAMLError as exc:
        raise DocumentError(f"cannot parse {spec_file}: {exc}") from exc

    document = parse_document(data)
    logger.debug(
        "Loaded %s: %d definitions, %d paths",
        spec_file, len(document.definitions), len(document.paths),
    )
    return document
