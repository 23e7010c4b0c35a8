"""Emission backends.

Each Target maps to one Emitter that turns a Document into artifacts: one
type declaration per schema definition, then one service module.
"""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass, replace
from enum import Enum

from .codegen import render
from .context_builder import (
    build_header_context,
    build_service_context,
    build_type_context,
)
from .models import Document, SchemaDef

logger = logging.getLogger(__name__)


class Target(str, Enum):
    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"


@dataclass(frozen=True)
class Artifact:
    """One generated file, relative to the output directory."""

    path: str
    content: str


@dataclass(frozen=True)
class Emitter:
    """Renders a Document for one target language.

    typed: whether the target imports declared types into the service and
    uses them as return types. Untyped targets return Promise<any>.
    """

    target: Target
    extension: str
    types_dir: str
    type_template: str
    service_template: str
    typed: bool
    author: str | None = None
    generated_on: datetime.date | None = None

    def _header(self, document: Document) -> dict:
        return build_header_context(document, author=self.author, generated_on=self.generated_on)

    def type_path(self, name: str) -> str:
        return f"{self.types_dir}/{name}.{self.extension}"

    def emit_type(self, document: Document, name: str, schema: SchemaDef) -> Artifact:
        """Render the declaration for one schema definition."""
        context = {**self._header(document), **build_type_context(name, schema)}
        return Artifact(self.type_path(name), render(self.type_template, context))

    def emit_service(self, document: Document, type_names: list[str]) -> Artifact:
        """Render the service module; type_names come from the type pass."""
        context = {
            **self._header(document),
            **build_service_context(document, type_names, typed=self.typed),
        }
        logger.debug("Service for %s: %d operations", self.target.value, context["operation_count"])
        return Artifact(f"service.{self.extension}", render(self.service_template, context))

    def emit(self, document: Document) -> list[Artifact]:
        """Render every artifact, type declarations first."""
        artifacts: list[Artifact] = []
        type_names: list[str] = []
        for name, schema in document.definitions.items():
            artifacts.append(self.emit_type(document, name, schema))
            type_names.append(name)
        artifacts.append(self.emit_service(document, type_names))
        return artifacts


_EMITTERS: dict[Target, Emitter] = {
    Target.TYPESCRIPT: Emitter(
        target=Target.TYPESCRIPT,
        extension="ts",
        types_dir="interfaces",
        type_template="interface.ts.j2",
        service_template="service.ts.j2",
        typed=True,
    ),
    Target.JAVASCRIPT: Emitter(
        target=Target.JAVASCRIPT,
        extension="js",
        types_dir="types",
        type_template="typedef.js.j2",
        service_template="service.js.j2",
        typed=False,
    ),
}


def get_emitter(
    target: Target | str,
    author: str | None = None,
    generated_on: datetime.date | None = None,
) -> Emitter:
    """Return the emitter for target, bound to the given header values."""
    emitter = _EMITTERS[Target(target)]
    return replace(emitter, author=author, generated_on=generated_on)
