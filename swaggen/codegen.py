"""Render templates and write generated output.

Takes contexts from context_builder and artifacts from the emitters and
produces the files under the output directory.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Any

import jinja2

if TYPE_CHECKING:
    from .targets import Artifact

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
DEFAULT_OUTPUT_DIR = Path("output")


def comment_text(value: Any) -> str:
    """Make free text safe inside a /* ... */ block comment."""
    return str(value).replace("*/", "*\\/")


@lru_cache(maxsize=None)
def get_environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["comment"] = comment_text
    return env


def render(template_name: str, context: dict[str, Any]) -> str:
    """Render one template with the given context."""
    template = get_environment().get_template(template_name)
    return template.render(**context)


def write_artifacts(artifacts: Iterable[Artifact], output_dir: Path | None = None) -> list[Path]:
    """Write artifacts below output_dir and return the created paths."""
    root = output_dir or DEFAULT_OUTPUT_DIR
    written: list[Path] = []
    for artifact in artifacts:
        output_path = root / artifact.path
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(artifact.content, encoding="utf-8")
        logger.debug("Wrote %s (%d bytes)", output_path, len(artifact.content))
        written.append(output_path)
    return written
