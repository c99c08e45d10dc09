"""
renderer.py

Responsibility: Render the per-arity signal class template and compose the header.

Rules:
- Arities are rendered in ascending order; fragment order is header order.
- Each fragment is normalized on its own: whitespace-only `( )` spans collapse to `()`.
- The header template receives the fragments as its single input, `signal_classes`.
- Any render failure aborts the whole run. No partial document is returned.

This module intentionally does NOT know about config files or CLI parsing.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

from jinja2 import Environment, StrictUndefined

from signalgen.bindings import binding_context

logger = logging.getLogger(__name__)

PHASE_SIGNAL_CLASS = "per-arity"
PHASE_HEADER = "outer"
PHASE_LOAD = "load"

DEFAULT_ARITIES = range(0, 9)

_EMPTY_PARENS_RE = re.compile(r"\(\s+\)")

Renderer = Callable[[str, Mapping[str, Any]], str]


class TemplateRenderError(RuntimeError):
    def __init__(self, message: str, *, phase: str, arity: int | None = None) -> None:
        super().__init__(message)
        self.phase = phase
        self.arity = arity


class TemplateNotFound(TemplateRenderError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Template file not found: {path}", phase=PHASE_LOAD)
        self.path = path


class JinjaRenderer:
    """
    Render template source strings with Jinja2.

    Every instance owns its Environment; nothing is cached across instances.
    """

    def __init__(self) -> None:
        self._env = Environment(
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def __call__(self, template_source: str, context: Mapping[str, Any]) -> str:
        return self._env.from_string(template_source).render(**context)


def normalize_empty_parens(text: str) -> str:
    """
    Collapse every parenthesized whitespace-only span to `()`.

    `Emit( {{ arg_list }} )` renders as `Emit(  )` at arity 0; this turns it into `Emit()`.
    """
    return _EMPTY_PARENS_RE.sub("()", text)


def render_fragment(template_source: str, arity: int, *, render: Renderer) -> str:
    context = binding_context(arity)
    try:
        out = render(template_source, context)
    except Exception as e:  # noqa: BLE001 - surface as TemplateRenderError
        raise TemplateRenderError(
            f"Failed rendering signal class template for arity {arity}: {e}",
            phase=PHASE_SIGNAL_CLASS,
            arity=arity,
        ) from e
    return normalize_empty_parens(out)


def render_fragments(template_source: str, arities: Iterable[int], *, render: Renderer) -> list[str]:
    """
    Render one normalized fragment per arity, in ascending arity order.
    """
    fragments: list[str] = []
    for arity in sorted(arities):
        logger.debug("Rendering signal class for arity %d", arity)
        fragments.append(render_fragment(template_source, arity, render=render))
    return fragments


def render_document(
    class_template: str,
    header_template: str,
    arities: Iterable[int] = DEFAULT_ARITIES,
    *,
    render: Renderer | None = None,
) -> str:
    """
    Render every signal class, embed them in the header template, and return the
    stripped header text.
    """
    if render is None:
        render = JinjaRenderer()

    signal_classes = render_fragments(class_template, arities, render=render)

    try:
        out = render(header_template, {"signal_classes": signal_classes})
    except Exception as e:  # noqa: BLE001 - surface as TemplateRenderError
        raise TemplateRenderError(f"Failed rendering header template: {e}", phase=PHASE_HEADER) from e

    logger.debug("Composed header from %d signal classes", len(signal_classes))
    return out.strip()


def load_template(templates_dir: str | Path, name: str) -> str:
    path = Path(templates_dir) / name
    if not path.is_file():
        raise TemplateNotFound(path)
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise TemplateRenderError(f"Template file is not UTF-8: {path}", phase=PHASE_LOAD) from e


def write_document(document: str, destination: str | Path) -> Path:
    """
    Write the composed header to `destination`, creating parent directories.
    """
    dst_path = Path(destination)
    dst_path.parent.mkdir(parents=True, exist_ok=True)
    # Normalize newlines for stable cross-platform output.
    dst_path.write_text(document, encoding="utf-8", newline="\n")
    return dst_path
