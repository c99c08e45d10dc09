"""
cli.py

Responsibility: CLI entrypoint for signalgen.

High-level flow (single command `generate`):
1) Load config (optional YAML file) and apply CLI overrides -> `GeneratorConfig`
2) Read the signal class and header templates
3) Render every arity and compose the header
4) Write the header to stdout, or to `--output`

This module should orchestrate behavior but keep concerns isolated:
- Arity bindings: `bindings.py`
- Rendering: `renderer.py`
- Config loading: `config.py`
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from signalgen.bindings import InvalidArity
from signalgen.config import ConfigError, GeneratorConfig, default_config, load_config, validate_arity_range
from signalgen.renderer import TemplateRenderError, load_template, render_document, write_document

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _resolve_config(args: argparse.Namespace) -> GeneratorConfig:
    config = load_config(args.config) if args.config else default_config()

    overrides: dict[str, object] = {}
    if args.templates_dir is not None:
        overrides["templates_dir"] = Path(args.templates_dir).resolve()
    if args.class_template is not None:
        overrides["class_template"] = args.class_template
    if args.header_template is not None:
        overrides["header_template"] = args.header_template
    if args.min_arity is not None:
        overrides["min_arity"] = args.min_arity
    if args.max_arity is not None:
        overrides["max_arity"] = args.max_arity
    if args.output is not None:
        overrides["output"] = Path(args.output)

    config = dataclasses.replace(config, **overrides)
    validate_arity_range(config.min_arity, config.max_arity)
    return config


def generate_cmd(args: argparse.Namespace) -> int:
    config = _resolve_config(args)
    logger.debug("Using templates from %s", config.templates_dir)

    class_template = load_template(config.templates_dir, config.class_template)
    header_template = load_template(config.templates_dir, config.header_template)

    document = render_document(class_template, header_template, config.arities)

    if config.output is None:
        sys.stdout.write(document)
        sys.stdout.flush()
    else:
        path = write_document(document, config.output)
        logger.info("Wrote %s", path)

    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="signalgen", description="signalgen - generate the SignalN class header")
    sub = p.add_subparsers(dest="command", required=True)

    g = sub.add_parser("generate", help="Render every signal arity into one header")
    g.add_argument("--config", default=None, help="Path to a YAML config file")
    g.add_argument("--templates-dir", default=None, help="Directory holding both templates (default: packaged templates)")
    g.add_argument("--class-template", default=None, help="Per-arity signal class template file name")
    g.add_argument("--header-template", default=None, help="Header template file name")
    g.add_argument("--min-arity", type=int, default=None, help="Lowest arity to generate (default: 0)")
    g.add_argument("--max-arity", type=int, default=None, help="Highest arity to generate (default: 8)")
    g.add_argument("--output", default=None, help="Write the header to this path instead of stdout")
    g.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")

    g.set_defaults(func=generate_cmd)
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(bool(getattr(args, "verbose", False)))
    try:
        return int(args.func(args))
    except (TemplateRenderError, InvalidArity, ConfigError, OSError) as e:
        print(f"signalgen: error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
