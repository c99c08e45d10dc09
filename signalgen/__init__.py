"""
signalgen package

This package generates the `SignalDefinitions.h` header (Signal0 .. Signal8) as a CLI-first utility.

Key responsibilities are split across modules:
- `bindings.py`: derive per-arity template parameters (type slots, argument names)
- `renderer.py`: render each arity, normalize fragments, compose the header
- `config.py`: optional YAML config for template locations and the arity range
- `cli.py`: CLI entrypoint and orchestration (config -> templates -> render -> write)
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
