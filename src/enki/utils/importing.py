"""Utility helpers for dynamic imports."""
from __future__ import annotations

import importlib
import importlib.util
import sys
from pathlib import Path
from typing import Any


def import_string(path: str) -> Any:
    """Return the attribute at the given dotted path.

    Supports ``module:attr`` or ``module.attr`` syntax. ``attr`` may itself be
    dotted (``module:Outer.Inner``).
    """

    if not path:
        raise ValueError("Empty import path provided")
    module_name, sep, attr = path.partition(":")
    if not sep:
        module_name, sep, attr = path.rpartition(".")
    if not module_name or not attr:
        raise ValueError(f"Invalid import path '{path}'")
    target: Any = importlib.import_module(module_name)
    for part in attr.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise AttributeError(f"'{module_name}' has no attribute '{attr}'") from exc
    return target


def load_from_source(source: Path, attr: str) -> Any:
    """Load the attribute named ``attr`` from a Python file at ``source``."""

    path = source.expanduser().resolve()
    if not path.exists():
        raise FileNotFoundError(f"Source file not found: {path}")
    module_name = f"enki_target_{path.stem}_{hash(str(path)) & 0xFFFF:x}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Unable to load module from {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    if not hasattr(module, attr):
        raise AttributeError(f"'{attr}' not found in {path}")
    return getattr(module, attr)


def resolve_target(target: str) -> Any:
    """Resolve ``module:attr``, ``module.attr`` or ``path/to/file.py:attr``."""

    source, sep, attr = target.rpartition(":")
    if sep and source.endswith(".py"):
        return load_from_source(Path(source), attr)
    return import_string(target)
