# metamesh/assets/settings.py
"""
Parameter files.

A ``.metamesh`` file is a JSON object naming one shape and its parameters::

    {
        "shape": "sphere",
        "params": {"radius": 1.0, "columns": 32, "axis": "z"},
        "options": {"recalculate_tangents": true}
    }

Omitted parameters and options keep their defaults.
"""

from __future__ import annotations

import json
from dataclasses import MISSING, dataclass, fields
from pathlib import Path
from typing import Any, Callable, Dict, Mapping

from metamesh.buffer import MeshBuildOptions
from metamesh.errors import InvalidParameter
from metamesh.shapes import SHAPE_TYPES, Axis, ShapeDescriptor, ShapeKind
from metamesh.types import Vector2, Vector3


@dataclass(frozen=True)
class ImportSettings:
    descriptor: ShapeDescriptor
    options: MeshBuildOptions


def _to_axis(name: str, value: Any) -> Axis:
    if isinstance(value, str) and value.upper() in Axis.__members__:
        return Axis[value.upper()]
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Axis(value)
        except ValueError:
            pass
    raise InvalidParameter(name, value, "must be one of x, y, z")


def _to_float(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameter(name, value, "must be a number")
    return float(value)


def _to_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameter(name, value, "must be an integer")
    return value


def _to_bool(name: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise InvalidParameter(name, value, "must be true or false")
    return value


def _to_components(name: str, value: Any, length: int) -> list:
    if not isinstance(value, (list, tuple)) or len(value) != length:
        raise InvalidParameter(name, value, f"must be a list of {length}")
    return list(value)


def _converter(default: Any) -> Callable[[str, Any], Any]:
    """Pick a value converter from the type of a field's default."""
    if isinstance(default, Axis):
        return _to_axis
    if isinstance(default, bool):
        return _to_bool
    if isinstance(default, int):
        return _to_int
    if isinstance(default, float):
        return _to_float
    if isinstance(default, Vector2):
        return lambda n, v: Vector2(
            *(_to_float(n, c) for c in _to_components(n, v, 2))
        )
    if isinstance(default, Vector3):
        return lambda n, v: Vector3(
            *(_to_float(n, c) for c in _to_components(n, v, 3))
        )
    if isinstance(default, tuple):
        return lambda n, v: tuple(
            _to_int(n, c) for c in _to_components(n, v, len(default))
        )
    raise TypeError(f"No converter for {type(default).__name__}")


def _default_of(f: Any) -> Any:
    if f.default_factory is not MISSING:
        return f.default_factory()
    return f.default


def _build(cls: type, prefix: str, values: Mapping[str, Any]) -> Any:
    if not isinstance(values, Mapping):
        raise InvalidParameter(prefix, values, "must be an object")

    known = {f.name: f for f in fields(cls)}
    unknown = sorted(set(values) - set(known))
    if unknown:
        raise InvalidParameter(prefix, unknown, "unknown parameter names")

    kwargs: Dict[str, Any] = {}
    for key, value in values.items():
        name = f"{prefix}.{key}"
        kwargs[key] = _converter(_default_of(known[key]))(name, value)
    return cls(**kwargs)


def descriptor_from_dict(data: Mapping[str, Any]) -> ShapeDescriptor:
    raw_kind = data.get("shape")
    try:
        kind = ShapeKind(raw_kind)
    except ValueError:
        raise InvalidParameter(
            "shape", raw_kind, f"must be one of {[k.value for k in ShapeKind]}"
        ) from None
    return _build(SHAPE_TYPES[kind], kind.value, data.get("params", {}))


def options_from_dict(data: Mapping[str, Any]) -> MeshBuildOptions:
    return _build(MeshBuildOptions, "options", data.get("options", {}))


def load_settings(path: Path) -> ImportSettings:
    """Read and validate a ``.metamesh`` parameter file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidParameter("path", str(path), f"unreadable: {e}") from e

    if not isinstance(data, dict):
        raise InvalidParameter("path", str(path), "must contain a JSON object")

    return ImportSettings(
        descriptor=descriptor_from_dict(data),
        options=options_from_dict(data),
    )
