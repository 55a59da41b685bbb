"""Phong material parameters and their text file format."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from pathlib import Path

Vec4 = tuple[float, float, float, float]

_VECTOR_KEYS = {
    "ambient:": "ambient",
    "diffuse:": "diffuse",
    "specular:": "specular",
    "emission:": "emission",
}


def _take_floats(tokens, count: int, key: str) -> tuple[float, ...]:
    values = list(islice(tokens, count))
    if len(values) < count:
        raise ValueError(f"{key} expects {count} values")
    try:
        return tuple(float(value) for value in values)
    except ValueError as exc:
        raise ValueError(f"invalid number after {key}") from exc


@dataclass
class PhongMaterial:
    """Ambient, diffuse, specular and emission colours with a shininess exponent."""

    ambient: Vec4 = (0.0, 0.0, 0.0, 0.0)
    diffuse: Vec4 = (0.0, 0.0, 0.0, 0.0)
    specular: Vec4 = (0.0, 0.0, 0.0, 0.0)
    emission: Vec4 = (0.0, 0.0, 0.0, 0.0)
    shininess: float = 0.0

    @classmethod
    def from_text(cls, text: str) -> "PhongMaterial":
        """Parse whitespace-separated 'key: values' text; unknown words are skipped."""
        values: dict[str, object] = {}
        tokens = iter(text.split())
        for token in tokens:
            if token in _VECTOR_KEYS:
                values[_VECTOR_KEYS[token]] = _take_floats(tokens, 4, token)
            elif token == "shininess:":
                values["shininess"] = _take_floats(tokens, 1, token)[0]
        return cls(**values)

    @classmethod
    def load(cls, path) -> "PhongMaterial":
        return cls.from_text(Path(path).read_text(encoding="utf-8"))