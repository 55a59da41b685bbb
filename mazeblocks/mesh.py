"""Indexed triangle meshes read from Wavefront OBJ text."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from pathlib import Path


class MeshFormatError(ValueError):
    """Raised when OBJ text cannot be turned into a mesh."""


@dataclass(frozen=True)
class Vertex:
    coord: tuple[float, float, float]
    normal: tuple[float, float, float]
    tex_coord: tuple[float, float]


def _take(tokens, count: int, key: str) -> list[str]:
    values = list(islice(tokens, count))
    if len(values) < count:
        raise MeshFormatError(f"'{key}' expects {count} values")
    return values


def _floats(tokens, count: int, key: str) -> tuple[float, ...]:
    try:
        return tuple(float(value) for value in _take(tokens, count, key))
    except ValueError as exc:
        if isinstance(exc, MeshFormatError):
            raise
        raise MeshFormatError(f"invalid number after '{key}'") from exc


def _corner_indices(corner: str) -> tuple[int, int, int]:
    parts = corner.split("/")
    if len(parts) != 3:
        raise MeshFormatError(f"face corner {corner!r} is not v/vt/vn")
    try:
        v, t, n = (int(part) for part in parts)
    except ValueError as exc:
        raise MeshFormatError(f"face corner {corner!r} is not v/vt/vn") from exc
    return v, t, n


def _lookup(items: list, one_based: int, kind: str):
    if not 1 <= one_based <= len(items):
        raise MeshFormatError(f"{kind} index {one_based} out of range")
    return items[one_based - 1]


@dataclass
class Mesh:
    """Triangle mesh: unique vertices plus three indices per triangle."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> "Mesh":
        """Parse OBJ text; each 'f' takes three v/vt/vn corners, identical corners share a vertex."""
        positions: list[tuple[float, ...]] = []
        normals: list[tuple[float, ...]] = []
        tex_coords: list[tuple[float, ...]] = []
        corners: list[str] = []

        tokens = iter(text.split())
        for token in tokens:
            if token == "v":
                positions.append(_floats(tokens, 3, token))
            elif token == "vn":
                normals.append(_floats(tokens, 3, token))
            elif token == "vt":
                tex_coords.append(_floats(tokens, 2, token))
            elif token == "f":
                corners.extend(_take(tokens, 3, token))

        mesh = cls()
        seen: dict[str, int] = {}
        for corner in corners:
            index = seen.get(corner)
            if index is None:
                v, t, n = _corner_indices(corner)
                mesh.vertices.append(
                    Vertex(
                        coord=_lookup(positions, v, "position"),
                        normal=_lookup(normals, n, "normal"),
                        tex_coord=_lookup(tex_coords, t, "texture coordinate"),
                    )
                )
                index = seen[corner] = len(mesh.vertices) - 1
            mesh.indices.append(index)
        return mesh

    @classmethod
    def load(cls, path) -> "Mesh":
        return cls.parse(Path(path).read_text(encoding="utf-8"))