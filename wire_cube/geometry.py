"""
Points and the cube vertex store.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Point3:
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Point2:
    x: float
    y: float

    @classmethod
    def from_ints(cls, x: int, y: int) -> "Point2":
        return cls(float(x), float(y))


# Vertex pairs in draw order: for each side i, top edge, bottom edge, vertical edge
CUBE_EDGES = tuple(
    edge
    for i in range(4)
    for edge in ((i, (i + 1) % 4), (i + 4, (i + 1) % 4 + 4), (i, i + 4))
)


class Cube:
    """
    Eight vertices in a fixed order:
        0-3  top face    (front-left, front-right, back-right, back-left)
        4-7  bottom face (same horizontal offsets)
    The edge table above depends on this order.
    """

    N_VERTICES = 8

    def __init__(self, vertices):
        verts = np.array(vertices, dtype=float)
        if verts.shape != (self.N_VERTICES, 3):
            raise ValueError(f"a cube needs 8 xyz vertices, got shape {verts.shape}")
        self.vertices = verts

    @classmethod
    def centered(cls, size: float) -> "Cube":
        lo = -size / 2.0
        hi = lo + size
        left, top, front = lo, lo, lo
        right, bottom, back = hi, hi, hi
        return cls(
            [
                # Top
                [left, top, front],
                [right, top, front],
                [right, top, back],
                [left, top, back],
                # Bottom
                [left, bottom, front],
                [right, bottom, front],
                [right, bottom, back],
                [left, bottom, back],
            ]
        )

    def __len__(self):
        return self.N_VERTICES

    def __getitem__(self, index) -> Point3:
        x, y, z = self.vertices[index]
        return Point3(float(x), float(y), float(z))

    def __iter__(self):
        for i in range(self.N_VERTICES):
            yield self[i]

    def __repr__(self):
        return f"Cube({self.vertices.tolist()})"
