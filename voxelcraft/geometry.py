"""Vectors, bounding boxes, entities, view frustum, rays and matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List, Sequence

import numpy as np

_NEAR_PLANE = 0.1
_FAR_PLANE = 2000.0


def _vec3(values: Sequence[float]) -> np.ndarray:
    return np.array(values, dtype=float).reshape(3)


@dataclass(frozen=True)
class VectorXZ:
    """An integer position on the horizontal plane."""

    x: int
    z: int


class AABB:
    """Axis-aligned box given by a corner position and fixed dimensions."""

    def __init__(self, dimensions: Sequence[float], position: Sequence[float] = (0, 0, 0)):
        dims = _vec3(dimensions)
        dims.flags.writeable = False
        self.dimensions = dims
        self.position = _vec3(position)

    def update(self, location: Sequence[float]) -> None:
        self.position = _vec3(location)

    def get_vn(self, normal: Sequence[float]) -> np.ndarray:
        """Corner furthest against the normal."""
        n = _vec3(normal)
        return self.position + np.where(n < 0, self.dimensions, 0.0)

    def get_vp(self, normal: Sequence[float]) -> np.ndarray:
        """Corner furthest along the normal."""
        n = _vec3(normal)
        return self.position + np.where(n > 0, self.dimensions, 0.0)


class Entity:
    """Something with a position, rotation (degrees), velocity and box."""

    def __init__(
        self,
        position: Sequence[float] = (0, 0, 0),
        rotation: Sequence[float] = (0, 0, 0),
        dimensions: Sequence[float] = (0, 0, 0),
    ):
        self.position = _vec3(position)
        self.rotation = _vec3(rotation)
        self.velocity = np.zeros(3)
        self.box = AABB(dimensions)


@dataclass
class Plane:
    normal: np.ndarray = field(default_factory=lambda: np.zeros(3))
    distance_to_origin: float = 0.0

    def distance_to_point(self, point: Sequence[float]) -> float:
        return float(np.dot(_vec3(point), self.normal) + self.distance_to_origin)


class ViewFrustum:
    """Six clipping planes taken from a projection-view matrix.

    Planes are kept in the order near, far, left, right, top, bottom.
    """

    def __init__(self) -> None:
        self.planes: List[Plane] = [Plane() for _ in range(6)]

    def update(self, matrix: Any) -> None:
        m = np.asarray(matrix, dtype=float)
        w = m[3]
        rows = [w + m[2], w - m[2], w + m[0], w - m[0], w - m[1], w + m[1]]
        planes = []
        with np.errstate(divide="ignore", invalid="ignore"):
            for row in rows:
                length = np.linalg.norm(row[:3])
                planes.append(Plane(row[:3] / length, float(row[3] / length)))
        self.planes = planes

    def is_box_in_frustum(self, box: AABB) -> bool:
        return not any(
            plane.distance_to_point(box.get_vp(plane.normal)) < 0 for plane in self.planes
        )


class Ray:
    """A ray that walks from a start point along a pitch/yaw direction."""

    def __init__(self, position: Sequence[float], direction: Sequence[float]):
        self.start = _vec3(position)
        self.end = self.start.copy()
        self.direction = _vec3(direction)

    def step(self, scale: float) -> None:
        yaw = math.radians(self.direction[1] + 90)
        pitch = math.radians(self.direction[0])
        self.end = self.end - np.array([math.cos(yaw), math.tan(pitch), math.sin(yaw)]) * scale

    def length(self) -> float:
        return float(np.linalg.norm(self.end - self.start))


def _rotation(angle_degrees: float, axis: int) -> np.ndarray:
    angle = math.radians(angle_degrees)
    c, s = math.cos(angle), math.sin(angle)
    matrix = np.identity(4)
    i, j = [k for k in range(3) if k != axis]
    matrix[i, i] = c
    matrix[j, j] = c
    if axis == 1:
        matrix[i, j] = s
        matrix[j, i] = -s
    else:
        matrix[i, j] = -s
        matrix[j, i] = s
    return matrix


def _translation(offset: Sequence[float]) -> np.ndarray:
    matrix = np.identity(4)
    matrix[:3, 3] = _vec3(offset)
    return matrix


def _orientation(rotation: Sequence[float]) -> np.ndarray:
    rx, ry, rz = _vec3(rotation)
    return _rotation(rx, 0) @ _rotation(ry, 1) @ _rotation(rz, 2)


def make_model_matrix(entity: Entity) -> np.ndarray:
    return _orientation(entity.rotation) @ _translation(entity.position)


def make_view_matrix(entity: Entity) -> np.ndarray:
    return _orientation(entity.rotation) @ _translation(-_vec3(entity.position))


def make_projection_matrix(config: Any) -> np.ndarray:
    """Right-handed perspective projection with clip depth in [-1, 1]."""
    fov = math.radians(float(config.fov))
    aspect = float(config.window_x) / float(config.window_y)
    focal = 1.0 / math.tan(fov / 2.0)
    near, far = _NEAR_PLANE, _FAR_PLANE
    matrix = np.zeros((4, 4))
    matrix[0, 0] = focal / aspect
    matrix[1, 1] = focal
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix