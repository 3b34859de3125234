"""Geometric primitives for surfaces and openings.

Loops are built point by point and then explicitly closed; closing is where
validation happens (enough points, planarity, non-zero area, no
self-intersection). Polygons wrap a closed outer loop plus at most one hole.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict

from simple_test_models.errors import GeometryError

# Absolute tolerance (meters) for coincidence and touching.
TOLERANCE = 1e-9
# Relative tolerance for area bookkeeping.
AREA_TOLERANCE = 1e-9


class Point3D(BaseModel):
    """3D point (meters). Also used as a free vector."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    def __add__(self, other: Point3D) -> Point3D:
        return Point3D(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def __sub__(self, other: Point3D) -> Point3D:
        return Point3D(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g})"

    def scale(self, factor: float) -> Point3D:
        return Point3D(x=self.x * factor, y=self.y * factor, z=self.z * factor)

    def dot(self, other: Point3D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Point3D) -> Point3D:
        return Point3D(
            x=self.y * other.z - self.z * other.y,
            y=self.z * other.x - self.x * other.z,
            z=self.x * other.y - self.y * other.x,
        )

    @property
    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def distance_to(self, other: Point3D) -> float:
        """Euclidean distance to another point."""
        return (self - other).length

    def rotate_z(self, angle_deg: float) -> Point3D:
        """Rotate counter-clockwise (seen from above) about the Z axis."""
        rad = math.radians(angle_deg)
        cos_a = math.cos(rad)
        sin_a = math.sin(rad)
        return Point3D(
            x=self.x * cos_a - self.y * sin_a,
            y=self.x * sin_a + self.y * cos_a,
            z=self.z,
        )


class Loop3D(BaseModel):
    """Ordered sequence of points forming a closed boundary.

    Loops are immutable: ``push()`` and ``close()`` return a new loop. The
    first vertex is not repeated at the end; ``close()`` validates the
    points and returns the closed loop, which accepts no more points.
    """

    model_config = ConfigDict(frozen=True)

    vertices: tuple[Point3D, ...] = ()
    closed: bool = False

    def push(self, point: Point3D) -> Loop3D:
        """Return a loop with ``point`` appended. Coincident consecutive vertices are rejected."""
        if self.closed:
            raise GeometryError("Cannot add a point to a closed loop", [point])
        if self.vertices and self.vertices[-1].distance_to(point) <= TOLERANCE:
            raise GeometryError(
                "Consecutive loop points coincide", [self.vertices[-1], point]
            )
        return Loop3D(vertices=(*self.vertices, point))

    def close(self) -> Loop3D:
        """Validate the points and return the closed loop."""
        if self.closed:
            raise GeometryError("Loop is already closed", self.vertices)
        vertices = self.vertices
        if len(vertices) > 3 and vertices[-1].distance_to(vertices[0]) <= TOLERANCE:
            vertices = vertices[:-1]
        loop = Loop3D(vertices=vertices)
        if len(vertices) < 3:
            raise GeometryError(
                f"A loop needs at least 3 points, got {len(vertices)}", vertices
            )
        # Scale-free: a square has area / perimeter² = 1/16.
        if loop.area <= AREA_TOLERANCE * loop.perimeter ** 2:
            raise GeometryError("Loop has zero area", vertices)

        normal = loop.normal
        origin = vertices[0]
        for v in vertices[1:]:
            if abs(normal.dot(v - origin)) > TOLERANCE * max(1.0, loop.perimeter):
                raise GeometryError("Loop points are not coplanar", vertices)

        if _self_intersects(loop.projected(normal)):
            raise GeometryError("Loop intersects itself", vertices)
        return Loop3D(vertices=vertices, closed=True)

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)

    @property
    def newell_vector(self) -> Point3D:
        """Un-normalized Newell normal; its length is twice the area."""
        nx = ny = nz = 0.0
        n = len(self.vertices)
        for i in range(n):
            v1 = self.vertices[i]
            v2 = self.vertices[(i + 1) % n]
            nx += (v1.y - v2.y) * (v1.z + v2.z)
            ny += (v1.z - v2.z) * (v1.x + v2.x)
            nz += (v1.x - v2.x) * (v1.y + v2.y)
        return Point3D(x=nx, y=ny, z=nz)

    @property
    def normal(self) -> Point3D:
        """Unit normal, following the right-hand rule on vertex order."""
        n = self.newell_vector
        length = n.length
        if length <= 2.0 * AREA_TOLERANCE * self.perimeter ** 2:
            raise GeometryError("Cannot compute the normal of a degenerate loop", self.vertices)
        return n.scale(1.0 / length)

    @property
    def area(self) -> float:
        """Enclosed area (m²). Only meaningful for planar, simple loops."""
        if len(self.vertices) < 3:
            return 0.0
        return self.newell_vector.length / 2.0

    @property
    def perimeter(self) -> float:
        n = len(self.vertices)
        return sum(
            self.vertices[i].distance_to(self.vertices[(i + 1) % n]) for i in range(n)
        )

    @property
    def centroid(self) -> Point3D:
        """Vertex average."""
        n = len(self.vertices)
        return Point3D(
            x=sum(v.x for v in self.vertices) / n,
            y=sum(v.y for v in self.vertices) / n,
            z=sum(v.z for v in self.vertices) / n,
        )

    def projected(self, normal: Point3D | None = None) -> list[tuple[float, float]]:
        """Project the vertices onto the coordinate plane most aligned with the loop."""
        if normal is None:
            normal = self.normal
        return [_project(v, normal) for v in self.vertices]

    def contains_point(self, point: Point3D) -> bool:
        """True if the point is strictly inside, farther than TOLERANCE from every edge."""
        normal = self.normal
        poly = self.projected(normal)
        p = _project(point, normal)
        n = len(poly)
        for i in range(n):
            if _distance_to_segment(p, poly[i], poly[(i + 1) % n]) <= TOLERANCE:
                return False
        return _point_in_polygon(p, poly)


class Polygon3D(BaseModel):
    """A closed outer loop with an optional hole.

    Use ``Polygon3D.from_loop`` to build one; it refuses open loops.
    Cutting a hole returns a new polygon and leaves this one untouched.
    """

    model_config = ConfigDict(frozen=True)

    outer: Loop3D
    inner: Loop3D | None = None

    @classmethod
    def from_loop(cls, loop: Loop3D) -> Polygon3D:
        if not loop.closed:
            raise GeometryError("Polygon boundary must be a closed loop", loop.vertices)
        return cls(outer=loop)

    @property
    def area(self) -> float:
        """Net area: outer loop minus the hole (m²)."""
        hole = self.inner.area if self.inner is not None else 0.0
        return self.outer.area - hole

    @property
    def normal(self) -> Point3D:
        return self.outer.normal

    @property
    def has_hole(self) -> bool:
        return self.inner is not None

    def cut_hole(self, hole: Loop3D) -> Polygon3D:
        """Return a copy of this polygon with ``hole`` subtracted.

        The hole must be closed, lie in the same plane, and sit strictly
        inside the outer loop without touching or crossing it.
        """
        if self.inner is not None:
            raise GeometryError("Polygon already has a hole", self.inner.vertices)
        if not hole.closed:
            raise GeometryError("Hole must be a closed loop", hole.vertices)

        normal = self.outer.normal
        origin = self.outer.vertices[0]
        for v in hole.vertices:
            if abs(normal.dot(v - origin)) > TOLERANCE * max(1.0, self.outer.perimeter):
                raise GeometryError("Hole is not coplanar with the polygon", hole.vertices)

        for v in hole.vertices:
            if not self.outer.contains_point(v):
                raise GeometryError(
                    f"Hole point {v} touches or lies outside the polygon boundary",
                    hole.vertices,
                )

        outer_2d = self.outer.projected(normal)
        hole_2d = hole.projected(normal)
        for i in range(len(hole_2d)):
            a, b = hole_2d[i], hole_2d[(i + 1) % len(hole_2d)]
            for j in range(len(outer_2d)):
                c, d = outer_2d[j], outer_2d[(j + 1) % len(outer_2d)]
                if _segments_intersect(a, b, c, d):
                    raise GeometryError("Hole crosses the polygon boundary", hole.vertices)

        return Polygon3D(outer=self.outer, inner=hole)


# ── 2D helpers ────────────────────────────────────────────────────────


def _project(point: Point3D, normal: Point3D) -> tuple[float, float]:
    """Drop the coordinate along which the normal is largest."""
    ax, ay, az = abs(normal.x), abs(normal.y), abs(normal.z)
    if ax >= ay and ax >= az:
        return (point.y, point.z)
    if ay >= az:
        return (point.x, point.z)
    return (point.x, point.y)


def _orient(a: tuple[float, float], b: tuple[float, float], c: tuple[float, float]) -> float:
    """Signed distance (meters) of ``c`` from the line through ``a`` and ``b``."""
    length = math.hypot(b[0] - a[0], b[1] - a[1])
    if length == 0.0:
        return math.hypot(c[0] - a[0], c[1] - a[1])
    return ((b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])) / length


def _on_segment(a: tuple[float, float], b: tuple[float, float], p: tuple[float, float]) -> bool:
    return (
        min(a[0], b[0]) - TOLERANCE <= p[0] <= max(a[0], b[0]) + TOLERANCE
        and min(a[1], b[1]) - TOLERANCE <= p[1] <= max(a[1], b[1]) + TOLERANCE
    )


def _segments_intersect(
    p1: tuple[float, float],
    p2: tuple[float, float],
    q1: tuple[float, float],
    q2: tuple[float, float],
) -> bool:
    """True if the segments cross or touch."""
    d1 = _orient(q1, q2, p1)
    d2 = _orient(q1, q2, p2)
    d3 = _orient(p1, p2, q1)
    d4 = _orient(p1, p2, q2)

    if ((d1 > TOLERANCE and d2 < -TOLERANCE) or (d1 < -TOLERANCE and d2 > TOLERANCE)) and (
        (d3 > TOLERANCE and d4 < -TOLERANCE) or (d3 < -TOLERANCE and d4 > TOLERANCE)
    ):
        return True

    return (
        (abs(d1) <= TOLERANCE and _on_segment(q1, q2, p1))
        or (abs(d2) <= TOLERANCE and _on_segment(q1, q2, p2))
        or (abs(d3) <= TOLERANCE and _on_segment(p1, p2, q1))
        or (abs(d4) <= TOLERANCE and _on_segment(p1, p2, q2))
    )


def _self_intersects(poly: list[tuple[float, float]]) -> bool:
    n = len(poly)
    edges = [(poly[i], poly[(i + 1) % n]) for i in range(n)]
    for i in range(n):
        a, b = edges[i]
        # Adjacent edges only share a vertex, unless one folds back onto the other.
        c = edges[(i + 1) % n][1]
        ab = (b[0] - a[0], b[1] - a[1])
        bc = (c[0] - b[0], c[1] - b[1])
        if abs(_orient(a, b, c)) <= TOLERANCE and ab[0] * bc[0] + ab[1] * bc[1] < 0:
            return True
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            if _segments_intersect(a, b, *edges[j]):
                return True
    return False


def _distance_to_segment(
    p: tuple[float, float], a: tuple[float, float], b: tuple[float, float]
) -> float:
    dx, dy = b[0] - a[0], b[1] - a[1]
    seg_len_sq = dx * dx + dy * dy
    if seg_len_sq == 0.0:
        return math.hypot(p[0] - a[0], p[1] - a[1])
    t = max(0.0, min(1.0, ((p[0] - a[0]) * dx + (p[1] - a[1]) * dy) / seg_len_sq))
    return math.hypot(p[0] - (a[0] + t * dx), p[1] - (a[1] + t * dy))


def _point_in_polygon(p: tuple[float, float], poly: list[tuple[float, float]]) -> bool:
    """Ray casting; boundary points are handled by the caller."""
    x, y = p
    inside = False
    n = len(poly)
    for i in range(n):
        x1, y1 = poly[i]
        x2, y2 = poly[(i + 1) % n]
        if (y1 > y) != (y2 > y):
            x_cross = x1 + (y - y1) * (x2 - x1) / (y2 - y1)
            if x < x_cross:
                inside = not inside
    return inside
