"""Simple outline polygons and their drawing onto a line renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from mobagen.transform import Transform
from mobagen.vector2 import Vector2

ALPHA_OPAQUE = 255


class Renderer(Protocol):
    def set_draw_color(self, r: int, g: int, b: int, a: int) -> None: ...

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None: ...


class RGB(Protocol):
    r: int
    g: int
    b: int


@dataclass
class Polygon:
    """A closed outline given by its points in local space."""

    points: list[Vector2] = field(default_factory=list)

    def drawable_points(self, transform: Transform) -> list[Vector2]:
        """Points scaled, rotated and moved by ``transform``."""
        angle = transform.rotation.angle_degree()
        return [
            Vector2(transform.scale.x * p.x, transform.scale.y * p.y).rotate(angle) + transform.position
            for p in self.points
        ]

    def draw(self, renderer: Renderer, transform: Transform, color: RGB) -> None:
        """Draw the closed outline, joining the last point back to the first."""
        renderer.set_draw_color(color.r, color.g, color.b, ALPHA_OPAQUE)
        points = self.drawable_points(transform)
        for start, end in zip(points, points[1:] + points[:1]):
            renderer.draw_line(int(start.x), int(start.y), int(end.x), int(end.y))


def draw_line(renderer: Renderer, v1: Vector2, v2: Vector2, color: RGB) -> None:
    """Draw a single line segment in ``color``."""
    renderer.set_draw_color(color.r, color.g, color.b, ALPHA_OPAQUE)
    renderer.draw_line(int(v1.x), int(v1.y), int(v2.x), int(v2.y))


def circle(sample: int) -> Polygon:
    """A unit circle approximated by ``sample`` points, starting at up."""
    return Polygon([Vector2.up().rotate(360.0 * i / sample) for i in range(sample)])


def square() -> Polygon:
    return Polygon([Vector2.up().rotate(angle) for angle in (45, 135, 225, 315)])


def hexagon() -> Polygon:
    return Polygon([Vector2.up().rotate(angle) for angle in (0, 60, 120, 180, 240, 300)])