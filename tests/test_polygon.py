import math
from types import SimpleNamespace

from mobagen.polygon import Polygon, circle, draw_line, hexagon, square
from mobagen.transform import Transform
from mobagen.vector2 import Vector2


class RecordingRenderer:
    def __init__(self):
        self.colors = []
        self.lines = []

    def set_draw_color(self, r, g, b, a):
        self.colors.append((r, g, b, a))

    def draw_line(self, x1, y1, x2, y2):
        self.lines.append((x1, y1, x2, y2))


def test_shapes_have_unit_points():
    for poly, count in ((square(), 4), (hexagon(), 6), (circle(12), 12)):
        assert len(poly.points) == count
        assert all(math.isclose(p.magnitude(), 1.0) for p in poly.points)


def test_circle_and_hexagon_start_at_up():
    assert circle(5).points[0] == Vector2.up()
    assert hexagon().points[0] == Vector2.up()
    assert hexagon().points[3] == Vector2.down()


def test_drawable_points_translation_only():
    poly = Polygon([Vector2(1, 0), Vector2(0, 2)])
    offset = Vector2(10, 20)
    t = Transform(offset, Vector2.identity(), Vector2.up())
    assert poly.drawable_points(t) == [p + offset for p in poly.points]


def test_drawable_points_scale_and_rotation():
    poly = square()
    t = Transform(Vector2.zero(), Vector2(3, 3), Vector2.right())
    result = poly.drawable_points(t)
    assert all(math.isclose(p.magnitude(), 3.0) for p in result)
    assert result[0] == (poly.points[0] * 3).rotate(Vector2.right().angle_degree())


def test_draw_closes_the_outline():
    renderer = RecordingRenderer()
    color = SimpleNamespace(r=10, g=20, b=30)
    poly = Polygon([Vector2(0, 0), Vector2(5, 0), Vector2(5, 5)])
    t = Transform(Vector2.zero(), Vector2.identity(), Vector2.up())
    poly.draw(renderer, t, color)
    assert renderer.colors == [(10, 20, 30, 255)]
    assert len(renderer.lines) == 3
    assert renderer.lines[-1][2:] == renderer.lines[0][:2]


def test_draw_line_truncates_to_ints():
    renderer = RecordingRenderer()
    draw_line(renderer, Vector2(1.9, 2.2), Vector2(7.5, 8.1), SimpleNamespace(r=1, g=2, b=3))
    assert renderer.lines == [(1, 2, 7, 8)]
    assert renderer.colors == [(1, 2, 3, 255)]