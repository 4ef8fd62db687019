from mobagen.transform import Transform
from mobagen.vector2 import Vector2


def test_defaults():
    t = Transform()
    assert t.position == Vector2.zero()
    assert t.scale == Vector2.identity()
    assert t.rotation == Vector2.zero()


def test_argument_order_and_independence():
    t = Transform(Vector2(1, 2), Vector2(3, 4), Vector2.up())
    assert t.position == Vector2(1, 2)
    assert t.scale == Vector2(3, 4)
    assert t.rotation == Vector2.up()
    other = Transform()
    other.scale = other.scale * 2
    assert Transform().scale == Vector2.identity()