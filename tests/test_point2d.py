from mobagen.point2d import Point2D


def test_direction_constants():
    assert Point2D.UP == Point2D(0, -1)
    assert Point2D.DOWN == Point2D(0, 1)
    assert Point2D.LEFT == Point2D(-1, 0)
    assert Point2D.RIGHT == Point2D(1, 0)
    assert Point2D.INFINITE == Point2D(2147483647, 2147483647)


def test_add_and_sub_round_trip():
    a = Point2D(3, -4)
    b = Point2D(-7, 2)
    assert (a + b) - b == a
    assert a - a == Point2D()


def test_str_format():
    assert str(Point2D(3, -4)) == "{3, -4}"


def test_neighbour_helpers():
    p = Point2D(2, 5)
    assert p.up() == p + Point2D.UP
    assert p.down() == p + Point2D.DOWN
    assert p.left() == p + Point2D.LEFT
    assert p.right() == p + Point2D.RIGHT
    assert p.up().down() == p
    assert p.left().right() == p


def test_is_on_border():
    assert Point2D(5, 0).is_on_border(5)
    assert Point2D(0, -5).is_on_border(5)
    assert not Point2D(4, -4).is_on_border(5)


def test_hashable_and_usable_in_sets():
    points = {Point2D(1, 2), Point2D(1, 2), Point2D(2, 1)}
    assert len(points) == 2
    assert Point2D(1, 2) in points