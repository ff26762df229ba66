from mobagen.transform import Transform
from mobagen.vector2 import Vector2


def test_defaults():
    t = Transform()
    assert t.position == Vector2.zero()
    assert t.scale == Vector2.identity()
    assert t.rotation == Vector2.zero()


def test_positional_order_is_position_scale_rotation():
    pos = Vector2(1, 2)
    scale = Vector2(3, 4)
    rot = Vector2.up()
    t = Transform(pos, scale, rot)
    assert t.position == pos
    assert t.scale == scale
    assert t.rotation == rot


def test_fields_are_mutable():
    t = Transform()
    t.scale = t.scale * 2.0
    assert t.scale == Vector2.identity() * 2.0
    assert Transform().scale == Vector2.identity()