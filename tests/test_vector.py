import math

import pytest
from webwater.core import Vec2, Vec3, Vec4


def test_arithmetic():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(4.0, 5.0, 6.0)

    assert a + b == Vec3(5.0, 7.0, 9.0)
    assert b - a == Vec3(3.0, 3.0, 3.0)
    assert a * 2.0 == Vec3(2.0, 4.0, 6.0)
    assert 2.0 * a == a * 2.0
    assert -a == Vec3(-1.0, -2.0, -3.0)
    assert a.dot(b) == 32.0

def test_lengths():
    assert Vec2(3.0, 4.0).length() == 5.0
    assert Vec3(2.0, 3.0, 6.0).length() == 7.0
    assert Vec4(1.0, 1.0, 1.0, 1.0).length() == 2.0
    assert Vec3(1.0, 2.0, 2.0).length_squared() == 9.0

def test_cross_is_right_handed():
    x = Vec3(1.0, 0.0, 0.0)
    y = Vec3(0.0, 1.0, 0.0)
    z = Vec3(0.0, 0.0, 1.0)

    assert x.cross(y) == z
    assert y.cross(z) == x
    assert z.cross(x) == y
    assert y.cross(x) == -z

def test_cross_formula():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-2.0, 0.5, 4.0)
    c = a.cross(b)

    assert c == Vec3(2.0*4.0 - 3.0*0.5, 3.0*-2.0 - 1.0*4.0, 1.0*0.5 - 2.0*-2.0)
    # perpendicular to both inputs
    assert abs(c.dot(a)) < 1e-9
    assert abs(c.dot(b)) < 1e-9

@pytest.mark.parametrize("v", [
    Vec2(3.0, -4.0),
    Vec3(0.001, 0.0, 0.0),
    Vec3(1e6, -2e6, 3.5),
    Vec4(1.0, 2.0, 3.0, 4.0),
])
def test_normalized_is_unit(v):
    assert abs(v.normalized().length() - 1.0) < 1e-5

def test_normalize_zero_returns_zero():
    assert Vec2(0.0, 0.0).normalized() == Vec2(0.0, 0.0)
    assert Vec3(0.0, 0.0, 0.0).normalized() == Vec3(0.0, 0.0, 0.0)
    assert Vec4(0.0, 0.0, 0.0, 0.0).normalized() == Vec4(0.0, 0.0, 0.0, 0.0)

def test_lerp_and_distance():
    a = Vec3(0.0, 0.0, 0.0)
    b = Vec3(10.0, 0.0, -4.0)

    assert a.lerp(b, 0.5) == Vec3(5.0, 0.0, -2.0)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0) == b
    assert Vec3(1.0, 1.0, 1.0).distance(Vec3(1.0, 4.0, 5.0)) == 5.0

def test_vec4_to_vec3_modes():
    v = Vec4(2.0, 4.0, 6.0, 2.0)

    # drop w
    assert v.xyz() == Vec3(2.0, 4.0, 6.0)
    # homogeneous divide
    assert v.to_vec3() == Vec3(1.0, 2.0, 3.0)

def test_vec4_to_vec3_zero_w_is_not_divided():
    v = Vec4(1.0, -2.0, 3.0, 0.0)
    p = v.to_vec3()

    assert p == Vec3(1.0, -2.0, 3.0)
    assert all(math.isfinite(c) for c in p.to_tuple())

def test_point_and_direction():
    assert Vec4.point(1.0, 2.0, 3.0).w == 1.0
    assert Vec4.direction(1.0, 2.0, 3.0).w == 0.0
    assert Vec3(1.0, 2.0, 3.0).extend(1.0) == Vec4.point(1.0, 2.0, 3.0)

def test_tuples():
    assert Vec3.from_tuple((1, 2, 3)).to_tuple() == (1, 2, 3)
    assert Vec2.from_tuple([0.5, 0.25]) == Vec2(0.5, 0.25)

def test_constants():
    assert Vec3.up() == Vec3(0.0, 1.0, 0.0)
    assert Vec3.forward() == Vec3(0.0, 0.0, -1.0)
    assert Vec3.right() == Vec3(1.0, 0.0, 0.0)
    assert Vec3.zero().length() == 0.0
