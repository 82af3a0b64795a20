# -*- coding: utf-8 -*-
import copy
import warnings

import numpy as np
import pytest

from gfxmaths import Vec2, Vec3, Vec4


def test_vec3_ops():
    a = Vec3(1, 2, 3)
    b = Vec3(4, -1, 0)
    assert (a + b).as_np().tolist() == [5, 1, 3]
    assert (a - b).as_np().tolist() == [-3, 3, 3]
    assert (a * 2).as_np().tolist() == [2, 4, 6]
    assert (a * b).as_np().tolist() == [4, -2, 0]
    assert (-a).as_np().tolist() == [-1, -2, -3]


def test_vec4_operators():
    a = Vec4(1.0, 2.0, 3.0, 4.0)
    b = Vec4(3.0, 4.0, 5.0, 6.0)

    assert -a == Vec4(-1.0, -2.0, -3.0, -4.0)
    assert a.sqr_magnitude() == 30.0
    assert a.magnitude() == pytest.approx(np.sqrt(30.0), rel=1e-6)
    assert a.dot(b) == 50.0

    assert a + b == Vec4(4.0, 6.0, 8.0, 10.0)
    assert a - b == Vec4(-2.0, -2.0, -2.0, -2.0)
    assert a * b == Vec4(3.0, 8.0, 15.0, 24.0)
    assert np.allclose((a / b).as_np(), [1.0 / 3.0, 0.5, 3.0 / 5.0, 4.0 / 6.0])

    assert a / 2.0 == Vec4(0.5, 1.0, 1.5, 2.0)
    assert np.allclose((2.0 / a).as_np(), [2.0, 1.0, 2.0 / 3.0, 0.5])


def test_scalar_multiply_is_commutative(vector):
    assert vector * 2.0 == 2.0 * vector
    assert vector * 3 == 3 * vector


def test_scalar_divided_by_vector_is_reciprocal():
    assert 2.0 / Vec3(1, 2, 4) == Vec3(2.0, 1.0, 0.5)
    v = Vec2(4, 8)
    assert (1.0 / v).x == 1.0 / v.x
    assert (1.0 / v).y == 1.0 / v.y


def test_in_place_operators_mutate_receiver():
    a = Vec4(1.0, 2.0, 3.0, 4.0)
    b = Vec4(3.0, 4.0, 5.0, 6.0)

    c = a.copy()
    alias = c
    c += b
    assert c is alias
    assert c == a + b

    c = a.copy()
    c -= b
    assert c == a - b

    c = a.copy()
    c *= b
    assert c == a * b

    c = a.copy()
    c /= b
    assert c == a / b

    c = a.copy()
    c *= 2.0
    assert c == a * 2.0

    c = a.copy()
    c /= 2.0
    assert c == a / 2.0

    # исходный вектор не тронут
    assert a == Vec4(1.0, 2.0, 3.0, 4.0)


def test_normalize(vector):
    expected = vector / vector.magnitude()
    assert vector.normalized() == expected
    assert vector.normalized().magnitude() == pytest.approx(1.0, abs=1e-6)

    same = vector.normalize()
    assert same is vector
    assert vector == expected


def test_normalize_zero_vector_gives_nan_without_warning():
    v = Vec3.zero()
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        v.normalize()
    assert all(np.isnan(c) for c in v)


def test_division_by_zero_is_ieee():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        res = Vec2(1.0, -1.0) / 0.0
        inv = 1.0 / Vec2(0.0, 2.0)
    assert res.x == np.inf and res.y == -np.inf
    assert inv.x == np.inf and inv.y == 0.5


def test_magnitude_of_zero_vector():
    assert Vec4.zero().magnitude() == 0.0
    assert Vec2(3, 4).magnitude() == 5.0
    assert Vec2(3, 4).sqr_magnitude() == 25.0


def test_cross_is_right_handed():
    x, y, z = Vec3(1, 0, 0), Vec3(0, 1, 0), Vec3(0, 0, 1)
    assert x.cross(y) == z
    assert y.cross(z) == x
    assert z.cross(x) == y
    assert Vec3(1, 2, 3).cross(Vec3(4, 5, 6)) == Vec3(-3, 6, -3)


def test_extend():
    assert Vec2(1, 2).extend(3) == Vec3(1, 2, 3)
    assert Vec3(1, 2, 3).extend(1) == Vec4(1, 2, 3, 1)


def test_constants_and_factories():
    assert Vec2.ZERO == Vec2(0, 0)
    assert Vec3.ONE == Vec3(1, 1, 1)
    assert Vec4.one() == Vec4.ONE
    assert Vec3() == Vec3.ZERO


def test_constants_are_frozen():
    with pytest.raises(ValueError):
        Vec3.ZERO.x = 1.0
    v = Vec3.ZERO.copy()
    v += Vec3.ONE
    assert v == Vec3.ONE
    assert Vec3.ZERO == Vec3(0, 0, 0)


def test_array_conversions_keep_order():
    v = Vec4.from_array([1, 2, 3, 4])
    assert v == Vec4(1, 2, 3, 4)
    arr = v.to_array()
    assert arr.dtype == np.float32
    assert arr.tolist() == [1, 2, 3, 4]
    assert v.to_tuple() == (1.0, 2.0, 3.0, 4.0)
    assert list(Vec3(7, 8, 9)) == [7.0, 8.0, 9.0]
    assert Vec2(5, 6)[1] == 6.0
    assert len(Vec3()) == 3

    # массив – копия
    arr[0] = 100
    assert v.x == 1.0


def test_from_array_wrong_length():
    with pytest.raises(ValueError):
        Vec3.from_array([1, 2])


def test_component_setters_and_float32_storage():
    v = Vec3()
    v.x = 1.5
    v.z = 0.1
    assert v.x == 1.5
    assert v.z == float(np.float32(0.1))


def test_copy_is_independent():
    a = Vec2(1, 2)
    b = copy.copy(a)
    c = copy.deepcopy(a)
    b.x = 10
    c.y = 20
    assert a == Vec2(1, 2)


def test_mixed_types_are_rejected():
    with pytest.raises(TypeError):
        Vec2(1, 2) + Vec3(1, 2, 3)
    with pytest.raises(TypeError):
        Vec3(1, 2, 3) * "2"
    assert Vec2(1, 2) != Vec3(1, 2, 0)


def test_nan_is_not_equal_to_itself():
    v = Vec2(np.nan, 0)
    assert v != v.copy()


def test_repr():
    assert repr(Vec3(1, 2, 3)) == "Vec3(1.000, 2.000, 3.000)"
