# -*- coding: utf-8 -*-
import json

import pytest

from gfxmaths import Color, Mat4, Quaternion, Vec2, Vec3, Vec4
from gfxmaths.utils.config import config

pytestmark = pytest.mark.skipif(not config["serde"], reason="serde disabled")


def test_field_names():
    assert Vec2(1, 2).to_dict() == {"x": 1.0, "y": 2.0}
    assert Vec4(1, 2, 3, 4).to_dict() == {"x": 1.0, "y": 2.0, "z": 3.0, "w": 4.0}
    assert Quaternion().to_dict() == {"x": 0.0, "y": 0.0, "z": 0.0, "w": 1.0}
    assert list(Color.RED.to_dict()) == ["r", "g", "b", "a"]


@pytest.mark.parametrize("value", [
    Vec2(1, 2), Vec3(1, 2, 3), Vec4(1, 2, 3, 4),
    Quaternion(0.5, 0.5, 0.5, 0.5), Color(0.25, 0.5, 0.75, 1.0),
    Mat4.translate(Vec3(1, 2, 3)),
])
def test_json_round_trip(value):
    data = json.loads(json.dumps(value.to_dict()))
    assert type(value).from_dict(data) == value


def test_mat4_dict_is_flat_values():
    d = Mat4().to_dict()
    assert list(d) == ["values"]
    assert len(d["values"]) == 16


def test_missing_field():
    with pytest.raises(KeyError):
        Vec3.from_dict({"x": 1, "y": 2})


def test_serde_switch_off(run_with_features):
    out = run_with_features("-serde", "from gfxmaths import Vec3, Mat4; print(hasattr(Vec3, 'to_dict'), hasattr(Mat4, 'from_dict'))")
    assert out == "False False"
