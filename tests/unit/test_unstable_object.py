from __future__ import annotations

import pytest

from common.unstable import (
    HypixelError,
    PropertyTypeError,
    UnstableHypixelObject,
    get_array_property,
    resolve_property,
)


def _payload():
    return {
        "displayname": "Notch",
        "networkExp": 1250.0,
        "karma": 42,
        "online": True,
        "stats": {
            "Bedwars": {"packages": ["a", "b"], "coins": 10},
            "Walls": None,
        },
        "achievements": [],
    }


def test_dotted_path_resolution():
    obj = UnstableHypixelObject(_payload())
    assert obj.get_property("stats.Bedwars.coins") == 10
    assert obj.get_property("stats.Missing.coins") is None
    assert obj.get_property("displayname.length", "n/a") == "n/a"  # parent not an object
    assert obj.has_property("stats.Bedwars") is True
    assert obj.has_property("stats.Walls") is False  # null counts as absent


def test_array_property_missing_null_and_present():
    obj = UnstableHypixelObject(_payload())
    assert obj.get_array_property("stats.Bedwars.packages") == ["a", "b"]
    assert obj.get_array_property("nope") == []
    assert obj.get_array_property("stats.Walls") == []
    assert obj.get_array_property("achievements") == []


def test_array_property_wrong_type_raises():
    obj = UnstableHypixelObject(_payload())
    with pytest.raises(PropertyTypeError) as ei:
        obj.get_array_property("displayname")
    err = ei.value
    assert err.name == "displayname"
    assert "array" in str(err) and "string" in str(err)
    # Typed error also fits generic handlers
    assert isinstance(err, HypixelError)
    assert isinstance(err, TypeError)


def test_object_property():
    obj = UnstableHypixelObject(_payload())
    assert obj.get_object_property("stats.Bedwars")["coins"] == 10
    assert obj.get_object_property("stats.Walls") == {}
    with pytest.raises(PropertyTypeError):
        obj.get_object_property("karma")


def test_scalar_getters():
    obj = UnstableHypixelObject(_payload())
    assert obj.get_string_property("displayname") == "Notch"
    assert obj.get_string_property("rank", "NONE") == "NONE"
    assert obj.get_int_property("karma") == 42
    assert obj.get_int_property("networkExp") == 1250
    assert obj.get_int_property("missing", 7) == 7
    assert obj.get_float_property("karma") == 42.0
    assert obj.get_bool_property("online") is True
    assert obj.get_bool_property("missing") is False


def test_scalar_getters_reject_wrong_types():
    obj = UnstableHypixelObject({"flag": True, "ratio": 1.5, "name": "x"})
    with pytest.raises(PropertyTypeError):
        obj.get_int_property("flag")  # booleans are not numbers
    with pytest.raises(PropertyTypeError):
        obj.get_float_property("flag")
    with pytest.raises(PropertyTypeError):
        obj.get_int_property("ratio")
    with pytest.raises(PropertyTypeError):
        obj.get_bool_property("name")
    with pytest.raises(PropertyTypeError):
        obj.get_string_property("ratio")


def test_module_level_helpers_work_on_raw_values():
    raw = {"packages": ["x"]}
    assert get_array_property(raw, "packages") == ["x"]
    assert resolve_property(raw, "packages.0") is None
    assert get_array_property([1, 2], "packages") == []  # non-object root


def test_empty_property_name_rejected():
    with pytest.raises(ValueError):
        UnstableHypixelObject({}).get_property("")
