import pytest

from structfactory import (
    FactoryOptions,
    MemberIndexError,
    MemberNameError,
    MemberTypeError,
    RecordRegistry,
    create,
)


def _point():
    return create("Point", "x", "y", registry=RecordRegistry())


def test_get_by_index_and_name():
    p = _point()(1, 2)

    assert p.get(0) == 1
    assert p.get("x") == 1
    assert p[1] == 2
    assert p["y"] == 2
    assert p.x == 1
    assert p.y == 2


def test_negative_index_counts_from_the_end():
    p = _point()(1, 2)

    assert p[-1] == 2
    assert p[-2] == 1


def test_index_out_of_range_raises():
    p = _point()(1, 2)

    with pytest.raises(MemberIndexError, match=r"offset 2 is too large for factory\(size:2\)"):
        p.get(2)

    with pytest.raises(MemberIndexError, match=r"offset -3 is too small for factory\(size:2\)"):
        p.get(-3)


def test_member_index_error_is_an_index_error():
    p = _point()(1, 2)

    with pytest.raises(IndexError):
        p[5]


def test_set_by_out_of_range_index_leaves_state_unchanged():
    p = _point()(1, 2)

    with pytest.raises(MemberIndexError):
        p.set(2, 99)

    assert p.to_list() == [1, 2]


def test_set_by_name_then_read_by_index():
    p = _point()(1, 2)

    p.set("x", 5)
    assert p.get(0) == 5

    p[1] = 7
    assert p.y == 7

    p.x = 9
    assert p["x"] == 9


def test_unknown_name_raises_name_error():
    p = _point()(1, 2)

    with pytest.raises(MemberNameError, match="no member 'z' in factory"):
        p.get("z")

    with pytest.raises(MemberNameError):
        p.set("z", 1)

    with pytest.raises(NameError):
        p["z"]


@pytest.mark.parametrize("key", [1.0, None, True, (0,), slice(0, 1)])
def test_other_key_types_raise_type_error(key):
    p = _point()(1, 2)

    with pytest.raises(MemberTypeError, match="into Integer"):
        p.get(key)

    with pytest.raises(TypeError):
        p.set(key, 0)

    assert p.to_list() == [1, 2]


def test_lazy_population_hides_unsupplied_fields():
    Point3 = create("x", "y", "z", options=FactoryOptions(fill_missing=False))
    p = Point3(1)

    assert p.size() == 1
    assert p.to_list() == [1]
    assert p.to_dict() == {"x": 1}

    with pytest.raises(MemberIndexError, match=r"size:1"):
        p.get(1)

    with pytest.raises(MemberNameError):
        p.get("y")


def test_lazy_population_write_by_name_populates_slot():
    Point3 = create("x", "y", "z", options=FactoryOptions(fill_missing=False))
    p = Point3(1)

    with pytest.raises(MemberIndexError):
        p.set(1, "nope")

    p.set("z", 3)
    assert p.size() == 2
    assert p.get(1) == 3
    assert p.to_dict() == {"x": 1, "z": 3}

    p.y = 2
    assert p.to_list() == [1, 2, 3]
    assert p.get(1) == 2


def test_lazy_population_with_keywords():
    Point3 = create("x", "y", "z", options=FactoryOptions(fill_missing=False))
    p = Point3(z=3)

    assert p.to_dict() == {"z": 3}
    assert p[0] == 3
