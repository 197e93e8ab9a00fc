import pytest

from dedekind.constructors import (
    construct_alternating,
    construct_cyclic,
    construct_dihedral,
    construct_quaternion8,
    construct_symmetric,
    group_from_spec,
)
from dedekind.errors import InvalidArgument, ResourceExceeded
from dedekind.subgroups import (
    cyclic_subgroup,
    cyclic_subgroups,
    enumerate_subgroups,
    generated_subgroup,
    is_subgroup,
)


@pytest.mark.parametrize(
    "spec, expected",
    [
        ("C1", 1),
        ("C5", 2),
        ("C6", 4),
        ("C12", 6),
        ("C2xC2", 5),
        ("C2xC2xC2", 16),
        ("Q8", 6),
        ("S3", 6),
        ("D8", 10),
        ("A4", 10),
        ("S4", 30),
    ],
)
def test_subgroup_counts(spec, expected) -> None:
    assert len(enumerate_subgroups(group_from_spec(spec))) == expected


def test_enumeration_is_sorted_and_duplicate_free() -> None:
    group = construct_dihedral(12)
    subs = enumerate_subgroups(group)
    assert len(set(subs)) == len(subs)
    assert subs[0] == frozenset([0])
    assert subs[-1] == frozenset(group.elements())
    sizes = [len(s) for s in subs]
    assert sizes == sorted(sizes)
    for sub in subs:
        assert is_subgroup(group, sub)


@pytest.mark.parametrize("spec", ["Q8", "D8", "A4", "Q8xC3", "S3xC2"])
def test_lagrange(spec) -> None:
    group = group_from_spec(spec)
    for sub in enumerate_subgroups(group):
        assert group.order % len(sub) == 0


def test_generated_subgroup_in_c12() -> None:
    c12 = construct_cyclic(12)
    assert generated_subgroup(c12, [8]) == frozenset([0, 4, 8])
    assert generated_subgroup(c12, [4, 6]) == frozenset([0, 2, 4, 6, 8, 10])
    assert generated_subgroup(c12, []) == frozenset([0])


def test_generated_subgroup_s4_is_whole_group() -> None:
    s4 = construct_symmetric(4)
    a4 = construct_alternating(4)
    swap = s4.index_of([1, 0, 2, 3])
    cycle = s4.index_of([1, 2, 3, 0])
    assert len(generated_subgroup(s4, [swap, cycle])) == 24
    assert len(generated_subgroup(s4, [cycle])) == 4
    assert len(generated_subgroup(a4, [a4.index_of([1, 2, 0, 3])])) == 3


def test_cyclic_subgroups_of_quaternion() -> None:
    q8 = construct_quaternion8()
    cyclics = cyclic_subgroups(q8)
    assert sorted(len(s) for s in cyclics) == [1, 2, 4, 4, 4]
    for sub, g in cyclics.items():
        assert cyclic_subgroup(q8, g) == sub


def test_is_subgroup() -> None:
    q8 = construct_quaternion8()
    assert is_subgroup(q8, [0, 1])
    assert is_subgroup(q8, [0, 1, 2, 3])
    assert not is_subgroup(q8, [0, 2])
    assert not is_subgroup(q8, [1])


def test_subgroup_count_limit() -> None:
    with pytest.raises(ResourceExceeded) as excinfo:
        enumerate_subgroups(group_from_spec("C2xC2xC2"), max_subgroups=3)
    assert excinfo.value.kind == "subgroups"
    assert excinfo.value.limit == 3
    assert len(enumerate_subgroups(construct_cyclic(6), max_subgroups=4)) == 4


def test_order_limit() -> None:
    with pytest.raises(ResourceExceeded) as excinfo:
        enumerate_subgroups(construct_cyclic(10), max_order=5)
    assert excinfo.value.kind == "order"


def test_limits_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("DEDEKIND_MAX_SUBGROUPS", "2")
    with pytest.raises(ResourceExceeded):
        enumerate_subgroups(construct_cyclic(6))
    assert len(enumerate_subgroups(construct_cyclic(6), max_subgroups=10)) == 4
    monkeypatch.setenv("DEDEKIND_MAX_SUBGROUPS", "many")
    with pytest.raises(InvalidArgument):
        enumerate_subgroups(construct_cyclic(6))
