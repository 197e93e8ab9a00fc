import pytest

from dedekind.constructors import (
    construct_cyclic,
    construct_quaternion8,
    construct_symmetric,
    group_from_spec,
)
from dedekind.errors import InvalidArgument
from dedekind.group import subgroup_as_group
from dedekind.invariants import (
    abelian_invariants,
    center,
    center_index,
    commutator_subgroup,
    derived_length,
    derived_series,
    element_order,
    exponent,
    nilpotency_class,
    order_statistics,
    power,
    upper_central_series,
)
from dedekind.normality import is_normal

SAMPLE_SPECS = ["C1", "C6", "Q8", "S3", "D8", "A4", "Dic3", "Q8xC2", "S3xC3"]


def test_power_and_element_order() -> None:
    q8 = construct_quaternion8()
    assert power(q8, 2, 0) == 0
    assert power(q8, 2, 2) == 1
    assert power(q8, 2, 4) == 0
    assert power(q8, 2, -1) == q8.inv(2)
    assert [element_order(q8, x) for x in q8.elements()] == [1, 2, 4, 4, 4, 4, 4, 4]
    assert order_statistics(q8) == {1: 1, 2: 1, 4: 6}


def test_center_of_quaternion() -> None:
    q8 = construct_quaternion8()
    assert center(q8) == frozenset([0, 1])
    assert center_index(q8) == 4


@pytest.mark.parametrize("spec", SAMPLE_SPECS)
def test_center_is_normal_and_abelian(spec) -> None:
    group = group_from_spec(spec)
    z = center(group)
    assert is_normal(group, z)
    assert subgroup_as_group(group, z).is_abelian


@pytest.mark.parametrize("spec", SAMPLE_SPECS)
def test_commutator_subgroup_is_normal(spec) -> None:
    group = group_from_spec(spec)
    assert is_normal(group, commutator_subgroup(group))


def test_commutator_subgroups() -> None:
    assert commutator_subgroup(construct_quaternion8()) == frozenset([0, 1])
    assert len(commutator_subgroup(construct_symmetric(3))) == 3
    assert len(commutator_subgroup(group_from_spec("A4"))) == 4
    assert commutator_subgroup(construct_cyclic(7)) == frozenset([0])


@pytest.mark.parametrize(
    "spec, expected",
    [("C1", 0), ("C5", 1), ("Q8", 2), ("S3", 2), ("A4", 2), ("S4", 3), ("A5", None)],
)
def test_derived_length(spec, expected) -> None:
    assert derived_length(group_from_spec(spec)) == expected


def test_derived_series_of_s4() -> None:
    series = derived_series(construct_symmetric(4))
    assert [len(s) for s in series] == [24, 12, 4, 1]


@pytest.mark.parametrize(
    "spec, expected",
    [("C1", 0), ("C5", 1), ("Q8", 2), ("D8", 2), ("Q16", 3), ("Q8xC3", 2), ("S3", None)],
)
def test_nilpotency_class(spec, expected) -> None:
    assert nilpotency_class(group_from_spec(spec)) == expected


def test_upper_central_series_of_d16() -> None:
    series = upper_central_series(group_from_spec("D16"))
    assert [len(s) for s in series] == [1, 2, 4, 16]


@pytest.mark.parametrize(
    "spec, expected",
    [("C1", 1), ("C5", 5), ("Q8", 4), ("Q8xC3", 12), ("S3", 6), ("C2xC2", 2)],
)
def test_exponent(spec, expected) -> None:
    assert exponent(group_from_spec(spec)) == expected


def test_center_index_divides_order() -> None:
    for spec in SAMPLE_SPECS:
        group = group_from_spec(spec)
        assert center_index(group) * len(center(group)) == group.order
    assert center_index(construct_symmetric(3)) == 6
    assert center_index(construct_cyclic(5)) == 1


@pytest.mark.parametrize(
    "spec, expected",
    [
        ("C1", []),
        ("C6", [6]),
        ("C2xC3", [6]),
        ("C2xC2", [2, 2]),
        ("C2xC2xC3", [2, 6]),
        ("C4xC2", [2, 4]),
        ("C2xC4xC3xC9", [6, 36]),
    ],
)
def test_abelian_invariants(spec, expected) -> None:
    assert abelian_invariants(group_from_spec(spec)) == expected


def test_abelian_invariants_rejects_non_abelian() -> None:
    with pytest.raises(InvalidArgument):
        abelian_invariants(construct_quaternion8())
