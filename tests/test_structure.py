import pytest

from dedekind.constructors import (
    construct_alternating,
    construct_dihedral,
    construct_quaternion8,
    group_from_spec,
)
from dedekind.group import PermutationGroup
from dedekind.structure import (
    TRIVIAL_DESCRIPTION,
    abelian_description,
    abelian_groups_of_order,
    catalog,
    describe,
    generic_description,
    lookup,
    signature,
)


def _frobenius21() -> PermutationGroup:
    # x -> x+1 and x -> 2x on Z/7
    return PermutationGroup("F21", [[1, 2, 3, 4, 5, 6, 0], [0, 2, 4, 6, 1, 3, 5]])


@pytest.mark.parametrize(
    "spec, expected",
    [
        ("C1", TRIVIAL_DESCRIPTION),
        ("C5", "C5"),
        ("C2xC2", "C2 x C2"),
        ("C2xC2xC3", "C2 x C6"),
        ("Q8", "Q8"),
        ("D8", "D8"),
        ("S3", "S3"),
        ("D6", "S3"),
        ("A4", "A4"),
        ("S4", "S4"),
        ("Q16", "Q16"),
        ("Dic3", "Dic3"),
        ("S3xC2", "D12"),
        ("Q8xC2", "C2 x Q8"),
        ("Q8xC3", "C3 x Q8"),
        ("D8xC2", "C2 x D8"),
    ],
)
def test_describe(spec, expected) -> None:
    assert describe(group_from_spec(spec)) == expected


def test_describe_alternating_five() -> None:
    assert describe(construct_alternating(5)) == "A5"


def test_signature_alone_does_not_separate_q8_and_d8() -> None:
    q8 = construct_quaternion8()
    d8 = construct_dihedral(8)
    assert signature(q8) == signature(d8)
    assert describe(q8) != describe(d8)


def test_lookup_shortlists_by_invariants() -> None:
    names = [entry.name for entry in lookup(construct_quaternion8())]
    assert names == ["Q8"]
    assert lookup(group_from_spec("C6")) == []


def test_catalog_lists_bare_bases_first() -> None:
    names = [entry.name for entry in catalog(16)]
    assert names[:2] == ["D16", "Q16"]
    assert set(names[2:]) == {"C2 x D8", "C2 x Q8"}
    assert catalog(21) == []


def test_group_outside_catalog_gets_generic_description() -> None:
    group = _frobenius21()
    assert group.order == 21
    expected = "non-abelian group of order 21 (derived length 2, not nilpotent)"
    assert describe(group) == expected
    assert generic_description(construct_alternating(5)) == (
        "non-abelian group of order 60 (not solvable, not nilpotent)"
    )


def test_abelian_groups_of_order() -> None:
    assert abelian_groups_of_order(1) == [()]
    assert abelian_groups_of_order(8) == [(8,), (2, 4), (2, 2, 2)]
    assert abelian_groups_of_order(12) == [(12,), (2, 6)]
    assert len(abelian_groups_of_order(16)) == 5


def test_abelian_description() -> None:
    assert abelian_description([]) == TRIVIAL_DESCRIPTION
    assert abelian_description([1, 4]) == "C4"
    assert abelian_description([2, 6]) == "C2 x C6"
