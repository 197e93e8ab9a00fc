from dedekind.constructors import (
    construct_dicyclic,
    construct_dihedral,
    construct_quaternion8,
    construct_symmetric,
    group_from_spec,
)
from dedekind.isomorphism import find_isomorphism, generating_set, is_homomorphism, is_isomorphic
from dedekind.subgroups import generated_subgroup


def test_dihedral_six_is_symmetric_three() -> None:
    source = construct_dihedral(6)
    target = construct_symmetric(3)
    mapping = find_isomorphism(source, target)
    assert mapping is not None
    assert sorted(mapping.values()) == list(target.elements())
    assert is_homomorphism(source, target, mapping)


def test_quaternion_is_not_dihedral() -> None:
    assert not is_isomorphic(construct_quaternion8(), construct_dihedral(8))


def test_quaternion_matches_dicyclic_two() -> None:
    assert is_isomorphic(construct_quaternion8(), construct_dicyclic(2))


def test_abelian_isomorphisms() -> None:
    assert is_isomorphic(group_from_spec("C6"), group_from_spec("C2xC3"))
    assert not is_isomorphic(group_from_spec("C4"), group_from_spec("C2xC2"))
    assert not is_isomorphic(group_from_spec("C6"), group_from_spec("S3"))


def test_dihedral_twelve_is_s3_times_c2() -> None:
    assert is_isomorphic(group_from_spec("S3xC2"), construct_dihedral(12))
    assert not is_isomorphic(group_from_spec("S3xC2"), group_from_spec("A4"))


def test_generating_set_spans_group() -> None:
    for spec in ("C2xC2xC2", "Q8", "S4", "Q8xC3"):
        group = group_from_spec(spec)
        gens = generating_set(group)
        assert len(generated_subgroup(group, gens)) == group.order
    assert len(generating_set(group_from_spec("C2xC2xC2"))) == 3
    assert generating_set(group_from_spec("C1")) == []
