"""dedekind: finite-group invariants and Dedekind/Hamiltonian classification."""

from .analysis import AnalysisReport, analyze_group, analyze_groups
from .classify import is_abelian, is_dedekind, is_hamiltonian
from .constructors import (
    construct_abelian,
    construct_alternating,
    construct_cyclic,
    construct_dicyclic,
    construct_dihedral,
    construct_direct_product,
    construct_quaternion8,
    construct_symmetric,
    group_from_spec,
)
from .errors import IntegrityViolation, InvalidArgument, ResourceExceeded
from .group import FiniteGroup
from .invariants import (
    center,
    center_index,
    commutator_subgroup,
    derived_length,
    derived_series,
    exponent,
    nilpotency_class,
)
from .normality import is_normal
from .structure import describe
from .subgroups import enumerate_subgroups

__all__ = [
    "FiniteGroup",
    "construct_cyclic",
    "construct_quaternion8",
    "construct_direct_product",
    "construct_abelian",
    "construct_dihedral",
    "construct_dicyclic",
    "construct_symmetric",
    "construct_alternating",
    "group_from_spec",
    "enumerate_subgroups",
    "is_normal",
    "is_abelian",
    "is_dedekind",
    "is_hamiltonian",
    "center",
    "commutator_subgroup",
    "derived_series",
    "derived_length",
    "nilpotency_class",
    "exponent",
    "center_index",
    "describe",
    "AnalysisReport",
    "analyze_group",
    "analyze_groups",
    "InvalidArgument",
    "ResourceExceeded",
    "IntegrityViolation",
]
