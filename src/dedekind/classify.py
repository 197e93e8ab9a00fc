"""Abelian / Dedekind / Hamiltonian predicates."""

from __future__ import annotations

from typing import Optional, Sequence

from .group import FiniteGroup
from .normality import is_normal
from .subgroups import Subgroup, enumerate_subgroups


def is_abelian(group: FiniteGroup) -> bool:
    """Pairwise commutation check (cached on the group)."""
    return group.is_abelian


def is_dedekind(group: FiniteGroup, subgroups: Optional[Sequence[Subgroup]] = None) -> bool:
    """True iff every subgroup is normal; stops at the first non-normal one.

    Abelian groups are not special-cased: they pass because each of their
    subgroups passes the conjugation test.
    """
    if subgroups is None:
        subgroups = enumerate_subgroups(group)
    for sub in subgroups:
        if not is_normal(group, sub):
            return False
    return True


def is_hamiltonian(group: FiniteGroup, subgroups: Optional[Sequence[Subgroup]] = None) -> bool:
    """Dedekind but not abelian."""
    return is_dedekind(group, subgroups) and not is_abelian(group)


__all__ = ["is_abelian", "is_dedekind", "is_hamiltonian"]
