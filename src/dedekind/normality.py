"""Normal subgroup tests."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .group import FiniteGroup
from .subgroups import Subgroup, enumerate_subgroups


def conjugate(group: FiniteGroup, g: int, h: int) -> int:
    """g h g^-1."""
    return group.mul(group.mul(g, h), group.inv(g))


def is_normal(group: FiniteGroup, subgroup: Iterable[int]) -> bool:
    """True iff g h g^-1 lies in the subgroup for every g in the group and h in it.

    Stops at the first conjugate that escapes.
    """
    members = frozenset(subgroup)
    for g in group.elements():
        for h in members:
            if conjugate(group, g, h) not in members:
                return False
    return True


def normal_subgroups(
    group: FiniteGroup,
    subgroups: Optional[Sequence[Subgroup]] = None,
) -> List[Subgroup]:
    if subgroups is None:
        subgroups = enumerate_subgroups(group)
    return [sub for sub in subgroups if is_normal(group, sub)]


__all__ = ["conjugate", "is_normal", "normal_subgroups"]
