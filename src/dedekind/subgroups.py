"""Subgroup closure and full subgroup-lattice enumeration."""

from __future__ import annotations

import math
import os
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence

from .errors import IntegrityViolation, InvalidArgument, ResourceExceeded
from .group import FiniteGroup

Subgroup = FrozenSet[int]

DEFAULT_MAX_ORDER = 2048
DEFAULT_MAX_SUBGROUPS = 20000


def _limit(value: Optional[int], env_name: str, default: int) -> int:
    if value is not None:
        return int(value)
    raw = os.environ.get(env_name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise InvalidArgument(f"{env_name}={raw!r} is not an integer.") from exc


def generated_subgroup(group: FiniteGroup, generators: Iterable[int]) -> Subgroup:
    """Smallest subgroup containing `generators`.

    Breadth-first walk of the Cayley graph from the identity, multiplying
    on the right by each generator and its inverse until no new element
    appears.
    """
    gens: List[int] = []
    for g in generators:
        g = int(g)
        if g == group.id() or g in gens:
            continue
        gens.append(g)
        h = group.inv(g)
        if h not in gens:
            gens.append(h)
    found = {group.id()}
    frontier = [group.id()]
    while frontier:
        nxt = []
        for x in frontier:
            for g in gens:
                y = group.mul(x, g)
                if y not in found:
                    found.add(y)
                    nxt.append(y)
        frontier = nxt
    return frozenset(found)


def cyclic_subgroup(group: FiniteGroup, g: int) -> Subgroup:
    ident = group.id()
    found = {ident}
    x = int(g)
    steps = 0
    while x != ident:
        found.add(x)
        x = group.mul(x, g)
        steps += 1
        if steps > group.order:
            raise IntegrityViolation(
                f"Element {g} of {group.name} has no finite order.", kind="order", elements=(g,)
            )
    return frozenset(found)


def cyclic_subgroups(group: FiniteGroup) -> Dict[Subgroup, int]:
    """Distinct cyclic subgroups, each mapped to its smallest generator."""
    result: Dict[Subgroup, int] = {}
    covered = set()
    for g in group.elements():
        if g in covered:
            continue
        sub = cyclic_subgroup(group, g)
        result[sub] = g
        # g^k generates the same subgroup exactly when gcd(k, |g|) == 1
        n = len(sub)
        x = g
        for k in range(1, n + 1):
            if math.gcd(k, n) == 1:
                covered.add(x)
            x = group.mul(x, g)
    return result


def is_subgroup(group: FiniteGroup, elements: Iterable[int]) -> bool:
    subset = frozenset(int(x) for x in elements)
    if group.id() not in subset:
        return False
    for a in subset:
        if group.inv(a) not in subset:
            return False
        for b in subset:
            if group.mul(a, b) not in subset:
                return False
    return True


def subgroup_sort_key(sub: Subgroup) -> tuple:
    return (len(sub), tuple(sorted(sub)))


def enumerate_subgroups(
    group: FiniteGroup,
    *,
    max_subgroups: Optional[int] = None,
    max_order: Optional[int] = None,
) -> List[Subgroup]:
    """All subgroups of `group`, each exactly once, sorted by (order, elements).

    Starting from the trivial subgroup, every known subgroup H is joined with
    every cyclic subgroup <g> not already inside H; new joins are queued
    until no pass discovers anything. Every subgroup is a join of cyclic
    subgroups, so the result is complete.
    """
    order_limit = _limit(max_order, "DEDEKIND_MAX_ORDER", DEFAULT_MAX_ORDER)
    count_limit = _limit(max_subgroups, "DEDEKIND_MAX_SUBGROUPS", DEFAULT_MAX_SUBGROUPS)
    if group.order > order_limit:
        raise ResourceExceeded(
            f"{group.name} has order {group.order}, above the enumeration limit {order_limit}.",
            limit=order_limit,
            kind="order",
        )

    cyclics = sorted(cyclic_subgroups(group).items(), key=lambda kv: subgroup_sort_key(kv[0]))
    trivial: Subgroup = frozenset([group.id()])
    # generators recorded per subgroup keep each closure walk short
    known: Dict[Subgroup, Sequence[int]] = {trivial: ()}
    queue: List[Subgroup] = [trivial]
    pos = 0
    while pos < len(queue):
        sub = queue[pos]
        pos += 1
        if len(sub) == group.order:
            continue
        gens = known[sub]
        for cyc, g in cyclics:
            if cyc <= sub:
                continue
            joined = generated_subgroup(group, (*gens, g))
            if joined in known:
                continue
            known[joined] = (*gens, g)
            queue.append(joined)
            if len(known) > count_limit:
                raise ResourceExceeded(
                    f"{group.name} has more than {count_limit} subgroups.",
                    limit=count_limit,
                    kind="subgroups",
                )
    return sorted(known, key=subgroup_sort_key)


__all__ = [
    "Subgroup",
    "DEFAULT_MAX_ORDER",
    "DEFAULT_MAX_SUBGROUPS",
    "generated_subgroup",
    "cyclic_subgroup",
    "cyclic_subgroups",
    "is_subgroup",
    "subgroup_sort_key",
    "enumerate_subgroups",
]
