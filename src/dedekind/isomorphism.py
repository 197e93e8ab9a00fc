"""Explicit isomorphism search between small groups."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .group import FiniteGroup
from .invariants import element_orders
from .subgroups import generated_subgroup


def generating_set(group: FiniteGroup) -> List[int]:
    """Greedy generating set: take elements of largest order first, skipping those already spanned."""
    orders = element_orders(group)
    candidates = sorted(group.elements(), key=lambda x: (-orders[x], x))
    gens: List[int] = []
    span = frozenset([group.id()])
    for x in candidates:
        if len(span) == group.order:
            break
        if x in span:
            continue
        gens.append(x)
        span = generated_subgroup(group, gens)
    return gens


def is_homomorphism(source: FiniteGroup, target: FiniteGroup, mapping: Dict[int, int]) -> bool:
    for a in source.elements():
        for b in source.elements():
            if mapping[source.mul(a, b)] != target.mul(mapping[a], mapping[b]):
                return False
    return True


def _extend(
    source: FiniteGroup,
    target: FiniteGroup,
    gens: Sequence[int],
    images: Sequence[int],
    mapping: Dict[int, int],
    used: Dict[int, int],
) -> bool:
    """Extend `mapping` along the Cayley graph of <gens>, in place.

    Every edge x -> x*g must map to phi(x) -> phi(x)*phi(g); a conflicting
    image or a collision with another preimage aborts the extension.
    """
    queue = list(mapping)
    pos = 0
    while pos < len(queue):
        x = queue[pos]
        pos += 1
        fx = mapping[x]
        for g, h in zip(gens, images):
            y = source.mul(x, g)
            fy = target.mul(fx, h)
            known = mapping.get(y)
            if known is not None:
                if known != fy:
                    return False
                continue
            if fy in used:
                return False
            mapping[y] = fy
            used[fy] = y
            queue.append(y)
    return True


def find_isomorphism(source: FiniteGroup, target: FiniteGroup) -> Optional[Dict[int, int]]:
    """Return an isomorphism source -> target as a dict of element ids, or None.

    Generators of `source` may only map to target elements of the same
    order. Each partial assignment is extended over the subgroup it
    generates and pruned on the first inconsistency; a complete map is
    checked once more for operation preservation before it is returned.
    """
    if source.order != target.order:
        return None
    src_orders = element_orders(source)
    tgt_orders = element_orders(target)
    if sorted(src_orders) != sorted(tgt_orders):
        return None
    if source.is_abelian != target.is_abelian:
        return None

    gens = generating_set(source)
    by_order: Dict[int, List[int]] = {}
    for y in target.elements():
        by_order.setdefault(tgt_orders[y], []).append(y)
    choices = [by_order.get(src_orders[g], []) for g in gens]

    def search(i: int, mapping: Dict[int, int], used: Dict[int, int]) -> Optional[Dict[int, int]]:
        if i == len(gens):
            return mapping if len(mapping) == source.order else None
        for h in choices[i]:
            if h in used:
                continue
            trial = dict(mapping)
            trial_used = dict(used)
            if not _extend(source, target, gens[: i + 1], (*images, h), trial, trial_used):
                continue
            images.append(h)
            found = search(i + 1, trial, trial_used)
            images.pop()
            if found is not None:
                return found
        return None

    images: List[int] = []
    mapping = search(0, {source.id(): target.id()}, {target.id(): source.id()})
    if mapping is None or not is_homomorphism(source, target, mapping):
        return None
    return mapping


def is_isomorphic(source: FiniteGroup, target: FiniteGroup) -> bool:
    return find_isomorphism(source, target) is not None


__all__ = [
    "generating_set",
    "is_homomorphism",
    "find_isomorphism",
    "is_isomorphic",
]
