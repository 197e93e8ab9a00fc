"""Isomorphism-type labels for small groups.

Abelian groups are named exactly from their invariant factors. Non-abelian
groups are matched against a catalog generated per order (a non-abelian
base group times an abelian group): catalog entries with the same
signature are shortlisted, and a name is only used once an explicit
isomorphism confirms it. Anything else gets a description built from
invariants, so labels outside the catalog are approximate but never wrong.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Sequence, Tuple

from .constructors import construct_abelian, construct_direct_product, group_from_spec
from .group import FiniteGroup, tabulate
from .invariants import (
    abelian_invariants,
    center,
    commutator_subgroup,
    derived_length,
    exponent,
    nilpotency_class,
    order_statistics,
)
from .isomorphism import is_isomorphic

TRIVIAL_DESCRIPTION = "trivial group"

# Catalog matching is skipped above this order; such groups get the generic label.
MAX_CATALOG_ORDER = 256


@dataclass(frozen=True)
class Signature:
    order: int
    is_abelian: bool
    center_order: int
    exponent: int
    commutator_order: int


def signature(group: FiniteGroup) -> Signature:
    return Signature(
        order=group.order,
        is_abelian=group.is_abelian,
        center_order=len(center(group)),
        exponent=exponent(group),
        commutator_order=len(commutator_subgroup(group)),
    )


def abelian_description(invariant_factors: Sequence[int]) -> str:
    factors = [int(d) for d in invariant_factors if int(d) > 1]
    if not factors:
        return TRIVIAL_DESCRIPTION
    return " x ".join(f"C{d}" for d in factors)


def _dihedral_name(order: int) -> str:
    return "S3" if order == 6 else f"D{order}"


def _dicyclic_name(m: int) -> str:
    n = 4 * m
    return f"Q{n}" if n & (n - 1) == 0 else f"Dic{m}"


def _bases(limit: int) -> List[Tuple[str, int]]:
    """Non-abelian building blocks (spec name, order) of order at most `limit`."""
    bases = [("Q8", 8), ("A4", 12), ("S4", 24), ("A5", 60)]
    bases.extend((_dihedral_name(2 * m), 2 * m) for m in range(3, limit // 2 + 1))
    bases.extend((_dicyclic_name(m), 4 * m) for m in range(3, limit // 4 + 1))
    return [(name, order) for name, order in bases if order <= limit]


def _partitions(n: int, largest: Optional[int] = None) -> List[Tuple[int, ...]]:
    if largest is None:
        largest = n
    if n == 0:
        return [()]
    result = []
    for first in range(min(n, largest), 0, -1):
        for rest in _partitions(n - first, first):
            result.append((first, *rest))
    return result


def abelian_groups_of_order(n: int) -> List[Tuple[int, ...]]:
    """Invariant-factor lists (ascending, all > 1) of the abelian groups of order n."""
    primary: List[Tuple[int, List[Tuple[int, ...]]]] = []
    rest = n
    p = 2
    while rest > 1:
        k = 0
        while rest % p == 0:
            rest //= p
            k += 1
        if k:
            primary.append((p, _partitions(k)))
        p += 1
    groups: List[Tuple[int, ...]] = [()]
    for p, parts in primary:
        combined = []
        for factors in groups:
            for part in parts:
                width = max(len(factors), len(part))
                # align largest with largest
                desc = sorted(factors, reverse=True) + [1] * (width - len(factors))
                merged = [d * p ** (part[i] if i < len(part) else 0) for i, d in enumerate(desc)]
                combined.append(tuple(sorted(merged)))
        groups = combined
    return sorted(groups, key=lambda fs: (len(fs), fs))


@dataclass(frozen=True)
class CatalogEntry:
    """A candidate isomorphism type: abelian factors times a non-abelian base."""

    name: str
    order: int
    base: str
    abelian_factors: Tuple[int, ...]


def catalog(order: int) -> List[CatalogEntry]:
    """Non-abelian catalog entries of the given order, bare bases first."""
    entries = []
    for rank, (base, base_order) in enumerate(_bases(order)):
        if order % base_order:
            continue
        for factors in abelian_groups_of_order(order // base_order):
            name = " x ".join([f"C{d}" for d in factors] + [base])
            entry = CatalogEntry(name, order, base, factors)
            entries.append(((len(factors), -base_order, rank), entry))
    entries.sort(key=lambda item: item[0])
    return [entry for _, entry in entries]


@lru_cache(maxsize=128)
def build_entry(entry: CatalogEntry) -> FiniteGroup:
    base = group_from_spec(entry.base)
    if not entry.abelian_factors:
        return base
    group = construct_direct_product(construct_abelian(entry.abelian_factors), base, name=entry.name)
    return tabulate(group)


@lru_cache(maxsize=1024)
def _entry_profile(entry: CatalogEntry) -> Tuple[Tuple[Tuple[int, int], ...], Signature]:
    group = build_entry(entry)
    return tuple(order_statistics(group).items()), signature(group)


def lookup(group: FiniteGroup) -> List[CatalogEntry]:
    """Catalog entries whose signature (and element-order statistics) match `group`."""
    if group.order > MAX_CATALOG_ORDER or group.is_abelian:
        return []
    stats = tuple(order_statistics(group).items())
    sig: Optional[Signature] = None
    matches = []
    for entry in catalog(group.order):
        entry_stats, entry_sig = _entry_profile(entry)
        if entry_stats != stats:
            continue
        if sig is None:
            sig = signature(group)
        if entry_sig == sig:
            matches.append(entry)
    return matches


def generic_description(group: FiniteGroup) -> str:
    if group.order == 1:
        return TRIVIAL_DESCRIPTION
    if group.is_abelian:
        return abelian_description(abelian_invariants(group))
    dl = derived_length(group)
    nc = nilpotency_class(group)
    solv = "not solvable" if dl is None else f"derived length {dl}"
    nil = "not nilpotent" if nc is None else f"nilpotency class {nc}"
    return f"non-abelian group of order {group.order} ({solv}, {nil})"


def describe(group: FiniteGroup) -> str:
    """Human-readable isomorphism type, e.g. 'C6', 'C2 x C4', 'Q8', 'C2 x Q8'."""
    if group.order == 1:
        return TRIVIAL_DESCRIPTION
    if group.is_abelian:
        return abelian_description(abelian_invariants(group))
    for entry in lookup(group):
        if is_isomorphic(build_entry(entry), group):
            return entry.name
    return generic_description(group)


__all__ = [
    "TRIVIAL_DESCRIPTION",
    "MAX_CATALOG_ORDER",
    "Signature",
    "CatalogEntry",
    "signature",
    "abelian_description",
    "abelian_groups_of_order",
    "catalog",
    "build_entry",
    "lookup",
    "generic_description",
    "describe",
]
