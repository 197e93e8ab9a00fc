"""Derived invariants: center, commutator subgroup, series, exponent."""

from __future__ import annotations

import math
from collections import Counter
from typing import Dict, Iterable, List, Optional

from .errors import InvalidArgument
from .group import FiniteGroup
from .subgroups import Subgroup, generated_subgroup


def power(group: FiniteGroup, x: int, k: int) -> int:
    """x^k by square-and-multiply; negative k uses the inverse."""
    if k < 0:
        x, k = group.inv(x), -k
    result = group.id()
    base = x
    while k:
        if k & 1:
            result = group.mul(result, base)
        base = group.mul(base, base)
        k >>= 1
    return result


def element_order(group: FiniteGroup, x: int) -> int:
    """Least k > 0 with x^k = e, or 0 if none exists up to |G|."""
    ident = group.id()
    y = x
    for k in range(1, group.order + 1):
        if y == ident:
            return k
        y = group.mul(y, x)
    return 0


def element_orders(group: FiniteGroup) -> List[int]:
    return [element_order(group, x) for x in group.elements()]


def order_statistics(group: FiniteGroup) -> Dict[int, int]:
    """Number of elements of each order."""
    return dict(sorted(Counter(element_orders(group)).items()))


def commutator(group: FiniteGroup, a: int, b: int) -> int:
    """[a, b] = a b a^-1 b^-1."""
    return group.mul(group.mul(a, b), group.mul(group.inv(a), group.inv(b)))


def center(group: FiniteGroup) -> Subgroup:
    members = []
    for z in group.elements():
        if all(group.mul(z, x) == group.mul(x, z) for x in group.elements()):
            members.append(z)
    return frozenset(members)


def commutator_subgroup(
    group: FiniteGroup,
    subgroup: Optional[Iterable[int]] = None,
) -> Subgroup:
    """Subgroup generated by all commutators of elements of `subgroup` (default: the whole group)."""
    members = list(group.elements()) if subgroup is None else sorted(subgroup)
    commutators = {commutator(group, a, b) for a in members for b in members}
    return generated_subgroup(group, sorted(commutators))


def derived_series(group: FiniteGroup) -> List[Subgroup]:
    """G = D0 >= D1 >= ... with D(i+1) = [Di, Di], ending at the first repeat."""
    current: Subgroup = frozenset(group.elements())
    series = [current]
    while True:
        nxt = commutator_subgroup(group, current)
        if nxt == current:
            return series
        series.append(nxt)
        current = nxt


def derived_length(group: FiniteGroup) -> Optional[int]:
    """Strict steps of the derived series down to {e}; None if it stalls above {e}."""
    series = derived_series(group)
    if len(series[-1]) != 1:
        return None
    return len(series) - 1


def upper_central_series(group: FiniteGroup) -> List[Subgroup]:
    """Z0 = {e}, Z(i+1) = {g : [g, x] in Zi for all x}, ending at the first repeat."""
    current: Subgroup = frozenset([group.id()])
    series = [current]
    while True:
        nxt = frozenset(
            g
            for g in group.elements()
            if all(commutator(group, g, x) in current for x in group.elements())
        )
        if nxt == current:
            return series
        series.append(nxt)
        current = nxt


def nilpotency_class(group: FiniteGroup) -> Optional[int]:
    """Length of the upper central series up to G; None if the series stops short of G."""
    series = upper_central_series(group)
    if len(series[-1]) != group.order:
        return None
    return len(series) - 1


def exponent(group: FiniteGroup) -> int:
    """lcm of element orders (0 if some element has no finite order)."""
    result = 1
    for k in element_orders(group):
        if k == 0:
            return 0
        result = result * k // math.gcd(result, k)
    return result


def center_index(group: FiniteGroup) -> int:
    z = len(center(group))
    index, rest = divmod(group.order, z)
    assert rest == 0, f"|Z(G)|={z} does not divide |G|={group.order}"
    return index


def _prime_factors(n: int) -> List[int]:
    primes = []
    p = 2
    while p * p <= n:
        if n % p == 0:
            primes.append(p)
            while n % p == 0:
                n //= p
        p += 1
    if n > 1:
        primes.append(n)
    return primes


def _log(value: int, p: int) -> int:
    k = 0
    while value > 1:
        value //= p
        k += 1
    return k


def abelian_invariants(group: FiniteGroup) -> List[int]:
    """Invariant factors d1 | d2 | ... | dr with d1 > 1 of an abelian group.

    For each prime p, the number of elements killed by p^k is
    p^(sum_i min(k, e_i)) where p^e_i are the p-primary cyclic factors,
    so successive differences of the logs count the factors of exponent
    at least k.
    """
    if not group.is_abelian:
        raise InvalidArgument(f"{group.name} is not abelian; it has no invariant factors.")
    orders = element_orders(group)
    primary: Dict[int, List[int]] = {}
    for p in _prime_factors(group.order):
        exps: List[int] = []
        prev = 0
        k = 1
        while True:
            killed = sum(1 for o in orders if (p ** k) % o == 0)
            log_killed = _log(killed, p)
            at_least_k = log_killed - prev
            if at_least_k == 0:
                break
            exps.append(at_least_k)
            prev = log_killed
            k += 1
        # exps[k-1] = number of factors with exponent >= k; convert to a partition
        partition = []
        for k in range(len(exps), 0, -1):
            with_exactly_k = exps[k - 1] - (exps[k] if k < len(exps) else 0)
            partition.extend([k] * with_exactly_k)
        primary[p] = partition  # descending exponents
    rank = max((len(v) for v in primary.values()), default=0)
    factors = []
    for i in range(rank):
        d = 1
        for p, exps_desc in primary.items():
            if i < len(exps_desc):
                d *= p ** exps_desc[i]
        factors.append(d)
    return sorted(factors)


__all__ = [
    "power",
    "element_order",
    "element_orders",
    "order_statistics",
    "commutator",
    "center",
    "commutator_subgroup",
    "derived_series",
    "derived_length",
    "upper_central_series",
    "nilpotency_class",
    "exponent",
    "center_index",
    "abelian_invariants",
]
