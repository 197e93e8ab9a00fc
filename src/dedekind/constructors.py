"""Standard finite groups and group-spec parsing."""

from __future__ import annotations

import numbers
import re
from typing import List, Optional, Sequence

import sympy.combinatorics as comb

from .errors import InvalidArgument
from .group import (
    CyclicGroup,
    DirectProductGroup,
    FiniteGroup,
    PermutationGroup,
    TableGroup,
)


QUATERNION_LABELS = ("1", "-1", "i", "-i", "j", "-j", "k", "-k")

# Rows/columns follow QUATERNION_LABELS; entry [a][b] is a*b.
_Q8_MUL = (
    (0, 1, 2, 3, 4, 5, 6, 7),
    (1, 0, 3, 2, 5, 4, 7, 6),
    (2, 3, 1, 0, 6, 7, 5, 4),
    (3, 2, 0, 1, 7, 6, 4, 5),
    (4, 5, 7, 6, 1, 0, 2, 3),
    (5, 4, 6, 7, 0, 1, 3, 2),
    (6, 7, 4, 5, 3, 2, 1, 0),
    (7, 6, 5, 4, 2, 3, 0, 1),
)
_Q8_INV = (0, 1, 3, 2, 5, 4, 7, 6)


def _require_int(value: object, *, name: str, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}.")
    n = int(value)
    if n < minimum:
        raise InvalidArgument(f"{name} must be >= {minimum}, got {n}.")
    return n


def construct_cyclic(n: int) -> CyclicGroup:
    """Cyclic group Z/nZ on 0..n-1 with addition mod n."""
    return CyclicGroup(_require_int(n, name="Cyclic group order", minimum=1))


def construct_quaternion8() -> TableGroup:
    """Quaternion group Q8 from its hard-coded table (verified on construction)."""
    return TableGroup(
        "Q8",
        _Q8_MUL,
        _Q8_INV,
        element_repr=QUATERNION_LABELS,
        is_abelian=False,
        verify=True,
    )


def construct_direct_product(*groups: FiniteGroup, name: Optional[str] = None) -> DirectProductGroup:
    if not groups:
        raise InvalidArgument("construct_direct_product needs at least one factor.")
    for group in groups:
        if not isinstance(group, FiniteGroup):
            raise InvalidArgument(f"Direct product factor {group!r} is not a FiniteGroup.")
    product = DirectProductGroup(groups, name=name)
    expected = 1
    for group in groups:
        expected *= group.order
    assert product.order == expected
    return product


def construct_abelian(factor_orders: Sequence[int], *, name: Optional[str] = None) -> FiniteGroup:
    """Product of cyclic groups with the given orders (a single factor stays cyclic)."""
    orders = [_require_int(n, name="Cyclic factor order", minimum=1) for n in factor_orders]
    if not orders:
        return CyclicGroup(1, name=name or "C1")
    if len(orders) == 1:
        return CyclicGroup(orders[0], name=name)
    return DirectProductGroup([CyclicGroup(n) for n in orders], name=name)


def construct_dihedral(order: int) -> TableGroup:
    """Dihedral group D_{2m} of the given (even) order, elements r^k s^e with id k + m*e."""
    n = _require_int(order, name="Dihedral group order", minimum=2)
    if n % 2:
        raise InvalidArgument(f"Dihedral group order must be even, got {n}.")
    m = n // 2
    labels: List[str] = []
    for e in range(2):
        for k in range(m):
            word = "" if k == 0 else ("r" if k == 1 else f"r^{k}")
            if e:
                word += "s"
            labels.append(word or "1")
    mul = []
    for x in range(n):
        k, e = x % m, x // m
        row = []
        for y in range(n):
            l, f = y % m, y // m
            kk = (k - l) % m if e else (k + l) % m
            row.append(kk + m * ((e + f) % 2))
        mul.append(row)
    inv = []
    for x in range(n):
        k, e = x % m, x // m
        inv.append(x if e else (-k) % m)
    return TableGroup(f"D{n}", mul, inv, element_repr=labels)


def construct_dicyclic(m: int) -> TableGroup:
    """Dicyclic group of order 4m: a^(2m) = 1, x^2 = a^m, x a x^-1 = a^-1.

    Elements a^k x^e have id k + 2m*e. For 4m a power of two this is the
    generalized quaternion group.
    """
    m = _require_int(m, name="Dicyclic parameter", minimum=2)
    two_m = 2 * m
    n = 4 * m
    labels: List[str] = []
    for e in range(2):
        for k in range(two_m):
            word = "" if k == 0 else ("a" if k == 1 else f"a^{k}")
            if e:
                word += "x"
            labels.append(word or "1")
    mul = []
    for p in range(n):
        k, e = p % two_m, p // two_m
        row = []
        for q in range(n):
            l, f = q % two_m, q // two_m
            if not e:
                row.append((k + l) % two_m + two_m * f)
            elif not f:
                row.append((k - l) % two_m + two_m)
            else:
                row.append((k - l + m) % two_m)
        mul.append(row)
    inv = []
    for p in range(n):
        k, e = p % two_m, p // two_m
        # (a^k x)^-1 = a^(k+m) x since (a^k x)(a^(k+m) x) = a^(-m) x^2 = 1
        inv.append((k + m) % two_m + two_m if e else (-k) % two_m)
    name = f"Q{n}" if n & (n - 1) == 0 else f"Dic{m}"
    return TableGroup(name, mul, inv, element_repr=labels)


def construct_symmetric(degree: int) -> PermutationGroup:
    d = _require_int(degree, name="Symmetric group degree", minimum=1)
    return PermutationGroup.from_sympy(f"S{d}", comb.named_groups.SymmetricGroup(d))


def construct_alternating(degree: int) -> PermutationGroup:
    d = _require_int(degree, name="Alternating group degree", minimum=1)
    return PermutationGroup.from_sympy(f"A{d}", comb.named_groups.AlternatingGroup(d))


_CYCLIC_RE = re.compile(r"([CZ])(\d+)$", re.IGNORECASE)
_NAMED_RE = re.compile(r"(Q|Dic|D|S|A)(\d+)$", re.IGNORECASE)
_NAMED_KINDS = {"q": "Q", "dic": "Dic", "d": "D", "s": "S", "a": "A"}


def canonical_group_spec(spec: str) -> str:
    """Normalize specs like 'q8 x z2' to 'Q8xC2'."""
    if spec is None:
        raise InvalidArgument("Group spec cannot be None.")
    s = re.sub(r"\s+", "", spec).replace("X", "x").replace("×", "x")
    if not s:
        raise InvalidArgument("Group spec cannot be empty.")
    parts = []
    for part in s.split("x"):
        if part.lower() == "v4":
            parts.extend(["C2", "C2"])
            continue
        m = _CYCLIC_RE.fullmatch(part)
        if m:
            parts.append(f"C{int(m.group(2))}")
            continue
        m = _NAMED_RE.fullmatch(part)
        if m:
            parts.append(f"{_NAMED_KINDS[m.group(1).lower()]}{int(m.group(2))}")
            continue
        raise InvalidArgument(f"Unrecognized group spec {spec!r}.")
    return "x".join(parts)


def _group_from_factor(part: str) -> FiniteGroup:
    m = _CYCLIC_RE.fullmatch(part)
    if m:
        return construct_cyclic(int(m.group(2)))
    m = _NAMED_RE.fullmatch(part)
    if not m:
        raise InvalidArgument(f"Unrecognized group factor {part!r}.")
    kind, n = _NAMED_KINDS[m.group(1).lower()], int(m.group(2))
    if kind == "Q":
        if n == 8:
            return construct_quaternion8()
        if n < 8 or n & (n - 1):
            raise InvalidArgument(f"Q{n}: generalized quaternion order must be a power of two >= 8.")
        return construct_dicyclic(n // 4)
    if kind == "Dic":
        return construct_dicyclic(n)
    if kind == "D":
        return construct_dihedral(n)
    if kind == "S":
        return construct_symmetric(n)
    return construct_alternating(n)


def group_from_spec(spec: str) -> FiniteGroup:
    spec_norm = canonical_group_spec(spec)
    parts = spec_norm.split("x")
    groups = [_group_from_factor(part) for part in parts]
    if len(groups) == 1:
        return groups[0]
    return construct_direct_product(*groups, name=spec_norm)


__all__ = [
    "QUATERNION_LABELS",
    "construct_cyclic",
    "construct_quaternion8",
    "construct_direct_product",
    "construct_abelian",
    "construct_dihedral",
    "construct_dicyclic",
    "construct_symmetric",
    "construct_alternating",
    "canonical_group_spec",
    "group_from_spec",
]
