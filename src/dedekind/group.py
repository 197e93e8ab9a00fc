"""Finite group representations with 0-based element ids."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import sympy.combinatorics as comb

from .errors import InvalidArgument
from .integrity import verify_group_table


class FiniteGroup:
    """Small interface for finite groups with elements 0..|G|-1 and identity 0."""

    name: str
    order: int
    _is_abelian: Optional[bool] = None

    def mul(self, a: int, b: int) -> int:
        raise NotImplementedError

    def inv(self, a: int) -> int:
        raise NotImplementedError

    def id(self) -> int:
        return 0

    def elements(self) -> range:
        return range(self.order)

    def repr(self, a: int) -> str:
        return str(a)

    def cayley_table(self) -> List[List[int]]:
        """Full multiplication table; row a, column b holds a*b."""
        return [[self.mul(a, b) for b in self.elements()] for a in self.elements()]

    def inverse_table(self) -> List[int]:
        return [self.inv(a) for a in self.elements()]

    def _compute_is_abelian(self) -> bool:
        for a in self.elements():
            for b in self.elements():
                if self.mul(a, b) != self.mul(b, a):
                    return False
        return True

    @property
    def is_abelian(self) -> bool:
        cached = getattr(self, "_is_abelian", None)
        if cached is None:
            cached = self._compute_is_abelian()
            self._is_abelian = cached
        return bool(cached)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} order={self.order}>"


class CyclicGroup(FiniteGroup):
    """Cyclic group C_n with additive notation modulo n."""

    def __init__(self, n: int, *, name: Optional[str] = None) -> None:
        n_int = int(n)
        if n_int <= 0:
            raise InvalidArgument(f"CyclicGroup order must be positive, got {n}.")
        self.order = n_int
        self.name = name or f"C{n_int}"
        self._is_abelian = True

    def mul(self, a: int, b: int) -> int:
        return (int(a) + int(b)) % self.order

    def inv(self, a: int) -> int:
        return (-int(a)) % self.order

    def repr(self, a: int) -> str:
        return str(int(a))


class DirectProductGroup(FiniteGroup):
    """Direct product of finite groups with element IDs packed in mixed radix.

    The last factor varies fastest, so for two factors the pair (a,b) has
    id a*|G2| + b.
    """

    def __init__(
        self,
        factors: Sequence[FiniteGroup],
        *,
        name: Optional[str] = None,
    ) -> None:
        self.factors: Tuple[FiniteGroup, ...] = tuple(factors)
        if not self.factors:
            raise InvalidArgument("DirectProductGroup needs at least one factor.")
        strides: List[int] = []
        order = 1
        for group in reversed(self.factors):
            strides.append(order)
            order *= group.order
        self.order = order
        self._strides = tuple(reversed(strides))
        self.name = name or "x".join(group.name for group in self.factors)
        self._is_abelian = all(group.is_abelian for group in self.factors)
        self._coords = [self._decode(x) for x in range(order)]

    def _decode(self, x: int) -> Tuple[int, ...]:
        coords = []
        rest = int(x)
        for stride in self._strides:
            q, rest = divmod(rest, stride)
            coords.append(q)
        return tuple(coords)

    def _encode(self, coords: Iterable[int]) -> int:
        return sum(int(c) * stride for c, stride in zip(coords, self._strides))

    def coordinates(self, x: int) -> Tuple[int, ...]:
        return self._coords[int(x)]

    def mul(self, a: int, b: int) -> int:
        ca = self._coords[int(a)]
        cb = self._coords[int(b)]
        return self._encode(
            group.mul(x, y) for group, x, y in zip(self.factors, ca, cb)
        )

    def inv(self, a: int) -> int:
        ca = self._coords[int(a)]
        return self._encode(group.inv(x) for group, x in zip(self.factors, ca))

    def repr(self, a: int) -> str:
        ca = self._coords[int(a)]
        return "(" + ",".join(g.repr(x) for g, x in zip(self.factors, ca)) + ")"


class TableGroup(FiniteGroup):
    """Finite group defined by 0-based multiplication and inverse tables."""

    def __init__(
        self,
        name: str,
        mul_table: Sequence[Sequence[int]],
        inv_table: Sequence[int],
        *,
        element_repr: Optional[Sequence[str]] = None,
        is_abelian: Optional[bool] = None,
        verify: bool = False,
    ) -> None:
        self.name = str(name)
        self.order = len(mul_table)
        norm_mul, norm_inv = _normalize_table(self.order, mul_table, inv_table)
        if verify:
            verify_group_table(norm_mul, norm_inv)
        self.mul_table = norm_mul
        self.inv_table = norm_inv
        if is_abelian is not None:
            self._is_abelian = bool(is_abelian)
        if element_repr is None:
            self._repr_table = None
        else:
            if len(element_repr) != self.order:
                raise InvalidArgument("element_repr length does not match group order.")
            self._repr_table = [str(x) for x in element_repr]

    def mul(self, a: int, b: int) -> int:
        return self.mul_table[int(a)][int(b)]

    def inv(self, a: int) -> int:
        return self.inv_table[int(a)]

    def repr(self, a: int) -> str:
        idx = int(a)
        if self._repr_table is None:
            return str(idx)
        return self._repr_table[idx]

    def cayley_table(self) -> List[List[int]]:
        return [list(row) for row in self.mul_table]


def _cycle_string(perm: comb.Permutation) -> str:
    """1-based cycle notation, fixed points omitted."""
    cycles = perm.cyclic_form
    if not cycles:
        return "()"
    return "".join("(" + " ".join(str(x + 1) for x in cycle) + ")" for cycle in cycles)


class PermutationGroup(TableGroup):
    """Permutation group realised as a table over sympy's element enumeration.

    The identity permutation gets id 0; the remaining ids follow the order
    of ``sympy.combinatorics.PermutationGroup.generate()``. Products compose
    right to left, so mul(a, b) applies b first. Element labels use 1-based
    cycle notation.
    """

    def __init__(
        self,
        name: str,
        generators: Sequence[Sequence[int]],
        *,
        degree: Optional[int] = None,
    ) -> None:
        gens = [list(g) for g in generators]
        if degree is None:
            degree = len(gens[0]) if gens else 1
        perms = []
        for g in gens:
            if len(g) != degree:
                raise InvalidArgument(f"{g!r} is not a permutation of degree {degree}.")
            try:
                perms.append(comb.Permutation(g, size=degree))
            except (TypeError, ValueError) as exc:
                raise InvalidArgument(f"{g!r} is not a permutation of degree {degree}.") from exc
        if not perms:
            perms = [comb.Permutation(list(range(degree)))]
        self._init_from_sympy(name, comb.PermutationGroup(*perms))

    @classmethod
    def from_sympy(cls, name: str, group: comb.PermutationGroup) -> "PermutationGroup":
        obj = cls.__new__(cls)
        obj._init_from_sympy(name, group)
        return obj

    def _init_from_sympy(self, name: str, group: comb.PermutationGroup) -> None:
        identity = group.identity
        perms = [identity] + [p for p in group.generate() if not p.is_Identity]
        index: Dict[Tuple[int, ...], int] = {
            tuple(p.array_form): i for i, p in enumerate(perms)
        }
        # sympy's p*q applies p first, so "a after b" is b*a
        mul_table = [[index[tuple((q * p).array_form)] for q in perms] for p in perms]
        inv_table = [index[tuple((~p).array_form)] for p in perms]
        super().__init__(
            name,
            mul_table,
            inv_table,
            element_repr=[_cycle_string(p) for p in perms],
        )
        self.degree = group.degree
        self.permutations = tuple(perms)
        self._index = index

    def index_of(self, perm: Sequence[int]) -> int:
        """Element id of a permutation given in array form."""
        key = tuple(int(x) for x in perm)
        if key not in self._index:
            raise InvalidArgument(f"{list(key)!r} is not an element of {self.name}.")
        return self._index[key]


def subgroup_as_group(
    group: FiniteGroup,
    elements: Iterable[int],
    *,
    name: Optional[str] = None,
) -> TableGroup:
    """Re-index a subgroup of `group` as a standalone TableGroup (identity first)."""
    ident = group.id()
    members = sorted(set(int(x) for x in elements))
    if ident not in members:
        raise InvalidArgument("Subgroup elements must contain the identity.")
    members.remove(ident)
    members.insert(0, ident)
    index = {x: i for i, x in enumerate(members)}
    try:
        mul_table = [[index[group.mul(a, b)] for b in members] for a in members]
        inv_table = [index[group.inv(a)] for a in members]
    except KeyError as exc:
        raise InvalidArgument(
            f"Elements do not form a subgroup of {group.name}: product {exc} escapes."
        ) from exc
    return TableGroup(
        name or f"subgroup of {group.name}",
        mul_table,
        inv_table,
        element_repr=[group.repr(x) for x in members],
    )


def tabulate(group: FiniteGroup, *, name: Optional[str] = None) -> TableGroup:
    """Materialize any FiniteGroup as a TableGroup with the same ids and labels."""
    if isinstance(group, TableGroup) and name is None:
        return group
    return TableGroup(
        name or group.name,
        group.cayley_table(),
        group.inverse_table(),
        element_repr=[group.repr(x) for x in group.elements()],
        is_abelian=getattr(group, "_is_abelian", None),
    )


def _normalize_table(
    order: int,
    mul_table: Sequence[Sequence[int]],
    inv_table: Sequence[int],
) -> tuple[List[List[int]], List[int]]:
    n = int(order)
    if n <= 0:
        raise InvalidArgument(f"Group order must be positive, got {n}.")
    if len(mul_table) != n:
        raise InvalidArgument(f"mul_table has {len(mul_table)} rows but order={n}.")
    norm: List[List[int]] = []
    for i, row in enumerate(mul_table):
        if len(row) != n:
            raise InvalidArgument(f"mul_table row {i} length {len(row)} but order={n}.")
        try:
            norm_row = [int(x) for x in row]
        except (TypeError, ValueError) as exc:
            raise InvalidArgument(f"mul_table row {i} has a non-integer entry: {exc}") from exc
        for x in norm_row:
            if x < 0 or x >= n:
                raise InvalidArgument(f"mul_table entry {x} out of range [0,{n-1}].")
        norm.append(norm_row)
    try:
        inv = [int(x) for x in inv_table]
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"inv_table has a non-integer entry: {exc}") from exc
    if len(inv) != n:
        raise InvalidArgument(f"inv_table length {len(inv)} but order={n}.")
    for x in inv:
        if x < 0 or x >= n:
            raise InvalidArgument(f"inv_table entry {x} out of range [0,{n-1}].")
    return norm, inv


__all__ = [
    "FiniteGroup",
    "CyclicGroup",
    "DirectProductGroup",
    "TableGroup",
    "PermutationGroup",
    "subgroup_as_group",
    "tabulate",
]
