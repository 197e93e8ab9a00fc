"""One-shot verification that a multiplication table describes a group."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .errors import IntegrityViolation


def verify_group_table(
    mul_table: Sequence[Sequence[int]],
    inv_table: Sequence[int],
    *,
    identity: int = 0,
) -> None:
    """Raise IntegrityViolation unless (mul_table, inv_table) is a group with the given identity.

    Checks closure, two-sided identity, two-sided inverses and associativity.
    Associativity is checked one left operand at a time: for fixed a, the
    n x n blocks (a*b)*c and a*(b*c) must agree, which keeps memory at O(n^2).
    """
    table = np.asarray(mul_table, dtype=np.int64)
    inv = np.asarray(inv_table, dtype=np.int64)
    n = table.shape[0]
    if table.ndim != 2 or table.shape != (n, n) or inv.shape != (n,):
        raise IntegrityViolation(
            f"Tables have shapes {table.shape} and {inv.shape}; expected ({n},{n}) and ({n},).",
            kind="shape",
        )
    if n == 0:
        raise IntegrityViolation("Empty multiplication table.", kind="shape")
    if table.min() < 0 or table.max() >= n or inv.min() < 0 or inv.max() >= n:
        raise IntegrityViolation(
            f"Table entries fall outside [0,{n-1}].", kind="closure"
        )

    elements = np.arange(n)
    if not np.array_equal(table[identity], elements):
        bad = int(np.flatnonzero(table[identity] != elements)[0])
        raise IntegrityViolation(
            f"{identity}*{bad} != {bad}: element {identity} is not a left identity.",
            kind="identity",
            elements=(identity, bad),
        )
    if not np.array_equal(table[:, identity], elements):
        bad = int(np.flatnonzero(table[:, identity] != elements)[0])
        raise IntegrityViolation(
            f"{bad}*{identity} != {bad}: element {identity} is not a right identity.",
            kind="identity",
            elements=(bad, identity),
        )

    left = table[elements, inv]
    right = table[inv, elements]
    bad_inv = np.flatnonzero((left != identity) | (right != identity))
    if bad_inv.size:
        x = int(bad_inv[0])
        raise IntegrityViolation(
            f"inv[{x}]={int(inv[x])} is not a two-sided inverse of {x}.",
            kind="inverse",
            elements=(x, int(inv[x])),
        )

    for a in range(n):
        lhs = table[table[a]]  # lhs[b, c] = (a*b)*c
        rhs = table[a][table]  # rhs[b, c] = a*(b*c)
        if not np.array_equal(lhs, rhs):
            b, c = (int(v) for v in np.argwhere(lhs != rhs)[0])
            raise IntegrityViolation(
                f"({a}*{b})*{c} != {a}*({b}*{c}): table is not associative.",
                kind="associativity",
                elements=(a, b, c),
            )


__all__ = ["verify_group_table"]
