"""Per-group invariant records and batch analysis."""

from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .errors import InvalidArgument
from .group import FiniteGroup, subgroup_as_group, tabulate
from .invariants import (
    center,
    commutator_subgroup,
    derived_length,
    exponent,
    nilpotency_class,
)
from .normality import normal_subgroups
from .structure import describe
from .subgroups import enumerate_subgroups


@dataclass(frozen=True)
class AnalysisReport:
    """Invariant record for one group.

    nilpotency_class and derived_length use 0 both for the trivial group and
    for "not nilpotent" / "not solvable"; the functions in
    dedekind.invariants return None for the latter.
    """

    order: int
    structure_description: str
    is_abelian: bool
    is_dedekind: bool
    is_hamiltonian: bool
    subgroup_count: int
    normal_subgroup_count: int
    center_order: int
    center_structure: str
    commutator_order: int
    commutator_structure: str
    nilpotency_class: int
    derived_length: int
    exponent: int
    center_index: int

    def to_dict(self) -> dict:
        return asdict(self)


def analyze_group(
    group: FiniteGroup,
    *,
    max_subgroups: Optional[int] = None,
) -> AnalysisReport:
    """Compute every invariant of `group`; errors propagate and no partial report is built."""
    table = tabulate(group)
    subgroups = enumerate_subgroups(table, max_subgroups=max_subgroups)
    normal_count = len(normal_subgroups(table, subgroups))
    abelian = table.is_abelian
    # Dedekind: every enumerated subgroup passed the normality test
    dedekind = normal_count == len(subgroups)

    z = center(table)
    comm = commutator_subgroup(table)
    z_group = subgroup_as_group(table, z, name=f"Z({table.name})")
    comm_group = subgroup_as_group(table, comm, name=f"[{table.name},{table.name}]")

    return AnalysisReport(
        order=table.order,
        structure_description=describe(table),
        is_abelian=abelian,
        is_dedekind=dedekind,
        is_hamiltonian=dedekind and not abelian,
        subgroup_count=len(subgroups),
        normal_subgroup_count=normal_count,
        center_order=len(z),
        center_structure=describe(z_group),
        commutator_order=len(comm),
        commutator_structure=describe(comm_group),
        nilpotency_class=nilpotency_class(table) or 0,
        derived_length=derived_length(table) or 0,
        exponent=exponent(table),
        center_index=table.order // len(z),
    )


def _analyze_named(item: Tuple[str, FiniteGroup, Optional[int]]) -> Tuple[str, AnalysisReport]:
    name, group, max_subgroups = item
    return name, analyze_group(group, max_subgroups=max_subgroups)


def analyze_groups(
    named_groups: Sequence[Tuple[str, FiniteGroup]],
    *,
    jobs: int = 1,
    max_subgroups: Optional[int] = None,
) -> Dict[str, AnalysisReport]:
    """Analyze independent groups, optionally across worker processes.

    The returned mapping follows the input order regardless of completion order.
    Names must be distinct; a repeated name raises InvalidArgument.
    """
    seen = set()
    for name, _ in named_groups:
        if name in seen:
            raise InvalidArgument(f"Duplicate group name {name!r}; each group needs its own name.")
        seen.add(name)
    tasks = [(name, group, max_subgroups) for name, group in named_groups]
    if jobs <= 1 or len(tasks) <= 1:
        return dict(_analyze_named(task) for task in tasks)
    results: Dict[str, AnalysisReport] = {}
    with ProcessPoolExecutor(max_workers=jobs) as pool:
        futs = {pool.submit(_analyze_named, task): task[0] for task in tasks}
        for fut in as_completed(futs):
            name, report = fut.result()
            results[name] = report
    return {name: results[name] for name, _, _ in tasks}


def report_fields() -> List[str]:
    return list(AnalysisReport.__dataclass_fields__)


__all__ = ["AnalysisReport", "analyze_group", "analyze_groups", "report_fields"]
