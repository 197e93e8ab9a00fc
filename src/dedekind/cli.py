from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .analysis import analyze_groups
from .constructors import (
    canonical_group_spec,
    construct_cyclic,
    construct_direct_product,
    construct_quaternion8,
    group_from_spec,
)
from .errors import IntegrityViolation, InvalidArgument, ResourceExceeded
from .group import FiniteGroup
from .report import format_analysis, latex_table, save_latex_table

# (display name, LaTeX name, file stem) for the Hamiltonian examples.
HAMILTONIAN_EXAMPLES: Tuple[Tuple[str, str, str], ...] = (
    ("Q8 (Quaternion Group)", r"$Q_8$", "q8"),
    ("Q8 x Z/2Z", r"$Q_8 \times \mathbb{Z}/2\mathbb{Z}$", "q8_z2"),
    ("Q8 x Z/3Z", r"$Q_8 \times \mathbb{Z}/3\mathbb{Z}$", "q8_z3"),
    (
        "Q8 x (Z/2Z)^2 x Z/3Z",
        r"$Q_8 \times (\mathbb{Z}/2\mathbb{Z})^2 \times \mathbb{Z}/3\mathbb{Z}$",
        "q8_z2z2_z3",
    ),
)


def hamiltonian_examples() -> List[FiniteGroup]:
    q8 = construct_quaternion8()
    z2 = construct_cyclic(2)
    z3 = construct_cyclic(3)
    z2_2 = construct_direct_product(z2, construct_cyclic(2))
    return [
        q8,
        construct_direct_product(q8, z2),
        construct_direct_product(q8, z3),
        construct_direct_product(q8, z2_2, z3),
    ]


def _run_analyze(args: argparse.Namespace) -> int:
    named = []
    for spec in args.specs:
        named.append((canonical_group_spec(spec), group_from_spec(spec)))
    print(f"[analyze] groups={len(named)} jobs={args.jobs}", file=sys.stderr)
    reports = analyze_groups(named, jobs=args.jobs, max_subgroups=args.max_subgroups)
    if args.json:
        payload = {name: report.to_dict() for name, report in reports.items()}
        print(json.dumps(payload, indent=2, sort_keys=True))
        return 0
    for name, report in reports.items():
        print(format_analysis(name, report))
    return 0


def _run_tables(args: argparse.Namespace) -> int:
    out_dir = Path(args.out)
    groups = hamiltonian_examples()
    named = [(display, group) for (display, _, _), group in zip(HAMILTONIAN_EXAMPLES, groups)]
    print(f"[tables] groups={len(named)} jobs={args.jobs} out={out_dir}", file=sys.stderr)
    reports = analyze_groups(named, jobs=args.jobs, max_subgroups=args.max_subgroups)
    for display, name_tex, stem in HAMILTONIAN_EXAMPLES:
        report = reports[display]
        print(format_analysis(display, report))
        text = latex_table(name_tex, report, label=stem.replace("_", ""))
        path = save_latex_table(text, out_dir / f"{stem}.tex")
        print(f"[done] {display} -> {path}", file=sys.stderr)
    print("")
    print("=" * 70)
    print(f"All LaTeX tables generated successfully in {out_dir}")
    print("=" * 70)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dedekind",
        description="Finite-group invariants and Dedekind/Hamiltonian classification.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Analyze groups given as specs like Q8xC2 or C5.")
    analyze.add_argument(
        "specs",
        nargs="+",
        help=(
            "Group specs (C<n>, Q8, D<2n>, Dic<n>, S<n>, A<n>, V4, joined by x); "
            "specs naming the same group (e.g. C5 and Z5) are rejected."
        ),
    )
    analyze.add_argument("--json", action="store_true", help="Print reports as JSON keyed by spec.")

    tables = sub.add_parser("tables", help="Write LaTeX tables for the Hamiltonian examples.")
    tables.add_argument("--out", default="tex/tables", help="Output directory (default: tex/tables).")

    for p in (analyze, tables):
        p.add_argument("--jobs", type=int, default=1, help="Parallel worker processes (default: 1).")
        p.add_argument(
            "--max-subgroups",
            type=int,
            default=None,
            help="Subgroup enumeration ceiling (default: $DEDEKIND_MAX_SUBGROUPS or 20000).",
        )

    args = parser.parse_args(argv)
    try:
        if args.command == "analyze":
            return _run_analyze(args)
        if args.command == "tables":
            return _run_tables(args)
    except (InvalidArgument, ResourceExceeded, IntegrityViolation) as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1
    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
