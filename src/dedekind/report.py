"""Text and LaTeX renderings of an AnalysisReport."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

from .analysis import AnalysisReport

RULE = "=" * 70


def _escape(text: str) -> str:
    return text.replace("_", "\\_")


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def _na(value: int, what: str) -> str:
    return f"0 (trivial or not {what})" if value == 0 else str(value)


def format_analysis(name: str, report: AnalysisReport) -> str:
    """Sectioned plain-text summary, one block per group."""
    all_normal = report.normal_subgroup_count == report.subgroup_count
    lines = [
        "",
        RULE,
        f"Analysis of {name}",
        RULE,
        "",
        "Basic Properties:",
        f"  Order: {report.order}",
        f"  Structure: {report.structure_description}",
        "",
        "Classification:",
        f"  Abelian: {str(report.is_abelian).lower()}",
        f"  Dedekind: {str(report.is_dedekind).lower()}",
        f"  Hamiltonian: {str(report.is_hamiltonian).lower()}",
        "",
        "Subgroup Information:",
        f"  Number of subgroups: {report.subgroup_count}",
        f"  Normal subgroups: {report.normal_subgroup_count} / {report.subgroup_count}",
        f"  All subgroups normal: {str(all_normal).lower()}",
        "",
        "Center:",
        f"  Order: {report.center_order}",
        f"  Structure: {report.center_structure}",
        f"  Index: {report.center_index}",
        "",
        "Commutator Subgroup:",
        f"  Order: {report.commutator_order}",
        f"  Structure: {report.commutator_structure}",
        "",
        "Series:",
        f"  Nilpotency class: {_na(report.nilpotency_class, 'nilpotent')}",
        f"  Derived length: {_na(report.derived_length, 'solvable')}",
        f"  Exponent: {report.exponent}",
        "",
        RULE,
    ]
    return "\n".join(lines)


def _rows(report: AnalysisReport) -> List[Tuple[str, str]]:
    return [
        ("Order $|G|$", str(report.order)),
        ("Structure", _escape(report.structure_description)),
        ("Abelian", _yes_no(report.is_abelian)),
        ("Dedekind", _yes_no(report.is_dedekind)),
        ("Hamiltonian", _yes_no(report.is_hamiltonian)),
        ("Number of subgroups", str(report.subgroup_count)),
        ("Normal subgroups", f"{report.normal_subgroup_count} / {report.subgroup_count}"),
        ("Center order $|Z(G)|$", str(report.center_order)),
        ("Center structure", _escape(report.center_structure)),
        ("Index $[G:Z(G)]$", str(report.center_index)),
        ("Commutator order $|G'|$", str(report.commutator_order)),
        ("Commutator structure", _escape(report.commutator_structure)),
        ("Nilpotency class", str(report.nilpotency_class)),
        ("Derived length", str(report.derived_length)),
        ("Exponent", str(report.exponent)),
    ]


def latex_table(name_tex: str, report: AnalysisReport, *, label: Optional[str] = None) -> str:
    """booktabs table of the report; `name_tex` is inserted verbatim into the caption."""
    lines = [
        r"\begin{table}[htbp]",
        r"\centering",
        rf"\caption{{Properties of {name_tex}}}",
    ]
    if label:
        lines.append(rf"\label{{tab:{label}}}")
    lines.extend(
        [
            r"\begin{tabular}{ll}",
            r"\toprule",
            r"Property & Value \\",
            r"\midrule",
        ]
    )
    for prop, value in _rows(report):
        lines.append(f"{prop} & {value} \\\\")
    lines.extend([r"\bottomrule", r"\end{tabular}", r"\end{table}"])
    return "\n".join(lines) + "\n"


def save_latex_table(text: str, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


__all__ = ["format_analysis", "latex_table", "save_latex_table"]
