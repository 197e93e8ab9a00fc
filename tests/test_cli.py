import json

from dedekind.cli import HAMILTONIAN_EXAMPLES, hamiltonian_examples, main


def test_analyze_json(capsys) -> None:
    assert main(["analyze", "C5", "q8"]) == 0
    capsys.readouterr()
    assert main(["analyze", "C5", "q8", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert list(payload) == ["C5", "Q8"]
    assert payload["C5"]["order"] == 5
    assert payload["Q8"]["is_hamiltonian"] is True


def test_analyze_text(capsys) -> None:
    assert main(["analyze", "S3"]) == 0
    out = capsys.readouterr().out
    assert "Analysis of S3" in out
    assert "Dedekind: false" in out


def test_analyze_bad_spec_reports_error(capsys) -> None:
    assert main(["analyze", "C0"]) == 1
    assert "[error]" in capsys.readouterr().err


def test_analyze_subgroup_limit(capsys) -> None:
    assert main(["analyze", "C2xC2xC2", "--max-subgroups", "3"]) == 1
    assert "[error]" in capsys.readouterr().err


def test_hamiltonian_examples_orders() -> None:
    groups = hamiltonian_examples()
    assert [g.order for g in groups] == [8, 16, 24, 96]
    assert len(groups) == len(HAMILTONIAN_EXAMPLES)


def test_tables_writes_latex_files(tmp_path, capsys) -> None:
    out = tmp_path / "tables"
    assert main(["tables", "--out", str(out)]) == 0
    for _, _, stem in HAMILTONIAN_EXAMPLES:
        text = (out / f"{stem}.tex").read_text(encoding="utf-8")
        assert "Hamiltonian & Yes" in text
        assert f"\\label{{tab:{stem.replace('_', '')}}}" in text
    assert "All LaTeX tables generated successfully" in capsys.readouterr().out


def test_analyze_rejects_specs_naming_the_same_group(capsys) -> None:
    assert main(["analyze", "C5", "Z5", "--json"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Duplicate group name 'C5'" in captured.err
