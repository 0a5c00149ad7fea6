"""Tests for the command line interface."""

import json
from pathlib import Path
from typing import Callable

import yaml  # type: ignore[import-untyped]
from click.testing import CliRunner
from pytest import MonkeyPatch

from cbaparse import cli


def test_parse_writes_json_files(minimal_path: Path, tmp_path: Path) -> None:
    """Ensure parsing writes the article files and prints the report."""

    out_dir = tmp_path / "out"
    runner = CliRunner()
    result = runner.invoke(
        cli.cli, ["parse", str(minimal_path), "--output", str(out_dir)]
    )

    assert result.exit_code == 0
    assert "Parsed 2 articles with 2 sections from 10 lines" in result.output
    assert "Summary (Expected vs Found):" in result.output
    assert "Articles: found 2 of 42 expected" in result.output

    combined = json.loads((out_dir / "all_articles.json").read_text())
    assert [a["article_number"] for a in combined] == [
        "Article I",
        "Article II",
    ]
    assert (out_dir / "article_01_article_i.json").exists()


def test_parse_writes_yaml(minimal_path: Path, tmp_path: Path) -> None:
    """Ensure YAML output is written when requested."""

    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        [
            "parse",
            str(minimal_path),
            "--output",
            str(tmp_path),
            "--format",
            "yaml",
        ],
    )

    assert result.exit_code == 0
    data = yaml.safe_load((tmp_path / "all_articles.yaml").read_text())
    assert data[1]["title"] == "PLAYER CONTRACTS"


def test_parse_reads_environment(minimal_path: Path, tmp_path: Path) -> None:
    """Ensure the input and output locations come from the environment."""

    out_dir = tmp_path / "env-out"
    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        ["parse"],
        env={
            "CBAPARSE_INPUT": str(minimal_path),
            "CBAPARSE_OUTPUT_DIR": str(out_dir),
        },
    )

    assert result.exit_code == 0
    assert (out_dir / "all_articles.json").exists()


def test_parse_missing_document(tmp_path: Path) -> None:
    """Ensure a missing document aborts the run."""

    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        ["parse", str(tmp_path / "missing.txt"), "--output", str(tmp_path)],
    )

    assert result.exit_code == 1
    assert "Document not found" in result.output
    assert not (tmp_path / "all_articles.json").exists()


def test_parse_requires_input(monkeypatch: MonkeyPatch) -> None:
    """Ensure a missing input path is a usage error."""

    monkeypatch.delenv("CBAPARSE_INPUT", raising=False)
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["parse"])

    assert result.exit_code == 2


def test_parse_strict_fails_on_mismatch(
    minimal_path: Path, tmp_path: Path
) -> None:
    """Ensure strict mode turns verification problems into an error."""

    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        ["parse", str(minimal_path), "--output", str(tmp_path), "--strict"],
    )

    assert result.exit_code == 1
    assert "Verification found problems" in result.output
    assert (tmp_path / "all_articles.json").exists()


def test_verify_prints_report(minimal_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["verify", str(minimal_path)])

    assert result.exit_code == 0
    assert "!! Article I: DEFINITIONS" in result.output
    assert "Expected: 1 sections, Found: 2 sections" in result.output


def test_locate_lists_markers(
    write_document: Callable[[str], Path], toc_text: str
) -> None:
    path = write_document(toc_text)
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["locate", str(path)])

    assert result.exit_code == 0
    assert "Found 2 articles:" in result.output
    assert "Line      7: ARTICLE I        DEFINITIONS" in result.output
    assert "Front matter ends at line 7" in result.output
    assert "front_matter:" in result.output


def test_entries_and_summary(minimal_path: Path, tmp_path: Path) -> None:
    """Ensure a combined record can be flattened and counted."""

    runner = CliRunner()
    runner.invoke(
        cli.cli, ["parse", str(minimal_path), "--output", str(tmp_path)]
    )
    combined = tmp_path / "all_articles.json"
    rows_file = tmp_path / "entries.json"

    result = runner.invoke(
        cli.cli, ["entries", str(combined), "--output", str(rows_file)]
    )
    assert result.exit_code == 0
    rows = json.loads(rows_file.read_text())
    assert [r["order_index"] for r in rows] == [0, 1, 2, 3]

    result = runner.invoke(cli.cli, ["entries", str(combined)])
    assert json.loads(result.output) == rows

    result = runner.invoke(cli.cli, ["summary", str(combined)])
    assert result.exit_code == 0
    assert "Articles: 2" in result.output
    assert "Sections: 2" in result.output
    assert "Total entries: 4" in result.output
