import csv as csv_mod
import json

import pytest
from click.testing import CliRunner

from aminoframe.cli import main

_DNA_FASTA = ">gene\nATGGCCTAAATGAAA\n>other\nATGTGGTGGTATTGC\n"
_PEP_FASTA = ">pep\nMKVLIAAGGHHWY\n"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def dna_fasta(tmp_path):
    path = tmp_path / "in.fasta"
    path.write_text(_DNA_FASTA)
    return path


@pytest.fixture
def pep_fasta(tmp_path):
    path = tmp_path / "pep.fasta"
    path.write_text(_PEP_FASTA)
    return path


def test_help(runner):
    result = runner.invoke(main, ["--help"])

    assert result.exit_code == 0
    assert "--reverse" in result.output


def test_summary_output(runner, dna_fasta):
    result = runner.invoke(main, [str(dna_fasta)])

    assert result.exit_code == 0, result.output
    assert "Sequence Report" in result.output
    assert "gene (Frame 1)" in result.output
    assert "Protein Candidates" in result.output


def test_json_output(runner, dna_fasta):
    result = runner.invoke(main, [str(dna_fasta), "--output", "json"])

    assert result.exit_code == 0, result.output
    assert "molecular_weight" in result.output
    assert "titration" not in result.output


def test_peptide_input(runner, pep_fasta):
    result = runner.invoke(main, [str(pep_fasta), "--type", "peptide", "--ph", "5.5", "--window", "5"])

    assert result.exit_code == 0, result.output
    assert "pH 5.5" in result.output
    assert "window 5" in result.output


def test_frame_option(runner, dna_fasta):
    result = runner.invoke(main, [str(dna_fasta), "--frame", "2", "--output", "json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert [entry["frame"] for entry in data] == [2, 2]
    # frame 2 of the first sequence: TGG CCT AAA TGA -> WPK-
    assert data[0]["properties"]["sequence"] == "WPK-"
    assert data[0]["candidates"] == []


def test_csv_output(runner, dna_fasta, tmp_path):
    csv_file = tmp_path / "candidates.csv"
    result = runner.invoke(main, [str(dna_fasta), "--csv", str(csv_file)])

    assert result.exit_code == 0, result.output
    assert "Candidate table written to" in result.output
    rows = list(csv_mod.DictReader(csv_file.open()))
    # gene: MA, MK ; other: MWWYC
    assert [r["sequence"] for r in rows] == ["MA", "MK", "MWWYC"]
    assert set(rows[0].keys()) >= {"name", "frame", "molecular_weight", "isoelectric_point"}


def test_save_project(runner, dna_fasta, tmp_path):
    project_file = tmp_path / "out.proj"
    result = runner.invoke(main, [str(dna_fasta), "--save", str(project_file), "--output", "json"])

    assert result.exit_code == 0, result.output
    lines = project_file.read_text().splitlines()
    assert lines[0] == "#DNA:gene"
    assert "#DNA:other" in lines


def test_plot_dir(runner, pep_fasta, tmp_path):
    plot_dir = tmp_path / "plots"
    result = runner.invoke(main, [str(pep_fasta), "--type", "peptide", "--plot-dir", str(plot_dir)])

    assert result.exit_code == 0, result.output
    assert (plot_dir / "seq1_frame1_hydropathy.png").exists()
    assert (plot_dir / "seq1_frame1_titration.png").exists()


def test_reverse_requires_dna(runner, pep_fasta):
    result = runner.invoke(main, [str(pep_fasta), "--type", "peptide", "--reverse"])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_even_window_rejected(runner, pep_fasta):
    result = runner.invoke(main, [str(pep_fasta), "--window", "4"])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_malformed_fasta(runner, tmp_path):
    path = tmp_path / "bad.fasta"
    path.write_text(">x\nAC GT\n")
    result = runner.invoke(main, [str(path)])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_empty_fasta(runner, tmp_path):
    path = tmp_path / "empty.fasta"
    path.write_text("")
    result = runner.invoke(main, [str(path)])

    assert result.exit_code == 1
    assert "No sequences" in result.output
