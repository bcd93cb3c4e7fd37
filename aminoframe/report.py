"""Rich terminal output, JSON export and tabular candidate summaries."""

import json

import pandas as pd
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from aminoframe.properties import (
    DEFAULT_PH,
    HydropathyProfile,
    extinction_coefficient,
    isoelectric_point,
    molecular_weight,
    net_charge,
    peptide_formula,
)

CANDIDATE_COLUMNS = [
    "candidate",
    "length",
    "molecular_weight",
    "isoelectric_point",
    "net_charge",
    "extinction_coefficient",
    "formula",
    "sequence",
]


def summarize_candidates(candidates: list[str], ph: float = DEFAULT_PH) -> pd.DataFrame:
    """One row of core properties per protein candidate."""
    rows = []
    for i, candidate in enumerate(candidates, 1):
        weight = molecular_weight(candidate)
        rows.append({
            "candidate": i,
            "length": len(candidate),
            "molecular_weight": round(weight, 3) if weight is not None else None,
            "isoelectric_point": isoelectric_point(candidate),
            "net_charge": net_charge(candidate, ph),
            "extinction_coefficient": extinction_coefficient(candidate),
            "formula": str(peptide_formula(candidate)),
            "sequence": candidate,
        })
    return pd.DataFrame(rows, columns=CANDIDATE_COLUMNS)


def _json_default(value):
    if isinstance(value, HydropathyProfile):
        return value.as_dict()
    return str(value)


def _report_data(report: dict, include_titration: bool) -> dict:
    data = dict(report)
    if not include_titration:
        data.pop("titration", None)
    return data


def report_to_json(report: dict, include_titration: bool = False) -> str:
    """Serialise a property report; the 1400-point titration series is left out unless asked for."""
    return json.dumps(_report_data(report, include_titration), indent=2, default=_json_default)


# ── Rich terminal output ─────────────────────────────────────────────────

def _fmt(value, spec: str = ".2f", unit: str = "") -> str:
    if value is None:
        return "N/A"
    return f"{value:{spec}}{unit}"


def _charge_text(value: float | None) -> Text:
    if value is None:
        return Text("N/A", style="dim")
    style = "bold blue" if value > 0 else "bold red" if value < 0 else "bold"
    return Text(f"{value:+.1f}", style=style)


def print_report(console: Console, report: dict, label: str | None = None) -> None:
    """Print a single amino-acid sequence report using Rich formatting."""
    console.print()

    header = f"{report['length']} residues    {report['formula'] or 'N/A'}"
    if label:
        header = f"{label}    {header}"
    console.print(Panel(header, title="Sequence Report", border_style="blue", expand=False))

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Property", style="bold")
    table.add_column("Value", justify="right")
    table.add_column("", style="dim")

    table.add_row("Molecular weight", _fmt(report["molecular_weight"], ".2f", " g/mol"), "")
    table.add_row("Net charge", _charge_text(report["net_charge"]), f"at pH {report['ph']}")
    table.add_row("Isoelectric point", _fmt(report["isoelectric_point"]), "")
    table.add_row("Extinction coefficient", _fmt(report["extinction_coefficient"], "d"), "M-1 cm-1, cystines")
    table.add_row("Extinction coefficient", _fmt(report["extinction_coefficient_reduced"], "d"), "M-1 cm-1, reduced")

    console.print()
    console.print(table)
    console.print()

    hydropathy = report["hydropathy"]
    console.print(Rule("Hydropathy", style="dim"))
    if hydropathy is None:
        console.print(f"  Sequence too short for window {report['window']}", style="dim")
    else:
        console.print(
            f"  window {hydropathy.window}  "
            f"max {hydropathy.max_score:+.2f}  "
            f"min {hydropathy.min_score:+.2f}  "
            f"mean {hydropathy.average:+.2f}"
        )
    console.print()


def print_candidates(console: Console, df: pd.DataFrame, title: str = "Protein Candidates") -> None:
    """Print the candidate summary as a Rich table."""
    console.print()
    if df.empty:
        console.print("  No protein candidates (no Met start codon)", style="yellow")
        console.print()
        return

    table = Table(title=title, show_header=True, header_style="bold", padding=(0, 1))
    table.add_column("#", justify="right", style="bold")
    table.add_column("Length", justify="right")
    table.add_column("MW", justify="right")
    table.add_column("pI", justify="right")
    table.add_column("Charge", justify="right")
    table.add_column("Sequence", overflow="ellipsis", max_width=40)

    for row in df.itertuples(index=False):
        table.add_row(
            str(row.candidate),
            str(row.length),
            _fmt(row.molecular_weight),
            _fmt(row.isoelectric_point),
            _charge_text(row.net_charge),
            row.sequence,
        )

    console.print(table)
    console.print()


def results_to_json(results: list[dict], include_titration: bool = False) -> str:
    """Serialise per-sequence CLI results (name, frame, properties, candidates)."""
    data = []
    for result in results:
        entry = dict(result)
        entry["properties"] = _report_data(result["properties"], include_titration)
        data.append(entry)
    return json.dumps(data, indent=2, default=_json_default)
