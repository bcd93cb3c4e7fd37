import logging
from pathlib import Path

import pandas as pd
import rich_click as click
from rich.console import Console
from rich.logging import RichHandler

from aminoframe.fasta import FastaFormatError, read_fasta
from aminoframe.plots import plot_hydropathy, plot_titration
from aminoframe.project import CalculationSettings, Project, SequenceKind, save_project
from aminoframe.properties import DEFAULT_HYDROPATHY_WINDOW, DEFAULT_PH
from aminoframe.report import print_candidates, print_report, results_to_json, summarize_candidates
from aminoframe.translation import ReadingFrame

console = Console()
logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _fail(message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {message}")
    raise SystemExit(1)


def _write_csv(path: Path, tables: list[pd.DataFrame]) -> None:
    df = pd.concat(tables, ignore_index=True) if tables else pd.DataFrame()
    df.to_csv(path, index=False)


def _save_plots(plot_dir: Path, stem: str, properties: dict) -> None:
    if properties["hydropathy"] is not None:
        plot_hydropathy(properties["hydropathy"], plot_dir / f"{stem}_hydropathy.png", title=f"Hydropathy: {stem}")
    if properties["titration"] is not None:
        plot_titration(
            properties["titration"],
            plot_dir / f"{stem}_titration.png",
            isoelectric_point=properties["isoelectric_point"],
            title=f"Net charge vs pH: {stem}",
        )


@click.command()
@click.argument("fasta", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--type", "seq_type",
    type=click.Choice(["dna", "rna", "peptide"], case_sensitive=False),
    default="dna",
    show_default=True,
    help="How to read the FASTA sequences.",
)
@click.option("--reverse", is_flag=True, default=False, help="Read DNA from the complementary strand (3' to 5').")
@click.option("--frame", type=click.IntRange(1, 3), default=1, show_default=True, help="Reading frame to analyse.")
@click.option("--ph", type=float, default=DEFAULT_PH, show_default=True, help="pH used for the net charge.")
@click.option(
    "--window",
    type=int,
    default=DEFAULT_HYDROPATHY_WINDOW,
    show_default=True,
    help="Hydropathy sliding-window size (odd, at least 3).",
)
@click.option(
    "--output", "output_fmt",
    type=click.Choice(["summary", "json"]),
    default="summary",
    show_default=True,
    help="Output format.",
)
@click.option("--csv", "csv_path", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Write a per-candidate property table to this CSV file.")
@click.option("--save", "save_path", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Save all sequences as a project file.")
@click.option("--plot-dir", type=click.Path(file_okay=False, path_type=Path), default=None, help="Write hydropathy and titration PNGs here.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def main(
    fasta: Path,
    seq_type: str,
    reverse: bool,
    frame: int,
    ph: float,
    window: int,
    output_fmt: str,
    csv_path: Path | None,
    save_path: Path | None,
    plot_dir: Path | None,
    verbose: bool,
) -> None:
    """Translate the sequences in FASTA and report their biochemical properties."""
    _configure_logging(verbose)

    kind = SequenceKind.parse(seq_type)
    if reverse and kind is not SequenceKind.DNA:
        _fail("--reverse is only supported for DNA sequences.")

    try:
        settings = CalculationSettings(ph=ph, hydropathy_window=window)
    except ValueError as e:
        _fail(str(e))

    try:
        records = read_fasta(fasta)
    except (FastaFormatError, OSError) as e:
        _fail(f"Could not read {fasta}: {e}")
    if not records:
        _fail(f"No sequences found in {fasta}")

    project = Project(settings=settings)
    for name, text in records:
        project.import_sequence(kind, name, text, reverse=reverse)

    reading_frame = ReadingFrame(frame - 1)
    results = []
    tables = []
    for sequence_id, record in project.sequences():
        project.select(sequence_id, reading_frame)
        properties = project.sequence_properties()
        candidates = record.bake_candidates(reading_frame)
        df = summarize_candidates(candidates, ph=settings.ph)
        logger.debug("%s: %d candidate(s) in %s", record.name, len(candidates), reading_frame.label)

        results.append({
            "id": sequence_id,
            "name": record.name,
            "type": kind.name.lower(),
            "frame": frame,
            "properties": properties,
            "candidates": df.to_dict(orient="records"),
        })
        tables.append(df.assign(name=record.name, frame=frame))

        if output_fmt == "summary":
            label = record.name if kind is SequenceKind.PEPTIDE else f"{record.name} ({reading_frame.label})"
            print_report(console, properties, label=label)
            print_candidates(console, df)

        if plot_dir is not None:
            _save_plots(plot_dir, f"seq{sequence_id}_frame{frame}", properties)

    if output_fmt == "json":
        console.print_json(results_to_json(results))

    if csv_path is not None:
        _write_csv(csv_path, tables)
        console.print(f"Candidate table written to [bold]{csv_path}[/bold]")

    if save_path is not None:
        try:
            save_project(project, save_path)
        except OSError as e:
            _fail(f"Could not save project: {e}")
        console.print(f"Project saved to [bold]{save_path}[/bold]")


if __name__ == "__main__":
    main()
