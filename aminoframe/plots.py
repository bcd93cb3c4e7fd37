"""Hydropathy and titration plots saved as PNG files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from aminoframe.properties import HydropathyProfile


@dataclass(frozen=True)
class PlotStyle:
    figsize: tuple[float, float] = (10.0, 4.0)
    dpi: int = 150
    line_color: str = "#1f4e79"
    line_width: float = 1.4
    zero_color: str = "#999999"


def _save(fig, path: Path, style: PlotStyle) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=style.dpi, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_hydropathy(
    profile: HydropathyProfile,
    path: str | Path,
    title: str = "Hydropathy",
    style: PlotStyle = PlotStyle(),
) -> Path:
    """Plot window-averaged Kyte-Doolittle scores against residue position."""
    fig, ax = plt.subplots(figsize=style.figsize)
    ax.plot(profile.positions, profile.scores, color=style.line_color, linewidth=style.line_width)
    ax.axhline(0.0, color=style.zero_color, linewidth=0.8, linestyle="--")
    # Bounds always include zero, matching max_score/min_score.
    ax.set_ylim(profile.min_score - 0.5, profile.max_score + 0.5)
    ax.set_xlabel("Residue")
    ax.set_ylabel(f"Score (window {profile.window})")
    ax.set_title(title)
    return _save(fig, Path(path), style)


def plot_titration(
    titration: dict[str, list[float]],
    path: str | Path,
    isoelectric_point: float | None = None,
    title: str = "Net charge vs pH",
    style: PlotStyle = PlotStyle(),
) -> Path:
    fig, ax = plt.subplots(figsize=style.figsize)
    ax.plot(titration["ph"], titration["charge"], color=style.line_color, linewidth=style.line_width)
    ax.axhline(0.0, color=style.zero_color, linewidth=0.8, linestyle="--")
    if isoelectric_point is not None:
        ax.axvline(isoelectric_point, color="#c0392b", linewidth=0.8)
        ax.annotate(f"pI {isoelectric_point:.2f}", (isoelectric_point, 0.0), xytext=(5, 5), textcoords="offset points")
    ax.set_xlim(0.0, 14.0)
    ax.set_xlabel("pH")
    ax.set_ylabel("Net charge")
    ax.set_title(title)
    return _save(fig, Path(path), style)
