"""Plots for the 5-qubit code decoder and Monte Carlo runs.

Typical usage example:

  >>> from FiveQubitCode.visualizer import plot_syndrome_table
  >>> ax = plot_syndrome_table()
  >>> ax.figure.savefig("syndromes.png")
"""

from logging import warning
from typing import Mapping, Optional

import matplotlib as mpl
import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns
from matplotlib.axes import Axes
from matplotlib.patches import Patch, Rectangle
from numpy.typing import NDArray

from .core.code import ERROR_TYPES, N_QUBITS, ErrorEvent, Syndrome
from .decoder.lookup_decoder import SYNDROME_TABLE
from .pauli import Pauli

sns.set_style("darkgrid")
mpl.rcParams.update(
    {
        "font.size": 12,
        "grid.color": "0.5",
        "grid.linestyle": "--",
        "grid.linewidth": 0.6,
        "xtick.color": "black",
        "ytick.color": "black",
    }
)


def plot_syndrome_table(
    table: Mapping[int, Optional[ErrorEvent]] = SYNDROME_TABLE,
    ax: Optional[Axes] = None,
    show: bool = False,
) -> Axes:
    """Draw the decoder table as a qubit x Pauli grid.

    Each cell is coloured by the Pauli type and labelled with the syndrome
    value and its ``s4 s3 s2 s1`` bit string.

    Args:
        table: syndrome value -> error event (None entries are skipped).
        ax: axes to draw into; a new figure is created when omitted.
        show: call ``plt.show()`` after drawing.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 4))

    lookup = {event: value for value, event in table.items() if event is not None}
    for row, pauli in enumerate(ERROR_TYPES):
        for q in range(N_QUBITS):
            y = len(ERROR_TYPES) - 1 - row
            event = ErrorEvent(q, pauli)
            value = lookup.get(event)
            ax.add_patch(
                Rectangle(
                    (q - 0.5, y - 0.5), 1.0, 1.0,
                    facecolor=pauli.color if value is not None else "#FFFFFF",
                    edgecolor="k",
                    linewidth=0.75,
                )
            )
            text = "?" if value is None else f"{value}\n{Syndrome.from_value(value).msb_first()}"
            ax.text(q, y, text, ha="center", va="center", fontsize=10)

    ax.set_xlim(-0.5, N_QUBITS - 0.5)
    ax.set_ylim(-0.5, len(ERROR_TYPES) - 0.5)
    ax.set_xticks(np.arange(N_QUBITS))
    ax.set_xticklabels([f"q{q}" for q in range(N_QUBITS)])
    ax.set_yticks(np.arange(len(ERROR_TYPES)))
    ax.set_yticklabels([str(p) for p in reversed(ERROR_TYPES)])
    ax.set_aspect("equal")
    ax.set_title("Syndrome of each single-qubit error")
    ax.legend(
        handles=[Patch(facecolor=p.color, edgecolor="black", label=f"{p} error") for p in ERROR_TYPES],
        handlelength=1,
        handleheight=1,
        loc="lower center",
        bbox_to_anchor=(0.5, -0.35),
        ncol=len(ERROR_TYPES),
        fontsize=10,
    )
    if show:
        plt.show()
    return ax


def plot_syndrome_counts(
    counts: NDArray[np.int64],
    table: Mapping[int, Optional[ErrorEvent]] = SYNDROME_TABLE,
    ax: Optional[Axes] = None,
    show: bool = False,
) -> Axes:
    """Bar chart of observed syndrome values, coloured by the decoded Pauli type."""
    counts = np.asarray(counts)
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 4))
    if counts.sum() == 0:
        warning("No syndrome counts to plot")

    values = np.arange(len(counts))
    colors = []
    for v in values:
        event = table.get(int(v))
        colors.append(event.pauli.color if event is not None else Pauli.I.color)
    ax.bar(values, counts, color=colors, edgecolor="black", linewidth=0.75)

    labels = []
    for v in values:
        event = table.get(int(v))
        labels.append(f"{v}\n{event}" if event is not None else f"{v}\n-")
    ax.set_xticks(values)
    ax.set_xticklabels(labels, fontsize=8)
    ax.set_xlabel("syndrome value / decoded error")
    ax.set_ylabel("rounds")
    if show:
        plt.show()
    return ax


__all__ = ["plot_syndrome_table", "plot_syndrome_counts"]
