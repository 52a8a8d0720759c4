from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def plot_convergence(
    iterations: Sequence[int],
    differences: Sequence[float],
    outpath: Optional[Path],
    *,
    eps: float,
    show: bool,
) -> None:
    """Next-term magnitude per iteration on a log scale, with the eps line."""
    if not iterations:
        return

    fig = plt.figure()
    plt.semilogy(list(iterations), [abs(d) for d in differences], marker="o")
    plt.axhline(eps, color="gray", linestyle="--", label=f"eps = {eps:g}")
    plt.title("Taylor series convergence")
    plt.xlabel("iteration")
    plt.ylabel("|next term|")
    plt.legend()

    if show or outpath is None:
        plt.show()
    else:
        _ensure_dir(outpath.parent)
        fig.savefig(outpath, dpi=200, bbox_inches="tight")
        plt.close(fig)
