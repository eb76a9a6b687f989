"""
plotter.py

2-D bond schematic of a compound, one PNG per compound name.

Only the first conformer of the first coordinate set is drawn, on a fixed
0-10 window; coordinates outside it are clipped.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from .errors import NoConformerError, PlotError
from .models import AtomTable, BondTable, Compound, CoordinateSet
from .settings import Settings

WIDTH_PX, HEIGHT_PX = 800, 600
DPI = 100
DOMAIN = (0.0, 10.0)
BOND_COLOR = "red"

Point = Tuple[float, float]
Segment = Tuple[Point, Point]


def ensure_output_dir(out_dir: Path) -> Path:
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    return out_dir


def atom_lookup(coord_set: CoordinateSet, atoms: Optional[AtomTable] = None) -> Optional[Dict[int, int]]:
    """
    Map atom id -> position in the conformer's x/y arrays.
    Returns None when neither the coordinate set nor the atom table lists
    atom ids; callers then use the raw bond value as the position.
    """
    if coord_set.aid is not None:
        ids = coord_set.aid
    elif atoms is not None:
        ids = atoms.aid
    else:
        return None
    return {aid: i for i, aid in enumerate(ids)}


def bond_segments(
    coords: Sequence[CoordinateSet],
    bonds: Sequence[BondTable],
    atoms: Optional[AtomTable] = None,
) -> List[Segment]:
    """Resolve every bond endpoint to a point, or raise before anything is drawn."""
    if not coords or not coords[0].conformers:
        raise NoConformerError("no conformers available for plotting")

    coord_set = coords[0]
    conformer = coord_set.conformers[0]
    lookup = atom_lookup(coord_set, atoms)

    def resolve(aid: int) -> Point:
        index = aid if lookup is None else lookup.get(aid)
        if index is None:
            raise PlotError(f"bond endpoint atom {aid} has no coordinates")
        if not 0 <= index < len(conformer):
            raise PlotError(
                f"bond endpoint atom {aid} maps to point {index}, "
                f"but the conformer has {len(conformer)} points"
            )
        return conformer.point(index)

    segments = []
    for table in bonds:
        for aid1, aid2, _order in table.bonds():
            segments.append((resolve(aid1), resolve(aid2)))
    return segments


class BondPlotter:
    def __init__(self, out_dir: Optional[Path] = None, settings: Optional[Settings] = None):
        settings = settings or Settings()
        self.out_dir = Path(out_dir) if out_dir is not None else settings.out_dir

    def output_path(self, name: str) -> Path:
        return self.out_dir / f"{name}.png"

    def plot(
        self,
        name: str,
        coords: Sequence[CoordinateSet],
        bonds: Sequence[BondTable],
        atoms: Optional[AtomTable] = None,
    ) -> List[Segment]:
        """
        Draw each bond as a line segment and save <out_dir>/<name>.png.
        Returns the segments drawn. Raises PlotError (no file written) when
        an endpoint cannot be placed, NoConformerError when there is no
        conformer to draw from.
        """
        segments = bond_segments(coords, bonds, atoms)
        out_path = self.output_path(name)

        fig = Figure(figsize=(WIDTH_PX / DPI, HEIGHT_PX / DPI), dpi=DPI, facecolor="white")
        FigureCanvasAgg(fig)
        ax = fig.add_subplot()
        # names are labels, not TeX
        ax.set_title(name, fontsize=24, parse_math=False)
        ax.set_xlim(*DOMAIN)
        ax.set_ylim(*DOMAIN)
        ax.set_xlabel("x")
        ax.set_ylabel("y")
        ax.grid(True)

        for (x1, y1), (x2, y2) in segments:
            ax.plot([x1, x2], [y1, y2], color=BOND_COLOR)

        try:
            fig.savefig(out_path, dpi=DPI, facecolor="white")
        except Exception as e:
            out_path.unlink(missing_ok=True)
            raise PlotError(f"could not render {out_path}: {e}") from e

        return segments

    def plot_compound(self, name: str, compound: Compound) -> List[Segment]:
        return self.plot(name, compound.coords or (), compound.bonds or (), atoms=compound.atoms)
