#!/usr/bin/env python3
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from pugplot.errors import DecodeError, FetchError, NoConformerError, PlotError
from pugplot.mapper import Collection, Empty, decode_response
from pugplot.plotter import BondPlotter, ensure_output_dir
from pugplot.query import PubChemClient, filter_names
from pugplot.report import render_compound
from pugplot.settings import PNG_DIR, PUBCHEM_NAME_URL, RETURN_TYPE, TIMEOUT, Settings

USAGE = "usage :: pugrun <compound_name> <compound_name> ... (at least one compound name)"

app = typer.Typer(
    help="Look up compounds by name on PubChem, print a report and plot their bonds"
)
err_console = Console(stderr=True, soft_wrap=True)


def warn(message: str, style: str = "yellow"):
    err_console.print(message, style=style, markup=False, highlight=False)


# --- per-compound pipeline ---
def process_name(client: PubChemClient, plotter: BondPlotter, name: str):
    """Fetch, report and plot one name. Every failure is reported and swallowed here."""
    try:
        result = decode_response(client.fetch(name))
    except FetchError as e:
        warn(f"Fetch failed for {name!r}: {e}", style="red")
        return
    except DecodeError as e:
        warn(f"Could not decode response for {name!r}: {e}", style="red")
        return

    if isinstance(result, Empty):
        warn(f"No result for {name!r}: {result.reason}")
        return
    if isinstance(result, Collection) and result.skipped:
        warn(f"Skipped {result.skipped} undecodable compound record(s) for {name!r}")

    for compound in result.compounds:
        typer.echo(render_compound(compound))

    # one image per name: the first compound that has something to draw
    drawable = [c for c in result.compounds if c.coords is not None and c.bonds is not None]
    if not drawable:
        return
    try:
        segments = plotter.plot_compound(name, drawable[0])
    except NoConformerError as e:
        warn(f"Plot skipped for {name!r}: {e}")
        return
    except PlotError as e:
        warn(f"Plot failed for {name!r}: {e}", style="red")
        return
    warn(f"Saved {plotter.output_path(name)} ({len(segments)} bonds)", style="green")


@app.command(context_settings={"ignore_unknown_options": True})
def run(
    names: Optional[List[str]] = typer.Argument(None, help="Compound names to look up"),
    out_dir: Path = typer.Option(PNG_DIR, "--out-dir", envvar="PUGPLOT_OUT_DIR", help="Directory for bond plots"),
    base_url: str = typer.Option(PUBCHEM_NAME_URL, "--base-url", envvar="PUGPLOT_BASE_URL", help="PUG REST compound/name endpoint"),
    suffix: str = typer.Option(RETURN_TYPE, "--suffix", envvar="PUGPLOT_SUFFIX", help="Response format suffix"),
    timeout: float = typer.Option(TIMEOUT, "--timeout", envvar="PUGPLOT_TIMEOUT", help="HTTP timeout in seconds"),
):
    if not names:
        typer.echo(USAGE)
        return

    queries = filter_names(names)
    if not queries:
        warn("ERROR -> None of the compounds entered are names (all arguments are numeric)", style="red")
        return

    settings = Settings(base_url=base_url, suffix=suffix, out_dir=out_dir, timeout=timeout)
    ensure_output_dir(settings.out_dir)
    plotter = BondPlotter(settings=settings)

    with PubChemClient(settings) as client:
        for name in queries:
            process_name(client, plotter, name)


if __name__ == "__main__":
    app()
