"""CLI entry point for grid-layout."""

import json
import logging
import sys
from dataclasses import replace

import click

from grid_layout import get_version
from grid_layout.config import LayoutConfig
from grid_layout.errors import LayoutError
from grid_layout.ir.graph import GraphData
from grid_layout.layout.engine import GridLayout
from grid_layout.types import FlowDirection

_FLOWS = [f.value for f in FlowDirection]


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--flow", "-f", "flow", type=click.Choice(_FLOWS, case_sensitive=False), default=None, help="Override flow direction")
@click.option("--compact", "-c", "compact", is_flag=True, help="Use the compact spacing profile")
@click.option("--avoid-obstacles", "avoid_obstacles", is_flag=True, help="Route edges around nodes where possible")
@click.option("--indent", "-i", "indent", type=int, default=2, help="JSON indentation (0 for a single line)")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log layout diagnostics to stderr")
@click.version_option(get_version(), prog_name="grid-layout")
def main(
    input: str | None,
    flow: str | None,
    compact: bool,
    avoid_obstacles: bool,
    indent: int,
    output: str | None,
    verbose: bool,
) -> None:
    """Lay out a JSON graph description and print the JSON grid layout."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        data = json.loads(text) if text.strip() else {}
    except json.JSONDecodeError as e:
        click.echo(f"error: invalid JSON: {e}", err=True)
        sys.exit(1)

    try:
        graph = GraphData.from_dict(data)
        graph = _apply_overrides(graph, flow, compact, avoid_obstacles)
        result = GridLayout().layout(graph)
    except LayoutError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    rendered = json.dumps(result.to_dict(), indent=indent or None) + "\n"

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


def _apply_overrides(graph: GraphData, flow: str | None, compact: bool, avoid_obstacles: bool) -> GraphData:
    """Return ``graph`` with CLI option overrides applied to its config."""
    config = graph.config
    if flow:
        config = replace(config, flow=FlowDirection.parse(flow))
    if compact:
        profile = LayoutConfig.compact(config.flow)
        config = replace(config, node_spacing=profile.node_spacing, rank_spacing=profile.rank_spacing)
    if avoid_obstacles:
        config = replace(config, avoid_obstacles=True)
    return replace(graph, config=config)


if __name__ == "__main__":
    main()
