"""CLI entry point for connectflow."""

import logging
import sys

import click

from connectflow.config import VIEWPORT_PADDING, ConnectorSettings
from connectflow.ir.graph import SceneGraph
from connectflow.parsers import parse
from connectflow.renderers.svg import SvgRenderer
from connectflow.routing.engine import route_scene
from connectflow.types import ConnectorType

_TYPE_CHOICES = [value for value, _label in ConnectorType.available()]


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--type", "-t", "connector_type", type=click.Choice(_TYPE_CHOICES), default=None, help="Override the scene's connector type")
@click.option("--color", "color", type=str, default="#000000", help="Stroke color (hex)")
@click.option("--stroke-width", "stroke_width", type=int, default=2, help="Stroke width (1-100)")
@click.option("--opacity", "opacity", type=float, default=100, help="Stroke opacity (0-100)")
@click.option("--padding", "-p", "padding", type=float, default=VIEWPORT_PADDING, help="Margin around the drawing")
@click.option("--paths", "paths_only", is_flag=True, help="Print one 'from -> to: path data' line per connector instead of SVG")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", "verbose", count=True, help="Log routing decisions (-vv for debug)")
def main(
    input: str | None,
    connector_type: str | None,
    color: str,
    stroke_width: int,
    opacity: float,
    padding: float,
    paths_only: bool,
    output: str | None,
    verbose: int,
) -> None:
    """Route connectors between the shapes of a scene and draw them as SVG."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG if verbose > 1 else logging.INFO,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    try:
        settings = ConnectorSettings(color=color, stroke_width=stroke_width, opacity=opacity)
    except ValueError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

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
        graph = SceneGraph.from_ast(parse(text))
    except ValueError as e:
        click.echo(f"parse error:\n{e}", err=True)
        sys.exit(1)

    connectors = route_scene(graph, connector_type)
    if paths_only:
        rendered = "".join(f"{c.from_id} -> {c.to_id}: {c.path.to_svg()}\n" for c in connectors)
    else:
        rendered = SvgRenderer(settings, padding).render(graph, connectors)

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
