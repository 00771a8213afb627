"""CLI entry point for draft."""

import json
from pathlib import Path

import click
import yaml

from draft.config import MockStrategy
from draft.errors import DraftError
from draft.loader import load_scheme
from draft.log import setup_logging
from draft.reflect.item import Options
from draft.scheme import Scheme


def _load(target: str) -> Scheme:
    """Load a scheme, turning load failures into CLI errors."""
    try:
        return load_scheme(target)
    except DraftError as e:
        raise click.ClickException(e.message) from e


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """draft — describe API endpoints by example and export them as JSON."""
    setup_logging("DEBUG" if verbose else None)


@main.command()
@click.argument("target")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write to a file instead of stdout.")
@click.option(
    "--mock-strategy",
    default=None,
    type=click.Choice([s.value for s in MockStrategy]),
    help="How example payloads are rebuilt in the exported cases.",
)
@click.option("--seed", default=None, type=int, help="Seed for the smart mock strategy.")
def export(target: str, fmt: str, output: Path | None, mock_strategy: str | None, seed: int | None):
    """Export the scheme named by TARGET (package.module:attr)."""
    scheme = _load(target)

    options = Options.from_settings()
    if mock_strategy is not None:
        options.mock_strategy = MockStrategy(mock_strategy)
    if seed is not None:
        options.mock_seed = seed

    try:
        doc = scheme.to_json(options).dump()
    except DraftError as e:
        raise click.ClickException(e.message) from e

    if fmt == "yaml":
        text = yaml.safe_dump(doc, sort_keys=False, allow_unicode=True)
    else:
        text = json.dumps(doc, indent=2, ensure_ascii=False)

    if output is None:
        click.echo(text)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"Scheme {scheme.get_url() or target} saved to {output}", err=True)


@main.command()
@click.argument("target")
@click.option("--status", default=None, type=int, help="Only show the first case with this status.")
def cases(target: str, status: int | None):
    """List the cases recorded on the scheme named by TARGET."""
    scheme = _load(target)

    if status is not None:
        case = scheme.get_case_by_status(status)
        if case is None:
            raise click.ClickException(f"No case with status {status}")
        found = [case]
    else:
        found = scheme.cases()

    for c in found:
        click.echo(f"{c.status}\t{c.method.value}\t{c.access.value}\t{c.name}")
    click.echo(f"{len(found)} case(s) for {scheme.get_url() or target}", err=True)
