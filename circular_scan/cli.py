"""Click CLI with check, graph, and serve subcommands."""

from __future__ import annotations

from pathlib import Path

import click

from circular_scan import __version__
from circular_scan.config import load_config
from circular_scan.errors import CircularScanError
from circular_scan.exporter import format_report, render_dot, write_dot, write_json, write_report
from circular_scan.exporter.dot_exporter import RENDER_FORMATS
from circular_scan.log import configure_logging
from circular_scan.models import AnalysisConfig, AnalysisResult, RunOutcome
from circular_scan.pipeline import run_analysis

EXIT_FATAL = 2


class FatalError(click.ClickException):
    """Pre-flight failure. Exit status is distinct from every run outcome."""
    exit_code = EXIT_FATAL


def _analysis_options(func):
    options = [
        click.option("--workers", "-w", type=int, default=None, help="Worker threads (clamped to [1, files])"),
        click.option("--only-project/--all-imports", default=None,
                     help="Keep only imports that resolve inside the project (default) or every import"),
        click.option("--max-depth", type=int, default=None, help="Maximum traversal depth"),
        click.option("--exclude-dir", "exclude_dirs", multiple=True, help="Directory name pattern to skip"),
        click.option("--exclude-file", "exclude_files", multiple=True, help="File name or relative path pattern to skip"),
        click.option("--deterministic/--completion-order", default=None,
                     help="Sort files before building the graph (default) or keep scan completion order"),
        click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False, path_type=Path),
                     help="YAML config file (default: <root>/.circular-scan.yaml)"),
        click.option("-v", "--verbose", count=True, help="More log output (-vv for debug)"),
        click.option("-q", "--quiet", is_flag=True, help="Only log errors"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_config(project_root: Path, config_path: Path | None, **overrides) -> AnalysisConfig:
    overrides["exclude_dirs"] = list(overrides.get("exclude_dirs") or []) or None
    overrides["exclude_files"] = list(overrides.get("exclude_files") or []) or None
    try:
        return load_config(project_root, config_path, overrides)
    except CircularScanError as e:
        raise FatalError(str(e))


def _run(config: AnalysisConfig) -> AnalysisResult:
    try:
        return run_analysis(config)
    except CircularScanError as e:
        raise FatalError(str(e))


def _export_graph(result: AnalysisResult, target: Path) -> None:
    target = Path(target)
    dot_path = target if target.suffix == ".dot" else target.with_suffix(".dot")
    write_dot(result.graph, dot_path, highlight=result.cycles)
    click.echo(f"Graph description written to {dot_path}")

    if target.suffix.lstrip(".").lower() in RENDER_FORMATS:
        rendered = render_dot(dot_path, target)
        if rendered:
            click.echo(f"Graph rendered to {rendered}")


@click.group()
@click.version_option(version=__version__)
def cli():
    """circular-scan: Find circular imports in a Python project."""


@cli.command()
@click.argument("project_root", type=click.Path(path_type=Path), default=".")
@_analysis_options
@click.option("-o", "--output", "output_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Also write the report to this file")
@click.option("--json", "json_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Write a JSON summary to this file")
@click.option("--graph", "graph_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Write the import graph (.dot, or .png/.svg/.pdf rendered with Graphviz)")
@click.pass_context
def check(
    ctx: click.Context,
    project_root: Path,
    workers: int | None,
    only_project: bool | None,
    max_depth: int | None,
    exclude_dirs: tuple[str, ...],
    exclude_files: tuple[str, ...],
    deterministic: bool | None,
    config_path: Path | None,
    verbose: int,
    quiet: bool,
    output_path: Path | None,
    json_path: Path | None,
    graph_path: Path | None,
):
    """Scan PROJECT_ROOT and report circular imports.

    Exit status: 0 no cycles, 1 cycles found, 3 no Python files, 2 error.
    """
    configure_logging(verbose, quiet)
    config = _build_config(
        project_root, config_path,
        workers=workers, only_project=only_project, max_depth=max_depth,
        exclude_dirs=exclude_dirs, exclude_files=exclude_files,
        deterministic=deterministic, verbosity=verbose or None,
    )
    configure_logging(config.verbosity, quiet)
    result = _run(config)

    if result.outcome is RunOutcome.NO_INPUT_FILES:
        click.echo(click.style(f"No Python files found under {config.project_root}.", fg="yellow"))
        ctx.exit(result.outcome.exit_code)

    report = format_report(result.cycles, result.graph.locations, truncated=result.search.truncated)
    color = "red" if result.cycles else "green"
    click.echo(click.style(report.rstrip("\n"), fg=color))
    click.echo(
        f"\nScanned {len(result.files)} file(s), {len(result.graph.edges)} module(s), "
        f"{len(result.cycles)} cycle(s)."
    )

    if output_path:
        write_report(report, output_path)
    if json_path:
        write_json(result, json_path)
    if graph_path:
        _export_graph(result, graph_path)

    ctx.exit(result.outcome.exit_code)


@cli.command()
@click.argument("project_root", type=click.Path(path_type=Path))
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@_analysis_options
@click.pass_context
def graph(
    ctx: click.Context,
    project_root: Path,
    output: Path,
    workers: int | None,
    only_project: bool | None,
    max_depth: int | None,
    exclude_dirs: tuple[str, ...],
    exclude_files: tuple[str, ...],
    deterministic: bool | None,
    config_path: Path | None,
    verbose: int,
    quiet: bool,
):
    """Export the import graph of PROJECT_ROOT to OUTPUT (.dot, .png, .svg, ...).

    Exit status matches `check`: 0 no cycles, 1 cycles found, 3 no Python files, 2 error.
    """
    configure_logging(verbose, quiet)
    config = _build_config(
        project_root, config_path,
        workers=workers, only_project=only_project, max_depth=max_depth,
        exclude_dirs=exclude_dirs, exclude_files=exclude_files,
        deterministic=deterministic, verbosity=verbose or None,
    )
    configure_logging(config.verbosity, quiet)
    result = _run(config)

    if result.outcome is RunOutcome.NO_INPUT_FILES:
        click.echo(click.style(f"No Python files found under {config.project_root}.", fg="yellow"))
        ctx.exit(result.outcome.exit_code)

    _export_graph(result, output)
    ctx.exit(result.outcome.exit_code)


@cli.command()
@click.option("--port", "-p", default=8430, help="Port number")
@click.option("--host", default="127.0.0.1", help="Host address")
def serve(port: int, host: str):
    """Start the web API."""
    try:
        import uvicorn
    except ImportError:
        raise click.ClickException(
            "uvicorn is required for the web API. "
            "Install with: pip install 'circular-scan[web]'"
        )

    from circular_scan.web import create_app

    click.echo(f"Starting circular-scan web API at http://{host}:{port}")
    uvicorn.run(create_app(), host=host, port=port, log_level="info")


if __name__ == "__main__":
    cli()
