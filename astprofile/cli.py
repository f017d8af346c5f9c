"""CLI entry point for astprofile."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from astprofile.config import (
    DEFAULT_FORMAT,
    DEFAULT_MAX_DEPTH,
    DEFAULT_OUTPUT_DIR,
    ENV_FORMAT,
    ENV_MAX_DEPTH,
    ENV_OUTPUT_DIR,
    MAX_DEPTH_LIMIT,
    AnalysisConfig,
    RenderConfig,
)
from astprofile.core.analyzer import analyze_file
from astprofile.core.exceptions import AstProfileError, RenderError
from astprofile.core.report import ComplexityReport, summarize
from astprofile.log import configure_logging
from astprofile.render import run_pipeline

app = typer.Typer(
    name="astprofile",
    help="Complexity profile and syntax-tree graph for a single source file.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def wait_for_enter() -> None:
    """Block until the user acknowledges the rendered graph."""
    err_console.input("[dim]Press Enter to delete the rendered graph[/] ")


@app.command()
def analyze(
    path: Annotated[Path, typer.Argument(help="Source file to analyze (.c, .cpp, .h, .py)")],
    output_json: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", "-o", envvar=ENV_OUTPUT_DIR, help="Where to write artifacts"),
    ] = DEFAULT_OUTPUT_DIR,
    image_format: Annotated[
        str,
        typer.Option("--format", "-f", envvar=ENV_FORMAT, help="Graphviz output format"),
    ] = DEFAULT_FORMAT,
    max_depth: Annotated[
        int,
        typer.Option(
            "--max-depth",
            envvar=ENV_MAX_DEPTH,
            min=1,
            max=MAX_DEPTH_LIMIT,
            help="Maximum syntax tree depth",
        ),
    ] = DEFAULT_MAX_DEPTH,
    include_headers: Annotated[
        bool, typer.Option("--include-headers", help="Also walk declarations from headers")
    ] = False,
    clang_args: Annotated[
        list[str] | None,
        typer.Option("--clang-arg", "-X", help="Extra argument passed to libclang"),
    ] = None,
    no_render: Annotated[
        bool, typer.Option("--no-render", help="Skip rendering the graph")
    ] = False,
    no_view: Annotated[
        bool, typer.Option("--no-view", help="Render the graph but do not open it")
    ] = False,
    keep: Annotated[
        bool, typer.Option("--keep", "-k", help="Keep the graph artifacts after viewing")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Report complexity metrics for a source file and render its syntax tree."""
    configure_logging(verbose, err_console)

    analysis_config = AnalysisConfig(
        max_depth=max_depth,
        include_headers=include_headers,
        clang_args=clang_args or [],
    )

    try:
        result = analyze_file(path, analysis_config)
    except AstProfileError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1) from e

    if output_json:
        print(json.dumps(summarize(result)))
    else:
        report = ComplexityReport.from_metrics(result.metrics)
        for line in report.lines():
            console.print(line)
        console.print(f"[dim]Graph: {result.num_nodes} nodes, {result.num_edges} edges[/]")

    if no_render:
        return

    render_config = RenderConfig(
        output_dir=output_dir,
        format=image_format,
        view=not no_view,
        keep=keep,
    )
    try:
        image_path = run_pipeline(result.dot, render_config, acknowledge=wait_for_enter)
    except RenderError as e:
        logger.warning("%s", e)
        return

    if not render_config.view:
        logger.info("Graph written to %s", image_path)


if __name__ == "__main__":
    app()
