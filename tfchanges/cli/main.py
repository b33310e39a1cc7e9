"""Click commands for running analyses outside a CI step."""

from __future__ import annotations

import json
from pathlib import Path

import click

from tfchanges import __version__
from tfchanges.app import TFChangesApp
from tfchanges.config import validate_analysis
from tfchanges.extractor import extract_entities
from tfchanges.models.config import AnalysisConfig, LogConfig, OutputConfig, TFChangesConfig
from tfchanges.observability.logging import get_logger, setup_logging
from tfchanges.report import to_json, write_changes_file

_LOG_LEVELS = click.Choice(["debug", "info", "warning", "error"], case_sensitive=False)


@click.group()
@click.version_option(__version__, prog_name="tfchanges")
@click.option("--log-level", type=_LOG_LEVELS, default="warning", show_default=True, help="structlog level (stderr).")
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """Report Terraform resource changes between git revisions."""
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level.lower()
    setup_logging(log_level)


@cli.command()
@click.option("--source", "source_branch", default="", help="Revision with the proposed changes.")
@click.option("--target", "target_branch", default="", help="Revision being compared against.")
@click.option("--directory", default=".", show_default=True, help="Only consider files under this path.")
@click.option(
    "--mode",
    type=click.Choice(["auto", "paired", "working-tree"]),
    default="auto",
    show_default=True,
    help="auto picks paired when --source is given.",
)
@click.option("--modules/--no-modules", "include_modules", default=True, show_default=True)
@click.option("--repo", "repo_path", default=".", show_default=True, type=click.Path(file_okay=False))
@click.option("--output-file", default="changes.json", show_default=True, help="Working-tree report artifact.")
@click.option("--metrics-file", default="", help="Write Prometheus counters to this file.")
@click.option("--json", "as_json", is_flag=True, help="Print the JSON report instead of the summary and step outputs.")
@click.pass_context
def analyze(
    ctx: click.Context,
    source_branch: str,
    target_branch: str,
    directory: str,
    mode: str,
    include_modules: bool,
    repo_path: str,
    output_file: str,
    metrics_file: str,
    as_json: bool,
) -> None:
    """Classify resources added, removed or modified between revisions."""
    try:
        analysis = validate_analysis(
            AnalysisConfig(
                source_branch=source_branch,
                target_branch=target_branch,
                directory=directory,
                mode=mode,
                include_modules=include_modules,
                repo_path=repo_path,
            )
        )
        config = TFChangesConfig(
            analysis=analysis,
            output=OutputConfig(changes_file=output_file, metrics_file=metrics_file),
            log=LogConfig(level=ctx.obj["log_level"]),
        )
        app = TFChangesApp(config)
        if as_json:
            report = app.analyze()
            if report.mode == "working-tree":
                write_changes_file(report, output_file)
            click.echo(to_json(report, indent=2))
        else:
            app.run()
    except Exception as exc:
        get_logger("cli").critical("fatal_error", error=str(exc), error_type=type(exc).__name__)
        raise click.ClickException(str(exc)) from exc


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--modules/--no-modules", "include_modules", default=True, show_default=True)
def extract(paths: tuple[Path, ...], include_modules: bool) -> None:
    """Print the declarations found in local files as JSON lines."""
    for path in paths:
        content = path.read_text(encoding="utf-8", errors="replace")
        for entity in extract_entities(content, str(path), include_modules):
            click.echo(
                json.dumps(
                    {
                        "category": entity.category.value,
                        "type": entity.type_label,
                        "name": entity.name,
                        "file": entity.source_file,
                        "line": entity.declaration_line,
                    }
                )
            )
