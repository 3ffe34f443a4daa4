"""tagdoc CLI - scan files for tags and suggest import candidates."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from tagdoc.config.loader import load_config
from tagdoc.config.models import TagdocConfig
from tagdoc.core.errors import TagdocError
from tagdoc.core.languages import ALL_LANGUAGES
from tagdoc.core.logging import analysis_scope, configure_logging
from tagdoc.tags.analyzer import analyze_source, split_lines, summarize_results
from tagdoc.tags.open_files import OpenFileMatcher

console = Console()


@click.group()
@click.version_option(version="0.1.0", prog_name="tagdoc")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """tagdoc - Regex-based tag and doc comment extraction for editors."""
    ctx.ensure_object(dict)
    try:
        config = load_config()
    except TagdocError as e:
        raise click.ClickException(str(e)) from e
    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)
    ctx.obj["config"] = config


@cli.command("scan")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--no-docs", is_flag=True, help="Skip doc comment extraction")
@click.option("--no-fargs", is_flag=True, help="Skip argument list guessing")
@click.pass_context
def scan_command(
    ctx: click.Context, file: Path, as_json: bool, no_docs: bool, no_fargs: bool
) -> None:
    """List the tags found in FILE."""
    config: TagdocConfig = ctx.obj["config"]

    contents = file.read_text(encoding="utf-8", errors="replace")
    with analysis_scope():
        try:
            results = analyze_source(
                str(file),
                contents,
                extract_documentation=config.analysis.extract_documentation and not no_docs,
                guess_fargs=config.analysis.guess_fargs and not no_fargs,
            )
        except TagdocError as e:
            if as_json:
                click.echo(json.dumps({"error": e.to_dict()}, indent=2))
                ctx.exit(1)
            raise click.ClickException(str(e)) from e
        summaries = summarize_results(split_lines(contents), results)

    if as_json:
        click.echo(json.dumps([s.to_dict() for s in summaries], indent=2))
        return

    if not summaries:
        click.echo(f"No tags found in {file}")
        return

    table = Table(title=str(file))
    table.add_column("Line", justify="right")
    table.add_column("Kind")
    table.add_column("Name")
    table.add_column("Doc", overflow="fold")
    for summary in summaries:
        table.add_row(
            str(summary.row + 1),
            summary.kind,
            summary.name + summary.fargs,
            summary.doc or "",
        )
    console.print(table)


@cli.command("imports")
@click.argument("path")
@click.argument("open_files", nargs=-1)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def imports_command(ctx: click.Context, path: str, open_files: tuple[str, ...], as_json: bool) -> None:
    """List the OPEN_FILES that PATH could import from."""
    config: TagdocConfig = ctx.obj["config"]
    matcher = OpenFileMatcher.from_config(config, list(open_files))
    matches = matcher.find_matching_open_files(path)

    if as_json:
        click.echo(json.dumps(matches))
        return
    for match in matches:
        click.echo(match)


@cli.command("languages")
def languages_command() -> None:
    """Show supported languages and their extension groups."""
    table = Table(title="Languages")
    table.add_column("Language")
    table.add_column("Extensions")
    table.add_column("Rules", justify="right")
    for lang in ALL_LANGUAGES:
        table.add_row(lang.name, ", ".join(lang.extensions), str(len(lang.tags)))
    console.print(table)


if __name__ == "__main__":
    cli()
