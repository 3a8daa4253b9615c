"""Main CLI interface for gerbersort using Click."""

import json
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..classifier import BoardSide, LayerClassifier
from ..config import GerberSortConfig, get_config_manager
from ..scanner import BoardFileScanner, ScanStatus
from ..utils.logging import GERBERSORT_THEME, get_logger, setup_logging

console = Console(theme=GERBERSORT_THEME)
logger = get_logger(__name__)

STATUS_STYLES = {
    ScanStatus.CLASSIFIED: "green",
    ScanStatus.UNSUPPORTED: "yellow",
    ScanStatus.SKIPPED: "dim",
    ScanStatus.BANNED: "dim",
    ScanStatus.IO_ERROR: "red",
    ScanStatus.UNZIP_ERROR: "red",
}


def _side_text(side: BoardSide) -> str:
    return f"[side.{side.value}]{side.value}[/side.{side.value}]"


def _get_config(ctx) -> GerberSortConfig:
    return ctx.obj["config"]


@click.group()
@click.version_option(version=__version__, prog_name="gerbersort")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, config: Optional[Path], verbose: bool):
    """
    gerbersort - sort PCB fabrication files into board layers.

    Classifies Gerber and Excellon drill files by name and content so each
    file can be assigned to a side and layer of the board.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config

    try:
        config_manager = get_config_manager(config)
        loaded = config_manager.load(create_if_missing=True)
    except ValueError as e:
        console.print(f"[bold red]✗ Invalid configuration:[/bold red] {escape(str(e))}")
        sys.exit(1)

    ctx.obj["config"] = loaded
    setup_logging(
        level="DEBUG" if verbose else loaded.logging.level,
        log_dir=loaded.logging.log_dir,
        max_bytes=loaded.logging.max_bytes,
        backup_count=loaded.logging.backup_count,
        console_enabled=loaded.logging.console_enabled,
        file_enabled=loaded.logging.file_enabled,
    )


@cli.command()
@click.argument("names", nargs=-1, required=True)
@click.pass_context
def classify(ctx, names: tuple[str, ...]):
    """
    Classify files by name only.

    \b
    Examples:
        gerbersort classify board.GTL board.GBS
        gerbersort classify gerbers/design-F_Cu.gbr
    """
    classifier = LayerClassifier(_get_config(ctx).classifier)

    table = Table(title="Layer Assignment", show_header=True, header_style="bold cyan")
    table.add_column("File", style="cyan")
    table.add_column("Ext")
    table.add_column("Side")
    table.add_column("Layer", style="magenta")
    table.add_column("Banned", justify="center")

    for name in names:
        result = classifier.classify(name)
        table.add_row(
            escape(name),
            result.extension,
            _side_text(result.side),
            result.layer.value,
            "[red]yes[/red]" if result.banned else "",
        )

    console.print(table)


@cli.command()
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.pass_context
def detect(ctx, files: tuple[Path, ...]):
    """Detect the format (gerber, drill, unsupported) of files from their content."""
    classifier = LayerClassifier(_get_config(ctx).classifier)
    encoding = _get_config(ctx).scan.encoding

    failed = False
    for file_path in files:
        try:
            content = file_path.read_text(encoding=encoding, errors="replace")
        except OSError as e:
            console.print(f"[red]✗ {escape(str(file_path))}:[/red] {escape(str(e))}")
            logger.error(f"Could not read {file_path}: {e}")
            failed = True
            continue
        file_type = classifier.board_file_type(content)
        console.print(f"{escape(str(file_path))}: [bold]{file_type.value}[/bold]")

    if failed:
        sys.exit(1)


@cli.command()
@click.argument("path", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--recursive/--no-recursive",
    "-r/-R",
    default=None,
    help="Scan subdirectories recursively (default: from config)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the full report as JSON",
)
@click.option("--all", "show_all", is_flag=True, help="Also list skipped and banned files")
@click.pass_context
def scan(ctx, path: Path, recursive: Optional[bool], output: Optional[Path], show_all: bool):
    """
    Scan a folder, ZIP archive or single file and classify every fabrication file.

    \b
    Examples:
        gerbersort scan ./gerbers
        gerbersort scan board.zip --output report.json
    """
    config = _get_config(ctx)
    scan_settings = config.scan
    if recursive is not None:
        scan_settings = scan_settings.model_copy(update={"recursive": recursive})

    scanner = BoardFileScanner(scan_settings, LayerClassifier(config.classifier))

    try:
        report = scanner.scan(path)
    except Exception as e:
        console.print(f"[bold red]✗ Scan failed:[/bold red] {escape(str(e))}")
        logger.exception("Scan error")
        sys.exit(1)

    table = Table(
        title=f"Scan of {escape(path.name)}", show_header=True, header_style="bold cyan"
    )
    table.add_column("File", style="cyan")
    table.add_column("Status")
    table.add_column("Side")
    table.add_column("Layer", style="magenta")
    table.add_column("Format")

    for entry in report.entries:
        if not show_all and entry.status in (ScanStatus.SKIPPED, ScanStatus.BANNED):
            continue
        style = STATUS_STYLES[entry.status]
        result = entry.result
        table.add_row(
            escape(entry.file_name),
            f"[{style}]{entry.status.value}[/{style}]",
            _side_text(result.side) if result else "",
            result.layer.value if result else "",
            result.file_type.value if result and result.file_type else "",
        )

    console.print(table)

    summary = report.summary()
    console.print(
        f"\n[cyan]Total:[/cyan] {summary['total']}  "
        f"[green]Classified:[/green] {summary['classified']}  "
        f"[yellow]Unsupported:[/yellow] {summary['unsupported']}  "
        f"[dim]Skipped:[/dim] {summary['skipped']}  "
        f"[dim]Banned:[/dim] {summary['banned']}  "
        f"[red]Errors:[/red] {summary['io_error'] + summary['unzip_error']}"
    )

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json.dumps(report.to_dict(), indent=2), encoding="utf-8")
        console.print(f"✓ Report written to [green]{escape(str(output))}[/green]")


@cli.group(name="config")
def config_group():
    """Manage gerbersort configuration."""
    pass


@config_group.command(name="show")
@click.pass_context
def config_show(ctx):
    """Display current configuration."""
    config = _get_config(ctx)
    config_manager = get_config_manager(ctx.obj.get("config_path"))

    console.print("\n[bold cyan]gerbersort Configuration[/bold cyan]\n")

    console.print("[bold]Classifier:[/bold]")
    extra = ", ".join(config.classifier.extra_banned_extensions) or "(none)"
    console.print(f"  Extra banned extensions: {extra}")
    console.print(
        f"  Assembly keywords case-sensitive: {config.classifier.assembly_keywords_case_sensitive}"
    )

    console.print("\n[bold]Scan:[/bold]")
    console.print(f"  Recursive: {config.scan.recursive}")
    console.print(f"  Max File Size: {config.scan.max_file_size_mb}MB")
    console.print(f"  Encoding: {config.scan.encoding}")
    console.print(f"  Ignored names: {', '.join(config.scan.ignored_names)}")
    console.print(f"  Ignored path fragments: {', '.join(config.scan.ignored_path_fragments)}")

    console.print("\n[bold]Logging:[/bold]")
    console.print(f"  Level: {config.logging.level}")
    console.print(f"  File logging: {config.logging.file_enabled} ({config.logging.log_dir})")

    source = config_manager.config_path or "built-in defaults"
    console.print(f"\n[dim]Config file: {escape(str(source))}[/dim]")


@config_group.command(name="init")
@click.option(
    "--path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path("config/gerbersort.yaml"),
    show_default=True,
    help="Where to write the configuration file",
)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
@click.pass_context
def config_init(ctx, path: Path, force: bool):
    """Write a configuration file with the current settings."""
    if path.exists() and not force:
        console.print(
            f"[yellow]⚠ {escape(str(path))} already exists. Use --force to overwrite.[/yellow]"
        )
        sys.exit(1)

    try:
        config_manager = get_config_manager(ctx.obj.get("config_path"))
        config_manager.save(_get_config(ctx), path)
    except Exception as e:
        console.print(f"[bold red]✗ Error:[/bold red] {escape(str(e))}")
        logger.exception("Config init error")
        sys.exit(1)

    console.print(f"✓ Created configuration: [green]{escape(str(path))}[/green]")


if __name__ == "__main__":
    cli()
