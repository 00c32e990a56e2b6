# src/foldertree/cli/commands.py
from __future__ import annotations
import logging
from pathlib import Path

import click

# relative imports ONLY
from ..config import load_settings
from ..errors import FolderTreeError
from ..core.interactive import Session, run_menu
from ..core.materialize import materialize
from ..core.notation import forest_to_dicts, parse_notation
from ..core.printer import render_tree
from ..utils.io_paths import read_notation, write_json, write_lines
from ..utils.log_setup import setup_logging

logger = logging.getLogger(__name__)

def _load_text(from_path, text) -> str:
    if text is not None:
        return text
    if from_path:
        return read_notation(from_path)
    return click.get_text_stream("stdin").read()

def _fail(e: FolderTreeError):
    logger.debug("Aborting", exc_info=e)
    raise SystemExit(f"❌ {e}")

@click.group()
@click.option("--config", "config_path", type=click.Path(dir_okay=False),
              help="TOML settings file (default: $FOLDERTREE_CONFIG or foldertree.toml)")
@click.option("--log-level", default=None, help="Override the configured log level (DEBUG, INFO, ...)")
@click.pass_context
def cli(ctx, config_path, log_level):
    """Print folder trees and create them from indented notation."""
    settings = load_settings(config_path)
    setup_logging(log_level or settings.app.log_level)
    ctx.obj = settings

@cli.command("print")
@click.argument("path", default=".", type=click.Path(exists=True, file_okay=False))
@click.option("-s", "--skip", multiple=True, help="Folder name to leave out (repeatable). Defaults to [printer].skip.")
@click.option("--sort", is_flag=True, default=False, help="List entries alphabetically instead of in filesystem order")
@click.option("--raw-last", is_flag=True, default=False,
              help="Decide the closing branch from the unfiltered listing (skipped entries included)")
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Also save the tree to this text file")
@click.pass_obj
def print_cmd(settings, path, skip, sort, raw_last, output):
    """Print the folder tree below PATH."""
    skip_list = list(skip) if skip else list(settings.printer.skip)
    try:
        lines = render_tree(
            path,
            skip_list,
            sort=sort or settings.printer.sort,
            last_by_visible=settings.printer.last_by_visible and not raw_last,
        )
    except FolderTreeError as e:
        _fail(e)
    click.echo("\n".join(lines))
    if output:
        write_lines(lines, Path(output))
        click.echo(f"\n✅ Saved to {output}")

@cli.command("create")
@click.argument("base", type=click.Path(file_okay=False))
@click.option("-f", "--from", "from_path", help="Notation file (plain path or file:<path>)")
@click.option("-t", "--text", default=None, help="Notation given inline")
@click.option("--strict", is_flag=True, default=False, help="Reject inconsistent indentation")
@click.pass_obj
def create_cmd(settings, base, from_path, text, strict):
    """Create the directories and empty files described by the notation under BASE."""
    try:
        forest = parse_notation(_load_text(from_path, text), strict=strict or settings.parser.strict)
        click.echo("Creating folder structure...")
        materialize(base, forest, report=click.echo)
    except FolderTreeError as e:
        _fail(e)
    click.echo("\n✅ Folder structure creation complete!")

@cli.command("parse")
@click.option("-f", "--from", "from_path", help="Notation file (plain path or file:<path>)")
@click.option("-t", "--text", default=None, help="Notation given inline")
@click.option("--strict", is_flag=True, default=False, help="Reject inconsistent indentation")
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Write the JSON here instead of stdout")
@click.pass_obj
def parse_cmd(settings, from_path, text, strict, output):
    """Show the parsed tree as JSON without touching the filesystem."""
    try:
        forest = parse_notation(_load_text(from_path, text), strict=strict or settings.parser.strict)
    except FolderTreeError as e:
        _fail(e)
    data = forest_to_dicts(forest)
    if output:
        write_json(data, Path(output))
        click.echo(f"✅ Saved to {output}")
    else:
        click.echo(write_json(data))

@cli.command("interactive")
@click.pass_obj
def interactive_cmd(settings):
    """Menu-driven mode (print or create)."""
    session = Session(
        strict=settings.parser.strict,
        sort=settings.printer.sort,
        last_by_visible=settings.printer.last_by_visible,
    )
    try:
        rc = run_menu(session)
    except FolderTreeError as e:
        _fail(e)
    raise SystemExit(rc or 0)

if __name__ == "__main__":
    cli()
