#!/usr/bin/env python3
"""
interactive.py — the prompt-driven menu

  1) Print folder structure  -> asks for a folder and a comma-separated skip list
  2) Make folder structure   -> asks for a parent folder, then either
                                'file:<path>' or typed notation ending with an empty line

Every prompt goes through an explicit Session (ask + echo), so the flows can
be driven from tests or any other front end.
"""

from __future__ import annotations
import os
import sys
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..errors import InputReadError, TreeReadError
from ..utils.io_paths import is_file_ref, read_notation
from .materialize import materialize
from .notation import parse_notation
from .printer import render_tree

def _stdin_ask(label: str) -> str:
    try:
        return input(label)
    except EOFError:
        return ""

@dataclass
class Session:
    ask: Callable[[str], str] = _stdin_ask
    echo: Callable[[str], None] = print
    cwd: str = field(default_factory=os.getcwd)
    strict: bool = False
    sort: bool = False
    last_by_visible: bool = True

# ---------- tiny prompt helpers ----------
def prompt_str(session: Session, label: str, default: Optional[str] = None) -> str:
    val = session.ask(label).strip()
    if not val and default is not None:
        val = default
    return val

def prompt_list(session: Session, label: str) -> List[str]:
    raw = session.ask(label).strip()
    if not raw:
        return []
    return [item.strip() for item in raw.split(",")]

def read_block(session: Session, first_line: str) -> str:
    """Collect typed notation until an empty line (or end of input)."""
    text = first_line + "\n"
    session.echo("Enter folder structure (empty line to finish):")
    while True:
        line = session.ask("> ")
        if line == "":
            break
        text += line + "\n"
    return text

# ---------- flows ----------
def print_flow(session: Session) -> int:
    folder = prompt_str(session, "Enter the folder path: ", default=session.cwd)
    skip = prompt_list(session, "Enter folders to skip (comma-separated, or leave empty): ")

    try:
        lines = render_tree(folder, skip, sort=session.sort, last_by_visible=session.last_by_visible)
    except TreeReadError as e:
        session.echo(f"\nError reading the folder: {e}")
        return 1

    session.echo("\nFolder Structure:")
    for line in lines:
        session.echo(line)
    return 0

def create_flow(session: Session) -> int:
    base = prompt_str(session, "Enter the main folder path (parent folder): ", default=session.cwd)
    session.echo("\nEnter the folder structure.")
    session.echo('For file input, enter "file:path/to/file".')
    session.echo("For manual input, just start typing and end with an empty line:")

    first = session.ask("> ")
    if is_file_ref(first):
        try:
            text = read_notation(first)
        except InputReadError as e:
            session.echo(f"\nError reading the file: {e}")
            return 1
        session.echo(f"\nRead {len(text.splitlines())} lines from file.")
    else:
        text = read_block(session, first)

    session.echo("\nCreating folder structure...")
    forest = parse_notation(text, strict=session.strict)
    materialize(base, forest, report=session.echo)
    session.echo("\nFolder structure creation complete!")
    return 0

def run_menu(session: Session) -> int:
    session.echo("Folder Structure Generator/Creator")
    session.echo("=================================")
    action = session.ask(
        "Choose an option (1 - Print folder structure, 2 - Make folder structure): "
    ).strip()

    if action == "1":
        return print_flow(session)
    if action == "2":
        return create_flow(session)
    session.echo("Invalid option selected.")
    return 1

def main() -> int:
    return run_menu(Session())

if __name__ == "__main__":
    sys.exit(main())
