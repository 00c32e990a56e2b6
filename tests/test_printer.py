import os

import pytest

from foldertree.core.materialize import materialize
from foldertree.core.notation import parse_notation
from foldertree.core.printer import format_tree, print_tree, render_tree
from foldertree.errors import TreeReadError


@pytest.fixture
def project(tmp_path):
    root = tmp_path / "project"
    (root / "node_modules" / "left-pad").mkdir(parents=True)
    (root / "src").mkdir()
    (root / "src" / "index.js").write_text("", encoding="utf-8")
    (root / "README.md").write_text("", encoding="utf-8")
    return root


def test_skip_list_hides_folder_and_its_contents(project):
    lines = format_tree(str(project), skip=["node_modules"], sort=True)
    assert lines == [
        "├── README.md",
        "└── src/",
        "    └── index.js",
    ]
    assert not any("node_modules" in line or "left-pad" in line for line in lines)


def test_skip_is_exact_name_match(project):
    lines = format_tree(str(project), skip=["node"], sort=True)
    assert "├── node_modules/" in lines
    assert "│   └── left-pad/" in lines


def test_unsorted_listing_follows_os_listdir(project):
    lines = format_tree(str(project))
    top = [line for line in lines if not line.startswith(("│", " "))]
    expected = [n + ("/" if os.path.isdir(project / n) else "") for n in os.listdir(project)]
    assert [line[4:] for line in top] == expected


def test_raw_last_keeps_open_branch_when_trailing_entry_is_skipped(tmp_path):
    (tmp_path / "a.txt").write_text("", encoding="utf-8")
    (tmp_path / "zz_cache").mkdir()

    visible = format_tree(str(tmp_path), skip=["zz_cache"], sort=True)
    raw = format_tree(str(tmp_path), skip=["zz_cache"], sort=True, last_by_visible=False)

    assert visible == ["└── a.txt"]
    assert raw == ["├── a.txt"]


def test_nested_prefixes(tmp_path):
    (tmp_path / "a" / "b").mkdir(parents=True)
    (tmp_path / "a" / "b" / "c.txt").write_text("", encoding="utf-8")
    (tmp_path / "z.txt").write_text("", encoding="utf-8")
    assert format_tree(str(tmp_path), sort=True) == [
        "├── a/",
        "│   └── b/",
        "│       └── c.txt",
        "└── z.txt",
    ]


def test_render_tree_starts_with_folder_name(project):
    lines = render_tree(str(project), skip=["node_modules"], sort=True)
    assert lines[0] == "project"
    assert lines[1:] == format_tree(str(project), skip=["node_modules"], sort=True)


def test_print_tree_echoes_every_line(project):
    seen = []
    lines = print_tree(str(project), skip=["node_modules"], sort=True, echo=seen.append)
    assert seen == lines


def _expected_lines(forest, prefix=""):
    out = []
    for i, entry in enumerate(forest):
        last = i == len(forest) - 1
        out.append(prefix + ("└── " if last else "├── ") + entry.name)
        if entry.is_dir:
            out.extend(_expected_lines(entry.children, prefix + ("    " if last else "│   ")))
    return out


def test_parse_materialize_print_round_trip(tmp_path):
    text = """\
app/
  api/
    routes.py
    schemas.py
  main.py
docs/
  index.md
setup.cfg
"""
    forest = parse_notation(text)
    materialize(tmp_path, forest, report=lambda m: None)
    assert format_tree(str(tmp_path), sort=True) == _expected_lines(forest)


def test_unlistable_folder_raises_tree_read_error(tmp_path):
    with pytest.raises(TreeReadError) as exc:
        format_tree(str(tmp_path / "missing"))
    assert exc.value.path == str(tmp_path / "missing")
    assert isinstance(exc.value.__cause__, OSError)
