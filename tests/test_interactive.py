import pytest

from foldertree.core.interactive import Session, prompt_list, run_menu


def scripted(*answers):
    it = iter(answers)
    return lambda label: next(it)


@pytest.fixture
def echoed():
    return []


def test_create_flow_from_typed_block(tmp_path, echoed):
    session = Session(ask=scripted("2", str(tmp_path), "a/", "  b.txt", "c.txt", ""), echo=echoed.append)
    assert run_menu(session) == 0

    assert (tmp_path / "a").is_dir()
    assert (tmp_path / "a" / "b.txt").is_file()
    assert (tmp_path / "c.txt").is_file()
    assert "\nFolder structure creation complete!" in echoed


def test_create_flow_from_file_reference(tmp_path, echoed):
    notation = tmp_path / "tree.txt"
    notation.write_text("# layout\npkg/\n  mod.py\n", encoding="utf-8")
    base = tmp_path / "out"

    session = Session(ask=scripted("2", str(base), f"file:{notation}"), echo=echoed.append)
    assert run_menu(session) == 0

    assert (base / "pkg" / "mod.py").is_file()
    assert "\nRead 3 lines from file." in echoed


def test_unreadable_file_aborts_without_side_effects(tmp_path, echoed):
    base = tmp_path / "out"
    session = Session(ask=scripted("2", str(base), f"file:{tmp_path / 'missing.txt'}"), echo=echoed.append)

    assert run_menu(session) == 1
    assert any(m.startswith("\nError reading the file:") for m in echoed)
    assert not base.exists()


def test_create_flow_defaults_to_session_cwd(tmp_path, echoed):
    session = Session(ask=scripted("2", "", "only.txt", ""), echo=echoed.append, cwd=str(tmp_path))
    run_menu(session)
    assert (tmp_path / "only.txt").is_file()


def test_print_flow_with_skip_list(tmp_path, echoed):
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "src").mkdir()
    (tmp_path / "README.md").write_text("", encoding="utf-8")

    session = Session(ask=scripted("1", str(tmp_path), " node_modules , .git"), echo=echoed.append, sort=True)
    assert run_menu(session) == 0

    assert echoed[-2:] == ["├── README.md", "└── src/"]
    assert tmp_path.name in echoed


def test_invalid_option(echoed):
    session = Session(ask=scripted("7"), echo=echoed.append)
    assert run_menu(session) == 1
    assert echoed[-1] == "Invalid option selected."


def test_prompt_list_trims_items():
    session = Session(ask=scripted(" a , b,c "))
    assert prompt_list(session, "skip: ") == ["a", "b", "c"]
    assert prompt_list(Session(ask=scripted("")), "skip: ") == []


def test_print_flow_reports_missing_folder(tmp_path, echoed):
    missing = tmp_path / "nope"
    session = Session(ask=scripted("1", str(missing), ""), echo=echoed.append)

    assert run_menu(session) == 1
    assert any(m.startswith("\nError reading the folder:") and str(missing) in m for m in echoed)
    assert "\nFolder Structure:" not in echoed


def test_print_flow_header_names_the_real_folder(tmp_path, monkeypatch, echoed):
    (tmp_path / "a.txt").write_text("", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    session = Session(ask=scripted("1", ".", ""), echo=echoed.append)

    assert run_menu(session) == 0
    assert echoed[-2:] == [tmp_path.name, "└── a.txt"]
