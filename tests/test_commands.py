import json

import pytest

from imagestepper.commands import (
    CommandError,
    get_files,
    get_next_directory,
    get_prev_directory,
    get_target_directory,
    main,
)


@pytest.fixture
def tree(tmp_path):
    for d in ["a", "a/a", "a/b", "a/c", "b", "b/a", "b/b", "b/c", "c"]:
        (tmp_path / d).mkdir()
    for f in [
        "a/a/a", "a/a/b", "a/a/c",
        "a/b/a", "a/b/b", "a/b/c",
        "a/d",
        "b/a/a", "b/b/a",
        "c/a", "c/b", "c/c",
    ]:
        (tmp_path / f).touch()
    return tmp_path


def test_target_directory_of_directory(tree):
    assert get_target_directory(str(tree / "a")) == tree / "a"


def test_target_directory_of_file(tree):
    assert get_target_directory(str(tree / "a/d")) == tree / "a"


def test_target_directory_missing(tree):
    with pytest.raises(CommandError, match="does not exist"):
        get_target_directory(str(tree / "missing"))


def test_get_files_from_file(tree):
    payload = get_files(str(tree / "a/a/b"))
    assert payload.paths == [str(tree / "a/a/a"), str(tree / "a/a/b"), str(tree / "a/a/c")]


def test_get_files_from_directory(tree):
    assert get_files(str(tree / "a")).paths == [str(tree / "a/d")]


def test_get_files_missing(tree):
    with pytest.raises(CommandError):
        get_files(str(tree / "nope"))


def test_get_next_directory(tree):
    payload = get_next_directory(str(tree / "a/a/a"))
    assert payload.paths == [str(tree / "a/b/a"), str(tree / "a/b/b"), str(tree / "a/b/c")]


def test_get_next_directory_into_child(tree):
    payload = get_next_directory(str(tree / "b"))
    assert payload.paths == [str(tree / "b/a/a")]


def test_get_prev_directory(tree):
    assert get_prev_directory(str(tree / "b")).paths == []
    assert get_prev_directory(str(tree / "a/b/c")).paths == [
        str(tree / "a/a/a"),
        str(tree / "a/a/b"),
        str(tree / "a/a/c"),
    ]


def test_main_emits_initialize(tree, capsys):
    status = main([str(tree / "c/a")])
    message = json.loads(capsys.readouterr().out)
    assert status == 0
    assert message["event"] == "initialize"
    assert message["payload"]["paths"] == [
        str(tree / "c/a"),
        str(tree / "c/b"),
        str(tree / "c/c"),
    ]


def test_main_reports_missing_path(tree, capsys):
    status = main([str(tree / "missing")])
    message = json.loads(capsys.readouterr().out)
    assert status == 1
    assert message["event"] == "initialize"
    assert "does not exist" in message["payload"]