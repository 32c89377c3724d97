import os

import pytest

import main
from main import parse_notes_dir


@pytest.mark.parametrize(
    "args, expected",
    [
        ([], None),
        (["--notes-dir", "/tmp/n"], "/tmp/n"),
        (["--notes-dir=/tmp/m"], "/tmp/m"),
        (["-x", "--notes-dir", "~/n"], os.path.expanduser("~/n")),
    ],
)
def test_parse_notes_dir(args, expected):
    assert parse_notes_dir(args) == expected


@pytest.mark.parametrize("args", [["--notes-dir"], ["--notes-dir="]])
def test_parse_notes_dir_requires_value(args):
    with pytest.raises(ValueError):
        parse_notes_dir(args)


def test_version_flag_prints_version(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["neonote", "-v"])
    main.main()
    assert capsys.readouterr().out.strip() == main.__version__


def test_help_flag_prints_usage(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["neonote", "-h"])
    main.main()
    assert "--notes-dir" in capsys.readouterr().out


def test_missing_notes_dir_value_exits(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["neonote", "--notes-dir"])
    with pytest.raises(SystemExit) as exc:
        main.main()
    assert exc.value.code == 2
