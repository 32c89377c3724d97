import os

from note_files import DEFAULT_NOTE, WELCOME_LINES, NoteStore


def test_empty_dir_gets_welcome_note(tmp_path):
    store = NoteStore(str(tmp_path))
    assert store.files == [DEFAULT_NOTE]
    assert store.load(DEFAULT_NOTE) == WELCOME_LINES


def test_scan_lists_markdown_only_sorted(tmp_path):
    for name in ("b.md", "A.md", "c.txt", "d.md.bak"):
        (tmp_path / name).write_text("x\n")
    (tmp_path / "dir.md").mkdir()
    store = NoteStore(str(tmp_path))
    assert store.files == ["A", "b"]


def test_save_and_load_roundtrip_keeps_blank_lines(tmp_path):
    store = NoteStore(str(tmp_path))
    store.save("n", ["one", "", "three"])
    assert store.load("n") == ["one", "", "three"]


def test_load_missing_or_empty_returns_single_blank_line(tmp_path):
    store = NoteStore(str(tmp_path))
    assert store.load("missing") == [""]
    (tmp_path / "empty.md").write_text("")
    assert store.load("empty") == [""]


def test_new_note_picks_next_untitled_name(tmp_path):
    (tmp_path / "Untitled1.md").write_text("")
    store = NoteStore(str(tmp_path))
    assert store.new_note() == "Untitled2"
    assert store.new_note() == "Untitled3"
    assert os.path.exists(store.path_for("Untitled3"))


def test_rename_moves_file(tmp_path):
    (tmp_path / "old.md").write_text("body\n")
    store = NoteStore(str(tmp_path))
    assert store.rename("old", " new ")
    assert store.files == ["new"]
    assert store.load("new") == ["body"]
    assert not store.exists("old")


def test_rename_refuses_bad_names(tmp_path):
    (tmp_path / "a.md").write_text("")
    (tmp_path / "b.md").write_text("")
    store = NoteStore(str(tmp_path))
    assert not store.rename("a", "")
    assert not store.rename("a", "b")
    assert not store.rename("a", "x" + os.sep + "y")
    assert store.files == ["a", "b"]


def test_delete_removes_file_and_entry(tmp_path):
    (tmp_path / "a.md").write_text("")
    (tmp_path / "b.md").write_text("")
    store = NoteStore(str(tmp_path))
    assert store.delete("a")
    assert store.files == ["b"]
    assert not store.delete("a")
