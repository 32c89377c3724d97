import pytest

from app_state import AppState
from calendar_events import EventStore
from kanban import KanbanSelection, TaskStore
from note_files import NoteStore
from panel_focus import UNSELECTED_EVENT, Focus, PanelFocus


@pytest.fixture
def state(tmp_path):
    notes_dir = tmp_path / "notes"
    notes_dir.mkdir()
    (notes_dir / "alpha.md").write_text("first\n")
    (notes_dir / "beta.md").write_text("second\n")
    return AppState(
        NoteStore(str(notes_dir)),
        TaskStore(str(tmp_path / "tasks")),
        EventStore(str(tmp_path / "events")),
    )


@pytest.fixture
def panels(state):
    return PanelFocus(state)


def test_starts_in_content_with_cursor(panels):
    assert panels.focus is Focus.CONTENT
    assert panels.cursor_visible
    assert panels.kanban.column == -1 and panels.kanban.row == -1
    assert panels.calendar_index == UNSELECTED_EVENT


def test_content_to_sidebar_saves(panels, state):
    state.editor.insert_text("edited ")
    panels.switch_panel()
    assert panels.focus is Focus.SIDEBAR
    assert not panels.cursor_visible
    assert state.notes.load("alpha") == ["edited first"]


def test_sidebar_file_row_opens_note(panels, state):
    panels.switch_panel()
    panels.sidebar_down()
    panels.switch_panel()
    assert panels.focus is Focus.CONTENT
    assert panels.cursor_visible
    assert state.current_note == "beta"
    assert state.document.lines == ["second"]
    assert (state.editor.cursor.row, state.editor.cursor.col) == (0, 0)


def test_sidebar_kanban_row_enters_kanban(panels, state):
    state.tasks.add("t1")
    panels.switch_panel()
    panels.sidebar_index = panels.kanban_row
    panels.switch_panel()
    assert panels.focus is Focus.KANBAN
    assert panels.main_view is Focus.KANBAN
    assert (panels.kanban.column, panels.kanban.row) == (0, 0)

    panels.switch_panel()
    assert panels.focus is Focus.SIDEBAR
    assert (panels.kanban.column, panels.kanban.row) == KanbanSelection.UNSELECTED
    assert panels.main_view is Focus.KANBAN


def test_sidebar_calendar_row_enters_calendar(panels):
    panels.switch_panel()
    panels.sidebar_index = panels.calendar_row
    panels.switch_panel()
    assert panels.focus is Focus.CALENDAR
    assert panels.calendar_index == 0

    panels.switch_panel()
    assert panels.focus is Focus.SIDEBAR
    assert panels.calendar_index == UNSELECTED_EVENT


def test_sidebar_wraps_over_files_and_panels(panels):
    panels.switch_panel()
    assert panels.sidebar_size == 4
    panels.sidebar_up()
    assert panels.sidebar_index == panels.calendar_row
    panels.sidebar_down()
    assert panels.sidebar_index == 0


def test_confirm_previews_without_moving_focus(panels, state):
    panels.switch_panel()
    panels.sidebar_index = panels.kanban_row
    panels.confirm()
    assert panels.focus is Focus.SIDEBAR
    assert panels.main_view is Focus.KANBAN

    panels.sidebar_index = 1
    panels.confirm()
    assert panels.main_view is Focus.CONTENT
    assert state.current_note == "beta"
    assert panels.focus is Focus.SIDEBAR


def test_kanban_wraparound(panels, state):
    for title in ("a", "b", "c"):
        state.tasks.add(title)
    panels.switch_panel()
    panels.sidebar_index = panels.kanban_row
    panels.switch_panel()

    panels.kanban_up()
    assert panels.kanban.row == 2
    panels.kanban_left()
    assert panels.kanban.column == 2
    assert panels.kanban.row == 0


def test_calendar_selection_clamps(panels, state):
    state.events.add("one", "01/01")
    state.events.add("two", "02/01")
    panels.switch_panel()
    panels.sidebar_index = panels.calendar_row
    panels.switch_panel()
    panels.calendar_up()
    assert panels.calendar_index == 0
    panels.calendar_down()
    panels.calendar_down()
    assert panels.calendar_index == 1

