"""Tests for checksync/editor.py: row state, modes, idempotent commits."""

from checksync.editor import ChecklistEditor, EditorRow
from checksync.fields import IntegerField, StatusField, TextField
from checksync.models import TaskStatus
from checksync.progress import ChecklistConstraint


def _editor(values: dict) -> ChecklistEditor:
    field = TextField(
        "description",
        constraints=[ChecklistConstraint(StatusField("status"), IntegerField("percent_complete"))],
    )
    editor = ChecklistEditor(field, values)
    editor.load()
    return editor


def test_load_checklist_adds_placeholder(values):
    values["description"] = "[x] A\n[ ] B"
    ed = _editor(values)
    assert ed.checklist_mode is True
    assert ed.rows == [EditorRow(True, "A"), EditorRow(False, "B"), EditorRow(False, "")]
    assert ed.placeholder_index == 2


def test_load_plain_text(values):
    values["description"] = "Just a note"
    ed = _editor(values)
    assert ed.checklist_mode is False
    assert ed.text == "Just a note"


def test_load_checklist_on_later_line(values):
    values["description"] = "Shopping\n[ ] Milk"
    assert _editor(values).checklist_mode is True


def test_toggle_writes_text_and_progress(values):
    values["description"] = "[ ] A\n[ ] B"
    ed = _editor(values)
    assert ed.toggle(0) is True
    assert values["description"] == "[x] A\n[ ] B"
    assert values["percent_complete"] == 50
    assert values["status"] == int(TaskStatus.IN_PROCESS)


def test_toggle_placeholder_is_noop(values):
    values["description"] = "[ ] A"
    ed = _editor(values)
    assert ed.toggle(ed.placeholder_index) is False
    assert values["description"] == "[ ] A"


def test_commit_skips_unchanged_text(values):
    values["description"] = "[x] A"
    ed = _editor(values)
    assert ed.commit() is False


def test_typing_into_placeholder_appends_row(values):
    values["description"] = "[x] A"
    ed = _editor(values)
    assert ed.edit(ed.placeholder_index, "B") is True
    assert values["description"] == "[x] A\n[ ] B"
    assert [r.label for r in ed.rows] == ["A", "B", ""]
    assert values["percent_complete"] == 50


def test_edit_regular_row_waits_for_blur(values):
    values["description"] = "[x] A\n[ ] B"
    ed = _editor(values)
    assert ed.edit(0, "") is False
    assert values["description"] == "[x] A\n[ ] B"
    assert ed.blur() is True
    assert values["description"] == "[ ] B"
    assert ed.rows == [EditorRow(False, "B"), EditorRow(False, "")]
    assert values["status"] == int(TaskStatus.NEEDS_ACTION)


def test_switch_plain_to_checklist(values):
    values["description"] = "Milk\nEggs"
    ed = _editor(values)
    assert ed.set_mode(True) is True
    assert values["description"] == "[ ] Milk\n[ ] Eggs"
    assert values["percent_complete"] == 0
    assert len(ed.rows) == 3


def test_switch_checklist_to_plain_keeps_progress(values):
    values["description"] = "[x] Milk\n[ ] Eggs"
    values["percent_complete"] = 50
    ed = _editor(values)
    assert ed.set_mode(False) is True
    assert values["description"] == "Milk\nEggs"
    assert values["percent_complete"] == 50


def test_switch_same_mode_is_noop(values):
    values["description"] = "[x] A"
    ed = _editor(values)
    assert ed.set_mode(True) is False


def test_cancelled_task_keeps_status(values):
    values["description"] = "[ ] A\n[ ] B"
    values["status"] = int(TaskStatus.CANCELLED)
    ed = _editor(values)
    ed.toggle(0, True)
    ed.toggle(1, True)
    assert values["status"] == int(TaskStatus.CANCELLED)
    assert values["percent_complete"] == 100


def test_content_changed_only_on_new_text(values):
    values["description"] = "[ ] A"
    ed = _editor(values)
    assert ed.content_changed() is False
    values["description"] = "[x] A\n[ ] C"
    assert ed.content_changed() is True
    assert [r.label for r in ed.rows] == ["A", "C", ""]


def test_plain_mode_edit_text(values):
    values["description"] = "note"
    ed = _editor(values)
    ed.edit_text("note, longer")
    assert ed.commit() is True
    assert values["description"] == "note, longer"
    assert values["status"] is None


def test_document_excludes_placeholder(values):
    values["description"] = "[x] A\n[ ] B"
    doc = _editor(values).document()
    assert doc.total == 2
    assert doc.checked_count == 1
