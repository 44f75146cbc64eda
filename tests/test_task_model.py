"""
Unit tests for models/task.py.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from history_archive.models.task import Task, as_plain_bullet, format_checkbox_state


def _make_task():
    return Task(
        parents=["- [ ] A", "\t- [x] B", "\t\t- plain"],
        task="\t\t\t- [ ] C",
    )


def test_parents_become_plain_bullets():
    task = _make_task()
    assert task.parents == ["- A", "\t- B", "\t\t- plain"]


def test_children_always_empty():
    assert _make_task().children == []


def test_as_plain_bullet_in_progress():
    assert as_plain_bullet("\t- [/] Started") == "\t- Started"


def test_mark_completed():
    task = _make_task()
    task.mark_completed()
    assert task.task == "\t\t\t- [x] C"
    assert task.status == "done"


def test_mark_in_progress():
    task = _make_task()
    task.mark_in_progress()
    assert task.task == "\t\t\t- [/] C"
    assert task.status == "in-progress"


def test_mark_completed_leaves_checked_task():
    task = Task(parents=[], task="- [x] Already done")
    task.mark_completed()
    assert task.task == "- [x] Already done"


def test_render_all_ancestors():
    assert _make_task().render(0) == "- A\n\t- B\n\t\t- plain\n\t\t\t- [ ] C"


def test_render_from_index():
    assert _make_task().render(2) == "\t\t- plain\n\t\t\t- [ ] C"


def test_render_without_ancestors():
    task = _make_task()
    assert task.render(3) == "\t\t\t- [ ] C"
    assert Task(parents=[], task="- [ ] Solo").render() == "- [ ] Solo"


def test_str_is_full_render():
    task = _make_task()
    assert str(task) == task.render(0)


def test_format_checkbox_state():
    assert format_checkbox_state("done") == "- [x]"
    assert format_checkbox_state("in-progress") == "- [/]"
    assert format_checkbox_state("open") == "- [ ]"
