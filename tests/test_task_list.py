"""Tests for the task list."""

import pytest

from achatbot.core import messages
from achatbot.core.task_list import ErrorKind, TaskList
from achatbot.core.tasks import Task, TaskKind


# Fixtures
@pytest.fixture
def tasks():
    """A list holding one task of each kind."""
    task_list = TaskList()
    task_list.add("read book", TaskKind.TODO)
    task_list.add("submit /by sunday", TaskKind.DEADLINE)
    task_list.add("trip /from mon /to fri", TaskKind.EVENT)
    return task_list


class TestAdd:
    def test_starts_empty(self):
        assert TaskList().length() == 0
        with pytest.raises(TypeError):
            TaskList([Task.todo("smuggled")])

    def test_todo(self):
        task_list = TaskList()
        outcome = task_list.add("read book", TaskKind.TODO)
        assert outcome.ok
        assert outcome.task == Task.todo("read book")
        assert task_list.length() == 1

    def test_todo_blank_description(self):
        task_list = TaskList()
        outcome = task_list.add("   ", TaskKind.TODO)
        assert outcome.error is ErrorKind.MISSING_ARGUMENT
        assert task_list.length() == 0

    def test_deadline(self):
        outcome = TaskList().add("submit /by sunday", TaskKind.DEADLINE)
        assert outcome.task.render() == "[D][ ] submit (by: sunday)"

    def test_deadline_multiple_spaces(self):
        outcome = TaskList().add("submit   /by   sunday", TaskKind.DEADLINE)
        assert outcome.task.description == "submit"
        assert outcome.task.by == "sunday"

    def test_deadline_only_first_by_splits(self):
        outcome = TaskList().add("a /by b /by c", TaskKind.DEADLINE)
        assert outcome.ok
        assert outcome.task.description == "a"
        assert outcome.task.by == "b /by c"

    @pytest.mark.parametrize("text", ["oops", "oops/by sunday", "oops /bysunday", "/by sunday"])
    def test_deadline_syntax_error(self, text):
        task_list = TaskList()
        outcome = task_list.add(text, TaskKind.DEADLINE)
        assert outcome.error is ErrorKind.SYNTAX
        assert outcome.message == messages.incorrect_syntax(messages.DEADLINE_SYNTAX)
        assert task_list.length() == 0

    def test_event(self):
        outcome = TaskList().add("trip /from mon /to fri", TaskKind.EVENT)
        assert outcome.task.render() == "[E][ ] trip (from: mon to: fri)"

    def test_event_trailing_to_ignored(self):
        outcome = TaskList().add("trip /from mon /to fri /to ", TaskKind.EVENT)
        assert outcome.ok
        assert outcome.task.end == "fri"

    def test_event_trailing_from_is_syntax_error(self):
        outcome = TaskList().add("trip /from ", TaskKind.EVENT)
        assert outcome.error is ErrorKind.SYNTAX

    def test_deadline_trailing_by_gives_empty_by(self):
        outcome = TaskList().add("submit /by ", TaskKind.DEADLINE)
        assert outcome.ok
        assert outcome.task.by == ""

    def test_event_keeps_inner_spaces(self):
        outcome = TaskList().add("project meeting /from Mon 2pm /to 4pm", TaskKind.EVENT)
        assert outcome.task.description == "project meeting"
        assert outcome.task.start == "Mon 2pm"
        assert outcome.task.end == "4pm"

    @pytest.mark.parametrize(
        "text",
        [
            "trip",
            "trip /from mon",
            "trip /to fri /from mon",
            "trip /from mon /to fri /to sat",
            "trip /from mon /to fri /from sat",
            "trip /from a /from b /to c",
        ],
    )
    def test_event_syntax_error(self, text):
        task_list = TaskList()
        outcome = task_list.add(text, TaskKind.EVENT)
        assert outcome.error is ErrorKind.SYNTAX
        assert outcome.message == messages.incorrect_syntax(messages.EVENT_SYNTAX)
        assert task_list.length() == 0

    def test_length_counts_only_successful_adds(self):
        task_list = TaskList()
        task_list.add("a", TaskKind.TODO)
        task_list.add("b", TaskKind.DEADLINE)
        task_list.add("c /from x", TaskKind.EVENT)
        task_list.add("d /by y", TaskKind.DEADLINE)
        assert task_list.length() == 2
        assert len(task_list) == 2


class TestMark:
    def test_mark(self, tasks):
        outcome = tasks.mark_completed(2)
        assert outcome.ok
        assert outcome.task.render() == "[D][X] submit (by: sunday)"

    def test_mark_then_unmark_restores_rendering(self, tasks):
        before = tasks.render()
        tasks.mark_completed(3)
        tasks.unmark_completed(3)
        assert tasks.render() == before

    def test_unmark_uncompleted_is_noop(self, tasks):
        outcome = tasks.unmark_completed(1)
        assert outcome.ok
        assert outcome.task.completed is False

    @pytest.mark.parametrize("index", [0, -1, 4, 100])
    @pytest.mark.parametrize("operation", ["mark_completed", "unmark_completed", "delete"])
    def test_out_of_range(self, tasks, operation, index):
        before = tasks.render()
        outcome = getattr(tasks, operation)(index)
        assert outcome.error is ErrorKind.INDEX
        assert outcome.task is None
        assert tasks.render() == before
        assert tasks.length() == 3

    @pytest.mark.parametrize("operation", ["mark_completed", "unmark_completed", "delete"])
    def test_empty_list(self, operation):
        task_list = TaskList()
        outcome = getattr(task_list, operation)(1)
        assert outcome.error is ErrorKind.INDEX
        assert task_list.length() == 0


class TestDelete:
    def test_delete_returns_task(self, tasks):
        outcome = tasks.delete(1)
        assert outcome.task.render() == "[T][ ] read book"

    def test_delete_compacts_positions(self, tasks):
        tasks.delete(2)
        assert tasks.length() == 2
        assert tasks.render() == (
            "1.[T][ ] read book\n"
            "2.[E][ ] trip (from: mon to: fri)"
        )

    def test_delete_last_then_empty(self):
        task_list = TaskList()
        task_list.add("only", TaskKind.TODO)
        task_list.delete(1)
        assert task_list.render() == messages.EMPTY_LIST


class TestRender:
    def test_empty(self):
        assert TaskList().render() == "List is empty."

    def test_numbered_listing(self, tasks):
        tasks.mark_completed(1)
        assert tasks.render() == (
            "1.[T][X] read book\n"
            "2.[D][ ] submit (by: sunday)\n"
            "3.[E][ ] trip (from: mon to: fri)"
        )

    def test_iteration_order(self, tasks):
        assert [t.kind for t in tasks] == [TaskKind.TODO, TaskKind.DEADLINE, TaskKind.EVENT]
