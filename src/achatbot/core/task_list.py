"""Task list with 1-based positions and argument validation.

Pure logic - no I/O. Operations never raise for bad user input; they
return an Outcome carrying either the affected task or an ErrorKind.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from . import messages
from .tasks import Task, TaskKind

BY_DELIMITER = re.compile(r" +/by +")
FROM_DELIMITER = re.compile(r" +/from +")
TO_DELIMITER = re.compile(r" +/to +")


class ErrorKind(Enum):
    """Why an operation failed."""

    SYNTAX = auto()  # /by, /from or /to missing or malformed
    INDEX = auto()  # position outside 1..length
    PARSE = auto()  # index is not an integer
    MISSING_ARGUMENT = auto()  # command given without description/index
    UNKNOWN_COMMAND = auto()


@dataclass
class Outcome:
    """Result of a task list operation."""

    task: Task | None = None
    error: ErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, task: Task) -> "Outcome":
        return cls(task=task)

    @classmethod
    def failure(cls, error: ErrorKind, message: str = "") -> "Outcome":
        return cls(error=error, message=message)


def parse_deadline(text: str) -> Outcome:
    """Parse '<desc> /by <by>'. Only the first /by separates."""
    parts = BY_DELIMITER.split(text, maxsplit=1)
    if len(parts) != 2 or not parts[0]:
        return Outcome.failure(ErrorKind.SYNTAX, messages.incorrect_syntax(messages.DEADLINE_SYNTAX))
    description, by = parts
    return Outcome.success(Task.deadline(description, by))


def split_all(pattern: re.Pattern, text: str) -> list[str]:
    """Split on every match, dropping trailing empty parts."""
    parts = pattern.split(text)
    while len(parts) > 1 and not parts[-1]:
        parts.pop()
    return parts


def parse_event(text: str) -> Outcome:
    """
    Parse '<desc> /from <start> /to <end>'.

    /from must come before /to, and each must appear exactly once
    (a trailing delimiter with nothing after it is ignored).
    """
    failure = Outcome.failure(ErrorKind.SYNTAX, messages.incorrect_syntax(messages.EVENT_SYNTAX))

    first = split_all(FROM_DELIMITER, text)
    if len(first) != 2 or not first[0]:
        return failure
    description, remainder = first

    second = split_all(TO_DELIMITER, remainder)
    if len(second) != 2:
        return failure
    start, end = second
    return Outcome.success(Task.event(description, start, end))


class TaskList:
    """Ordered tasks addressed by 1-based position."""

    def __init__(self):
        self._tasks: list[Task] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def length(self) -> int:
        """Current task count."""
        return len(self._tasks)

    def add(self, description_and_args: str, kind: TaskKind) -> Outcome:
        """Parse the arguments for `kind`, append the task and return it."""
        match kind:
            case TaskKind.TODO:
                if not description_and_args.strip():
                    return Outcome.failure(
                        ErrorKind.MISSING_ARGUMENT, messages.empty_description("todo")
                    )
                outcome = Outcome.success(Task.todo(description_and_args))
            case TaskKind.DEADLINE:
                outcome = parse_deadline(description_and_args)
            case TaskKind.EVENT:
                outcome = parse_event(description_and_args)

        if outcome.ok:
            self._tasks.append(outcome.task)
        return outcome

    def _in_range(self, index: int) -> bool:
        # An empty list fails here too.
        return 0 < index <= len(self._tasks)

    def mark_completed(self, index: int) -> Outcome:
        """Mark the task at 1-based `index` as done."""
        if not self._in_range(index):
            return Outcome.failure(ErrorKind.INDEX)
        task = self._tasks[index - 1]
        task.mark()
        return Outcome.success(task)

    def unmark_completed(self, index: int) -> Outcome:
        """Mark the task at 1-based `index` as not done."""
        if not self._in_range(index):
            return Outcome.failure(ErrorKind.INDEX)
        task = self._tasks[index - 1]
        task.unmark()
        return Outcome.success(task)

    def delete(self, index: int) -> Outcome:
        """Remove and return the task at 1-based `index`; later tasks shift down."""
        if not self._in_range(index):
            return Outcome.failure(ErrorKind.INDEX)
        return Outcome.success(self._tasks.pop(index - 1))

    def render(self) -> str:
        """Numbered listing, or the empty-list message."""
        if not self._tasks:
            return messages.EMPTY_LIST
        return "\n".join(f"{i}.{task.render()}" for i, task in enumerate(self._tasks, start=1))
