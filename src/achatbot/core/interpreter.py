"""Command interpreter - turns one input line into output messages.

The loop body is `step`: a function of (state, line) returning
(new state, messages). It mutates only the TaskList it is given.
"""

import logging
import re
from dataclasses import dataclass
from enum import IntEnum, auto

from . import messages
from .task_list import ErrorKind, Outcome, TaskList
from .tasks import TaskKind

logger = logging.getLogger(__name__)

EXIT_COMMAND = "bye"
LIST_COMMAND = "list"

INDEX_PATTERN = re.compile(r"[+-]?[0-9]+")

ADD_COMMANDS: dict[str, tuple[TaskKind, str | None]] = {
    "todo": (TaskKind.TODO, None),
    "deadline": (TaskKind.DEADLINE, messages.DEADLINE_SYNTAX),
    "event": (TaskKind.EVENT, messages.EVENT_SYNTAX),
}

INDEX_COMMANDS: dict[str, tuple[str, str]] = {
    "mark": ("mark_completed", messages.MARKED),
    "unmark": ("unmark_completed", messages.UNMARKED),
    "delete": ("delete", messages.REMOVED),
}


class InterpreterState(IntEnum):
    """Interpreter states. STOPPED is terminal."""

    RUNNING = auto()
    STOPPED = auto()


@dataclass
class Command:
    """A command keyword and everything after the first whitespace run."""

    keyword: str
    argument: str | None = None


def parse_command(line: str) -> Command:
    """Split a line into keyword and argument (None when there is none)."""
    parts = re.split(r"\s+", line.strip(), maxsplit=1)
    if len(parts) == 1:
        return Command(keyword=parts[0])
    return Command(keyword=parts[0], argument=parts[1])


def parse_index(text: str) -> int | None:
    """Parse a user-supplied index. Returns None if it is not an integer."""
    if not INDEX_PATTERN.fullmatch(text):
        return None
    return int(text)


def describe_error(outcome: Outcome) -> str:
    """User-facing text for a failed outcome."""
    match outcome.error:
        case ErrorKind.INDEX:
            return messages.NOT_IN_LIST
        case ErrorKind.PARSE:
            return messages.INVALID_NUMBER
        case ErrorKind.UNKNOWN_COMMAND:
            return messages.UNKNOWN_COMMAND
        case _:
            return outcome.message


def _run_index_command(command: Command, tasks: TaskList) -> list[str]:
    method_name, template = INDEX_COMMANDS[command.keyword]
    if command.argument is None:
        return [messages.MISSING_INDEX.format(command=command.keyword)]

    index = parse_index(command.argument)
    if index is None:
        logger.debug(f"Invalid index for {command.keyword}: {command.argument!r}")
        return [describe_error(Outcome.failure(ErrorKind.PARSE))]

    outcome = getattr(tasks, method_name)(index)
    if not outcome.ok:
        logger.debug(f"{command.keyword} {index} out of range (length {tasks.length()})")
        return [describe_error(outcome)]
    return [template.format(task=outcome.task)]


def _run_add_command(command: Command, tasks: TaskList) -> list[str]:
    kind, syntax = ADD_COMMANDS[command.keyword]
    if command.argument is None:
        return [messages.empty_description(command.keyword, syntax)]

    outcome = tasks.add(command.argument, kind)
    if not outcome.ok:
        logger.debug(f"Rejected {command.keyword}: {outcome.error.name}")
        return [describe_error(outcome)]
    return [
        messages.ADDED.format(task=outcome.task),
        messages.TASK_COUNT.format(count=tasks.length()),
    ]


def step(state: InterpreterState, line: str, tasks: TaskList) -> tuple[InterpreterState, list[str]]:
    """
    Process one input line.

    Returns the next state and the messages to display, in order.
    Lines received after STOPPED are ignored.
    """
    if state is InterpreterState.STOPPED:
        return state, []

    line = line.strip()
    if line == EXIT_COMMAND:
        return InterpreterState.STOPPED, []
    if line == LIST_COMMAND:
        return state, [tasks.render()]

    command = parse_command(line)
    logger.debug(f"Dispatching {command.keyword!r}")

    if command.keyword in INDEX_COMMANDS:
        return state, _run_index_command(command, tasks)
    if command.keyword in ADD_COMMANDS:
        return state, _run_add_command(command, tasks)
    return state, [describe_error(Outcome.failure(ErrorKind.UNKNOWN_COMMAND))]


class CommandInterpreter:
    """Holds a task list and the interpreter state between lines."""

    def __init__(self, tasks: TaskList | None = None):
        self.tasks = tasks if tasks is not None else TaskList()
        self.state = InterpreterState.RUNNING

    @property
    def stopped(self) -> bool:
        return self.state is InterpreterState.STOPPED

    def handle(self, line: str) -> list[str]:
        """Feed one line; returns the messages to display."""
        self.state, output = step(self.state, line, self.tasks)
        return output
