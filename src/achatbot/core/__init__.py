"""Functional core - pure business logic with no I/O."""

from .tasks import Task, TaskKind
from .task_list import ErrorKind, Outcome, TaskList
from .interpreter import Command, CommandInterpreter, InterpreterState, parse_command, step

__all__ = [
    # Tasks
    "Task",
    "TaskKind",
    # Task list
    "TaskList",
    "Outcome",
    "ErrorKind",
    # Interpreter
    "Command",
    "CommandInterpreter",
    "InterpreterState",
    "parse_command",
    "step",
]
