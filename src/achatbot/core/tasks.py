"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass
from enum import Enum


class TaskKind(Enum):
    """Task variant. The value is the kind code shown when rendering."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass
class Task:
    """A todo, deadline or event.

    One struct for all variants: `by` is only set for deadlines,
    `start`/`end` only for events.
    """

    kind: TaskKind
    description: str
    completed: bool = False
    by: str | None = None
    start: str | None = None
    end: str | None = None

    @classmethod
    def todo(cls, description: str) -> "Task":
        return cls(kind=TaskKind.TODO, description=description)

    @classmethod
    def deadline(cls, description: str, by: str) -> "Task":
        return cls(kind=TaskKind.DEADLINE, description=description, by=by)

    @classmethod
    def event(cls, description: str, start: str, end: str) -> "Task":
        return cls(kind=TaskKind.EVENT, description=description, start=start, end=end)

    def mark(self) -> None:
        self.completed = True

    def unmark(self) -> None:
        self.completed = False

    def suffix(self) -> str:
        """Kind-specific trailing text, e.g. ' (by: sunday)'."""
        match self.kind:
            case TaskKind.DEADLINE:
                return f" (by: {self.by})"
            case TaskKind.EVENT:
                return f" (from: {self.start} to: {self.end})"
            case _:
                return ""

    def render(self) -> str:
        """
        One-line rendering.

        [T][ ] read book
        [D][X] submit (by: sunday)
        [E][ ] trip (from: mon to: fri)
        """
        mark = "X" if self.completed else " "
        return f"[{self.kind.value}][{mark}] {self.description}{self.suffix()}"

    def __str__(self) -> str:
        return self.render()
