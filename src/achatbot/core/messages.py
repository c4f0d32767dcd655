"""User-facing message texts."""

DEADLINE_SYNTAX = "deadline <desc> /by <deadline>"
EVENT_SYNTAX = "event <desc> /from <start> /to <end>"

EMPTY_LIST = "List is empty."

INCORRECT_SYNTAX = "Incorrect syntax!\nPlease use this syntax:\n{syntax}"

MISSING_INDEX = (
    "☹ OOPS!!! You did not specify which task you want to {command}.\n"
    "Please use this syntax:\n"
    "{command} <index>"
)
EMPTY_DESCRIPTION = "☹ OOPS!!! The description of a {command} cannot be empty."
SYNTAX_REMINDER = "\nPlease use this syntax:\n{syntax}"

INVALID_NUMBER = "Please input a valid number for your index!"
NOT_IN_LIST = 'Make sure your item is in the list!\nYou may check using the "list" command.'
UNKNOWN_COMMAND = "☹ OOPS!!! I'm sorry, but I don't know what that means :-("

MARKED = "Nice! I've marked this task as done:\n  {task}"
UNMARKED = "OK, I've marked this task as not done yet:\n  {task}"
REMOVED = "Noted. I've removed this task:\n  {task}"
ADDED = "Got it. I've added this task:\n{task}"
TASK_COUNT = "Now you have {count} tasks in the list."


def incorrect_syntax(syntax: str) -> str:
    return INCORRECT_SYNTAX.format(syntax=syntax)


def empty_description(command: str, syntax: str | None = None) -> str:
    """Empty-description error, with a syntax reminder for commands that have one."""
    text = EMPTY_DESCRIPTION.format(command=command)
    if syntax:
        text += SYNTAX_REMINDER.format(syntax=syntax)
    return text
