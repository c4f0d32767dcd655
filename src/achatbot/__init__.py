"""AChatBot - interactive task list manager."""
