"""Task store — the validated, ordered task list fed to the generator."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from day_planner.exceptions import DuplicateTask, InvalidInput


class TaskList:
    """Ordered set of task names, unique ignoring case.

    Insertion order is the display order (and drives task colours in the
    UI); scheduling order is shuffled independently by the generator.
    """

    def __init__(self) -> None:
        self._names: list[str] = []

    @classmethod
    def from_names(cls, names: Iterable[str]) -> TaskList:
        """Build a list, rejecting blanks and duplicates like ``add``."""
        task_list = cls()
        for name in names:
            task_list.add(name)
        return task_list

    def add(self, name: str) -> str:
        """Append a task.

        Returns:
            The stored (trimmed) name.

        Raises:
            InvalidInput: If the name is blank.
            DuplicateTask: If a task with the same name already exists.
        """
        cleaned = name.strip()
        if not cleaned:
            raise InvalidInput("Task name cannot be empty.")
        if cleaned in self:
            raise DuplicateTask(cleaned)
        self._names.append(cleaned)
        return cleaned

    def remove(self, index: int) -> str:
        """Remove and return the task at ``index``.

        Raises:
            IndexError: If the index is out of range.
        """
        return self._names.pop(index)

    def clear(self) -> None:
        self._names.clear()

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._names)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        key = name.strip().casefold()
        return any(existing.casefold() == key for existing in self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"TaskList({self._names!r})"
