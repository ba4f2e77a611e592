"""Task rotation — randomized, self-refilling order of task assignment."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


class TaskRotation:
    """Hands out task names round-robin over independent shuffles.

    Each pass is a uniform permutation drawn from the injected generator.
    When a pass is exhausted the next one is a fresh shuffle, not a repeat
    of the previous order.

    Usage::

        rotation = TaskRotation(["Email", "Review PR"], np.random.default_rng(7))
        first = rotation.next()
    """

    def __init__(self, tasks: Sequence[str], rng: np.random.Generator) -> None:
        if not tasks:
            raise ValueError("TaskRotation needs at least one task")
        self._tasks = tuple(tasks)
        self._rng = rng
        self._queue: list[str] = []
        self.passes = 0

    def __len__(self) -> int:
        return len(self._tasks)

    def shuffled(self) -> list[str]:
        """Return a fresh uniform permutation of the task set."""
        order = self._rng.permutation(len(self._tasks))
        return [self._tasks[int(i)] for i in order]

    def next(self) -> str:
        """Pop the next task, refilling with a new shuffle when empty."""
        if not self._queue:
            self._queue = self.shuffled()
            self.passes += 1
        return self._queue.pop(0)
