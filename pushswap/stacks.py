"""The two stacks and the operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable


class Stacks:
    """Stack ``a`` holding the input numbers and an empty stack ``b``.

    Index 0 of each deque is the top of that stack. Every operation that
    takes effect appends its name to ``ops``, in the order performed.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.ops: list[str] = []

    def _swap(self, stack: deque[int], name: str) -> None:
        if len(stack) <= 1:
            return
        stack[0], stack[1] = stack[1], stack[0]
        self.ops.append(name)

    def _rotate(
        self,
        stack: deque[int],
        name: str,
        step: int,
        swap: Callable[[], None],
    ) -> None:
        if len(stack) <= 1:
            return
        # With two elements a rotation is the same as a swap.
        if len(stack) == 2:
            swap()
            return
        stack.rotate(step)
        self.ops.append(name)

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        self._swap(self.a, "sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        self._swap(self.b, "sb")

    def ss(self) -> None:
        """Swap the tops of both stacks."""
        self.sa()
        self.sb()
        self.ops.append("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``; nothing happens if ``b`` is empty."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self.ops.append("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``; nothing happens if ``a`` is empty."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self.ops.append("pb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self._rotate(self.a, "ra", -1, self.sa)

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self._rotate(self.b, "rb", -1, self.sb)

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        self.ra()
        if self.b:
            self.b.rotate(-1)
        self.ops.append("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self._rotate(self.a, "rra", 1, self.sa)

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self._rotate(self.b, "rrb", 1, self.sb)

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        self.rra()
        if len(self.b) >= 2:
            self.b.rotate(1)
        self.ops.append("rrr")