"""Choosing and carrying out the sequence of stack operations that sorts ``a``."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.stacks import Stacks


def is_sorted(values: Iterable[int]) -> bool:
    """Tell whether ``values`` is in non-decreasing order.

    An empty sequence does not count as sorted.
    """
    items = list(values)
    if not items:
        return False
    return all(left <= right for left, right in zip(items, items[1:]))


def max_position(values: Iterable[int]) -> int:
    """Return the index of the first occurrence of the largest value."""
    items = list(values)
    return items.index(max(items))


def in_range(n: int, i: int, chunks: Sequence[int]) -> bool:
    """Tell whether ``n`` lies in the half-open chunk ``[chunks[i], chunks[i + 1])``."""
    return chunks[i] <= n < chunks[i + 1]


def generate_segments(values: Iterable[int]) -> list[int]:
    """Split the range of ``values`` into chunk boundaries.

    Up to 10 values give 2 chunks, up to 100 give 7, more give 10. The
    last boundary is one past the largest value.
    """
    items = list(values)
    low = min(items)
    high = max(items)
    if len(items) <= 10:
        count = 2
    elif len(items) <= 100:
        count = 7
    else:
        count = 10
    interval = (high - low) // count
    return [low + i * interval for i in range(count)] + [high + 1]


def _chunk_has_elements(values: Iterable[int], i: int, chunks: Sequence[int]) -> bool:
    return any(in_range(n, i, chunks) for n in values)


def _first_case(stacks: Stacks) -> None:
    stacks.sa()
    if is_sorted(stacks.a):
        return
    stacks.sa()
    stacks.ra()


def _second_case(stacks: Stacks) -> None:
    stacks.rra()
    if not is_sorted(stacks.a):
        stacks.sa()


def _third_case(stacks: Stacks) -> None:
    stacks.ra()
    stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Sort a three-element stack ``a``."""
    if is_sorted(stacks.a):
        return
    first, second, third = stacks.a[0], stacks.a[1], stacks.a[2]
    if first > second and second < third:
        _first_case(stacks)
    elif first < second and second > third:
        _second_case(stacks)
    else:
        _third_case(stacks)


def sort_four(stacks: Stacks) -> None:
    """Sort a four-element stack ``a`` using ``b`` for the smallest value."""
    smallest = min(stacks.a)
    while stacks.a[0] != smallest:
        stacks.ra()
    stacks.pb()
    sort_three(stacks)
    stacks.pa()


def _move_min_to_front(stacks: Stacks, smallest: int) -> None:
    position = list(stacks.a).index(smallest)
    rotate = stacks.ra if position < 3 else stacks.rra
    while stacks.a[0] != smallest:
        rotate()


def sort_five(stacks: Stacks) -> None:
    """Sort a five-element stack ``a`` using ``b`` for the smallest value."""
    smallest = min(stacks.a)
    if stacks.a[-1] == smallest:
        stacks.rra()
    elif stacks.a[0] != smallest:
        _move_min_to_front(stacks, smallest)
    stacks.pb()
    sort_four(stacks)
    stacks.pa()


def move_to_b(stacks: Stacks, chunks: Sequence[int]) -> None:
    """Push every value of ``a`` onto ``b``, one chunk after another."""
    i = 0
    while stacks.a:
        while _chunk_has_elements(stacks.a, i, chunks):
            if in_range(stacks.a[0], i, chunks):
                stacks.pb()
            else:
                stacks.ra()
        i += 1


def move_to_a(stacks: Stacks) -> None:
    """Bring ``b`` back onto ``a``, largest first, rotating by the shorter way."""
    while stacks.b:
        while (position := max_position(stacks.b)) != 0:
            if position <= len(stacks.b) - position:
                stacks.rb()
            else:
                stacks.rrb()
        stacks.pa()


def chunk_sort(stacks: Stacks) -> None:
    """Sort ``a`` of any size by pushing it out in chunks and back by maximum."""
    chunks = generate_segments(stacks.a)
    move_to_b(stacks, chunks)
    move_to_a(stacks)


def select_algorithm(stacks: Stacks) -> None:
    """Sort ``a`` with the method suited to its size."""
    size = len(stacks.a)
    if size == 2:
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)
    else:
        chunk_sort(stacks)


def solve(values: Iterable[int]) -> list[str]:
    """Return the operations that sort ``values``; none if already sorted."""
    items = list(values)
    if len(items) <= 1 or is_sorted(items):
        return []
    stacks = Stacks(items)
    select_algorithm(stacks)
    return stacks.ops