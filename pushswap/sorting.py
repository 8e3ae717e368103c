"""Strategies that sort stack a using only the puzzle's operations."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.stacks import Stacks

# Inputs of at least this many numbers are sorted by the quicksort strategy.
QUICKSORT_THRESHOLD = 500


def _upper_half(length: int) -> int:
    return length // 2 + length % 2


def _b_ascends_on_top(stacks: Stacks) -> bool:
    return len(stacks.b) >= 2 and stacks.b[0] < stacks.b[1]


def sort_three(stacks: Stacks) -> None:
    """Sort a stack a of exactly three numbers."""
    a = stacks.a
    if a[0] > a[1] and a[0] < a[2] and a[1] < a[2]:
        stacks.sa()
    if a[0] > a[1] and a[0] > a[2] and a[1] > a[2]:
        stacks.sa()
        stacks.rra()
    if a[0] > a[1] and a[0] > a[2] and a[1] < a[2]:
        stacks.ra()
    if a[0] < a[1] and a[0] < a[2] and a[1] > a[2]:
        stacks.sa()
        stacks.ra()
    if a[0] < a[1] and a[0] > a[2] and a[1] > a[2]:
        stacks.rra()


def _drain_b(stacks: Stacks) -> None:
    """Push b back onto a, largest first, turning b the shorter way round."""
    while stacks.b:
        if stacks.b[0] == stacks.max_b():
            stacks.pa()
            if not stacks.b:
                break
        biggest = stacks.max_b()
        position = stacks.b.index(biggest)
        if position <= len(stacks.b) // 2:
            while stacks.b[0] != biggest:
                stacks.rb()
        else:
            while stacks.b[0] != biggest:
                stacks.rrb()
        stacks.pa()


def start_sort(stacks: Stacks) -> None:
    """Halve a around its median until two or three remain, then bring b back."""
    while True:
        size = len(stacks.a)
        if size == stacks.args and stacks.is_sorted_a():
            return
        if size in (2, 3):
            if not stacks.is_sorted_a():
                if size == 2:
                    stacks.sa()
                else:
                    sort_three(stacks)
            _drain_b(stacks)
            continue
        if size < 2:
            raise ValueError(
                f"cannot sort: stack a holds {size} of {stacks.args} numbers"
            )
        pivot = stacks.median_a(size)
        keep = _upper_half(size)
        while len(stacks.a) != keep:
            if stacks.a[0] < pivot:
                stacks.pb()
            else:
                stacks.ra()


def sort_b(stacks: Stacks) -> None:
    """Move every number of b back onto a in order, then finish sorting a."""
    _drain_b(stacks)
    start_sort(stacks)


def first_separation(stacks: Stacks, length: int) -> None:
    """Split the top ``length`` numbers of a into halves, then quicksort each."""
    items = length
    keep = _upper_half(items)
    pivot_a = stacks.median_a(length)
    while length != keep:
        if stacks.a[0] < pivot_a:
            length -= 1
            stacks.pb()
        elif len(stacks.b) > 2 and stacks.b[0] <= stacks.median_b(len(stacks.b)):
            stacks.rr()
        else:
            stacks.ra()
    quicksort_a(stacks, keep, 0)
    quicksort_b(stacks, items // 2, 0)


def quicksort_a(stacks: Stacks, length: int, count: int) -> None:
    """Sort the top ``length`` numbers of a into ascending order on a."""
    if stacks.is_sorted_a():
        return
    if length == 2:
        sort_small_a(stacks)
        return
    if length == 3:
        if len(stacks.a) == 3:
            sort_three(stacks)
        else:
            sort_small_a2(stacks, length)
        return
    pivot = stacks.median_a(length)
    items = length
    keep = _upper_half(items)
    while length != keep:
        if stacks.a[0] < pivot:
            length -= 1
            stacks.pb()
        else:
            count += 1
            stacks.ra()
    while keep != len(stacks.a) and count:
        count -= 1
        stacks.rra()
    quicksort_a(stacks, keep, 0)
    quicksort_b(stacks, items // 2, 0)


def quicksort_b(stacks: Stacks, length: int, count: int) -> None:
    """Sort the top ``length`` numbers of b and move them onto a."""
    if not count and stacks.is_sorted_b():
        for _ in range(max(length, 0)):
            stacks.pa()
        length = -1
    if length <= 3:
        sort_small_b(stacks, length)
        return
    pivot = stacks.median_b(length)
    items = length
    while length != items // 2:
        if stacks.b[0] >= pivot:
            length -= 1
            stacks.pa()
        else:
            count += 1
            stacks.rb()
    while items // 2 != len(stacks.b) and count:
        count -= 1
        stacks.rrb()
    quicksort_a(stacks, _upper_half(items), 0)
    quicksort_b(stacks, items // 2, 0)


def sort_small_a(stacks: Stacks) -> None:
    """Order the top two numbers of a, swapping b as well when that helps."""
    if stacks.a[0] > stacks.a[1]:
        if _b_ascends_on_top(stacks):
            stacks.ss()
        else:
            stacks.sa()


def sort_small_a2(stacks: Stacks, length: int) -> None:
    """Order the top three numbers of a when more numbers lie below them."""
    a = stacks.a
    while length != 3 or not (a[0] < a[1] < a[2]):
        if length == 3 and a[0] > a[1] and a[2] != 0:
            if a[0] > a[1] and _b_ascends_on_top(stacks):
                stacks.ss()
            else:
                stacks.sa()
        elif length == 3 and not (a[2] > a[0] and a[2] > a[1]):
            stacks.pb()
            length -= 1
        elif a[0] > a[1]:
            stacks.sa()
        else:
            previous = length
            length += 1
            if previous:
                stacks.pa()


def sort_small_b(stacks: Stacks, length: int) -> None:
    """Move the top two or three numbers of b onto a in ascending order."""
    a, b = stacks.a, stacks.b
    if length == 2:
        if b[0] < b[1]:
            stacks.sb()
        stacks.pa()
        stacks.pa()
    elif length == 3:
        while length or not (a[0] < a[1] < a[2]):
            if length == 1 and a[0] > a[1]:
                stacks.sa()
            elif (
                length == 1
                or (length >= 2 and b[0] > b[1])
                or (length == 3 and b[0] > b[2])
            ):
                stacks.pa()
                length -= 1
            else:
                stacks.sb()


def sort_stacks(stacks: Stacks) -> None:
    """Sort a with the strategy that suits its size."""
    if stacks.is_sorted_a():
        return
    size = len(stacks.a)
    if size == 2:
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size < QUICKSORT_THRESHOLD:
        start_sort(stacks)
    else:
        first_separation(stacks, size)


def push_swap(values: Iterable[int]) -> list[str]:
    """Return the operations that sort ``values``, top of the stack first."""
    stacks = Stacks(values)
    sort_stacks(stacks)
    return list(stacks.moves)