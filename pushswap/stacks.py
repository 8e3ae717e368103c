"""The two stacks of the puzzle and the operations that move numbers between them."""

from __future__ import annotations

from collections.abc import Iterable


def _swap(stack: list[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: list[int]) -> None:
    if stack:
        stack.append(stack.pop(0))


def _reverse_rotate(stack: list[int]) -> None:
    if stack:
        stack.insert(0, stack.pop())


def _median(stack: list[int], length: int) -> int:
    if length <= 0 or length > len(stack):
        raise ValueError(
            f"length {length} is outside the stack of {len(stack)} numbers"
        )
    return sorted(stack[:length])[length // 2]


class Stacks:
    """Stacks ``a`` and ``b``, top first, with every applied operation recorded.

    ``moves`` holds the names of the operations in the order they were
    carried out, as they are printed by the command.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: list[int] = list(values)
        self.b: list[int] = []
        self.args = len(self.a)
        self.moves: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    def _record(self, name: str) -> None:
        self.moves.append(name)

    def sa(self) -> None:
        """Swap the two numbers on top of a."""
        _swap(self.a)
        self._record("sa")

    def sb(self) -> None:
        """Swap the two numbers on top of b; nothing happens with fewer than two."""
        if len(self.b) < 2:
            return
        _swap(self.b)
        self._record("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks at once."""
        _swap(self.a)
        _swap(self.b)
        self._record("ss")

    def pa(self) -> None:
        """Move the top of b onto a; nothing happens when b is empty."""
        if self.b:
            self.a.insert(0, self.b.pop(0))
            self._record("pa")

    def pb(self) -> None:
        """Move the top of a onto b; nothing happens when a is empty."""
        if self.a:
            self.b.insert(0, self.a.pop(0))
            self._record("pb")

    def ra(self) -> None:
        """Rotate a: the top number goes to the bottom."""
        _rotate(self.a)
        self._record("ra")

    def rb(self) -> None:
        """Rotate b: the top number goes to the bottom."""
        _rotate(self.b)
        self._record("rb")

    def rr(self) -> None:
        """Rotate both stacks at once."""
        _rotate(self.a)
        _rotate(self.b)
        self._record("rr")

    def rra(self) -> None:
        """Reverse-rotate a: the bottom number goes to the top."""
        _reverse_rotate(self.a)
        self._record("rra")

    def rrb(self) -> None:
        """Reverse-rotate b: the bottom number goes to the top."""
        _reverse_rotate(self.b)
        self._record("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks; nothing happens when b is empty."""
        if self.b:
            _reverse_rotate(self.a)
            _reverse_rotate(self.b)
            self._record("rrr")

    def is_sorted_a(self) -> bool:
        """True when a ascends from top to bottom."""
        return all(x <= y for x, y in zip(self.a, self.a[1:]))

    def is_sorted_b(self) -> bool:
        """True when b descends from top to bottom."""
        return all(x >= y for x, y in zip(self.b, self.b[1:]))

    def max_b(self) -> int:
        """The largest number in b."""
        if not self.b:
            raise ValueError("stack b is empty")
        return max(self.b)

    def median_a(self, length: int) -> int:
        """The pivot of the top ``length`` numbers of a: the middle one once sorted."""
        return _median(self.a, length)

    def median_b(self, length: int) -> int:
        """The pivot of the top ``length`` numbers of b: the middle one once sorted."""
        return _median(self.b, length)