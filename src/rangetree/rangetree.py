from __future__ import annotations
from collections.abc import Sequence
import logging
import math
import operator
from typing import Callable, Generic, TypeVar, overload

log = logging.getLogger(__name__)

T = TypeVar("T")
C = Callable[[T, T], T]


class Assigned(Generic[T]):
    """A pending range assignment that has not been pushed to the children yet"""

    __slots__: tuple[str, ...] = ("value",)

    def __init__(self, value: T):
        self.value: T = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Assigned) and self.value == other.value

    def __repr__(self):
        return f"<Assigned {self.value!r}>"


def repeat(combine: C[T], value: T, count: int, neutral: T) -> T:
    """Combine `count` copies of value together by binary doubling

    Only associativity is needed, so this works for any combining operation
    """
    ret = neutral
    step = value
    while count > 0:
        if count & 1:
            ret = combine(ret, step)
        count >>= 1
        if count:
            step = combine(step, step)
    return ret


class RangeTree(Generic[T]):
    """Fixed size sequence with range aggregate queries and lazy range assignment.

    The tree is stored implicitly in flat lists of length 4n. Node i covers
    the half open range [l, r), and its children 2i+1 and 2i+2 cover [l, m)
    and [m, r) where m = (l + r) // 2.

    Every node stores the exact combined value of its range as long as none
    of its strict ancestors carries a pending tag. A node with a pending tag
    has had its whole range assigned, and its children are stale until it is
    pushed.
    """

    def __init__(self, combine: C[T], neutral: T, values: Sequence[T] = ()):
        self.combine: C[T] = combine
        self.neutral: T = neutral
        self.size: int = 0
        self.nodes: list[T] = []
        self.pending: list[Assigned[T] | None] = []
        self.build(values)

    @classmethod
    def summing(cls, values: Sequence[T] = ()) -> RangeTree:
        return cls(operator.add, 0, values)

    @classmethod
    def minimum(cls, values: Sequence[T] = ()) -> RangeTree:
        return cls(min, math.inf, values)

    # --- Construction ---
    def build(self, values: Sequence[T]) -> RangeTree[T]:
        """(Re)build the whole tree from values. Clears any pending tags"""
        values = list(values)
        self.size = len(values)
        self.nodes = [self.neutral] * (4 * self.size)
        self.pending = [None] * (4 * self.size)
        if self.size:
            self._build(values, 0, 0, self.size)
        return self

    def _build(self, values: list[T], i: int, l: int, r: int):
        if r - l == 1:
            self.nodes[i] = values[l]
            return
        m = (l + r) // 2
        self._build(values, 2 * i + 1, l, m)
        self._build(values, 2 * i + 2, m, r)
        self.nodes[i] = self.combine(self.nodes[2 * i + 1], self.nodes[2 * i + 2])

    # --- Public API ---
    def __len__(self) -> int:
        return self.size

    def __repr__(self):
        return f"<RangeTree size: {self.size} total: {self.total()!r}>"

    def _normalize_index(self, key: int) -> int:
        if key < 0:
            key += self.size
        if key < 0 or key >= self.size:
            raise IndexError("RangeTree index out of range")
        return key

    def __getitem__(self, key: int | slice) -> T:
        if isinstance(key, slice):
            start, stop, step = key.indices(self.size)
            if step != 1:
                raise ValueError("Slice step must be 1")
            return self.query(start, stop)
        key = self._normalize_index(key)
        return self.query(key, key + 1)

    @overload
    def __setitem__(self, key: int, value: T) -> None: ...

    @overload
    def __setitem__(self, key: slice, value: T) -> None: ...

    def __setitem__(self, key: int | slice, value: T) -> None:
        if isinstance(key, slice):
            start, stop, step = key.indices(self.size)
            if step != 1:
                raise ValueError("Slice step must be 1")
            self.assign(start, stop, value)
        else:
            self.update_point(self._normalize_index(key), value)

    def total(self) -> T:
        """Return the combined value of the whole sequence"""
        return self.nodes[0] if self.size else self.neutral

    def query(self, ql: int, qr: int) -> T:
        """Return the combined value of [ql, qr). Reversed bounds are swapped"""
        if ql > qr:
            ql, qr = qr, ql
        if not self.size:
            return self.neutral
        return self._query(0, 0, self.size, ql, qr)

    def update_point(self, pos: int, value: T) -> T:
        """Set the value at pos and return the new total.

        A pos outside [0, n) is ignored.
        """
        if pos < 0 or pos >= self.size:
            log.debug("Ignoring point update outside [0, %d): %d", self.size, pos)
            return self.total()
        return self._update_point(0, 0, self.size, pos, value)

    def assign(self, ql: int, qr: int, value: T) -> T:
        """Set every value in [ql, qr) to value and return the new total"""
        if ql > qr:
            ql, qr = qr, ql
        if not self.size:
            return self.neutral
        return self._assign(0, 0, self.size, ql, qr, value)

    def flush(self):
        """Push every pending assignment all the way down to the leaves"""
        if self.size:
            self._flush(0, 0, self.size)

    def to_list(self) -> list[T]:
        """Return all of the leaf values in order"""
        self.flush()
        ret: list[T] = []
        self._collect(0, 0, self.size, ret)
        return ret

    def render_debug_tree(self, fmt: Callable[[T], str] = str) -> str:
        """Draw the tree for debugging. See render.render_tree"""
        from .render import render_tree

        return render_tree(self, fmt)

    # ------------------------------------------------------------
    # Propagation
    # ------------------------------------------------------------

    def assigned_value(self, value: T, width: int) -> T:
        """The exact value of a node of the given width with every leaf set to value"""
        return repeat(self.combine, value, width, self.neutral)

    def _apply(self, i: int, width: int, value: T):
        self.nodes[i] = self.assigned_value(value, width)
        if width > 1:
            self.pending[i] = Assigned(value)

    def _push(self, i: int, l: int, r: int):
        """Move the pending assignment at node i one level down"""
        tag = self.pending[i]
        if tag is None:
            return
        self.pending[i] = None
        if r - l == 1:
            return
        m = (l + r) // 2
        self._apply(2 * i + 1, m - l, tag.value)
        self._apply(2 * i + 2, r - m, tag.value)

    def _flush(self, i: int, l: int, r: int):
        if r - l == 1:
            self.pending[i] = None
            return
        self._push(i, l, r)
        m = (l + r) // 2
        self._flush(2 * i + 1, l, m)
        self._flush(2 * i + 2, m, r)
        self.nodes[i] = self.combine(self.nodes[2 * i + 1], self.nodes[2 * i + 2])

    # ------------------------------------------------------------
    # Recursive descents
    # ------------------------------------------------------------

    def _query(self, i: int, l: int, r: int, ql: int, qr: int) -> T:
        if r <= ql or l >= qr:
            return self.neutral
        if ql <= l and r <= qr:
            return self.nodes[i]

        self._push(i, l, r)
        m = (l + r) // 2
        return self.combine(
            self._query(2 * i + 1, l, m, ql, qr),
            self._query(2 * i + 2, m, r, ql, qr),
        )

    def _update_point(self, i: int, l: int, r: int, pos: int, value: T) -> T:
        if pos < l or pos >= r:
            return self.nodes[i]
        if r - l == 1:
            self.pending[i] = None
            self.nodes[i] = value
            return value

        self._push(i, l, r)
        m = (l + r) // 2
        self.nodes[i] = self.combine(
            self._update_point(2 * i + 1, l, m, pos, value),
            self._update_point(2 * i + 2, m, r, pos, value),
        )
        return self.nodes[i]

    def _assign(self, i: int, l: int, r: int, ql: int, qr: int, value: T) -> T:
        if r <= ql or l >= qr:
            return self.nodes[i]
        if ql <= l and r <= qr:
            self._apply(i, r - l, value)
            return self.nodes[i]

        self._push(i, l, r)
        m = (l + r) // 2
        self.nodes[i] = self.combine(
            self._assign(2 * i + 1, l, m, ql, qr, value),
            self._assign(2 * i + 2, m, r, ql, qr, value),
        )
        return self.nodes[i]

    def _collect(self, i: int, l: int, r: int, ret: list[T]):
        if r - l == 1:
            ret.append(self.nodes[i])
            return
        m = (l + r) // 2
        self._collect(2 * i + 1, l, m, ret)
        self._collect(2 * i + 2, m, r, ret)


def build(values: Sequence[T], combine: C[T], neutral: T) -> RangeTree[T]:
    """Build a RangeTree over values with the given combining operation"""
    return RangeTree(combine, neutral, values)
