"""Ordered AVL tree that also answers range-minimum queries.

Items are ordered by ``key(item)`` and compared for range minima by
``value(item)``.  Each node caches its subtree size (for ranks) and the
item holding the smallest value in its subtree (for range minima).
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node:
    __slots__ = ("item", "key", "value", "left", "right", "height", "size", "min")

    def __init__(self, item: Any, key: Any, value: Any) -> None:
        self.item = item
        self.key = key
        self.value = value
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        self.height = 1
        self.size = 1
        self.min: _Node = self


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _size(node: Optional[_Node]) -> int:
    return node.size if node is not None else 0


def _balance_factor(node: _Node) -> int:
    return _height(node.right) - _height(node.left)


def _refresh(node: _Node) -> None:
    left, right = node.left, node.right
    node.height = 1 + max(_height(left), _height(right))
    node.size = 1 + _size(left) + _size(right)
    smallest = node
    if left is not None and not (node.value < left.min.value):
        smallest = left.min
    if right is not None and not (smallest.value < right.min.value):
        smallest = right.min
    node.min = smallest


def _rotate_left(node: _Node) -> _Node:
    top = node.right
    assert top is not None
    node.right = top.left
    top.left = node
    _refresh(node)
    _refresh(top)
    return top


def _rotate_right(node: _Node) -> _Node:
    top = node.left
    assert top is not None
    node.left = top.right
    top.right = node
    _refresh(node)
    _refresh(top)
    return top


def _rebalance(node: _Node) -> _Node:
    _refresh(node)
    bf = _balance_factor(node)
    if bf > 1:
        assert node.right is not None
        if _balance_factor(node.right) < 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    if bf < -1:
        assert node.left is not None
        if _balance_factor(node.left) > 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    return node


def _insert(node: Optional[_Node], new: _Node) -> _Node:
    if node is None:
        _refresh(new)
        return new
    if new.key < node.key:
        node.left = _insert(node.left, new)
    else:
        node.right = _insert(node.right, new)
    return _rebalance(node)


def _pop_min(node: _Node) -> tuple[Optional[_Node], _Node]:
    if node.left is None:
        return node.right, node
    node.left, smallest = _pop_min(node.left)
    return _rebalance(node), smallest


def _erase(node: Optional[_Node], key: Any) -> tuple[Optional[_Node], Optional[_Node]]:
    if node is None:
        return None, None
    if key < node.key:
        node.left, removed = _erase(node.left, key)
    elif key > node.key:
        node.right, removed = _erase(node.right, key)
    else:
        if node.left is None:
            return node.right, node
        if node.right is None:
            return node.left, node
        rest, successor = _pop_min(node.right)
        successor.left = node.left
        successor.right = rest
        return _rebalance(successor), node
    if removed is None:
        return node, None
    return _rebalance(node), removed


class RMQTree(Generic[T]):
    """Balanced search tree with rank and range-minimum queries.

    Queries (``find``, ``rank``, ``range_min`` ...) take keys, not items.
    Without a ``key`` or ``value`` function the item itself is used.
    """

    def __init__(
        self,
        key: Optional[Callable[[T], Any]] = None,
        value: Optional[Callable[[T], Any]] = None,
    ) -> None:
        self._key = key
        self._value = value
        self._root: Optional[_Node] = None

    def _make_node(self, item: T) -> _Node:
        key = item if self._key is None else self._key(item)
        value = item if self._value is None else self._value(item)
        return _Node(item, key, value)

    def __len__(self) -> int:
        return _size(self._root)

    def _find_node(self, query: Any) -> Optional[_Node]:
        node = self._root
        while node is not None:
            if query < node.key:
                node = node.left
            elif query > node.key:
                node = node.right
            else:
                return node
        return None

    def insert(self, item: T) -> T:
        """Insert ``item``; return it, or the item already stored under its key."""
        new = self._make_node(item)
        existing = self._find_node(new.key)
        if existing is not None:
            return existing.item
        self._root = _insert(self._root, new)
        return item

    def find(self, query: Any) -> Optional[T]:
        """Return the item whose key equals ``query``, or None."""
        node = self._find_node(query)
        return node.item if node is not None else None

    def rank(self, query: Any) -> int:
        """Number of items whose key is less than or equal to ``query``."""
        count = 0
        node = self._root
        while node is not None:
            if query < node.key:
                node = node.left
            else:
                count += _size(node.left) + 1
                if query > node.key:
                    node = node.right
                else:
                    break
        return count

    def interval(self, query: Any) -> tuple[Optional[T], Optional[T]]:
        """Return (largest item <= query, smallest item >= query)."""
        lower: Optional[_Node] = None
        upper: Optional[_Node] = None
        node = self._root
        while node is not None:
            if query < node.key:
                upper = node
                node = node.left
            elif query > node.key:
                lower = node
                node = node.right
            else:
                lower = upper = node
                break
        return (
            lower.item if lower is not None else None,
            upper.item if upper is not None else None,
        )

    def range_min(self, lo: Any, hi: Any) -> Optional[T]:
        """Item of smallest value among keys in the closed range [lo, hi]."""
        split = self._root
        while split is not None:
            if split.key > hi:
                split = split.left
            elif split.key < lo:
                split = split.right
            else:
                break
        if split is None:
            return None
        best = split
        node = split.left
        while node is not None:
            if not (node.key < lo):
                if node.value < best.value:
                    best = node
                if node.right is not None and node.right.min.value < best.value:
                    best = node.right.min
                node = node.left
            else:
                node = node.right
        node = split.right
        while node is not None:
            if not (node.key > hi):
                if node.value < best.value:
                    best = node
                if node.left is not None and node.left.min.value < best.value:
                    best = node.left.min
                node = node.right
            else:
                node = node.left
        return best.item

    def erase(self, query: Any) -> Optional[T]:
        """Remove and return the item whose key equals ``query``, or None."""
        self._root, removed = _erase(self._root, query)
        return removed.item if removed is not None else None

    def erase_first(self) -> Optional[T]:
        """Remove and return the smallest item, or None if the tree is empty."""
        if self._root is None:
            return None
        self._root, smallest = _pop_min(self._root)
        return smallest.item

    def iter_from(self, query: Any) -> Iterator[T]:
        """Iterate in order over items whose key is >= ``query``."""
        stack: list[_Node] = []
        node = self._root
        while node is not None:
            if node.key < query:
                node = node.right
            else:
                stack.append(node)
                node = node.left
        yield from self._drain(stack, forward=True)

    @staticmethod
    def _drain(stack: list[_Node], forward: bool) -> Iterator[Any]:
        while stack:
            node = stack.pop()
            yield node.item
            child = node.right if forward else node.left
            while child is not None:
                stack.append(child)
                child = child.left if forward else child.right

    def __iter__(self) -> Iterator[T]:
        stack: list[_Node] = []
        node = self._root
        while node is not None:
            stack.append(node)
            node = node.left
        return self._drain(stack, forward=True)

    def __reversed__(self) -> Iterator[T]:
        stack: list[_Node] = []
        node = self._root
        while node is not None:
            stack.append(node)
            node = node.right
        return self._drain(stack, forward=False)

    def __contains__(self, query: Any) -> bool:
        return self._find_node(query) is not None

    def validate(self) -> int:
        """Check order, balance, sizes and cached minima; return the item count.

        Raises ValueError on the first inconsistency found.
        """

        def check(node: Optional[_Node], lo: Any, hi: Any, has_lo: bool, has_hi: bool):
            if node is None:
                return 0, 0, None
            if has_lo and not (lo < node.key):
                raise ValueError(f"order violated at key {node.key!r}")
            if has_hi and not (node.key < hi):
                raise ValueError(f"order violated at key {node.key!r}")
            lh, ls, lmin = check(node.left, lo, node.key, has_lo, True)
            rh, rs, rmin = check(node.right, node.key, hi, True, has_hi)
            height = max(lh, rh) + 1
            size = ls + rs + 1
            smallest = node.value
            for candidate in (lmin, rmin):
                if candidate is not None and candidate < smallest:
                    smallest = candidate
            if abs(rh - lh) > 1:
                raise ValueError(f"unbalanced at key {node.key!r}: {rh} - {lh}")
            if height != node.height:
                raise ValueError(f"height {node.height} != {height} at key {node.key!r}")
            if size != node.size:
                raise ValueError(f"size {node.size} != {size} at key {node.key!r}")
            cached = node.min.value
            if cached < smallest or smallest < cached:
                raise ValueError(f"min {cached!r} != {smallest!r} at key {node.key!r}")
            return height, size, smallest

        return check(self._root, None, None, False, False)[1]