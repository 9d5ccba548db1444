"""In-place sorting and selection routines with pluggable comparison.

Every routine orders a mutable sequence in place.  ``less(a, b)`` must
return True when ``a`` sorts strictly before ``b``; it defaults to ``<``.
"""

from __future__ import annotations

import operator
import random as _random
from typing import Any, Callable, MutableSequence, Optional, TypeVar

T = TypeVar("T")
Less = Callable[[Any, Any], bool]

_SHRINK_FACTOR = 1.2473309501039786540366528676643
_INTRO_CUTOFF = 16
_RADIX_MIN_SIZE = 64
_RADIX_BITS = 8


def _insertion_sort(items: MutableSequence[T], lo: int, hi: int, less: Less) -> None:
    for i in range(lo + 1, hi):
        current = items[i]
        j = i
        while j > lo and less(current, items[j - 1]):
            items[j] = items[j - 1]
            j -= 1
        items[j] = current


def _merge(left: list, right: list, less: Less) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if less(right[j], left[i]):
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def mergesort(items: MutableSequence[T], less: Less = operator.lt) -> None:
    """Stable bottom-up merge sort."""
    run = list(items)
    n = len(run)
    width = 1
    while width < n:
        merged: list = []
        for start in range(0, n, 2 * width):
            merged.extend(
                _merge(run[start:start + width], run[start + width:start + 2 * width], less)
            )
        run = merged
        width *= 2
    items[:] = run


def heap_adjust(items: MutableSequence[T], i: int, n: int, less: Less = operator.lt) -> None:
    """Sift ``items[i]`` down within the max-heap ``items[:n]``."""
    current = items[i]
    k = i
    while True:
        k = 2 * k + 1
        if k >= n:
            break
        if k != n - 1 and less(items[k], items[k + 1]):
            k += 1
        if less(items[k], current):
            break
        items[i] = items[k]
        i = k
    items[i] = current


def heap_make(items: MutableSequence[T], less: Less = operator.lt) -> None:
    """Rearrange ``items`` into a max-heap."""
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        heap_adjust(items, i, n, less)


def heap_sort(items: MutableSequence[T], less: Less = operator.lt) -> None:
    """Sort a sequence that is already a max-heap (see ``heap_make``)."""
    for i in range(len(items) - 1, 0, -1):
        items[0], items[i] = items[i], items[0]
        heap_adjust(items, 0, i, less)


def _combsort_range(items: MutableSequence[T], lo: int, hi: int, less: Less) -> None:
    n = hi - lo
    gap = n
    while True:
        if gap > 2:
            gap = int(gap / _SHRINK_FACTOR)
            if gap in (9, 10):
                gap = 11
        swapped = False
        for i in range(lo, hi - gap):
            j = i + gap
            if less(items[j], items[i]):
                items[i], items[j] = items[j], items[i]
                swapped = True
        if not (swapped or gap > 2):
            break
    if gap != 1:
        _insertion_sort(items, lo, hi, less)


def combsort(items: MutableSequence[T], less: Less = operator.lt) -> None:
    """Comb sort, finished with insertion sort when needed."""
    _combsort_range(items, 0, len(items), less)


def introsort(items: MutableSequence[T], less: Less = operator.lt) -> None:
    """Quicksort with median-of-three pivots, falling back to comb sort
    when partitioning gets too deep; small partitions are left for a final
    insertion-sort pass."""
    a = items
    n = len(a)
    if n < 1:
        return
    if n == 2:
        if less(a[1], a[0]):
            a[0], a[1] = a[1], a[0]
        return
    depth = 2
    while (1 << depth) < n:
        depth += 1
    depth <<= 1
    stack: list[tuple[int, int, int]] = []
    s, t = 0, n - 1
    while True:
        if s < t:
            depth -= 1
            if depth == 0:
                _combsort_range(a, s, t + 1, less)
                t = s
                continue
            i, j = s, t
            k = i + ((j - i) >> 1) + 1
            if less(a[k], a[i]):
                if less(a[k], a[j]):
                    k = j
            else:
                k = i if less(a[j], a[i]) else j
            pivot = a[k]
            if k != t:
                a[k], a[t] = a[t], a[k]
            while True:
                i += 1
                while less(a[i], pivot):
                    i += 1
                j -= 1
                while i <= j and less(pivot, a[j]):
                    j -= 1
                if j <= i:
                    break
                a[i], a[j] = a[j], a[i]
            a[i], a[t] = a[t], a[i]
            if i - s > t - i:
                if i - s > _INTRO_CUTOFF:
                    stack.append((s, i - 1, depth))
                s = i + 1 if t - i > _INTRO_CUTOFF else t
            else:
                if t - i > _INTRO_CUTOFF:
                    stack.append((i + 1, t, depth))
                t = i - 1 if i - s > _INTRO_CUTOFF else s
        elif stack:
            s, t, depth = stack.pop()
        else:
            _insertion_sort(a, 0, n, less)
            return


def ksmall(items: MutableSequence[T], k: int, less: Less = operator.lt) -> T:
    """Return the ``k``-th smallest item (0-based), partially reordering ``items``.

    Raises IndexError unless 0 <= k < len(items).
    """
    a = items
    n = len(a)
    if not 0 <= k < n:
        raise IndexError(f"k={k} out of range for {n} items")
    low, high = 0, n - 1
    while True:
        if high <= low:
            return a[k]
        if high == low + 1:
            if less(a[high], a[low]):
                a[low], a[high] = a[high], a[low]
            return a[k]
        mid = low + (high - low) // 2
        if less(a[high], a[mid]):
            a[mid], a[high] = a[high], a[mid]
        if less(a[high], a[low]):
            a[low], a[high] = a[high], a[low]
        if less(a[low], a[mid]):
            a[mid], a[low] = a[low], a[mid]
        a[mid], a[low + 1] = a[low + 1], a[mid]
        ll, hh = low + 1, high
        while True:
            ll += 1
            while less(a[ll], a[low]):
                ll += 1
            hh -= 1
            while less(a[low], a[hh]):
                hh -= 1
            if hh < ll:
                break
            a[ll], a[hh] = a[hh], a[ll]
        a[low], a[hh] = a[hh], a[low]
        if hh <= k:
            low = ll
        if hh >= k:
            high = hh - 1


def shuffle(items: MutableSequence[T], rng: Optional[Any] = None) -> None:
    """Fisher-Yates shuffle; ``rng`` needs a ``random()`` method returning [0, 1)."""
    draw = (rng if rng is not None else _random).random
    for i in range(len(items), 1, -1):
        j = int(draw() * i)
        items[j], items[i - 1] = items[i - 1], items[j]


def sample(items: MutableSequence[T], r: int, rng: Optional[Any] = None) -> None:
    """Move a uniform random sample of ``r`` items to the front of ``items``.

    Raises ValueError unless 0 <= r <= len(items).
    """
    n = len(items)
    if not 0 <= r <= n:
        raise ValueError(f"cannot sample {r} of {n} items")
    draw = (rng if rng is not None else _random).random
    pop = n
    for k, need in enumerate(range(r, 0, -1)):
        x = draw()
        z = 1.0
        while x < z:
            z -= z * need / pop
            pop -= 1
        chosen = n - pop - 1
        items[k], items[chosen] = items[chosen], items[k]


def _radix_pass(pairs: list, shift: int) -> list:
    mask = (1 << _RADIX_BITS) - 1
    buckets: list[list] = [[] for _ in range(1 << _RADIX_BITS)]
    for pair in pairs:
        buckets[(pair[0] >> shift) & mask].append(pair)
    if shift:
        next_shift = shift - _RADIX_BITS if shift > _RADIX_BITS else 0
        for bucket in buckets:
            if len(bucket) > _RADIX_MIN_SIZE:
                bucket[:] = _radix_pass(bucket, next_shift)
            elif len(bucket) > 1:
                _insertion_sort(bucket, 0, len(bucket), _key_less)
    return [pair for bucket in buckets for pair in bucket]


def _key_less(a: tuple, b: tuple) -> bool:
    return a[0] < b[0]


def radix_sort(
    items: MutableSequence[T],
    key: Optional[Callable[[T], int]] = None,
    key_bytes: int = 4,
) -> None:
    """Most-significant-digit radix sort on unsigned integer keys of ``key_bytes`` bytes.

    Raises ValueError for a key that is negative or does not fit.
    """
    if key_bytes < 1:
        raise ValueError("key_bytes must be at least 1")
    limit = 1 << (8 * key_bytes)
    key_of = key if key is not None else (lambda x: x)
    pairs = []
    for item in items:
        k = key_of(item)
        if not 0 <= k < limit:
            raise ValueError(f"key {k!r} does not fit in {key_bytes} unsigned bytes")
        pairs.append((k, item))
    if len(pairs) <= _RADIX_MIN_SIZE:
        _insertion_sort(pairs, 0, len(pairs), _key_less)
    else:
        pairs = _radix_pass(pairs, (key_bytes - 1) * _RADIX_BITS)
    items[:] = [item for _, item in pairs]