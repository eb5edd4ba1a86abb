"""Fractional progress for loops.

``ProgressLoop`` wraps one or more iterables and iterates their cross
product in nested-loop order (the last iterable varies fastest, as in
``itertools.product``). It is a scope of its own: an indeterminate record
when the block starts, throttled fraction updates while elements complete,
and one ``done`` record when the block ends however it ends.

    with ProgressLoop(range(10), range(20), name="grid") as loop:
        for i, j in loop:
            ...

For the k-th completed element the fraction is

    (sum(offset[d] * stride[d]) + 1) / total

where dimensions are ordered fastest first, ``offset[d]`` counts elements
from the start of dimension d and ``stride[d]`` is the product of the
lengths of the faster dimensions. Offsets come from per-dimension counters,
so iterables are never indexed and any index space works.

An update is emitted only when the fraction gained since the last emitted
update exceeds ``threshold``, which bounds a loop to about 1/threshold
updates whatever its length.
"""

import logging
from collections.abc import Iterable, Iterator, Sized
from math import prod
from typing import Any, Callable, Optional
from uuid import UUID

from progresslogging.config import settings
from progresslogging.engine.errors import BreakLoop, InvalidLoopError, ScopeStateError
from progresslogging.engine.scope import ProgressScope


def _as_dimension(iterable: Any, position: int):
    if not isinstance(iterable, Iterable):
        raise InvalidLoopError(
            f"ProgressLoop argument {position} is not iterable: {type(iterable).__name__}"
        )
    if isinstance(iterable, Sized) and not isinstance(iterable, Iterator):
        return iterable
    # One-shot iterables must be kept to learn their length and to revisit
    # them for every element of the outer dimensions.
    return tuple(iterable)


class ProgressLoop:
    """Throttled progress reporting over the cross product of iterables."""

    def __init__(
        self,
        *iterables: Any,
        name: str = "",
        threshold: Optional[float] = None,
        parent_id: Optional[UUID] = None,
        logger: Optional[logging.Logger] = None,
    ):
        if not iterables:
            raise InvalidLoopError("ProgressLoop requires at least one iterable")
        if threshold is None:
            threshold = settings.threshold
        if threshold < 0:
            raise InvalidLoopError(f"threshold must not be negative, got {threshold}")

        self.dimensions = [_as_dimension(it, n) for n, it in enumerate(iterables, 1)]
        self.lengths = [len(d) for d in self.dimensions]
        self.total = prod(self.lengths)
        self.threshold = threshold

        # Strides in argument order; the last dimension is the fastest.
        self.strides = [prod(self.lengths[d + 1:]) for d in range(len(self.lengths))]

        self.scope = ProgressScope(name, parent_id, logger)
        self.last_fraction = 0.0
        self._iterated = False

    @property
    def id(self) -> UUID:
        return self.scope.id

    @property
    def name(self) -> str:
        return self.scope.name

    def fraction(self, offsets: tuple[int, ...]) -> float:
        """Fraction complete once the element at ``offsets`` is done."""
        return (sum(o * s for o, s in zip(offsets, self.strides)) + 1) / self.total

    def __enter__(self) -> "ProgressLoop":
        self.scope.enter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.scope.exit()

    def __iter__(self) -> Iterator[Any]:
        single = len(self.dimensions) == 1
        for _, values in self.enumerate():
            yield values[0] if single else values

    def enumerate(self) -> Iterator[tuple[tuple[int, ...], tuple[Any, ...]]]:
        """Yield ``(offsets, values)`` pairs, reporting as elements complete."""
        if not self.scope.active:
            raise ScopeStateError("ProgressLoop must be iterated inside its with block")
        if self._iterated:
            raise ScopeStateError("ProgressLoop can only be iterated once")
        self._iterated = True

        pending = None
        for offsets, values in self._walk(0, (), ()):
            if pending is not None:
                self._complete(pending)
            pending = offsets
            yield offsets, values
        if pending is not None:
            self._complete(pending)

    def _walk(self, depth: int, offsets: tuple, values: tuple):
        if depth == len(self.dimensions):
            yield offsets, values
            return
        for offset, value in enumerate(self.dimensions[depth]):
            yield from self._walk(depth + 1, offsets + (offset,), values + (value,))

    def _complete(self, offsets: tuple[int, ...]) -> None:
        fraction = self.fraction(offsets)
        if fraction - self.last_fraction > self.threshold:
            self.scope.log(fraction)
            self.last_fraction = fraction

    def __repr__(self) -> str:
        return f"ProgressLoop(id={self.id}, name={self.name!r}, lengths={self.lengths})"


def _nested(lengths: list[int]) -> list:
    if len(lengths) == 1:
        return [None] * lengths[0]
    return [_nested(lengths[1:]) for _ in range(lengths[0])]


def drive(
    body: Callable[..., Any],
    *iterables: Any,
    name: str = "",
    threshold: Optional[float] = None,
    collect: bool = False,
    parent_id: Optional[UUID] = None,
    logger: Optional[logging.Logger] = None,
) -> Optional[list]:
    """Call ``body`` for every element of the cross product of ``iterables``.

    ``body`` receives one argument per iterable. Returning skips to the next
    element; raising BreakLoop stops the loop (statement mode only).

    With ``collect=True`` the results are returned as nested lists indexed
    in argument order, ``result[i][j]`` for two iterables; otherwise None.
    """
    with ProgressLoop(
        *iterables, name=name, threshold=threshold, parent_id=parent_id, logger=logger
    ) as loop:
        if not collect:
            for _, values in loop.enumerate():
                try:
                    body(*values)
                except BreakLoop:
                    break
            return None

        result = _nested(loop.lengths)
        for offsets, values in loop.enumerate():
            row = result
            for offset in offsets[:-1]:
                row = row[offset]
            row[offsets[-1]] = body(*values)
        return result


def progress_map(func: Callable[..., Any], *iterables: Any, **options: Any) -> list:
    """Comprehension form of drive(): ``progress_map(f, I, J)[i][j] == f(I[i], J[j])``."""
    return drive(func, *iterables, collect=True, **options)
