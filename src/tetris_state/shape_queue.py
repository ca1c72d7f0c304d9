"""Lazily generated queue of upcoming shapes.

The queue is logically infinite: whenever a peek or poll reaches past the
lookahead buffer it asks its :class:`Randomizer` for another batch.  Which
shapes a batch contains is entirely up to the randomizer; two are provided:

``BagRandomizer``
    The classic 7-bag.  Each batch holds every shape exactly once, shuffled
    with a private RNG (or in catalog order when ``shuffle=False``).

``UniformRandomizer``
    Every draw is an independent uniform choice.

Copies made with :meth:`ShapeQueue.copy` carry the buffer *and* the RNG
state, so a copy reproduces the original's future sequence while remaining
fully independent of it.
"""

from __future__ import annotations

import copy
import random
from collections import deque
from typing import Deque, List, Optional, Protocol, Sequence, Tuple

from .shape import CATALOG, Shape


class Randomizer(Protocol):
    """Selection policy feeding a :class:`ShapeQueue`."""

    shapes: Tuple[Shape, ...]

    def next_batch(self) -> List[Shape]:
        ...


class BagRandomizer:
    """Deal every shape once per bag."""

    def __init__(
        self,
        shapes: Sequence[Shape] = CATALOG,
        *,
        seed: Optional[int] = None,
        shuffle: bool = True,
    ) -> None:
        self.shapes: Tuple[Shape, ...] = tuple(shapes)
        self._rng = random.Random(seed)
        self._shuffle = shuffle

    def next_batch(self) -> List[Shape]:
        bag = list(self.shapes)
        if self._shuffle:
            self._rng.shuffle(bag)
        return bag


class UniformRandomizer:
    """Pick each shape independently and uniformly."""

    def __init__(self, shapes: Sequence[Shape] = CATALOG, *, seed: Optional[int] = None) -> None:
        self.shapes: Tuple[Shape, ...] = tuple(shapes)
        self._rng = random.Random(seed)

    def next_batch(self) -> List[Shape]:
        return [self._rng.choice(self.shapes)]


class ShapeQueue:
    """Infinite, peekable, independently copyable sequence of shapes."""

    def __init__(
        self,
        randomizer: Optional[Randomizer] = None,
        *,
        seed: Optional[int] = None,
    ) -> None:
        if randomizer is None:
            randomizer = BagRandomizer(seed=seed)
        self._randomizer: Randomizer = randomizer
        self._buffer: Deque[Shape] = deque()

    def _fill(self, size: int) -> None:
        while len(self._buffer) < size:
            batch = self._randomizer.next_batch()
            if not batch:
                raise RuntimeError("Randomizer produced an empty batch")
            self._buffer.extend(batch)

    def peek(self) -> Shape:
        """Return the next shape without consuming it."""

        self._fill(1)
        return self._buffer[0]

    def peek_next(self, count: int) -> List[Shape]:
        """Return the next ``count`` shapes, in order, without consuming them."""

        if count < 0:
            raise ValueError("count must be non-negative")
        self._fill(count)
        return [self._buffer[i] for i in range(count)]

    def poll(self) -> Shape:
        """Consume and return the next shape."""

        self._fill(1)
        return self._buffer.popleft()

    def can_produce(self, shape: Shape) -> bool:
        """Return ``True`` if ``shape`` is part of the randomizer's value space."""

        return shape in self._randomizer.shapes

    def copy(self) -> "ShapeQueue":
        """Return an independent clone with the same future sequence."""

        clone = ShapeQueue(copy.deepcopy(self._randomizer))
        clone._buffer = deque(self._buffer)
        return clone


__all__ = ["BagRandomizer", "Randomizer", "ShapeQueue", "UniformRandomizer"]
