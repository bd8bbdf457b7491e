"""
Snake body and heading.

The snake only ever grows at the head. Keeping the length constant is the
caller's job: call `remove_tail()` after `move_forward()` unless the move ate
food.
"""
from collections import deque
from typing import Iterator, Optional, Sequence, Tuple

from .direction import Direction

Cell = Tuple[int, int]


class Snake:
    def __init__(self, body: Sequence[Cell], direction: Direction = Direction.RIGHT):
        if not body:
            raise ValueError("snake body must contain at least one cell")
        self.body = deque(tuple(c) for c in body)  # head first
        self.direction = direction

    @property
    def head(self) -> Cell:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.body)

    def head_direction(self) -> Direction:
        """Last committed heading, i.e. the one the previous move used."""
        return self.direction

    def next_head(self, direction: Optional[Direction] = None) -> Cell:
        return (direction or self.direction).step(self.head)

    def move_forward(self, requested_direction: Optional[Direction] = None) -> Cell:
        direction = requested_direction or self.direction
        new_head = direction.step(self.head)
        self.body.appendleft(new_head)
        self.direction = direction
        return new_head

    def remove_tail(self) -> Cell:
        return self.body.pop()

    def overlap_tail(self, x: int, y: int) -> bool:
        return (x, y) in self.body

    def __repr__(self):
        return f"<Snake head={self.head} len={len(self)} dir={self.direction.name}>"
