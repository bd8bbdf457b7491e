"""
Game state machine: one snake, one food cell, fixed grid bounds.

States are Running and GameOver. GameOver is terminal until `restart()`.
Collisions are not errors; they flip `game_over` and nothing else changes.
"""
import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from . import settings
from .direction import Direction
from .snake import Cell, Snake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view handed to the renderer each frame."""

    body: Tuple[Cell, ...]
    food: Optional[Cell]
    game_over: bool
    score: int
    width: int
    height: int

    @property
    def head(self) -> Cell:
        return self.body[0]


class Game:
    def __init__(
        self,
        width: int = settings.GRID_W,
        height: int = settings.GRID_H,
        rng: Optional[random.Random] = None,
        move_on_input: bool = settings.MOVE_ON_KEY_PRESS,
        start: Cell = settings.START_CELL,
        start_food: Cell = settings.START_FOOD,
    ):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.move_on_input = move_on_input
        self.start = tuple(start)
        self.start_food = tuple(start_food)
        self.snake = None
        self._pending = None
        self._food = None
        self._game_over = False
        self._score = 0

        if width < 3 or height < 3:
            raise ValueError(f"grid must be at least 3x3, got {width}x{height}")
        if not self.inside(self.start):
            raise ValueError(f"start cell {self.start} is outside the {width}x{height} grid")
        if not self.inside(self.start_food):
            raise ValueError(f"start food {self.start_food} is outside the {width}x{height} grid")
        if self.start_food == self.start:
            raise ValueError(f"start food {self.start_food} is on the snake's start cell")
        self.restart()

    # ---------- Read-only accessors ----------
    @property
    def snake_body(self) -> Tuple[Cell, ...]:
        return tuple(self.snake.body)

    @property
    def food(self) -> Optional[Cell]:
        return self._food

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def score(self) -> int:
        return self._score

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            body=self.snake_body,
            food=self._food,
            game_over=self._game_over,
            score=self._score,
            width=self.width,
            height=self.height,
        )

    # ---------- Transitions ----------
    def restart(self):
        self.snake = Snake([self.start], Direction.RIGHT)
        self._pending = None
        self._food = self.start_food
        self._game_over = False
        self._score = 0
        logger.info("New game: snake at %s, food at %s", self.start, self._food)

    def handle_key_event(self, direction: Optional[Direction]):
        """
        Feed one key press into the game.

        `direction` is None for any key that is not a heading key; that keeps
        the current heading. A reversal of the committed heading is dropped.
        """
        if self._game_over:
            return
        if direction is None and not self.move_on_input:
            return
        candidate = direction or self.snake.head_direction()
        if candidate == self.snake.head_direction().opposite:
            logger.debug("Ignoring reversal %s -> %s", self.snake.head_direction().name, candidate.name)
            return
        if self.move_on_input:
            self._step(candidate)
        else:
            self._pending = candidate

    def update_snake(self):
        """Advance the simulation by one tick."""
        if self._game_over:
            return
        self._step(self._pending or self.snake.head_direction())

    def check_if_snake_alive(self, direction: Optional[Direction] = None) -> bool:
        return self._collision(self.snake.next_head(direction or self._pending)) is None

    def _collision(self, cell: Cell) -> Optional[str]:
        if not self.inside(cell):
            return "wall"
        if self.snake.overlap_tail(*cell):
            return "self"
        return None

    def _step(self, direction: Direction):
        reason = self._collision(self.snake.next_head(direction))
        if reason is not None:
            self._end(reason)
            return
        self.snake.move_forward(direction)
        self._pending = None
        self.check_eating()

    def check_eating(self):
        if self.snake.head != self._food:
            self.snake.remove_tail()
            return
        self._score += 1
        logger.debug("Ate food at %s, length now %d", self._food, len(self.snake))
        self.add_food()

    def add_food(self) -> Optional[Cell]:
        """Place food on a random interior cell not covered by the snake."""
        for _ in range(settings.FOOD_SAMPLE_ATTEMPTS):
            cell = (self.rng.randrange(1, self.width - 1), self.rng.randrange(1, self.height - 1))
            if not self.snake.overlap_tail(*cell):
                break
        else:
            free = [
                (x, y)
                for y in range(1, self.height - 1)
                for x in range(1, self.width - 1)
                if not self.snake.overlap_tail(x, y)
            ]
            if not free:
                self._food = None
                self._end("full")
                return None
            cell = self.rng.choice(free)

        self._food = cell
        logger.debug("Food placed at %s", cell)
        return cell

    def _end(self, reason: str):
        self._game_over = True
        logger.info("Game over (%s) at length %d, score %d", reason, len(self.snake), self._score)

    # ---------- Helpers ----------
    def inside(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def __repr__(self):
        state = "GameOver" if self._game_over else "Running"
        return f"<Game {self.width}x{self.height} {state} snake={self.snake!r} food={self._food}>"
