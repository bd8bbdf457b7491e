"""
Snake — Pygame front end
Controls: Arrow keys / WASD to move, R to restart, ESC to quit.

The window only reads `Game.snapshot()`; all state changes go through
`Game.handle_key_event`, `Game.update_snake` and `Game.restart`.
"""
import logging
import sys

# Try to import pygame with a friendly error if missing.
try:
    import pygame
except ImportError:
    print("This game requires the 'pygame' package.\n"
          "Install it with:\n\n    pip install pygame\n")
    sys.exit(1)

from . import settings
from .direction import Direction
from .game import Game

logger = logging.getLogger(__name__)

KEY_TO_DIR = {
    pygame.K_UP:    Direction.UP,
    pygame.K_w:     Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_s:     Direction.DOWN,
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_a:     Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d:     Direction.RIGHT,
}

TICK = pygame.USEREVENT + 1


def direction_for_key(key):
    """Map a pygame key code to a heading, or None for any other key."""
    return KEY_TO_DIR.get(key)


# ---------- Rendering ----------
def cell_rect(cell):
    x, y = cell
    return pygame.Rect(x * settings.TILE_SIZE, y * settings.TILE_SIZE, settings.TILE_SIZE, settings.TILE_SIZE)


def draw_board(surface, snapshot):
    """Clear the surface and draw snake and food; both are hidden once the game is over."""
    surface.fill(settings.BG)
    if snapshot.game_over:
        return
    for cell in snapshot.body:
        pygame.draw.rect(surface, settings.SNAKE, cell_rect(cell))
    if snapshot.food is not None:
        pygame.draw.rect(surface, settings.FOOD, cell_rect(snapshot.food))


def draw_overlay(surface, snapshot, font, big_font):
    hud = font.render(f"Score: {snapshot.score}", True, settings.TEXT)
    surface.blit(hud, (8, 6))
    if snapshot.game_over:
        w, h = surface.get_size()
        over = big_font.render("GAME OVER", True, settings.RED)
        tip = font.render("Press R to restart, Esc to quit", True, settings.TEXT)
        surface.blit(over, over.get_rect(center=(w // 2, h // 2 - 10)))
        surface.blit(tip, tip.get_rect(center=(w // 2, h // 2 + 24)))


# ---------- Events ----------
def handle_event(game, event):
    """Apply one pygame event to the game. Returns False when the window should close."""
    if event.type == pygame.QUIT:
        return False
    if event.type == TICK:
        game.update_snake()
    elif event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        if event.key == pygame.K_r:
            game.restart()
        else:
            game.handle_key_event(direction_for_key(event.key))
    return True


# ---------- Main loop ----------
def run(game=None):
    pygame.init()
    pygame.display.set_caption("Snake")
    screen = pygame.display.set_mode((settings.WINDOW_W, settings.WINDOW_H))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("consolas", 20)
    big_font = pygame.font.SysFont("consolas", 40, bold=True)

    game = game or Game()
    logger.info("Window %dx%d, %d ticks/s", settings.WINDOW_W, settings.WINDOW_H, settings.TICKS_PER_SECOND)

    # Timed update event so snake speed is independent of the frame rate
    pygame.time.set_timer(TICK, 1000 // settings.TICKS_PER_SECOND)

    running = True
    try:
        while running:
            for event in pygame.event.get():
                if not handle_event(game, event):
                    running = False
                    break

            snapshot = game.snapshot()
            draw_board(screen, snapshot)
            draw_overlay(screen, snapshot, font, big_font)
            pygame.display.flip()
            clock.tick(settings.FPS)
    finally:
        pygame.quit()


def log_level(name):
    """Numeric level for a level name; unknown names fall back to INFO."""
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def main():
    logging.basicConfig(level=log_level(settings.LOG_LEVEL), format=settings.LOG_FORMAT)
    run()


if __name__ == "__main__":
    main()
