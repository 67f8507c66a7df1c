# src/game/game.py
# command is python -m src.game.game
import sys, argparse, logging
from typing import Optional
import pygame
from pygame import K_SPACE, K_UP, K_ESCAPE, K_p, K_r
from .config import WORLD_WIDTH, WORLD_HEIGHT, FPS, HIGHSCORE_PATH_DEFAULT
from .persistence import FileHighScoreStore, MemoryHighScoreStore
from .render import draw_scene
from .scene import build_scene
from .simulation import Simulation, Intent, clamp_dt

log = logging.getLogger(__name__)

KEY_INTENTS = {
    K_SPACE: Intent.JUMP,
    K_UP: Intent.JUMP,
    K_p: Intent.TOGGLE_PAUSE,
    K_r: Intent.RESTART,
}


def setup_logging(debug: bool = False) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Endless runner: jump the cacti, beat your high score.")
    p.add_argument("--seed", type=int, default=None,
                   help="Obstacle/cloud seed. Omit for a random one (it is logged so runs can be replayed).")
    p.add_argument("--highscore-file", type=str, default=HIGHSCORE_PATH_DEFAULT,
                   help="Where the high score is kept")
    p.add_argument("--no-save", action="store_true", help="Keep the high score in memory only")
    p.add_argument("--debug", action="store_true", help="Verbose logging")
    return p.parse_args(argv)


def intent_for_event(event: pygame.event.Event) -> Optional[Intent]:
    if event.type == pygame.KEYDOWN:
        return KEY_INTENTS.get(event.key)
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        return Intent.JUMP
    return None


def run(argv=None):
    args = parse_args(argv)
    setup_logging(args.debug)

    store = MemoryHighScoreStore() if args.no_save else FileHighScoreStore(args.highscore_file)
    sim = Simulation(seed=args.seed, store=store)
    log.info("Starting session: seed=%s high_score=%d", sim.seed, sim.high_score)

    pygame.init()
    pygame.display.set_caption("T-Rex Runner")
    screen = pygame.display.set_mode((WORLD_WIDTH, WORLD_HEIGHT))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14, bold=True)

    while True:
        # frames elapsed at the 60 Hz reference; clamped so a stall can't tunnel through anything
        dt = clamp_dt(clock.tick(FPS) / (1000.0 / FPS))

        # intents are applied whole, between ticks
        for event in pygame.event.get():
            if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == K_ESCAPE):
                log.info("Quit: score=%d high_score=%d", sim.score, sim.high_score)
                sim.save_high_score()
                pygame.quit(); sys.exit()
            intent = intent_for_event(event)
            if intent is not None:
                sim.handle_intent(intent)

        sim.update(dt)

        draw_scene(screen, build_scene(sim), font)
        pygame.display.flip()


if __name__ == "__main__":
    run()
