# neondash/game/game.py
import sys, argparse, logging
from pathlib import Path
import pygame
from pygame import K_SPACE, K_UP, K_ESCAPE
from .config import WIDTH, HEIGHT, FPS
from .clock import SimulationClock
from .inputs import PressSources
from .level import default_track, load_track
from .render import draw_frame
from .session import GameSession

log = logging.getLogger(__name__)

JUMP_KEYS = (K_SPACE, K_UP)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="NeonDash: cube/ship obstacle runner")
    p.add_argument("--level", type=Path, default=None,
                   help="JSON level file (list of {x, type} records). Omit for the built-in course.")
    p.add_argument("--fps", type=int, default=FPS, help="Display frame rate cap")
    p.add_argument("--debug", action="store_true", help="Log session events (deaths, portals)")
    return p.parse_args(argv)


def _pygame_seconds() -> float:
    return pygame.time.get_ticks() / 1000.0


def run(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    track = load_track(args.level) if args.level is not None else default_track()
    log.info("loaded %d obstacles, level length %.0f", len(track), track.length)

    pygame.init()
    try:
        pygame.display.set_caption("NeonDash")
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        fps_clock = pygame.time.Clock()
        font = pygame.font.SysFont("jetbrainsmono", 18)

        session = GameSession(track)
        sim = SimulationClock(session, time_source=_pygame_seconds, sleep=None, fps=args.fps)
        inputs = PressSources()
        session.on_death.append(lambda attempts: log.info("attempt %d", attempts))

        while True:
            fps_clock.tick(args.fps)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.KEYDOWN:
                    if event.key == K_ESCAPE:
                        return
                    if event.key in JUMP_KEYS:
                        session.press(inputs.set(("key", event.key), True))
                elif event.type == pygame.KEYUP and event.key in JUMP_KEYS:
                    session.press(inputs.set(("key", event.key), False))
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    session.press(inputs.set("mouse", True))
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    session.press(inputs.set("mouse", False))
                elif event.type == pygame.FINGERDOWN:
                    session.press(inputs.set(("touch", event.finger_id), True))
                elif event.type == pygame.FINGERUP:
                    session.press(inputs.set(("touch", event.finger_id), False))
                elif event.type == pygame.WINDOWFOCUSLOST:
                    inputs.clear()
                    session.press(False)

            if session.active:
                sim.on_frame(_pygame_seconds())

            draw_frame(screen, session.snapshot(), session.state.distance, font)
            pygame.display.flip()
    finally:
        pygame.quit()


if __name__ == "__main__":
    run()
    sys.exit(0)
