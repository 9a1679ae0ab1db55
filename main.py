import argparse
import logging
import sys

import pygame

from settings import WIDTH, HEIGHT, FPS, COLORS, WALL_PATH_WIDTH, LOG_LEVEL

from core.geometry import Viewport
from core.input_manager import InputManager
from core.light import Light
from core.logging_config import configure_logging
from core.renderer import Renderer
from core.scene import Scene

from data.demo_walls import DEMO_WALLS
from data.light_stats import LIGHT_STATS
from data.wall_stats import WALL_STATS

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Cast shadows from a point light onto convex walls.")
    parser.add_argument("--width", type=int, default=WIDTH,
                        help="Initial window width in pixels")
    parser.add_argument("--height", type=int, default=HEIGHT,
                        help="Initial window height in pixels")
    parser.add_argument("--fps", type=int, default=FPS,
                        help="Frame rate cap")
    parser.add_argument("--log-level", type=str, default=LOG_LEVEL,
                        help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--demo", action="store_true",
                        help="Start with a preset set of walls")
    return parser.parse_args(argv)


def build_scene(width, height, demo=False):
    light = Light((width / 2, height / 2), LIGHT_STATS)
    if demo:
        return Scene.with_walls(light, WALL_STATS, DEMO_WALLS)
    return Scene(light, WALL_STATS)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.log_level)

    pygame.init()

    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption("Shadow Caster")

    clock = pygame.time.Clock()

    scene = build_scene(args.width, args.height, demo=args.demo)
    input_manager = InputManager()
    renderer = Renderer(COLORS, WALL_PATH_WIDTH)

    logger.info("Started %dx%d window with %d wall(s)",
                args.width, args.height, len(scene.walls))

    running = True

    while running:
        clock.tick(args.fps)

        # -----------------------------
        # Events
        # -----------------------------
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            else:
                input_manager.handle_event(event, scene)

        # -----------------------------
        # Input
        # -----------------------------
        input_manager.update()
        input_manager.apply_keys(scene)

        # -----------------------------
        # Update
        # -----------------------------
        viewport = Viewport.from_rect(screen.get_rect())
        scene.update_shadows(viewport)

        # -----------------------------
        # Draw
        # -----------------------------
        renderer.draw(screen, scene)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
