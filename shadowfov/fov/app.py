# fov/app.py
from __future__ import annotations
import pygame
from fov import settings
from fov.core.log import configure_logging, get_logger
from fov.scenes.viewer import ViewerScene

log = get_logger(__name__)

def main() -> None:
    configure_logging(settings.LOG_LEVEL, logfile=settings.LOG_FILE)
    pygame.init()
    pygame.display.set_caption(settings.WINDOW_TITLE)
    screen = pygame.display.set_mode(settings.SCREEN_SIZE)
    clock = pygame.time.Clock()

    scene = ViewerScene(screen)
    log.info("viewer started: %dx%d tiles, radius %d", scene.grid.cols, scene.grid.rows, scene.radius)

    running = True
    while running:
        # -- Input --
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            else:
                scene.handle_event(event)

        # -- Render --
        scene.draw(screen)
        pygame.display.flip()
        clock.tick(settings.FPS)

    pygame.quit()
    log.info("viewer closed")


if __name__ == "__main__":
    main()
