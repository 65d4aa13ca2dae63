# renderer/preview.py
import numpy as np
import pygame
from penumbra.renderer.image_io import to_rgb8

def make_surface(buffer: np.ndarray) -> "pygame.Surface":
    """
    Converts a (height, width, 3) float buffer to a pygame surface.
    pygame's surfarray is indexed (x, y), so the buffer is transposed.
    """
    return pygame.surfarray.make_surface(to_rgb8(buffer).transpose(1, 0, 2))

def show_image(buffer: np.ndarray, title: str = "penumbra", max_size: int = 1024):
    """
    Opens a window with the rendered image and blocks until it is closed
    (window close button or Escape).
    """
    height, width = buffer.shape[:2]
    scale = min(1.0, max_size / max(width, height))
    window_size = (max(1, int(width * scale)), max(1, int(height * scale)))

    pygame.init()
    try:
        screen = pygame.display.set_mode(window_size)
        pygame.display.set_caption(title)

        frame_surface = make_surface(buffer)
        if window_size != (width, height):
            frame_surface = pygame.transform.scale(frame_surface, window_size)

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            screen.blit(frame_surface, (0, 0))
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()
