"""
renderer.py: Draws a FrameSnapshot with pygame. Reads state, never changes it.
"""

import pygame

from .data_models import FrameSnapshot, RunState

SKY_TOP = (135, 206, 235)
SKY_BOTTOM = (222, 184, 135)
CLOUD = (255, 255, 255)
PIPE = (34, 139, 34)
PIPE_CAP = (50, 205, 50)
BIRD_BODY = (255, 215, 0)
BIRD_EYE = (0, 0, 0)
BIRD_BEAK = (255, 140, 0)
WHITE = (255, 255, 255)
GREY = (200, 200, 200)

CAP_HEIGHT = 15
CAP_OVERHANG = 5


class Renderer:
    def __init__(self, surface: "pygame.Surface"):
        if not pygame.font.get_init():
            pygame.font.init()
        self.surface = surface
        self.large_font = pygame.font.Font(None, 40)
        self.font = pygame.font.Font(None, 24)
        self._background = None

    def draw(self, snap: FrameSnapshot):
        """Renders one full frame onto the surface (no flip)."""
        self._draw_background(snap)
        for pipe in snap.pipes:
            self._draw_pipe(snap, pipe)
        self._draw_bird(snap)
        self._draw_hud(snap)

        if snap.state is RunState.MENU:
            self._overlay(snap, 128, [
                (self.large_font, "Flappy Bird", -50),
                (self.font, "Press SPACE or ENTER to start", 20),
            ])
        elif snap.state is RunState.GAME_OVER:
            self._overlay(snap, 180, [
                (self.large_font, "Game Over!", -30),
                (self.font, f"Score: {snap.score}", 10),
                (self.font, f"Best: {snap.best}", 35),
                (self.font, "SPACE / ENTER to try again", 70),
            ])

    def _draw_background(self, snap: FrameSnapshot):
        size = (snap.width, snap.height)
        if self._background is None or self._background.get_size() != size:
            self._background = self._build_background(*size)
        self.surface.blit(self._background, (0, 0))

    @staticmethod
    def _build_background(width: int, height: int) -> "pygame.Surface":
        bg = pygame.Surface((width, height))
        for y in range(height):
            t = y / max(height - 1, 1)
            color = tuple(int(a + (b - a) * t) for a, b in zip(SKY_TOP, SKY_BOTTOM))
            pygame.draw.line(bg, color, (0, y), (width, y))

        for i in range(3):
            x = i * 120 + 50
            y = 60 + i * 20
            pygame.draw.circle(bg, CLOUD, (x, y), 10)
            pygame.draw.circle(bg, CLOUD, (x + 15, y), 15)
            pygame.draw.circle(bg, CLOUD, (x + 30, y), 10)
        return bg

    def _draw_pipe(self, snap: FrameSnapshot, pipe):
        screen = self.surface
        bottom_y = snap.height - pipe.bottom_height

        pygame.draw.rect(screen, PIPE, (pipe.x, 0, pipe.width, pipe.top_height))
        pygame.draw.rect(screen, PIPE, (pipe.x, bottom_y, pipe.width, pipe.bottom_height))

        cap_w = pipe.width + 2 * CAP_OVERHANG
        pygame.draw.rect(screen, PIPE_CAP,
                         (pipe.x - CAP_OVERHANG, pipe.top_height - CAP_HEIGHT, cap_w, CAP_HEIGHT))
        pygame.draw.rect(screen, PIPE_CAP,
                         (pipe.x - CAP_OVERHANG, bottom_y, cap_w, CAP_HEIGHT))

    def _draw_bird(self, snap: FrameSnapshot):
        bird = snap.bird
        w, h = int(bird.width), int(bird.height)

        # Beak sticks out past the body, so leave room on the right
        sprite = pygame.Surface((w + 12, h), pygame.SRCALPHA)
        pygame.draw.rect(sprite, BIRD_BODY, (6, 0, w, h))
        pygame.draw.rect(sprite, BIRD_EYE, (6 + w * 3 // 4, h // 4, 3, 3))
        pygame.draw.rect(sprite, BIRD_BEAK, (6 + w, h // 2 - 2, 6, 4))

        # Positive rotation is nose-down (clockwise on screen)
        rotated = pygame.transform.rotate(sprite, -bird.rotation)
        center = (bird.x + bird.width / 2, bird.y + bird.height / 2)
        self.surface.blit(rotated, rotated.get_rect(center=center))

    def _draw_hud(self, snap: FrameSnapshot):
        score_text = self.large_font.render(str(snap.score), True, WHITE)
        self.surface.blit(score_text, (snap.width // 2 - score_text.get_width() // 2, 20))

        best_text = self.font.render(f"Best: {snap.best}", True, WHITE)
        self.surface.blit(best_text, (10, 10))

        if snap.muted:
            muted = self.font.render("Muted (M)", True, GREY)
            self.surface.blit(muted, (snap.width - muted.get_width() - 10, 10))

    def _overlay(self, snap: FrameSnapshot, alpha: int, lines):
        shade = pygame.Surface((snap.width, snap.height), pygame.SRCALPHA)
        shade.fill((0, 0, 0, alpha))
        self.surface.blit(shade, (0, 0))

        for font, text, offset in lines:
            surf = font.render(text, True, WHITE)
            self.surface.blit(surf, (snap.width // 2 - surf.get_width() // 2,
                                     snap.height // 2 + offset))
