"""Frame-cycling sprite taken from a sprite sheet."""

import time

import pygame


class AnimatedSprite:
    """A sprite-sheet animation that advances one frame per swap interval."""

    n_frames = 4
    sprite_width = 32
    swap_interval = 0.3  # seconds

    def __init__(self, texture=None, now=None):
        self.texture = texture
        self.frame = 0
        self.sprite_y = 0
        self.scale = (2.0, 2.0)
        self.position = (-12.0, -12.0)
        self.texture_rect = pygame.Rect(0, 0, self.sprite_width, self.sprite_width)
        self._last_swap = time.monotonic() if now is None else now

    def move(self, offset):
        """Shift the sprite by an offset."""
        dx, dy = offset
        x, y = self.position
        self.position = (x + float(dx), y + float(dy))

    def set_pos(self, coord):
        """Shift the sprite by integer map coordinates."""
        self.move((int(coord[0]), int(coord[1])))

    def update(self, now=None):
        """Advance to the next frame once the swap interval has passed."""
        if now is None:
            now = time.monotonic()
        if now - self._last_swap >= self.swap_interval:
            self.frame = (self.frame + 1) % self.n_frames
            width = self.sprite_width
            self.texture_rect = pygame.Rect(self.frame * width, self.sprite_y, width, width)
            self._last_swap = now

    def draw(self, surface):
        """Blit the current frame, scaled, onto a surface."""
        if self.texture is None:
            return
        area = self.texture_rect.clip(self.texture.get_rect())
        if area.width == 0 or area.height == 0:
            return
        sx, sy = self.scale
        frame = self.texture.subsurface(area)
        size = (max(1, round(area.width * sx)), max(1, round(area.height * sy)))
        scaled = pygame.transform.scale(frame, size)
        x, y = self.position
        x += (area.x - self.texture_rect.x) * sx
        y += (area.y - self.texture_rect.y) * sy
        surface.blit(scaled, (round(x), round(y)))