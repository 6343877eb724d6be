"""Clickable rectangular areas with hover and press feedback."""

from enum import Enum
from typing import ClassVar, Optional, Tuple

import pygame


class ButtonState(Enum):
    NOT_PRESSED = 0
    PRESSED = 1
    HOVER = 2


class Button:
    """A rectangle that reacts to the mouse and can run a click callback.

    Only one button at a time may hold the press while the mouse button is down.
    """

    _pressed_at: ClassVar[Optional[Tuple[float, float]]] = None

    def __init__(self, pos, size, sprite=None):
        self.position = (float(pos[0]), float(pos[1]))
        self.size = (float(size[0]), float(size[1]))
        self.sprite = sprite
        self.state = ButtonState.NOT_PRESSED
        self.outline_color = (0, 0, 10, 255)
        self.outline_thickness = -0.5
        self._on_click = None

    def _contains(self, point):
        x, y = self.position
        w, h = self.size
        px, py = point
        return x <= px < x + w and y <= py < y + h

    def is_pressed(self):
        return self.state is ButtonState.PRESSED

    def is_hover(self):
        return self.state is ButtonState.HOVER

    def update(self, mouse_pos, mouse_down):
        """Refresh the state from the mouse position and left-button state."""
        if self._contains(mouse_pos):
            self.state = ButtonState.HOVER
            self.outline_color = (0, 0, 0, 255)
            self.outline_thickness = -2
            owner = Button._pressed_at
            if (owner is None or owner == self.position) and mouse_down:
                self.state = ButtonState.PRESSED
                self.outline_color = (255, 0, 0, 255)
                self.outline_thickness = -3
                Button._pressed_at = self.position
                if self._on_click is not None:
                    self._on_click()
        else:
            self.state = ButtonState.NOT_PRESSED
            self.outline_color = (255, 255, 255, 75)
            self.outline_thickness = -0.5

        if not mouse_down:
            Button._pressed_at = None

    def draw(self, surface):
        """Draw the sprite, then the outline inside the button's bounds."""
        if self.sprite is not None:
            self.sprite.draw(surface)
        x, y = self.position
        w, h = self.size
        rect = pygame.Rect(round(x), round(y), round(w), round(h))
        width = max(1, round(abs(self.outline_thickness)))
        r, g, b, a = self.outline_color
        if a == 255:
            pygame.draw.rect(surface, (r, g, b), rect, width)
            return
        overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.rect(overlay, self.outline_color, overlay.get_rect(), width)
        surface.blit(overlay, rect.topleft)

    def set_click_function(self, func):
        """Set the callback run each frame the button is held pressed."""
        self._on_click = func