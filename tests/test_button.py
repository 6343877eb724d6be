import pygame
import pytest

from tacticgrid.button import Button, ButtonState


@pytest.fixture(autouse=True)
def _release_mouse():
    Button((0, 0), (1, 1)).update((-100, -100), False)
    yield
    Button((0, 0), (1, 1)).update((-100, -100), False)


def test_starts_not_pressed():
    button = Button((0, 0), (40, 40))
    assert button.state is ButtonState.NOT_PRESSED
    assert not button.is_pressed() and not button.is_hover()


def test_hover_when_mouse_inside():
    button = Button((0, 0), (40, 40))
    button.update((10, 10), False)
    assert button.is_hover()
    assert not button.is_pressed()
    assert button.outline_color == (0, 0, 0, 255)


def test_right_edge_is_outside():
    button = Button((0, 0), (40, 40))
    button.update((40, 10), False)
    assert button.state is ButtonState.NOT_PRESSED
    assert button.outline_color == (255, 255, 255, 75)


def test_press_runs_callback_each_frame():
    calls = []
    button = Button((0, 0), (40, 40))
    button.set_click_function(lambda: calls.append(1))
    button.update((10, 10), True)
    assert button.is_pressed()
    assert button.outline_color == (255, 0, 0, 255)
    button.update((10, 10), True)
    assert len(calls) == 2


def test_other_button_blocked_while_held():
    calls = []
    first = Button((0, 0), (40, 40))
    second = Button((40, 0), (40, 40))
    second.set_click_function(lambda: calls.append(1))
    first.update((10, 10), True)
    second.update((50, 10), True)
    assert second.is_hover()
    assert not second.is_pressed()
    assert calls == []


def test_release_frees_press():
    first = Button((0, 0), (40, 40))
    second = Button((40, 0), (40, 40))
    first.update((10, 10), True)
    second.update((50, 10), False)
    second.update((50, 10), True)
    assert second.is_pressed()


def test_leaving_resets_state():
    button = Button((0, 0), (40, 40))
    button.update((10, 10), True)
    button.update((100, 100), True)
    assert button.state is ButtonState.NOT_PRESSED
    assert button.outline_thickness == -0.5


def test_draw_outline_and_sprite():
    drawn = []

    class _Sprite:
        def draw(self, surface):
            drawn.append(surface)

    surface = pygame.Surface((50, 50))
    surface.fill((255, 255, 255))
    button = Button((0, 0), (40, 40), _Sprite())
    button.update((10, 10), True)
    button.draw(surface)
    assert drawn == [surface]
    assert surface.get_at((0, 0)) == pygame.Color(255, 0, 0)
    assert surface.get_at((20, 20)) == pygame.Color(255, 255, 255)