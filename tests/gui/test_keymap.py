import os

import pygame

from patterns_engine.core.consts import Button
from patterns_gui.keymap import KeyMap, ACTION_PLAY, ACTION_SAVE, ACTION_RESTORE, ACTION_QUIT

# Configuration "Headless"
os.environ["SDL_VIDEODRIVER"] = "dummy"


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def test_letter_keys_map_to_pad_buttons():
    km = KeyMap()
    assert km.translate(key(pygame.K_a)) == Button.A
    assert km.translate(key(pygame.K_b)) == Button.B
    assert km.translate(key(pygame.K_x)) == Button.X
    assert km.translate(key(pygame.K_y)) == Button.Y


def test_score_keys_map_to_actions():
    km = KeyMap()
    assert km.translate(key(pygame.K_p)) == ACTION_PLAY
    assert km.translate(key(pygame.K_s)) == ACTION_SAVE
    assert km.translate(key(pygame.K_r)) == ACTION_RESTORE


def test_joystick_buttons_follow_xbox_layout():
    km = KeyMap()
    ev = pygame.event.Event(pygame.JOYBUTTONDOWN, button=3, joy=0, instance_id=0)
    assert km.translate(ev) == Button.Y


def test_quit_event_and_unknown_keys():
    km = KeyMap()
    assert km.translate(pygame.event.Event(pygame.QUIT)) == ACTION_QUIT
    assert km.translate(key(pygame.K_F12)) is None
    assert km.translate(pygame.event.Event(pygame.MOUSEMOTION, pos=(0, 0), rel=(0, 0), buttons=(0, 0, 0))) is None


def test_custom_keys_override_defaults():
    km = KeyMap(keys={pygame.K_SPACE: Button.X})
    assert km.translate(key(pygame.K_SPACE)) == Button.X
    assert km.translate(key(pygame.K_a)) is None
