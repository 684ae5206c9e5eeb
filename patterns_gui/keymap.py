from typing import Dict, Optional, Union

import pygame

from patterns_engine.core.consts import Button

# Actions hors manette (Memento / Active Object)
ACTION_PLAY = "PLAY"
ACTION_SAVE = "SAVE"
ACTION_RESTORE = "RESTORE"
ACTION_COUNT = "COUNT"
ACTION_QUIT = "QUIT_APP"


class KeyMap:
    """
    Traduit les événements pygame (clavier / manette) en intentions.
    Retourne un Button (à passer à l'InputHandler), une action string, ou None.
    """

    DEFAULT_KEYS = {
        pygame.K_a: Button.A,
        pygame.K_b: Button.B,
        pygame.K_x: Button.X,
        pygame.K_y: Button.Y,
        pygame.K_p: ACTION_PLAY,
        pygame.K_s: ACTION_SAVE,
        pygame.K_r: ACTION_RESTORE,
        pygame.K_c: ACTION_COUNT,
        pygame.K_ESCAPE: ACTION_QUIT,
    }

    # Disposition standard type Xbox : 0=A, 1=B, 2=X, 3=Y
    DEFAULT_JOY_BUTTONS = {
        0: Button.A,
        1: Button.B,
        2: Button.X,
        3: Button.Y,
    }

    def __init__(self, keys: Optional[Dict[int, Union[Button, str]]] = None,
                 joy_buttons: Optional[Dict[int, Union[Button, str]]] = None):
        self.keys = dict(keys if keys is not None else self.DEFAULT_KEYS)
        self.joy_buttons = dict(joy_buttons if joy_buttons is not None else self.DEFAULT_JOY_BUTTONS)

    def translate(self, event) -> Optional[Union[Button, str]]:
        if event.type == pygame.QUIT:
            return ACTION_QUIT
        if event.type == pygame.KEYDOWN:
            return self.keys.get(event.key)
        if event.type == pygame.JOYBUTTONDOWN:
            return self.joy_buttons.get(event.button)
        return None
