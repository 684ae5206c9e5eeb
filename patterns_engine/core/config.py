import json
import os
from typing import Dict, Tuple

from patterns_engine.core.consts import (
    Button, MoveAction, GRID_MIN, GRID_MAX, SCORE_LIMIT, MAX_INCREMENT, DEFAULT_BUTTON_BINDINGS
)
from patterns_engine.utils.logger import log_error, log_debug


class ConfigurationService:
    """
    Service unique gérant la persistance et la validation des paramètres.
    Les valeurs invalides sont ignorées (on garde le défaut) et signalées dans le log.
    """
    FILE_PATH = "settings.json"

    def __init__(self):
        # Valeurs par défaut
        self.debug_mode: bool = False
        self.grid_min: int = GRID_MIN
        self.grid_max: int = GRID_MAX
        self.score_limit: float = SCORE_LIMIT
        self.max_increment: float = MAX_INCREMENT
        self.button_bindings: Dict[str, str] = dict(DEFAULT_BUTTON_BINDINGS)
        self.resolution: Tuple[int, int] = (800, 600)
        self.fullscreen: bool = False

        self.load()

    def load(self):
        """Charge et valide les paramètres depuis le disque."""
        if not os.path.exists(self.FILE_PATH):
            return

        try:
            with open(self.FILE_PATH, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            log_error(f"⚠️ Error while loading settings: {e}")
            return

        if not isinstance(data, dict):
            log_error(f"⚠️ Settings file {self.FILE_PATH} is not a JSON object, keeping defaults.")
            return

        self.debug_mode = bool(data.get("debug_mode", False))
        self.fullscreen = bool(data.get("fullscreen", False))

        # Validation de la résolution : (largeur, hauteur) entiers positifs
        raw_res = data.get("resolution", self.resolution)
        if (isinstance(raw_res, (list, tuple)) and len(raw_res) == 2
                and all(isinstance(v, int) and not isinstance(v, bool) and v > 0 for v in raw_res)):
            self.resolution = tuple(raw_res)
        else:
            log_error(f"⚠️ Invalid resolution {raw_res!r}, keeping defaults.")

        # Validation de la grille
        raw_min = data.get("grid_min", GRID_MIN)
        raw_max = data.get("grid_max", GRID_MAX)
        if isinstance(raw_min, int) and isinstance(raw_max, int) and raw_min <= raw_max:
            self.grid_min, self.grid_max = raw_min, raw_max
        else:
            log_error(f"⚠️ Invalid grid bounds ({raw_min}, {raw_max}), keeping defaults.")

        # Validation du score
        raw_limit = data.get("score_limit", SCORE_LIMIT)
        raw_inc = data.get("max_increment", MAX_INCREMENT)
        try:
            limit, inc = float(raw_limit), float(raw_inc)
        except (TypeError, ValueError):
            limit, inc = -1.0, -1.0
        if limit > 0 and inc > 0:
            self.score_limit, self.max_increment = limit, inc
        else:
            log_error(f"⚠️ Invalid score settings ({raw_limit}, {raw_inc}), keeping defaults.")

        # Validation des boutons : les 4 slots, chacun vers une action connue
        saved_bindings = data.get("button_bindings")
        if saved_bindings:
            if self._bindings_are_valid(saved_bindings):
                self.button_bindings = dict(saved_bindings)
            else:
                log_error(f"⚠️ Invalid button bindings {saved_bindings}, keeping defaults.")

        log_debug(f"Settings loaded from {self.FILE_PATH}")

    @staticmethod
    def _bindings_are_valid(bindings) -> bool:
        if not isinstance(bindings, dict):
            return False
        slots = {b.value for b in Button}
        actions = {a.value for a in MoveAction}
        return set(bindings) == slots and all(v in actions for v in bindings.values())

    def save(self):
        """Persiste les paramètres actuels sur le disque."""
        data = {
            "debug_mode": self.debug_mode,
            "grid_min": self.grid_min,
            "grid_max": self.grid_max,
            "score_limit": self.score_limit,
            "max_increment": self.max_increment,
            "button_bindings": self.button_bindings,
            "resolution": self.resolution,
            "fullscreen": self.fullscreen
        }
        try:
            with open(self.FILE_PATH, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=4)
        except OSError as e:
            log_error(f"❌ Error while saving settings: {e}")
