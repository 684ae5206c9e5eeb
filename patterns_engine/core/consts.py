from enum import Enum


class Button(str, Enum):
    """
    Les quatre boutons de la manette.
    Domaine fermé : l'InputHandler associe exactement une commande à chacun.
    """
    A = "A"
    B = "B"
    X = "X"
    Y = "Y"


class MoveOutcome(str, Enum):
    """Résultat observable d'un déplacement demandé à une cible."""
    MOVED = "MOVED"      # La position a changé
    BLOCKED = "BLOCKED"  # Bord de la grille atteint (ou politique de la cible) : aucun changement


class MoveAction(str, Enum):
    """Les capacités primitives d'une cible (Player)."""
    MOVE_FORWARD = "MOVE_FORWARD"
    MOVE_BACKWARD = "MOVE_BACKWARD"
    JUMP = "JUMP"
    CROUCH = "CROUCH"


class AccountState(str, Enum):
    LOCKED = "LOCKED"
    UNLOCKED = "UNLOCKED"


# --- VALEURS PAR DÉFAUT ---
GRID_MIN = -10
GRID_MAX = 10

SCORE_LIMIT = 100.0
MAX_INCREMENT = 10.0

DEFAULT_BUTTON_BINDINGS = {
    Button.A.value: MoveAction.MOVE_FORWARD.value,
    Button.B.value: MoveAction.MOVE_BACKWARD.value,
    Button.X.value: MoveAction.JUMP.value,
    Button.Y.value: MoveAction.CROUCH.value,
}

# Nombre de rapports de déplacement conservés par joueur
HISTORY_SIZE = 100
