from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Optional, Tuple

from patterns_engine.core.consts import MoveAction, MoveOutcome, GRID_MIN, GRID_MAX, HISTORY_SIZE
from patterns_engine.utils.logger import log_info


# =============================================================================
#  RAPPORTS DE DÉPLACEMENT
# =============================================================================

# Textes affichés pour chaque (action, résultat)
_STATUS_TEXT = {
    (MoveAction.MOVE_FORWARD, MoveOutcome.MOVED): "Moved forward!",
    (MoveAction.MOVE_FORWARD, MoveOutcome.BLOCKED): "Cannot move forward!",
    (MoveAction.MOVE_BACKWARD, MoveOutcome.MOVED): "Moved backward!",
    (MoveAction.MOVE_BACKWARD, MoveOutcome.BLOCKED): "Cannot move backward!",
    (MoveAction.JUMP, MoveOutcome.MOVED): "Jumped!",
    (MoveAction.JUMP, MoveOutcome.BLOCKED): "Cannot jump!",
    (MoveAction.CROUCH, MoveOutcome.MOVED): "Crouched!",
    (MoveAction.CROUCH, MoveOutcome.BLOCKED): "Cannot crouch!",
}


@dataclass(frozen=True)
class MoveReport:
    """
    Compte-rendu d'une action sur une cible.
    C'est le canal par lequel "bloqué" et "déplacé" restent distinguables.
    """
    action: MoveAction
    outcome: MoveOutcome
    position: Tuple[int, int]

    @property
    def moved(self) -> bool:
        return self.outcome == MoveOutcome.MOVED

    def __str__(self):
        x, y = self.position
        return f"{_STATUS_TEXT[(self.action, self.outcome)]} Current location is [ {x}, {y} ]."


Reporter = Callable[[MoveReport], None]


def log_reporter(report: MoveReport):
    """Reporter par défaut : une ligne de statut dans le log."""
    log_info(str(report))


# =============================================================================
#  INTERFACE CIBLE
# =============================================================================

class Player(ABC):
    """
    Cible (Receiver) sur laquelle agissent les commandes.
    Chaque implémentation choisit sa propre politique d'acceptation / refus.
    """

    @abstractmethod
    def move_forwards(self) -> MoveReport:
        raise NotImplementedError

    @abstractmethod
    def move_backwards(self) -> MoveReport:
        raise NotImplementedError

    @abstractmethod
    def jump(self) -> MoveReport:
        raise NotImplementedError

    @abstractmethod
    def crouch(self) -> MoveReport:
        raise NotImplementedError


class DefaultPlayer(Player):
    """
    Joueur sur une grille 2D bornée [minimum, maximum] x [minimum, maximum].
    Un déplacement hors limites est refusé (aucun changement) et rapporté BLOCKED.
    """

    def __init__(self,
                 position: Optional[Tuple[int, int]] = None,
                 minimum: int = GRID_MIN,
                 maximum: int = GRID_MAX,
                 reporter: Optional[Reporter] = None,
                 history_size: int = HISTORY_SIZE):
        if minimum > maximum:
            raise ValueError(f"Invalid bounds: minimum {minimum} > maximum {maximum}")

        self.minimum = minimum
        self.maximum = maximum

        # Départ par défaut dans le coin bas-gauche
        x, y = position if position is not None else (minimum, minimum)
        if not (self._in_range(x) and self._in_range(y)):
            raise ValueError(f"Start position ({x}, {y}) outside [{minimum}, {maximum}]")
        self._location = [x, y]

        self.reporter = reporter or log_reporter
        # Seuls les derniers rapports sont conservés (boucle de jeu longue)
        self.history: Deque[MoveReport] = deque(maxlen=history_size)

    @property
    def position(self) -> Tuple[int, int]:
        return self._location[0], self._location[1]

    def move_forwards(self) -> MoveReport:
        return self._step(MoveAction.MOVE_FORWARD, axis=0, delta=1)

    def move_backwards(self) -> MoveReport:
        return self._step(MoveAction.MOVE_BACKWARD, axis=0, delta=-1)

    def jump(self) -> MoveReport:
        return self._step(MoveAction.JUMP, axis=1, delta=1)

    def crouch(self) -> MoveReport:
        return self._step(MoveAction.CROUCH, axis=1, delta=-1)

    def _in_range(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def _step(self, action: MoveAction, axis: int, delta: int) -> MoveReport:
        target = self._location[axis] + delta
        if self._in_range(target):
            self._location[axis] = target
            outcome = MoveOutcome.MOVED
        else:
            outcome = MoveOutcome.BLOCKED
        return self._report(action, outcome)

    def _report(self, action: MoveAction, outcome: MoveOutcome) -> MoveReport:
        report = MoveReport(action, outcome, self.position)
        self.history.append(report)
        self.reporter(report)
        return report

    def __repr__(self):
        return f"<DefaultPlayer at {self.position} in [{self.minimum}, {self.maximum}]>"


class BackwardsOnlyPlayer(Player):
    """
    Variante qui refuse toute marche avant.
    Composition : délègue le reste à un DefaultPlayer.
    """

    def __init__(self, inner: Optional[DefaultPlayer] = None, reporter: Optional[Reporter] = None):
        self.inner = inner or DefaultPlayer(reporter=reporter)

    @property
    def position(self) -> Tuple[int, int]:
        return self.inner.position

    @property
    def history(self) -> Deque[MoveReport]:
        return self.inner.history

    def move_forwards(self) -> MoveReport:
        return self.inner._report(MoveAction.MOVE_FORWARD, MoveOutcome.BLOCKED)

    def move_backwards(self) -> MoveReport:
        return self.inner.move_backwards()

    def jump(self) -> MoveReport:
        return self.inner.jump()

    def crouch(self) -> MoveReport:
        return self.inner.crouch()
