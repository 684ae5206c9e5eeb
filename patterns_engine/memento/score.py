import random
import uuid
from abc import ABC, abstractmethod
from typing import Callable, Optional

from patterns_engine.core.consts import SCORE_LIMIT, MAX_INCREMENT
from patterns_engine.core.errors import MissingSnapshotError, ForeignSnapshotError
from patterns_engine.utils.logger import log_info


class SavedScore:
    """
    Le "memento" : capsule immuable et opaque du score d'un joueur.
    Aucun accesseur public. Seul ce module sait relire la valeur (via _unwrap).
    """
    __slots__ = ("_score", "_owner")

    def __init__(self, score: float, owner: str):
        object.__setattr__(self, "_score", float(score))
        object.__setattr__(self, "_owner", owner)

    def __setattr__(self, name, value):
        raise AttributeError("SavedScore is immutable")

    def __delattr__(self, name):
        raise AttributeError("SavedScore is immutable")

    def __repr__(self):
        # On ne trahit pas la valeur
        return "<SavedScore>"


def _unwrap(saved: SavedScore, owner: str) -> float:
    """Extraction réservée aux joueurs de ce module."""
    if saved._owner != owner:
        raise ForeignSnapshotError("This saved score belongs to another player")
    return saved._score


class ScorePlayer(ABC):
    """Joueur générique dont la progression peut être sauvegardée puis restaurée."""

    @abstractmethod
    def play(self) -> float:
        raise NotImplementedError

    @abstractmethod
    def save_score(self) -> SavedScore:
        raise NotImplementedError

    @abstractmethod
    def restore_score(self, saved_score: SavedScore) -> None:
        raise NotImplementedError


class DefaultScorePlayer(ScorePlayer):
    """
    Implémentation concrète.
    play() ajoute un incrément dans [0, max_increment) ; au-delà de `limit`, le score retombe à 0.
    La source d'aléa est injectable pour rendre les tests déterministes.
    """

    def __init__(self,
                 increment_source: Optional[Callable[[], float]] = None,
                 limit: float = SCORE_LIMIT,
                 max_increment: float = MAX_INCREMENT,
                 reporter: Optional[Callable[[str], None]] = None):
        self.limit = limit
        self.max_increment = max_increment
        self.increment_source = increment_source or (lambda: random.random() * self.max_increment)
        self.reporter = reporter or log_info

        self._score = 0.0
        self._id = uuid.uuid4().hex

    @property
    def score(self) -> float:
        return self._score

    def play(self) -> float:
        increment = self.increment_source()
        if not (0 <= increment < self.max_increment):
            raise ValueError(f"Increment {increment} outside [0, {self.max_increment})")

        self._score += increment
        # Remise à zéro (pas de saturation)
        if self._score > self.limit:
            self._score = 0.0

        self.reporter(f"Current score is {self._score:.4g}.")
        return self._score

    def save_score(self) -> SavedScore:
        """Ce que signifie "sauvegarder" pour ce type de joueur."""
        self.reporter(f"Saving score {self._score:.4g}.")
        return SavedScore(self._score, self._id)

    def restore_score(self, saved_score: SavedScore) -> None:
        """
        Restaure le score depuis une sauvegarde de CE joueur.
        Échoue immédiatement (sans rien modifier) si la sauvegarde est absente.
        """
        if saved_score is None:
            raise MissingSnapshotError("Cannot restore score: no saved score given")
        if not isinstance(saved_score, SavedScore):
            raise TypeError(f"Expected SavedScore, got {type(saved_score).__name__}")

        self._score = _unwrap(saved_score, self._id)
        self.reporter(f"Restored score to {self._score:.4g} from saved.")

    def __repr__(self):
        return f"<DefaultScorePlayer score={self._score:.4g}>"
