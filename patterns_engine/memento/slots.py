from typing import Dict, List

from patterns_engine.memento.score import SavedScore
from patterns_engine.utils.logger import log_debug


class SaveSlots:
    """
    Caretaker : garde les sauvegardes sous un nom (emplacement de partie).
    Ne lit jamais leur contenu, se contente de les conserver.
    """

    def __init__(self):
        self._slots: Dict[str, SavedScore] = {}

    def store(self, name: str, saved_score: SavedScore):
        if not isinstance(saved_score, SavedScore):
            raise TypeError(f"Expected SavedScore, got {type(saved_score).__name__}")
        self._slots[name] = saved_score
        log_debug(f"Slot '{name}' saved.")

    def load(self, name: str) -> SavedScore:
        # KeyError si l'emplacement n'existe pas
        return self._slots[name]

    def discard(self, name: str):
        self._slots.pop(name, None)

    def names(self) -> List[str]:
        return sorted(self._slots)

    def __contains__(self, name):
        return name in self._slots

    def __len__(self):
        return len(self._slots)
