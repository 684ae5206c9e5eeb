"""
Pattern Factory : la détermination de la classe concrète est repoussée à l'exécution.

Exemple : impression de billets pour un match entre deux clubs. Le stade dépend du club
qui reçoit ; l'imprimante ne connaît que l'interface de la fabrique.
"""
import random
from abc import ABC, abstractmethod
from typing import Callable, Optional

from patterns_engine.core.errors import UnknownClubError
from patterns_engine.utils.logger import log_info


# =============================================================================
#  STADES
# =============================================================================

class Stadium(ABC):
    name: str = ""
    max_capacity: int = 0

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def matchday_capacity(self) -> int:
        """Affluence du jour, dans [0, max_capacity)."""
        return int(self.rng.random() * self.max_capacity)


class EmiratesStadium(Stadium):
    name = "The Emirates"
    max_capacity = 100


class Westfalenstadion(Stadium):
    name = "Westfalenstadion"
    max_capacity = 200


class SantiagoBernabeu(Stadium):
    name = "Santiago Bernabeu"
    max_capacity = 300


# =============================================================================
#  CLUBS
# =============================================================================

class Club(ABC):
    """Un club n'est pas lié à un stade : un club peut déménager."""
    name: str = ""
    location: str = ""

    @abstractmethod
    def current_manager(self) -> str:
        raise NotImplementedError


class Arsenal(Club):
    name = "Arsenal F.C."
    location = "London, England"

    def current_manager(self):
        return "Mikel Arteta"


class BorussiaDortmund(Club):
    name = "Borussia Dortmund"
    location = "Dortmund, Germany"

    def current_manager(self):
        return "Marco Rose"


class RealMadrid(Club):
    name = "Real Madrid"
    location = "Madrid, Spain"
    MANAGERS = ("Zinedine Zidane", "Carlo Ancelotti", "currently fired")

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def current_manager(self):
        # Décidé à l'exécution
        return self.rng.choice(self.MANAGERS)


# =============================================================================
#  FABRIQUE & CLIENT
# =============================================================================

class StadiumFactory:
    """Encapsule l'association club -> stade."""

    _STADIUMS = {
        Arsenal: EmiratesStadium,
        RealMadrid: SantiagoBernabeu,
        BorussiaDortmund: Westfalenstadion,
    }

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng

    def get_stadium(self, club: Club) -> Stadium:
        for club_type, stadium_type in self._STADIUMS.items():
            if isinstance(club, club_type):
                return stadium_type(rng=self.rng)
        raise UnknownClubError(f"Unknown club: {type(club).__name__}")


class TicketPrinter:
    """L'imprimante ignore tout de la construction du bon stade."""

    def __init__(self, stadium_factory: StadiumFactory, reporter: Optional[Callable[[str], None]] = None):
        self.stadium_factory = stadium_factory
        self.reporter = reporter or log_info

    def print_ticket(self, host: Club, visitor: Club) -> str:
        stadium = self.stadium_factory.get_stadium(host)
        ticket = (
            f"Welcome to the match between {host.name} and {visitor.name} at {stadium.name}!\n"
            f"Our visitors come from {visitor.location}, and their manager is {visitor.current_manager()}.\n"
            f"\n"
            f"Our manager {host.current_manager()} welcomes {visitor.name} and their fans to {stadium.name}!\n"
            f"\n"
            f"Today's attendance is {stadium.matchday_capacity()} out of a possible {stadium.max_capacity}.\n"
            f"Enjoy the game!"
        )
        self.reporter(ticket)
        return ticket
