"""
Pattern Visitor : on étend une famille d'objets (les monstres) avec de nouvelles
opérations (récupérer, crier) sans toucher à leurs classes. Le monstre se contente
d'accepter le visiteur.
"""
import random
from abc import ABC, abstractmethod
from typing import Optional

from patterns_engine.core.errors import UnknownMonsterError
from patterns_engine.utils.logger import log_info


class Monster(ABC):
    """Un monstre a une puissance `power` bornée par `max_power`."""
    species: str = "Monster"
    max_power: float = 100.0

    def __init__(self, power: float = 100.0, rng: Optional[random.Random] = None):
        self.power = power
        self.rng = rng or random.Random()

    @abstractmethod
    def attack(self) -> float:
        raise NotImplementedError

    @abstractmethod
    def defend(self, attack_power: float = 0.0) -> float:
        """Encaisse une attaque, retourne les dégâts subis."""
        raise NotImplementedError

    def report_power(self):
        log_info(f"{self.species} has power {self.power:.4g}.")

    def _take_damage(self, damage: float):
        self.power = max(0.0, self.power - damage)

    def accept(self, visitor: "Visitor"):
        return visitor.visit(self)


class Gargoyle(Monster):
    species = "Gargoyle"
    max_power = 100.0

    def attack(self):
        attack_power = self.rng.random() * self.power
        log_info(f"Gargoyle attacked with power {attack_power:.4g}.")
        return attack_power

    def defend(self, attack_power=0.0):
        damage = self.rng.random() * attack_power
        self._take_damage(damage)
        log_info(f"Gargoyle defended an attack with power {attack_power:.4g}, took {damage:.4g} damage.")
        self.report_power()
        return damage


class Basilisk(Monster):
    species = "Basilisk"
    max_power = 120.0

    def attack(self):
        venom_boost = self.rng.random() ** 2 * self.max_power
        attack_power = self.rng.random() * self.power + venom_boost
        log_info(f"Basilisk attacked with power {attack_power:.4g}.")
        return attack_power

    def defend(self, attack_power=0.0):
        # "Taxe de stupidité" : dégâts supplémentaires aléatoires
        stupidity_tax = self.rng.random() ** 2 * self.max_power
        damage = self.rng.random() * attack_power + stupidity_tax
        self._take_damage(damage)
        log_info(f"Basilisk defended an attack with power {attack_power:.4g}, took {damage:.4g} damage.")
        self.report_power()
        return damage


# =============================================================================
#  VISITEURS
# =============================================================================

class Visitor(ABC):
    @abstractmethod
    def visit(self, monster: Monster):
        raise NotImplementedError


class MonsterRecoveryVisitor(Visitor):
    """Permet à un monstre de récupérer de la puissance (plafonnée à max_power)."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def visit(self, monster):
        recovered = self.rng.random() ** 2 * monster.max_power
        monster.power = min(monster.max_power, monster.power + recovered)
        log_info(f"Monster recovered power {recovered:.4g}.")
        monster.report_power()
        return recovered


class MonsterScreamVisitor(Visitor):
    SCREAMS = {
        Gargoyle: "Gargoyle has screamed grotesquely.",
        Basilisk: "Basilisk has hisssssssed.",
    }

    def visit(self, monster):
        for species, scream in self.SCREAMS.items():
            if isinstance(monster, species):
                log_info(scream)
                return scream
        raise UnknownMonsterError(f"Undiscovered monster species: {type(monster).__name__}")
