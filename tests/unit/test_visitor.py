import random

import pytest

from patterns_engine.core.errors import UnknownMonsterError
from patterns_engine.monsters import (
    Monster, Gargoyle, Basilisk, MonsterRecoveryVisitor, MonsterScreamVisitor
)


class Kraken(Monster):
    species = "Kraken"

    def attack(self):
        return 0.0

    def defend(self, attack_power=0.0):
        return 0.0


def test_monster_is_abstract():
    with pytest.raises(TypeError):
        Monster()


def test_gargoyle_attack_bounded_by_power():
    g = Gargoyle(power=50.0, rng=random.Random(2))
    for _ in range(20):
        assert 0.0 <= g.attack() < 50.0


@pytest.mark.parametrize("monster_cls", [Gargoyle, Basilisk])
def test_power_never_negative(monster_cls):
    m = monster_cls(power=5.0, rng=random.Random(7))
    for _ in range(20):
        m.defend(1000.0)
        assert m.power >= 0.0
    assert m.power == 0.0


def test_recovery_is_capped_at_max_power():
    b = Basilisk(power=119.0, rng=random.Random(0))
    visitor = MonsterRecoveryVisitor(rng=random.Random(0))
    for _ in range(10):
        b.accept(visitor)
        assert b.power <= b.max_power


def test_recovery_increases_power():
    g = Gargoyle(power=10.0)
    recovered = g.accept(MonsterRecoveryVisitor(rng=random.Random(5)))
    assert g.power == pytest.approx(min(100.0, 10.0 + recovered))


def test_scream_depends_on_species():
    visitor = MonsterScreamVisitor()
    assert Gargoyle().accept(visitor) == "Gargoyle has screamed grotesquely."
    assert Basilisk().accept(visitor) == "Basilisk has hisssssssed."


def test_scream_unknown_species_raises():
    with pytest.raises(UnknownMonsterError):
        Kraken().accept(MonsterScreamVisitor())
