from .visitor import (
    Monster, Gargoyle, Basilisk,
    Visitor, MonsterRecoveryVisitor, MonsterScreamVisitor
)
