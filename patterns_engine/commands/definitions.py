from patterns_engine.commands.command import Command


# Commandes concrètes : de simples relais vers la cible.
# La politique (déplacement accepté ou refusé) appartient entièrement au Player.

class MoveForward(Command):
    """Fait avancer la cible."""

    def execute(self, player):
        player.move_forwards()


class MoveBackward(Command):
    """Fait reculer la cible."""

    def execute(self, player):
        player.move_backwards()


class Jump(Command):
    def execute(self, player):
        player.jump()


class Crouch(Command):
    def execute(self, player):
        player.crouch()
