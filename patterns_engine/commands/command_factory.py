from typing import Optional

from patterns_engine.commands.command import Command
from patterns_engine.commands.definitions import MoveForward, MoveBackward, Jump, Crouch
from patterns_engine.core.consts import MoveAction
from patterns_engine.utils.logger import log_error


class CommandFactory:
    """
    Factory Pattern Stricte.
    Les commandes étant sans état, une seule instance par action est partagée.
    """

    _INSTANCES = {
        MoveAction.MOVE_FORWARD: MoveForward(),
        MoveAction.MOVE_BACKWARD: MoveBackward(),
        MoveAction.JUMP: Jump(),
        MoveAction.CROUCH: Crouch(),
    }

    @staticmethod
    def create(action_name: str) -> Optional[Command]:
        try:
            action = MoveAction(action_name)
        except ValueError:
            log_error(f"❌ Factory: Unknown command {action_name!r}")
            return None
        return CommandFactory._INSTANCES[action]
