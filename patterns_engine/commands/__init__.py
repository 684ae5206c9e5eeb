# Cela permet de faire "from patterns_engine.commands import Jump"
# au lieu de "from patterns_engine.commands.definitions import Jump"
from .command import Command
from .definitions import (
    MoveForward,
    MoveBackward,
    Jump,
    Crouch
)
from .command_factory import CommandFactory
from .input_handler import InputHandler
