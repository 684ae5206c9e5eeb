from types import MappingProxyType
from typing import Mapping, Union

from patterns_engine.commands.command import Command
from patterns_engine.commands.command_factory import CommandFactory
from patterns_engine.core.consts import Button
from patterns_engine.core.errors import InvalidButtonError, InvalidBindingError
from patterns_engine.utils.logger import log_debug


class InputHandler:
    """
    Invoker : associe chaque bouton de la manette à une commande.
    Les associations sont fixées à la construction. Remapper = construire un nouvel InputHandler.
    """

    def __init__(self, button_a: Command, button_b: Command, button_x: Command, button_y: Command):
        self._bindings = MappingProxyType({
            Button.A: button_a,
            Button.B: button_b,
            Button.X: button_x,
            Button.Y: button_y,
        })

    @classmethod
    def from_names(cls, mapping: Mapping[str, str]) -> "InputHandler":
        """Construit le handler depuis la config, ex: {"A": "MOVE_FORWARD", ...}."""
        commands = {}
        for button in Button:
            name = mapping.get(button.value)
            if name is None:
                raise InvalidBindingError(f"No command bound to button {button.value}")
            cmd = CommandFactory.create(name)
            if cmd is None:
                raise InvalidBindingError(f"Unknown command {name!r} for button {button.value}")
            commands[button] = cmd
        return cls(commands[Button.A], commands[Button.B], commands[Button.X], commands[Button.Y])

    @property
    def bindings(self) -> Mapping[Button, Command]:
        return self._bindings

    def binding(self, button: Union[Button, str]) -> Command:
        return self._bindings[self._resolve(button)]

    def with_binding(self, button: Union[Button, str], command: Command) -> "InputHandler":
        """Retourne un NOUVEAU handler avec un bouton remappé. L'original reste intact."""
        bindings = dict(self._bindings)
        bindings[self._resolve(button)] = command
        return InputHandler(bindings[Button.A], bindings[Button.B], bindings[Button.X], bindings[Button.Y])

    def handle(self, button: Union[Button, str], player) -> None:
        """Exécute la commande associée à `button` sur `player`."""
        btn = self._resolve(button)
        command = self._bindings[btn]
        log_debug(f"Button {btn.value} -> {type(command).__name__}")
        command.execute(player)

    @staticmethod
    def _resolve(button) -> Button:
        try:
            return Button(button)
        except ValueError:
            raise InvalidButtonError(f"Unknown button pressed: {button!r}") from None

    def __repr__(self):
        pairs = ", ".join(f"{b.value}={type(c).__name__}" for b, c in self._bindings.items())
        return f"InputHandler({pairs})"
