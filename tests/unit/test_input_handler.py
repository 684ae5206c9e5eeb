import pytest
from unittest.mock import MagicMock

from patterns_engine.commands import InputHandler, MoveForward, MoveBackward, Jump, Crouch
from patterns_engine.core.consts import Button, MoveOutcome, DEFAULT_BUTTON_BINDINGS
from patterns_engine.core.errors import InvalidButtonError, InvalidBindingError


def make_handler():
    return InputHandler(MoveForward(), MoveBackward(), Jump(), Crouch())


def spy_handler():
    """Handler dont chaque bouton est lié à un mock distinct."""
    spies = {b: MagicMock(name=f"cmd_{b.value}") for b in Button}
    handler = InputHandler(spies[Button.A], spies[Button.B], spies[Button.X], spies[Button.Y])
    return handler, spies


@pytest.mark.parametrize("pressed", list(Button))
def test_handle_invokes_only_the_bound_command(pressed):
    handler, spies = spy_handler()
    target = object()

    handler.handle(pressed, target)

    spies[pressed].execute.assert_called_once_with(target)
    for other, spy in spies.items():
        if other != pressed:
            spy.execute.assert_not_called()


def test_binding_independence_when_other_slots_change():
    handler, spies = spy_handler()
    remapped = handler.with_binding(Button.B, MagicMock()).with_binding(Button.Y, MagicMock())

    target = object()
    remapped.handle(Button.A, target)
    spies[Button.A].execute.assert_called_once_with(target)


def test_handle_accepts_string_button(player):
    make_handler().handle("A", player)
    assert player.position == (-9, -10)


@pytest.mark.parametrize("bad", ["Z", "", None, 4, "a"])
def test_handle_unknown_button_is_rejected(bad, player):
    with pytest.raises(InvalidButtonError):
        make_handler().handle(bad, player)
    # Rien n'a bougé
    assert player.position == (-10, -10)
    assert len(player.history) == 0


def test_with_binding_returns_new_handler_and_keeps_original(player):
    original = make_handler()
    remapped = original.with_binding(Button.A, Jump())

    assert remapped is not original
    assert isinstance(original.binding(Button.A), MoveForward)
    assert isinstance(remapped.binding("A"), Jump)

    remapped.handle(Button.A, player)
    assert player.position == (-10, -9)


def test_bindings_are_read_only():
    handler = make_handler()
    with pytest.raises(TypeError):
        handler.bindings[Button.A] = Crouch()


def test_from_names_builds_default_layout():
    handler = InputHandler.from_names(DEFAULT_BUTTON_BINDINGS)
    assert isinstance(handler.binding(Button.A), MoveForward)
    assert isinstance(handler.binding(Button.B), MoveBackward)
    assert isinstance(handler.binding(Button.X), Jump)
    assert isinstance(handler.binding(Button.Y), Crouch)


def test_from_names_missing_slot_raises():
    bindings = dict(DEFAULT_BUTTON_BINDINGS)
    del bindings["Y"]
    with pytest.raises(InvalidBindingError):
        InputHandler.from_names(bindings)


def test_from_names_unknown_command_raises():
    bindings = dict(DEFAULT_BUTTON_BINDINGS, X="FLY")
    with pytest.raises(InvalidBindingError):
        InputHandler.from_names(bindings)


# --- SCÉNARIOS CONCRETS ---

def test_scenario_blocked_at_corner(player, recorder):
    """Joueur en (-10,-10) : B (recul) puis Y (accroupi) sont tous deux bloqués."""
    handler = make_handler()

    handler.handle(Button.B, player)
    handler.handle(Button.Y, player)

    assert player.position == (-10, -10)
    assert [r.outcome for r in recorder.items] == [MoveOutcome.BLOCKED, MoveOutcome.BLOCKED]


def test_scenario_three_moves_forward(player, recorder):
    handler = make_handler()

    for _ in range(3):
        handler.handle(Button.A, player)

    assert player.position == (-7, -10)
    assert [r.outcome for r in recorder.items] == [MoveOutcome.MOVED] * 3
    assert [r.position for r in recorder.items] == [(-9, -10), (-8, -10), (-7, -10)]
