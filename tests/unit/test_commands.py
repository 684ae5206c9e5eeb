import pytest
from unittest.mock import MagicMock

from patterns_engine.commands import Command, MoveForward, MoveBackward, Jump, Crouch, CommandFactory
from patterns_engine.commands import command_factory as cf


def test_command_is_abstract():
    with pytest.raises(TypeError):
        Command()


@pytest.mark.parametrize("command_cls, method", [
    (MoveForward, "move_forwards"),
    (MoveBackward, "move_backwards"),
    (Jump, "jump"),
    (Crouch, "crouch"),
])
def test_command_forwards_exactly_one_call(command_cls, method):
    target = MagicMock()
    result = command_cls().execute(target)

    assert result is None
    getattr(target, method).assert_called_once_with()
    # Aucune autre capacité n'est touchée
    others = {"move_forwards", "move_backwards", "jump", "crouch"} - {method}
    for other in others:
        getattr(target, other).assert_not_called()


def test_factory_creates_basic_commands():
    assert isinstance(CommandFactory.create("MOVE_FORWARD"), MoveForward)
    assert isinstance(CommandFactory.create("MOVE_BACKWARD"), MoveBackward)
    assert isinstance(CommandFactory.create("JUMP"), Jump)
    assert isinstance(CommandFactory.create("CROUCH"), Crouch)


def test_factory_shares_stateless_instances():
    assert CommandFactory.create("JUMP") is CommandFactory.create("JUMP")


def test_factory_unknown_command_logs_and_returns_none(monkeypatch):
    logged = {}

    def fake_log(msg):
        logged['msg'] = msg

    monkeypatch.setattr(cf, "log_error", fake_log)

    assert CommandFactory.create("DANCE") is None
    assert "Unknown command" in logged.get('msg', "")
