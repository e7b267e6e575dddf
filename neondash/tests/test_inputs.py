# neondash/tests/test_inputs.py
from neondash.game.inputs import PressSources
from neondash.game.session import GameSession


def test_sources_are_or_combined():
    inputs = PressSources()
    assert inputs.set(("key", "space"), True) is True
    assert inputs.set("mouse", True) is True
    assert inputs.set(("key", "space"), False) is True, "mouse still held"
    assert inputs.set("mouse", False) is False


def test_release_of_unknown_source_is_harmless():
    inputs = PressSources()
    assert inputs.set("mouse", False) is False


def test_clear_drops_everything():
    inputs = PressSources()
    inputs.set("mouse", True)
    inputs.set(("touch", 3), True)
    inputs.clear()
    assert inputs.pressed is False


def test_combined_flag_drives_session():
    session = GameSession()
    inputs = PressSources()
    session.press(inputs.set("mouse", True))
    assert session.active and session.state.pressed
    session.press(inputs.set(("key", "up"), True))
    session.press(inputs.set("mouse", False))
    assert session.state.pressed, "up arrow still held"
