import pytest

from shadekit.input_state import InputState, MouseButton


def test_key_down_and_up():
    state = InputState()
    assert state.key_down("r") is True
    assert state.keys[ord("r")] is True
    state.key_up("r")
    assert state.keys[ord("r")] is False


def test_control_toggles_keys2():
    state = InputState()
    state.key_down("a", control_down=True)
    assert state.keys2[ord("a")] is True
    state.key_down("a", control_down=True)
    assert state.keys2[ord("a")] is False


def test_left_control_itself_does_not_toggle():
    state = InputState()
    state.key_down(17, control_down=True, is_left_control=True)
    assert state.keys2[17] is False
    assert state.keys[17] is True


def test_plain_press_does_not_toggle():
    state = InputState()
    state.key_down("b")
    assert state.keys2[ord("b")] is False


def test_key_out_of_range():
    with pytest.raises(ValueError):
        InputState().key_down(300)


@pytest.mark.parametrize("button", list(MouseButton))
def test_mouse_buttons(button):
    state = InputState()
    state.mouse_down(button)
    assert state.mouse_buttons[button.value] is True
    assert sum(state.mouse_buttons) == 1
    state.mouse_up(button)
    assert not any(state.mouse_buttons)


def test_update_mouse_relative_to_window():
    state = InputState()
    assert state.update_mouse((10, 20), (10, 20), (40, 30)) == (0.0, 0.0)
    assert state.update_mouse((50, 50), (10, 20), (40, 30)) == (1.0, 1.0)
    assert (state.mouse_x, state.mouse_y) == (1.0, 1.0)
    assert state.window_size == (40, 30)


def test_update_mouse_center():
    state = InputState()
    assert state.update_mouse((30, 20), (10, 10), (40, 20)) == (0.5, 0.5)


def test_update_mouse_rejects_empty_window():
    with pytest.raises(ValueError):
        InputState().update_mouse((0, 0), (0, 0), (0, 10))