"""Keyboard and mouse state tracked across window events."""

from __future__ import annotations

from enum import Enum

KEY_COUNT = 256


class MouseButton(Enum):
    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


def _key_index(char: str | int) -> int:
    code = ord(char) if isinstance(char, str) else char
    if not 0 <= code < KEY_COUNT:
        raise ValueError(f"key code {code} outside 0..{KEY_COUNT - 1}")
    return code


class InputState:
    """Which keys and buttons are held, control-toggled keys, and the mouse position.

    ``keys`` holds the keys currently down; ``keys2`` flips each time a key is
    pressed together with control.  Mouse coordinates are relative to the
    window, in ``[0, 1]`` while the pointer is inside it.
    """

    def __init__(self) -> None:
        self.keys = [False] * KEY_COUNT
        self.keys2 = [False] * KEY_COUNT
        self.mouse_buttons = [False] * len(MouseButton)
        self.mouse_x = 0.0
        self.mouse_y = 0.0
        self.window_size = (0, 0)

    def key_down(self, char: str | int, control_down: bool = False, is_left_control: bool = False) -> bool:
        code = _key_index(char)
        self.keys[code] = True
        if control_down and not is_left_control:
            self.keys2[code] = not self.keys2[code]
        return True

    def key_up(self, char: str | int) -> bool:
        self.keys[_key_index(char)] = False
        return True

    def mouse_down(self, button: MouseButton) -> bool:
        self.mouse_buttons[button.value] = True
        return True

    def mouse_up(self, button: MouseButton) -> bool:
        self.mouse_buttons[button.value] = False
        return True

    def update_mouse(
        self,
        mouse_pos: tuple[float, float],
        window_pos: tuple[float, float],
        window_size: tuple[int, int],
    ) -> tuple[float, float]:
        """Store the pointer position relative to the window; returns it."""
        width, height = window_size
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid window size {window_size!r}")
        self.window_size = (width, height)
        self.mouse_x = (mouse_pos[0] - window_pos[0]) / width
        self.mouse_y = (mouse_pos[1] - window_pos[1]) / height
        return (self.mouse_x, self.mouse_y)