"""Mouse and keyboard handling that drives the camera."""

from __future__ import annotations

from enum import IntEnum

from galactous.camera import Camera

_KEY_STEP = 0.1


class Key(IntEnum):
    """Keyboard key codes used by the viewer."""

    SPACE = 32
    D = 68
    Q = 81
    S = 83
    Z = 90
    ESCAPE = 256


class MouseButton(IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class Action(IntEnum):
    RELEASE = 0
    PRESS = 1


class InputController:
    """Tracks pressed keys and buttons and turns input events into camera moves.

    ``captured`` tells that the user interface consumed the event, in which
    case it is ignored.
    """

    def __init__(self, camera: Camera) -> None:
        self.camera = camera
        self._last_mouse: tuple[float, float] | None = None
        self._buttons: dict[MouseButton, bool] = {button: False for button in MouseButton}
        self._keys: dict[int, bool] = {}

    def on_cursor_move(self, x: float, y: float, captured: bool = False) -> None:
        """Rotate the camera around its target while the left button is held."""
        if captured:
            return
        last_x, last_y = self._last_mouse if self._last_mouse is not None else (x, y)
        x_offset = x - last_x
        y_offset = last_y - y
        self._last_mouse = (x, y)
        if self._buttons[MouseButton.LEFT]:
            self.camera.turn_around_target(x_offset, y_offset)

    def on_scroll(self, x_offset: float, y_offset: float, captured: bool = False) -> None:
        """Zoom with the vertical scroll amount."""
        if captured:
            return
        self.camera.zoom(y_offset)

    def on_mouse_button(self, button: int, action: int, captured: bool = False) -> None:
        """Record presses and releases of the left, right and middle buttons."""
        if captured:
            return
        try:
            known = MouseButton(button)
        except ValueError:
            return
        if action == Action.PRESS:
            self._buttons[known] = True
        elif action == Action.RELEASE:
            self._buttons[known] = False

    def on_key(self, key: int, action: int, captured: bool = False) -> None:
        """Record the key state; Z, S, Q and D move the camera when pressed."""
        if captured:
            return
        if action == Action.PRESS:
            self._keys[key] = True
            if key == Key.Z:
                self.camera.go_forward(_KEY_STEP)
            elif key == Key.S:
                self.camera.go_backward(_KEY_STEP)
            elif key == Key.Q:
                self.camera.go_left(_KEY_STEP)
            elif key == Key.D:
                self.camera.go_right(_KEY_STEP)
        elif action == Action.RELEASE:
            self._keys[key] = False

    def is_key_pressed(self, key: int) -> bool:
        return self._keys.get(key, False)

    def is_mouse_pressed(self, button: int) -> bool:
        try:
            return self._buttons[MouseButton(button)]
        except ValueError:
            return False