"""Edge-aware queries over keyboard and gamepad state, checked per key binding."""

from __future__ import annotations

from collections.abc import Iterable

from remedy.data import KeyBind


class InputState:
    """Tracks which keys and buttons are held this frame and the last."""

    def __init__(self) -> None:
        self._keys: frozenset[int] = frozenset()
        self._previous_keys: frozenset[int] = frozenset()
        self._buttons: frozenset[int] = frozenset()
        self._previous_buttons: frozenset[int] = frozenset()

    def update(self, keys_down: Iterable[int], buttons_down: Iterable[int]) -> None:
        """Begin a new frame with the given held keys and gamepad buttons."""
        self._previous_keys = self._keys
        self._previous_buttons = self._buttons
        self._keys = frozenset(keys_down)
        self._buttons = frozenset(buttons_down)

    def pressed(self, keybind: KeyBind, gamepad: bool) -> bool:
        key_input = keybind.key in self._keys and keybind.key not in self._previous_keys
        btn_input = gamepad and (
            keybind.button in self._buttons
            and keybind.button not in self._previous_buttons
        )
        return key_input or btn_input

    def released(self, keybind: KeyBind, gamepad: bool) -> bool:
        key_input = keybind.key not in self._keys and keybind.key in self._previous_keys
        btn_input = gamepad and (
            keybind.button not in self._buttons
            and keybind.button in self._previous_buttons
        )
        return key_input or btn_input

    def down(self, keybind: KeyBind, gamepad: bool) -> bool:
        key_input = keybind.key in self._keys
        btn_input = gamepad and keybind.button in self._buttons
        return key_input or btn_input

    def up(self, keybind: KeyBind, gamepad: bool) -> bool:
        key_input = keybind.key not in self._keys
        btn_input = gamepad and keybind.button not in self._buttons
        return key_input or btn_input