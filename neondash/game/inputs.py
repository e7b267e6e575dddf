# neondash/game/inputs.py
from __future__ import annotations
from typing import Hashable, Set


class PressSources:
    """
    OR-combines every physical source (key, mouse button, touch id) into
    the single "pressed" flag the session consumes.
    """

    def __init__(self) -> None:
        self._held: Set[Hashable] = set()

    def set(self, source: Hashable, down: bool) -> bool:
        if down:
            self._held.add(source)
        else:
            self._held.discard(source)
        return self.pressed

    @property
    def pressed(self) -> bool:
        return bool(self._held)

    def clear(self) -> None:
        # Focus loss: key-up events for held keys never arrive.
        self._held.clear()
