"""
input_manager.py
----------------
Keyboard input collected between frames.

Provides:
- Per-frame immutable snapshots (held keys + ordered press/release edges)
- Global key-down bindings dispatched as soon as the event arrives
"""

from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, List, Tuple

import pygame

from cracker_chase.core.debug.debug_logger import DebugLogger


# ===========================================================
# Snapshot
# ===========================================================

@dataclass(frozen=True)
class KeyTransition:
    key: int
    pressed: bool


@dataclass(frozen=True)
class FrameInput:
    """Input state handed to every entity update for one frame."""
    held: FrozenSet[int] = frozenset()
    transitions: Tuple[KeyTransition, ...] = ()


# ===========================================================
# Input Manager
# ===========================================================

class InputManager:
    """
    Records keyboard events and hands them out one frame at a time.

    Transitions are only queued while capturing. Held keys and bindings
    are tracked regardless, so the start key works on the start screen.

    Usage:
        input_manager.bind_keydown(pygame.K_g, game.on_start_key)
        ...
        input_manager.handle_event(event)      # from the event pump
        frame_input = input_manager.consume()  # once per frame
    """

    def __init__(self):
        self._held = set()
        self._pending: List[KeyTransition] = []
        self._bindings: Dict[int, List[Callable[[], None]]] = {}
        self.capturing = True

    # ===========================================================
    # Bindings
    # ===========================================================

    def bind_keydown(self, key: int, callback: Callable[[], None]):
        """Call callback on every key-down of key, outside the frame loop."""
        self._bindings.setdefault(key, []).append(callback)
        DebugLogger.system(f"Bound key {key}", category="input")

    # ===========================================================
    # Event Intake
    # ===========================================================

    def handle_event(self, event) -> bool:
        """
        Record a pygame event.

        Returns:
            bool: True if the event was a key event
        """
        if event.type == pygame.KEYDOWN:
            self.key_down(event.key)
            return True
        if event.type == pygame.KEYUP:
            self.key_up(event.key)
            return True
        return False

    def key_down(self, key: int):
        self._held.add(key)
        if self.capturing:
            self._pending.append(KeyTransition(key, True))
        for callback in list(self._bindings.get(key, ())):
            callback()

    def key_up(self, key: int):
        self._held.discard(key)
        if self.capturing:
            self._pending.append(KeyTransition(key, False))

    # ===========================================================
    # Frame Access
    # ===========================================================

    def set_capturing(self, capturing: bool):
        """Start or stop queueing transitions. Stopping drops the queue."""
        self.capturing = capturing
        if not capturing:
            self._pending = []

    def consume(self) -> FrameInput:
        """Return the snapshot for this frame and start a new transition queue."""
        snapshot = FrameInput(frozenset(self._held), tuple(self._pending))
        self._pending = []
        return snapshot

    def clear_transitions(self):
        self._pending = []
