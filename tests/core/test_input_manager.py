"""
test_input_manager.py
---------------------
Tests for InputManager frame snapshots and key bindings.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pygame

from cracker_chase.core.services.input_manager import FrameInput, InputManager, KeyTransition


def key_event(kind, key):
    return SimpleNamespace(type=kind, key=key)


class TestSnapshots:

    def test_transitions_in_arrival_order(self):
        manager = InputManager()
        manager.key_down(pygame.K_LEFT)
        manager.key_down(pygame.K_UP)
        manager.key_up(pygame.K_LEFT)

        frame = manager.consume()

        assert frame.transitions == (
            KeyTransition(pygame.K_LEFT, True),
            KeyTransition(pygame.K_UP, True),
            KeyTransition(pygame.K_LEFT, False),
        )
        assert frame.held == frozenset({pygame.K_UP})

    def test_consume_starts_new_queue_but_keeps_held(self):
        manager = InputManager()
        manager.key_down(pygame.K_RIGHT)
        manager.consume()

        frame = manager.consume()

        assert frame.transitions == ()
        assert pygame.K_RIGHT in frame.held

    def test_snapshot_is_immutable_copy(self):
        manager = InputManager()
        manager.key_down(pygame.K_DOWN)
        frame = manager.consume()
        manager.key_up(pygame.K_DOWN)

        assert frame.held == frozenset({pygame.K_DOWN})
        assert frame.transitions == (KeyTransition(pygame.K_DOWN, True),)

    def test_clear_transitions(self):
        manager = InputManager()
        manager.key_down(pygame.K_g)
        manager.clear_transitions()
        assert manager.consume().transitions == ()

    def test_empty_frame_input(self):
        frame = FrameInput()
        assert frame.held == frozenset()
        assert frame.transitions == ()


class TestCapturing:

    def test_not_capturing_drops_transitions_but_tracks_held(self):
        manager = InputManager()
        manager.set_capturing(False)
        manager.key_down(pygame.K_LEFT)

        frame = manager.consume()

        assert frame.transitions == ()
        assert frame.held == frozenset({pygame.K_LEFT})

    def test_stopping_capture_clears_queue(self):
        manager = InputManager()
        manager.key_down(pygame.K_UP)
        manager.set_capturing(False)
        manager.set_capturing(True)
        assert manager.consume().transitions == ()

    def test_bindings_fire_while_not_capturing(self):
        manager = InputManager()
        callback = MagicMock()
        manager.bind_keydown(pygame.K_g, callback)
        manager.set_capturing(False)

        manager.key_down(pygame.K_g)

        callback.assert_called_once_with()


class TestEventIntake:

    def test_routes_key_events(self):
        manager = InputManager()
        assert manager.handle_event(key_event(pygame.KEYDOWN, pygame.K_UP))
        assert manager.handle_event(key_event(pygame.KEYUP, pygame.K_UP))
        assert len(manager.consume().transitions) == 2

    def test_ignores_other_events(self):
        manager = InputManager()
        assert not manager.handle_event(SimpleNamespace(type=pygame.MOUSEMOTION))
        assert manager.consume().transitions == ()


class TestBindings:

    def test_keydown_binding_fires_immediately(self):
        manager = InputManager()
        callback = MagicMock()
        manager.bind_keydown(pygame.K_g, callback)

        manager.handle_event(key_event(pygame.KEYDOWN, pygame.K_g))

        callback.assert_called_once_with()

    def test_binding_ignores_keyup_and_other_keys(self):
        manager = InputManager()
        callback = MagicMock()
        manager.bind_keydown(pygame.K_g, callback)

        manager.key_up(pygame.K_g)
        manager.key_down(pygame.K_h)

        callback.assert_not_called()
