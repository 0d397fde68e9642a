"""
Input dispatch for the dashboard loop.

Key presses are translated to actions through the configured key mapping.
Only QUIT has behaviour. The navigation actions advertised in the footer help
text are recognized but reserved: dispatching them changes nothing.
"""

from enum import Enum
from typing import Optional

from ..core.input import InputEvent, Key
from ..core.log_manager import LogManager
from .app_state import AppState


class Action(Enum):
    QUIT = "quit"
    PREVIOUS_OPTION = "previous_option"
    NEXT_OPTION = "next_option"
    SELECT_OPTION = "select_option"
    PREVIOUS_PATH = "previous_path"
    NEXT_PATH = "next_path"


RESERVED_ACTIONS = frozenset({
    Action.PREVIOUS_OPTION,
    Action.NEXT_OPTION,
    Action.SELECT_OPTION,
    Action.PREVIOUS_PATH,
    Action.NEXT_PATH,
})


class InputHandler:
    """Routes key presses to actions on the application state."""

    def __init__(
        self,
        app_state: AppState,
        key_mappings: dict[Key, str],
        log_manager: LogManager,
    ):
        self.state = app_state
        self.log_manager = log_manager
        self.key_mappings = self._resolve_actions(key_mappings)

    def _resolve_actions(self, key_mappings: dict[Key, str]) -> dict[Key, Action]:
        resolved = {}
        for key, action_name in key_mappings.items():
            try:
                resolved[key] = Action(action_name)
            except ValueError:
                self.log_manager.warning(f"Unknown action '{action_name}' bound to {key.name}")
        return resolved

    def get_action(self, event: InputEvent) -> Optional[Action]:
        return self.key_mappings.get(event.key)

    def handle_event(self, event: InputEvent) -> bool:
        """Dispatch one key press. Returns True when it changed the state."""
        action = self.get_action(event)
        if action is None:
            self.log_manager.input(f"Ignored key {event.key.name}")
            return False

        if action == Action.QUIT:
            self.log_manager.input("Quit requested")
            self.state.request_exit()
            return True

        if action in RESERVED_ACTIONS:
            self.log_manager.debug(f"Action '{action.value}' is reserved and has no handler")
        return False
