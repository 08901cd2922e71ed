"""
State Machine for match flow management
"""

from enum import Enum
from typing import Dict, Optional, Callable, Any


class StateMachine:
    """
    Manages states and transitions for any Enum of states.
    Enter/exit handlers run on every real transition.
    """

    def __init__(self, initial_state: Enum):
        self.current_state: Enum = initial_state
        self.previous_state: Optional[Enum] = None

        # State handlers
        self._enter_handlers: Dict[Enum, Callable] = {}
        self._exit_handlers: Dict[Enum, Callable] = {}
        self._update_handlers: Dict[Enum, Callable] = {}

        # State data (for passing data between states)
        self.state_data: Dict[str, Any] = {}

    def register_handlers(
        self,
        state: Enum,
        enter: Optional[Callable] = None,
        exit_handler: Optional[Callable] = None,
        update: Optional[Callable] = None
    ):
        """Register handlers for a state"""
        if enter:
            self._enter_handlers[state] = enter
        if exit_handler:
            self._exit_handlers[state] = exit_handler
        if update:
            self._update_handlers[state] = update

    def transition_to(self, new_state: Enum, **kwargs) -> bool:
        """
        Transition to a new state.
        Calls exit handler on current state, then enter handler on new state.
        Return False if already in new_state.
        """
        if new_state == self.current_state:
            return False

        # Store data for new state
        self.state_data.update(kwargs)

        # Exit current state
        if self.current_state in self._exit_handlers:
            self._exit_handlers[self.current_state]()

        # Update state
        self.previous_state = self.current_state
        self.current_state = new_state

        # Enter new state
        if new_state in self._enter_handlers:
            self._enter_handlers[new_state]()

        return True

    def update(self) -> Any:
        """Run the update handler of the current state"""
        if self.current_state in self._update_handlers:
            return self._update_handlers[self.current_state]()
        return None

    def is_state(self, state: Enum) -> bool:
        """Check if current state matches"""
        return self.current_state == state

    def get_data(self, key: str, default: Any = None) -> Any:
        """Get state data"""
        return self.state_data.get(key, default)

    def set_data(self, key: str, value: Any):
        """Set state data"""
        self.state_data[key] = value

    def clear_data(self):
        """Clear all state data"""
        self.state_data.clear()
