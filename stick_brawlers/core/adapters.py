"""
Adapter interfaces
==================
The match only talks to drawing and UI code through these.
"""

from abc import ABC, abstractmethod


class RenderAdapter(ABC):
    """Draws the arena and fighters"""

    @abstractmethod
    def set_arena(self, width: int, height: int):
        """Called once when the match is set up"""
        pass

    def begin_frame(self):
        """Called before the fighters of a tick are drawn"""
        pass

    @abstractmethod
    def render(self, fighter):
        """
        Draw one fighter.
        Pose data: fighter.x, fighter.y, fighter.facing, fighter.is_attacking.
        """
        pass


class UIAdapter(ABC):
    """Reflects health and the match result"""

    @abstractmethod
    def on_health_changed(self, fighter_id: int, health: int):
        pass

    @abstractmethod
    def on_match_ended(self, winner_id: int):
        pass

    def on_match_restarted(self):
        """Hide the winner banner"""
        pass
