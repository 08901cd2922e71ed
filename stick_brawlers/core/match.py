"""
Match Loop
==========
Advances two fighters one tick at a time, resolves hits, detects the winner
and handles restart. The host decides when to call tick(); nothing here
schedules itself.
"""

from typing import Optional, Tuple
import logging

from stick_brawlers.config import (
    MatchState, Facing,
    ARENA_WIDTH, ARENA_HEIGHT, ONE_HIT_PER_SWING,
    PLAYER1_NAME, PLAYER2_NAME, PLAYER1_START, PLAYER2_START,
    PLAYER1_COLOR, PLAYER2_COLOR, PLAYER1_CONTROLS, PLAYER2_CONTROLS
)
from stick_brawlers.combat.engine import CombatEngine
from stick_brawlers.core.input_handler import InputState
from stick_brawlers.core.state_machine import StateMachine
from stick_brawlers.fighters.fighter import Fighter, ControlScheme

logger = logging.getLogger(__name__)


def build_fighters(arena_width: int = ARENA_WIDTH,
                   arena_height: int = ARENA_HEIGHT) -> Tuple[Fighter, Fighter]:
    """The two standard fighters with their fixed key bindings"""
    fighter1 = Fighter(
        name=PLAYER1_NAME,
        fighter_id=1,
        x=PLAYER1_START[0], y=PLAYER1_START[1],
        color=PLAYER1_COLOR,
        controls=ControlScheme.from_mapping(PLAYER1_CONTROLS),
        arena_width=arena_width,
        arena_height=arena_height,
        facing=Facing.RIGHT
    )
    fighter2 = Fighter(
        name=PLAYER2_NAME,
        fighter_id=2,
        x=PLAYER2_START[0], y=PLAYER2_START[1],
        color=PLAYER2_COLOR,
        controls=ControlScheme.from_mapping(PLAYER2_CONTROLS),
        arena_width=arena_width,
        arena_height=arena_height,
        facing=Facing.RIGHT
    )
    return fighter1, fighter2


class Match:
    """
    One match between exactly two fighters.
    Owns the fighters, the input state and the combat engine.
    """

    def __init__(self, fighter1: Fighter, fighter2: Fighter,
                 arena_width: int = ARENA_WIDTH,
                 arena_height: int = ARENA_HEIGHT,
                 render=None, ui=None, sound=None,
                 one_hit_per_swing: bool = ONE_HIT_PER_SWING):
        if fighter1.fighter_id == fighter2.fighter_id:
            raise ValueError(f"fighters share id {fighter1.fighter_id}")
        shared = set(fighter1.controls.keys()) & set(fighter2.controls.keys())
        if shared:
            raise ValueError(f"fighters share key bindings: {sorted(shared)}")

        self.fighter1 = fighter1
        self.fighter2 = fighter2
        self.arena_width = arena_width
        self.arena_height = arena_height

        # Collaborators (all optional)
        self.render_adapter = render
        self.ui = ui
        self.sound = sound

        self.input_state = InputState()
        self.combat_engine = CombatEngine(one_hit_per_swing=one_hit_per_swing)
        self.tick_count = 0

        self.state_machine = StateMachine(MatchState.ACTIVE)
        self.state_machine.register_handlers(
            MatchState.ENDED,
            enter=self._enter_ended
        )
        self.state_machine.register_handlers(
            MatchState.ACTIVE,
            enter=self._enter_active
        )

        for fighter in self.fighters:
            fighter.set_arena(arena_width, arena_height)

        if self.render_adapter:
            self.render_adapter.set_arena(arena_width, arena_height)
        self._push_health()

    @property
    def fighters(self) -> Tuple[Fighter, Fighter]:
        return (self.fighter1, self.fighter2)

    @property
    def state(self) -> MatchState:
        return self.state_machine.current_state

    @property
    def is_active(self) -> bool:
        return self.state_machine.is_state(MatchState.ACTIVE)

    @property
    def winner_id(self) -> Optional[int]:
        return self.state_machine.get_data('winner_id')

    @property
    def winner(self) -> Optional[Fighter]:
        winner_id = self.winner_id
        for fighter in self.fighters:
            if fighter.fighter_id == winner_id:
                return fighter
        return None

    def opponent_of(self, fighter: Fighter) -> Fighter:
        return self.fighter2 if fighter is self.fighter1 else self.fighter1

    # =========================================================================
    # TICK
    # =========================================================================

    def tick(self) -> MatchState:
        """
        Run one simulation step.
        Return the state after the step; ENDED means stop scheduling ticks.
        """
        if not self.is_active:
            logger.debug("tick ignored, match already ended")
            return self.state

        self.tick_count += 1

        # Update fighters (fixed order)
        self.fighter1.update(self.input_state)
        self.fighter2.update(self.input_state)

        # Resolve hits
        for event in self.combat_engine.resolve(self.fighters):
            if self.ui:
                self.ui.on_health_changed(event.defender_id, event.defender_health)
            if self.sound:
                self.sound.play_hit()

        # Draw
        if self.render_adapter:
            self.render_adapter.begin_frame()
            for fighter in self.fighters:
                self.render_adapter.render(fighter)

        self._check_match_end()
        return self.state

    def _check_match_end(self):
        """
        Fighter 1 is checked first, so a double knockout goes to fighter 2.
        """
        if self.fighter1.is_defeated:
            self.state_machine.transition_to(
                MatchState.ENDED, winner_id=self.fighter2.fighter_id)
        elif self.fighter2.is_defeated:
            self.state_machine.transition_to(
                MatchState.ENDED, winner_id=self.fighter1.fighter_id)

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def restart(self) -> bool:
        """
        Start a new match with the same fighters.
        Only allowed once the match has ended; otherwise nothing happens
        and False is returned.
        """
        if self.is_active:
            logger.debug("restart ignored, match still active")
            return False

        return self.state_machine.transition_to(MatchState.ACTIVE)

    def _enter_ended(self):
        winner = self.winner
        logger.info("%s wins after %d ticks", winner.name, self.tick_count)
        if self.ui:
            self.ui.on_match_ended(winner.fighter_id)
        if self.sound:
            self.sound.play_ko()

    def _enter_active(self):
        self.state_machine.clear_data()
        for fighter in self.fighters:
            fighter.reset()
        self.combat_engine.reset()
        self.tick_count = 0

        logger.info("match restarted")
        self._push_health()
        if self.ui:
            self.ui.on_match_restarted()
        if self.sound:
            self.sound.play_restart()

    def _push_health(self):
        if self.ui:
            for fighter in self.fighters:
                self.ui.on_health_changed(fighter.fighter_id, fighter.health)

    # =========================================================================
    # INPUT
    # =========================================================================

    def on_key_down(self, key: int) -> bool:
        """
        Record a key press. The attack key also starts an attack right away.
        Return True if the key is bound to either fighter.
        """
        handled = False
        for fighter in self.fighters:
            controls = fighter.controls
            if key not in controls.keys():
                continue
            handled = True
            self.input_state.press(key)
            if key == controls.attack and self.is_active:
                fighter.attack()
        return handled

    def on_key_up(self, key: int) -> bool:
        """Record a key release"""
        handled = any(key in fighter.controls.keys() for fighter in self.fighters)
        if handled:
            self.input_state.release(key)
        return handled
