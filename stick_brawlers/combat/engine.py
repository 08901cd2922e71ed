"""
Combat Engine
=============
Per-tick hit detection and damage for a two-fighter match.
"""

from typing import Optional, Dict, Any, List, Sequence
from dataclasses import dataclass, field
import logging

from stick_brawlers.config import HIT_DAMAGE, ONE_HIT_PER_SWING
from stick_brawlers.fighters.hitbox import check_collision

logger = logging.getLogger(__name__)


@dataclass
class HitEvent:
    """A hit that landed this tick"""
    attacker_id: int
    defender_id: int
    damage: int
    defender_health: int
    tick: int = 0


@dataclass
class CombatState:
    """Running log of the current match"""
    hit_events: List[HitEvent] = field(default_factory=list)
    last_attacker: Optional[int] = None
    ticks: int = 0


class CombatEngine:
    """
    Resolves attack hitboxes against the opposing fighter.

    By default every tick an attack overlaps its target deals damage, so one
    swing held in contact lands repeatedly. Set one_hit_per_swing to limit a
    swing to a single hit.
    """

    def __init__(self, damage: int = HIT_DAMAGE,
                 one_hit_per_swing: bool = ONE_HIT_PER_SWING):
        self.damage = damage
        self.one_hit_per_swing = one_hit_per_swing
        self.state = CombatState()

    def reset(self):
        """Reset for a new match"""
        self.state = CombatState()

    def resolve(self, fighters: Sequence) -> List[HitEvent]:
        """
        Check both fighters' attacks, fighter 1 first.
        Each attacker lands at most one hit per tick.
        """
        self.state.ticks += 1
        fighter1, fighter2 = fighters[0], fighters[1]

        events = []
        for attacker, defender in ((fighter1, fighter2), (fighter2, fighter1)):
            event = self._process_attack(attacker, defender)
            if event:
                events.append(event)
        return events

    def _process_attack(self, attacker, defender) -> Optional[HitEvent]:
        if not attacker.is_attacking:
            return None

        if self.one_hit_per_swing and attacker.swing_landed:
            return None

        attack_box = attacker.get_attack_hitbox()
        if attack_box is None or not check_collision(attack_box, defender):
            return None

        defender.take_damage(self.damage)
        attacker.swing_landed = True

        event = HitEvent(
            attacker_id=attacker.fighter_id,
            defender_id=defender.fighter_id,
            damage=self.damage,
            defender_health=defender.health,
            tick=self.state.ticks
        )
        self.state.hit_events.append(event)
        self.state.last_attacker = attacker.fighter_id

        logger.debug("%s hits %s for %d (health %d)",
                     attacker.name, defender.name, self.damage, defender.health)
        return event

    def get_stats(self) -> Dict[str, Any]:
        """Hit and damage totals per attacker"""
        hits: Dict[int, int] = {}
        damage: Dict[int, int] = {}
        for event in self.state.hit_events:
            hits[event.attacker_id] = hits.get(event.attacker_id, 0) + 1
            damage[event.attacker_id] = damage.get(event.attacker_id, 0) + event.damage

        return {
            'total_hits': len(self.state.hit_events),
            'hits': hits,
            'damage': damage,
            'last_attacker': self.state.last_attacker,
            'ticks': self.state.ticks
        }
