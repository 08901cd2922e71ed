from stick_brawlers.config import Facing, HIT_DAMAGE
from stick_brawlers.combat.engine import CombatEngine, HitEvent
from tests.fakes import make_fighter


def close_pair():
    """Fighter 1 faces fighter 2 at contact range; fighter 2 faces away"""
    return make_fighter(1, x=100, y=200), make_fighter(2, x=130, y=200)


def test_no_events_without_attacks():
    engine = CombatEngine()
    f1, f2 = close_pair()
    assert engine.resolve((f1, f2)) == []
    assert f1.health == f2.health == 100


def test_hit_applies_damage_and_records_event():
    engine = CombatEngine()
    f1, f2 = close_pair()
    f1.attack()

    events = engine.resolve((f1, f2))

    assert events == [HitEvent(attacker_id=1, defender_id=2, damage=HIT_DAMAGE,
                               defender_health=95, tick=1)]
    assert f2.health == 95
    assert f1.health == 100
    assert engine.state.last_attacker == 1


def test_miss_when_out_of_reach():
    engine = CombatEngine()
    f1 = make_fighter(1, x=100, y=200)
    f2 = make_fighter(2, x=400, y=200)
    f1.attack()
    assert engine.resolve((f1, f2)) == []
    assert f2.health == 100


def test_miss_when_facing_away():
    engine = CombatEngine()
    f1 = make_fighter(1, x=100, y=200, facing=Facing.LEFT)
    f2 = make_fighter(2, x=130, y=200)
    f1.attack()
    assert engine.resolve((f1, f2)) == []


def test_held_overlap_hits_every_resolve():
    engine = CombatEngine()
    f1, f2 = close_pair()
    f1.attack()
    for _ in range(3):
        engine.resolve((f1, f2))
    assert f2.health == 100 - 3 * HIT_DAMAGE


def test_one_hit_per_swing_guard():
    engine = CombatEngine(one_hit_per_swing=True)
    f1, f2 = close_pair()
    f1.attack()
    for _ in range(3):
        engine.resolve((f1, f2))
    assert f2.health == 100 - HIT_DAMAGE
    assert f1.swing_landed


def test_trade_hits_both_in_fighter_order():
    engine = CombatEngine()
    f1 = make_fighter(1, x=100, y=200)
    f2 = make_fighter(2, x=130, y=200, facing=Facing.LEFT)
    f1.attack()
    f2.attack()

    events = engine.resolve((f1, f2))

    assert [e.attacker_id for e in events] == [1, 2]
    assert f1.health == f2.health == 95


def test_stats_and_reset():
    engine = CombatEngine()
    f1 = make_fighter(1, x=100, y=200)
    f2 = make_fighter(2, x=130, y=200, facing=Facing.LEFT)
    f1.attack()
    engine.resolve((f1, f2))
    engine.resolve((f1, f2))
    f2.attack()
    engine.resolve((f1, f2))

    stats = engine.get_stats()
    assert stats['total_hits'] == 4
    assert stats['hits'] == {1: 3, 2: 1}
    assert stats['damage'] == {1: 15, 2: 5}
    assert stats['ticks'] == 3

    engine.reset()
    assert engine.get_stats()['total_hits'] == 0
    assert engine.state.last_attacker is None
