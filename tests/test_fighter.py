import random

import pygame
import pytest

from stick_brawlers.config import (
    AttackState, Facing, ARENA_WIDTH, ARENA_HEIGHT,
    ATTACK_COOLDOWN, ATTACK_DURATION, FIGHTER_WIDTH, FIGHTER_HEIGHT
)
from stick_brawlers.core.input_handler import InputState
from stick_brawlers.fighters.hitbox import Hitbox
from tests.fakes import make_fighter


def hold(input_state, *keys):
    for key in keys:
        input_state.press(key)


# ---------------------------------------------------------------------------
# Movement
# ---------------------------------------------------------------------------

def test_right_moves_and_faces_right(fighter, input_state):
    fighter.movement.facing = Facing.LEFT
    hold(input_state, pygame.K_d)
    fighter.update(input_state)
    assert fighter.position == (105, 200)
    assert fighter.facing == Facing.RIGHT


def test_left_moves_and_faces_left(fighter, input_state):
    hold(input_state, pygame.K_a)
    fighter.update(input_state)
    assert fighter.position == (95, 200)
    assert fighter.facing == Facing.LEFT


def test_vertical_movement_keeps_facing(fighter, input_state):
    fighter.movement.facing = Facing.LEFT
    hold(input_state, pygame.K_w)
    fighter.update(input_state)
    assert fighter.position == (100, 195)
    input_state.release(pygame.K_w)
    hold(input_state, pygame.K_s)
    fighter.update(input_state)
    fighter.update(input_state)
    assert fighter.position == (100, 205)
    assert fighter.facing == Facing.LEFT


def test_opposite_keys_cancel(fighter, input_state):
    hold(input_state, pygame.K_a, pygame.K_d, pygame.K_w, pygame.K_s)
    fighter.update(input_state)
    assert fighter.position == (100, 200)
    # right is applied after left
    assert fighter.facing == Facing.RIGHT


def test_facing_persists_without_horizontal_input(fighter, input_state):
    hold(input_state, pygame.K_a)
    fighter.update(input_state)
    input_state.release(pygame.K_a)
    fighter.update(input_state)
    assert fighter.facing == Facing.LEFT


def test_other_players_keys_are_ignored(fighter, input_state):
    hold(input_state, pygame.K_k, pygame.K_SEMICOLON, pygame.K_o)
    fighter.update(input_state)
    assert fighter.position == (100, 200)


def test_clamped_at_top_left(input_state):
    fighter = make_fighter(x=2, y=3)
    hold(input_state, pygame.K_a, pygame.K_w)
    fighter.update(input_state)
    assert fighter.position == (0, 0)


def test_clamped_at_bottom_right(input_state):
    max_x = ARENA_WIDTH - FIGHTER_WIDTH
    max_y = ARENA_HEIGHT - FIGHTER_HEIGHT
    fighter = make_fighter(x=max_x - 1, y=max_y)
    hold(input_state, pygame.K_d, pygame.K_s)
    fighter.update(input_state)
    assert fighter.position == (max_x, max_y)


def test_spawn_outside_arena_is_clamped():
    fighter = make_fighter(x=5000, y=-40)
    assert fighter.position == (ARENA_WIDTH - FIGHTER_WIDTH, 0)


def test_position_stays_in_bounds_under_random_input(fighter):
    rng = random.Random(7)
    keys = [pygame.K_w, pygame.K_a, pygame.K_s, pygame.K_d]
    input_state = InputState()
    for _ in range(2000):
        key = rng.choice(keys)
        if rng.random() < 0.5:
            input_state.press(key)
        else:
            input_state.release(key)
        fighter.update(input_state)
        assert 0 <= fighter.x <= ARENA_WIDTH - FIGHTER_WIDTH
        assert 0 <= fighter.y <= ARENA_HEIGHT - FIGHTER_HEIGHT


def test_idle_update_only_decays_cooldown(fighter, input_state):
    fighter.cooldown_ticks = 3
    before = fighter.get_state_info()
    fighter.update(input_state)
    after = fighter.get_state_info()
    assert after.pop('cooldown_ticks') == 2
    before.pop('cooldown_ticks')
    assert after == before


def test_cooldown_floors_at_zero(fighter, input_state):
    for _ in range(5):
        fighter.update(input_state)
    assert fighter.cooldown_ticks == 0


# ---------------------------------------------------------------------------
# Attack state machine
# ---------------------------------------------------------------------------

def test_attack_starts_when_off_cooldown(fighter):
    assert fighter.attack() is True
    assert fighter.attack_state == AttackState.ATTACKING
    assert fighter.cooldown_ticks == ATTACK_COOLDOWN
    assert fighter.attack_ticks_remaining == ATTACK_DURATION


def test_second_attack_rejected_without_state_change(fighter):
    fighter.attack()
    before = fighter.get_state_info()
    assert fighter.attack() is False
    assert fighter.get_state_info() == before


def test_no_attack_for_29_ticks_after_success(fighter, input_state):
    assert fighter.attack()
    for _ in range(ATTACK_COOLDOWN - 1):
        fighter.update(input_state)
        assert fighter.attack() is False
    fighter.update(input_state)
    assert fighter.attack() is True


def test_attack_window_lasts_until_duration_runs_out(fighter, input_state):
    fighter.attack()
    for _ in range(ATTACK_DURATION - 1):
        fighter.update(input_state)
        assert fighter.is_attacking
    fighter.update(input_state)
    assert not fighter.is_attacking
    assert fighter.attack_state == AttackState.IDLE
    assert fighter.attack_ticks_remaining == ATTACK_DURATION


def test_attack_ticks_remaining_counts_down(fighter, input_state):
    fighter.attack()
    fighter.update(input_state)
    fighter.update(input_state)
    assert fighter.attack_ticks_remaining == ATTACK_DURATION - 2


def test_attacking_implies_ticks_remaining(fighter, input_state):
    for tick in range(200):
        if tick % 7 == 0:
            fighter.attack()
        fighter.update(input_state)
        if fighter.is_attacking:
            assert fighter.attack_ticks_remaining > 0


# ---------------------------------------------------------------------------
# Damage
# ---------------------------------------------------------------------------

def test_take_damage_subtracts(fighter):
    fighter.take_damage(5)
    assert fighter.health == 95


def test_take_damage_floors_at_zero(fighter):
    fighter.health = 3
    fighter.take_damage(5)
    assert fighter.health == 0
    assert fighter.is_defeated


def test_take_damage_rejects_negative(fighter):
    with pytest.raises(ValueError):
        fighter.take_damage(-1)
    assert fighter.health == 100


def test_twenty_hits_of_five_defeat(fighter):
    for _ in range(20):
        fighter.take_damage(5)
    assert fighter.health == 0
    fighter.take_damage(5)
    assert fighter.health == 0


# ---------------------------------------------------------------------------
# Hitbox
# ---------------------------------------------------------------------------

def test_no_hitbox_when_idle(fighter):
    assert fighter.get_attack_hitbox() is None


def test_hitbox_facing_right(fighter):
    fighter.attack()
    assert fighter.get_attack_hitbox() == Hitbox(115, 225, 40, 20)


def test_hitbox_facing_left():
    fighter = make_fighter(facing=Facing.LEFT)
    fighter.attack()
    assert fighter.get_attack_hitbox() == Hitbox(75, 225, 40, 20)


def test_hitbox_follows_movement(fighter, input_state):
    fighter.attack()
    hold(input_state, pygame.K_d, pygame.K_s)
    fighter.update(input_state)
    assert fighter.get_attack_hitbox() == Hitbox(120, 230, 40, 20)

    input_state.release(pygame.K_d)
    hold(input_state, pygame.K_a)
    fighter.update(input_state)
    box = fighter.get_attack_hitbox()
    assert box.x == 115 - 40
    assert fighter.facing == Facing.LEFT


def test_bounding_box(fighter):
    assert fighter.bounding_box() == Hitbox(100, 200, 30, 60)


# ---------------------------------------------------------------------------
# Reset
# ---------------------------------------------------------------------------

def test_reset_restores_mutable_fields(fighter, input_state):
    hold(input_state, pygame.K_a, pygame.K_s)
    fighter.attack()
    for _ in range(4):
        fighter.update(input_state)
    fighter.take_damage(40)

    fighter.reset()

    assert fighter.position == (100, 200)
    assert fighter.facing == Facing.RIGHT
    assert fighter.health == 100
    assert fighter.attack_state == AttackState.IDLE
    assert fighter.cooldown_ticks == 0
    assert fighter.attack_ticks_remaining == ATTACK_DURATION
    assert fighter.name == "Player 1"
    assert fighter.fighter_id == 1
