import pygame

from stick_brawlers.config import ARENA_BG, GROUND_COLOR, GROUND_HEIGHT
from stick_brawlers.core.adapters import RenderAdapter
from stick_brawlers.graphics.renderer import Renderer
from tests.fakes import make_fighter


def pixel(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def test_set_arena_resizes_surface():
    renderer = Renderer()
    renderer.set_arena(320, 240)
    assert renderer.surface.get_size() == (320, 240)
    assert renderer.get_size() == (320, 240)


def test_begin_frame_draws_ground():
    renderer = Renderer()
    renderer.set_arena(320, 240)
    renderer.begin_frame()
    assert pixel(renderer.surface, (10, 240 - 1)) == GROUND_COLOR
    assert pixel(renderer.surface, (10, 240 - GROUND_HEIGHT)) == GROUND_COLOR
    assert pixel(renderer.surface, (10, 240 - GROUND_HEIGHT - 1)) == ARENA_BG


def test_render_draws_stick_figure_body():
    renderer = Renderer()
    fighter = make_fighter(x=100, y=100)
    fighter.color = (10, 200, 30)
    renderer.begin_frame()
    renderer.render(fighter)

    cx = fighter.x + fighter.width // 2
    assert pixel(renderer.surface, (cx, fighter.y + 25)) == fighter.color
    assert pixel(renderer.surface, (cx, fighter.y + 45)) == fighter.color


def test_attacking_arms_shift_toward_facing():
    renderer = Renderer()
    fighter = make_fighter(x=100, y=100)
    fighter.color = (10, 200, 30)
    cx = fighter.x + fighter.width // 2

    # right arm runs from (cx, y+30) to (cx+30, y+35) only while attacking
    renderer.begin_frame()
    renderer.render(fighter)
    assert pixel(renderer.surface, (cx + 24, fighter.y + 34)) == ARENA_BG

    fighter.attack()
    renderer.begin_frame()
    renderer.render(fighter)
    assert pixel(renderer.surface, (cx + 24, fighter.y + 34)) == fighter.color


def test_debug_hitboxes_draw_attack_box():
    renderer = Renderer(debug_hitboxes=True)
    fighter = make_fighter(x=100, y=100)
    fighter.attack()
    renderer.begin_frame()
    renderer.render(fighter)
    box = fighter.get_attack_hitbox()
    assert pixel(renderer.surface, (int(box.right) - 1, int(box.y) + 10)) == (255, 0, 0)


def test_renderer_is_a_render_adapter():
    assert isinstance(Renderer(), RenderAdapter)
    assert isinstance(Renderer().surface, pygame.Surface)
