import math

import pytest

from mobagen.catchthecat.hexgrid import neighbors
from mobagen.catchthecat.world import World
from mobagen.point2d import Point2D


def _index(side, p):
    half = side // 2
    return (p.y + half) * side + p.x + half


def _state_with_blocks(side, blocked):
    cells = [False] * (side * side)
    for p in blocked:
        cells[_index(side, p)] = True
    return cells


def test_get_content_reads_state():
    state = _state_with_blocks(5, [Point2D(1, -2)])
    world = World(5, True, Point2D(0, 0), state)
    assert world.get_content(Point2D(1, -2)) is True
    assert world.get_content(Point2D(-1, 2)) is False


def test_get_content_outside_raises():
    world = World(5)
    with pytest.raises(IndexError):
        world.get_content(Point2D(3, 0))


def test_wrong_state_length_rejected():
    with pytest.raises(ValueError):
        World(5, True, Point2D(0, 0), [False] * 24)


def test_is_valid_position():
    world = World(5)
    assert world.is_valid_position(Point2D(-2, 2))
    assert not world.is_valid_position(Point2D(0, -3))


def test_cat_wins_on_space_only_on_border():
    world = World(5)
    assert world.cat_wins_on_space(Point2D(2, 0))
    assert world.cat_wins_on_space(Point2D(0, -2))
    assert not world.cat_wins_on_space(Point2D(1, 1))


def test_cat_can_move_only_to_free_neighbors():
    state = _state_with_blocks(5, [Point2D(1, 0)])
    world = World(5, True, Point2D(0, 0), state)
    assert world.cat_can_move_to_position(Point2D(-1, 0))
    assert not world.cat_can_move_to_position(Point2D(1, 0))
    assert not world.cat_can_move_to_position(Point2D(2, 0))


def test_catcher_can_move_anywhere_but_cat():
    world = World(5, False, Point2D(1, 1))
    assert not world.catcher_can_move_to_position(Point2D(1, 1))
    assert world.catcher_can_move_to_position(Point2D(-2, 2))
    assert not world.catcher_can_move_to_position(Point2D(3, 0))


def test_random_world_invariants():
    world = World.random(11)
    assert world.side_size == 11
    assert world.cat_position == Point2D(0, 0)
    assert world.get_content(Point2D(0, 0)) is False
    assert 0 <= sum(world.state) <= math.ceil(121 * 0.05)
    assert world.cat_turn is True
    assert not world.cat_won and not world.catcher_won


def test_random_world_rejects_even_side():
    with pytest.raises(ValueError):
        World.random(10)


def test_cat_steps_onto_winning_border():
    world = World(5, True, Point2D(1, 0))
    world.step()
    assert world.cat_position == Point2D(2, 0)
    assert world.cat_won is True
    assert world.cat_turn is False


def test_step_after_win_starts_new_round():
    world = World(5, True, Point2D(1, 0))
    world.step()
    world.step()
    assert world.cat_won is False
    assert world.cat_position == Point2D(0, 0)
    assert world.cat_turn is True


def test_cat_step_moves_to_neighbor():
    world = World(7, True, Point2D(0, 0))
    world.step()
    assert world.cat_position in neighbors(Point2D(0, 0))
    assert world.catcher_won is False


def test_surrounded_cat_loses():
    state = _state_with_blocks(5, neighbors(Point2D(0, 0)))
    world = World(5, True, Point2D(0, 0), state)
    world.is_simulating = True
    world.step()
    assert world.catcher_won is True
    assert world.is_simulating is False
    assert world.cat_position == Point2D(0, 0)


def test_catcher_step_blocks_one_cell():
    world = World(7, False, Point2D(0, 0))
    world.step()
    assert sum(world.state) == 1
    assert world.get_content(Point2D(0, 0)) is False
    assert world.cat_turn is True


def test_update_waits_until_timer_expires():
    world = World(5, True, Point2D(1, 0))
    world.is_simulating = True
    world.update(0.5)
    assert world.time_for_next_tick == pytest.approx(0.5)
    assert world.cat_position == Point2D(1, 0)
    world.update(0.6)
    assert world.cat_position == Point2D(2, 0)
    assert world.time_for_next_tick == world.time_between_ai_ticks


def test_update_does_nothing_when_paused():
    world = World(5, True, Point2D(1, 0))
    world.update(5.0)
    assert world.cat_position == Point2D(1, 0)
    assert world.time_for_next_tick == 1.0


def test_render_marks_cat_and_blocks():
    state = _state_with_blocks(3, [Point2D(-1, -1)])
    world = World(3, True, Point2D(0, 0), state)
    text = world.render()
    assert text.count("C") == 1
    assert text.count("#") == 1
    assert text.count(".") == 7
    lines = text.split("\n")
    assert lines[0].startswith("#")
    assert lines[1].startswith(" ")
    assert str(world) == text