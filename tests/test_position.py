import pytest

from advent2024.position import (
    DIRECTIONS,
    Dimensions,
    Direction,
    Position,
    PositionOffset,
    RotationalDirection,
)

DIMS = Dimensions(5, 7)
CW = RotationalDirection.CLOCKWISE
ACW = RotationalDirection.ANTICLOCKWISE


@pytest.mark.parametrize("direction", list(Direction))
@pytest.mark.parametrize("rotation", list(RotationalDirection))
def test_four_quarter_turns_return_to_start(direction, rotation):
    turned = direction
    for _ in range(4):
        turned = Direction.rotated(turned, rotation)
    assert turned == direction


@pytest.mark.parametrize(
    "direction, clockwise, anticlockwise",
    [
        (Direction.UP, Direction.RIGHT, Direction.LEFT),
        (Direction.RIGHT, Direction.DOWN, Direction.UP),
        (Direction.DOWN, Direction.LEFT, Direction.RIGHT),
        (Direction.LEFT, Direction.UP, Direction.DOWN),
    ],
)
def test_rotation_round_trip(direction, clockwise, anticlockwise):
    assert Direction.rotated(direction, CW) == clockwise
    assert Direction.rotated(direction, ACW) == anticlockwise
    assert Direction.rotated(clockwise, ACW) == direction
    assert Direction.rotated(anticlockwise, CW) == direction


@pytest.mark.parametrize("direction", list(Direction))
def test_inverted_is_half_turn(direction):
    half_turn = Direction.rotated(Direction.rotated(direction, CW), CW)
    assert Direction.inverted(direction) == half_turn
    assert Direction.inverted(Direction.inverted(direction)) == direction


@pytest.mark.parametrize("direction", list(Direction))
@pytest.mark.parametrize("rotation", list(RotationalDirection))
def test_offset_rotation_matches_direction_rotation(direction, rotation):
    rotated_offset = PositionOffset.rotated(Direction.offset(direction), rotation)
    assert rotated_offset == Direction.offset(Direction.rotated(direction, rotation))


@pytest.mark.parametrize("direction", list(Direction))
def test_inverted_offset_matches_inverted_direction(direction):
    inverted_direction_offset = Direction.offset(Direction.inverted(direction))
    assert PositionOffset.inverted(Direction.offset(direction)) == inverted_direction_offset
    assert -Direction.offset(direction) == inverted_direction_offset


def test_up_offset():
    assert Direction.UP.offset() == PositionOffset(-1, 0)


def test_directions_cover_every_direction():
    assert set(DIRECTIONS) == set(Direction)
    assert len(DIRECTIONS) == len(set(DIRECTIONS))
    assert {Direction.offset(d) for d in DIRECTIONS} == {
        PositionOffset(-1, 0),
        PositionOffset(1, 0),
        PositionOffset(0, -1),
        PositionOffset(0, 1),
    }


@pytest.mark.parametrize("direction", list(Direction))
def test_moved_round_trip(direction):
    pos = Position(2, 3)
    assert pos.moved(direction).moved(direction.inverted()) == pos
    assert pos.manhattan_distance(pos.moved(direction)) == 1


@pytest.mark.parametrize(
    "pos, direction",
    [
        (Position(0, 3), Direction.UP),
        (Position(4, 3), Direction.DOWN),
        (Position(2, 0), Direction.LEFT),
        (Position(2, 6), Direction.RIGHT),
    ],
)
def test_checked_moved_off_edge_is_none(pos, direction):
    assert pos.checked_moved(DIMS, direction) is None


@pytest.mark.parametrize("direction", list(Direction))
def test_checked_moved_inside_matches_moved(direction):
    pos = Position(2, 3)
    assert pos.checked_moved(DIMS, direction) == pos.moved(direction)


def test_moved_can_leave_grid():
    assert Position(0, 0).moved(Direction.UP).y < 0


@pytest.mark.parametrize("offset", [(1, 1), (-3, 4), (12, -20), (0, -1)])
def test_wrapping_offset_stays_in_bounds(offset):
    result = Position(2, 3).wrapping_offset(DIMS, PositionOffset(*offset))
    assert 0 <= result.y < DIMS.height
    assert 0 <= result.x < DIMS.width


def test_wrapping_offset_by_whole_dimensions_is_identity():
    pos = Position(2, 3)
    offset = PositionOffset(DIMS.height * 3, -DIMS.width * 2)
    assert pos.wrapping_offset(DIMS, offset) == pos


def test_wrapping_offset_matches_checked_offset_inside():
    pos = Position(1, 1)
    offset = PositionOffset(2, 3)
    assert pos.wrapping_offset(DIMS, offset) == pos.checked_offset(DIMS, offset)


@pytest.mark.parametrize("direction", list(Direction))
def test_positions_walk_to_edge(direction):
    pos = Position(2, 3)
    walked = list(pos.positions(DIMS, direction))
    assert walked
    assert walked[-1].checked_moved(DIMS, direction) is None
    for previous, current in zip([pos] + walked, walked):
        assert current - previous == direction.offset()
    assert all(p.checked_offset(DIMS, PositionOffset(0, 0)) == p for p in walked)


def test_positions_from_edge_is_empty():
    assert list(Position(0, 3).positions(DIMS, Direction.UP)) == []


def test_positions_steps_zero_offset_raises():
    with pytest.raises(ValueError):
        Position(1, 1).positions_steps(DIMS, PositionOffset(0, 0))


@pytest.mark.parametrize("offset", [(1, 2), (-1, 1), (0, -1), (2, 0), (-2, -3)])
def test_positions_steps_stay_in_bounds(offset):
    start = Position(2, 3)
    step = PositionOffset(*offset)
    visited = list(start.positions_steps(DIMS, step))
    for i, pos in enumerate(visited, 1):
        assert pos == start + step * i
        assert pos.checked_offset(DIMS, PositionOffset(0, 0)) == pos
    last = visited[-1] if visited else start
    assert last.checked_offset(DIMS, step) is None


def test_add_sub_round_trip():
    a = Position(4, 1)
    b = Position(1, 5)
    assert b + (a - b) == a
    assert a - b == -(b - a)


def test_add_below_zero_raises():
    with pytest.raises(ValueError):
        Position(0, 0) + PositionOffset(-1, 0)


def test_manhattan_distance_symmetric():
    a = Position(4, 1)
    b = Position(1, 5)
    diff = a - b
    assert a.manhattan_distance(b) == abs(diff.y) + abs(diff.x)
    assert a.manhattan_distance(b) == b.manhattan_distance(a)
    assert a.manhattan_distance(a) == 0


def test_offset_arithmetic():
    offset = PositionOffset(3, -6)
    assert (offset * 4) // 4 == offset
    assert 2 * offset == offset * 2
    assert -(-offset) == offset
    assert offset // 3 == PositionOffset(1, -2)


def test_offset_division_truncates_towards_zero():
    assert PositionOffset(-3, 3) // 2 == PositionOffset(-1, 1)


def test_offset_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        PositionOffset(1, 1) // 0


@pytest.mark.parametrize("rotation", list(RotationalDirection))
def test_offset_four_rotations_identity(rotation):
    offset = PositionOffset(2, -5)
    turned = offset
    for _ in range(4):
        turned = turned.rotated(rotation)
    assert turned == offset
    assert offset.rotated(rotation).rotated(rotation) == offset.inverted()