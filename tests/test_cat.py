from mobagen.catchthecat.cat import Cat
from mobagen.catchthecat.hexgrid import is_neighbor, neighbors
from mobagen.point2d import Point2D


class FakeWorld:
    def __init__(self, side_size, cat_position, blocked=()):
        self.side_size = side_size
        self.cat_position = cat_position
        self.blocked = set(blocked)

    def get_content(self, p):
        return p in self.blocked

    def is_valid_position(self, p):
        half = self.side_size // 2
        return -half <= p.x <= half and -half <= p.y <= half

    def cat_can_move_to_position(self, p):
        return is_neighbor(self.cat_position, p) and not self.get_content(p)

    def cat_wins_on_space(self, p):
        half = self.side_size // 2
        return abs(p.x) == half or abs(p.y) == half


def test_cat_takes_winning_neighbor():
    world = FakeWorld(7, Point2D(2, 0))
    move = Cat().move(world)
    assert move == Point2D(3, 0)
    assert world.cat_wins_on_space(move)


def test_all_paths_stops_at_winning_neighbor():
    world = FakeWorld(7, Point2D(2, 0))
    paths = Cat().all_paths(world, Point2D(2, 0))
    assert paths[Point2D(3, 0)] == (0, Point2D(2, 0))
    assert set(paths) == {Point2D(), Point2D(3, 0)}


def test_cat_escapes_open_board():
    world = FakeWorld(7, Point2D(0, 0))
    cat = Cat()
    for _ in range(10):
        move = cat.move(world)
        assert world.cat_can_move_to_position(move)
        world.cat_position = move
        if world.cat_wins_on_space(move):
            break
    assert world.cat_wins_on_space(world.cat_position)


def test_cat_falls_back_to_only_free_move():
    blocked = {
        Point2D(0, -1), Point2D(-1, -1), Point2D(-1, 0), Point2D(-1, 1), Point2D(0, 1),
        Point2D(1, -1), Point2D(2, 0), Point2D(1, 1),
    }
    world = FakeWorld(7, Point2D(0, 0), blocked)
    cat = Cat()
    paths = cat.all_paths(world, Point2D(0, 0))
    assert not any(world.cat_wins_on_space(p) for p in paths)
    assert cat.move(world) == Point2D(1, 0)


def test_trapped_cat_returns_a_neighbor():
    world = FakeWorld(7, Point2D(0, 0), neighbors(Point2D(0, 0)))
    move = Cat().move(world)
    assert move in neighbors(Point2D(0, 0))


def test_neighbors_partition():
    p = Point2D(3, 1)
    world = FakeWorld(7, Point2D(0, 0), {Point2D(2, 1), Point2D(3, 0)})
    cat = Cat()
    free = cat.visitable_neighbors(world, p)
    taken = cat.unvisitable_neighbors(world, p)
    assert set(taken) == {Point2D(2, 1), Point2D(3, 0)}
    assert not set(free) & set(taken)
    valid = {n for n in neighbors(p) if world.is_valid_position(n)}
    assert set(free) | set(taken) == valid


def test_paths_record_neighboring_parents():
    world = FakeWorld(7, Point2D(0, 0), {Point2D(1, 0)})
    paths = Cat().all_paths(world, Point2D(0, 0))
    for tile, (cost, parent) in paths.items():
        if tile == Point2D(0, 0):
            continue
        assert is_neighbor(tile, parent)
        assert cost >= 1
        assert not world.get_content(tile)