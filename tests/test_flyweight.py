import pytest

from patternworks.flyweight import (
    Asteroid,
    AsteroidContext,
    AsteroidFactory,
    AsteroidFlyweight,
    SpaceGame,
    SpaceGameWithFlyweight,
    main,
)


def test_factory_shares_identical_flyweights():
    factory = AsteroidFactory()
    a = factory.get_asteroid(25, 25, 250, "Red", "Rocky", "Iron")
    b = factory.get_asteroid(25, 25, 250, "Red", "Rocky", "Iron")
    assert a is b
    assert factory.flyweight_count() == 1


def test_factory_distinguishes_properties():
    factory = AsteroidFactory()
    a = factory.get_asteroid(25, 25, 250, "Red", "Rocky", "Iron")
    b = factory.get_asteroid(25, 25, 250, "Blue", "Rocky", "Iron")
    assert a is not b
    assert factory.flyweight_count() == 2
    assert factory.total_flyweight_memory() == 2 * AsteroidFlyweight.memory_usage()


def test_factory_cleanup_empties_cache():
    factory = AsteroidFactory()
    factory.get_asteroid(1, 1, 10, "c", "t", "m")
    factory.cleanup()
    assert factory.flyweight_count() == 0
    assert factory.total_flyweight_memory() == 0


def test_spawn_creates_contexts_and_three_flyweights(capsys):
    game = SpaceGameWithFlyweight()
    game.spawn_asteroids(10)
    assert game.asteroid_count() == 10
    assert game.factory.flyweight_count() == 3
    out = capsys.readouterr().out
    assert "Created 10 asteroid contexts" in out


def test_fewer_asteroids_than_types_makes_fewer_flyweights():
    game = SpaceGameWithFlyweight()
    game.spawn_asteroids(2)
    assert game.factory.flyweight_count() == game.asteroid_count()


def test_flyweight_memory_is_contexts_plus_shared_state():
    game = SpaceGameWithFlyweight()
    game.spawn_asteroids(30)
    expected = 30 * AsteroidContext.memory_usage() + game.factory.total_flyweight_memory()
    assert game.calculate_memory_usage() == expected


def test_plain_memory_is_per_asteroid():
    game = SpaceGame()
    game.spawn_asteroids(12)
    assert game.asteroid_count() == 12
    assert game.calculate_memory_usage() == 12 * Asteroid.memory_usage()


def test_flyweight_uses_less_memory_for_many_asteroids():
    shared = SpaceGameWithFlyweight()
    plain = SpaceGame()
    shared.spawn_asteroids(100)
    plain.spawn_asteroids(100)
    assert shared.calculate_memory_usage() < plain.calculate_memory_usage()


def test_first_render_line_is_fixed(capsys):
    game = SpaceGameWithFlyweight()
    game.spawn_asteroids(1)
    lines = game.render_all()
    assert lines == ["Rendering Red, Rocky, Iron asteroid at (100,200) Size: 25x25 Velocity: (1, 2)"]
    assert lines[0] in capsys.readouterr().out


@pytest.mark.parametrize("count", [0, 3, 5, 8])
def test_render_all_limits_and_matches_plain(count):
    shared = SpaceGameWithFlyweight()
    plain = SpaceGame()
    shared.spawn_asteroids(count)
    plain.spawn_asteroids(count)
    shared_lines = shared.render_all()
    assert len(shared_lines) == min(5, count)
    assert shared_lines == plain.render_all()


def test_context_render_delegates_to_flyweight():
    flyweight = AsteroidFlyweight(10, 20, 30, "Gray", "Icy", "Ice")
    context = AsteroidContext(flyweight, 7, 8, 1, 2)
    assert context.render() == flyweight.render(7, 8, 1, 2)


def test_plain_asteroid_costs_more_than_context():
    assert Asteroid.memory_usage() > AsteroidContext.memory_usage()


@pytest.mark.parametrize("flags", [[], ["--plain"]])
def test_main_reports_memory(capsys, flags):
    assert main(["--count", "7", *flags]) == 0
    out = capsys.readouterr().out
    assert "Total asteroids: 7" in out
    assert "=== MEMORY USAGE ===" in out