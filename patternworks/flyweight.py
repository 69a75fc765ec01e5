"""Asteroid field rendering with and without shared flyweight objects."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

INT_SIZE = 4
STRING_SIZE = 32
POINTER_SIZE = 8
STRING_DATA_ESTIMATE = 32

# (size, color, texture, material) for each asteroid type.
_ASTEROID_TYPES: Tuple[Tuple[int, str, str, str], ...] = (
    (25, "Red", "Rocky", "Iron"),
    (35, "Blue", "Metallic", "Stone"),
    (45, "Gray", "Icy", "Ice"),
)

_RENDER_LIMIT = 5


def _render_line(
    color: str,
    texture: str,
    material: str,
    length: int,
    width: int,
    pos_x: int,
    pos_y: int,
    velocity_x: int,
    velocity_y: int,
) -> str:
    return (
        f"Rendering {color}, {texture}, {material} asteroid at ({pos_x},{pos_y}) "
        f"Size: {length}x{width} Velocity: ({velocity_x}, {velocity_y})"
    )


@dataclass(frozen=True)
class AsteroidFlyweight:
    """Intrinsic asteroid state shared by every asteroid of one type."""

    length: int
    width: int
    weight: int
    color: str
    texture: str
    material: str

    def render(self, pos_x: int, pos_y: int, velocity_x: int, velocity_y: int) -> str:
        """Print and return the render line for an asteroid at the given place."""
        line = _render_line(
            self.color, self.texture, self.material, self.length, self.width,
            pos_x, pos_y, velocity_x, velocity_y,
        )
        print(line)
        return line

    @staticmethod
    def memory_usage() -> int:
        """Approximate bytes held by one flyweight."""
        return INT_SIZE * 3 + STRING_SIZE * 3 + STRING_DATA_ESTIMATE * 3


class AsteroidFactory:
    """Hands out one shared flyweight per distinct set of intrinsic properties."""

    def __init__(self) -> None:
        self._flyweights: Dict[Tuple[int, int, int, str, str, str], AsteroidFlyweight] = {}

    def get_asteroid(
        self, length: int, width: int, weight: int, color: str, texture: str, material: str
    ) -> AsteroidFlyweight:
        key = (length, width, weight, color, texture, material)
        flyweight = self._flyweights.get(key)
        if flyweight is None:
            flyweight = AsteroidFlyweight(*key)
            self._flyweights[key] = flyweight
        return flyweight

    def flyweight_count(self) -> int:
        return len(self._flyweights)

    def total_flyweight_memory(self) -> int:
        return self.flyweight_count() * AsteroidFlyweight.memory_usage()

    def cleanup(self) -> None:
        self._flyweights.clear()


@dataclass
class AsteroidContext:
    """Extrinsic asteroid state: position and velocity plus a shared flyweight."""

    flyweight: AsteroidFlyweight
    pos_x: int
    pos_y: int
    velocity_x: int
    velocity_y: int

    def render(self) -> str:
        return self.flyweight.render(self.pos_x, self.pos_y, self.velocity_x, self.velocity_y)

    @staticmethod
    def memory_usage() -> int:
        """Approximate bytes held by one context."""
        return POINTER_SIZE + INT_SIZE * 4


def _spawn_parameters(count: int):
    for i in range(count):
        size, color, texture, material = _ASTEROID_TYPES[i % len(_ASTEROID_TYPES)]
        yield size, color, texture, material, 100 + i * 50, 200 + i * 30


class SpaceGameWithFlyweight:
    """A game whose asteroids share their intrinsic state."""

    def __init__(self, factory: Optional[AsteroidFactory] = None) -> None:
        self.factory = factory if factory is not None else AsteroidFactory()
        self.asteroids: List[AsteroidContext] = []

    def spawn_asteroids(self, count: int) -> None:
        print(f"\n=== Spawning {count} asteroids ===")
        for size, color, texture, material, x, y in _spawn_parameters(count):
            flyweight = self.factory.get_asteroid(size, size, size * 10, color, texture, material)
            self.asteroids.append(AsteroidContext(flyweight, x, y, 1, 2))
        print(f"Created {len(self.asteroids)} asteroid contexts")
        print(f"Total flyweight objects: {self.factory.flyweight_count()}")

    def render_all(self) -> List[str]:
        """Render the first few asteroids and return their lines."""
        print(f"\n--- Rendering first {_RENDER_LIMIT} asteroids ---")
        return [asteroid.render() for asteroid in self.asteroids[:_RENDER_LIMIT]]

    def calculate_memory_usage(self) -> int:
        context_memory = len(self.asteroids) * AsteroidContext.memory_usage()
        return context_memory + self.factory.total_flyweight_memory()

    def asteroid_count(self) -> int:
        return len(self.asteroids)


@dataclass
class Asteroid:
    """An asteroid that carries its full intrinsic and extrinsic state."""

    length: int
    width: int
    weight: int
    color: str
    texture: str
    material: str
    pos_x: int
    pos_y: int
    velocity_x: int
    velocity_y: int

    def render(self) -> str:
        line = _render_line(
            self.color, self.texture, self.material, self.length, self.width,
            self.pos_x, self.pos_y, self.velocity_x, self.velocity_y,
        )
        print(line)
        return line

    @staticmethod
    def memory_usage() -> int:
        """Approximate bytes held by one asteroid."""
        return INT_SIZE * 7 + STRING_SIZE * 3 + STRING_DATA_ESTIMATE * 3


class SpaceGame:
    """A game in which every asteroid duplicates its intrinsic state."""

    def __init__(self) -> None:
        self.asteroids: List[Asteroid] = []

    def spawn_asteroids(self, count: int) -> None:
        print(f"\n=== Spawning {count} asteroids ===")
        for size, color, texture, material, x, y in _spawn_parameters(count):
            self.asteroids.append(
                Asteroid(size, size, size * 10, color, texture, material, x, y, 1, 2)
            )
        print(f"Created {len(self.asteroids)} asteroid objects")

    def render_all(self) -> List[str]:
        """Render the first few asteroids and return their lines."""
        print(f"\n--- Rendering first {_RENDER_LIMIT} asteroids ---")
        return [asteroid.render() for asteroid in self.asteroids[:_RENDER_LIMIT]]

    def calculate_memory_usage(self) -> int:
        return len(self.asteroids) * Asteroid.memory_usage()

    def asteroid_count(self) -> int:
        return len(self.asteroids)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Spawn an asteroid field and report its estimated memory use."""
    parser = argparse.ArgumentParser(description="Compare asteroid memory use.")
    parser.add_argument("--count", type=int, default=1_000_000, help="asteroids to spawn")
    parser.add_argument(
        "--plain", action="store_true", help="store full state in every asteroid"
    )
    args = parser.parse_args(argv)

    if args.plain:
        print("\n TESTING WITHOUT FLYWEIGHT PATTERN")
        game = SpaceGame()
        per_asteroid = Asteroid.memory_usage()
    else:
        print("\nTESTING WITH FLYWEIGHT PATTERN")
        game = SpaceGameWithFlyweight()
        per_asteroid = AsteroidContext.memory_usage()

    game.spawn_asteroids(args.count)
    game.render_all()
    total = game.calculate_memory_usage()

    print("\n=== MEMORY USAGE ===")
    print(f"Total asteroids: {args.count}")
    print(f"Memory per asteroid: {per_asteroid} bytes")
    print(f"Total memory used: {total} bytes")
    print(f"Memory in MB: {total / (1024.0 * 1024.0):g} MB")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())