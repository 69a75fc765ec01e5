"""A car interface and a sports car that implements it."""

from __future__ import annotations

from abc import ABC, abstractmethod

_SPEED_STEP = 20


class Car(ABC):
    """What a driver can do with a car, without saying how it is done."""

    @abstractmethod
    def start_engine(self) -> str:
        """Start the engine."""

    @abstractmethod
    def shift_gear(self, gear: int) -> str:
        """Move into ``gear``."""

    @abstractmethod
    def accelerate(self) -> str:
        """Speed up."""

    @abstractmethod
    def brake(self) -> str:
        """Slow down."""

    @abstractmethod
    def stop_engine(self) -> str:
        """Turn the engine off."""


class SportsCar(Car):
    """A sports car; each action prints and returns what happened."""

    def __init__(self, brand: str, model: str) -> None:
        self.brand = brand
        self.model = model
        self.is_engine_on = False
        self.current_gear = 0
        self.tyre_company = "MRF"
        self._speed = 0

    @property
    def speed(self) -> int:
        """Current speed in km/h."""
        return self._speed

    def _say(self, text: str) -> str:
        line = f"{self.brand} {self.model} : {text}"
        print(line)
        return line

    def _require_engine(self, action: str) -> None:
        if not self.is_engine_on:
            raise RuntimeError(f"{self.brand} {self.model} : Engine is off! Cannot {action}.")

    def start_engine(self) -> str:
        self.is_engine_on = True
        return self._say("Engine starts with a roar!")

    def shift_gear(self, gear: int) -> str:
        self._require_engine("Shift Gear")
        self.current_gear = gear
        return self._say(f"Shifted to gear {gear}")

    def accelerate(self) -> str:
        self._require_engine("accelerate")
        self._speed += _SPEED_STEP
        return self._say(f"Accelerating to {self._speed} km/h")

    def brake(self) -> str:
        self._speed = max(0, self._speed - _SPEED_STEP)
        return self._say(f"Braking! Speed is now {self._speed} km/h")

    def stop_engine(self) -> str:
        self.is_engine_on = False
        self.current_gear = 0
        self._speed = 0
        return self._say("Engine turned off.")