"""
A comprehensive Liskov Substitution example with vehicles.

Capabilities are split into Movable and EngineOperable so that code written
for any Vehicle never meets an engine it cannot start, and code written for
MotorizedVehicle can rely on one being there.
"""
from abc import ABC, abstractmethod

from ..errors import BatteryDepletedError, EngineNotRunningError


class Movable(ABC):

    @abstractmethod
    def move(self) -> None:
        pass

    @property
    @abstractmethod
    def speed(self) -> int:
        pass


class EngineOperable(ABC):

    @abstractmethod
    def start_engine(self) -> None:
        pass

    @abstractmethod
    def stop_engine(self) -> None:
        pass

    @abstractmethod
    def is_engine_running(self) -> bool:
        pass


class Vehicle(Movable):
    """Base for all vehicles; speed is never negative"""

    def __init__(self):
        self._speed = 0

    @property
    def speed(self) -> int:
        return self._speed

    @speed.setter
    def speed(self, value: int) -> None:
        if value < 0:
            raise ValueError("Speed cannot be negative")
        self._speed = value


class MotorizedVehicle(Vehicle, EngineOperable):

    def __init__(self):
        super().__init__()
        self._engine_running = False

    def start_engine(self) -> None:
        self._engine_running = True

    def stop_engine(self) -> None:
        self._engine_running = False
        self.speed = 0

    def is_engine_running(self) -> bool:
        return self._engine_running

    def move(self) -> None:
        if not self._engine_running:
            raise EngineNotRunningError("Cannot move: Engine is not running")


class Car(MotorizedVehicle):
    def move(self) -> None:
        super().move()
        self.speed = self.speed + 10


class ElectricCar(MotorizedVehicle):
    def __init__(self, battery_level: int = 100):
        super().__init__()
        self.battery_level = battery_level

    def start_engine(self) -> None:
        if self.battery_level <= 0:
            raise BatteryDepletedError("Cannot start: Battery depleted")
        super().start_engine()

    def move(self) -> None:
        super().move()
        self.battery_level -= 1


class Bicycle(Vehicle):
    def move(self) -> None:
        self.speed = self.speed + 5


class Skateboard(Vehicle):
    def move(self) -> None:
        self.speed = self.speed + 3


def drive(vehicle: Vehicle) -> int:
    """Works with any Vehicle; returns the speed after one move"""
    vehicle.move()
    return vehicle.speed


def run_engine_cycle(vehicle: MotorizedVehicle) -> int:
    """Works with any MotorizedVehicle; returns the speed reached before stopping"""
    vehicle.start_engine()
    vehicle.move()
    reached = vehicle.speed
    vehicle.stop_engine()
    return reached
