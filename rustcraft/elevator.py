"""Events reported by an elevator system to its controller."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Direction(Enum):
    """A direction of travel."""

    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class LobbyCall:
    """A button in the elevator lobby on the given floor."""

    direction: Direction
    floor: int


@dataclass(frozen=True)
class CarFloor:
    """A floor button within the car."""

    floor: int


Button = Union[LobbyCall, CarFloor]


@dataclass(frozen=True)
class ButtonPressed:
    """A button was pressed."""

    button: Button


@dataclass(frozen=True)
class CarArrived:
    """The car has arrived at the given floor."""

    floor: int


@dataclass(frozen=True)
class CarDoorOpened:
    """The car's doors have opened."""


@dataclass(frozen=True)
class CarDoorClosed:
    """The car's doors have closed."""


Event = Union[ButtonPressed, CarArrived, CarDoorOpened, CarDoorClosed]


def car_arrived(floor: int) -> CarArrived:
    """The car has arrived on the given floor."""
    return CarArrived(floor)


def car_door_opened() -> CarDoorOpened:
    """The car doors have opened."""
    return CarDoorOpened()


def car_door_closed() -> CarDoorClosed:
    """The car doors have closed."""
    return CarDoorClosed()


def lobby_call_button_pressed(floor: int, direction: Direction) -> ButtonPressed:
    """A directional button was pressed in a lobby on the given floor."""
    return ButtonPressed(LobbyCall(direction, floor))


def car_floor_button_pressed(floor: int) -> ButtonPressed:
    """A floor button was pressed in the elevator car."""
    return ButtonPressed(CarFloor(floor))


def main(argv: list[str] | None = None) -> int:
    """Print a short sequence of elevator events."""
    print(
        "A ground floor passenger has pressed the up button: "
        f"{lobby_call_button_pressed(0, Direction.UP)!r}"
    )
    print(f"The car has arrived on the ground floor: {car_arrived(0)!r}")
    print(f"The car door opened: {car_door_opened()!r}")
    print(
        "A passenger has pressed the 3rd floor button: "
        f"{car_floor_button_pressed(3)!r}"
    )
    print(f"The car door closed: {car_door_closed()!r}")
    print(f"The car has arrived on the 3rd floor: {car_arrived(3)!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())