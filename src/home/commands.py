"""
Home Commands - Undoable device actions.

Light, door and TV commands invert structurally (on/off, open/close,
toggle twice). ThermostatSetCommand captures the previous set point when
it executes, in the manner of a property setter with undo.
"""
from typing import List, Optional

from src.core.commands import CommandStateError, UndoableCommand
from .devices import Door, Home, Light, Television, Thermostat


class LightOnCommand(UndoableCommand):
    def __init__(self, light: Light):
        self._light = light
        self._name = f"LightOn({light.location})"

    @property
    def name(self) -> str:
        return self._name

    def execute(self) -> None:
        self._light.on()

    def undo(self) -> None:
        self._light.off()


class LightOffCommand(UndoableCommand):
    def __init__(self, light: Light):
        self._light = light
        self._name = f"LightOff({light.location})"

    @property
    def name(self) -> str:
        return self._name

    def execute(self) -> None:
        self._light.off()

    def undo(self) -> None:
        self._light.on()


class DoorOpenCommand(UndoableCommand):
    def __init__(self, door: Door):
        self._door = door
        self._name = f"DoorOpen({door.name})"

    @property
    def name(self) -> str:
        return self._name

    def execute(self) -> None:
        self._door.open()

    def undo(self) -> None:
        self._door.close()


class DoorCloseCommand(UndoableCommand):
    def __init__(self, door: Door):
        self._door = door
        self._name = f"DoorClose({door.name})"

    @property
    def name(self) -> str:
        return self._name

    def execute(self) -> None:
        self._door.close()

    def undo(self) -> None:
        self._door.open()


class ThermostatSetCommand(UndoableCommand):
    """
    Set the thermostat to a target temperature.

    The previous set point is read at execute time, not at construction,
    so a command built early and executed later still undoes correctly.

    Example:
        cmd = ThermostatSetCommand(thermostat, 26)
        dispatcher.execute(cmd)   # 22 -> 26
        dispatcher.undo_one()     # back to 22
    """

    def __init__(self, thermostat: Thermostat, temperature: int):
        """
        Args:
            thermostat: Thermostat to drive
            temperature: Target set point in °C
        """
        self._thermostat = thermostat
        self._temperature = temperature
        self._previous: Optional[int] = None
        self._name = f"ThermostatSet({temperature}°C)"

    @property
    def name(self) -> str:
        return self._name

    @property
    def previous_temperature(self) -> Optional[int]:
        """Set point captured by the last execute(), or None."""
        return self._previous

    def execute(self) -> None:
        self._previous = self._thermostat.temperature
        self._thermostat.set_temperature(self._temperature)

    def undo(self) -> None:
        if self._previous is None:
            raise CommandStateError(f"{self.name} was never executed")
        self._thermostat.set_temperature(self._previous)


class TVToggleCommand(UndoableCommand):
    def __init__(self, tv: Television):
        self._tv = tv
        self._name = f"TVToggle({tv.name})"

    @property
    def name(self) -> str:
        return self._name

    def execute(self) -> None:
        self._tv.toggle()

    def undo(self) -> None:
        # toggle is its own inverse
        self._tv.toggle()


def welcome_home_macro(home: Home) -> List[UndoableCommand]:
    """Kitchen light on, living-room light on, TV toggle."""
    return [
        LightOnCommand(home.kitchen_light),
        LightOnCommand(home.living_light),
        TVToggleCommand(home.tv),
    ]
