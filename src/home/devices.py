"""
Home devices.

Receivers driven by the home commands. Each device owns its own state and
logs every change; none of the mutating operations fail.
"""
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from src.core.config import HomeSettings


class Light:
    def __init__(self, location: str):
        self.location = location
        self._is_on = False

    @property
    def is_on(self) -> bool:
        return self._is_on

    def on(self) -> None:
        self._is_on = True
        logger.info(f"[Light] {self.location}: ON")

    def off(self) -> None:
        self._is_on = False
        logger.info(f"[Light] {self.location}: OFF")


class Door:
    def __init__(self, name: str):
        self.name = name
        self._is_open = False

    @property
    def is_open(self) -> bool:
        return self._is_open

    def open(self) -> None:
        self._is_open = True
        logger.info(f"[Door] {self.name}: OPEN")

    def close(self) -> None:
        self._is_open = False
        logger.info(f"[Door] {self.name}: CLOSED")


class Thermostat:
    """Holds a whole-degree Celsius set point."""

    def __init__(self, initial: int = 22):
        self._temperature = initial

    @property
    def temperature(self) -> int:
        """Current set point; read it before set_temperature() to remember it."""
        return self._temperature

    def set_temperature(self, value: int) -> None:
        self._temperature = value
        logger.info(f"[Thermostat] Temperature set to {value}°C")


class Television:
    def __init__(self, name: str):
        self.name = name
        self._is_on = False

    @property
    def is_on(self) -> bool:
        return self._is_on

    def toggle(self) -> None:
        self._is_on = not self._is_on
        logger.info(f"[TV] {self.name}: {'ON' if self._is_on else 'OFF'}")


@dataclass
class Home:
    """The set of devices the remote controls."""
    living_light: Light
    kitchen_light: Light
    front_door: Door
    back_door: Door
    thermostat: Thermostat
    tv: Television


def build_home(settings: Optional[HomeSettings] = None) -> Home:
    """Create the devices named in settings (defaults when omitted)."""
    settings = settings or HomeSettings()
    return Home(
        living_light=Light(settings.living_light),
        kitchen_light=Light(settings.kitchen_light),
        front_door=Door(settings.front_door),
        back_door=Door(settings.back_door),
        thermostat=Thermostat(settings.initial_temperature),
        tv=Television(settings.tv),
    )
