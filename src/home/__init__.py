"""
Smart home receivers, their undoable commands and the interactive menu.
"""
from .devices import Light, Door, Thermostat, Television, Home, build_home
from .commands import (
    LightOnCommand,
    LightOffCommand,
    DoorOpenCommand,
    DoorCloseCommand,
    ThermostatSetCommand,
    TVToggleCommand,
    welcome_home_macro,
)
from .menu import RemoteMenu

__all__ = [
    # Devices
    "Light",
    "Door",
    "Thermostat",
    "Television",
    "Home",
    "build_home",
    # Commands
    "LightOnCommand",
    "LightOffCommand",
    "DoorOpenCommand",
    "DoorCloseCommand",
    "ThermostatSetCommand",
    "TVToggleCommand",
    "welcome_home_macro",
    # Caller
    "RemoteMenu",
]
