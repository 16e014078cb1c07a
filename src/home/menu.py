"""
Interactive remote menu.

Reads numbered choices, builds the matching command and hands it to the
dispatcher. Input and output are injectable so the loop can be driven by
tests.
"""
from typing import Callable, Optional

from loguru import logger

from src.core.commands import CommandDispatcher, ResultKind, run_macro
from .commands import (
    DoorCloseCommand,
    DoorOpenCommand,
    LightOffCommand,
    LightOnCommand,
    TVToggleCommand,
    ThermostatSetCommand,
    welcome_home_macro,
)
from .devices import Home


EXIT_CHOICE = "0"


class RemoteMenu:
    """
    Numbered smart-home menu driving a CommandDispatcher.

    Usage:
        menu = RemoteMenu(dispatcher, build_home())
        menu.run()              # interactive loop on stdin/stdout

        menu.handle("1")        # single choice, returns False on exit
    """

    def __init__(self, dispatcher: CommandDispatcher, home: Home,
                 input_fn: Optional[Callable[[str], str]] = None,
                 output_fn: Optional[Callable[[str], None]] = None):
        self.dispatcher = dispatcher
        self.home = home
        self._input = input_fn or input
        self._output = output_fn or print

        self._actions = {
            "1": lambda: self._execute(LightOnCommand(home.living_light)),
            "2": lambda: self._execute(LightOffCommand(home.kitchen_light)),
            "3": lambda: self._execute(DoorOpenCommand(home.front_door)),
            "4": lambda: self._execute(DoorCloseCommand(home.front_door)),
            "5": self._set_temperature,
            "6": lambda: self._execute(TVToggleCommand(home.tv)),
            "7": self._undo_last,
            "8": self._undo_several,
            "9": self._show_history,
            "10": self._run_macro,
        }

    def menu_text(self) -> str:
        h = self.home
        return "\n".join([
            "",
            "Choose an action:",
            f"1  - Turn on light ({h.living_light.location})",
            f"2  - Turn off light ({h.kitchen_light.location})",
            f"3  - Open door ({h.front_door.name})",
            f"4  - Close door ({h.front_door.name})",
            "5  - Set temperature (Thermostat)",
            "6  - Toggle TV",
            "7  - Undo last command",
            "8  - Undo several commands",
            "9  - Show command history",
            "10 - Run macro (kitchen on, living on, tv toggle)",
            "0  - Exit",
        ])

    def run(self) -> None:
        """Loop until the exit choice or end of input."""
        self._output(" Smart Home ")
        while True:
            self._output(self.menu_text())
            try:
                if not self.handle(self._input(">>> ")):
                    break
            except EOFError:
                break
        self._output("Goodbye!")

    def handle(self, choice: Optional[str]) -> bool:
        """
        Process one menu choice.

        Returns:
            False when the user chose to exit, True otherwise
        """
        choice = (choice or "").strip()
        if not choice:
            self._output("Enter a command.")
            return True
        if choice == EXIT_CHOICE:
            return False

        action = self._actions.get(choice)
        if action is None:
            self._output("Unknown command. Try again.")
            return True

        action()
        return True

    # --- Actions ---

    def _execute(self, command) -> None:
        result = self.dispatcher.execute(command)
        if not result.success:
            self._output(f"Error: {result.message}")

    def _set_temperature(self) -> None:
        value = self._read_int("Enter temperature (whole °C): ")
        if value is None:
            self._output("Invalid temperature.")
            return
        self._execute(ThermostatSetCommand(self.home.thermostat, value))

    def _undo_last(self) -> None:
        self._output(self.dispatcher.undo_one().message)

    def _undo_several(self) -> None:
        n = self._read_int("How many commands to undo? ")
        if n is None:
            self._output("Invalid number.")
            return
        outcome = self.dispatcher.undo_many(n)
        for result in outcome.results:
            self._output(result.message)
        if outcome.kind is not ResultKind.OK or outcome.consumed < n or outcome.failed:
            self._output(outcome.message)

    def _show_history(self) -> None:
        entries = self.dispatcher.history()
        if not entries:
            self._output("History is empty.")
            return
        self._output("History (newest first):")
        for entry in entries:
            self._output(f" - {entry.name}")

    def _run_macro(self) -> None:
        self._output("Running macro (kitchen on, living on, tv toggle)...")
        for result in run_macro(self.dispatcher, welcome_home_macro(self.home)):
            if not result.success:
                self._output(f"Error: {result.message}")

    def _read_int(self, prompt: str) -> Optional[int]:
        raw = self._input(prompt)
        try:
            return int((raw or "").strip())
        except ValueError:
            logger.debug(f"Rejected non-integer input: {raw!r}")
            return None
