from __future__ import annotations
import time
from typing import Callable

from errors import EntryValidationError
from log_api import FitnessLogAPI
from settings_schema import SettingsSchema

CLEAR_SEQUENCE = "\033[H\033[2J"
BANNER = [
    " _____ _ _                         _                                 ",
    "|  ___(_) |_ _ __   ___  ___ ___  | |    ___   __ _  __ _  ___ _ __  ",
    "| |_  | | __| '_ \\ / _ \\/ __/ __| | |   / _ \\ / _` |/ _` |/ _ \\ '__| ",
    "|  _| | | |_| | | |  __/\\__ \\__ \\ | |__| (_) | (_| | (_| |  __/ |    ",
    "|_|   |_|\\__|_| |_|\\___||___/___/ |_____\\___/ \\__, |\\__, |\\___|_|    ",
    "                                              |___/ |___/            ",
]
SLOGAN = "Track your progress like a beast!"
GOODBYE = "Stay strong, GymRat!"


class ExitRequested(Exception):
    """Raised when the user types ``exit`` at any prompt."""


class ConsoleApp:
    """Menu driven text interface on top of :class:`FitnessLogAPI`."""

    def __init__(
        self,
        api: FitnessLogAPI,
        settings: SettingsSchema | None = None,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        sleep_func: Callable[[float], None] = time.sleep,
    ) -> None:
        self.api = api
        self.settings = settings or SettingsSchema()
        self._input = input_func
        self._output = output_func
        self._sleep = sleep_func

    # -- drawing -----------------------------------------------------------

    def center(self, text: str) -> str:
        width = self.settings.display_width
        return " " * max(0, (width - len(text)) // 2) + text

    def say(self, text: str = "") -> None:
        self._output(self.center(text) if text else "")

    def clear_screen(self) -> None:
        if self.settings.clear_screen:
            self._output(CLEAR_SEQUENCE)

    def window(self, title: str) -> None:
        self.clear_screen()
        for line in BANNER:
            self._output(line)
        self._output("")
        self.say(SLOGAN)
        self._output("")
        self.say(title)
        self._output("")

    def ask(self, prompt: str) -> str | None:
        """Prompt for a value; ``None`` means ``back``."""
        try:
            text = self._input(self.center(prompt)).strip()
        except EOFError:
            raise ExitRequested()
        command = text.lower()
        if command == "back":
            return None
        if command == "exit":
            raise ExitRequested()
        return text

    # -- screens -----------------------------------------------------------

    def main_menu(self) -> None:
        self.window("Main Menu")
        self.say("1. Add exercise")
        self.say("2. View log")
        self.say("3. Show progress")
        self.say("Type 'exit' to quit")

    def add_exercise(self) -> None:
        screens = {
            "1": self.add_strength,
            "2": self.add_cardio,
            "3": self.add_endurance,
        }
        while True:
            self.window("Add Exercise")
            self.say("1. Strength (e.g., Push-ups)")
            self.say("2. Cardio (e.g., Plank)")
            self.say("3. Endurance (e.g., Running, Swimming)")
            self.say("Type 'back' to return or 'exit' to quit")
            choice = self.ask("Select type: ")
            if choice is None:
                return
            screen = screens.get(choice)
            if screen is not None:
                screen()
                return
            self.say("Invalid option.")
            self._sleep(min(self.settings.menu_delay, 1.0))

    def _collect(self, title: str, prompts: list[str]) -> list[str] | None:
        self.window(title)
        values = []
        for prompt in prompts:
            value = self.ask(prompt)
            if value is None:
                return None
            values.append(value)
        return values

    def _submit(self, add: Callable, values: list[str]) -> None:
        try:
            add(*values)
        except EntryValidationError as e:
            self.say(f"{e.message} Returning...")
            return
        self.say("Exercise added!")

    def add_strength(self) -> None:
        values = self._collect(
            "Add Strength Exercise",
            [
                "Enter exercise name: ",
                "Enter number of sets: ",
                "Enter reps per set: ",
                "Enter date (dd/MM/yyyy, empty for today): ",
            ],
        )
        if values is not None:
            self._submit(self.api.add_strength_exercise, values)

    def add_cardio(self) -> None:
        values = self._collect(
            "Add Cardio Exercise",
            [
                "Enter exercise name: ",
                "Enter duration (e.g., 2h56m45s, 15m24s, 15m, 2h, 2h30m, 48s): ",
                "Enter number of sets: ",
                "Enter date (dd/MM/yyyy, empty for today): ",
            ],
        )
        if values is not None:
            self._submit(self.api.add_cardio_exercise, values)

    def add_endurance(self) -> None:
        values = self._collect(
            "Add Endurance Exercise",
            [
                "Enter exercise name (e.g., Running, Swimming): ",
                "Enter distance (e.g., 100m, 2km): ",
                "Enter duration (e.g., 2h56m45s, 15m24s, 15m, 2h, 2h30m, 48s): ",
                "Enter date (dd/MM/yyyy, empty for today): ",
            ],
        )
        if values is not None:
            self._submit(self.api.add_endurance_exercise, values)

    def view_log(self) -> None:
        self.window("View Log")
        lines = self.api.list_entries()
        if not lines:
            self.say("No exercises logged.")
        else:
            self.say("Exercise Log:")
            for line in lines:
                self.say(f" - {line}")
        self._output("")
        self.say("Type 'clear' to clear, 'back' to return, 'exit' to quit:")
        while True:
            command = self.ask("Command: ")
            if command is None:
                return
            if command.lower() == "clear":
                self.api.clear_log()
                self.say("Log cleared!")
                return
            self.say("Invalid command.")

    def show_progress(self) -> None:
        self.window("Show Progress")
        report = self.api.get_progress_report()
        self.say("Progress Summary:")
        for record in report.records:
            for line in record.lines():
                self.say(line)
            self._output("")
        if not report.has_progress:
            self.say(report.message)
        self._output("")
        self.say("Type 'back' to return, 'exit' to quit:")
        while True:
            if self.ask("Command: ") is None:
                return
            self.say("Invalid. Type 'back' or 'exit'.")

    def run(self) -> None:
        screens = {
            "1": self.add_exercise,
            "2": self.view_log,
            "3": self.show_progress,
        }
        try:
            while True:
                self.main_menu()
                choice = self.ask("Select an option: ")
                if choice is None:
                    continue
                screen = screens.get(choice)
                if screen is None:
                    self.say("Invalid option.")
                else:
                    screen()
                self._sleep(self.settings.menu_delay)
        except ExitRequested:
            pass
        self.clear_screen()
        self.say(GOODBYE)
