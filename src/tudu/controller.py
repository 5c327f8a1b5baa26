from __future__ import annotations

from enum import StrEnum

from tudu.logging_utils import logger
from tudu.model import TaskModel
from tudu.view import ConsoleView


class Command(StrEnum):
    QUIT = "quit"
    COMPLETE = "complete"
    ADD = "add"
    IGNORED = "ignored"


class Controller:
    """
    Runs the read loop: each line is a quit word, a complete word, or a new task.

    The controller owns the model. The view only ever sees snapshots of it.
    """

    def __init__(
        self,
        view: ConsoleView,
        *,
        model: TaskModel | None = None,
        quit_word: str = "quit",
        complete_word: str = "done",
    ) -> None:
        quit_word, complete_word = quit_word.strip(), complete_word.strip()
        if not quit_word or not complete_word:
            raise ValueError("Sentinel words must not be empty.")
        if quit_word == complete_word:
            raise ValueError(f"Quit and complete words must differ, both are '{quit_word}'.")

        self.view = view
        self.model = model if model is not None else TaskModel()
        self.quit_word = quit_word
        self.complete_word = complete_word

    def handle(self, line: str | None) -> Command:
        """Apply a single line of input to the model"""
        # End of input behaves like the quit word
        if line is None:
            logger.debug("Input exhausted")
            return Command.QUIT

        text = line.strip()
        if text == self.quit_word:
            return Command.QUIT

        if text == self.complete_word:
            pending = self.model.first_pending()
            if pending is None:
                self.view.notify("Nothing to complete.")
            else:
                self.model.complete_task(pending)
            return Command.COMPLETE

        if not text:
            self.view.notify("Empty input ignored.")
            return Command.IGNORED

        if not self.model.add_task(text):
            self.view.notify(f"Already listed: {text}")
            return Command.IGNORED
        return Command.ADD

    def run(self) -> TaskModel:
        logger.info(f"Starting session, quit with '{self.quit_word}', complete with '{self.complete_word}'.")
        while True:
            command = self.handle(self.view.read_line())
            logger.debug(f"Dispatched: {command}")
            if command is Command.QUIT:
                break
            self.view.render(self.model.snapshot())

        logger.info(f"Session ended with {len(self.model.tasks)} pending and {len(self.model.completed)} completed.")
        return self.model
