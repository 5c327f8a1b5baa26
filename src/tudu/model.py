from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from tudu.logging_utils import logger


class TaskSnapshot(BaseModel):
    """Read-only view of the task state, handed to the View on each render"""

    model_config = ConfigDict(frozen=True)

    tasks: tuple[str, ...] = ()
    completed: tuple[str, ...] = ()


class TaskModel(BaseModel):
    """
    Pending and completed tasks for one session.

    Task text is the identity of an item. Text already pending or completed is refused,
    and an item leaves `tasks` at the moment it enters `completed`, so no item is ever in both.
    """

    tasks: list[str] = []
    completed: list[str] = []

    def add_task(self, text: str) -> bool:
        """Append `text` to the pending list. Returns False if it is already listed."""
        if text in self.tasks or text in self.completed:
            logger.warning(f"Task already listed: {text}")
            return False

        self.tasks.append(text)
        logger.info(f"Added task: {text}")
        return True

    def complete_task(self, text: str) -> bool:
        """
        Move the first task equal to `text` into the completed list.

        Returns False and leaves both lists untouched when there is no such task.
        """
        if text not in self.tasks:
            logger.warning(f"Task not found: {text}")
            return False

        self.tasks.remove(text)
        self.completed.append(text)
        logger.info(f"Completed task: {text}")
        return True

    def first_pending(self) -> str | None:
        return self.tasks[0] if self.tasks else None

    def snapshot(self) -> TaskSnapshot:
        return TaskSnapshot(tasks=tuple(self.tasks), completed=tuple(self.completed))
