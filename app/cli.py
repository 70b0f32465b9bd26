"""Interactive command-line menu for the task tracker.

Same store as the web app: every command goes through TaskRepository
on the shared table returned by get_table().
"""
import logging
import sys

from app.core.config import settings
from app.core.database import get_table
from app.models.task import Task, new_task_id
from app.services.task_service import TaskRepository, TaskStoreError

logger = logging.getLogger(__name__)

EXIT_STATUS = 2

MENU = (
    "1 - Add new task.\n"
    "2 - View current tasks.\n"
    "3 - Delete completed tasks.\n"
    "Exit - Closes the application."
)


def format_task(task: Task) -> str:
    return (
        f"TaskID: {task.TaskID}\n"
        f"Task Name: {task.TaskName}\n"
        f"Task Details: {task.TaskDetails}\n"
        f"Completion Date: {task.CompletionDate}\n"
    )


class CLI:
    def __init__(self, repo: TaskRepository):
        self.repo: TaskRepository = repo

    def run(self) -> None:
        """Menu loop; only 'exit' (or end of input) leaves it."""
        print("Task Tracker")
        print(MENU)
        try:
            while True:
                choice = input("Select an option menu value: ").lower()
                if choice == 'exit':
                    break
                self._handle_choice(choice)
        except (KeyboardInterrupt, EOFError):
            print()

    # -------------------- command dispatch --------------------
    def _handle_choice(self, choice: str) -> None:
        if choice == '1':
            action = self._add
        elif choice == '2':
            action = self._view
        elif choice == '3':
            action = self._delete
        else:
            # entrée inconnue: on repose simplement la question
            return
        try:
            action()
        except TaskStoreError as e:
            print(f"Error: {e}")

    # -------------------- user-interactive flows --------------------
    def _add(self) -> None:
        task_name = input("Enter a task name: ")
        task_details = input("Enter the task details: ")
        complete_by = input("Enter the completion date: ")

        task = Task(
            TaskID=new_task_id(),
            TaskName=task_name,
            TaskDetails=task_details,
            CompletionDate=complete_by,
        )
        self.repo.put_task(task)
        print("\nTask sent:")
        print(format_task(task))

    def _view(self) -> None:
        tasks = self.repo.list_tasks()
        if not tasks:
            print("Table is empty.")
            return
        for task in tasks:
            print()
            print(format_task(task))

    def _delete(self) -> None:
        task_id = input("Enter the TaskID to delete: ")
        self.repo.delete_task(task_id)
        print("Task deleted.")


def main():
    logging.basicConfig(level=settings.LOG_LEVEL)
    cli = CLI(TaskRepository(get_table()))
    cli.run()
    sys.exit(EXIT_STATUS)


if __name__ == "__main__":
    main()
