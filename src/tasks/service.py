import logging

from src.common.exceptions import ResourceNotFoundException, ResourceType
from src.tasks.schemas import Task
from src.tasks.store.base import TaskStore

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, *, task_store: TaskStore) -> None:
        self.task_store = task_store

    def list_tasks(self) -> list[Task]:
        return self.task_store.list_tasks()

    def get_task(self, task_id: int) -> Task:
        return self.task_store.get_task(task_id)

    def add_task(self, description: str) -> int:
        task_id = self.task_store.insert_task(description)
        logger.info(f"Created task {task_id}")
        return task_id

    def update_task(self, task_id: int, description: str, done: bool) -> None:
        rows_affected = self.task_store.update_task(task_id, description, done)
        if rows_affected == 0:
            raise ResourceNotFoundException(ResourceType.TASK, task_id)
        logger.info(f"Updated task {task_id} (done={done})")

    def delete_task(self, task_id: int) -> None:
        # Deleting a missing task is a no-op, not an error.
        rows_affected = self.task_store.delete_task(task_id)
        if rows_affected == 0:
            logger.info(f"Task {task_id} did not exist, nothing to delete")
        else:
            logger.info(f"Deleted task {task_id}")
