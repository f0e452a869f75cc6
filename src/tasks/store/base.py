from abc import ABC, abstractmethod

from src.tasks.schemas import Task


class TaskStore(ABC):
    @abstractmethod
    def ping(self) -> None:
        pass

    @abstractmethod
    def list_tasks(self) -> list[Task]:
        pass

    @abstractmethod
    def get_task(self, task_id: int) -> Task:
        pass

    @abstractmethod
    def insert_task(self, description: str) -> int:
        pass

    @abstractmethod
    def update_task(self, task_id: int, description: str, done: bool) -> int:
        pass

    @abstractmethod
    def delete_task(self, task_id: int) -> int:
        pass

    @abstractmethod
    def close(self) -> None:
        pass
