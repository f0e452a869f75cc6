from typing import Any
from sqlalchemy import MetaData, create_engine, delete, insert, select, text, update

from src.common.exceptions import ResourceNotFoundException, ResourceType
from src.tasks.schemas import Task
from src.tasks.store.base import TaskStore
from src.tasks.store.sql.model import build_tasks_table


class SQLTaskStore(TaskStore):
    def __init__(self, database_url: str, table_name: str = "tasks"):
        self.engine = create_engine(database_url, pool_pre_ping=True)
        self.metadata = MetaData()
        self.tasks = build_tasks_table(self.metadata, table_name)
        self.metadata.create_all(self.engine)

    def _map_task(self, row: Any) -> Task:
        return Task(id=row.id, description=row.task, done=bool(row.done))

    def ping(self) -> None:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def list_tasks(self) -> list[Task]:
        query = select(self.tasks.c.id, self.tasks.c.task, self.tasks.c.done)
        with self.engine.connect() as conn:
            rows = conn.execute(query).all()
            return [self._map_task(row) for row in rows]

    def get_task(self, task_id: int) -> Task:
        query = select(self.tasks.c.id, self.tasks.c.task, self.tasks.c.done).where(
            self.tasks.c.id == task_id
        )
        with self.engine.connect() as conn:
            row = conn.execute(query).first()

        if row is None:
            raise ResourceNotFoundException(ResourceType.TASK, task_id)

        return self._map_task(row)

    def insert_task(self, description: str) -> int:
        statement = insert(self.tasks).values(task=description, done=False)
        with self.engine.begin() as conn:
            result = conn.execute(statement)
            return result.inserted_primary_key[0]

    def update_task(self, task_id: int, description: str, done: bool) -> int:
        statement = (
            update(self.tasks)
            .where(self.tasks.c.id == task_id)
            .values(task=description, done=done)
        )
        with self.engine.begin() as conn:
            return conn.execute(statement).rowcount

    def delete_task(self, task_id: int) -> int:
        statement = delete(self.tasks).where(self.tasks.c.id == task_id)
        with self.engine.begin() as conn:
            return conn.execute(statement).rowcount

    def close(self) -> None:
        self.engine.dispose()
