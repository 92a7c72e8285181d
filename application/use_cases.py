import logging
from typing import List, Optional

from domain.entities import Task
from infrastructure.task_store import TaskStore

logger = logging.getLogger(__name__)


class TaskUseCases:
    def __init__(self, store: TaskStore):
        self.store = store

    def create_task(self, title: str, description: str) -> Task:
        task = self.store.add_task(title, description)
        logger.info(f"Created task {task.id}: {task.title!r}")
        return task

    def get_task(self, task_id: int) -> Optional[Task]:
        return self.store.get_task(task_id)

    def get_all_tasks(self) -> List[Task]:
        return self.store.get_all_tasks()

    def set_completed(self, task_id: int, completed: bool) -> Optional[Task]:
        """Sets the completion flag and returns the task as stored afterwards."""
        if not self.store.update_task_status(task_id, completed):
            return None
        logger.info(f"Task {task_id} marked completed = {completed}")
        return self.store.get_task(task_id)

    def delete_task(self, task_id: int) -> bool:
        deleted = self.store.delete_task(task_id)
        if deleted:
            logger.info(f"Deleted task {task_id}")
        return deleted

    def count_tasks(self) -> int:
        return self.store.task_count()
