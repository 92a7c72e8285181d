import threading
from typing import Dict, List, Optional

from domain.entities import Task, validate_text
from domain.errors import InvalidArgumentError

SEED_TASKS = (
    ("Complete project", "Finish the SimpleTomcat project implementation"),
    ("Buy groceries", "Milk, eggs, bread, and vegetables"),
    ("Clean house", "Vacuum living room and mop kitchen"),
)


def _check_id(task_id: int) -> None:
    if isinstance(task_id, bool) or not isinstance(task_id, int) or task_id <= 0:
        raise InvalidArgumentError("Task ID must be positive")


class TaskStore:
    """
    In-memory task repository.

    The task dict and the id counter live behind one lock, so allocating an
    id and inserting the task happen in the same critical section. Ids start
    at 1 and are never handed out twice, even after a delete.

    Readers get copies; the stored Task objects are only mutated here.
    """

    def __init__(self, seed: bool = True):
        self._tasks: Dict[int, Task] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        if seed:
            for title, description in SEED_TASKS:
                self.add_task(title, description)

    def add_task(self, title: str, description: str) -> Task:
        title = validate_text("title", title)
        description = validate_text("description", description)
        with self._lock:
            task = Task(self._next_id, title, description)
            self._tasks[task.id] = task
            self._next_id += 1
            return task.copy()

    def get_task(self, task_id: int) -> Optional[Task]:
        _check_id(task_id)
        with self._lock:
            task = self._tasks.get(task_id)
            return task.copy() if task is not None else None

    def get_all_tasks(self) -> List[Task]:
        with self._lock:
            return [task.copy() for task in self._tasks.values()]

    def delete_task(self, task_id: int) -> bool:
        _check_id(task_id)
        with self._lock:
            return self._tasks.pop(task_id, None) is not None

    def update_task_status(self, task_id: int, completed: bool) -> bool:
        _check_id(task_id)
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return False
            task.completed = bool(completed)
            return True

    def task_count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def __len__(self) -> int:
        return self.task_count()
