from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
import logging
import os

from application.use_cases import TaskUseCases
from domain.errors import TaskError
from infrastructure.task_store import TaskStore
from schemas.task import TaskCreate, TaskUpdate, TaskResponse, MessageResponse

logger = logging.getLogger(__name__)

SEED_ON_START = os.getenv("TODO_SEED_TASKS", "true").lower() == "true"

router = APIRouter(prefix="/api/tasks", tags=["tasks"])
store = TaskStore(seed=SEED_ON_START)
use_cases = TaskUseCases(store)


def get_use_cases() -> TaskUseCases:
    return use_cases


def bad_request(e: TaskError) -> HTTPException:
    logger.warning(f"Rejected request: {e}")
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


def task_not_found(task_id: int) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Task {task_id} not found")


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(task: TaskCreate, cases: TaskUseCases = Depends(get_use_cases)):
    try:
        created_task = cases.create_task(task.title, task.description)
    except TaskError as e:
        raise bad_request(e)
    return TaskResponse.from_task(created_task)


@router.get("", response_model=List[TaskResponse])
async def get_all_tasks(cases: TaskUseCases = Depends(get_use_cases)):
    return [TaskResponse.from_task(task) for task in cases.get_all_tasks()]


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(task_id: int, cases: TaskUseCases = Depends(get_use_cases)):
    try:
        task = cases.get_task(task_id)
    except TaskError as e:
        raise bad_request(e)
    if not task:
        raise task_not_found(task_id)
    return TaskResponse.from_task(task)


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(task_id: int, task: TaskUpdate, cases: TaskUseCases = Depends(get_use_cases)):
    try:
        updated_task = cases.set_completed(task_id, task.completed)
    except TaskError as e:
        raise bad_request(e)
    if not updated_task:
        raise task_not_found(task_id)
    return TaskResponse.from_task(updated_task)


@router.delete("/{task_id}", response_model=MessageResponse)
async def delete_task(task_id: int, cases: TaskUseCases = Depends(get_use_cases)):
    try:
        deleted = cases.delete_task(task_id)
    except TaskError as e:
        raise bad_request(e)
    if not deleted:
        raise task_not_found(task_id)
    return MessageResponse(message="Task deleted")
