from pydantic import BaseModel

from domain.entities import Task


class TaskCreate(BaseModel):
    title: str
    description: str


class TaskUpdate(BaseModel):
    completed: bool


class TaskResponse(BaseModel):
    id: int
    title: str
    description: str
    completed: bool

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        return cls(**task.to_dict())


class MessageResponse(BaseModel):
    message: str
