from typing import Optional

from domain.errors import ValidationError


def validate_text(field: str, value: Optional[str]) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field.capitalize()} cannot be null or empty")
    return value.strip()


class Task:
    """A single to-do item.

    The id is fixed at construction. Title and description are trimmed and
    must stay non-empty; ``completed`` can be flipped freely.

    ``==`` is object identity. Use ``same_task`` to compare two tasks by id.
    """

    __slots__ = ("_id", "_title", "_description", "completed")

    def __init__(self, id: int, title: str, description: str, completed: bool = False):
        self._id = id
        self.title = title
        self.description = description
        self.completed = bool(completed)

    @property
    def id(self) -> int:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = validate_text("title", value)

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        self._description = validate_text("description", value)

    def copy(self) -> "Task":
        return Task(self._id, self._title, self._description, self.completed)

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "title": self._title,
            "description": self._description,
            "completed": self.completed,
        }

    def __repr__(self) -> str:
        return (
            f"Task(id={self._id}, title={self._title!r}, "
            f"description={self._description!r}, completed={self.completed})"
        )


def same_task(a: Optional[Task], b: Optional[Task]) -> bool:
    """True when both tasks carry the same id."""
    if a is None or b is None:
        return False
    return a.id == b.id
