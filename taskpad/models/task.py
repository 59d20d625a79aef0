"""Task data models."""
from datetime import date, datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_serializer, field_validator

if TYPE_CHECKING:
    from .config import TaskpadConfig

# Date.toDateString() names; fixed so output does not depend on the C locale
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class Category(str, Enum):
    """Task category enumeration."""
    WORK = "Work"
    PERSONAL = "Personal"

    @classmethod
    def from_label(cls, label: str) -> "Category":
        """Look up a category by its label, ignoring case."""
        for member in cls:
            if member.value.lower() == label.strip().lower():
                return member
        raise ValueError(f"Unknown category: {label!r}")


class Priority(str, Enum):
    """Task priority enumeration."""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def from_label(cls, label: str) -> "Priority":
        """Look up a priority by its label, ignoring case."""
        for member in cls:
            if member.value.lower() == label.strip().lower():
                return member
        raise ValueError(f"Unknown priority: {label!r}")


def format_due_date(value: date) -> str:
    """Format a date the way it is stored, e.g. ``Mon Jan 01 2024``."""
    return f"{_WEEKDAYS[value.weekday()]} {_MONTHS[value.month - 1]} {value.day:02d} {value.year:04d}"


def parse_due_date(value: str) -> date:
    """Parse a stored due date.

    Accepts the stored ``Mon Jan 01 2024`` form and ISO ``2024-01-01``.
    The weekday name of the stored form is not checked against the date.

    Raises:
        ValueError: If the string is in neither form
    """
    text = value.strip()
    parts = text.split()
    if len(parts) == 4 and parts[1].title() in _MONTHS:
        try:
            return date(int(parts[3]), _MONTHS.index(parts[1].title()) + 1, int(parts[2]))
        except ValueError as e:
            raise ValueError(f"Invalid due date {value!r}: {e}") from e
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise ValueError(f"Invalid due date {value!r}") from None


def _coerce_due_date(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        return parse_due_date(value)
    return value


class Task(BaseModel):
    """A single to-do item.

    Field order and the ``dueDate`` alias define the stored record layout.
    Fields that saved records carry beyond these are kept and written back.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    id: int
    text: str = ""
    category: Category = Category.WORK
    priority: Priority = Priority.MEDIUM
    due_date: date = Field(alias="dueDate")
    completed: bool = False

    @field_validator("due_date", mode="before")
    @classmethod
    def _parse_due_date(cls, value: Any) -> Any:
        return _coerce_due_date(value)

    @field_serializer("due_date")
    def _serialize_due_date(self, value: date) -> str:
        return format_due_date(value)

    @property
    def due_date_display(self) -> str:
        return format_due_date(self.due_date)


class TaskDraft(BaseModel):
    """A task under creation or edit that has not been committed yet.

    ``task_id`` is None for a new task and the id of the edited task otherwise.
    """
    model_config = ConfigDict(frozen=True)

    task_id: Optional[int] = None
    text: str = ""
    category: Category = Category.WORK
    priority: Priority = Priority.MEDIUM
    due_date: date = Field(default_factory=date.today)

    @field_validator("due_date", mode="before")
    @classmethod
    def _parse_due_date(cls, value: Any) -> Any:
        return _coerce_due_date(value)

    @property
    def is_new(self) -> bool:
        return self.task_id is None

    @classmethod
    def new(cls, config: Optional["TaskpadConfig"] = None, today: Optional[date] = None) -> "TaskDraft":
        """Blank draft with the configured defaults and today's due date."""
        fields = {"due_date": today or date.today()}
        if config is not None:
            fields["category"] = config.default_category
            fields["priority"] = config.default_priority
        return cls(**fields)

    @classmethod
    def from_task(cls, task: Task) -> "TaskDraft":
        """Draft pre-filled from an existing task for editing."""
        return cls(
            task_id=task.id,
            text=task.text,
            category=task.category,
            priority=task.priority,
            due_date=task.due_date,
        )

    def with_changes(self, **changes: Any) -> "TaskDraft":
        """Return a copy with every non-None change applied."""
        updates = {key: value for key, value in changes.items() if value is not None}
        if not updates:
            return self
        return self.model_validate({**self.model_dump(), **updates})


TaskListAdapter = TypeAdapter(List[Task])
