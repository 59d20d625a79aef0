"""Task store: the authoritative task list and its persisted copy."""
import logging
import threading
from datetime import date, datetime
from typing import Callable, List, Optional, Union

from pydantic import ValidationError

from ..models.task import Category, Priority, Task, TaskDraft, TaskListAdapter
from ..services.exceptions import LoadFailure, StorageError, TaskStoreError, WriteFailure
from .constants import TASKS_KEY
from .kv_store import KeyValueStore

logger = logging.getLogger(__name__)

DueDate = Union[date, str, None]


class TaskStore:
    """Owns the ordered task list and persists it as a whole on every change.

    Every mutation serializes the complete list and writes it under a single
    key. The in-memory list is replaced only after that write succeeds; a
    failed write is logged, recorded in ``last_error`` and leaves the previous
    list in place. Mutations are serialized with a lock so no two of them
    compute from the same snapshot.
    """

    def __init__(self, kv_store: KeyValueStore, key: str = TASKS_KEY,
                 clock: Optional[Callable[[], datetime]] = None):
        """Initialize the task store.

        Args:
            kv_store: Byte store the task list is persisted to
            key: Key the whole task list is stored under
            clock: Returns the current time; used for ids and default due dates
        """
        self.kv_store = kv_store
        self.key = key
        self._clock = clock or datetime.now
        self._tasks: List[Task] = []
        self._lock = threading.Lock()
        self.last_error: Optional[TaskStoreError] = None

    @property
    def tasks(self) -> List[Task]:
        """Snapshot of the current task list."""
        return list(self._tasks)

    # -------------------- loading --------------------

    def load(self) -> List[Task]:
        """Load the task list from the byte store.

        Missing data yields an empty list. Unreadable or malformed data is
        logged and also yields an empty list.

        Returns:
            Snapshot of the loaded task list
        """
        with self._lock:
            try:
                tasks = self._read()
                self.last_error = None
            except LoadFailure as e:
                logger.error(f"Failed to load tasks: {e}")
                self.last_error = e
                tasks = []
            self._tasks = tasks
            return list(tasks)

    def _read(self) -> List[Task]:
        try:
            raw = self.kv_store.get(self.key)
        except StorageError as e:
            raise LoadFailure(str(e)) from e

        if not raw:
            logger.debug(f"No stored tasks under '{self.key}'")
            return []

        try:
            # Strict: a quoted id or a non-boolean completed flag is corrupt data
            tasks = TaskListAdapter.validate_json(raw, strict=True)
        except ValidationError as e:
            raise LoadFailure(f"Stored task list under '{self.key}' is malformed: {e}") from e

        unique: List[Task] = []
        seen = set()
        for task in tasks:
            if task.id in seen:
                logger.warning(f"Dropping stored task with duplicate id {task.id}")
                continue
            seen.add(task.id)
            unique.append(task)

        logger.debug(f"Loaded {len(unique)} task(s) from '{self.key}'")
        return unique

    # -------------------- persistence --------------------

    def _commit(self, transform: Callable[[List[Task]], List[Task]]) -> List[Task]:
        """Apply transform to the current list, persist the result, then adopt it."""
        with self._lock:
            updated = transform(list(self._tasks))
            payload = TaskListAdapter.dump_json(updated, by_alias=True)
            try:
                self.kv_store.set(self.key, payload)
            except StorageError as e:
                logger.error(f"Failed to save tasks: {e}")
                self.last_error = WriteFailure(str(e))
                return list(self._tasks)

            self._tasks = updated
            self.last_error = None
            logger.debug(f"Saved {len(updated)} task(s) to '{self.key}'")
            return list(updated)

    def _next_id(self, tasks: List[Task], now: datetime) -> int:
        # Creation time in milliseconds, bumped past the highest id so ids
        # stay unique when the clock has not advanced
        candidate = int(now.timestamp() * 1000)
        highest = max((task.id for task in tasks), default=None)
        if highest is not None and candidate <= highest:
            candidate = highest + 1
        return candidate

    # -------------------- mutations --------------------

    def add(self, text: str, category: Category = Category.WORK,
            priority: Priority = Priority.MEDIUM, due_date: DueDate = None) -> List[Task]:
        """Append a new, not yet completed task.

        Args:
            text: Task text; may be empty
            category: Task category
            priority: Task priority
            due_date: Due date; defaults to today

        Returns:
            Snapshot of the task list after the operation
        """
        def transform(tasks: List[Task]) -> List[Task]:
            now = self._clock()
            task = Task(
                id=self._next_id(tasks, now),
                text=text,
                category=category,
                priority=priority,
                due_date=due_date if due_date is not None else now.date(),
                completed=False,
            )
            logger.info(f"Adding task {task.id}")
            return tasks + [task]

        return self._commit(transform)

    def edit(self, task_id: int, text: str, category: Category,
             priority: Priority, due_date: DueDate) -> List[Task]:
        """Replace text, category, priority and due date of a task.

        The id, completion state and any extra stored fields are kept. An
        unknown id leaves the list unchanged.

        Returns:
            Snapshot of the task list after the operation
        """
        def transform(tasks: List[Task]) -> List[Task]:
            updated = []
            for task in tasks:
                if task.id == task_id:
                    logger.info(f"Editing task {task_id}")
                    task = Task.model_validate({
                        **task.model_dump(),
                        "text": text,
                        "category": category,
                        "priority": priority,
                        "due_date": due_date if due_date is not None else task.due_date,
                    })
                updated.append(task)
            return updated

        return self._commit(transform)

    def delete(self, task_id: int) -> List[Task]:
        """Remove a task. An unknown id leaves the list unchanged."""
        def transform(tasks: List[Task]) -> List[Task]:
            logger.info(f"Deleting task {task_id}")
            return [task for task in tasks if task.id != task_id]

        return self._commit(transform)

    def toggle_completion(self, task_id: int) -> List[Task]:
        """Flip the completed flag of a task. An unknown id leaves the list unchanged."""
        def transform(tasks: List[Task]) -> List[Task]:
            return [
                task.model_copy(update={"completed": not task.completed}) if task.id == task_id else task
                for task in tasks
            ]

        return self._commit(transform)

    def save(self, draft: TaskDraft) -> List[Task]:
        """Commit a draft: add it when new, otherwise edit the task it was made from."""
        if draft.is_new:
            return self.add(draft.text, draft.category, draft.priority, draft.due_date)
        return self.edit(draft.task_id, draft.text, draft.category, draft.priority, draft.due_date)

    # -------------------- queries --------------------

    def get(self, task_id: int) -> Optional[Task]:
        """Get a task by id, or None."""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def search(self, query: str) -> List[Task]:
        """Tasks whose text contains query, ignoring case."""
        query_lower = query.lower()
        return [task for task in self._tasks if query_lower in task.text.lower()]

    def filter(self, category: Optional[Category] = None, priority: Optional[Priority] = None,
               completed: Optional[bool] = None) -> List[Task]:
        """Tasks matching every given criterion, in list order."""
        return [
            task for task in self._tasks
            if (category is None or task.category == category)
            and (priority is None or task.priority == priority)
            and (completed is None or task.completed == completed)
        ]
