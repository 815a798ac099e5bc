import datetime
import logging
import random
from typing import List, Optional

from todo_app.core.task_manager import TaskManager
from todo_app.models.data_models import Priority, Task, TaskForm

logger = logging.getLogger(__name__)

SAMPLE_TITLES = [
    ("Buy milk", "Semi-skimmed, two bottles"),
    ("Finish quarterly report", "Numbers from finance are in the shared folder"),
    ("Call the dentist", None),
    ("Water the plants", None),
    ("Book train tickets", "Friday evening, return on Sunday"),
    ("Review pull requests", "At least the two oldest ones"),
    ("Renew gym membership", None),
    ("Plan weekend trip", "Check the weather first"),
]


def seed_tasks(task_manager: TaskManager, count: int = 6, rng: Optional[random.Random] = None,
               today: Optional[datetime.date] = None) -> List[Task]:
    """Demo amaçlı sahte task'lar ekle; bazılarını tamamlanmış işaretle."""
    rng = rng or random.Random()
    today = today or datetime.date.today()
    priorities = [Priority.LOW] * 2 + [Priority.MEDIUM] * 3 + [Priority.HIGH] * 1

    created: List[Task] = []
    for i in range(max(0, count)):
        title, description = SAMPLE_TITLES[i % len(SAMPLE_TITLES)]
        if i >= len(SAMPLE_TITLES):
            title = f"{title} ({i // len(SAMPLE_TITLES) + 1})"

        # yaklaşık yarısının son tarihi olsun
        due_date = None
        if rng.random() < 0.5:
            due_date = today + datetime.timedelta(days=rng.randint(0, 14))

        task = task_manager.add_task(TaskForm(
            title=title,
            description=description,
            due_date=due_date,
            priority=rng.choice(priorities),
        ))
        if rng.random() < 0.3:
            task_manager.toggle_task_status(task.id)
        created.append(task)

    logger.info("Seeded %d demo tasks", len(created))
    return created
